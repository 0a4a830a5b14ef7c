"""
Extract Router - Text extraction over HTTP.

Architecture:
- Router handles HTTP request/response only
- ExtractionService picks and runs the extractor
- ExtractorError is mapped to a status code by the gateway's error handlers

Example Usage:
    POST /extract - Upload a file, get its text and metadata
    GET /formats - List supported extensions and MIME types
"""
import dataclasses
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from typing import Optional

from .dependencies import get_extraction_service
from ..api.dto import ExtractResponseDTO, FormatsResponseDTO
from ..api.mappers import result_to_dto
from ..domain.entities import default_extract_options
from ..services.extraction_service import ExtractionService
from ..services.text_extractors import ExtractorFactory
from ..utils.validators import validate_file_type_hint, validate_filename
from ..core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/extract", response_model=ExtractResponseDTO)
def extract_text(
    file: UploadFile = File(...),
    file_type: Optional[str] = Form(None),
    preserve_formatting: Optional[bool] = Form(None),
    max_file_size: Optional[int] = Form(None),
    service: ExtractionService = Depends(get_extraction_service),
):
    """
    Extract plain text and metadata from an uploaded file.

    Form fields override the server defaults:
    - file_type: extension hint (e.g. "csv", "md") that bypasses content sniffing
    - preserve_formatting: keep Markdown syntax
    - max_file_size: size cap in bytes (0 = unlimited)

    Runs in the threadpool because extraction is CPU-bound and synchronous.
    """
    try:
        filename = validate_filename(file.filename)
        hint = validate_file_type_hint(file_type) if file_type else ""
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if max_file_size is not None and max_file_size < 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="max_file_size cannot be negative")

    options = default_extract_options()
    overrides = {"file_type": hint}
    if preserve_formatting is not None:
        overrides["preserve_formatting"] = preserve_formatting
    if max_file_size is not None:
        overrides["max_file_size"] = max_file_size
    options = dataclasses.replace(options, **overrides)

    content = file.file.read()
    logger.info(f"Extract request for {filename} ({len(content)} bytes, file_type='{hint}')")

    result = service.extract_bytes(content, filename, options)
    return result_to_dto(result, filename=filename)


@router.get("/formats", response_model=FormatsResponseDTO)
def list_formats():
    """List supported extensions per extractor and the MIME types used for sniffing."""
    factory = ExtractorFactory()
    return FormatsResponseDTO(
        extensions=factory.get_supported_extensions(),
        mime_types=factory.get_supported_mime_types(),
        formats=factory.get_supported_formats(),
    )
