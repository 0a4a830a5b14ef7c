"""
Mapping from extraction exceptions to HTTP exceptions.
Keeps extractors clean of HTTP concerns.
"""
from fastapi import HTTPException, status

from ..core.exceptions import (
    EncodingConversionError,
    ExtractionTimeoutError,
    ExtractorError,
    FileOpenError,
    FileSizeLimitError,
    InvalidContainerError,
    LegacyFormatError,
    MissingPartError,
    ParserError,
    UnknownFileTypeError,
    UnsupportedMimeTypeError,
)

# Checked in order; first matching class wins
_STATUS_BY_ERROR = [
    (FileSizeLimitError, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE),
    (LegacyFormatError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE),
    (UnsupportedMimeTypeError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE),
    (UnknownFileTypeError, status.HTTP_415_UNSUPPORTED_MEDIA_TYPE),
    (InvalidContainerError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (MissingPartError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ParserError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ExtractionTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (FileOpenError, status.HTTP_400_BAD_REQUEST),
    (EncodingConversionError, status.HTTP_400_BAD_REQUEST),
]


def status_for_extractor_error(e: ExtractorError) -> int:
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(e, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def handle_extractor_exception(e: ExtractorError) -> HTTPException:
    """
    Convert an extraction exception to an HTTP exception.
    """
    return HTTPException(status_code=status_for_extractor_error(e), detail=str(e))
