"""
Data Transfer Objects (DTOs) for API layer.
Separates API contracts from domain entities.
"""
from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class ExtractResponseDTO(BaseModel):
    """Extraction result DTO for API responses."""
    filename: Optional[str] = None
    text: str
    file_type: str
    metadata: Dict[str, Any]
    processing_time_ms: float


class FormatsResponseDTO(BaseModel):
    """Supported formats DTO."""
    extensions: List[str]
    mime_types: List[str]
    formats: Dict[str, List[str]]


class ErrorResponseDTO(BaseModel):
    """Error response DTO."""
    error: str
    status_code: int
    file_type: Optional[str] = None
    operation: Optional[str] = None
    path: Optional[str] = None
    request_id: Optional[str] = None
