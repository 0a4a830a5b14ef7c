"""
Mappers between domain entities and API DTOs.
"""
from typing import Optional

from .dto import ExtractResponseDTO
from ..domain.entities import ExtractResult


def result_to_dto(result: ExtractResult, filename: Optional[str] = None) -> ExtractResponseDTO:
    """Convert an ExtractResult to its response DTO."""
    data = result.to_dict()
    return ExtractResponseDTO(filename=filename, **data)
