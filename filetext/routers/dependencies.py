"""
Shared dependencies for routers.
Provides service initialization and lookup for dependency injection.
"""
from typing import Optional

from ..services.extraction_service import ExtractionService
from ..core.logging_config import get_logger

logger = get_logger(__name__)

# Global service instances
extraction_service: Optional[ExtractionService] = None


def initialize_services():
    """Initialize services used by the routers."""
    global extraction_service
    if extraction_service is None:
        extraction_service = ExtractionService()
        logger.info("Extraction service initialized")


def get_extraction_service() -> ExtractionService:
    """Get extraction service (dependency injection)."""
    if extraction_service is None:
        raise RuntimeError("Extraction service not initialized")
    return extraction_service
