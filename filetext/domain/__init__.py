"""
Domain layer - Extraction options and results.
This layer is independent of parsers and transports.
"""
from .entities import ExtractOptions, ExtractResult, default_extract_options
from .value_objects import MimeType

__all__ = [
    "ExtractOptions",
    "ExtractResult",
    "default_extract_options",
    "MimeType",
]
