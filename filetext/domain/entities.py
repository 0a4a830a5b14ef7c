"""
Domain entities - Extraction options and results.
These are plain data objects, independent of any parser or transport.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from ..core import config


@dataclass(frozen=True)
class ExtractOptions:
    """
    Per-call extraction configuration.

    Options are immutable; an extractor that needs a derived value
    (the image file name hint) works on its own copy made with dataclasses.replace.
    """
    file_type: str = ""  # extension override, also read as the image "sample" hint
    ocr_language: str = "eng"  # reserved
    max_file_size: int = 0  # bytes, 0 = unlimited
    timeout: float = 0.0  # seconds, 0 = unlimited
    preserve_formatting: bool = False


@dataclass
class ExtractResult:
    """
    Result of a single extraction call.

    metadata is always present; keys vary per extractor.
    """
    text: str
    file_type: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    processing_time: float = 0.0  # seconds

    @property
    def character_count(self) -> int:
        """Number of characters in extracted text."""
        return len(self.text)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "text": self.text,
            "file_type": self.file_type,
            "metadata": dict(self.metadata),
            "processing_time_ms": round(self.processing_time * 1000, 3),
        }


def default_extract_options() -> ExtractOptions:
    """Default options: 100MB cap, 30s timeout, English OCR hint, no formatting preservation."""
    return ExtractOptions(
        ocr_language=config.OCR_LANGUAGE,
        max_file_size=config.MAX_FILE_SIZE,
        timeout=config.EXTRACT_TIMEOUT,
        preserve_formatting=config.PRESERVE_FORMATTING,
    )
