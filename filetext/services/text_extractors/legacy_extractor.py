"""
Legacy Office Extractors.

DOC, XLS and PPT use proprietary binary formats. These extractors never
parse them; both entry points fail with a hint to convert the file to its
Office Open XML equivalent.
"""
import os
from typing import BinaryIO, List, Optional

from .base import BaseTextExtractor, file_base_name
from ...core.exceptions import LegacyFormatError
from ...domain.entities import ExtractOptions, ExtractResult

MODERN_EQUIVALENTS = {
    ".doc": "DOCX",
    ".xls": "XLSX",
    ".ppt": "PPTX",
}


class LegacyOfficeExtractor(BaseTextExtractor):
    """Placeholder extractor for a legacy binary Office format."""

    def __init__(self, legacy_format: str, modern_format: str):
        """
        Args:
            legacy_format: Legacy format label (e.g., 'DOC')
            modern_format: Modern equivalent label (e.g., 'DOCX')
        """
        super().__init__(legacy_format.lower(), legacy_format)
        self.modern_format = modern_format

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Raises:
            LegacyFormatError: Always
        """
        raise LegacyFormatError(
            f"legacy {self.format_name} format is not supported: {self.format_name} files use a proprietary "
            f"binary format that requires specialized libraries. Please convert to {self.modern_format} "
            f"format for text extraction",
            self.file_type,
            "extract"
        )

    def extract_from_file(self, file_path: str, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        The file is not opened.

        Raises:
            LegacyFormatError: Always
        """
        raise LegacyFormatError(
            f"legacy {self.format_name} format is not supported: {file_base_name(file_path)} uses a proprietary "
            f"binary format. Please convert to {self.modern_format} format for text extraction",
            self.file_type,
            "extract"
        )

    def supported_types(self) -> List[str]:
        return [self.file_type]


class LegacyDOCExtractor(LegacyOfficeExtractor):
    """Extractor for DOC (old Word format) files."""

    def __init__(self):
        super().__init__("DOC", "DOCX")


class LegacyXLSExtractor(LegacyOfficeExtractor):
    """Extractor for XLS (old Excel format) files."""

    def __init__(self):
        super().__init__("XLS", "XLSX")


class LegacyPPTExtractor(LegacyOfficeExtractor):
    """Extractor for PPT (old PowerPoint format) files."""

    def __init__(self):
        super().__init__("PPT", "PPTX")


def is_legacy_office_format(file_path: str) -> bool:
    """Check the extension for .doc, .xls or .ppt."""
    return os.path.splitext(file_path)[1].lower() in MODERN_EQUIVALENTS


def get_modern_equivalent(file_path: str) -> str:
    """Return 'DOCX', 'XLSX' or 'PPTX' for a legacy path, else 'unknown'."""
    return MODERN_EQUIVALENTS.get(os.path.splitext(file_path)[1].lower(), "unknown")
