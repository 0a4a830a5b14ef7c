"""
Text Extractors Module - One extractor per file format.

Every extractor implements the same contract (BaseTextExtractor):
extract(stream, options), extract_from_file(path, options) and
supported_types(). ExtractorFactory selects one from sniffed content.

To add support for a new file format:
1. Create a new extractor class inheriting from BaseTextExtractor
2. Implement extract() and supported_types()
3. Add it to the MIME and/or extension tables in factory.py

Example:
    class RTFExtractor(BaseTextExtractor):
        def __init__(self):
            super().__init__("rtf", "RTF")

        def extract(self, stream, options=None) -> ExtractResult:
            # Implementation here
            pass
"""
from .base import BaseTextExtractor
from .encoding import normalize_encoding, normalize_line_endings
from .text_extractor import PlainTextExtractor, CSVExtractor, MarkdownExtractor
from .docx_extractor import DOCXExtractor
from .pptx_extractor import PPTXExtractor
from .xlsx_extractor import XLSXExtractor
from .pdf_extractor import PDFExtractor
from .legacy_extractor import (
    LegacyDOCExtractor,
    LegacyXLSExtractor,
    LegacyPPTExtractor,
    is_legacy_office_format,
    get_modern_equivalent,
)
from .image_extractor import ImageExtractor
from .detection import detect_mime_type, sniff_mime_type
from .factory import ExtractorFactory

__all__ = [
    "BaseTextExtractor",
    "normalize_encoding",
    "normalize_line_endings",
    "PlainTextExtractor",
    "CSVExtractor",
    "MarkdownExtractor",
    "DOCXExtractor",
    "PPTXExtractor",
    "XLSXExtractor",
    "PDFExtractor",
    "LegacyDOCExtractor",
    "LegacyXLSExtractor",
    "LegacyPPTExtractor",
    "is_legacy_office_format",
    "get_modern_equivalent",
    "ImageExtractor",
    "detect_mime_type",
    "sniff_mime_type",
    "ExtractorFactory",
]
