"""
Text Extractor Factory.

Maps a sniffed MIME type (or an explicit extension override) to an extractor
through explicit tables, so the mapping can be audited and tested on its own.
"""
from typing import Callable, Dict, List, Optional

from .base import BaseTextExtractor
from .detection import detect_mime_type
from .docx_extractor import DOCXExtractor
from .image_extractor import ImageExtractor
from .legacy_extractor import LegacyDOCExtractor, LegacyPPTExtractor, LegacyXLSExtractor
from .pdf_extractor import PDFExtractor
from .pptx_extractor import PPTXExtractor
from .text_extractor import CSVExtractor, MarkdownExtractor, PlainTextExtractor
from .xlsx_extractor import XLSXExtractor
from ...core.exceptions import UnknownFileTypeError, UnsupportedMimeTypeError
from ...core.logging_config import get_logger

logger = get_logger(__name__)

ExtractorConstructor = Callable[[], BaseTextExtractor]

# Exact MIME matches; any other text/* falls back to plain text
MIME_EXTRACTORS: Dict[str, ExtractorConstructor] = {
    "application/pdf": PDFExtractor,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCXExtractor,
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": XLSXExtractor,
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": PPTXExtractor,
    "application/msword": LegacyDOCExtractor,
    "application/vnd.ms-excel": LegacyXLSExtractor,
    "application/vnd.ms-powerpoint": LegacyPPTExtractor,
    "image/png": ImageExtractor,
    "image/jpeg": ImageExtractor,
    "image/gif": ImageExtractor,
    "image/bmp": ImageExtractor,
    "image/tiff": ImageExtractor,
}

# Extension overrides (ExtractOptions.file_type); the only route to CSV and Markdown
EXTENSION_EXTRACTORS: Dict[str, ExtractorConstructor] = {
    "txt": PlainTextExtractor,
    "yaml": PlainTextExtractor,
    "yml": PlainTextExtractor,
    "json": PlainTextExtractor,
    "xml": PlainTextExtractor,
    "log": PlainTextExtractor,
    "conf": PlainTextExtractor,
    "cfg": PlainTextExtractor,
    "ini": PlainTextExtractor,
    "csv": CSVExtractor,
    "tsv": CSVExtractor,
    "md": MarkdownExtractor,
    "markdown": MarkdownExtractor,
    "docx": DOCXExtractor,
    "pptx": PPTXExtractor,
    "xlsx": XLSXExtractor,
    "pdf": PDFExtractor,
    "doc": LegacyDOCExtractor,
    "xls": LegacyXLSExtractor,
    "ppt": LegacyPPTExtractor,
    "png": ImageExtractor,
    "jpg": ImageExtractor,
    "jpeg": ImageExtractor,
    "gif": ImageExtractor,
    "bmp": ImageExtractor,
    "tiff": ImageExtractor,
}


class ExtractorFactory:
    """
    Factory for text extractors.

    Extractors are stateless, so a fresh instance is returned per call.
    """

    @classmethod
    def create_extractor_from_path(cls, file_path: str) -> BaseTextExtractor:
        """
        Create an extractor from the file's content (not its extension).

        Raises:
            FileOpenError: If the file cannot be read
            UnsupportedMimeTypeError: If the MIME type has no extractor
            UnknownFileTypeError: If the content cannot be classified
        """
        mime_type = detect_mime_type(file_path)
        if mime_type is None:
            logger.warning(f"Unknown file type: {file_path}")
            raise UnknownFileTypeError(file_path)
        return cls.create_extractor_for_mime(mime_type, file_path)

    @classmethod
    def create_extractor_for_mime(cls, mime_type: str, source: str = "") -> BaseTextExtractor:
        """
        Create an extractor for a MIME type.

        Args:
            mime_type: Detected MIME type
            source: Path or name used in error messages

        Raises:
            UnsupportedMimeTypeError: If the MIME type has no extractor
        """
        constructor = MIME_EXTRACTORS.get(mime_type)
        if constructor is None and mime_type.startswith("text/"):
            constructor = PlainTextExtractor
        if constructor is None:
            logger.warning(f"Unsupported file type {mime_type} for {source}")
            raise UnsupportedMimeTypeError(mime_type, source)

        extractor = constructor()
        logger.debug(f"Selected {extractor.format_name} extractor for {mime_type} ({source})")
        return extractor

    @classmethod
    def get_extractor_by_extension(cls, extension: str) -> Optional[BaseTextExtractor]:
        """
        Get extractor by file extension.

        Args:
            extension: File extension (e.g., '.csv', 'md')

        Returns:
            Extractor instance or None if the extension is not registered
        """
        extension = extension.lower().lstrip(".")
        constructor = EXTENSION_EXTRACTORS.get(extension)
        return constructor() if constructor is not None else None

    @classmethod
    def get_supported_extensions(cls) -> List[str]:
        return sorted(EXTENSION_EXTRACTORS.keys())

    @classmethod
    def get_supported_mime_types(cls) -> List[str]:
        return sorted(MIME_EXTRACTORS.keys()) + ["text/*"]

    @classmethod
    def get_supported_formats(cls) -> Dict[str, List[str]]:
        """Map each extractor's format name to its supported extensions."""
        formats: Dict[str, List[str]] = {}
        for constructor in dict.fromkeys(EXTENSION_EXTRACTORS.values()):
            extractor = constructor()
            formats[extractor.format_name] = extractor.supported_types()
        return formats
