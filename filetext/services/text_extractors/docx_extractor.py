"""
DOCX Text Extractor.

Extracts text from DOCX files by scanning word/document.xml for paragraphs
and text runs. See ooxml.py for the unsupported XML shapes.
"""
import time
from typing import BinaryIO, List, Optional

from .base import BaseTextExtractor, line_count
from .ooxml import DOCX_DOCUMENT_PART, open_package, read_part, recover_docx_text
from .text_extractor import PlainTextExtractor
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult
from ...utils.deadline import Deadline

logger = get_logger(__name__)


class DOCXExtractor(BaseTextExtractor):
    """Extractor for DOCX files."""

    def __init__(self):
        super().__init__("docx", "DOCX")
        self._plain = PlainTextExtractor()

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a DOCX stream.

        The plain text extractor runs first over the raw bytes for the size
        check and the size/encoding metadata; the recovered document text then
        replaces its text.

        Raises:
            FileSizeLimitError: If the content exceeds options.max_file_size
            InvalidContainerError: If the content is not a ZIP archive
            MissingPartError: If word/document.xml is absent
        """
        started = time.perf_counter()
        options = self._resolve_options(options)
        deadline = Deadline(options.timeout)

        content = self._read_stream(stream, deadline)
        result = self._plain.extract_bytes(content, options)

        with open_package(content, self.file_type) as package:
            xml_content = read_part(package, DOCX_DOCUMENT_PART, self.file_type)
        deadline.check(self.file_type, "read_part")

        text = recover_docx_text(xml_content)
        logger.debug(f"Recovered {len(text)} characters from {DOCX_DOCUMENT_PART}")

        # char_count from the delegate describes the container bytes, not the text
        result.metadata.pop("char_count", None)
        result.metadata["paragraphs"] = line_count(text)
        result.metadata["table_count"] = 0
        result.metadata["characters"] = len(text)
        result.metadata["line_count"] = line_count(text)

        result.text = text
        result.file_type = self.file_type
        result.processing_time = time.perf_counter() - started
        return result

    def supported_types(self) -> List[str]:
        return ["docx"]
