"""
PDF Text Extractor.

Extracts text from PDF files using pypdf library.
"""
import tempfile
import time
from pathlib import Path
from typing import BinaryIO, List, Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from .base import BaseTextExtractor, line_count
from .encoding import normalize_line_endings
from ...core.exceptions import FileOpenError, ParserError
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult
from ...utils.deadline import Deadline

logger = get_logger(__name__)


class PDFExtractor(BaseTextExtractor):
    """Extractor for PDF files."""

    def __init__(self):
        super().__init__("pdf", "PDF")

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a PDF stream.

        Pages are read in order. A page without a content stream, or whose
        text extraction fails, is skipped; the rest of the job continues.

        Raises:
            FileSizeLimitError: If the content exceeds options.max_file_size
            ParserError: If pypdf cannot open the document
        """
        started = time.perf_counter()
        options = self._resolve_options(options)
        deadline = Deadline(options.timeout)

        content = self._read_stream(stream, deadline)
        self._check_size(content, options)

        # Create temporary file for PDF reading
        try:
            with tempfile.NamedTemporaryFile(delete=False, suffix='.pdf') as tmp_file:
                tmp_file.write(content)
                tmp_path = Path(tmp_file.name)
        except OSError as e:
            raise FileOpenError("failed to create temp file", self.file_type, "temp_file", e) from e

        try:
            try:
                reader = PdfReader(tmp_path)
                page_count = len(reader.pages)
            except (PyPdfError, ValueError, OSError) as e:
                raise ParserError("failed to open PDF", self.file_type, "open", e) from e

            page_texts = []
            for page_number in range(page_count):
                deadline.check(self.file_type, "page")
                page_text = self._extract_page(reader, page_number)
                if page_text is not None:
                    page_texts.append(page_text)
        finally:
            # Clean up temp file
            if tmp_path.exists():
                tmp_path.unlink()

        text = "\n\n".join(page_texts)

        if not options.preserve_formatting:
            text = normalize_line_endings(text)

        metadata = {
            "page_count": page_count,
            "size_bytes": len(content),
            "line_count": line_count(text),
            "char_count": len(text),
            "word_count": len(text.split()),
        }
        return self._build_result(text, metadata, started)

    def _extract_page(self, reader: PdfReader, page_number: int) -> Optional[str]:
        """Return the page text, or None when the page is skipped."""
        try:
            page = reader.pages[page_number]
            if page.get_contents() is None:
                logger.debug(f"Skipping PDF page {page_number + 1}: no content stream")
                return None
            fragments = page_fragments(page)
        except Exception as e:
            logger.warning(f"Skipping PDF page {page_number + 1}: {e}", exc_info=True)
            return None
        return "".join(fragments).strip()

    def supported_types(self) -> List[str]:
        return ["pdf"]


def page_fragments(page) -> List[str]:
    """
    Collect a page's positioned text fragments in content-stream order.

    Fragments are returned raw; pypdf already encodes inter-glyph spacing
    in them, so callers concatenate without separators.
    """
    fragments = []

    def visitor(text, cm, tm, font_dict, font_size):
        if text:
            fragments.append(text)

    page.extract_text(visitor_text=visitor)
    return fragments
