"""
XLSX Text Extractor.

Extracts text from XLSX files using openpyxl library.

Cell text is concatenated with no separator between cells, rows or sheets.
"""
import tempfile
import time
import zipfile
from pathlib import Path
from typing import BinaryIO, List, Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .base import BaseTextExtractor, line_count
from .encoding import normalize_line_endings
from .text_extractor import PlainTextExtractor
from ...core.exceptions import FileOpenError, ParserError
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult
from ...utils.deadline import Deadline

logger = get_logger(__name__)


class XLSXExtractor(BaseTextExtractor):
    """Extractor for XLSX files."""

    def __init__(self):
        super().__init__("xlsx", "XLSX")
        self._plain = PlainTextExtractor()

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from an XLSX stream.

        Raises:
            FileSizeLimitError: If the content exceeds options.max_file_size
            ParserError: If openpyxl cannot load the workbook
        """
        started = time.perf_counter()
        options = self._resolve_options(options)
        deadline = Deadline(options.timeout)

        content = self._read_stream(stream, deadline)
        result = self._plain.extract_bytes(content, options)

        # Create temporary file for workbook loading
        try:
            with tempfile.NamedTemporaryFile(delete=False, suffix='.xlsx') as tmp_file:
                tmp_file.write(content)
                tmp_path = Path(tmp_file.name)
        except OSError as e:
            raise FileOpenError("failed to create temp file", self.file_type, "temp_file", e) from e

        try:
            try:
                workbook = load_workbook(tmp_path, data_only=True)
            except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
                raise ParserError("failed to parse XLSX file", self.file_type, "open", e) from e

            try:
                parts = []
                sheet_count = 0
                total_rows = 0
                total_cells = 0

                for sheet in workbook.worksheets:
                    sheet_count += 1
                    deadline.check(self.file_type, "sheet")
                    for row in sheet.iter_rows():
                        total_rows += 1
                        deadline.check(self.file_type, "row")
                        for cell in row:
                            total_cells += 1
                            cell_text = cell_string(cell.value).strip()
                            if cell_text:
                                parts.append(cell_text)
            finally:
                workbook.close()
        finally:
            # Clean up temp file
            if tmp_path.exists():
                tmp_path.unlink()

        text = "".join(parts)
        if not options.preserve_formatting:
            text = normalize_line_endings(text)

        logger.debug(f"Read {total_cells} cells from {sheet_count} sheets")

        # char_count from the delegate describes the container bytes, not the text
        result.metadata.pop("char_count", None)
        result.metadata["sheets"] = sheet_count
        result.metadata["rows"] = total_rows
        result.metadata["cells"] = total_cells
        result.metadata["character_count"] = len(text)
        result.metadata["line_count"] = line_count(text)

        result.text = text
        result.file_type = self.file_type
        result.processing_time = time.perf_counter() - started
        return result

    def supported_types(self) -> List[str]:
        return ["xlsx"]


def cell_string(value) -> str:
    """Render a cell value as text; empty cells render as ''."""
    if value is None:
        return ""
    return str(value)
