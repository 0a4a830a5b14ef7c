"""
Plain Text Extractor.

Extracts text from plain text files (TXT, YAML, JSON, logs, ...), plus the
CSV and Markdown specializations that post-process the plain text result.
"""
import io
import time
from typing import BinaryIO, List, Optional

from .base import BaseTextExtractor, line_count
from .encoding import normalize_encoding, normalize_line_endings
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult
from ...utils.deadline import Deadline

logger = get_logger(__name__)


class PlainTextExtractor(BaseTextExtractor):
    """Extractor for plain text files."""

    def __init__(self):
        super().__init__("plaintext", "Plain Text")

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a plain text stream.

        Reads the whole stream, enforces the size limit on the raw bytes,
        then normalizes encoding and (unless preserving formatting) line endings.

        Raises:
            FileOpenError: If the stream cannot be read
            FileSizeLimitError: If the content exceeds options.max_file_size
        """
        started = time.perf_counter()
        options = self._resolve_options(options)
        deadline = Deadline(options.timeout)

        content = self._read_stream(stream, deadline)
        self._check_size(content, options)

        text, encoding = normalize_encoding(content)
        if encoding != "UTF-8":
            logger.debug(f"Decoded {len(content)} bytes as {encoding}")

        if not options.preserve_formatting:
            text = normalize_line_endings(text)

        metadata = {
            "encoding": encoding,
            "size_bytes": len(content),
            "line_count": line_count(text),
            "char_count": len(text),
        }

        return self._build_result(text, metadata, started)

    def extract_bytes(self, content: bytes, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """Run extract() over an in-memory buffer."""
        return self.extract(io.BytesIO(content), options)

    def supported_types(self) -> List[str]:
        return ["txt", "csv", "yaml", "yml", "json", "xml", "md", "markdown", "log", "conf", "cfg", "ini"]


class CSVExtractor(BaseTextExtractor):
    """Extractor for CSV files: plain text plus column and header metadata."""

    def __init__(self):
        super().__init__("csv", "CSV")
        self._plain = PlainTextExtractor()

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        started = time.perf_counter()
        result = self._plain.extract(stream, options)

        lines = result.text.split("\n")
        result.metadata["column_count"] = lines[0].count(",") + 1
        result.metadata["has_header"] = detect_csv_header(lines)

        result.file_type = self.file_type
        result.processing_time = time.perf_counter() - started
        return result

    def supported_types(self) -> List[str]:
        return ["csv", "tsv"]


def count_numeric_fields(row: str) -> int:
    """Count comma-separated fields containing at least one digit."""
    count = 0
    for value in row.split(","):
        value = value.strip()
        if value and any(char in "0123456789" for char in value):
            count += 1
    return count


def detect_csv_header(lines: List[str]) -> bool:
    """
    Guess whether the first row is a header.

    A header row carries strictly fewer digit-bearing fields than the row after it.
    """
    if len(lines) < 2:
        return False
    return count_numeric_fields(lines[0]) < count_numeric_fields(lines[1])


class MarkdownExtractor(BaseTextExtractor):
    """
    Extractor for Markdown files.

    Strips emphasis, code, heading and list markers unless formatting is
    preserved, and reports heading and link counts.
    """

    def __init__(self):
        super().__init__("markdown", "Markdown")
        self._plain = PlainTextExtractor()

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        started = time.perf_counter()
        options = self._resolve_options(options)
        result = self._plain.extract(stream, options)

        if not options.preserve_formatting:
            result.text = strip_markdown_syntax(result.text)

        result.metadata["heading_count"] = count_headings(result.text)
        result.metadata["link_count"] = count_links(result.text)

        result.file_type = self.file_type
        result.processing_time = time.perf_counter() - started
        return result

    def supported_types(self) -> List[str]:
        return ["md", "markdown"]


def strip_markdown_syntax(text: str) -> str:
    """Remove common Markdown markers line by line."""
    clean_lines = []
    for line in text.split("\n"):
        # Heading markers
        line = line.lstrip("# ")

        # Bold, italic and code markers
        for marker in ("**", "__", "*", "_", "`"):
            line = line.replace(marker, "")

        # List markers
        line = line.lstrip("-+ ")

        clean_lines.append(line)
    return "\n".join(clean_lines)


def count_headings(text: str) -> int:
    return sum(1 for line in text.split("\n") if line.strip().startswith("#"))


def count_links(text: str) -> int:
    """
    Count [text](url) sequences with a single-pass bracket/paren scan.

    Not a parser: nested or malformed brackets are not handled specially.
    """
    count = 0
    in_link = False
    in_url = False

    for i, char in enumerate(text):
        if char == "[":
            if not in_link and not in_url:
                in_link = True
        elif char == "]":
            if in_link and i + 1 < len(text) and text[i + 1] == "(":
                in_link = False
                in_url = True
        elif char == ")":
            if in_url:
                in_url = False
                count += 1

    return count
