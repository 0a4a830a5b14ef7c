"""
Base Text Extractor Interface.

All text extractors inherit from this base class and implement
extract() and supported_types().
"""
import os
import time
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Dict, List, Optional

from ...core import config
from ...core.exceptions import FileOpenError, FileSizeLimitError
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult, default_extract_options
from ...utils.deadline import Deadline

logger = get_logger(__name__)


class BaseTextExtractor(ABC):
    """
    Abstract base class for text extractors.

    Each file format has its own extractor class that inherits from this
    base class. Extractors hold no mutable state, so one instance may be
    shared between callers.
    """

    def __init__(self, file_type: str, format_name: str):
        """
        Initialize the extractor.

        Args:
            file_type: Tag written to ExtractResult.file_type (e.g., 'pdf', 'plaintext')
            format_name: Human-readable format name (e.g., 'PDF', 'Plain Text')
        """
        self.file_type = file_type
        self.format_name = format_name

    @abstractmethod
    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a binary stream.

        Args:
            stream: Readable binary stream
            options: Extraction options (defaults to default_extract_options())

        Returns:
            ExtractResult with text and metadata

        Raises:
            ExtractorError: If extraction fails
        """
        pass

    @abstractmethod
    def supported_types(self) -> List[str]:
        """Return supported file extensions, without leading dot."""
        pass

    def extract_from_file(self, file_path: str, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a file path.

        Raises:
            FileOpenError: If the file cannot be opened
            ExtractorError: If extraction fails
        """
        try:
            stream = open(file_path, "rb")
        except OSError as e:
            raise FileOpenError("failed to open file", self.file_type, "open", e) from e

        with stream:
            return self.extract(stream, options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file_type={self.file_type!r})"

    # Helpers shared by concrete extractors

    @staticmethod
    def _resolve_options(options: Optional[ExtractOptions]) -> ExtractOptions:
        return options if options is not None else default_extract_options()

    def _read_stream(self, stream: BinaryIO, deadline: Optional[Deadline] = None) -> bytes:
        """
        Read the whole stream into memory.

        Raises:
            FileOpenError: If the stream fails
            ExtractionTimeoutError: If the deadline passes between chunks
        """
        chunks = []
        while True:
            try:
                chunk = stream.read(config.READ_CHUNK_SIZE)
            except OSError as e:
                raise FileOpenError("failed to read content", self.file_type, "read", e) from e
            if not chunk:
                break
            chunks.append(chunk)
            if deadline is not None:
                deadline.check(self.file_type, "read")
        return b"".join(chunks)

    def _check_size(self, content: bytes, options: ExtractOptions) -> None:
        """
        Enforce options.max_file_size on raw byte length.

        Raises:
            FileSizeLimitError: If the content is larger than the limit
        """
        if options.max_file_size > 0 and len(content) > options.max_file_size:
            logger.warning(
                f"{self.format_name} content rejected: {len(content)} bytes exceeds limit {options.max_file_size}"
            )
            raise FileSizeLimitError(
                f"file size {len(content)} exceeds limit {options.max_file_size}",
                self.file_type,
                "size_check"
            )

    def _build_result(self, text: str, metadata: Dict[str, Any], started: float) -> ExtractResult:
        return ExtractResult(
            text=text,
            file_type=self.file_type,
            metadata=metadata,
            processing_time=time.perf_counter() - started,
        )


def file_base_name(file_path: str) -> str:
    """Return the final path component of file_path."""
    return os.path.basename(file_path)


def line_count(text: str) -> int:
    """Count lines as newlines plus one."""
    return text.count("\n") + 1
