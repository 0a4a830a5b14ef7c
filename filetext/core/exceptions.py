"""
Extraction exceptions.

Exception Hierarchy:
    ExtractorError (base)
    ├── FileOpenError
    ├── FileSizeLimitError
    ├── EncodingConversionError
    ├── InvalidContainerError
    ├── MissingPartError
    ├── LegacyFormatError
    ├── UnsupportedMimeTypeError
    ├── UnknownFileTypeError
    ├── ParserError
    └── ExtractionTimeoutError

Every error carries the producing extractor's type tag and the failing
operation so it can be logged without a traceback.
"""
from typing import Optional

__all__ = [
    "ExtractorError",
    "FileOpenError",
    "FileSizeLimitError",
    "EncodingConversionError",
    "InvalidContainerError",
    "MissingPartError",
    "LegacyFormatError",
    "UnsupportedMimeTypeError",
    "UnknownFileTypeError",
    "ParserError",
    "ExtractionTimeoutError",
]


class ExtractorError(Exception):
    """Base exception for all extraction errors."""

    def __init__(
        self,
        message: str,
        file_type: str = "",
        operation: str = "",
        cause: Optional[BaseException] = None
    ):
        self.message = message
        self.file_type = file_type
        self.operation = operation
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message

    def unwrap(self) -> Optional[BaseException]:
        """Return the underlying cause, if any."""
        return self.cause


class FileOpenError(ExtractorError):
    """Path or stream could not be opened or read."""
    pass


class FileSizeLimitError(ExtractorError):
    """Content is larger than the configured maximum."""
    pass


class EncodingConversionError(ExtractorError):
    """Byte content could not be converted to text."""
    pass


class InvalidContainerError(ExtractorError):
    """Content is not a valid ZIP container."""
    pass


class MissingPartError(ExtractorError):
    """A required part is missing from an OOXML container."""
    pass


class LegacyFormatError(ExtractorError):
    """Legacy binary Office formats are not supported."""
    pass


class UnsupportedMimeTypeError(ExtractorError):
    """Detected MIME type has no extractor."""

    def __init__(self, mime_type: str, source: str):
        self.mime_type = mime_type
        self.source = source
        super().__init__(f"unsupported file type {mime_type} for {source}", "", "detect")


class UnknownFileTypeError(ExtractorError):
    """Content could not be classified at all."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"unknown file type for: {source}", "", "detect")


class ParserError(ExtractorError):
    """A delegated parsing library failed."""
    pass


class ExtractionTimeoutError(ExtractorError):
    """Extraction exceeded the configured timeout."""
    pass
