"""
Extraction Service - Selects an extractor and runs it.

Used by both the CLI and the HTTP API. An ExtractOptions.file_type naming a
registered extension bypasses sniffing; otherwise the content decides.
"""
import dataclasses
import io
from typing import Optional

from .text_extractors import BaseTextExtractor, ExtractorFactory, ImageExtractor, sniff_mime_type
from ..core import config
from ..core.exceptions import ExtractorError, UnknownFileTypeError
from ..core.logging_config import get_logger
from ..domain.entities import ExtractOptions, ExtractResult, default_extract_options

logger = get_logger(__name__)


class ExtractionService:
    """
    Service for extracting text from files and uploaded buffers.
    """

    def __init__(self, factory: Optional[ExtractorFactory] = None):
        """
        Initialize extraction service.

        Args:
            factory: Extractor factory (defaults to ExtractorFactory)
        """
        self.factory = factory or ExtractorFactory()

    def select_extractor(self, file_path: str, options: ExtractOptions) -> BaseTextExtractor:
        """
        Pick the extractor for a file: extension override first, then MIME sniffing.

        Raises:
            FileOpenError: If the file cannot be read for sniffing
            UnsupportedMimeTypeError: If the MIME type has no extractor
            UnknownFileTypeError: If the content cannot be classified
        """
        if options.file_type:
            extractor = self.factory.get_extractor_by_extension(options.file_type)
            if extractor is not None:
                logger.debug(f"Using {extractor.format_name} extractor from file type override '{options.file_type}'")
                return extractor
        return self.factory.create_extractor_from_path(file_path)

    def extract_file(self, file_path: str, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a file on disk.

        Raises:
            ExtractorError: If selection or extraction fails
        """
        options = options or default_extract_options()
        try:
            extractor = self.select_extractor(file_path, options)
            logger.debug(f"Extracting text from {file_path} using {extractor.format_name} extractor")
            result = extractor.extract_from_file(file_path, options)
        except ExtractorError as e:
            logger.error(f"Error extracting text from {file_path}: {e} (operation: {e.operation or 'n/a'})")
            raise

        logger.info(
            f"Successfully extracted {result.character_count} characters from {file_path} "
            f"({result.file_type}, {result.processing_time * 1000:.1f} ms)"
        )
        return result

    def extract_bytes(
        self,
        content: bytes,
        filename: str = "",
        options: Optional[ExtractOptions] = None
    ) -> ExtractResult:
        """
        Extract text from an in-memory buffer (e.g. an upload).

        Args:
            content: File content as bytes
            filename: Original file name, used in messages and as the image hint
            options: Extraction options

        Raises:
            ExtractorError: If selection or extraction fails
        """
        options = options or default_extract_options()
        source = filename or "<upload>"
        try:
            extractor = None
            if options.file_type:
                extractor = self.factory.get_extractor_by_extension(options.file_type)
            if extractor is None:
                mime_type = sniff_mime_type(content[:config.SNIFF_BYTES])
                if mime_type is None:
                    raise UnknownFileTypeError(source)
                extractor = self.factory.create_extractor_for_mime(mime_type, source)

            if isinstance(extractor, ImageExtractor) and not options.file_type and filename:
                options = dataclasses.replace(options, file_type=filename)

            result = extractor.extract(io.BytesIO(content), options)
        except ExtractorError as e:
            logger.error(f"Error extracting text from {source}: {e} (operation: {e.operation or 'n/a'})")
            raise

        logger.info(
            f"Successfully extracted {result.character_count} characters from {source} "
            f"({result.file_type}, {result.processing_time * 1000:.1f} ms)"
        )
        return result
