"""
PPTX Text Extractor.

Extracts text from PPTX files by scanning every ppt/slides/slideN.xml part
for text runs. Slides follow the archive's directory order.
"""
import time
from typing import BinaryIO, List, Optional

from .base import BaseTextExtractor, line_count
from .ooxml import open_package, read_part, recover_slide_text, slide_part_names
from ...core.logging_config import get_logger
from ...domain.entities import ExtractOptions, ExtractResult
from ...utils.deadline import Deadline

logger = get_logger(__name__)


class PPTXExtractor(BaseTextExtractor):
    """
    Extractor for PPTX files.

    Enforces options.max_file_size on the raw container before opening it,
    like the plain text and PDF extractors.
    """

    def __init__(self):
        super().__init__("pptx", "PPTX")

    def extract(self, stream: BinaryIO, options: Optional[ExtractOptions] = None) -> ExtractResult:
        """
        Extract text from a PPTX stream.

        Each slide part contributes one block; blocks are joined by a blank
        line and slides without text contribute nothing but still count.

        Raises:
            FileSizeLimitError: If the content exceeds options.max_file_size
            InvalidContainerError: If the content is not a ZIP archive
        """
        started = time.perf_counter()
        options = self._resolve_options(options)
        deadline = Deadline(options.timeout)

        content = self._read_stream(stream, deadline)
        self._check_size(content, options)

        blocks = []
        with open_package(content, self.file_type) as package:
            slide_names = slide_part_names(package)
            for name in slide_names:
                deadline.check(self.file_type, "slide")
                slide_text = recover_slide_text(read_part(package, name, self.file_type))
                if slide_text:
                    blocks.append(slide_text)

        text = "\n\n".join(blocks)
        logger.debug(f"Recovered text from {len(blocks)} of {len(slide_names)} slides")

        metadata = {
            "slides": len(slide_names),
            "characters": len(text),
            "line_count": line_count(text),
        }
        return self._build_result(text, metadata, started)

    def supported_types(self) -> List[str]:
        return ["pptx"]
