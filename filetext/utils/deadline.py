"""
Cooperative timeout helper.

Extraction is synchronous, so a timeout can only be honoured at the points
where an extractor checks in: between read chunks and at page, sheet, row,
slide and part boundaries.
"""
import time
from typing import Optional

from ..core.exceptions import ExtractionTimeoutError
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class Deadline:
    """Wall-clock deadline started at construction time."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout and timeout > 0 else None
        self._started = time.monotonic()
        self._expires_at = self._started + self.timeout if self.timeout else None

    def expired(self) -> bool:
        return self._expires_at is not None and time.monotonic() >= self._expires_at

    def elapsed(self) -> float:
        return time.monotonic() - self._started

    def check(self, file_type: str, operation: str) -> None:
        """
        Raise if the deadline has passed.

        Raises:
            ExtractionTimeoutError: If the timeout has elapsed
        """
        if self.expired():
            logger.warning(f"{file_type} extraction timed out during {operation} after {self.elapsed():.2f}s")
            raise ExtractionTimeoutError(
                f"extraction exceeded timeout of {self.timeout:g}s during {operation}",
                file_type,
                "timeout"
            )
