"""
Gateway Middleware Module

Custom middleware for request tracing and request logging.
"""
from .request_logging import RequestLoggingMiddleware
from .request_id import RequestIDMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "RequestIDMiddleware",
]
