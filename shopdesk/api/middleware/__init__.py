"""API middleware."""

from shopdesk.api.middleware.error_handler import ErrorHandlerMiddleware
from shopdesk.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
