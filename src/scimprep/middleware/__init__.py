from .error_handler import ErrorHandlerMiddleware, scim_error_response
from .request_logger import RequestLoggingMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "RequestLoggingMiddleware",
    "scim_error_response",
]
