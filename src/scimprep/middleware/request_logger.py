import time
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from scimprep.utils import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log request and response summaries"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip logging for health checks and docs
        if request.url.path in ["/health", "/docs", "/redoc", "/openapi.json"]:
            return await call_next(request)

        start_time = time.time()

        logger.info(f"→ {request.method} {request.url.path} from {request.client.host if request.client else 'unknown'}")
        if request.url.query:
            logger.debug(f"Query: {request.url.query}")

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(f"← {response.status_code} {request.method} {request.url.path} ({duration:.3f}s)")

        return response
