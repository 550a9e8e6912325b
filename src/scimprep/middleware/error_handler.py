import time
import traceback
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from pydantic import ValidationError
from scimprep.utils import logger
from scimprep.schemas.error import ErrorResponse
from scimprep.exceptions import SCIMException


def scim_error_response(exc: SCIMException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_error_response().model_dump(by_alias=True, exclude_none=True)
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            response = await call_next(request)
            return response

        except SCIMException as e:
            logger.warning(f"SCIM error: {e.detail}")
            return scim_error_response(e)

        except ValidationError as e:
            # Malformed patch operations and similar payload errors
            logger.warning(f"Validation error: {e}")
            error = ErrorResponse(
                status=400,
                detail="Invalid request body",
                scim_type="invalidValue"
            )
            return JSONResponse(
                status_code=400,
                content=error.model_dump(by_alias=True, exclude_none=True)
            )

        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"Unhandled exception in {request.method} {request.url.path} "
                f"(duration: {duration:.3f}s): {e}\n"
                f"{traceback.format_exc()}"
            )

            # Don't expose internal errors in production
            if hasattr(request.app.state, "settings") and request.app.state.settings.is_production:
                detail = "An internal error occurred"
            else:
                detail = str(e)

            error = ErrorResponse(
                status=500,
                detail=detail
            )
            return JSONResponse(
                status_code=500,
                content=error.model_dump(by_alias=True, exclude_none=True)
            )
