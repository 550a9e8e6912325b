from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from scimprep.config import settings
from scimprep.exceptions import SCIMException
from scimprep.middleware import ErrorHandlerMiddleware, RequestLoggingMiddleware, scim_error_response
from scimprep.api.v2.router import router as v2_router
from scimprep.services import build_default_registry
from scimprep.utils import logger
from scimprep.schemas import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} application...")
    logger.info(
        f"Serving {len(app.state.registry.get_resource_type_definitions())} resource types "
        f"at {settings.scim_base_url}"
    )

    yield

    logger.info(f"Shutting down {settings.app_name} application...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="SCIM 2.0 resource preparation and discovery service",
    version="1.0.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
    lifespan=lifespan,
)

# Add middlewares
app.add_middleware(ErrorHandlerMiddleware)
if settings.debug:
    app.add_middleware(RequestLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["ETag", "Location"],
)

# Include routers
app.include_router(v2_router)

# Store settings and the resource type registry in app state
app.state.settings = settings
app.state.registry = build_default_registry()


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "environment": settings.environment,
        "version": "1.0.0"
    }


@app.exception_handler(SCIMException)
async def scim_exception_handler(request: Request, exc: SCIMException):
    logger.warning(f"SCIM error for {request.method} {request.url.path}: {exc.detail}")
    return scim_error_response(exc)


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    # Status handlers take precedence over class handlers
    if isinstance(exc, SCIMException):
        return await scim_exception_handler(request, exc)
    error = ErrorResponse(
        status=404,
        detail=f"Path {request.url.path} not found"
    )
    return JSONResponse(
        status_code=404,
        content=error.model_dump(by_alias=True, exclude_none=True)
    )


@app.exception_handler(405)
async def method_not_allowed_handler(request: Request, exc):
    error = ErrorResponse(
        status=405,
        detail=f"Method {request.method} not allowed for path {request.url.path}"
    )
    return JSONResponse(
        status_code=405,
        content=error.model_dump(by_alias=True, exclude_none=True)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(
        f"Validation error for {request.method} {request.url.path}\n"
        f"Errors: {exc.errors()}"
    )

    error = ErrorResponse(
        status=400,
        detail="Invalid request",
        scim_type="invalidValue"
    )

    if settings.debug:
        error.detail = "Validation error: " + "; ".join(f"{err['loc']}: {err['msg']}" for err in exc.errors())

    return JSONResponse(
        status_code=400,
        content=error.model_dump(by_alias=True, exclude_none=True)
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "scimprep.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
