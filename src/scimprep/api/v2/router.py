from fastapi import APIRouter
from scimprep.config import settings
from .schemas import router as schemas_router
from .resource_types import router as resource_types_router
from .service_provider_config import router as service_provider_config_router

# Create the main v2 router
router = APIRouter(prefix=settings.api_prefix)

# Include all sub-routers
router.include_router(service_provider_config_router)
router.include_router(schemas_router)
router.include_router(resource_types_router)
