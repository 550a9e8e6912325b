from typing import Any, Dict
from fastapi import APIRouter
from scimprep.schemas import ServiceProviderConfig
from scimprep.services.resource_types import SERVICE_PROVIDER_CONFIG_RESOURCE_TYPE
from scimprep.dependencies import Registry, AttributesFilter, resource_preparer
from scimprep.config import settings

router = APIRouter(tags=["ServiceProviderConfig"])


def build_service_provider_config() -> ServiceProviderConfig:
    return ServiceProviderConfig(
        documentation_uri=settings.documentation_uri,
        patch={
            "supported": settings.patch_supported
        },
        bulk={
            "supported": settings.bulk_supported,
            "maxOperations": settings.bulk_max_operations,
            "maxPayloadSize": settings.bulk_max_payload_size
        },
        filter={
            "supported": settings.filter_supported,
            "maxResults": settings.filter_max_results
        },
        change_password={
            "supported": settings.change_password_supported
        },
        sort={
            "supported": settings.sort_supported
        },
        etag={
            "supported": settings.etag_supported
        },
    )


@router.get(
    "/ServiceProviderConfig",
    name="Get Service Provider Configuration"
)
async def get_service_provider_config(registry: Registry, attributes: AttributesFilter) -> Dict[str, Any]:
    preparer = resource_preparer(registry, SERVICE_PROVIDER_CONFIG_RESOURCE_TYPE, attributes)
    return preparer.trim_retrieved(build_service_provider_config())
