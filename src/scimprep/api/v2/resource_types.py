from typing import Any, Dict
from fastapi import APIRouter, Path
from scimprep.schemas import ListResponse, ErrorResponse
from scimprep.services.resource_types import RESOURCE_TYPE_RESOURCE_TYPE
from scimprep.dependencies import Registry, AttributesFilter, resource_preparer
from scimprep.exceptions import ResourceNotFound
from scimprep.utils import logger

router = APIRouter(tags=["ResourceTypes"])


@router.get(
    "/ResourceTypes",
    response_model=ListResponse,
    response_model_exclude_none=True,
    name="List Resource Types"
)
async def list_resource_types(registry: Registry, attributes: AttributesFilter) -> ListResponse:
    """List all discoverable resource types"""
    preparer = resource_preparer(registry, RESOURCE_TYPE_RESOURCE_TYPE, attributes)
    resources = preparer.trim_retrieved_list(
        definition.to_scim_resource()
        for definition in registry.get_resource_type_definitions()
        if definition.discoverable
    )
    logger.debug(f"Listing {len(resources)} resource types")

    return ListResponse(
        total_results=len(resources),
        Resources=resources,
        start_index=1,
        items_per_page=len(resources)
    )


@router.get(
    "/ResourceTypes/{resource_type_id}",
    responses={
        404: {"model": ErrorResponse, "description": "ResourceType not found"}
    },
    name="Get Resource Type"
)
async def get_resource_type(
    registry: Registry,
    attributes: AttributesFilter,
    resource_type_id: str = Path(..., description="ResourceType ID"),
) -> Dict[str, Any]:
    """Get a specific resource type by ID"""
    preparer = resource_preparer(registry, RESOURCE_TYPE_RESOURCE_TYPE, attributes)
    definition = registry.get(resource_type_id)
    if not definition.discoverable:
        raise ResourceNotFound("ResourceType", resource_type_id)

    return preparer.trim_retrieved(definition.to_scim_resource())
