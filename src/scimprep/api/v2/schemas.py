from typing import Any, Dict
from fastapi import APIRouter, Path
from scimprep.schemas import ListResponse, ErrorResponse
from scimprep.services.resource_types import SCHEMA_RESOURCE_TYPE
from scimprep.dependencies import Registry, AttributesFilter, resource_preparer

router = APIRouter(tags=["Schemas"])


@router.get(
    "/Schemas",
    response_model=ListResponse,
    response_model_exclude_none=True,
    name="List Schemas"
)
async def list_schemas(registry: Registry, attributes: AttributesFilter) -> ListResponse:
    preparer = resource_preparer(registry, SCHEMA_RESOURCE_TYPE, attributes)
    resources = preparer.trim_retrieved_list(registry.get_schemas())

    return ListResponse(
        total_results=len(resources),
        Resources=resources,
        start_index=1,
        items_per_page=len(resources)
    )


@router.get(
    "/Schemas/{schema_id}",
    responses={
        404: {"model": ErrorResponse, "description": "Schema not found"}
    },
    name="Get Schema"
)
async def get_schema(
    registry: Registry,
    attributes: AttributesFilter,
    schema_id: str = Path(..., description="Schema ID"),
) -> Dict[str, Any]:
    preparer = resource_preparer(registry, SCHEMA_RESOURCE_TYPE, attributes)
    return preparer.trim_retrieved(registry.get_schema(schema_id))
