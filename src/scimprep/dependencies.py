from typing import Optional, Annotated
from fastapi import Depends, Query, Request
from scimprep.config import settings
from scimprep.services import ResourcePreparer, ResourceTypeRegistry, prepare


def get_registry(request: Request) -> ResourceTypeRegistry:
    return request.app.state.registry


def get_attributes_params(
    attributes: Annotated[Optional[str], Query()] = None,
    excluded_attributes: Annotated[Optional[str], Query(alias="excludedAttributes")] = None,
) -> tuple[Optional[str], Optional[str]]:
    return attributes, excluded_attributes


Registry = Annotated[ResourceTypeRegistry, Depends(get_registry)]
AttributesFilter = Annotated[tuple[Optional[str], Optional[str]], Depends(get_attributes_params)]


def resource_preparer(registry: ResourceTypeRegistry, resource_type: str, attributes: AttributesFilter) -> ResourcePreparer:
    definition = registry.get(resource_type)
    return prepare(
        definition,
        attributes=attributes[0],
        excluded_attributes=attributes[1],
        base_uri=f"{settings.scim_base_url}{definition.endpoint}",
    )
