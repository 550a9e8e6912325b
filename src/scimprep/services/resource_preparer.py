from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from urllib.parse import quote
from pydantic import BaseModel
from scimprep.schemas import PatchOperation
from scimprep.services.resource_types import ResourceTypeDefinition
from scimprep.utils.attribute_filter import ScimResourceTrimmer
from scimprep.utils.attribute_selector import AttributeSelection, collect_attributes, collect_patch_attributes, parse_query_attributes
from scimprep.utils.logging import get_logger

logger = get_logger(__name__)

Resource = Union[BaseModel, Dict[str, Any]]
PatchOperations = Iterable[Union[PatchOperation, Mapping[str, Any]]]


def as_generic(resource: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
    """Convert a typed resource to the generic attribute tree the trimmer works on."""
    if isinstance(resource, BaseModel):
        return resource.model_dump(by_alias=True, mode="json", exclude_none=True)
    if isinstance(resource, dict):
        return resource
    return dict(resource)


class ResourcePreparer:
    """
    Prepares resources to return to the client. This includes:

    - returning attributes based on the "returned" characteristic of their
      schema definition
    - returning the attributes requested by the client through the request
      body and the 'attributes' or 'excludedAttributes' query parameter
    - setting meta.resourceType and meta.location if not already set

    Raises:
        InvalidValue: If the query parameters contain an invalid attribute path
    """

    def __init__(
        self,
        resource_type: ResourceTypeDefinition,
        attributes: Optional[str] = None,
        excluded_attributes: Optional[str] = None,
        base_uri: Optional[str] = None,
    ):
        self.resource_type = resource_type
        self.base_uri = base_uri
        self.query_attributes, self.excluded = parse_query_attributes(resource_type, attributes, excluded_attributes)

    def trim_retrieved(self, resource: Resource) -> Dict[str, Any]:
        """Trim a resource returned from a search or retrieve operation."""
        return self._trim_returned(resource)

    def trim_retrieved_list(self, resources: Iterable[Resource]) -> List[Dict[str, Any]]:
        return [self._trim_returned(resource) for resource in resources]

    def trim_created(self, resource: Resource, request_resource: Optional[Resource] = None) -> Dict[str, Any]:
        """Trim a resource returned from a create operation."""
        return self._trim_returned(resource, request_resource=request_resource)

    def trim_replaced(self, resource: Resource, request_resource: Optional[Resource] = None) -> Dict[str, Any]:
        """Trim a resource returned from a replace operation."""
        return self._trim_returned(resource, request_resource=request_resource)

    def trim_modified(self, resource: Resource, patch_operations: Optional[PatchOperations] = None) -> Dict[str, Any]:
        """Trim a resource returned from a modify operation."""
        return self._trim_returned(resource, patch_operations=patch_operations)

    def set_resource_type_and_location(self, resource: Dict[str, Any]) -> Dict[str, Any]:
        """Set meta.resourceType and meta.location on the resource if missing."""
        meta = resource.get("meta")
        if not isinstance(meta, dict):
            meta = {}

        if meta.get("resourceType") is None:
            meta["resourceType"] = self.resource_type.name

        if meta.get("location") is None and self.base_uri is not None:
            resource_id = resource.get("id")
            if resource_id is not None:
                meta["location"] = f"{self.base_uri.rstrip('/')}/{quote(str(resource_id), safe=':')}"
            else:
                meta["location"] = self.base_uri

        resource["meta"] = meta
        return resource

    def selection(
        self,
        request_resource: Optional[Resource] = None,
        patch_operations: Optional[PatchOperations] = None,
    ) -> AttributeSelection:
        request_attributes = frozenset()
        if request_resource is not None:
            request_attributes = collect_attributes(as_generic(request_resource))
        if patch_operations is not None:
            request_attributes = collect_patch_attributes(self.resource_type, patch_operations)
        return AttributeSelection(request_attributes, self.query_attributes, self.excluded)

    def _trim_returned(
        self,
        resource: Resource,
        request_resource: Optional[Resource] = None,
        patch_operations: Optional[PatchOperations] = None,
    ) -> Dict[str, Any]:
        selection = self.selection(request_resource, patch_operations)
        generic = self.set_resource_type_and_location(as_generic(resource))
        trimmer = ScimResourceTrimmer.from_selection(self.resource_type, selection)
        trimmed = trimmer.trim_object(generic)
        logger.debug(
            f"Trimmed {self.resource_type.name} '{generic.get('id')}': "
            f"{len(generic)} -> {len(trimmed)} top-level attributes"
        )
        return trimmed


def prepare(
    resource_type: ResourceTypeDefinition,
    attributes: Optional[str] = None,
    excluded_attributes: Optional[str] = None,
    base_uri: Optional[str] = None,
) -> ResourcePreparer:
    return ResourcePreparer(resource_type, attributes, excluded_attributes, base_uri)
