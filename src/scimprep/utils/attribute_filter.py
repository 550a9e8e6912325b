"""
SCIM Attribute Filtering Utility

Trims SCIM resources down to the attributes that should be returned to the
client (RFC 7643 Section 7, RFC 7644 Section 3.9).
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, AbstractSet, Any, Callable, Dict, List, Mapping

from scimprep.schemas.meta import Returned
from .attribute_selector import AttributeSelection, child_path
from .scim_path import Path

if TYPE_CHECKING:
    from scimprep.services.resource_types import ResourceTypeDefinition


class ResourceTrimmer(ABC):
    """Copies a resource keeping only the attributes ``should_return`` approves."""

    def trim_object(self, data: Mapping[str, Any], parent_path: Path = Path.root()) -> Dict[str, Any]:
        """
        Trim the attributes of an object.

        Args:
            data: The object to trim, left unmodified
            parent_path: Path of the attributes in the object

        Returns:
            A new dictionary without the removed attributes. Complex and
            multi-valued attributes that end up empty are removed as well.
        """
        result = {}

        for key, value in data.items():
            path = child_path(parent_path, key)

            # Descendants of a removed attribute are never visited
            if not path.is_root() and not self.should_return(path):
                continue

            if isinstance(value, Mapping):
                trimmed = self.trim_object(value, path)
                if trimmed:
                    result[key] = trimmed
            elif isinstance(value, list):
                trimmed_list = self.trim_array(value, path)
                if trimmed_list:
                    result[key] = trimmed_list
            else:
                result[key] = value

        return result

    def trim_array(self, data: List[Any], parent_path: Path) -> List[Any]:
        """Trim the values of a multi-valued attribute, all of which share ``parent_path``."""
        result = []

        for item in data:
            if isinstance(item, Mapping):
                trimmed = self.trim_object(item, parent_path)
                if trimmed:
                    result.append(trimmed)
            elif isinstance(item, list):
                trimmed_list = self.trim_array(item, parent_path)
                if trimmed_list:
                    result.append(trimmed_list)
            else:
                result.append(item)

        return result

    @abstractmethod
    def should_return(self, path: Path) -> bool:
        """Return True to keep the attribute at ``path``."""


class PredicateTrimmer(ResourceTrimmer):
    def __init__(self, predicate: Callable[[Path], bool]):
        self._predicate = predicate

    def should_return(self, path: Path) -> bool:
        return self._predicate(path)


class ScimResourceTrimmer(ResourceTrimmer):
    """
    Trimmer implementing the SCIM rules for returning attributes.

    Each attribute's "returned" characteristic decides first:

    - always: returned regardless of the request
    - never: never returned
    - request: returned only if the client wrote the attribute in the request,
      or, for requests without a body, named it in 'attributes'
    - default: returned unless excluded through 'excludedAttributes', or
      omitted from a non-empty 'attributes' list

    Attributes without a definition are treated as "default".
    """

    def __init__(
        self,
        resource_type: "ResourceTypeDefinition",
        request_attributes: AbstractSet[Path] = frozenset(),
        query_attributes: AbstractSet[Path] = frozenset(),
        excluded: bool = True,
    ):
        self.resource_type = resource_type
        self.request_attributes = request_attributes
        self.query_attributes = query_attributes
        self.excluded = excluded

    @classmethod
    def from_selection(cls, resource_type: "ResourceTypeDefinition", selection: AttributeSelection) -> "ScimResourceTrimmer":
        return cls(resource_type, selection.request_attributes, selection.query_attributes, selection.excluded)

    def should_return(self, path: Path) -> bool:
        definition = self.resource_type.get_attribute_definition(path)
        returned = definition.returned if definition is not None else Returned.DEFAULT

        if returned == Returned.ALWAYS:
            return True
        if returned == Returned.NEVER:
            return False
        if returned == Returned.REQUEST:
            return self._path_contains(self.request_attributes, path) or (
                not self.request_attributes
                and not self.excluded
                and self._path_contains(self.query_attributes, path)
            )

        if self.excluded:
            return not self._path_contains(self.query_attributes, path)
        return not self.query_attributes or self._path_contains(self.query_attributes, path)

    def _path_contains(self, paths: AbstractSet[Path], path: Path) -> bool:
        if path in paths:
            return True

        if not self.excluded:
            # Include name if name.givenName is requested
            for candidate in paths:
                if candidate.size() > path.size() and candidate.sub_path(path.size()) == path:
                    return True

        # Include name.givenName if name is requested. Size zero is the
        # namespace root, i.e. the whole core schema or extension.
        for size in range(path.size() - 1, -1, -1):
            if path.sub_path(size) in paths:
                return True

        return False
