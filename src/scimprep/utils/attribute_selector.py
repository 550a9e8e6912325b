"""
Attribute selection for SCIM responses.

Works out which attribute paths a client asked for, either explicitly through
the 'attributes' / 'excludedAttributes' query parameters (RFC 7644 Section
3.9) or implicitly by writing them in a create, replace or patch request.
All functions are pure and return fresh immutable sets.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple, Union

from scimprep.exceptions import InvalidPath, InvalidValue
from scimprep.schemas.base import PatchOperation
from .scim_path import MalformedPath, Path, is_urn
from .logging import get_logger

if TYPE_CHECKING:
    from scimprep.services.resource_types import ResourceTypeDefinition

logger = get_logger(__name__)


@dataclass(frozen=True)
class AttributeSelection:
    """The policy sources that decide attribute visibility for one response."""
    request_attributes: FrozenSet[Path] = frozenset()
    query_attributes: FrozenSet[Path] = frozenset()
    excluded: bool = True


def collect_attributes(node: Any, parent_path: Optional[Path] = None) -> FrozenSet[Path]:
    """
    Collect the paths of all attributes present in a resource document.

    Extension objects keyed by their schema URN at the top level start a new
    namespace; the bare extension path itself is never collected. Neither
    collector ever returns a root path.
    """
    paths: Set[Path] = set()
    _collect(node, Path.root() if parent_path is None else parent_path, paths)
    return frozenset(paths)


def _collect(node: Any, parent_path: Path, paths: Set[Path]) -> None:
    if isinstance(node, Mapping):
        for key, value in node.items():
            path = child_path(parent_path, key)
            if not path.is_root():
                paths.add(path)
            _collect(value, path, paths)
    elif isinstance(node, list):
        # Values of a multi-valued attribute share the attribute's path
        for value in node:
            _collect(value, parent_path, paths)


def child_path(parent_path: Path, key: str) -> Path:
    if parent_path.is_root() and parent_path.schema_urn is None and is_urn(key):
        return Path.root(key)
    return parent_path.attribute(key)


def collect_patch_attributes(
    resource_type: "ResourceTypeDefinition",
    operations: Iterable[Union[PatchOperation, Mapping[str, Any]]],
) -> FrozenSet[Path]:
    """Collect the attribute paths targeted or carried by patch operations."""
    paths: Set[Path] = set()
    for operation in operations:
        if not isinstance(operation, PatchOperation):
            operation = PatchOperation.model_validate(operation)

        path = Path.root()
        if operation.path is not None:
            if not operation.path.strip():
                raise InvalidPath(f"'{operation.path}' is not a valid patch operation path: path is empty")
            try:
                path = resource_type.normalize_path(Path.from_string(operation.path)).without_filters()
            except MalformedPath as e:
                raise InvalidPath(f"'{operation.path}' is not a valid patch operation path: {e.reason}")
            # A whole schema as the target only counts through its value
            if not path.is_root():
                paths.add(path)

        if isinstance(operation.value, (dict, list)):
            _collect(operation.value, path, paths)
    return frozenset(paths)


def split_attribute_list(value: Optional[str]) -> List[str]:
    """Split a comma separated parameter into unique, non-empty tokens in order."""
    if not value:
        return []
    tokens = (token.strip() for token in value.split(","))
    return list(dict.fromkeys(token for token in tokens if token))


def parse_query_attributes(
    resource_type: "ResourceTypeDefinition",
    attributes: Optional[str] = None,
    excluded_attributes: Optional[str] = None,
) -> Tuple[FrozenSet[Path], bool]:
    """
    Resolve the 'attributes' or 'excludedAttributes' query parameter.

    'attributes' takes precedence when both are given. Returns the normalized
    paths and whether they came from 'excludedAttributes'. With neither
    parameter nothing is excluded.

    Raises:
        InvalidValue: If a token is not a valid attribute path
    """
    tokens = split_attribute_list(attributes)
    if tokens:
        parameter, excluded = "attributes", False
    else:
        tokens = split_attribute_list(excluded_attributes)
        if not tokens:
            return frozenset(), True
        parameter, excluded = "excludedAttributes", True

    paths = []
    for token in tokens:
        try:
            path = Path.from_string(token)
        except MalformedPath as e:
            logger.warning(f"Rejected {parameter} value '{token}': {e.reason}")
            raise InvalidValue(f"'{token}' is not a valid value for the {parameter} parameter: {e.reason}")
        paths.append(resource_type.normalize_path(path).without_filters())
    return frozenset(paths), excluded

