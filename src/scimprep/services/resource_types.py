from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple
from scimprep.schemas import (
    Schema,
    SchemaAttribute,
    SchemaExtensionReference,
    ResourceType,
    COMMON_ATTRIBUTES,
    USER_SCHEMA,
    GROUP_SCHEMA,
    ENTERPRISE_USER_SCHEMA,
)
from scimprep.exceptions import InvalidDefinition, ResourceNotFound
from scimprep.utils.scim_path import Path
from scimprep.utils.logging import get_logger

logger = get_logger(__name__)


class SchemaExtension(NamedTuple):
    schema: Schema
    required: bool = False


class ResourceTypeDefinition:
    """
    Declaration of a resource type including all of its schemas.

    The definition flattens the common, core and extension attributes into a
    single index keyed by normalized ``Path``. It is built once at startup and
    only read afterwards, so it can be shared between requests.
    """

    def __init__(
        self,
        name: str,
        endpoint: str,
        core_schema: Optional[Schema] = None,
        schema_extensions: Iterable[Tuple[Schema, bool]] = (),
        id: Optional[str] = None,
        description: Optional[str] = None,
        discoverable: bool = True,
    ):
        if not name or not name.strip():
            raise InvalidDefinition("name must not be empty")
        if not endpoint or not endpoint.strip():
            raise InvalidDefinition("endpoint must not be empty")

        self._id = id
        self._name = name
        self._description = description
        self._endpoint = endpoint
        self._core_schema = core_schema
        self._schema_extensions = tuple(SchemaExtension(*extension) for extension in schema_extensions)
        self._discoverable = discoverable

        self._schema_ids: Dict[str, str] = {}
        for schema in self.schemas:
            self._schema_ids[schema.id.lower()] = schema.id

        attributes: Dict[Path, SchemaAttribute] = {}
        self._build_attribute_notation_map(attributes, Path.root(), COMMON_ATTRIBUTES)
        if core_schema is not None:
            self._build_attribute_notation_map(attributes, Path.root(), core_schema.attributes)
        # Extensions go last, so an extension attribute wins a path collision
        for extension in self._schema_extensions:
            self._build_attribute_notation_map(attributes, Path.root(extension.schema.id), extension.schema.attributes)
        self._attributes: Mapping[Path, SchemaAttribute] = MappingProxyType(attributes)

        logger.debug(f"Built resource type '{name}' with {len(attributes)} attribute paths")

    def _build_attribute_notation_map(
        self,
        attributes: Dict[Path, SchemaAttribute],
        parent_path: Path,
        definitions: Iterable[SchemaAttribute],
    ) -> None:
        for definition in definitions:
            path = parent_path.attribute(definition.name)
            if path in attributes:
                logger.warning(
                    f"Resource type '{self._name}': attribute '{path}' is declared more than once, "
                    f"the later declaration replaces the earlier one"
                )
            attributes[path] = definition
            if definition.sub_attributes:
                self._build_attribute_notation_map(attributes, path, definition.sub_attributes)

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def core_schema(self) -> Optional[Schema]:
        return self._core_schema

    @property
    def schema_extensions(self) -> Tuple[SchemaExtension, ...]:
        return self._schema_extensions

    @property
    def discoverable(self) -> bool:
        return self._discoverable

    @property
    def attributes(self) -> Mapping[Path, SchemaAttribute]:
        return self._attributes

    @property
    def schemas(self) -> List[Schema]:
        schemas = [self._core_schema] if self._core_schema is not None else []
        schemas.extend(extension.schema for extension in self._schema_extensions)
        return schemas

    def normalize_path(self, path: Path) -> Path:
        """
        Normalize a path by removing the schema URN of core attributes.

        A bare schema URN such as "urn:ietf:params:scim:schemas:core:2.0:User"
        parses with "User" as its first attribute; such paths are re-rooted at
        the schema they name first.
        """
        schema_urn = path.schema_urn
        if schema_urn is None:
            return path

        if not path.is_root():
            first = path.elements[0]
            schema_id = self._schema_ids.get(f"{schema_urn}:{first.attribute}".lower())
            if schema_id is not None and first.value_filter is None:
                path = Path(schema_id, path.elements[1:])
                schema_urn = schema_id

        if self._core_schema is not None and schema_urn.lower() == self._core_schema.id.lower():
            return Path.root().attribute(path)
        return path

    def get_attribute_definition(self, path: Path) -> Optional[SchemaAttribute]:
        """Return the attribute definition for the path, or None if the path is unknown."""
        return self._attributes.get(self.normalize_path(path).without_filters())

    def to_scim_resource(self) -> ResourceType:
        schema_extensions = None
        if self._schema_extensions:
            schema_extensions = [
                SchemaExtensionReference(schema_uri=extension.schema.id, required=extension.required)
                for extension in self._schema_extensions
            ]
        return ResourceType(
            id=self._id or self._name,
            name=self._name,
            description=self._description,
            endpoint=self._endpoint,
            schema_uri=self._core_schema.id if self._core_schema is not None else None,
            schema_extensions=schema_extensions,
        )

    def __repr__(self) -> str:
        return f"ResourceTypeDefinition(name={self._name!r}, endpoint={self._endpoint!r})"


class ResourceTypeRegistry:
    """Resource types known to the server, registered explicitly at startup."""

    def __init__(self, definitions: Iterable[ResourceTypeDefinition] = ()):
        self._definitions: Dict[str, ResourceTypeDefinition] = {}
        for definition in definitions:
            self.register_resource_type(definition)

    def register_resource_type(self, definition: ResourceTypeDefinition) -> ResourceTypeDefinition:
        key = definition.name.lower()
        if key in self._definitions:
            raise InvalidDefinition(f"Resource type '{definition.name}' is already registered")
        self._definitions[key] = definition
        logger.debug(f"Registered resource type '{definition.name}' at {definition.endpoint}")
        return definition

    def get_resource_type_definitions(self) -> Tuple[ResourceTypeDefinition, ...]:
        return tuple(self._definitions.values())

    def get(self, name: str) -> ResourceTypeDefinition:
        definition = self._definitions.get(name.lower())
        if definition is None:
            raise ResourceNotFound("ResourceType", name)
        return definition

    def get_schemas(self) -> List[Schema]:
        schemas: Dict[str, Schema] = {}
        for definition in self._definitions.values():
            for schema in definition.schemas:
                schemas.setdefault(schema.id.lower(), schema)
        return list(schemas.values())

    def get_schema(self, schema_id: str) -> Schema:
        for schema in self.get_schemas():
            if schema.id.lower() == schema_id.lower():
                return schema
        raise ResourceNotFound("Schema", schema_id)


USER_RESOURCE_TYPE = "User"
GROUP_RESOURCE_TYPE = "Group"
RESOURCE_TYPE_RESOURCE_TYPE = "ResourceType"
SCHEMA_RESOURCE_TYPE = "Schema"
SERVICE_PROVIDER_CONFIG_RESOURCE_TYPE = "ServiceProviderConfig"


def build_default_registry() -> ResourceTypeRegistry:
    """Registry with the standard User and Group resource types and the discovery types."""
    return ResourceTypeRegistry([
        ResourceTypeDefinition(
            name=USER_RESOURCE_TYPE,
            endpoint="/Users",
            description="User Account",
            core_schema=USER_SCHEMA,
            schema_extensions=[SchemaExtension(ENTERPRISE_USER_SCHEMA, required=False)],
        ),
        ResourceTypeDefinition(
            name=GROUP_RESOURCE_TYPE,
            endpoint="/Groups",
            description="Group",
            core_schema=GROUP_SCHEMA,
        ),
        ResourceTypeDefinition(
            name=RESOURCE_TYPE_RESOURCE_TYPE,
            endpoint="/ResourceTypes",
            description="Resource types supported by the service provider",
            discoverable=False,
        ),
        ResourceTypeDefinition(
            name=SCHEMA_RESOURCE_TYPE,
            endpoint="/Schemas",
            description="Schemas supported by the service provider",
            discoverable=False,
        ),
        ResourceTypeDefinition(
            name=SERVICE_PROVIDER_CONFIG_RESOURCE_TYPE,
            endpoint="/ServiceProviderConfig",
            description="SCIM 2.0 Service Provider Config",
            discoverable=False,
        ),
    ])
