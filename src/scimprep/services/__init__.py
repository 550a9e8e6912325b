from .resource_types import (
    ResourceTypeDefinition,
    ResourceTypeRegistry,
    SchemaExtension,
    build_default_registry,
)
from .resource_preparer import ResourcePreparer, as_generic, prepare

__all__ = [
    "ResourceTypeDefinition",
    "ResourceTypeRegistry",
    "SchemaExtension",
    "build_default_registry",
    "ResourcePreparer",
    "as_generic",
    "prepare",
]
