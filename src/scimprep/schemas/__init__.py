from .base import (
    BaseResource,
    ListResponse,
    Meta,
    MultiValuedAttribute,
    Name,
    PatchOperation,
    PatchRequest,
    SCIMSchemaUri,
)
from .user import (
    User,
    EnterpriseUserExtension,
    Manager,
    UserGroup,
)
from .group import (
    Group,
    GroupMember,
)
from .error import (
    ErrorResponse,
)
from .meta import (
    Schema,
    SchemaAttribute,
    SchemaExtensionReference,
    ResourceType,
    ServiceProviderConfig,
    AttributeType,
    Mutability,
    Returned,
    Uniqueness,
)
from .definitions import (
    COMMON_ATTRIBUTES,
    USER_SCHEMA,
    GROUP_SCHEMA,
    ENTERPRISE_USER_SCHEMA,
)

__all__ = [
    # Base
    "BaseResource",
    "ListResponse",
    "Meta",
    "MultiValuedAttribute",
    "Name",
    "PatchOperation",
    "PatchRequest",
    "SCIMSchemaUri",
    # User
    "User",
    "EnterpriseUserExtension",
    "Manager",
    "UserGroup",
    # Group
    "Group",
    "GroupMember",
    # Error
    "ErrorResponse",
    # Meta
    "Schema",
    "SchemaAttribute",
    "SchemaExtensionReference",
    "ResourceType",
    "ServiceProviderConfig",
    "AttributeType",
    "Mutability",
    "Returned",
    "Uniqueness",
    # Definitions
    "COMMON_ATTRIBUTES",
    "USER_SCHEMA",
    "GROUP_SCHEMA",
    "ENTERPRISE_USER_SCHEMA",
]
