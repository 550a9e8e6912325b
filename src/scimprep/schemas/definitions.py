"""
Standard SCIM schemas (RFC 7643 Sections 3.1, 4 and 8.7).

COMMON_ATTRIBUTES are the attributes every resource carries regardless of its
core schema ("schemas", "id", "externalId", "meta").
"""
from .base import SCIMSchemaUri
from .meta import Schema, SchemaAttribute, AttributeType, Mutability, Returned, Uniqueness


def _meta_attribute(name: str, attribute_type: AttributeType, description: str) -> SchemaAttribute:
    return SchemaAttribute(
        name=name,
        type=attribute_type,
        description=description,
        case_exact=True,
        mutability=Mutability.READ_ONLY,
        returned=Returned.DEFAULT,
    )


COMMON_ATTRIBUTES = [
    SchemaAttribute(
        name="schemas",
        type=AttributeType.REFERENCE,
        multi_valued=True,
        description="The schema URIs that define the attributes present in the resource",
        required=True,
        case_exact=True,
        mutability=Mutability.READ_WRITE,
        returned=Returned.ALWAYS,
        reference_types=["uri"],
    ),
    SchemaAttribute(
        name="id",
        type=AttributeType.STRING,
        description="A unique identifier for a SCIM resource as defined by the service provider",
        required=True,
        case_exact=True,
        mutability=Mutability.READ_ONLY,
        returned=Returned.ALWAYS,
        uniqueness=Uniqueness.SERVER,
    ),
    SchemaAttribute(
        name="externalId",
        type=AttributeType.STRING,
        description="An identifier for the resource as defined by the provisioning client",
        case_exact=True,
        mutability=Mutability.READ_WRITE,
        returned=Returned.DEFAULT,
    ),
    SchemaAttribute(
        name="meta",
        type=AttributeType.COMPLEX,
        description="A complex attribute containing resource metadata",
        mutability=Mutability.READ_ONLY,
        returned=Returned.DEFAULT,
        sub_attributes=[
            _meta_attribute("resourceType", AttributeType.STRING, "The name of the resource type of the resource"),
            _meta_attribute("created", AttributeType.DATETIME, "The date and time the resource was added"),
            _meta_attribute("lastModified", AttributeType.DATETIME, "The most recent date and time the resource was modified"),
            _meta_attribute("location", AttributeType.REFERENCE, "The URI of the resource being returned"),
            _meta_attribute("version", AttributeType.STRING, "The version of the resource being returned"),
        ],
    ),
]


def _multi_valued_sub_attributes(type_values, value_type: AttributeType = AttributeType.STRING):
    return [
        SchemaAttribute(name="value", type=value_type, description="The attribute value"),
        SchemaAttribute(name="display", type=AttributeType.STRING, description="A human-readable name, primarily used for display purposes"),
        SchemaAttribute(name="type", type=AttributeType.STRING, description="A label indicating the attribute's function", canonical_values=type_values),
        SchemaAttribute(name="primary", type=AttributeType.BOOLEAN, description="Indicates the preferred value for this attribute"),
    ]


USER_SCHEMA = Schema(
    id=SCIMSchemaUri.USER.value,
    name="User",
    description="User Account",
    attributes=[
        SchemaAttribute(
            name="userName",
            type=AttributeType.STRING,
            description="Unique identifier for the User",
            required=True,
            uniqueness=Uniqueness.SERVER,
        ),
        SchemaAttribute(
            name="name",
            type=AttributeType.COMPLEX,
            description="The components of the user's real name",
            sub_attributes=[
                SchemaAttribute(name="formatted", type=AttributeType.STRING, description="The full name"),
                SchemaAttribute(name="familyName", type=AttributeType.STRING, description="The family name"),
                SchemaAttribute(name="givenName", type=AttributeType.STRING, description="The given name"),
                SchemaAttribute(name="middleName", type=AttributeType.STRING, description="The middle name(s)"),
                SchemaAttribute(name="honorificPrefix", type=AttributeType.STRING, description="The honorific prefix(es)"),
                SchemaAttribute(name="honorificSuffix", type=AttributeType.STRING, description="The honorific suffix(es)"),
            ],
        ),
        SchemaAttribute(name="displayName", type=AttributeType.STRING, description="The name of the user, suitable for display to end-users"),
        SchemaAttribute(name="nickName", type=AttributeType.STRING, description="The casual way to address the user in real life"),
        SchemaAttribute(
            name="profileUrl",
            type=AttributeType.REFERENCE,
            description="A fully qualified URL pointing to a page representing the user's online profile",
            reference_types=["external"],
        ),
        SchemaAttribute(name="title", type=AttributeType.STRING, description="The user's title, such as Vice President"),
        SchemaAttribute(name="userType", type=AttributeType.STRING, description="Used to identify the relationship between the organization and the user"),
        SchemaAttribute(name="preferredLanguage", type=AttributeType.STRING, description="Indicates the user's preferred written or spoken language"),
        SchemaAttribute(name="locale", type=AttributeType.STRING, description="Used to indicate the User's default location for purposes of localizing items"),
        SchemaAttribute(name="timezone", type=AttributeType.STRING, description="The User's time zone in the 'Olson' time zone database format"),
        SchemaAttribute(name="active", type=AttributeType.BOOLEAN, description="A Boolean value indicating the user's administrative status"),
        SchemaAttribute(
            name="password",
            type=AttributeType.STRING,
            description="The user's cleartext password",
            mutability=Mutability.WRITE_ONLY,
            returned=Returned.NEVER,
        ),
        SchemaAttribute(
            name="emails",
            type=AttributeType.COMPLEX,
            multi_valued=True,
            description="Email addresses for the user",
            sub_attributes=_multi_valued_sub_attributes(["work", "home", "other"]),
        ),
        SchemaAttribute(
            name="phoneNumbers",
            type=AttributeType.COMPLEX,
            multi_valued=True,
            description="Phone numbers for the User",
            sub_attributes=_multi_valued_sub_attributes(["work", "home", "mobile", "fax", "pager", "other"]),
        ),
        SchemaAttribute(
            name="addresses",
            type=AttributeType.COMPLEX,
            multi_valued=True,
            description="A physical mailing address for this User",
            sub_attributes=[
                SchemaAttribute(name="formatted", type=AttributeType.STRING, description="The full mailing address"),
                SchemaAttribute(name="streetAddress", type=AttributeType.STRING, description="The full street address component"),
                SchemaAttribute(name="locality", type=AttributeType.STRING, description="The city or locality component"),
                SchemaAttribute(name="region", type=AttributeType.STRING, description="The state or region component"),
                SchemaAttribute(name="postalCode", type=AttributeType.STRING, description="The zip code or postal code component"),
                SchemaAttribute(name="country", type=AttributeType.STRING, description="The country name component"),
                SchemaAttribute(name="type", type=AttributeType.STRING, description="A label indicating the attribute's function", canonical_values=["work", "home", "other"]),
                SchemaAttribute(name="primary", type=AttributeType.BOOLEAN, description="Indicates the primary mailing address"),
            ],
        ),
        SchemaAttribute(
            name="groups",
            type=AttributeType.COMPLEX,
            multi_valued=True,
            description="A list of groups to which the user belongs",
            mutability=Mutability.READ_ONLY,
            sub_attributes=[
                SchemaAttribute(name="value", type=AttributeType.STRING, description="The identifier of the group", mutability=Mutability.READ_ONLY),
                SchemaAttribute(
                    name="$ref",
                    type=AttributeType.REFERENCE,
                    description="The URI of the group resource",
                    mutability=Mutability.READ_ONLY,
                    reference_types=["Group"],
                ),
                SchemaAttribute(name="display", type=AttributeType.STRING, description="A human-readable name for the group", mutability=Mutability.READ_ONLY),
                SchemaAttribute(
                    name="type",
                    type=AttributeType.STRING,
                    description="A label indicating the relationship between the member and the group",
                    canonical_values=["direct", "indirect"],
                    mutability=Mutability.READ_ONLY,
                ),
            ],
        ),
    ],
)

GROUP_SCHEMA = Schema(
    id=SCIMSchemaUri.GROUP.value,
    name="Group",
    description="Group",
    attributes=[
        SchemaAttribute(
            name="displayName",
            type=AttributeType.STRING,
            description="A human-readable name for the Group",
            required=True,
        ),
        SchemaAttribute(
            name="members",
            type=AttributeType.COMPLEX,
            multi_valued=True,
            description="A list of members of the Group",
            sub_attributes=[
                SchemaAttribute(name="value", type=AttributeType.STRING, description="Identifier of the member", mutability=Mutability.IMMUTABLE),
                SchemaAttribute(
                    name="$ref",
                    type=AttributeType.REFERENCE,
                    description="The URI of the member resource",
                    mutability=Mutability.IMMUTABLE,
                    reference_types=["User", "Group"],
                ),
                SchemaAttribute(
                    name="type",
                    type=AttributeType.STRING,
                    description="The type of member",
                    canonical_values=["User", "Group"],
                    mutability=Mutability.IMMUTABLE,
                ),
                SchemaAttribute(name="display", type=AttributeType.STRING, description="A human-readable name for the member", mutability=Mutability.IMMUTABLE),
            ],
        ),
    ],
)

ENTERPRISE_USER_SCHEMA = Schema(
    id=SCIMSchemaUri.ENTERPRISE_USER.value,
    name="EnterpriseUser",
    description="Enterprise User",
    attributes=[
        SchemaAttribute(name="employeeNumber", type=AttributeType.STRING, description="Numeric or alphanumeric identifier assigned to a person"),
        SchemaAttribute(name="costCenter", type=AttributeType.STRING, description="Identifies the name of a cost center"),
        SchemaAttribute(name="organization", type=AttributeType.STRING, description="Identifies the name of an organization"),
        SchemaAttribute(name="division", type=AttributeType.STRING, description="Identifies the name of a division"),
        SchemaAttribute(name="department", type=AttributeType.STRING, description="Identifies the name of a department"),
        SchemaAttribute(
            name="manager",
            type=AttributeType.COMPLEX,
            description="The User's manager",
            sub_attributes=[
                SchemaAttribute(name="value", type=AttributeType.STRING, description="The id of the SCIM resource representing the User's manager"),
                SchemaAttribute(
                    name="$ref",
                    type=AttributeType.REFERENCE,
                    description="The URI of the SCIM resource representing the User's manager",
                    reference_types=["User"],
                ),
                SchemaAttribute(
                    name="displayName",
                    type=AttributeType.STRING,
                    description="The displayName of the User's manager",
                    mutability=Mutability.READ_ONLY,
                ),
            ],
        ),
    ],
)
