import pytest
from scimprep.schemas import (
    AttributeType,
    Returned,
    Schema,
    SchemaAttribute,
    GROUP_SCHEMA,
)
from scimprep.services import ResourceTypeDefinition, build_default_registry

ENTERPRISE_URN = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def user_type(registry):
    return registry.get("User")


@pytest.fixture
def group_type(registry):
    return registry.get("Group")


@pytest.fixture
def team_type():
    """Group-like resource type whose members are only returned on request."""
    schema = Schema(
        id="urn:example:params:scim:schemas:core:2.0:Team",
        name="Team",
        attributes=[
            SchemaAttribute(name="displayName", type=AttributeType.STRING),
            SchemaAttribute(name="score", type=AttributeType.DECIMAL),
            SchemaAttribute(
                name="members",
                type=AttributeType.COMPLEX,
                multi_valued=True,
                returned=Returned.REQUEST,
                sub_attributes=[
                    SchemaAttribute(name="value", type=AttributeType.STRING),
                    SchemaAttribute(name="display", type=AttributeType.STRING),
                ],
            ),
        ],
    )
    return ResourceTypeDefinition(name="Team", endpoint="/Teams", core_schema=schema)


@pytest.fixture
def sample_user_resource():
    """Sample user resource for testing."""
    return {
        "schemas": [
            "urn:ietf:params:scim:schemas:core:2.0:User",
            ENTERPRISE_URN,
        ],
        "id": "2819c223-7f76-453a-919d-413861904646",
        "externalId": "701984",
        "userName": "bjensen@example.com",
        "name": {
            "formatted": "Ms. Barbara J Jensen, III",
            "familyName": "Jensen",
            "givenName": "Barbara",
            "middleName": "Jane",
            "honorificPrefix": "Ms.",
            "honorificSuffix": "III"
        },
        "displayName": "Babs Jensen",
        "nickName": "Babs",
        "emails": [
            {
                "value": "bjensen@example.com",
                "type": "work",
                "primary": True
            },
            {
                "value": "babs@jensen.org",
                "type": "home"
            }
        ],
        "addresses": [
            {
                "type": "work",
                "streetAddress": "100 Universal City Plaza",
                "locality": "Hollywood",
                "region": "CA",
                "postalCode": "91608",
                "country": "USA",
                "primary": True
            },
            {
                "type": "home",
                "streetAddress": "456 Hollywood Blvd",
                "locality": "Hollywood",
                "region": "CA",
                "postalCode": "91608",
                "country": "USA"
            }
        ],
        "userType": "Employee",
        "title": "Tour Guide",
        "active": True,
        "password": "t1meMa$heen",
        "groups": [
            {
                "value": "e9e30dba-f08f-4109-8486-d5c6a331660a",
                "$ref": "https://example.com/v2/Groups/e9e30dba-f08f-4109-8486-d5c6a331660a",
                "display": "Tour Guides"
            }
        ],
        ENTERPRISE_URN: {
            "employeeNumber": "701984",
            "costCenter": "4130",
            "organization": "Universal Studios",
            "department": "Tour Operations",
            "manager": {
                "value": "26118915-6090-4610-87e4-49d8ca9f808d",
                "displayName": "John Smith"
            }
        },
        "meta": {
            "resourceType": "User",
            "created": "2010-01-23T04:56:22.000Z",
            "lastModified": "2011-05-13T04:42:34.000Z",
            "version": 'W/"3694e05e9dff590"',
            "location": "https://example.com/v2/Users/2819c223-7f76-453a-919d-413861904646"
        }
    }


@pytest.fixture
def sample_group_resource():
    """Sample group resource for testing."""
    return {
        "schemas": [GROUP_SCHEMA.id],
        "id": "e9e30dba-f08f-4109-8486-d5c6a331660a",
        "displayName": "Tour Guides",
        "members": [
            {
                "value": "2819c223-7f76-453a-919d-413861904646",
                "$ref": "https://example.com/v2/Users/2819c223-7f76-453a-919d-413861904646",
                "display": "Babs Jensen"
            },
            {
                "value": "902c246b-6245-4190-8e05-00816be7344a",
                "$ref": "https://example.com/v2/Users/902c246b-6245-4190-8e05-00816be7344a",
                "display": "Mandy Pepperidge"
            }
        ]
    }
