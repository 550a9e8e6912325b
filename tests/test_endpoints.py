import pytest
from httpx import ASGITransport, AsyncClient
from scimprep.main import app
from scimprep.config import settings

USER_URN = "urn:ietf:params:scim:schemas:core:2.0:User"
ERROR_URN = "urn:ietf:params:scim:api:messages:2.0:Error"


@pytest.mark.asyncio
async def test_health_endpoint():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == settings.environment


@pytest.mark.asyncio
async def test_resource_types_endpoint():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/ResourceTypes")
        assert response.status_code == 200
        data = response.json()
        assert data["totalResults"] == 2
        assert [resource["name"] for resource in data["Resources"]] == ["User", "Group"]

        user = data["Resources"][0]
        assert user["schema"] == USER_URN
        assert user["meta"] == {
            "resourceType": "ResourceType",
            "location": f"{settings.scim_base_url}/ResourceTypes/User",
        }


@pytest.mark.asyncio
async def test_resource_types_attributes():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/ResourceTypes", params={"attributes": "name"})
        assert response.status_code == 200
        for resource in response.json()["Resources"]:
            assert set(resource) == {"schemas", "id", "name"}


@pytest.mark.asyncio
async def test_resource_type():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/ResourceTypes/group")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "Group"
        assert data["endpoint"] == "/Groups"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["Schema", "ServiceProviderConfig", "Device"])
async def test_resource_type_not_found(name):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/ResourceTypes/{name}")
        assert response.status_code == 404
        data = response.json()
        assert data["schemas"] == [ERROR_URN]
        assert data["status"] == 404
        assert name in data["detail"]


@pytest.mark.asyncio
async def test_schemas_endpoint():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/Schemas")
        assert response.status_code == 200
        data = response.json()
        assert "schemas" in data
        assert data["totalResults"] == 3  # User, Enterprise User, Group


@pytest.mark.asyncio
async def test_user_schema():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/Schemas/{USER_URN}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == USER_URN
        assert data["name"] == "User"
        assert "attributes" in data
        assert data["meta"]["location"] == f"{settings.scim_base_url}/Schemas/{USER_URN}"


@pytest.mark.asyncio
async def test_user_schema_excluded_attributes():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(
            f"{settings.api_prefix}/Schemas/{USER_URN}",
            params={"excludedAttributes": "attributes,meta"}
        )
        assert response.status_code == 200
        assert set(response.json()) == {"schemas", "id", "name", "description"}


@pytest.mark.asyncio
async def test_unknown_schema():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/Schemas/urn:example:params:scim:schemas:core:2.0:Device")
        assert response.status_code == 404
        assert response.json()["schemas"] == [ERROR_URN]


@pytest.mark.asyncio
async def test_invalid_attributes_parameter():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/Schemas", params={"attributes": "name."})
        assert response.status_code == 400
        data = response.json()
        assert data["scimType"] == "invalidValue"
        assert data["detail"].startswith("'name.' is not a valid value for the attributes parameter")


@pytest.mark.asyncio
async def test_unknown_path():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/Devices")
        assert response.status_code == 404
        assert response.json()["status"] == 404


@pytest.mark.asyncio
async def test_service_provider_config():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/ServiceProviderConfig")
        assert response.status_code == 200
        data = response.json()
        assert data["schemas"] == ["urn:ietf:params:scim:schemas:core:2.0:ServiceProviderConfig"]
        assert data["patch"]["supported"] is settings.patch_supported
        assert data["bulk"] == {
            "supported": settings.bulk_supported,
            "maxOperations": settings.bulk_max_operations,
            "maxPayloadSize": settings.bulk_max_payload_size,
        }
        assert data["filter"]["maxResults"] == settings.filter_max_results
        assert data["meta"] == {
            "resourceType": "ServiceProviderConfig",
            "location": f"{settings.scim_base_url}/ServiceProviderConfig",
        }


@pytest.mark.asyncio
async def test_service_provider_config_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "patch_supported", True)
    monkeypatch.setattr(settings, "documentation_uri", "https://example.com/scim/docs")

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(f"{settings.api_prefix}/ServiceProviderConfig")
        data = response.json()
        assert data["patch"]["supported"] is True
        assert data["documentationUri"] == "https://example.com/scim/docs"


@pytest.mark.asyncio
async def test_service_provider_config_attributes():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get(
            f"{settings.api_prefix}/ServiceProviderConfig",
            params={"attributes": "patch,filter.maxResults"}
        )
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"schemas", "patch", "filter"}
        assert data["filter"] == {"maxResults": settings.filter_max_results}
