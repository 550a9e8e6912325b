"""
Tests for SCIM attribute filtering according to RFC 7643 Section 7 and
RFC 7644 Section 3.9.
"""
import copy
import pytest
from scimprep.utils.attribute_filter import PredicateTrimmer, ScimResourceTrimmer
from scimprep.utils.attribute_selector import collect_attributes, parse_query_attributes
from scimprep.utils.scim_path import Path

ENTERPRISE_URN = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
USER_URN = "urn:ietf:params:scim:schemas:core:2.0:User"


def trim(resource_type, resource, attributes=None, excluded_attributes=None, request=None):
    query_attributes, excluded = parse_query_attributes(resource_type, attributes, excluded_attributes)
    request_attributes = collect_attributes(request) if request is not None else frozenset()
    trimmer = ScimResourceTrimmer(resource_type, request_attributes, query_attributes, excluded)
    return trimmer.trim_object(resource)


class TestScimResourceTrimmer:
    """Test cases for SCIM attribute filtering."""

    def test_no_filtering(self, user_type, sample_user_resource):
        """Without parameters everything but never-returned attributes is kept."""
        result = trim(user_type, sample_user_resource)

        expected = dict(sample_user_resource)
        del expected["password"]
        assert result == expected

    def test_never_returned_attributes(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, attributes="password")
        assert result == {
            "schemas": sample_user_resource["schemas"],
            "id": sample_user_resource["id"],
        }

        result = trim(user_type, sample_user_resource, request={"password": "new"})
        assert "password" not in result

    def test_always_returned_attributes(self, user_type, sample_user_resource):
        """Test that always-returned attributes are never excluded."""
        result = trim(user_type, sample_user_resource, excluded_attributes="schemas,id")

        assert result["schemas"] == sample_user_resource["schemas"]
        assert result["id"] == sample_user_resource["id"]

    def test_attributes_simple(self, user_type, sample_user_resource):
        """Test filtering with simple attributes."""
        result = trim(user_type, sample_user_resource, attributes="userName,displayName")

        assert result == {
            "schemas": sample_user_resource["schemas"],
            "id": sample_user_resource["id"],
            "userName": "bjensen@example.com",
            "displayName": "Babs Jensen",
        }

    def test_attributes_nested(self, user_type, sample_user_resource):
        """Requesting a sub-attribute returns its parent with only that sub-attribute."""
        result = trim(user_type, sample_user_resource, attributes="name.givenName,name.familyName")

        assert result["name"] == {"givenName": "Barbara", "familyName": "Jensen"}
        assert "userName" not in result

    def test_attributes_parent_includes_sub_attributes(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, attributes="name")
        assert result["name"] == sample_user_resource["name"]

    def test_attributes_multi_valued(self, user_type, sample_user_resource):
        """Test filtering with multi-valued attributes."""
        result = trim(user_type, sample_user_resource, attributes="emails.value,emails.type")

        assert result["emails"] == [
            {"value": "bjensen@example.com", "type": "work"},
            {"value": "babs@jensen.org", "type": "home"},
        ]

    def test_excluded_attributes_simple(self, user_type, sample_user_resource):
        """Test filtering with simple excluded attributes."""
        result = trim(user_type, sample_user_resource, excluded_attributes="active,groups")

        assert "userName" in result
        assert "emails" in result
        assert "active" not in result
        assert "groups" not in result

    def test_excluded_child_keeps_parent_and_siblings(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, excluded_attributes="name.middleName")

        expected_name = dict(sample_user_resource["name"])
        del expected_name["middleName"]
        assert result["name"] == expected_name
        assert result["userName"] == "bjensen@example.com"

    def test_excluded_attributes_multi_valued(self, user_type, sample_user_resource):
        """Test filtering with excluded multi-valued sub-attributes."""
        result = trim(user_type, sample_user_resource, excluded_attributes="addresses.streetAddress,addresses.postalCode")

        assert len(result["addresses"]) == 2
        for address in result["addresses"]:
            assert "streetAddress" not in address
            assert "postalCode" not in address
            assert "locality" in address

    def test_case_insensitive_attributes(self, user_type, sample_user_resource):
        """Test that attribute names are case-insensitive."""
        result = trim(user_type, sample_user_resource, attributes="USERNAME,DisplayName,name.GivenName")

        assert result["userName"] == "bjensen@example.com"
        assert result["displayName"] == "Babs Jensen"
        assert result["name"] == {"givenName": "Barbara"}

    def test_extension_attributes(self, user_type, sample_user_resource):
        """Test filtering with extension schemas."""
        result = trim(
            user_type,
            sample_user_resource,
            attributes=f"userName,{ENTERPRISE_URN}:employeeNumber,{ENTERPRISE_URN}:department"
        )

        assert result["userName"] == "bjensen@example.com"
        assert result[ENTERPRISE_URN] == {"employeeNumber": "701984", "department": "Tour Operations"}

    def test_entire_extension(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, attributes=ENTERPRISE_URN)

        assert result[ENTERPRISE_URN] == sample_user_resource[ENTERPRISE_URN]
        assert "userName" not in result

    def test_entire_core_schema(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, attributes=USER_URN)

        assert result["userName"] == "bjensen@example.com"
        assert result["name"] == sample_user_resource["name"]
        assert ENTERPRISE_URN not in result
        assert result["externalId"] == "701984"

    def test_excluded_extension(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, excluded_attributes=ENTERPRISE_URN)

        assert ENTERPRISE_URN not in result
        assert result["userName"] == "bjensen@example.com"

    def test_fully_qualified_core_attribute(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, attributes=f"{USER_URN}:name.familyName")
        assert result["name"] == {"familyName": "Jensen"}

    def test_empty_containers_are_removed(self, user_type):
        resource = {
            "id": "123",
            "userName": "test",
            "name": {},
            "emails": [],
            "phoneNumbers": [{}, []],
        }

        assert trim(user_type, resource) == {"id": "123", "userName": "test"}

    def test_emptied_containers_are_removed(self, user_type, sample_user_resource):
        result = trim(user_type, sample_user_resource, attributes="emails.display")
        assert "emails" not in result

    def test_unknown_attributes_are_default(self, user_type):
        resource = {"id": "123", "favoriteColor": "blue"}

        assert trim(user_type, resource) == resource
        assert trim(user_type, resource, attributes="userName") == {"id": "123"}
        assert trim(user_type, resource, attributes="favoriteColor") == resource

    def test_input_is_not_modified(self, user_type, sample_user_resource):
        original = copy.deepcopy(sample_user_resource)
        trim(user_type, sample_user_resource, attributes="name.givenName")
        assert sample_user_resource == original

    @pytest.mark.parametrize("params", [
        {},
        {"attributes": "name.givenName,emails"},
        {"excluded_attributes": "name.middleName,groups"},
        {"attributes": ENTERPRISE_URN},
    ])
    def test_trimming_is_idempotent(self, user_type, sample_user_resource, params):
        once = trim(user_type, sample_user_resource, **params)
        assert trim(user_type, once, **params) == once

    def test_allow_list_example(self, user_type):
        resource = {"userName": "bob", "password": "x", "id": "1"}
        assert trim(user_type, resource, attributes="userName") == {"userName": "bob", "id": "1"}

    def test_deny_list_example(self, user_type):
        resource = {"userName": "bob", "password": "x", "id": "1"}
        assert trim(user_type, resource, excluded_attributes="password") == {"userName": "bob", "id": "1"}


class TestRequestReturnedAttributes:
    """Attributes with returned=request are only sent back when asked for."""

    @pytest.fixture
    def team(self):
        return {
            "id": "1",
            "displayName": "Team A",
            "members": [{"value": "u1", "display": "Babs"}],
        }

    def test_absent_from_request(self, team_type, team):
        result = trim(team_type, team, request={"displayName": "Team A"})
        assert result == {"id": "1", "displayName": "Team A"}

    def test_present_in_request(self, team_type, team):
        result = trim(team_type, team, request={"members": [{"value": "u1"}]})
        assert result["members"] == team["members"]

    def test_requested_through_attributes(self, team_type, team):
        result = trim(team_type, team, attributes="members")
        assert result == {"id": "1", "members": team["members"]}

    def test_not_requested(self, team_type, team):
        assert trim(team_type, team) == {"id": "1", "displayName": "Team A"}
        assert trim(team_type, team, excluded_attributes="displayName") == {"id": "1"}

    def test_request_body_takes_precedence(self, team_type, team):
        result = trim(team_type, team, attributes="members", request={"displayName": "Team A"})
        assert "members" not in result


class TestPredicateTrimmer:
    """Test cases for trimming with an arbitrary predicate."""

    def test_predicate(self):
        trimmer = PredicateTrimmer(lambda path: path.size() < 2)
        result = trimmer.trim_object({"name": {"givenName": "Barbara"}, "userName": "bjensen"})
        assert result == {"userName": "bjensen"}

    def test_descendants_of_removed_attributes_are_not_visited(self):
        visited = []

        def predicate(path):
            visited.append(str(path))
            return str(path) != "name"

        PredicateTrimmer(predicate).trim_object({"name": {"givenName": "Barbara"}, "title": "Guide"})
        assert visited == ["name", "title"]

    def test_extension_roots_are_not_checked(self):
        visited = []

        def predicate(path):
            visited.append(path)
            return True

        resource = {ENTERPRISE_URN: {"department": "Tour Operations"}}
        assert PredicateTrimmer(predicate).trim_object(resource) == resource
        assert visited == [Path.root(ENTERPRISE_URN).attribute("department")]

    def test_trim_array(self):
        trimmer = PredicateTrimmer(lambda path: path.elements[-1].attribute != "display")
        result = trimmer.trim_array(
            [{"value": "a", "display": "A"}, {"display": "B"}, "scalar", []],
            Path.from_string("emails")
        )
        assert result == [{"value": "a"}, "scalar"]
