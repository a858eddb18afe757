"""Tests for organization policy endpoints."""

from unittest.mock import MagicMock

import pytest

from atlassian_cloud.admin.models import Policy, PolicyAttributes, PolicyData, PolicyPage, PolicyResource
from atlassian_cloud.admin.organization_policy import OrganizationPolicyService
from atlassian_cloud.core.exceptions import ErrorKind, ValidationError


@pytest.fixture
def payload() -> PolicyData:
    return PolicyData(
        type="policy",
        attributes=PolicyAttributes(
            type="ip-allowlist",
            name="SDK policy",
            status="enabled",
            resources=[PolicyResource(id="ari:cloud:platform::site/site-1")],
        ),
    )


class TestOrganizationPolicyService:
    """Tests for OrganizationPolicyService."""

    def test_gets(self, connector: MagicMock, prepared_request) -> None:
        """Test listing policies with type and cursor."""
        OrganizationPolicyService(connector).gets("org-1", policy_type="ip-allowlist", cursor="c1")

        connector.new_request.assert_called_once_with(
            "GET", "admin/v1/orgs/org-1/policies?cursor=c1&type=ip-allowlist", None
        )
        connector.call.assert_called_once_with(prepared_request, PolicyPage)

    def test_gets_without_filters(self, connector: MagicMock) -> None:
        """Test listing policies without filters."""
        OrganizationPolicyService(connector).gets("org-1")
        connector.new_request.assert_called_once_with("GET", "admin/v1/orgs/org-1/policies", None)

    def test_get(self, connector: MagicMock, prepared_request) -> None:
        """Test reading one policy."""
        OrganizationPolicyService(connector).get("org-1", "pol-1")

        connector.new_request.assert_called_once_with("GET", "admin/v1/orgs/org-1/policies/pol-1", None)
        connector.call.assert_called_once_with(prepared_request, Policy)

    def test_get_without_policy_id(self, connector: MagicMock) -> None:
        """Test that a missing policy ID is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            OrganizationPolicyService(connector).get("org-1", "")

        assert exc_info.value.kind is ErrorKind.NO_POLICY_ID
        connector.new_request.assert_not_called()

    def test_create(self, connector: MagicMock, payload: PolicyData) -> None:
        """Test creating a policy."""
        OrganizationPolicyService(connector).create("org-1", payload)
        connector.new_request.assert_called_once_with("POST", "admin/v1/orgs/org-1/policies", payload)

    def test_create_without_payload(self, connector: MagicMock) -> None:
        """Test that a payload is required."""
        with pytest.raises(ValidationError) as exc_info:
            OrganizationPolicyService(connector).create("org-1", None)
        assert exc_info.value.kind is ErrorKind.NO_PAYLOAD

    def test_update(self, connector: MagicMock, payload: PolicyData) -> None:
        """Test replacing a policy."""
        OrganizationPolicyService(connector).update("org-1", "pol-1", payload)
        connector.new_request.assert_called_once_with("PUT", "admin/v1/orgs/org-1/policies/pol-1", payload)

    def test_update_without_org(self, connector: MagicMock, payload: PolicyData) -> None:
        """Test that update requires an organization ID."""
        with pytest.raises(ValidationError) as exc_info:
            OrganizationPolicyService(connector).update("", "pol-1", payload)
        assert exc_info.value.kind is ErrorKind.NO_ORGANIZATION_ID

    def test_delete(self, connector: MagicMock, ok_response) -> None:
        """Test deleting a policy returns the envelope only."""
        response = OrganizationPolicyService(connector).delete("org-1", "pol-1")

        connector.new_request.assert_called_once_with("DELETE", "admin/v1/orgs/org-1/policies/pol-1", None)
        assert response is ok_response

    def test_payload_serialization(self, payload: PolicyData) -> None:
        """Test that the policy body uses API field names."""
        assert payload.to_payload() == {
            "type": "policy",
            "attributes": {
                "type": "ip-allowlist",
                "name": "SDK policy",
                "status": "enabled",
                "resources": [{"id": "ari:cloud:platform::site/site-1"}],
            },
        }

    def test_policy_decoding(self) -> None:
        """Test decoding a policy with timestamps."""
        policy = Policy.model_validate(
            {
                "data": {
                    "id": "pol-1",
                    "type": "policy",
                    "attributes": {"name": "p", "createdAt": "2021-05-10T13:02:39.000Z"},
                }
            }
        )
        assert policy.data.attributes.created_at.year == 2021
