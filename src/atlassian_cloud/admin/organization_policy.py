"""Organization policy endpoints (data residency, IP allowlists, ...)."""

from atlassian_cloud.admin.models import Policy, PolicyData, PolicyPage
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


class OrganizationPolicyService(ResourceService):
    """CRUD over ``admin/v1/orgs/{organizationId}/policies``."""

    provider_name = "admin"

    def gets(
        self,
        organization_id: str,
        policy_type: str = "",
        cursor: str = "",
    ) -> tuple[PolicyPage, ResponseScheme]:
        """List the policies of an organization.

        Args:
            organization_id: Organization ID
            policy_type: Only return policies of this type
            cursor: Page cursor returned by a previous call

        Returns:
            Tuple of (page of policies, response envelope)
        """
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/policies",
            params={"type": policy_type, "cursor": cursor},
            result_type=PolicyPage,
        )

    def get(self, organization_id: str, policy_id: str) -> tuple[Policy, ResponseScheme]:
        """Get one policy."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(policy_id, ErrorKind.NO_POLICY_ID, "policy_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/policies/{policy_id}",
            result_type=Policy,
        )

    def create(self, organization_id: str, payload: PolicyData) -> tuple[Policy, ResponseScheme]:
        """Create a policy.

        Raises:
            ValidationError: If organization_id or payload is missing
        """
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request(
            "POST",
            f"admin/v1/orgs/{organization_id}/policies",
            payload=payload,
            result_type=Policy,
        )

    def update(self, organization_id: str, policy_id: str, payload: PolicyData) -> tuple[Policy, ResponseScheme]:
        """Replace a policy."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(policy_id, ErrorKind.NO_POLICY_ID, "policy_id")
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request(
            "PUT",
            f"admin/v1/orgs/{organization_id}/policies/{policy_id}",
            payload=payload,
            result_type=Policy,
        )

    def delete(self, organization_id: str, policy_id: str) -> ResponseScheme:
        """Delete a policy."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(policy_id, ErrorKind.NO_POLICY_ID, "policy_id")
        return self._send("DELETE", f"admin/v1/orgs/{organization_id}/policies/{policy_id}")
