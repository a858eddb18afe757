"""Managed-user directory endpoints of an organization."""

from atlassian_cloud.admin.models import GenericActionSuccess, UserProductAccess
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


class OrganizationDirectoryService(ResourceService):
    """Activity, removal and access suspension of managed accounts."""

    provider_name = "admin"

    def _user_path(self, organization_id: str, account_id: str) -> str:
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        return f"admin/v1/orgs/{organization_id}/directory/users/{account_id}"

    def activity(self, organization_id: str, account_id: str) -> tuple[UserProductAccess, ResponseScheme]:
        """Get the last-active dates of a user, per product."""
        path = self._user_path(organization_id, account_id)
        return self._request("GET", f"{path}/last-active-dates", result_type=UserProductAccess)

    def remove(self, organization_id: str, account_id: str) -> ResponseScheme:
        """Remove a user from the organization directory."""
        return self._send("DELETE", self._user_path(organization_id, account_id))

    def suspend(self, organization_id: str, account_id: str) -> tuple[GenericActionSuccess, ResponseScheme]:
        """Suspend a user's access to every product of the organization."""
        path = self._user_path(organization_id, account_id)
        return self._request("POST", f"{path}/suspend-access", result_type=GenericActionSuccess)

    def restore(self, organization_id: str, account_id: str) -> tuple[GenericActionSuccess, ResponseScheme]:
        """Restore a previously suspended user's access."""
        path = self._user_path(organization_id, account_id)
        return self._request("POST", f"{path}/restore-access", result_type=GenericActionSuccess)
