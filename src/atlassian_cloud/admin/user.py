"""User management endpoints (``users/{accountId}/manage``).

These endpoints act on managed accounts and are authorized with an
organization API key sent as a bearer token.
"""

from typing import Any

from atlassian_cloud.admin.models import (
    AdminUser,
    AdminUserPermission,
    AdminUserUpdate,
    DisableUserPayload,
)
from atlassian_cloud.admin.user_token import UserTokenService
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


class UserService(ResourceService):
    """Profile, permission and lifecycle operations on a managed account.

    Attributes:
        token: API token endpoints of the account
    """

    provider_name = "admin"

    def __init__(self, connector: Connector) -> None:
        super().__init__(connector)
        self.token = UserTokenService(connector)

    def permissions(
        self,
        account_id: str,
        privileges: list[str] | None = None,
    ) -> tuple[AdminUserPermission, ResponseScheme]:
        """Get what the caller may do with an account.

        Args:
            account_id: Atlassian account ID
            privileges: Restrict the answer to these privileges

        Returns:
            Tuple of (permission grants, response envelope)
        """
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        return self._request(
            "GET",
            f"users/{account_id}/manage",
            params={"privileges": privileges},
            result_type=AdminUserPermission,
        )

    def get(self, account_id: str) -> tuple[AdminUser, ResponseScheme]:
        """Get the profile of an account."""
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        return self._request("GET", f"users/{account_id}/manage/profile", result_type=AdminUser)

    def update(
        self,
        account_id: str,
        payload: AdminUserUpdate | dict[str, Any],
    ) -> tuple[AdminUser, ResponseScheme]:
        """Update profile fields of an account.

        Args:
            account_id: Atlassian account ID
            payload: Fields to change

        Returns:
            Tuple of (updated profile, response envelope)

        Raises:
            ValidationError: If account_id or payload is missing
        """
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request(
            "PATCH",
            f"users/{account_id}/manage/profile",
            payload=payload,
            result_type=AdminUser,
        )

    def disable(self, account_id: str, message: str = "") -> ResponseScheme:
        """Disable an account, optionally telling the user why."""
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        payload = DisableUserPayload(message=message) if message else None
        return self._send("POST", f"users/{account_id}/manage/lifecycle/disable", payload=payload)

    def enable(self, account_id: str) -> ResponseScheme:
        """Re-enable a disabled account."""
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        return self._send("POST", f"users/{account_id}/manage/lifecycle/enable")
