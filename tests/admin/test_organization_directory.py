"""Tests for organization directory endpoints."""

from unittest.mock import MagicMock

import pytest

from atlassian_cloud.admin.models import GenericActionSuccess, UserProductAccess
from atlassian_cloud.admin.organization_directory import OrganizationDirectoryService
from atlassian_cloud.core.exceptions import ErrorKind, UnauthorizedError, ValidationError
from atlassian_cloud.core.models import ResponseScheme

USER_PATH = "admin/v1/orgs/org-1/directory/users/acc-1"


class TestOrganizationDirectoryService:
    """Tests for OrganizationDirectoryService."""

    def test_activity(self, connector: MagicMock, prepared_request) -> None:
        """Test reading last-active dates."""
        OrganizationDirectoryService(connector).activity("org-1", "acc-1")

        connector.new_request.assert_called_once_with("GET", f"{USER_PATH}/last-active-dates", None)
        connector.call.assert_called_once_with(prepared_request, UserProductAccess)

    def test_remove(self, connector: MagicMock) -> None:
        """Test removing a user from the directory."""
        OrganizationDirectoryService(connector).remove("org-1", "acc-1")
        connector.new_request.assert_called_once_with("DELETE", USER_PATH, None)

    def test_suspend(self, connector: MagicMock, prepared_request) -> None:
        """Test suspending a user's access."""
        connector.call.return_value = (GenericActionSuccess(message="ok"), MagicMock(code=200))

        result, _ = OrganizationDirectoryService(connector).suspend("org-1", "acc-1")

        connector.new_request.assert_called_once_with("POST", f"{USER_PATH}/suspend-access", None)
        connector.call.assert_called_once_with(prepared_request, GenericActionSuccess)
        assert result.message == "ok"

    def test_restore(self, connector: MagicMock) -> None:
        """Test restoring a user's access."""
        OrganizationDirectoryService(connector).restore("org-1", "acc-1")
        connector.new_request.assert_called_once_with("POST", f"{USER_PATH}/restore-access", None)

    @pytest.mark.parametrize(
        ("org", "account", "kind"),
        [
            ("", "acc-1", ErrorKind.NO_ORGANIZATION_ID),
            ("org-1", "", ErrorKind.NO_ACCOUNT_ID),
        ],
    )
    def test_missing_ids(self, connector: MagicMock, org: str, account: str, kind: ErrorKind) -> None:
        """Test that both identifiers are required."""
        with pytest.raises(ValidationError) as exc_info:
            OrganizationDirectoryService(connector).suspend(org, account)

        assert exc_info.value.kind is kind
        connector.new_request.assert_not_called()

    def test_unauthorized(self, connector: MagicMock) -> None:
        """Test that status errors propagate."""
        envelope = ResponseScheme(code=401, endpoint="https://api.atlassian.com/", method="DELETE")
        connector.call.side_effect = UnauthorizedError(envelope, provider="admin")

        with pytest.raises(UnauthorizedError):
            OrganizationDirectoryService(connector).remove("org-1", "acc-1")
