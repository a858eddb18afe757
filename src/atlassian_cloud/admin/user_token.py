"""API tokens of a managed account."""

from atlassian_cloud.admin.models import UserToken
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


class UserTokenService(ResourceService):
    provider_name = "admin"

    def gets(self, account_id: str) -> tuple[list[UserToken], ResponseScheme]:
        """List the API tokens of an account."""
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        return self._request(
            "GET",
            f"users/{account_id}/manage/api-tokens",
            result_type=list[UserToken],
        )

    def delete(self, account_id: str, token_id: str) -> ResponseScheme:
        """Revoke one API token."""
        self._require(account_id, ErrorKind.NO_ACCOUNT_ID, "account_id")
        self._require(token_id, ErrorKind.NO_TOKEN_ID, "token_id")
        return self._send("DELETE", f"users/{account_id}/manage/api-tokens/{token_id}")
