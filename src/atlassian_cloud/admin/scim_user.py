"""SCIM user provisioning endpoints (``scim/directory/{directoryId}/Users``)."""

from typing import Any

from atlassian_cloud.admin.models import SCIMUser, SCIMUserGetsOptions, SCIMUserPage, SCIMUserToPath
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


class SCIMUserService(ResourceService):
    """Create, query, patch, replace and deactivate SCIM users.

    Most operations accept ``attributes`` / ``excluded_attributes`` to shape
    the returned representation; both are sent as comma-joined lists.
    """

    provider_name = "admin"

    def _users_path(self, directory_id: str) -> str:
        self._require(directory_id, ErrorKind.NO_DIRECTORY_ID, "directory_id")
        return f"scim/directory/{directory_id}/Users"

    def _user_path(self, directory_id: str, user_id: str) -> str:
        path = self._users_path(directory_id)
        self._require(user_id, ErrorKind.NO_USER_ID, "user_id")
        return f"{path}/{user_id}"

    @staticmethod
    def _attribute_params(
        attributes: list[str] | None,
        excluded_attributes: list[str] | None,
    ) -> dict[str, list[str] | None]:
        return {"attributes": attributes, "excludedAttributes": excluded_attributes}

    def create(
        self,
        directory_id: str,
        payload: SCIMUser,
        attributes: list[str] | None = None,
        excluded_attributes: list[str] | None = None,
    ) -> tuple[SCIMUser, ResponseScheme]:
        """Provision a user in the directory.

        Args:
            directory_id: SCIM directory ID
            payload: User to create
            attributes: Attributes to return
            excluded_attributes: Attributes to leave out of the response

        Returns:
            Tuple of (created user, response envelope)
        """
        path = self._users_path(directory_id)
        return self._request(
            "POST",
            path,
            params=self._attribute_params(attributes, excluded_attributes),
            payload=payload,
            result_type=SCIMUser,
        )

    def gets(
        self,
        directory_id: str,
        options: SCIMUserGetsOptions | None = None,
        start_index: int = 0,
        count: int = 0,
    ) -> tuple[SCIMUserPage, ResponseScheme]:
        """List users of the directory.

        ``startIndex`` and ``count`` are always sent.

        Args:
            directory_id: SCIM directory ID
            options: Attribute selection and SCIM filter expression
            start_index: 1-based index of the first result
            count: Page size

        Returns:
            Tuple of (page of users, response envelope)
        """
        path = self._users_path(directory_id)

        params: dict[str, Any] = {"startIndex": start_index, "count": count}
        if options is not None:
            params.update(self._attribute_params(options.attributes, options.excluded_attributes))
            params["filter"] = options.filter

        return self._request("GET", path, params=params, result_type=SCIMUserPage)

    def get(
        self,
        directory_id: str,
        user_id: str,
        attributes: list[str] | None = None,
        excluded_attributes: list[str] | None = None,
    ) -> tuple[SCIMUser, ResponseScheme]:
        """Get one user."""
        return self._request(
            "GET",
            self._user_path(directory_id, user_id),
            params=self._attribute_params(attributes, excluded_attributes),
            result_type=SCIMUser,
        )

    def deactivate(self, directory_id: str, user_id: str) -> ResponseScheme:
        """Deactivate a user; the account is kept but loses product access."""
        return self._send("DELETE", self._user_path(directory_id, user_id))

    def path(
        self,
        directory_id: str,
        user_id: str,
        payload: SCIMUserToPath,
        attributes: list[str] | None = None,
        excluded_attributes: list[str] | None = None,
    ) -> tuple[SCIMUser, ResponseScheme]:
        """Apply SCIM PATCH operations to a user."""
        return self._request(
            "PATCH",
            self._user_path(directory_id, user_id),
            params=self._attribute_params(attributes, excluded_attributes),
            payload=payload,
            result_type=SCIMUser,
        )

    def update(
        self,
        directory_id: str,
        user_id: str,
        payload: SCIMUser,
        attributes: list[str] | None = None,
        excluded_attributes: list[str] | None = None,
    ) -> tuple[SCIMUser, ResponseScheme]:
        """Replace a user."""
        return self._request(
            "PUT",
            self._user_path(directory_id, user_id),
            params=self._attribute_params(attributes, excluded_attributes),
            payload=payload,
            result_type=SCIMUser,
        )
