"""SCIM group provisioning endpoints (``scim/directory/{directoryId}/Groups``)."""

from atlassian_cloud.admin.models import SCIMGroup, SCIMGroupName, SCIMGroupPage, SCIMGroupPath
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


class SCIMGroupService(ResourceService):
    """Create, rename, patch and delete SCIM groups."""

    provider_name = "admin"

    def _groups_path(self, directory_id: str) -> str:
        self._require(directory_id, ErrorKind.NO_DIRECTORY_ID, "directory_id")
        return f"scim/directory/{directory_id}/Groups"

    def _group_path(self, directory_id: str, group_id: str) -> str:
        path = self._groups_path(directory_id)
        self._require(group_id, ErrorKind.NO_GROUP_ID, "group_id")
        return f"{path}/{group_id}"

    def gets(
        self,
        directory_id: str,
        filter: str = "",  # noqa: A002
        start_at: int = 0,
        max_results: int = 0,
    ) -> tuple[SCIMGroupPage, ResponseScheme]:
        """List groups of the directory.

        Args:
            directory_id: SCIM directory ID
            filter: SCIM filter expression, e.g. 'displayName eq "admins"'
            start_at: 1-based index of the first result (``startIndex``)
            max_results: Page size (``count``)

        Returns:
            Tuple of (page of groups, response envelope)
        """
        path = self._groups_path(directory_id)
        params = {"startIndex": start_at, "count": max_results, "filter": filter}
        return self._request("GET", path, params=params, result_type=SCIMGroupPage)

    def get(self, directory_id: str, group_id: str) -> tuple[SCIMGroup, ResponseScheme]:
        """Get one group."""
        return self._request("GET", self._group_path(directory_id, group_id), result_type=SCIMGroup)

    def update(self, directory_id: str, group_id: str, new_name: str) -> tuple[SCIMGroup, ResponseScheme]:
        """Rename a group.

        Raises:
            ValidationError: If directory_id, group_id or new_name is empty
        """
        path = self._group_path(directory_id, group_id)
        self._require(new_name, ErrorKind.NO_GROUP_NAME, "new_name")
        return self._request(
            "PUT",
            path,
            payload=SCIMGroupName(display_name=new_name),
            result_type=SCIMGroup,
        )

    def delete(self, directory_id: str, group_id: str) -> ResponseScheme:
        """Delete a group."""
        return self._send("DELETE", self._group_path(directory_id, group_id))

    def create(self, directory_id: str, group_name: str) -> tuple[SCIMGroup, ResponseScheme]:
        """Create a group named ``group_name``."""
        path = self._groups_path(directory_id)
        self._require(group_name, ErrorKind.NO_GROUP_NAME, "group_name")
        return self._request(
            "POST",
            path,
            payload=SCIMGroupName(display_name=group_name),
            result_type=SCIMGroup,
        )

    def path(self, directory_id: str, group_id: str, payload: SCIMGroupPath) -> tuple[SCIMGroup, ResponseScheme]:
        """Apply SCIM PATCH operations (typically membership changes) to a group."""
        return self._request(
            "PATCH",
            self._group_path(directory_id, group_id),
            payload=payload,
            result_type=SCIMGroup,
        )
