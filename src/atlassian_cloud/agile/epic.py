"""Epic endpoints of the Jira Software (Agile) API."""

from atlassian_cloud.agile.models import Epic, IssueMovePayload, IssueOptions, IssuePage
from atlassian_cloud.agile.service import AgileService
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme


class EpicService(AgileService):
    """Epics addressed by numeric ID or issue key."""

    def get(self, epic_id_or_key: str) -> tuple[Epic, ResponseScheme]:
        """Get one epic.

        Args:
            epic_id_or_key: Epic ID or key (e.g., 'PROJ-12')

        Returns:
            Tuple of (epic, response envelope)

        Raises:
            ValidationError: If epic_id_or_key is empty
        """
        self._require(epic_id_or_key, ErrorKind.NO_EPIC_ID, "epic_id_or_key")
        return self._request("GET", self._path("epic", epic_id_or_key), result_type=Epic)

    def issues(
        self,
        epic_id_or_key: str,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List the issues of an epic."""
        self._require(epic_id_or_key, ErrorKind.NO_EPIC_ID, "epic_id_or_key")
        return self._request(
            "GET",
            self._path("epic", epic_id_or_key, "issue"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def move(self, epic_id_or_key: str, issues: list[str]) -> ResponseScheme:
        """Move issues into an epic."""
        self._require(epic_id_or_key, ErrorKind.NO_EPIC_ID, "epic_id_or_key")
        return self._send(
            "POST",
            self._path("epic", epic_id_or_key, "issue"),
            payload=IssueMovePayload(issues=issues),
        )
