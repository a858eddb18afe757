"""Sprint endpoints of the Jira Software (Agile) API.

Example:
    from atlassian_cloud.agile import AgileClient, SprintPayload

    with AgileClient() as agile:
        sprint, _ = agile.sprint.create(SprintPayload(name="Sprint 1", origin_board_id=4))
        agile.sprint.start(sprint.id)
"""

from atlassian_cloud.agile.models import IssueOptions, IssuePage, IssueRankPayload, Sprint, SprintPayload
from atlassian_cloud.agile.service import AgileService
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme

SPRINT_ACTIVE = "active"
SPRINT_CLOSED = "closed"


class SprintService(AgileService):
    """Sprint lifecycle and content."""

    def get(self, sprint_id: int) -> tuple[Sprint, ResponseScheme]:
        """Get one sprint.

        Args:
            sprint_id: Sprint ID

        Returns:
            Tuple of (sprint, response envelope)

        Raises:
            ValidationError: If sprint_id is 0
        """
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._request("GET", self._path("sprint", sprint_id), result_type=Sprint)

    def create(self, payload: SprintPayload) -> tuple[Sprint, ResponseScheme]:
        """Create a future sprint; name and origin board are required by the API."""
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request("POST", self._path("sprint"), payload=payload, result_type=Sprint)

    def update(self, sprint_id: int, payload: SprintPayload) -> tuple[Sprint, ResponseScheme]:
        """Fully update a sprint. Fields missing from the payload are cleared."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request("PUT", self._path("sprint", sprint_id), payload=payload, result_type=Sprint)

    def path(self, sprint_id: int, payload: SprintPayload) -> tuple[Sprint, ResponseScheme]:
        """Partially update a sprint. Only the fields in the payload change."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request("POST", self._path("sprint", sprint_id), payload=payload, result_type=Sprint)

    def delete(self, sprint_id: int) -> ResponseScheme:
        """Delete a sprint."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._send("DELETE", self._path("sprint", sprint_id))

    def issues(
        self,
        sprint_id: int,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List the issues of a sprint."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._request(
            "GET",
            self._path("sprint", sprint_id, "issue"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def start(self, sprint_id: int) -> ResponseScheme:
        """Start a future sprint."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._send("POST", self._path("sprint", sprint_id), payload=SprintPayload(state=SPRINT_ACTIVE))

    def close(self, sprint_id: int) -> ResponseScheme:
        """Close an active sprint."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._send("POST", self._path("sprint", sprint_id), payload=SprintPayload(state=SPRINT_CLOSED))

    def move(self, sprint_id: int, payload: IssueRankPayload) -> ResponseScheme:
        """Move issues into a sprint and optionally rank them."""
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._send("POST", self._path("sprint", sprint_id, "issue"), payload=payload)
