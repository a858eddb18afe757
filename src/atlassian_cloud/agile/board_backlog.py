"""Backlog move operations of the Jira Software (Agile) API."""

from atlassian_cloud.agile.models import IssueMovePayload, IssueRankPayload
from atlassian_cloud.agile.service import AgileService
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme


class BoardBacklogService(AgileService):
    """Send issues back to the backlog."""

    def move(self, issues: list[str]) -> ResponseScheme:
        """Move issues to the backlog, removing them from any sprint.

        Args:
            issues: Issue keys or IDs (at most 50)

        Returns:
            Response envelope
        """
        return self._send(
            "POST",
            self._path("backlog", "issue"),
            payload=IssueMovePayload(issues=issues),
        )

    def move_to(self, board_id: int, payload: IssueRankPayload) -> ResponseScheme:
        """Move issues to the backlog of a specific board and optionally rank them.

        Raises:
            ValidationError: If board_id is 0
        """
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._send("POST", self._path("backlog", board_id, "issue"), payload=payload)
