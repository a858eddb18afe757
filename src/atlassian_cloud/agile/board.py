"""Board endpoints of the Jira Software (Agile) API.

Example:
    from atlassian_cloud.agile import AgileClient, GetBoardsOptions

    with AgileClient() as agile:
        boards, _ = agile.board.gets(GetBoardsOptions(board_type="scrum"), 0, 50)
        sprints, _ = agile.board.sprints(boards.values[0].id, 0, 50, ["active"])
"""

from atlassian_cloud.agile.models import (
    Board,
    BoardConfiguration,
    BoardPage,
    BoardPayload,
    BoardProjectPage,
    BoardVersionPage,
    EpicPage,
    GetBoardsOptions,
    IssueOptions,
    IssuePage,
    IssueRankPayload,
    SprintPage,
)
from atlassian_cloud.agile.service import AgileService
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme


class BoardService(AgileService):
    """Boards and everything hanging off them."""

    def get(self, board_id: int) -> tuple[Board, ResponseScheme]:
        """Get one board.

        Args:
            board_id: Board ID

        Returns:
            Tuple of (board, response envelope)

        Raises:
            ValidationError: If board_id is 0
        """
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._request("GET", self._path("board", board_id), result_type=Board)

    def create(self, payload: BoardPayload) -> tuple[Board, ResponseScheme]:
        """Create a board from a saved filter."""
        self._require(payload, ErrorKind.NO_PAYLOAD, "payload")
        return self._request("POST", self._path("board"), payload=payload, result_type=Board)

    def delete(self, board_id: int) -> ResponseScheme:
        """Delete a board."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._send("DELETE", self._path("board", board_id))

    def filter(self, filter_id: int, start_at: int = 0, max_results: int = 50) -> tuple[BoardPage, ResponseScheme]:
        """List the boards that use a filter."""
        self._require(filter_id, ErrorKind.NO_FILTER_ID, "filter_id")
        return self._request(
            "GET",
            self._path("board", "filter", filter_id),
            params=self._page_params(start_at, max_results),
            result_type=BoardPage,
        )

    def backlog(
        self,
        board_id: int,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List the issues in the backlog of a board."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._request(
            "GET",
            self._path("board", board_id, "backlog"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def configuration(self, board_id: int) -> tuple[BoardConfiguration, ResponseScheme]:
        """Get the column, estimation and ranking configuration of a board."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._request(
            "GET",
            self._path("board", board_id, "configuration"),
            result_type=BoardConfiguration,
        )

    def epics(
        self,
        board_id: int,
        start_at: int = 0,
        max_results: int = 50,
        done: bool = False,
    ) -> tuple[EpicPage, ResponseScheme]:
        """List the epics of a board; ``done`` is always sent."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        params = self._page_params(start_at, max_results)
        params["done"] = done
        return self._request(
            "GET",
            self._path("board", board_id, "epic"),
            params=params,
            result_type=EpicPage,
        )

    def issues_without_epic(
        self,
        board_id: int,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List the issues of a board that belong to no epic."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._request(
            "GET",
            self._path("board", board_id, "epic", "none", "issue"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def issues_by_epic(
        self,
        board_id: int,
        epic_id: int,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List the issues of a board that belong to an epic."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        self._require(epic_id, ErrorKind.NO_EPIC_ID, "epic_id")
        return self._request(
            "GET",
            self._path("board", board_id, "epic", epic_id, "issue"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def issues(
        self,
        board_id: int,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List every issue of a board."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._request(
            "GET",
            self._path("board", board_id, "issue"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def issues_by_sprint(
        self,
        board_id: int,
        sprint_id: int,
        options: IssueOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssuePage, ResponseScheme]:
        """List the issues of a board that belong to a sprint."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        self._require(sprint_id, ErrorKind.NO_SPRINT_ID, "sprint_id")
        return self._request(
            "GET",
            self._path("board", board_id, "sprint", sprint_id, "issue"),
            params=self._page_params(start_at, max_results, options),
            result_type=IssuePage,
        )

    def move(self, board_id: int, payload: IssueRankPayload) -> ResponseScheme:
        """Move issues onto a board and optionally rank them."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._send("POST", self._path("board", board_id, "issue"), payload=payload)

    def projects(self, board_id: int, start_at: int = 0, max_results: int = 50) -> tuple[BoardProjectPage, ResponseScheme]:
        """List the projects associated with a board."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        return self._request(
            "GET",
            self._path("board", board_id, "project"),
            params=self._page_params(start_at, max_results),
            result_type=BoardProjectPage,
        )

    def sprints(
        self,
        board_id: int,
        start_at: int = 0,
        max_results: int = 50,
        states: list[str] | None = None,
    ) -> tuple[SprintPage, ResponseScheme]:
        """List the sprints of a board, optionally filtered by state."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        params = self._page_params(start_at, max_results)
        params["state"] = states
        return self._request(
            "GET",
            self._path("board", board_id, "sprint"),
            params=params,
            result_type=SprintPage,
        )

    def versions(
        self,
        board_id: int,
        start_at: int = 0,
        max_results: int = 50,
        released: bool = False,
    ) -> tuple[BoardVersionPage, ResponseScheme]:
        """List the versions of a board; ``released`` is always sent."""
        self._require(board_id, ErrorKind.NO_BOARD_ID, "board_id")
        params = self._page_params(start_at, max_results)
        params["released"] = released
        return self._request(
            "GET",
            self._path("board", board_id, "version"),
            params=params,
            result_type=BoardVersionPage,
        )

    def gets(
        self,
        options: GetBoardsOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[BoardPage, ResponseScheme]:
        """List boards visible to the caller."""
        params = self._page_params(start_at, max_results)
        if options is not None:
            params.update(options.to_params())
        return self._request("GET", self._path("board"), params=params, result_type=BoardPage)
