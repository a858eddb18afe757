"""Jira Software (Agile) API: boards, backlog, epics and sprints.

Example:
    from atlassian_cloud.agile import AgileClient, IssueOptions

    with AgileClient(site_url="https://company.atlassian.net") as agile:
        page, _ = agile.sprint.issues(12, IssueOptions(jql="status = Done"))
"""

from atlassian_cloud.agile.board import BoardService
from atlassian_cloud.agile.board_backlog import BoardBacklogService
from atlassian_cloud.agile.client import AgileClient
from atlassian_cloud.agile.epic import EpicService
from atlassian_cloud.agile.models import (
    Board,
    BoardPayload,
    Epic,
    GetBoardsOptions,
    IssueMovePayload,
    IssueOptions,
    IssueRankPayload,
    Sprint,
    SprintPayload,
)
from atlassian_cloud.agile.service import AGILE_API_VERSION
from atlassian_cloud.agile.sprint import SprintService

__all__ = [
    "AgileClient",
    "AGILE_API_VERSION",
    "BoardService",
    "BoardBacklogService",
    "EpicService",
    "SprintService",
    "Board",
    "BoardPayload",
    "Epic",
    "Sprint",
    "SprintPayload",
    "GetBoardsOptions",
    "IssueOptions",
    "IssueMovePayload",
    "IssueRankPayload",
]
