"""Jira Software (Agile) client."""

import logging
from typing import Any

from atlassian_cloud.agile.board import BoardService
from atlassian_cloud.agile.board_backlog import BoardBacklogService
from atlassian_cloud.agile.epic import EpicService
from atlassian_cloud.agile.service import AGILE_API_VERSION
from atlassian_cloud.agile.sprint import SprintService
from atlassian_cloud.atlassian.base import AtlassianClient

logger = logging.getLogger(__name__)


class AgileClient(AtlassianClient):
    """Client for ``{site}/rest/agile/1.0``.

    Takes the same arguments as AtlassianClient; the site URL is the Jira
    Cloud site (e.g., https://company.atlassian.net).

    Attributes:
        board: Board endpoints
        backlog: Backlog move endpoints
        epic: Epic endpoints
        sprint: Sprint endpoints
    """

    provider_name = "agile"
    version = AGILE_API_VERSION

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.board = BoardService(self, self.version)
        self.backlog = BoardBacklogService(self, self.version)
        self.epic = EpicService(self, self.version)
        self.sprint = SprintService(self, self.version)
        logger.info("Agile client ready for %s", self.site_url)
