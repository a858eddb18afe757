"""Base class for services under ``rest/agile/{version}``."""

from typing import Any

from atlassian_cloud.agile.models import IssueOptions
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.service import ResourceService

AGILE_API_VERSION = "1.0"


class AgileService(ResourceService):
    provider_name = "agile"

    def __init__(self, connector: Connector, version: str = AGILE_API_VERSION) -> None:
        super().__init__(connector)
        self.version = version

    def _path(self, *segments: Any) -> str:
        """Join path segments under the versioned Agile API root."""
        return "/".join([f"rest/agile/{self.version}", *(str(s) for s in segments)])

    @staticmethod
    def _page_params(
        start_at: int,
        max_results: int,
        options: IssueOptions | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            params.update(options.to_params())
        return params
