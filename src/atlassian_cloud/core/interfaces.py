"""Abstract connector interface.

The Connector is the single seam through which every resource service reaches
the network. Any object implementing these two operations can back every
service in this package.
"""

from abc import ABC, abstractmethod
from typing import Any

import requests

from atlassian_cloud.core.models import ResponseScheme


class Connector(ABC):
    """Build authenticated requests and execute them.

    Implementations: AtlassianClient (and its AdminClient/AgileClient subclasses)
    """

    @abstractmethod
    def new_request(
        self,
        method: str,
        path: str,
        payload: Any = None,
        content_type: str | None = None,
    ) -> requests.PreparedRequest:
        """Build a fully-qualified request. No network I/O happens here.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Path relative to the site URL, may include a query string
            payload: Value to JSON-encode as the request body
            content_type: Explicit Content-Type override

        Returns:
            Prepared request ready to send

        Raises:
            RequestBuildError: If the path, method or payload is invalid
        """

    @abstractmethod
    def call(
        self,
        request: requests.PreparedRequest,
        result_type: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        """Send a request and decode the response.

        Args:
            request: Request produced by new_request
            result_type: Type to decode a successful body into, or None

        Returns:
            Tuple of (decoded result or None, response envelope)

        Raises:
            StatusError: For non-2xx responses (envelope attached)
            DecodeError: If a successful body cannot be decoded
        """
