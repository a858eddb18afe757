"""Shared validate-build-call helper for resource services."""

from typing import Any, Iterable, Mapping
from urllib.parse import urlencode

from atlassian_cloud.core.exceptions import ErrorKind, ValidationError
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.models import ResponseScheme


def encode_query(params: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> str:
    """Encode query parameters, skipping absent values.

    Keys are sorted, lists are comma-joined and booleans rendered as
    ``true``/``false``. ``None``, empty strings and empty lists are dropped.

    Example:
        >>> encode_query({"q": "qq", "action": "user_added", "cursor": None})
        'action=user_added&q=qq'
    """
    items = params.items() if isinstance(params, Mapping) else params

    pairs: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        else:
            value = str(value)
        if value == "":
            continue
        pairs.append((key, value))

    # Stable sort keeps repeated keys in insertion order
    pairs.sort(key=lambda kv: kv[0])
    return urlencode(pairs)


class ResourceService:
    """Base class for a REST resource family.

    Subclasses supply only their path templates and identifiers; validation,
    query encoding and dispatch through the connector live here.
    """

    provider_name = "atlassian"

    def __init__(self, connector: Connector) -> None:
        """Initialize the service.

        Args:
            connector: Connector used to build and execute requests
        """
        self._connector = connector

    def _require(self, value: Any, kind: ErrorKind, field: str | None = None) -> None:
        """Raise ValidationError if a required identifier is empty or zero."""
        if value is None or value == "" or (isinstance(value, int) and not isinstance(value, bool) and value == 0):
            raise ValidationError(kind, field=field, provider=self.provider_name)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        payload: Any = None,
        result_type: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        """Build, send and decode one request.

        Args:
            method: HTTP method
            path: Endpoint path (relative to the site URL)
            params: Query parameters, encoded with encode_query
            payload: Request body
            result_type: Type to decode the response into

        Returns:
            Tuple of (result or None, response envelope)
        """
        if params is not None:
            query = encode_query(params)
            if query:
                path = f"{path}?{query}"

        request = self._connector.new_request(method, path, payload)
        return self._connector.call(request, result_type)

    def _send(self, method: str, path: str, **kwargs: Any) -> ResponseScheme:
        """Like _request, for operations without a typed result."""
        _, response = self._request(method, path, **kwargs)
        return response
