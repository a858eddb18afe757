"""Base connector for Atlassian Cloud APIs with shared auth and request logic.

This module provides the HTTP client behind every resource service:
- Automatic credential resolution
- Request construction (URL resolution, JSON body, auth headers)
- Status code classification into typed exceptions
- Response decoding into pydantic models
- Request/response logging

Example:
    from atlassian_cloud.atlassian.base import AtlassianClient

    class StatusClient(AtlassianClient):
        def status(self) -> ResponseScheme:
            request = self.new_request("GET", "status")
            _, response = self.call(request)
            return response
"""

import functools
import json
import logging
import re
from typing import Any

import pydantic
import requests
from pydantic import BaseModel, TypeAdapter
from requests.auth import HTTPBasicAuth

from atlassian_cloud.atlassian.auth import Authentication
from atlassian_cloud.atlassian.credentials import DEFAULT_SERVICE, get_credentials
from atlassian_cloud.core.exceptions import (
    DecodeError,
    ErrorKind,
    RequestBuildError,
    status_error_for,
)
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.models import ResponseScheme

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_TIMEOUT = 30  # seconds

# RFC 7230 token characters
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def _to_jsonable(payload: Any) -> Any:
    """Convert pydantic models (also nested in lists and dicts) to JSON data."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, (list, tuple)):
        return [_to_jsonable(item) for item in payload]
    if isinstance(payload, dict):
        return {key: _to_jsonable(value) for key, value in payload.items()}
    return payload


@functools.lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class AtlassianClient(Connector):
    """HTTP connector for Atlassian Cloud APIs.

    Provides the shared functionality for the Admin and Agile clients:
    - Automatic credential resolution from env vars, keyring, or .env files
    - HTTP Basic Auth with API tokens, or bearer tokens
    - Status classification (404/401/500/400/other) into typed exceptions
    - Request/response logging

    Credentials live in ``self.auth`` and should be configured before the
    first request is built.

    Attributes:
        site_url: Atlassian site URL, always ending in '/'
        auth: Credential holder read on every new_request
        timeout: Request timeout in seconds
    """

    provider_name = "atlassian"

    def __init__(
        self,
        site_url: str | None = None,
        email: str | None = None,
        api_token: str | None = None,
        bearer_token: str | None = None,
        user_agent: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        service: str | None = None,
    ) -> None:
        """Initialize the Atlassian client.

        Args:
            site_url: Atlassian site URL (e.g., https://company.atlassian.net)
            email: User email for Basic authentication
            api_token: API token for Basic authentication
            bearer_token: Bearer token, used when Basic auth is not configured
            user_agent: User-Agent header sent with every request
            timeout: Request timeout in seconds
            session: HTTP session to use (a new one is created by default)
            service: Keyring service name for credential lookup
        """
        creds = get_credentials(
            site_url=site_url,
            email=email,
            api_token=api_token,
            bearer_token=bearer_token,
            service=service or DEFAULT_SERVICE,
        )
        self.site_url = creds.site_url
        self.timeout = timeout

        self.auth = Authentication()
        if creds.has_basic_auth:
            self.auth.set_basic_auth(creds.email, creds.api_token)
        if creds.bearer_token:
            self.auth.set_bearer_token(creds.bearer_token)
        if user_agent:
            self.auth.set_user_agent(user_agent)

        # Session for connection pooling
        self._session = session or requests.Session()

        logger.debug(
            "Initialized %s client for %s (user: %s)",
            self.provider_name,
            self.site_url,
            creds.email,
        )

    def __enter__(self) -> "AtlassianClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - close session."""
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()
        logger.debug("Closed %s client session", self.provider_name)

    def new_request(
        self,
        method: str,
        path: str,
        payload: Any = None,
        content_type: str | None = None,
    ) -> requests.PreparedRequest:
        """Build an authenticated request for a path relative to the site URL.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: API path, optionally with an encoded query string
            payload: Request body; pydantic models are dumped by alias
            content_type: Content-Type of the payload, also disables XSRF checks;
                ignored when there is no payload

        Returns:
            Prepared request

        Raises:
            RequestBuildError: If the method, path or payload is invalid
        """
        if not method or not _METHOD_RE.match(method):
            raise RequestBuildError(
                kind=ErrorKind.INVALID_METHOD,
                provider=self.provider_name,
                details={"method": method},
            )

        if _CONTROL_RE.search(path) or _BAD_ESCAPE_RE.search(path):
            raise RequestBuildError(
                kind=ErrorKind.INVALID_PATH,
                provider=self.provider_name,
                details={"path": path},
            )
        url = self.site_url + path.lstrip("/")

        headers = {"Accept": "application/json"}
        body: bytes | None = None

        if payload is not None:
            try:
                body = json.dumps(_to_jsonable(payload), separators=(",", ":")).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestBuildError(
                    f"{ErrorKind.ENCODE.value}: {e}",
                    kind=ErrorKind.ENCODE,
                    provider=self.provider_name,
                ) from e
            headers["Content-Type"] = content_type or "application/json"
            if content_type:
                headers["X-Atlassian-Token"] = "no-check"

        snapshot = self.auth.snapshot()
        auth = None
        if snapshot.basic_auth is not None:
            auth = HTTPBasicAuth(*snapshot.basic_auth)
        elif snapshot.bearer_token:
            headers["Authorization"] = f"Bearer {snapshot.bearer_token}"

        if snapshot.user_agent is not None:
            headers["User-Agent"] = snapshot.user_agent

        try:
            prepared = self._session.prepare_request(
                requests.Request(
                    method=method,
                    url=url,
                    headers=headers,
                    data=body,
                    auth=auth,
                )
            )
        except requests.exceptions.RequestException as e:
            raise RequestBuildError(
                f"{ErrorKind.INVALID_PATH.value}: {e}",
                kind=ErrorKind.INVALID_PATH,
                provider=self.provider_name,
                details={"url": url},
            ) from e

        logger.debug("Built request %s %s", prepared.method, prepared.url)
        return prepared

    def call(
        self,
        request: requests.PreparedRequest,
        result_type: Any = None,
    ) -> tuple[Any, ResponseScheme]:
        """Send a request and decode the response body.

        Args:
            request: Request built by new_request
            result_type: Model class (or any pydantic-compatible type) to
                decode a successful body into; None skips decoding

        Returns:
            Tuple of (decoded result or None, response envelope)

        Raises:
            NotFoundError: On 404
            UnauthorizedError: On 401
            InternalServerError: On 500
            BadRequestError: On 400
            InvalidStatusCodeError: On any other non-2xx status
            DecodeError: If the body does not match result_type
            requests.exceptions.RequestException: On transport failure
        """
        settings = self._session.merge_environment_settings(request.url, {}, None, None, None)
        response = self._session.send(request, timeout=self.timeout, **settings)

        envelope = ResponseScheme(
            code=response.status_code,
            endpoint=response.url or request.url or "",
            method=request.method or "",
            headers=response.headers,
            raw=response.content or b"",
        )

        logger.debug(
            "%s %s -> %d (%d bytes)",
            envelope.method,
            envelope.endpoint,
            envelope.code,
            len(envelope.raw),
        )

        if not 200 <= envelope.code < 300:
            raise status_error_for(envelope.code)(
                envelope,
                provider=self.provider_name,
                details={"url": envelope.endpoint},
            )

        if result_type is None:
            return None, envelope

        try:
            result = _adapter(result_type).validate_json(envelope.raw)
        except pydantic.ValidationError as e:
            raise DecodeError(envelope, f"{ErrorKind.DECODE.value}: {e}", provider=self.provider_name) from e

        return result, envelope
