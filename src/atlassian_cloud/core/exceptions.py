"""Exception hierarchy for atlassian-cloud-sdk.

Every error carries an :class:`ErrorKind` so callers can match on the failure
condition without parsing messages:

    try:
        board, response = client.board.get(0)
    except ValidationError as e:
        assert e.kind is ErrorKind.NO_BOARD_ID
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Well-known failure conditions."""

    # Missing required identifiers (raised before any I/O)
    NO_ORGANIZATION_ID = "no organization id set"
    NO_DOMAIN_ID = "no domain id set"
    NO_EVENT_ID = "no event id set"
    NO_POLICY_ID = "no organization policy id set"
    NO_DIRECTORY_ID = "no directory id set"
    NO_GROUP_ID = "no group id set"
    NO_GROUP_NAME = "no group name set"
    NO_USER_ID = "no user id set"
    NO_ACCOUNT_ID = "no account id set"
    NO_TOKEN_ID = "no user token id set"
    NO_BOARD_ID = "no board id set"
    NO_FILTER_ID = "no filter id set"
    NO_EPIC_ID = "no epic id set"
    NO_SPRINT_ID = "no sprint id set"
    NO_PAYLOAD = "no payload set"

    # SCIM patch operation builders
    NO_SCIM_OPERATION = "no scim operation set"
    NO_SCIM_PATH = "no scim path set"
    NO_SCIM_VALUE = "no scim value set"
    NO_SCIM_COMPLEX_VALUE = "no scim complex value set"

    # Request construction
    INVALID_PATH = "invalid request path"
    ENCODE = "unable to encode request payload"
    INVALID_METHOD = "invalid http method"

    # Response status classification
    NOT_FOUND = "no atlassian resource found"
    UNAUTHORIZED = "atlassian insufficient permissions"
    INTERNAL = "atlassian internal error"
    BAD_REQUEST = "atlassian invalid payload"
    INVALID_STATUS_CODE = "invalid http response status, please refer the response.body for more details"

    # Response decoding
    DECODE = "unable to decode response body"


class AtlassianError(Exception):
    """Base exception for all atlassian-cloud-sdk errors."""

    def __init__(
        self,
        message: str | None = None,
        kind: ErrorKind | None = None,
        provider: str | None = None,
        details: dict | None = None,
    ):
        """Initialize AtlassianError.

        Args:
            message: Error message (defaults to the kind's description)
            kind: Failure condition
            provider: API family name (e.g., 'admin', 'agile')
            details: Additional error details
        """
        if message is None:
            message = kind.value if kind is not None else "atlassian error"
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.provider = provider
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.provider:
            return f"[{self.provider}] {self.message}"
        return self.message


class ValidationError(AtlassianError):
    """A required argument is missing; no request was sent."""

    def __init__(
        self,
        kind: ErrorKind,
        field: str | None = None,
        provider: str | None = None,
        details: dict | None = None,
    ):
        """Initialize ValidationError.

        Args:
            kind: Which identifier is missing
            field: Argument name that failed validation
            provider: API family name
            details: Additional error details
        """
        super().__init__(kind=kind, provider=provider, details=details)
        self.field = field


class RequestBuildError(AtlassianError):
    """The HTTP request could not be constructed."""


class StatusError(AtlassianError):
    """The server answered with a non-2xx status code.

    The response envelope is attached so the caller can inspect the raw body
    for API-specific error detail.
    """

    default_kind = ErrorKind.INVALID_STATUS_CODE

    def __init__(self, response: Any, provider: str | None = None, details: dict | None = None):
        """Initialize StatusError.

        Args:
            response: ResponseScheme envelope of the failed call
            provider: API family name
            details: Additional error details
        """
        super().__init__(kind=self.default_kind, provider=provider, details=details)
        self.response = response

    @property
    def status_code(self) -> int:
        """HTTP status code of the failed call."""
        return int(self.response.code)


class NotFoundError(StatusError):
    """Resource not found (404)."""

    default_kind = ErrorKind.NOT_FOUND


class UnauthorizedError(StatusError):
    """Authentication failed or insufficient permissions (401)."""

    default_kind = ErrorKind.UNAUTHORIZED


class InternalServerError(StatusError):
    """Atlassian internal error (500)."""

    default_kind = ErrorKind.INTERNAL


class BadRequestError(StatusError):
    """Invalid payload or parameters (400)."""

    default_kind = ErrorKind.BAD_REQUEST


class InvalidStatusCodeError(StatusError):
    """Any other non-2xx status."""


class DecodeError(AtlassianError):
    """A successful response body could not be decoded into the expected type."""

    def __init__(self, response: Any, message: str | None = None, provider: str | None = None):
        """Initialize DecodeError.

        Args:
            response: ResponseScheme envelope of the call
            message: Decoder message
            provider: API family name
        """
        super().__init__(message, kind=ErrorKind.DECODE, provider=provider)
        self.response = response


STATUS_ERRORS: dict[int, type[StatusError]] = {
    404: NotFoundError,
    401: UnauthorizedError,
    500: InternalServerError,
    400: BadRequestError,
}


def status_error_for(code: int) -> type[StatusError]:
    """Return the error class for a non-2xx status code."""
    return STATUS_ERRORS.get(code, InvalidStatusCodeError)
