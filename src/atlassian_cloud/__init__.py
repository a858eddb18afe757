"""
atlassian-cloud-sdk: Typed Python client for Atlassian Cloud REST APIs.

This package wraps the Jira Software (Agile) API and the Atlassian Admin,
user management and user provisioning (SCIM) APIs. Every operation returns
its decoded result together with a ResponseScheme envelope, and raises a
typed AtlassianError subclass on failure.

Example Usage:
    from atlassian_cloud import AdminClient, AgileClient, NotFoundError

    with AgileClient(site_url="https://company.atlassian.net") as agile:
        board, response = agile.board.get(4)
        print(board.name, response.code)

    with AdminClient(bearer_token="org-api-key") as admin:
        try:
            org, _ = admin.organization.get("org-1")
        except NotFoundError as e:
            print(e.response.text)
"""

from atlassian_cloud.admin import AdminClient
from atlassian_cloud.agile import AgileClient
from atlassian_cloud.atlassian import AtlassianClient, Authentication
from atlassian_cloud.core.exceptions import (
    AtlassianError,
    BadRequestError,
    DecodeError,
    ErrorKind,
    InternalServerError,
    InvalidStatusCodeError,
    NotFoundError,
    RequestBuildError,
    StatusError,
    UnauthorizedError,
    ValidationError,
)
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.models import ResponseScheme

__version__ = "0.1.0"

__all__ = [
    # Clients
    "AdminClient",
    "AgileClient",
    "AtlassianClient",
    "Authentication",
    "Connector",
    # Models
    "ResponseScheme",
    # Exceptions
    "ErrorKind",
    "AtlassianError",
    "ValidationError",
    "RequestBuildError",
    "StatusError",
    "NotFoundError",
    "UnauthorizedError",
    "InternalServerError",
    "BadRequestError",
    "InvalidStatusCodeError",
    "DecodeError",
]
