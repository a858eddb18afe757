"""Connector layer shared by the Admin and Agile clients.

Base classes:
- AtlassianClient: HTTP connector with auth, status mapping and decoding
- Authentication: Credential holder (basic auth, bearer token, user agent)
- AtlassianCredentials: Credential management

Example:
    from atlassian_cloud.atlassian import AtlassianClient

    with AtlassianClient(site_url="https://company.atlassian.net") as client:
        request = client.new_request("GET", "rest/agile/1.0/board/1")
        board, response = client.call(request, dict)
"""

from atlassian_cloud.atlassian.auth import Authentication, AuthSnapshot
from atlassian_cloud.atlassian.base import DEFAULT_TIMEOUT, AtlassianClient
from atlassian_cloud.atlassian.credentials import (
    AtlassianCredentials,
    delete_credentials,
    get_credentials,
    save_credentials,
)

__all__ = [
    "AtlassianClient",
    "DEFAULT_TIMEOUT",
    "Authentication",
    "AuthSnapshot",
    "AtlassianCredentials",
    "get_credentials",
    "save_credentials",
    "delete_credentials",
]
