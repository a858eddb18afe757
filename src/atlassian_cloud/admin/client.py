"""Atlassian Admin client.

Example:
    from atlassian_cloud.admin import AdminClient

    with AdminClient(bearer_token="org-api-key") as admin:
        org, response = admin.organization.get("org-1")
        groups, _ = admin.scim.group.gets("dir-1", start_at=1, max_results=50)
"""

import logging

import requests

from atlassian_cloud.admin.organization import OrganizationService
from atlassian_cloud.admin.scim_group import SCIMGroupService
from atlassian_cloud.admin.scim_schema import SCIMSchemaService
from atlassian_cloud.admin.scim_user import SCIMUserService
from atlassian_cloud.admin.user import UserService
from atlassian_cloud.atlassian.base import DEFAULT_TIMEOUT, AtlassianClient
from atlassian_cloud.core.interfaces import Connector

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_SITE = "https://api.atlassian.com/"


class SCIM:
    """Grouping of the user-provisioning services.

    Attributes:
        user: SCIM users
        group: SCIM groups
        schema: SCIM schema discovery
    """

    def __init__(self, connector: Connector) -> None:
        self.user = SCIMUserService(connector)
        self.group = SCIMGroupService(connector)
        self.schema = SCIMSchemaService(connector)


class AdminClient(AtlassianClient):
    """Client for the Admin, user management and user provisioning APIs.

    Unlike product clients, the site defaults to ``https://api.atlassian.com/``
    and the ATLASSIAN_SITE_URL setting is not consulted.

    Attributes:
        organization: Organization endpoints (with ``.policy`` and ``.directory``)
        user: User management endpoints (with ``.token``)
        scim: User provisioning endpoints
    """

    provider_name = "admin"

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
        """Initialize the Admin client.

        Args:
            site_url: API gateway URL (defaults to DEFAULT_ADMIN_SITE)
            email: User email for Basic authentication
            api_token: API token for Basic authentication
            bearer_token: Organization API key
            user_agent: User-Agent header sent with every request
            timeout: Request timeout in seconds
            session: HTTP session to use
            service: Keyring service name for credential lookup
        """
        super().__init__(
            site_url=site_url or DEFAULT_ADMIN_SITE,
            email=email,
            api_token=api_token,
            bearer_token=bearer_token,
            user_agent=user_agent,
            timeout=timeout,
            session=session,
            service=service,
        )
        self.organization = OrganizationService(self)
        self.user = UserService(self)
        self.scim = SCIM(self)
        logger.info("Admin client ready for %s", self.site_url)
