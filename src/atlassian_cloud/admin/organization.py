"""Organization endpoints of the Atlassian Admin API.

Example:
    from atlassian_cloud.admin import AdminClient

    with AdminClient(bearer_token="...") as admin:
        page, _ = admin.organization.gets()
        for org in page.data or []:
            print(org.id, org.attributes.name)
"""

from datetime import datetime, timezone

from atlassian_cloud.admin.models import (
    OrganizationDomainPage,
    OrganizationDomainResponse,
    OrganizationEventActions,
    OrganizationEventOptions,
    OrganizationEventPage,
    OrganizationEventResponse,
    OrganizationEventStreamOptions,
    OrganizationPage,
    OrganizationResponse,
    OrganizationUserPage,
)
from atlassian_cloud.admin.organization_directory import OrganizationDirectoryService
from atlassian_cloud.admin.organization_policy import OrganizationPolicyService
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService


def _timestamp(value: datetime) -> float:
    # Naive values are UTC, never the local zone of the caller.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def _epoch_seconds(value: datetime | None) -> int | None:
    return int(_timestamp(value)) if value is not None else None


def _epoch_millis(value: datetime | None) -> int | None:
    return int(_timestamp(value) * 1000) if value is not None else None


class OrganizationService(ResourceService):
    """Organizations, their users, domains and audit events.

    Attributes:
        policy: Organization policy endpoints
        directory: Managed-user directory endpoints
    """

    provider_name = "admin"

    def __init__(self, connector: Connector) -> None:
        super().__init__(connector)
        self.policy = OrganizationPolicyService(connector)
        self.directory = OrganizationDirectoryService(connector)

    def gets(self, cursor: str = "") -> tuple[OrganizationPage, ResponseScheme]:
        """List the organizations the API key has access to.

        Args:
            cursor: Page cursor returned by a previous call

        Returns:
            Tuple of (page of organizations, response envelope)
        """
        return self._request(
            "GET",
            "admin/v1/orgs",
            params={"cursor": cursor},
            result_type=OrganizationPage,
        )

    def get(self, organization_id: str) -> tuple[OrganizationResponse, ResponseScheme]:
        """Get one organization.

        Args:
            organization_id: Organization ID

        Returns:
            Tuple of (organization, response envelope)

        Raises:
            ValidationError: If organization_id is empty
        """
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}",
            result_type=OrganizationResponse,
        )

    def users(self, organization_id: str, cursor: str = "") -> tuple[OrganizationUserPage, ResponseScheme]:
        """List the managed accounts of an organization."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/users",
            params={"cursor": cursor},
            result_type=OrganizationUserPage,
        )

    def domains(self, organization_id: str, cursor: str = "") -> tuple[OrganizationDomainPage, ResponseScheme]:
        """List the domains of an organization."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/domains",
            params={"cursor": cursor},
            result_type=OrganizationDomainPage,
        )

    def domain(self, organization_id: str, domain_id: str) -> tuple[OrganizationDomainResponse, ResponseScheme]:
        """Get one domain of an organization."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(domain_id, ErrorKind.NO_DOMAIN_ID, "domain_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/domains/{domain_id}",
            result_type=OrganizationDomainResponse,
        )

    def events(
        self,
        organization_id: str,
        options: OrganizationEventOptions | None = None,
        cursor: str = "",
    ) -> tuple[OrganizationEventPage, ResponseScheme]:
        """Search the audit log of an organization.

        Args:
            organization_id: Organization ID
            options: Query term, action and time range filters
            cursor: Page cursor returned by a previous call

        Returns:
            Tuple of (page of events, response envelope)

        Raises:
            ValidationError: If organization_id is empty
        """
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")

        options = options or OrganizationEventOptions()
        params = {
            "cursor": cursor,
            "q": options.q,
            "from": _epoch_seconds(options.from_date),
            "to": _epoch_seconds(options.to_date),
            "action": options.action,
        }
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/events",
            params=params,
            result_type=OrganizationEventPage,
        )

    def event(self, organization_id: str, event_id: str) -> tuple[OrganizationEventResponse, ResponseScheme]:
        """Get one audit event."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        self._require(event_id, ErrorKind.NO_EVENT_ID, "event_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/events/{event_id}",
            result_type=OrganizationEventResponse,
        )

    def actions(self, organization_id: str) -> tuple[OrganizationEventActions, ResponseScheme]:
        """List the audit action types that can be used as event filters."""
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/event-actions",
            result_type=OrganizationEventActions,
        )

    def events_stream(
        self,
        organization_id: str,
        options: OrganizationEventStreamOptions | None = None,
    ) -> tuple[OrganizationEventPage, ResponseScheme]:
        """Poll the audit event stream of an organization.

        Args:
            organization_id: Organization ID
            options: Time range (epoch milliseconds), cursor, sort order and limit

        Returns:
            Tuple of (page of events, response envelope)
        """
        self._require(organization_id, ErrorKind.NO_ORGANIZATION_ID, "organization_id")

        options = options or OrganizationEventStreamOptions()
        params = {
            "from": _epoch_millis(options.from_date),
            "to": _epoch_millis(options.to_date),
            "cursor": options.cursor,
            "sortOrder": options.sort_order,
            "limit": options.limit,
        }
        return self._request(
            "GET",
            f"admin/v1/orgs/{organization_id}/events-stream",
            params=params,
            result_type=OrganizationEventPage,
        )
