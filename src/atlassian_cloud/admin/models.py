"""Data models for the Atlassian Admin, user management and SCIM APIs.

JSON names are kept as aliases; every field is optional so partial API
responses decode and request bodies omit whatever is not set.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from atlassian_cloud.core.exceptions import ErrorKind, ValidationError
from atlassian_cloud.core.models import AtlassianModel

# ---------------------------------------------------------------------------
# Shared links / paging
# ---------------------------------------------------------------------------


class LinkSelf(AtlassianModel):
    """Link to the entity itself."""

    self_link: str | None = Field(default=None, alias="self")


class LinkPage(AtlassianModel):
    """Links to the neighbouring pages of a cursor-paginated result."""

    self_link: str | None = Field(default=None, alias="self")
    prev: str | None = None
    next: str | None = None


class CursorMeta(AtlassianModel):
    """Cursor metadata returned by paginated Admin endpoints."""

    next: str | None = Field(default=None, description="Cursor of the next page")
    page_size: int | None = None
    total: int | None = None


class GenericActionSuccess(AtlassianModel):
    """Body returned by directory actions such as suspend/restore."""

    message: str | None = None


# ---------------------------------------------------------------------------
# Organizations
# ---------------------------------------------------------------------------


class OrganizationAttributes(AtlassianModel):
    name: str | None = None


class RelatedLinks(AtlassianModel):
    related: str | None = None


class OrganizationRelation(AtlassianModel):
    links: RelatedLinks | None = None


class OrganizationRelationships(AtlassianModel):
    domains: OrganizationRelation | None = None
    users: OrganizationRelation | None = None


class Organization(AtlassianModel):
    """An Atlassian organization."""

    id: str | None = Field(default=None, description="Organization ID")
    type: str | None = None
    attributes: OrganizationAttributes | None = None
    relationships: OrganizationRelationships | None = None
    links: LinkSelf | None = None


class OrganizationPage(AtlassianModel):
    data: list[Organization] | None = None
    links: LinkPage | None = None


class OrganizationResponse(AtlassianModel):
    data: Organization | None = None


class OrganizationUserProduct(AtlassianModel):
    key: str | None = None
    name: str | None = None
    url: str | None = None
    last_active: str | None = None


class OrganizationUser(AtlassianModel):
    """A managed account inside an organization."""

    account_id: str | None = None
    account_type: str | None = None
    account_status: str | None = None
    name: str | None = None
    picture: str | None = None
    email: str | None = None
    access_billable: bool | None = None
    last_active: str | None = None
    product_access: list[OrganizationUserProduct] | None = None
    links: LinkSelf | None = None


class OrganizationUserPage(AtlassianModel):
    data: list[OrganizationUser] | None = None
    links: LinkPage | None = None
    meta: CursorMeta | None = None


class DomainClaim(AtlassianModel):
    type: str | None = None
    status: str | None = None


class DomainAttributes(AtlassianModel):
    name: str | None = None
    claim: DomainClaim | None = None


class OrganizationDomain(AtlassianModel):
    """A verified (or pending) domain of an organization."""

    id: str | None = None
    type: str | None = None
    attributes: DomainAttributes | None = None
    links: LinkSelf | None = None


class OrganizationDomainPage(AtlassianModel):
    data: list[OrganizationDomain] | None = None
    links: LinkPage | None = None


class OrganizationDomainResponse(AtlassianModel):
    data: OrganizationDomain | None = None


# ---------------------------------------------------------------------------
# Audit events
# ---------------------------------------------------------------------------


class OrganizationEventOptions(AtlassianModel):
    """Filters for the organization audit log.

    ``from_date``/``to_date`` are sent as UNIX epoch seconds. Naive datetimes
    are read as UTC.
    """

    q: str | None = Field(default=None, description="Single query term")
    from_date: datetime | None = Field(default=None, description="Earliest event time")
    to_date: datetime | None = Field(default=None, description="Latest event time")
    action: str | None = Field(default=None, description="Action type filter")


class OrganizationEventStreamOptions(AtlassianModel):
    """Filters for the audit event stream.

    Times are sent as epoch milliseconds; naive datetimes are read as UTC.
    """

    from_date: datetime | None = None
    to_date: datetime | None = None
    cursor: str | None = None
    sort_order: str | None = Field(default=None, description="'asc' or 'desc'")
    limit: int | None = None


class EventActor(AtlassianModel):
    id: str | None = None
    name: str | None = None
    links: LinkSelf | None = None


class EventObjectLinks(AtlassianModel):
    self_link: str | None = Field(default=None, alias="self")
    alt: str | None = None


class EventObject(AtlassianModel):
    id: str | None = None
    type: str | None = None
    links: EventObjectLinks | None = None


class EventLocation(AtlassianModel):
    ip: str | None = None
    geo: str | None = None


class EventAttributes(AtlassianModel):
    time: str | None = None
    action: str | None = None
    actor: EventActor | None = None
    context: list[EventObject] | None = None
    container: list[EventObject] | None = None
    location: EventLocation | None = None


class OrganizationEvent(AtlassianModel):
    """A single audit log entry."""

    id: str | None = None
    type: str | None = None
    attributes: EventAttributes | None = None
    links: LinkSelf | None = None


class OrganizationEventPage(AtlassianModel):
    data: list[OrganizationEvent] | None = None
    links: LinkPage | None = None
    meta: CursorMeta | None = None


class OrganizationEventResponse(AtlassianModel):
    data: OrganizationEvent | None = None


class EventActionAttributes(AtlassianModel):
    display_name: str | None = Field(default=None, alias="displayName")
    group_display_name: str | None = Field(default=None, alias="groupDisplayName")


class EventAction(AtlassianModel):
    id: str | None = None
    type: str | None = None
    attributes: EventActionAttributes | None = None


class OrganizationEventActions(AtlassianModel):
    data: list[EventAction] | None = None


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class PolicyResource(AtlassianModel):
    id: str | None = None
    application_status: str | None = Field(default=None, alias="applicationStatus")


class PolicyAttributes(AtlassianModel):
    type: str | None = None
    name: str | None = None
    status: str | None = None
    resources: list[PolicyResource] | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


class PolicyData(AtlassianModel):
    """A policy record; also the body for create and update."""

    id: str | None = None
    type: str | None = None
    attributes: PolicyAttributes | None = None


class Policy(AtlassianModel):
    data: PolicyData | None = None


class PolicyPage(AtlassianModel):
    data: list[PolicyData] | None = None
    meta: CursorMeta | None = None
    links: LinkPage | None = None


# ---------------------------------------------------------------------------
# Directory
# ---------------------------------------------------------------------------


class ProductLastActive(AtlassianModel):
    id: str | None = None
    key: str | None = None
    name: str | None = None
    url: str | None = None
    last_active: str | None = None


class UserProductAccessData(AtlassianModel):
    product_access: list[ProductLastActive] | None = None
    added_to_org: str | None = None


class UserProductAccess(AtlassianModel):
    """Last-active dates of a managed user, per product."""

    data: UserProductAccessData | None = None


# ---------------------------------------------------------------------------
# User management
# ---------------------------------------------------------------------------


class AdminUserExtendedProfile(AtlassianModel):
    job_title: str | None = None
    team_type: str | None = None
    department: str | None = None
    organization: str | None = None
    location: str | None = None
    phone_number: str | None = None


class AdminUserPrivacySettings(AtlassianModel):
    name: str | None = None
    nickname: str | None = None
    picture: str | None = None
    extended_profile_job_title: str | None = Field(default=None, alias="extended_profile.job_title")
    extended_profile_department: str | None = Field(default=None, alias="extended_profile.department")
    extended_profile_organization: str | None = Field(default=None, alias="extended_profile.organization")
    extended_profile_location: str | None = Field(default=None, alias="extended_profile.location")
    zoneinfo: str | None = None
    email: str | None = None
    extended_profile_phone_number: str | None = Field(default=None, alias="extended_profile.phone_number")
    extended_profile_team_type: str | None = Field(default=None, alias="extended_profile.team_type")


class AdminUserAccount(AtlassianModel):
    """Profile of a managed Atlassian account."""

    account_id: str | None = None
    name: str | None = None
    nickname: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    email: str | None = None
    picture: str | None = None
    account_type: str | None = None
    account_status: str | None = None
    email_verified: bool | None = None
    extended_profile: AdminUserExtendedProfile | None = None
    privacy_settings: AdminUserPrivacySettings | None = None


class AdminUser(AtlassianModel):
    account: AdminUserAccount | None = None


class AdminUserUpdate(AtlassianModel):
    """Body for a profile update; unset fields are left unchanged."""

    name: str | None = None
    nickname: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    extended_profile: AdminUserExtendedProfile | None = None


class PermissionReason(AtlassianModel):
    key: str | None = None


class PermissionGrant(AtlassianModel):
    allowed: bool | None = None
    reason: PermissionReason | None = None


class ProfilePermissions(AtlassianModel):
    name: PermissionGrant | None = None
    nickname: PermissionGrant | None = None
    zoneinfo: PermissionGrant | None = None
    locale: PermissionGrant | None = None
    extended_profile_phone_number: PermissionGrant | None = Field(default=None, alias="extended_profile.phone_number")
    extended_profile_job_title: PermissionGrant | None = Field(default=None, alias="extended_profile.job_title")
    extended_profile_organization: PermissionGrant | None = Field(default=None, alias="extended_profile.organization")
    extended_profile_department: PermissionGrant | None = Field(default=None, alias="extended_profile.department")
    extended_profile_location: PermissionGrant | None = Field(default=None, alias="extended_profile.location")
    extended_profile_team_type: PermissionGrant | None = Field(default=None, alias="extended_profile.team_type")


class AdminUserPermission(AtlassianModel):
    """What the caller may do with a managed account."""

    email_set: PermissionGrant | None = Field(default=None, alias="email.set")
    lifecycle_enablement: PermissionGrant | None = Field(default=None, alias="lifecycle.enablement")
    profile: ProfilePermissions | None = None
    profile_write: ProfilePermissions | None = Field(default=None, alias="profile.write")
    profile_read: PermissionGrant | None = Field(default=None, alias="profile.read")
    linked_accounts_read: PermissionGrant | None = Field(default=None, alias="linkedAccounts.read")
    api_token_read: PermissionGrant | None = Field(default=None, alias="apiToken.read")
    api_token_delete: PermissionGrant | None = Field(default=None, alias="apiToken.delete")
    avatar: PermissionGrant | None = None
    privacy_set: PermissionGrant | None = Field(default=None, alias="privacy.set")
    session_read: PermissionGrant | None = Field(default=None, alias="session.read")


class DisableUserPayload(AtlassianModel):
    """Body of a lifecycle disable call."""

    message: str | None = Field(default=None, description="Reason shown to the user")


class UserToken(AtlassianModel):
    """An API token owned by a managed account."""

    id: str | None = None
    label: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    last_access: str | None = Field(default=None, alias="lastAccess")


# ---------------------------------------------------------------------------
# SCIM users
# ---------------------------------------------------------------------------


class SCIMMeta(AtlassianModel):
    resource_type: str | None = Field(default=None, alias="resourceType")
    location: str | None = None
    last_modified: str | None = Field(default=None, alias="lastModified")
    created: str | None = None


class SCIMUserGroup(AtlassianModel):
    type: str | None = None
    value: str | None = None
    display: str | None = None
    ref: str | None = Field(default=None, alias="$ref")


class SCIMUserEmail(AtlassianModel):
    value: str | None = None
    type: str | None = None
    primary: bool | None = None


class SCIMUserName(AtlassianModel):
    formatted: str | None = None
    family_name: str | None = Field(default=None, alias="familyName")
    given_name: str | None = Field(default=None, alias="givenName")
    middle_name: str | None = Field(default=None, alias="middleName")
    honorific_prefix: str | None = Field(default=None, alias="honorificPrefix")
    honorific_suffix: str | None = Field(default=None, alias="honorificSuffix")


class SCIMUserPhoneNumber(AtlassianModel):
    value: str | None = None
    type: str | None = None
    primary: bool | None = None


class SCIMEnterpriseUserInfo(AtlassianModel):
    organization: str | None = None
    department: str | None = None


class SCIMExtension(AtlassianModel):
    atlassian_account_id: str | None = Field(default=None, alias="atlassianAccountId")


class SCIMUser(AtlassianModel):
    """A user provisioned through SCIM; also the create/replace body."""

    id: str | None = None
    external_id: str | None = Field(default=None, alias="externalId")
    meta: SCIMMeta | None = None
    groups: list[SCIMUserGroup] | None = None
    user_name: str | None = Field(default=None, alias="userName")
    emails: list[SCIMUserEmail] | None = None
    name: SCIMUserName | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    nick_name: str | None = Field(default=None, alias="nickName")
    title: str | None = None
    preferred_language: str | None = Field(default=None, alias="preferredLanguage")
    department: str | None = None
    organization: str | None = None
    timezone: str | None = None
    phone_numbers: list[SCIMUserPhoneNumber] | None = Field(default=None, alias="phoneNumbers")
    active: bool | None = None
    enterprise_info: SCIMEnterpriseUserInfo | None = Field(
        default=None,
        alias="urn:ietf:params:scim:schemas:extension:enterprise:2.1:User",
    )
    scim_extension: SCIMExtension | None = Field(
        default=None,
        alias="urn:scim:schemas:extension:atlassian-external:1.1",
    )


class SCIMUserPage(AtlassianModel):
    schemas: list[str] | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    start_index: int | None = Field(default=None, alias="startIndex")
    items_per_page: int | None = Field(default=None, alias="itemsPerPage")
    resources: list[SCIMUser] | None = Field(default=None, alias="Resources")


class SCIMUserGetsOptions(AtlassianModel):
    """Query options for listing SCIM users."""

    attributes: list[str] | None = None
    excluded_attributes: list[str] | None = None
    filter: str | None = None


class SCIMUserComplexOperation(AtlassianModel):
    value: str | None = None
    value_type: str | None = Field(default=None, alias="type", description="work, home or other")
    primary: bool | None = None


class SCIMUserToPathOperation(AtlassianModel):
    op: str | None = None
    path: str | None = None
    value: Any = None


class SCIMUserToPath(AtlassianModel):
    """PATCH body for a SCIM user, built up one operation at a time.

    Example:
        payload = SCIMUserToPath(schemas=["urn:ietf:params:scim:api:messages:2.0:PatchOp"])
        payload.add_string_operation("replace", "displayName", "Jane Doe")
        payload.add_bool_operation("replace", "active", False)
    """

    schemas: list[str] | None = None
    operations: list[SCIMUserToPathOperation] | None = None

    def _append(self, operation: str, path: str, value: Any) -> None:
        if not operation:
            raise ValidationError(ErrorKind.NO_SCIM_OPERATION, field="operation", provider="admin")
        if not path:
            raise ValidationError(ErrorKind.NO_SCIM_PATH, field="path", provider="admin")
        if self.operations is None:
            self.operations = []
        self.operations.append(SCIMUserToPathOperation(op=operation, path=path, value=value))

    def add_string_operation(self, operation: str, path: str, value: str) -> None:
        """Append an operation with a string value.

        Raises:
            ValidationError: If operation, path or value is empty
        """
        if operation and path and not value:
            raise ValidationError(ErrorKind.NO_SCIM_VALUE, field="value", provider="admin")
        self._append(operation, path, value)

    def add_bool_operation(self, operation: str, path: str, value: bool) -> None:
        """Append an operation with a boolean value."""
        self._append(operation, path, value)

    def add_complex_operation(
        self,
        operation: str,
        path: str,
        values: list[SCIMUserComplexOperation],
    ) -> None:
        """Append an operation whose value is a list of typed entries.

        Raises:
            ValidationError: If operation or path is empty, or values is empty
        """
        if operation and path and not values:
            raise ValidationError(ErrorKind.NO_SCIM_COMPLEX_VALUE, field="values", provider="admin")
        self._append(operation, path, values)


# ---------------------------------------------------------------------------
# SCIM groups
# ---------------------------------------------------------------------------


class SCIMGroupMember(AtlassianModel):
    type: str | None = None
    value: str | None = None
    display: str | None = None
    ref: str | None = Field(default=None, alias="$ref")


class SCIMGroup(AtlassianModel):
    """A group provisioned through SCIM."""

    schemas: list[str] | None = None
    id: str | None = None
    external_id: str | None = Field(default=None, alias="externalId")
    display_name: str | None = Field(default=None, alias="displayName")
    members: list[SCIMGroupMember] | None = None
    meta: SCIMMeta | None = None


class SCIMGroupPage(AtlassianModel):
    schemas: list[str] | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    start_index: int | None = Field(default=None, alias="startIndex")
    items_per_page: int | None = Field(default=None, alias="itemsPerPage")
    resources: list[SCIMGroup] | None = Field(default=None, alias="Resources")


class SCIMGroupName(AtlassianModel):
    """Body for creating or renaming a SCIM group."""

    display_name: str = Field(alias="displayName")


class SCIMGroupOperationValue(AtlassianModel):
    value: str | None = None
    display: str | None = None


class SCIMGroupOperation(AtlassianModel):
    op: str | None = None
    path: str | None = None
    value: list[SCIMGroupOperationValue] | None = None


class SCIMGroupPath(AtlassianModel):
    """PATCH body for a SCIM group (membership changes)."""

    schemas: list[str] | None = None
    operations: list[SCIMGroupOperation] | None = Field(default=None, alias="Operations")


# ---------------------------------------------------------------------------
# SCIM schemas
# ---------------------------------------------------------------------------


class SCIMSubAttribute(AtlassianModel):
    name: str | None = None
    type: str | None = None
    multi_valued: bool | None = Field(default=None, alias="multiValued")
    description: str | None = None
    required: bool | None = None
    case_exact: bool | None = Field(default=None, alias="caseExact")
    mutability: str | None = None
    returned: str | None = None
    uniqueness: str | None = None


class SCIMAttribute(SCIMSubAttribute):
    sub_attributes: list[SCIMSubAttribute] | None = Field(default=None, alias="subAttributes")


class SCIMResourceMeta(AtlassianModel):
    resource_type: str | None = Field(default=None, alias="resourceType")
    location: str | None = None


class SCIMSchema(AtlassianModel):
    """Definition of one SCIM resource schema."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    attributes: list[SCIMAttribute] | None = None
    meta: SCIMResourceMeta | None = None


class SCIMSchemaPage(AtlassianModel):
    total_results: int | None = Field(default=None, alias="totalResults")
    items_per_page: int | None = Field(default=None, alias="itemsPerPage")
    start_index: int | None = Field(default=None, alias="startIndex")
    schemas: list[str] | None = None
    resources: list[SCIMSchema] | None = Field(default=None, alias="Resources")


class SupportedFeature(AtlassianModel):
    supported: bool | None = None


class BulkFeature(SupportedFeature):
    max_operations: int | None = Field(default=None, alias="maxOperations")
    max_payload_size: int | None = Field(default=None, alias="maxPayloadSize")


class FilterFeature(SupportedFeature):
    max_results: int | None = Field(default=None, alias="maxResults")


class AuthenticationScheme(AtlassianModel):
    type: str | None = None
    name: str | None = None
    description: str | None = None


class ServiceProviderMeta(AtlassianModel):
    location: str | None = None
    resource_type: str | None = Field(default=None, alias="resourceType")
    last_modified: datetime | None = Field(default=None, alias="lastModified")
    created: datetime | None = None


class ServiceProviderConfig(AtlassianModel):
    """SCIM features supported by the directory."""

    schemas: list[str] | None = None
    patch: SupportedFeature | None = None
    bulk: BulkFeature | None = None
    filter: FilterFeature | None = None
    change_password: SupportedFeature | None = Field(default=None, alias="changePassword")
    sort: SupportedFeature | None = None
    etag: SupportedFeature | None = None
    authentication_schemes: list[AuthenticationScheme] | None = Field(default=None, alias="authenticationSchemes")
    meta: ServiceProviderMeta | None = None
