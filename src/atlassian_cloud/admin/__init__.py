"""Atlassian Admin, user management and user provisioning (SCIM) APIs.

Services:
- OrganizationService: organizations, users, domains, audit events
- OrganizationPolicyService / OrganizationDirectoryService
- UserService / UserTokenService: managed accounts
- SCIMUserService / SCIMGroupService / SCIMSchemaService: provisioning

Example:
    from atlassian_cloud.admin import AdminClient

    with AdminClient(bearer_token="org-api-key") as admin:
        events, _ = admin.organization.events("org-1")
"""

from atlassian_cloud.admin.client import DEFAULT_ADMIN_SITE, SCIM, AdminClient
from atlassian_cloud.admin.organization import OrganizationService
from atlassian_cloud.admin.organization_directory import OrganizationDirectoryService
from atlassian_cloud.admin.organization_policy import OrganizationPolicyService
from atlassian_cloud.admin.scim_group import SCIMGroupService
from atlassian_cloud.admin.scim_schema import SCIMSchemaService
from atlassian_cloud.admin.scim_user import SCIMUserService
from atlassian_cloud.admin.user import UserService
from atlassian_cloud.admin.user_token import UserTokenService

__all__ = [
    "AdminClient",
    "DEFAULT_ADMIN_SITE",
    "SCIM",
    "OrganizationService",
    "OrganizationPolicyService",
    "OrganizationDirectoryService",
    "UserService",
    "UserTokenService",
    "SCIMUserService",
    "SCIMGroupService",
    "SCIMSchemaService",
]
