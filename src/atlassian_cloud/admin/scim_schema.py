"""SCIM schema discovery endpoints. Filtering, paging and sorting are not supported."""

from atlassian_cloud.admin.models import SCIMSchema, SCIMSchemaPage, ServiceProviderConfig
from atlassian_cloud.core.exceptions import ErrorKind
from atlassian_cloud.core.models import ResponseScheme
from atlassian_cloud.core.service import ResourceService

GROUP_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:Group"
USER_SCHEMA = "urn:ietf:params:scim:schemas:core:2.0:User"
ENTERPRISE_USER_SCHEMA = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"


class SCIMSchemaService(ResourceService):
    provider_name = "admin"

    def _directory_path(self, directory_id: str) -> str:
        self._require(directory_id, ErrorKind.NO_DIRECTORY_ID, "directory_id")
        return f"scim/directory/{directory_id}"

    def gets(self, directory_id: str) -> tuple[SCIMSchemaPage, ResponseScheme]:
        """List every schema supported by the directory."""
        path = self._directory_path(directory_id)
        return self._request("GET", f"{path}/Schemas", result_type=SCIMSchemaPage)

    def group(self, directory_id: str) -> tuple[SCIMSchema, ResponseScheme]:
        """Get the core group schema."""
        path = self._directory_path(directory_id)
        return self._request("GET", f"{path}/Schemas/{GROUP_SCHEMA}", result_type=SCIMSchema)

    def user(self, directory_id: str) -> tuple[SCIMSchema, ResponseScheme]:
        """Get the core user schema."""
        path = self._directory_path(directory_id)
        return self._request("GET", f"{path}/Schemas/{USER_SCHEMA}", result_type=SCIMSchema)

    def enterprise(self, directory_id: str) -> tuple[SCIMSchema, ResponseScheme]:
        """Get the enterprise user extension schema."""
        path = self._directory_path(directory_id)
        return self._request("GET", f"{path}/Schemas/{ENTERPRISE_USER_SCHEMA}", result_type=SCIMSchema)

    def feature(self, directory_id: str) -> tuple[ServiceProviderConfig, ResponseScheme]:
        """Get the SCIM features supported by the directory."""
        path = self._directory_path(directory_id)
        return self._request("GET", f"{path}/ServiceProviderConfig", result_type=ServiceProviderConfig)
