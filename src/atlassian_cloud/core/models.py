"""Shared data models: the response envelope and the pydantic base model."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from requests.structures import CaseInsensitiveDict


class AtlassianModel(BaseModel):
    """Base for every API schema.

    Field names follow Python conventions; the JSON names used by Atlassian
    are kept as aliases. Unknown fields are preserved.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body (JSON names, unset fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResponseScheme(BaseModel):
    """Uniform envelope around an HTTP response.

    Built once per call, on success and on failure, so the raw payload is
    always available for diagnostics.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    code: int = Field(description="HTTP status code")
    endpoint: str = Field(description="Final request URL")
    method: str = Field(description="HTTP method")
    headers: CaseInsensitiveDict = Field(
        default_factory=CaseInsensitiveDict,
        description="Response headers, looked up case-insensitively",
    )
    raw: bytes = Field(default=b"", description="Raw response body")

    @field_validator("headers", mode="before")
    @classmethod
    def _case_insensitive(cls, value: Any) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(value or {})

    @property
    def text(self) -> str:
        """Response body decoded as UTF-8."""
        return self.raw.decode("utf-8", errors="replace")

    def decode_json(self) -> Any:
        """Parse the raw body as JSON."""
        return json.loads(self.raw)
