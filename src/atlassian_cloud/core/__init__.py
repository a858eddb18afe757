"""Core interfaces, models and exceptions for atlassian-cloud-sdk."""

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
from atlassian_cloud.core.models import AtlassianModel, ResponseScheme
from atlassian_cloud.core.service import ResourceService, encode_query

__all__ = [
    "AtlassianModel",
    "ResponseScheme",
    "Connector",
    "ResourceService",
    "encode_query",
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
