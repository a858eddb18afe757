"""Shared pytest fixtures for atlassian-cloud-sdk tests."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from atlassian_cloud.atlassian.credentials import AtlassianCredentials
from atlassian_cloud.core.interfaces import Connector
from atlassian_cloud.core.models import ResponseScheme

SITE_URL = "https://test.atlassian.net/"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ATLASSIAN_* settings out of the tests."""
    for name in ("ATLASSIAN_SITE_URL", "ATLASSIAN_USER_EMAIL", "ATLASSIAN_API_TOKEN", "ATLASSIAN_BEARER_TOKEN"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_credentials():
    """Mock get_credentials to return test credentials."""
    with patch("atlassian_cloud.atlassian.base.get_credentials") as mock:
        mock.return_value = AtlassianCredentials(
            site_url=SITE_URL,
            email="test@example.com",
            api_token="test-token",
            bearer_token=None,
        )
        yield mock


@pytest.fixture
def ok_response() -> ResponseScheme:
    """A 200 envelope with an empty JSON object body."""
    return ResponseScheme(
        code=200,
        endpoint=SITE_URL,
        method="GET",
        headers={"Content-Type": "application/json"},
        raw=b"{}",
    )


@pytest.fixture
def prepared_request() -> requests.PreparedRequest:
    """Placeholder request returned by the mocked connector."""
    return requests.PreparedRequest()


@pytest.fixture
def connector(prepared_request: requests.PreparedRequest, ok_response: ResponseScheme) -> MagicMock:
    """Connector mock: new_request returns prepared_request, call returns (None, ok_response)."""
    mock = MagicMock(spec=Connector)
    mock.new_request.return_value = prepared_request
    mock.call.return_value = (None, ok_response)
    return mock
