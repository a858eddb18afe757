"""Tests for the exception hierarchy."""

import pytest

from atlassian_cloud.core.exceptions import (
    STATUS_ERRORS,
    AtlassianError,
    BadRequestError,
    DecodeError,
    ErrorKind,
    InternalServerError,
    InvalidStatusCodeError,
    NotFoundError,
    StatusError,
    UnauthorizedError,
    ValidationError,
    status_error_for,
)
from atlassian_cloud.core.models import ResponseScheme


@pytest.fixture
def not_found_response() -> ResponseScheme:
    return ResponseScheme(code=404, endpoint="https://test.atlassian.net/x", method="GET", raw=b"{}")


class TestAtlassianError:
    """Tests for AtlassianError."""

    def test_message_defaults_to_kind(self) -> None:
        """Test that the kind's description is used as message."""
        error = AtlassianError(kind=ErrorKind.NO_BOARD_ID)
        assert error.message == "no board id set"
        assert str(error) == "no board id set"

    def test_provider_prefix(self) -> None:
        """Test that the provider is prefixed to the message."""
        error = AtlassianError("boom", provider="agile")
        assert str(error) == "[agile] boom"
        assert error.details == {}

    def test_generic_message(self) -> None:
        """Test the message without kind or text."""
        assert AtlassianError().message == "atlassian error"


class TestValidationError:
    """Tests for ValidationError."""

    def test_fields(self) -> None:
        """Test that kind, field and provider are kept."""
        error = ValidationError(ErrorKind.NO_POLICY_ID, field="policy_id", provider="admin")
        assert error.kind is ErrorKind.NO_POLICY_ID
        assert error.field == "policy_id"
        assert str(error) == "[admin] no organization policy id set"
        assert isinstance(error, AtlassianError)


class TestStatusErrors:
    """Tests for status code errors."""

    @pytest.mark.parametrize(
        ("code", "error_class"),
        [
            (404, NotFoundError),
            (401, UnauthorizedError),
            (500, InternalServerError),
            (400, BadRequestError),
            (403, InvalidStatusCodeError),
            (429, InvalidStatusCodeError),
            (503, InvalidStatusCodeError),
        ],
    )
    def test_status_error_for(self, code: int, error_class: type) -> None:
        """Test the code to class mapping."""
        assert status_error_for(code) is error_class

    def test_mapping_covers_four_codes(self) -> None:
        """Test that only the four classified codes are mapped."""
        assert set(STATUS_ERRORS) == {400, 401, 404, 500}

    def test_response_attached(self, not_found_response: ResponseScheme) -> None:
        """Test that the envelope is available on the error."""
        error = NotFoundError(not_found_response, provider="admin")
        assert error.response is not_found_response
        assert error.status_code == 404
        assert error.kind is ErrorKind.NOT_FOUND
        assert str(error) == "[admin] no atlassian resource found"
        assert isinstance(error, StatusError)

    def test_invalid_status_message(self, not_found_response: ResponseScheme) -> None:
        """Test the message for unclassified codes."""
        error = InvalidStatusCodeError(not_found_response)
        assert error.message.startswith("invalid http response status")


class TestDecodeError:
    """Tests for DecodeError."""

    def test_fields(self, not_found_response: ResponseScheme) -> None:
        """Test that DecodeError carries the envelope and kind."""
        error = DecodeError(not_found_response, "bad json", provider="agile")
        assert error.kind is ErrorKind.DECODE
        assert error.response is not_found_response
        assert str(error) == "[agile] bad json"
