"""Tests for the shared resource service helper."""

from unittest.mock import MagicMock

import pytest

from atlassian_cloud.core.exceptions import ErrorKind, ValidationError
from atlassian_cloud.core.service import ResourceService, encode_query


class TestEncodeQuery:
    """Tests for encode_query."""

    def test_sorted_by_key(self) -> None:
        """Test that keys are emitted in sorted order."""
        query = encode_query(
            {"q": "qq", "from": 1589197526, "to": 1605177926, "action": "user_added_to_group", "cursor": "cursor-id-sample"}
        )
        assert query == "action=user_added_to_group&cursor=cursor-id-sample&from=1589197526&q=qq&to=1605177926"

    def test_skips_empty_values(self) -> None:
        """Test that None, empty strings and empty lists are dropped."""
        assert encode_query({"a": None, "b": "", "c": [], "d": "x"}) == "d=x"

    def test_keeps_zero(self) -> None:
        """Test that zero is sent."""
        assert encode_query({"startAt": 0, "maxResults": 50}) == "maxResults=50&startAt=0"

    def test_booleans(self) -> None:
        """Test that booleans are lowercase."""
        assert encode_query({"done": False, "includePrivate": True}) == "done=false&includePrivate=true"

    def test_lists_are_comma_joined(self) -> None:
        """Test that list values become one comma separated value."""
        assert encode_query({"state": ["active", "future"]}) == "state=active%2Cfuture"

    def test_escaping(self) -> None:
        """Test that values are form encoded."""
        assert encode_query({"jql": "project = KP"}) == "jql=project+%3D+KP"

    def test_repeated_keys_keep_order(self) -> None:
        """Test that pairs with the same key keep their order."""
        assert encode_query([("b", "2"), ("a", "x"), ("b", "1")]) == "a=x&b=2&b=1"

    def test_empty(self) -> None:
        """Test that no values produce an empty string."""
        assert encode_query({}) == ""


class TestResourceService:
    """Tests for ResourceService dispatch."""

    def test_request_builds_and_calls(self, connector: MagicMock, prepared_request) -> None:
        """Test that the query is appended and the request dispatched."""
        service = ResourceService(connector)
        result, response = service._request("GET", "admin/v1/orgs", params={"cursor": "c1"}, result_type=dict)

        connector.new_request.assert_called_once_with("GET", "admin/v1/orgs?cursor=c1", None)
        connector.call.assert_called_once_with(prepared_request, dict)
        assert result is None
        assert response.code == 200

    def test_empty_query_not_appended(self, connector: MagicMock) -> None:
        """Test that no '?' is added without parameters."""
        service = ResourceService(connector)
        service._send("DELETE", "admin/v1/orgs/o/policies/p", params={"cursor": None})
        connector.new_request.assert_called_once_with("DELETE", "admin/v1/orgs/o/policies/p", None)

    @pytest.mark.parametrize("value", [None, "", 0])
    def test_require_rejects_empty(self, connector: MagicMock, value: object) -> None:
        """Test that missing identifiers raise ValidationError."""
        service = ResourceService(connector)
        with pytest.raises(ValidationError) as exc_info:
            service._require(value, ErrorKind.NO_BOARD_ID, "board_id")
        assert exc_info.value.kind is ErrorKind.NO_BOARD_ID
        assert exc_info.value.provider == "atlassian"

    @pytest.mark.parametrize("value", [1, "org-1", False])
    def test_require_accepts_values(self, connector: MagicMock, value: object) -> None:
        """Test that set identifiers pass."""
        ResourceService(connector)._require(value, ErrorKind.NO_BOARD_ID)
