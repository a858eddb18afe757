"""Tests for backlog move endpoints."""

from unittest.mock import MagicMock

import pytest

from atlassian_cloud.agile.board_backlog import BoardBacklogService
from atlassian_cloud.agile.models import IssueMovePayload, IssueRankPayload
from atlassian_cloud.core.exceptions import BadRequestError, ErrorKind, ValidationError
from atlassian_cloud.core.models import ResponseScheme


class TestBoardBacklogService:
    """Tests for BoardBacklogService."""

    def test_move(self, connector: MagicMock, ok_response) -> None:
        """Test moving issues to the backlog."""
        response = BoardBacklogService(connector).move(["KP-1", "KP-2"])

        connector.new_request.assert_called_once_with(
            "POST", "rest/agile/1.0/backlog/issue", IssueMovePayload(issues=["KP-1", "KP-2"])
        )
        assert response is ok_response

    def test_move_to(self, connector: MagicMock) -> None:
        """Test moving and ranking issues in a board's backlog."""
        payload = IssueRankPayload(issues=["KP-1"], rank_after_issue="KP-2")

        BoardBacklogService(connector).move_to(4, payload)

        connector.new_request.assert_called_once_with("POST", "rest/agile/1.0/backlog/4/issue", payload)

    def test_move_to_without_board(self, connector: MagicMock) -> None:
        """Test that a board ID is required."""
        with pytest.raises(ValidationError) as exc_info:
            BoardBacklogService(connector).move_to(0, IssueRankPayload(issues=["KP-1"]))

        assert exc_info.value.kind is ErrorKind.NO_BOARD_ID
        connector.new_request.assert_not_called()

    def test_move_bad_request(self, connector: MagicMock) -> None:
        """Test that a 400 surfaces with the response body."""
        envelope = ResponseScheme(
            code=400,
            endpoint="https://test.atlassian.net/rest/agile/1.0/backlog/issue",
            method="POST",
            raw=b'{"errorMessages":["Issue does not exist"]}',
        )
        connector.call.side_effect = BadRequestError(envelope, provider="agile")

        with pytest.raises(BadRequestError) as exc_info:
            BoardBacklogService(connector).move(["KP-999"])
        assert exc_info.value.response.decode_json()["errorMessages"] == ["Issue does not exist"]

    def test_move_payload_serialization(self) -> None:
        """Test the move body."""
        assert IssueMovePayload(issues=["KP-1"]).to_payload() == {"issues": ["KP-1"]}
