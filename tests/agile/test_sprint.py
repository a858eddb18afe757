"""Tests for sprint endpoints."""

from unittest.mock import MagicMock

import pytest

from atlassian_cloud.agile.models import IssueOptions, IssuePage, IssueRankPayload, Sprint, SprintPayload
from atlassian_cloud.agile.sprint import SprintService
from atlassian_cloud.core.exceptions import ErrorKind, ValidationError

SPRINT = "rest/agile/1.0/sprint"


@pytest.fixture
def payload() -> SprintPayload:
    return SprintPayload(
        name="Sprint 1",
        start_date="2021-05-01T00:00:00.000Z",
        end_date="2021-05-15T00:00:00.000Z",
        origin_board_id=4,
        goal="Ship it",
    )


class TestSprintService:
    """Tests for SprintService."""

    def test_get(self, connector: MagicMock, prepared_request) -> None:
        """Test reading one sprint."""
        SprintService(connector).get(8)

        connector.new_request.assert_called_once_with("GET", f"{SPRINT}/8", None)
        connector.call.assert_called_once_with(prepared_request, Sprint)

    def test_get_without_id(self, connector: MagicMock) -> None:
        """Test that sprint ID 0 is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SprintService(connector).get(0)

        assert exc_info.value.kind is ErrorKind.NO_SPRINT_ID
        connector.new_request.assert_not_called()

    def test_create(self, connector: MagicMock, payload: SprintPayload) -> None:
        """Test creating a sprint."""
        SprintService(connector).create(payload)

        connector.new_request.assert_called_once_with("POST", SPRINT, payload)
        assert payload.to_payload() == {
            "name": "Sprint 1",
            "startDate": "2021-05-01T00:00:00.000Z",
            "endDate": "2021-05-15T00:00:00.000Z",
            "originBoardId": 4,
            "goal": "Ship it",
        }

    def test_create_without_payload(self, connector: MagicMock) -> None:
        """Test that create requires a payload."""
        with pytest.raises(ValidationError) as exc_info:
            SprintService(connector).create(None)
        assert exc_info.value.kind is ErrorKind.NO_PAYLOAD

    def test_update(self, connector: MagicMock, payload: SprintPayload) -> None:
        """Test that update replaces the sprint."""
        SprintService(connector).update(8, payload)
        connector.new_request.assert_called_once_with("PUT", f"{SPRINT}/8", payload)

    def test_path(self, connector: MagicMock) -> None:
        """Test that a partial update is a POST."""
        payload = SprintPayload(goal="New goal")
        SprintService(connector).path(8, payload)
        connector.new_request.assert_called_once_with("POST", f"{SPRINT}/8", payload)

    def test_path_without_payload(self, connector: MagicMock) -> None:
        """Test that path requires a payload."""
        with pytest.raises(ValidationError):
            SprintService(connector).path(8, None)

    def test_delete(self, connector: MagicMock) -> None:
        """Test deleting a sprint."""
        SprintService(connector).delete(8)
        connector.new_request.assert_called_once_with("DELETE", f"{SPRINT}/8", None)

    def test_issues(self, connector: MagicMock, prepared_request) -> None:
        """Test listing sprint issues."""
        SprintService(connector).issues(8, IssueOptions(jql="status = Done"))

        connector.new_request.assert_called_once_with(
            "GET", f"{SPRINT}/8/issue?jql=status+%3D+Done&maxResults=50&startAt=0", None
        )
        connector.call.assert_called_once_with(prepared_request, IssuePage)

    def test_start(self, connector: MagicMock) -> None:
        """Test starting a sprint."""
        SprintService(connector).start(8)

        connector.new_request.assert_called_once_with("POST", f"{SPRINT}/8", SprintPayload(state="active"))

    def test_close(self, connector: MagicMock) -> None:
        """Test closing a sprint."""
        SprintService(connector).close(8)

        connector.new_request.assert_called_once_with("POST", f"{SPRINT}/8", SprintPayload(state="closed"))

    def test_state_body(self) -> None:
        """Test that state changes send only the state."""
        assert SprintPayload(state="active").to_payload() == {"state": "active"}

    def test_move(self, connector: MagicMock) -> None:
        """Test moving issues into a sprint."""
        payload = IssueRankPayload(issues=["KP-1"])
        SprintService(connector).move(8, payload)
        connector.new_request.assert_called_once_with("POST", f"{SPRINT}/8/issue", payload)

    @pytest.mark.parametrize("method", ["start", "close", "delete"])
    def test_sprint_id_required(self, connector: MagicMock, method: str) -> None:
        """Test that lifecycle operations require a sprint ID."""
        with pytest.raises(ValidationError):
            getattr(SprintService(connector), method)(0)
        connector.new_request.assert_not_called()

    def test_sprint_decoding(self) -> None:
        """Test decoding sprint dates."""
        sprint = Sprint.model_validate(
            {"id": 8, "state": "active", "name": "Sprint 1", "startDate": "2021-05-01T00:00:00.000Z", "originBoardId": 4}
        )
        assert sprint.start_date.day == 1
        assert sprint.origin_board_id == 4
