"""Data models for the Jira Software (Agile) REST API."""

from datetime import datetime
from typing import Any

from pydantic import Field

from atlassian_cloud.core.models import AtlassianModel

# ---------------------------------------------------------------------------
# Query options
# ---------------------------------------------------------------------------


class IssueOptions(AtlassianModel):
    """Options shared by every issue-listing endpoint."""

    jql: str | None = Field(default=None, description="JQL filter applied to the issues")
    validate_query: bool = Field(default=True, description="Validate the JQL query")
    fields: list[str] | None = Field(default=None, description="Fields to return per issue")
    expand: list[str] | None = None

    def to_params(self) -> dict[str, Any]:
        """Render the options as query parameters."""
        return {
            "jql": self.jql,
            "validateQuery": None if self.validate_query else False,
            "fields": self.fields,
            "expand": self.expand,
        }


class GetBoardsOptions(AtlassianModel):
    """Filters for listing boards."""

    board_type: str | None = Field(default=None, description="scrum, kanban or simple")
    board_name: str | None = None
    project_key_or_id: str | None = None
    account_id_location: str | None = None
    project_id_location: str | None = None
    include_private: bool = False
    negate_location_filtering: bool = False
    order_by: str | None = None
    expand: str | None = None
    filter_id: int | None = None

    def to_params(self) -> dict[str, Any]:
        """Render the options as query parameters."""
        return {
            "type": self.board_type,
            "name": self.board_name,
            "projectKeyOrId": self.project_key_or_id,
            "accountIdLocation": self.account_id_location,
            "projectLocation": self.project_id_location,
            "includePrivate": True if self.include_private else None,
            "negateLocationFiltering": True if self.negate_location_filtering else None,
            "orderBy": self.order_by,
            "expand": self.expand,
            "filterId": self.filter_id or None,
        }


# ---------------------------------------------------------------------------
# Boards
# ---------------------------------------------------------------------------


class BoardLocation(AtlassianModel):
    project_id: int | None = Field(default=None, alias="projectId")
    display_name: str | None = Field(default=None, alias="displayName")
    project_name: str | None = Field(default=None, alias="projectName")
    project_key: str | None = Field(default=None, alias="projectKey")
    project_type_key: str | None = Field(default=None, alias="projectTypeKey")
    avatar_uri: str | None = Field(default=None, alias="avatarURI")
    name: str | None = None


class Board(AtlassianModel):
    """A Scrum or Kanban board."""

    id: int | None = None
    self_link: str | None = Field(default=None, alias="self")
    name: str | None = None
    type: str | None = None
    location: BoardLocation | None = None


class BoardPage(AtlassianModel):
    max_results: int | None = Field(default=None, alias="maxResults")
    start_at: int | None = Field(default=None, alias="startAt")
    total: int | None = None
    is_last: bool | None = Field(default=None, alias="isLast")
    values: list[Board] | None = None


class BoardPayloadLocation(AtlassianModel):
    type: str | None = None
    project_key_or_id: str | None = Field(default=None, alias="projectKeyOrId")


class BoardPayload(AtlassianModel):
    """Body for creating a board from a saved filter."""

    name: str | None = None
    type: str | None = None
    filter_id: int | None = Field(default=None, alias="filterId")
    location: BoardPayloadLocation | None = None


class BoardFilter(AtlassianModel):
    id: str | None = None
    self_link: str | None = Field(default=None, alias="self")


class BoardColumnStatus(AtlassianModel):
    id: str | None = None
    self_link: str | None = Field(default=None, alias="self")


class BoardColumn(AtlassianModel):
    name: str | None = None
    statuses: list[BoardColumnStatus] | None = None


class BoardColumnConfig(AtlassianModel):
    columns: list[BoardColumn] | None = None
    constraint_type: str | None = Field(default=None, alias="constraintType")


class BoardEstimationField(AtlassianModel):
    field_id: str | None = Field(default=None, alias="fieldId")
    display_name: str | None = Field(default=None, alias="displayName")


class BoardEstimation(AtlassianModel):
    type: str | None = None
    field: BoardEstimationField | None = None


class BoardRanking(AtlassianModel):
    rank_custom_field_id: int | None = Field(default=None, alias="rankCustomFieldId")


class BoardConfiguration(AtlassianModel):
    """Columns, estimation and ranking setup of a board."""

    id: int | None = None
    name: str | None = None
    type: str | None = None
    self_link: str | None = Field(default=None, alias="self")
    location: BoardLocation | None = None
    filter: BoardFilter | None = None
    column_config: BoardColumnConfig | None = Field(default=None, alias="columnConfig")
    estimation: BoardEstimation | None = None
    ranking: BoardRanking | None = None


class EpicColor(AtlassianModel):
    key: str | None = None


class Epic(AtlassianModel):
    """An epic as seen by the Agile API."""

    id: int | None = None
    key: str | None = None
    self_link: str | None = Field(default=None, alias="self")
    name: str | None = None
    summary: str | None = None
    color: EpicColor | None = None
    done: bool | None = None


class EpicPage(AtlassianModel):
    max_results: int | None = Field(default=None, alias="maxResults")
    start_at: int | None = Field(default=None, alias="startAt")
    is_last: bool | None = Field(default=None, alias="isLast")
    values: list[Epic] | None = None


class AgileIssue(AtlassianModel):
    """An issue; ``fields`` is kept as the raw field map."""

    expand: str | None = None
    id: str | None = None
    self_link: str | None = Field(default=None, alias="self")
    key: str | None = None
    fields: dict[str, Any] | None = None


class IssuePage(AtlassianModel):
    expand: str | None = None
    start_at: int | None = Field(default=None, alias="startAt")
    max_results: int | None = Field(default=None, alias="maxResults")
    total: int | None = None
    issues: list[AgileIssue] | None = None


class IssueMovePayload(AtlassianModel):
    """Body for moving issues to the backlog, a board or an epic."""

    issues: list[str] = Field(default_factory=list)


class IssueRankPayload(AtlassianModel):
    """Body for moving and ranking issues on a board, backlog or sprint."""

    issues: list[str] | None = None
    rank_before_issue: str | None = Field(default=None, alias="rankBeforeIssue")
    rank_after_issue: str | None = Field(default=None, alias="rankAfterIssue")
    rank_custom_field_id: int | None = Field(default=None, alias="rankCustomFieldId")


class ProjectCategory(AtlassianModel):
    self_link: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None


class ProjectInsight(AtlassianModel):
    total_issue_count: int | None = Field(default=None, alias="totalIssueCount")
    last_issue_update_time: str | None = Field(default=None, alias="lastIssueUpdateTime")


class BoardProject(AtlassianModel):
    self_link: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    name: str | None = None
    project_category: ProjectCategory | None = Field(default=None, alias="projectCategory")
    simplified: bool | None = None
    style: str | None = None
    insight: ProjectInsight | None = None


class BoardProjectPage(AtlassianModel):
    max_results: int | None = Field(default=None, alias="maxResults")
    start_at: int | None = Field(default=None, alias="startAt")
    total: int | None = None
    is_last: bool | None = Field(default=None, alias="isLast")
    values: list[BoardProject] | None = None


class BoardVersion(AtlassianModel):
    self_link: str | None = Field(default=None, alias="self")
    id: int | None = None
    project_id: int | None = Field(default=None, alias="projectId")
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    release_date: datetime | None = Field(default=None, alias="releaseDate")


class BoardVersionPage(AtlassianModel):
    max_results: int | None = Field(default=None, alias="maxResults")
    start_at: int | None = Field(default=None, alias="startAt")
    is_last: bool | None = Field(default=None, alias="isLast")
    values: list[BoardVersion] | None = None


# ---------------------------------------------------------------------------
# Sprints
# ---------------------------------------------------------------------------


class Sprint(AtlassianModel):
    """A sprint of a Scrum board."""

    id: int | None = None
    self_link: str | None = Field(default=None, alias="self")
    state: str | None = Field(default=None, description="future, active or closed")
    name: str | None = None
    start_date: datetime | None = Field(default=None, alias="startDate")
    end_date: datetime | None = Field(default=None, alias="endDate")
    complete_date: datetime | None = Field(default=None, alias="completeDate")
    origin_board_id: int | None = Field(default=None, alias="originBoardId")
    goal: str | None = None


class SprintPage(AtlassianModel):
    max_results: int | None = Field(default=None, alias="maxResults")
    start_at: int | None = Field(default=None, alias="startAt")
    is_last: bool | None = Field(default=None, alias="isLast")
    total: int | None = None
    values: list[Sprint] | None = None


class SprintPayload(AtlassianModel):
    """Body for creating or updating a sprint. Dates are ISO 8601 strings."""

    name: str | None = None
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    origin_board_id: int | None = Field(default=None, alias="originBoardId")
    goal: str | None = None
    state: str | None = None
