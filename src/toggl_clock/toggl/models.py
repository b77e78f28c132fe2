"""Pydantic models for Toggl API payloads."""

from pydantic import BaseModel, ConfigDict, Field

CREATED_WITH = "toggl-clock"
RUNNING_DURATION = -1


class TogglProject(BaseModel):
    """Toggl project model."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    workspace_id: int | None = Field(default=None, alias="wid")
    active: bool = True


class TogglTimeEntry(BaseModel):
    """Toggl time entry model as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    description: str | None = None
    project_id: int | None = None
    start: str | None = None
    wid: int | None = Field(default=None, alias="workspace_id")
    tags: list[str] | None = None
    duration: int = RUNNING_DURATION
    created_with: str | None = None

    @property
    def is_running(self) -> bool:
        """Whether the entry is still running."""
        return self.duration == RUNNING_DURATION

    @property
    def label(self) -> str:
        """Description for display, or the entry ID when there is none."""
        return self.description or f"#{self.id}"


class StartTimeEntry(BaseModel):
    """Body of a start request for a running time entry."""

    description: str
    project_id: int | None
    created_with: str = CREATED_WITH
    start: str
    wid: int
    tags: list[str] = Field(default_factory=list)
    duration: int = RUNNING_DURATION
