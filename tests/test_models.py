"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from toggl_clock.clock import ClockInEvent
from toggl_clock.toggl import StartTimeEntry, TogglProject, TogglTimeEntry


class TestTogglModels:
    """Test Toggl models."""

    def test_project_from_api(self) -> None:
        """Test creating a project from an API payload."""
        project = TogglProject.model_validate(
            {"id": 7, "name": "Reports", "wid": 42, "active": True, "color": "#06aaf5"}
        )

        assert project.id == 7
        assert project.name == "Reports"
        assert project.workspace_id == 42

    def test_project_requires_name(self) -> None:
        """Test that a project without a name is rejected."""
        with pytest.raises(ValidationError):
            TogglProject.model_validate({"id": 7})

    def test_time_entry_from_api(self) -> None:
        """Test creating a time entry from a start response."""
        entry = TogglTimeEntry.model_validate(
            {
                "id": 555,
                "workspace_id": 42,
                "project_id": None,
                "description": "Write report",
                "start": "2024-01-02T07:30:00+00:00",
                "stop": None,
                "duration": -1,
                "tags": ["work"],
                "at": "2024-01-02T07:30:01+00:00",
            }
        )

        assert entry.id == 555
        assert entry.wid == 42
        assert entry.project_id is None
        assert entry.tags == ["work"]
        assert entry.is_running is True

    def test_stopped_time_entry(self, running_entry: TogglTimeEntry) -> None:
        """Test that a non-negative duration is a completed entry."""
        stopped = running_entry.model_copy(update={"duration": 3600})

        assert stopped.is_running is False

    def test_time_entry_without_start(self) -> None:
        """Test that only the id is required from a start response."""
        entry = TogglTimeEntry.model_validate({"id": 555})

        assert entry.start is None
        assert entry.label == "#555"

    def test_label_uses_description(self, running_entry: TogglTimeEntry) -> None:
        """Test that the label is the description when there is one."""
        assert running_entry.label == "Write report"

    def test_start_entry_fields(self) -> None:
        """Test that a start body has exactly the wire fields."""
        body = StartTimeEntry(
            description="Write report",
            project_id=7,
            start="2024-01-02T09:30:00+02:00",
            wid=42,
            tags=["work"],
        ).model_dump()

        assert body == {
            "description": "Write report",
            "project_id": 7,
            "created_with": "toggl-clock",
            "start": "2024-01-02T09:30:00+02:00",
            "wid": 42,
            "tags": ["work"],
            "duration": -1,
        }


class TestClockInEvent:
    """Test clock event model."""

    def test_defaults(self) -> None:
        """Test that tags and project are optional."""
        event = ClockInEvent(description="Write report")

        assert event.tags == []
        assert event.project is None
