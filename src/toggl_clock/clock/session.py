"""Clock session keeping the running Toggl time entry in step with clock events."""

import logging
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from toggl_clock.clock.events import ClockEventSource, ClockInEvent
from toggl_clock.clock.notify import Notifier, report
from toggl_clock.clock.projects import ProjectCache
from toggl_clock.toggl import (
    DeleteResponse,
    ParseError,
    StartTimeEntry,
    TogglClient,
    TogglError,
    TogglTimeEntry,
    UnresolvedProject,
)
from toggl_clock.utils.timefmt import format_start_time

logger = logging.getLogger(__name__)


class CurrentEntry:
    """The one time entry known to be running, if any."""

    def __init__(self) -> None:
        self._entry: TogglTimeEntry | None = None

    @property
    def entry(self) -> TogglTimeEntry | None:
        return self._entry

    @property
    def is_active(self) -> bool:
        return self._entry is not None

    def set(self, entry: TogglTimeEntry) -> None:
        """Make an entry the current one, replacing any previous entry."""
        if self._entry is not None and self._entry.id != entry.id:
            logger.warning(f"Time entry {self._entry.id} replaced by {entry.id}")
        self._entry = entry

    def clear(self) -> None:
        self._entry = None


class TogglSession:
    """Reacts to clock-in, clock-out and clock-cancel events.

    Clock-in starts a running entry and records it once the service confirms.
    Clock-out stops the current entry and forgets it straight away, without
    waiting for the response. Clock-cancel deletes the current entry and
    forgets it only when the service answers 200; any other outcome keeps it.

    Requests are never sequenced against each other. A clock-out issued before
    the preceding clock-in has been confirmed finds no current entry, and the
    late start confirmation then records an entry that nothing will stop.
    """

    def __init__(
        self,
        client: TogglClient,
        projects: ProjectCache | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        """Initialize clock session.

        Args:
            client: Toggl API client.
            projects: Project cache; one is created when not given.
            notifier: Receives user-facing notifications.
        """
        self.client = client
        self.notifier = notifier
        self.projects = projects or ProjectCache(client, notifier)
        self.current = CurrentEntry()

    def resolve_project(self, project_name: str | None) -> int | None:
        """Resolve a project name, falling back to the default project.

        Args:
            project_name: Project name, or None to use the default project.

        Returns:
            Project ID, or None when nothing resolves.
        """
        if project_name is None:
            project_id = self.projects.default_project_id
        else:
            project_id = self.projects.lookup(project_name)

        if project_id is None:
            report(
                self.notifier,
                f"{UnresolvedProject(project_name)}; starting entry without a project",
                logging.WARNING,
            )
        return project_id

    def build_start_entry(
        self,
        description: str,
        tags: list[str] | None = None,
        project_id: int | None = None,
        now: datetime | None = None,
    ) -> StartTimeEntry:
        """Build the body of a start request.

        Args:
            description: Entry description.
            tags: Entry tags.
            project_id: Toggl project ID.
            now: Start time. Defaults to the current local time.

        Returns:
            Start request model.
        """
        return StartTimeEntry(
            description=description,
            project_id=project_id,
            start=format_start_time(now),
            wid=self.client.workspace_id,
            tags=list(tags or []),
        )

    def start_time_entry(
        self,
        description: str,
        tags: list[str] | None = None,
        project_name: str | None = None,
        *,
        sync: bool = False,
        now: datetime | None = None,
    ) -> Any:
        """Start a running time entry.

        This does not look at the current entry; starting while another
        entry runs leaves that one running on the service.

        Args:
            description: Entry description.
            tags: Entry tags.
            project_name: Project name; None uses the default project.
            sync: Block until the service has answered.
            now: Start time. Defaults to the current local time.

        Returns:
            Whatever the client returns for the POST (Result or Task).
        """
        body = self.build_start_entry(description, tags, self.resolve_project(project_name), now)
        return self.client.post(
            "/time_entries",
            body.model_dump(),
            sync=sync,
            on_success=self._on_start_success,
            on_failure=self._on_start_failure,
        )

    def _on_start_success(self, data: Any) -> None:
        try:
            entry = TogglTimeEntry.model_validate(data)
        except ValidationError as e:
            self._on_start_failure(ParseError(f"Unexpected time entry: {e}"))
            return

        self.current.set(entry)
        report(self.notifier, f"Toggl time entry started: {entry.label}")

    def _on_start_failure(self, error: TogglError) -> None:
        report(self.notifier, f"Starting Toggl time entry failed: {error}", logging.ERROR)

    def stop_time_entry(self, *, sync: bool = False) -> Any:
        """Stop the current time entry and forget it immediately.

        Args:
            sync: Block until the service has answered.

        Returns:
            Whatever the client returns for the PATCH, or None when idle.
        """
        entry = self.current.entry
        if entry is None:
            logger.debug("No running time entry to stop")
            return None

        outcome = self.client.patch(
            f"/time_entries/{entry.id}/stop",
            sync=sync,
            on_success=lambda data: report(self.notifier, f"Toggl time entry stopped: {entry.label}"),
            on_failure=lambda error: report(
                self.notifier, f"Stopping Toggl time entry failed: {error}", logging.ERROR
            ),
        )
        # Cleared on dispatch; the callbacks above only notify
        self.current.clear()
        return outcome

    def delete_time_entry(self, *, sync: bool = False) -> Any:
        """Delete the current time entry; forget it once the service answers 200.

        Args:
            sync: Block until the service has answered.

        Returns:
            Whatever the client returns for the DELETE, or None when idle.
        """
        entry = self.current.entry
        if entry is None:
            logger.debug("No running time entry to delete")
            return None

        def on_success(response: DeleteResponse) -> None:
            if response.status_code == 200:
                self.current.clear()
                report(self.notifier, f"Toggl time entry deleted: {entry.label}")
            else:
                report(
                    self.notifier,
                    f"Deleting Toggl time entry returned {response.status_code}; keeping it",
                    logging.WARNING,
                )

        return self.client.delete(
            f"/time_entries/{entry.id}",
            sync=sync,
            on_success=on_success,
            on_failure=lambda error: report(
                self.notifier, f"Deleting Toggl time entry failed: {error}", logging.ERROR
            ),
        )

    def on_clock_in(self, event: ClockInEvent) -> Any:
        """Handle a clock-in event."""
        return self.start_time_entry(event.description, event.tags, event.project)

    def on_clock_out(self) -> Any:
        """Handle a clock-out event."""
        return self.stop_time_entry()

    def on_clock_cancel(self) -> Any:
        """Handle a clock-cancel event."""
        return self.delete_time_entry()

    def enable_integration(self, source: ClockEventSource) -> None:
        """Start following the clock events of a source."""
        source.subscribe(self)
        logger.info("Toggl clock integration enabled")

    def disable_integration(self, source: ClockEventSource) -> None:
        """Stop following the clock events of a source."""
        source.unsubscribe(self)
        logger.info("Toggl clock integration disabled")
