"""Cache of Toggl project names to project IDs."""

import logging
from typing import Any

from pydantic import ValidationError

from toggl_clock.clock.notify import Notifier, report
from toggl_clock.toggl import ParseError, TogglClient, TogglError, TogglProject, UnresolvedProject

logger = logging.getLogger(__name__)


class ProjectCache:
    """Holds the name to ID mapping of the workspace's projects.

    The mapping is replaced wholesale by each successful refresh and left
    alone by a failed one. When two projects share a name, the one listed
    last by the API wins.
    """

    def __init__(self, client: TogglClient, notifier: Notifier | None = None) -> None:
        """Initialize project cache.

        Args:
            client: Toggl API client.
            notifier: Receives refresh and selection notifications.
        """
        self.client = client
        self.notifier = notifier
        self._projects: dict[str, int] = {}
        self._default_project_id: int | None = None

    def refresh(self, *, sync: bool = False, timeout: float | None = None) -> Any:
        """Reload the project list from the API.

        Args:
            sync: Block until the list has been loaded.
            timeout: Request timeout overriding the client default.

        Returns:
            Whatever the client returns for the GET (Result or Task).
        """
        return self.client.get(
            "/projects",
            sync=sync,
            on_success=self._on_refresh_success,
            on_failure=self._on_refresh_failure,
            timeout=timeout,
        )

    def _on_refresh_success(self, data: Any) -> None:
        try:
            projects = [TogglProject.model_validate(item) for item in data or []]
        except (ValidationError, TypeError) as e:
            self._on_refresh_failure(ParseError(f"Unexpected project list: {e}"))
            return

        mapping: dict[str, int] = {}
        for project in projects:
            if project.name in mapping:
                logger.warning(
                    f"Duplicate project name {project.name!r}: "
                    f"{project.id} replaces {mapping[project.name]}"
                )
            mapping[project.name] = project.id

        self._projects = mapping
        report(self.notifier, f"Toggl projects loaded ({len(mapping)})")

    def _on_refresh_failure(self, error: TogglError) -> None:
        report(self.notifier, f"Could not load Toggl projects: {error}", logging.ERROR)

    def lookup(self, name: str | None) -> int | None:
        """Get the ID of a project by name.

        Args:
            name: Project name.

        Returns:
            Project ID, or None if the name is unknown.
        """
        if name is None:
            return None
        return self._projects.get(name)

    def names(self) -> list[str]:
        """Get the known project names in API order."""
        return list(self._projects)

    @property
    def default_project_id(self) -> int | None:
        """ID of the project used when a clock-in names none."""
        return self._default_project_id

    def select(self, name: str | None) -> int | None:
        """Make a project the default for clock-ins that name no project.

        Args:
            name: Project name; None clears the default.

        Returns:
            The selected project ID, or None if the name is unknown.
        """
        project_id = self.lookup(name)
        self._default_project_id = project_id

        if name is not None and project_id is None:
            report(self.notifier, str(UnresolvedProject(name)), logging.WARNING)
        elif project_id is not None:
            logger.info(f"Default project set to {name!r} ({project_id})")
        return project_id

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, name: object) -> bool:
        return name in self._projects
