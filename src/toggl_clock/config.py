"""Configuration management for toggl-clock."""

from pathlib import Path
from typing import Any

from toggl_clock.utils.storage import StorageManager

DEFAULT_API_URL = "https://api.track.toggl.com/api/v9/workspaces/"
DEFAULT_TIMEOUT = 20.0


class Config:
    """Manages user settings: API token, workspace, timeout and default project."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration.

        Args:
            config_dir: Directory for storing configuration.
        """
        self.storage = StorageManager(config_dir)
        self._settings = self.storage.load_settings()

    def get_settings(self) -> dict[str, Any]:
        """Get all stored settings.

        Returns:
            Settings dictionary.
        """
        return self._settings

    def update(self, **values: Any) -> None:
        """Update one or more settings and persist them.

        Args:
            **values: Setting names and values.
        """
        self._settings.update(values)
        self.storage.save_settings(self._settings)

    @property
    def api_token(self) -> str | None:
        """Toggl API token."""
        return self.storage.get_token("toggl")

    @api_token.setter
    def api_token(self, token: str) -> None:
        self.storage.set_token("toggl", token)

    @property
    def workspace_id(self) -> int | None:
        """Toggl workspace ID."""
        value = self._settings.get("workspace_id")
        return int(value) if value is not None else None

    @property
    def timeout(self) -> float:
        """Default request timeout in seconds."""
        return float(self._settings.get("timeout", DEFAULT_TIMEOUT))

    @property
    def api_url(self) -> str:
        """Base URL that workspace IDs and resource paths are appended to."""
        return self._settings.get("api_url", DEFAULT_API_URL)

    @property
    def default_project(self) -> str | None:
        """Name of the project used when a clock-in names none."""
        return self._settings.get("default_project")

    def is_configured(self) -> bool:
        """Check if token and workspace are both set.

        Returns:
            True if the client can be built, False otherwise.
        """
        return bool(self.api_token) and self.workspace_id is not None
