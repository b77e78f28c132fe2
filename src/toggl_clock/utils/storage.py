"""Settings and token storage for toggl-clock."""

import json
from pathlib import Path
from typing import Any

import yaml


class StorageManager:
    """Manages settings and token storage."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize storage manager.

        Args:
            config_dir: Directory to store configuration. Defaults to ~/.toggl-clock/
        """
        self.config_dir = config_dir or Path.home() / ".toggl-clock"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.settings_file = self.config_dir / "settings.yaml"
        self.tokens_file = self.config_dir / "tokens.json"

    def load_settings(self) -> dict[str, Any]:
        """Load user settings (workspace, timeout, default project).

        Returns:
            Settings dictionary.
        """
        if self.settings_file.exists():
            with open(self.settings_file) as f:
                return yaml.safe_load(f) or {}
        return {}

    def save_settings(self, settings: dict[str, Any]) -> None:
        """Save user settings.

        Args:
            settings: Settings dictionary to save.
        """
        with open(self.settings_file, "w") as f:
            yaml.dump(settings, f, default_flow_style=False, sort_keys=False)

    def load_tokens(self) -> dict[str, str]:
        """Load cached API tokens.

        Returns:
            Dictionary of service names to tokens.
        """
        if self.tokens_file.exists():
            with open(self.tokens_file) as f:
                return json.load(f)
        return {}

    def save_tokens(self, tokens: dict[str, str]) -> None:
        """Save API tokens.

        Args:
            tokens: Dictionary of service names to tokens.
        """
        self.tokens_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.tokens_file, "w") as f:
            json.dump(tokens, f)
        # User read/write only
        self.tokens_file.chmod(0o600)

    def get_token(self, service: str) -> str | None:
        """Get cached token for a service.

        Args:
            service: Service name (e.g., "toggl").

        Returns:
            Token if available, None otherwise.
        """
        return self.load_tokens().get(service)

    def set_token(self, service: str, token: str) -> None:
        """Save token for a service.

        Args:
            service: Service name.
            token: API token.
        """
        tokens = self.load_tokens()
        tokens[service] = token
        self.save_tokens(tokens)
