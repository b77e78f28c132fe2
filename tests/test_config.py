"""Tests for configuration management."""

from pathlib import Path

from toggl_clock.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, Config


class TestConfig:
    """Test Config functionality."""

    def test_defaults(self, config: Config) -> None:
        """Test values of an unconfigured Config."""
        assert config.get_settings() == {}
        assert config.api_token is None
        assert config.workspace_id is None
        assert config.timeout == DEFAULT_TIMEOUT == 20.0
        assert config.api_url == DEFAULT_API_URL
        assert config.default_project is None

    def test_update_persists(self, config: Config, temp_config_dir: Path) -> None:
        """Test that updated settings survive a reload."""
        config.update(workspace_id=42, timeout=5, default_project="Reports")

        reloaded = Config(temp_config_dir)
        assert reloaded.workspace_id == 42
        assert reloaded.timeout == 5.0
        assert reloaded.default_project == "Reports"

    def test_workspace_id_from_string(self, config: Config) -> None:
        """Test that a workspace ID stored as text is returned as int."""
        config.update(workspace_id="42")

        assert config.workspace_id == 42

    def test_api_token(self, config: Config, temp_config_dir: Path) -> None:
        """Test that the API token is stored with the tokens, not the settings."""
        config.api_token = "secret"

        assert Config(temp_config_dir).api_token == "secret"
        assert "secret" not in str(config.get_settings())

    def test_is_configured(self, config: Config) -> None:
        """Test is_configured requires both token and workspace."""
        assert config.is_configured() is False

        config.api_token = "secret"
        assert config.is_configured() is False

        config.update(workspace_id=42)
        assert config.is_configured() is True
