"""Tests for storage manager."""

from pathlib import Path

from toggl_clock.utils import StorageManager


class TestStorageManager:
    """Test StorageManager functionality."""

    def test_init_creates_directory(self, temp_config_dir: Path) -> None:
        """Test that initialization creates the config directory."""
        config_dir = temp_config_dir / "nested"
        storage = StorageManager(config_dir)

        assert config_dir.exists()
        assert storage.config_dir == config_dir

    def test_settings_persistence(self, storage_manager: StorageManager) -> None:
        """Test saving and loading settings."""
        settings = {
            "workspace_id": 42,
            "timeout": 20.0,
            "default_project": "Reports",
        }

        storage_manager.save_settings(settings)
        loaded = storage_manager.load_settings()

        assert loaded == settings

    def test_token_persistence(self, storage_manager: StorageManager) -> None:
        """Test saving and loading tokens."""
        storage_manager.save_tokens({"toggl": "test_toggl_token"})

        assert storage_manager.load_tokens() == {"toggl": "test_toggl_token"}

    def test_token_file_permissions(self, storage_manager: StorageManager) -> None:
        """Test that the token file is readable by the user only."""
        storage_manager.set_token("toggl", "my_token")

        assert storage_manager.tokens_file.stat().st_mode & 0o777 == 0o600

    def test_get_set_token(self, storage_manager: StorageManager) -> None:
        """Test getting and setting individual tokens."""
        storage_manager.set_token("toggl", "my_token")

        assert storage_manager.get_token("toggl") == "my_token"

    def test_get_nonexistent_token(self, storage_manager: StorageManager) -> None:
        """Test getting a token that doesn't exist."""
        assert storage_manager.get_token("nonexistent") is None

    def test_empty_settings_default(self, storage_manager: StorageManager) -> None:
        """Test that loading non-existent settings returns empty dict."""
        assert storage_manager.load_settings() == {}

    def test_empty_settings_file(self, storage_manager: StorageManager) -> None:
        """Test that an empty settings file loads as empty dict."""
        storage_manager.settings_file.write_text("")

        assert storage_manager.load_settings() == {}

    def test_empty_tokens_default(self, storage_manager: StorageManager) -> None:
        """Test that loading non-existent tokens returns empty dict."""
        assert storage_manager.load_tokens() == {}
