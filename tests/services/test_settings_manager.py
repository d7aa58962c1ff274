"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from picture_book.services import SettingsManager
from picture_book.services.settings_manager import DEFAULT_DATA_DIR

SETTING_NAMES = (
    "PICTURE_BOOK_DB_PATH",
    "PICTURE_BOOK_ASSETS_DIR",
    "PICTURE_BOOK_LOG_LEVEL",
    "PICTURE_BOOK_CONTROLS_HIDE_MS",
    "PICTURE_BOOK_PAGES_PER_BOOK",
    "PICTURE_BOOK_DEVICE_IDIOM",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up PICTURE_BOOK_* variables before and after test."""
    saved = {name: os.environ.pop(name, None) for name in SETTING_NAMES}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with an empty .env file."""
    (temp_env_dir / ".env").write_text("")
    return SettingsManager(project_root=temp_env_dir)


class TestDefaults:
    def test_database_path_default(self, settings):
        assert settings.get_database_path() == DEFAULT_DATA_DIR / "catalog.db"

    def test_assets_dir_default(self, settings):
        assert settings.get_assets_dir() == DEFAULT_DATA_DIR / "covers"

    def test_log_level_default(self, settings):
        assert settings.get_log_level() == "INFO"

    def test_hide_delay_default(self, settings):
        assert settings.get_controls_hide_delay_ms() == 3000

    def test_pages_per_book_default(self, settings):
        assert settings.get_pages_per_book() == 5

    def test_device_idiom_default(self, settings):
        assert settings.get_device_idiom() == "phone"


class TestEnvFile:
    def test_values_read_from_env_file(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text(
            "PICTURE_BOOK_DB_PATH=/data/books.db\n"
            "PICTURE_BOOK_LOG_LEVEL=debug\n"
            "PICTURE_BOOK_CONTROLS_HIDE_MS=1500\n"
            "PICTURE_BOOK_DEVICE_IDIOM=Tablet\n"
        )

        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_database_path() == Path("/data/books.db")
        assert settings.get_log_level() == "DEBUG"
        assert settings.get_controls_hide_delay_ms() == 1500
        assert settings.get_device_idiom() == "tablet"

    def test_invalid_numbers_fall_back_to_default(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text(
            "PICTURE_BOOK_CONTROLS_HIDE_MS=soon\n"
            "PICTURE_BOOK_PAGES_PER_BOOK=-2\n"
        )

        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_controls_hide_delay_ms() == 3000
        assert settings.get_pages_per_book() == 5

    def test_unknown_idiom_falls_back_to_phone(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("PICTURE_BOOK_DEVICE_IDIOM=watch\n")

        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_device_idiom() == "phone"

    def test_whitespace_only_value_uses_default(self, temp_env_dir, clean_env):
        os.environ["PICTURE_BOOK_DB_PATH"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)

        assert settings.get_database_path() == DEFAULT_DATA_DIR / "catalog.db"

    def test_reload_env_updates_values(self, temp_env_dir, clean_env):
        env_file = temp_env_dir / ".env"
        env_file.write_text("PICTURE_BOOK_PAGES_PER_BOOK=3\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_pages_per_book() == 3

        env_file.write_text("PICTURE_BOOK_PAGES_PER_BOOK=8\n")
        settings.reload_env()
        assert settings.get_pages_per_book() == 8

    def test_missing_env_file_uses_defaults(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_pages_per_book() == 5
