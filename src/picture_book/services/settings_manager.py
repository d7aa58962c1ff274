"""Settings Manager - Handles storage locations and reader configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DATA_DIR = Path.home() / ".picture_book"
DEFAULT_CONTROLS_HIDE_MS = 3000
DEFAULT_PAGES_PER_BOOK = 5
DEVICE_IDIOMS = ("phone", "tablet")


class SettingsManager:
    """
    Manages application settings.

    Values come from the process environment, seeded from a .env file in
    the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = Path(project_root) / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = Path(project_root)

    def get_database_path(self) -> Path:
        """Location of the SQLite catalog file."""
        value = self._get_str("PICTURE_BOOK_DB_PATH")
        return Path(value).expanduser() if value else DEFAULT_DATA_DIR / "catalog.db"

    def get_assets_dir(self) -> Path:
        """Directory holding the bundled cover images."""
        value = self._get_str("PICTURE_BOOK_ASSETS_DIR")
        return Path(value).expanduser() if value else DEFAULT_DATA_DIR / "covers"

    def get_log_level(self) -> str:
        return (self._get_str("PICTURE_BOOK_LOG_LEVEL") or "INFO").upper()

    def get_controls_hide_delay_ms(self) -> int:
        """Idle time before the viewer hides its control overlay."""
        return self._get_positive_int("PICTURE_BOOK_CONTROLS_HIDE_MS", DEFAULT_CONTROLS_HIDE_MS)

    def get_pages_per_book(self) -> int:
        return self._get_positive_int("PICTURE_BOOK_PAGES_PER_BOOK", DEFAULT_PAGES_PER_BOOK)

    def get_device_idiom(self) -> str:
        """Either "phone" or "tablet"; unknown values fall back to "phone"."""
        value = (self._get_str("PICTURE_BOOK_DEVICE_IDIOM") or "").lower()
        return value if value in DEVICE_IDIOMS else "phone"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_str(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _get_positive_int(self, name: str, default: int) -> int:
        value = self._get_str(name)
        if value is None:
            return default
        try:
            parsed = int(value)
        except ValueError:
            return default
        return parsed if parsed > 0 else default
