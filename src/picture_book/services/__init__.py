"""Services layer - configuration and asset lookup."""

from picture_book.services.cover_image_service import CoverImageService
from picture_book.services.settings_manager import SettingsManager

__all__ = [
    "CoverImageService",
    "SettingsManager",
]
