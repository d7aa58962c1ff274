"""Cover image lookup for bundled book covers.

Covers are referenced by name in the catalog and resolved here to an image
file under the assets directory. Loading uses Qt QPixmap.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap

from picture_book.utils.logging import get_logger

logger = get_logger(__name__)


class CoverImageService:
    """Resolves cover image names to files and loads scaled pixmaps.

    Lookup order for a name: ``<assets>/<name>.png``, ``.jpg``, ``.jpeg``.
    Missing covers are not an error; callers draw a placeholder instead.
    """

    EXTENSIONS = (".png", ".jpg", ".jpeg")

    def __init__(self, assets_dir: Path) -> None:
        self.assets_dir = Path(assets_dir)

    def resolve(self, cover_image_name: str) -> Optional[Path]:
        """Return the image file for a cover name, or None if not bundled."""
        if not cover_image_name:
            return None
        for extension in self.EXTENSIONS:
            candidate = self.assets_dir / f"{cover_image_name}{extension}"
            if candidate.is_file():
                return candidate
        return None

    def load_pixmap(self, cover_image_name: str, height: int) -> Optional[QPixmap]:
        """Load the cover scaled to the given height, keeping aspect ratio.

        Requires a QGuiApplication instance.
        """
        path = self.resolve(cover_image_name)
        if path is None:
            return None
        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            logger.warning("Failed to load cover image: %s", path)
            return None
        return pixmap.scaledToHeight(height, Qt.SmoothTransformation)
