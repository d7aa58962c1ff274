"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .shelf_screen import BookTile, ShelfScreen
from .viewer_screen import ViewerScreen

__all__ = ["BookTile", "MainWindow", "ShelfScreen", "ViewerScreen"]
