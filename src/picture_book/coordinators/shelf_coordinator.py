"""Shelf Coordinator - Connects the bookshelf screen with the catalog."""

from typing import List

from PySide6.QtCore import QObject, Slot

from picture_book.core import Book, BookFilter, CatalogError
from picture_book.io import CatalogStore
from picture_book.utils.logging import get_logger

logger = get_logger(__name__)


class ShelfCoordinator(QObject):
    """Manages shelf display and the actions started from it.

    Responsibilities:
    - Show all books or only favorites, following a local toggle
    - Toggle a book's favorite flag
    - Open a book in the viewer
    - Redraw the shelf whenever the catalog changes
    """

    def __init__(
        self,
        shelf_screen,
        catalog_store: CatalogStore,
        viewer_controller,
        main_window,
    ):
        super().__init__()

        if shelf_screen is None:
            raise ValueError("ShelfScreen must not be None")
        if catalog_store is None:
            raise ValueError("CatalogStore must not be None")
        if viewer_controller is None:
            raise ValueError("ViewerController must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.shelf_screen = shelf_screen
        self.catalog_store = catalog_store
        self.viewer_controller = viewer_controller
        self.main_window = main_window
        self.show_favorites_only = False

        self.shelf_screen.favorite_toggled.connect(self.handle_favorite_toggled)
        self.shelf_screen.read_requested.connect(self.handle_read_requested)
        self.shelf_screen.favorites_filter_toggled.connect(self.handle_favorites_filter_toggled)

        self._unsubscribe = self.catalog_store.subscribe(self._on_catalog_changed)

    @property
    def book_filter(self) -> BookFilter:
        return BookFilter.FAVORITES_ONLY if self.show_favorites_only else BookFilter.ALL

    def displayed_books(self) -> List[Book]:
        return self.catalog_store.list_books(self.book_filter)

    @Slot()
    def show_shelf(self):
        """Display the shelf screen with fresh catalog data."""
        self._refresh()
        self.main_window.display_shelf_view(self.shelf_screen)

    @Slot(str)
    def handle_favorite_toggled(self, book_id: str):
        try:
            self.catalog_store.toggle_favorite(book_id)
        except CatalogError as e:
            logger.error("Failed to toggle favorite for %s: %s", book_id, e)
            self.main_window.show_error("お気に入りを更新できませんでした", str(e))

    @Slot(str)
    def handle_read_requested(self, book_id: str):
        self.viewer_controller.open_book(book_id)

    @Slot()
    def handle_favorites_filter_toggled(self):
        self.show_favorites_only = not self.show_favorites_only
        self._refresh()

    def shutdown(self):
        """Stop listening for catalog changes."""
        self._unsubscribe()

    def _on_catalog_changed(self, books: List[Book]):
        self._refresh()

    def _refresh(self):
        self.shelf_screen.display_books(
            self.displayed_books(),
            favorites_only=self.show_favorites_only,
        )
