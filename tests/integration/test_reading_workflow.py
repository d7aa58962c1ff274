#!/usr/bin/env python3
"""
Integration tests for the reading workflow.

Tests the complete user journey:
1. First launch seeds the catalog → shelf shows six books
2. Star a book → favorites filter shows it
3. Read a book → viewer opens, read count increases
4. Close the viewer → shelf shows the read-count badge
5. Restart → state persisted
"""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from picture_book.coordinators import ShelfCoordinator, ViewerController
from picture_book.io import CatalogStore, DatabaseManager
from picture_book.ui import MainWindow, ShelfScreen, ViewerScreen


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "catalog.db"


def build_app(db_path):
    """Wire the application like main() does, minus the event loop."""
    ensure_qt_app()
    database = DatabaseManager(db_path)
    database.ensure_schema()
    store = CatalogStore(database.connection)
    store.seed_sample_data_if_empty()

    main_window = MainWindow()
    main_window.show_error = MagicMock()
    shelf_screen = ShelfScreen()
    viewer_screen = ViewerScreen()
    viewer = ViewerController(viewer_screen, store, main_window)
    shelf = ShelfCoordinator(shelf_screen, store, viewer, main_window)
    viewer.closed.connect(shelf.show_shelf)
    shelf.show_shelf()
    return database, store, main_window, shelf_screen, viewer_screen, viewer, shelf


def test_first_launch_to_reading_and_back(db_path):
    database, store, window, shelf_screen, viewer_screen, viewer, shelf = build_app(db_path)
    try:
        assert len(shelf_screen.tiles()) == 6
        assert window.stack.currentWidget() is shelf_screen

        # Star a book and filter
        shelf_screen.favorite_toggled.emit("book_004")
        shelf_screen.favorites_filter_toggled.emit()
        assert [t.book.id for t in shelf_screen.tiles()] == ["book_004"]

        # Read it
        shelf_screen.read_requested.emit("book_004")
        assert window.stack.currentWidget() is viewer_screen
        assert viewer_screen.title_label.text() == "鶴の恩返し"
        assert store.get_book("book_004").read_count == 1

        viewer_screen.next_requested.emit()
        viewer_screen.next_requested.emit()
        assert viewer_screen.page_label.text() == "3 / 5"

        # Back to the shelf
        viewer_screen.close_requested.emit()
        assert window.stack.currentWidget() is shelf_screen
        tile = shelf_screen.tiles()[0]
        assert tile.read_count_label.text() == "読了: 1回"
        assert not viewer.hide_timer.isActive()
        window.show_error.assert_not_called()
    finally:
        shelf.shutdown()
        database.close()


def test_state_survives_restart(db_path):
    database, store, _, shelf_screen, _, viewer, shelf = build_app(db_path)
    shelf_screen.favorite_toggled.emit("book_001")
    viewer.open_book("book_001")
    viewer.close()
    viewer.open_book("book_001")
    viewer.close()
    shelf.shutdown()
    database.close()

    database, store, _, shelf_screen, _, _, shelf = build_app(db_path)
    try:
        book = store.get_book("book_001")
        assert book.is_favorite is True
        assert book.read_count == 2
        assert book.last_read_date is not None
        assert book.last_read_date >= book.created_at
        assert len(store.list_books()) == 6
    finally:
        shelf.shutdown()
        database.close()
