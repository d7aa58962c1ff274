"""Main entry point for the picture book application."""

import sys

from PySide6.QtWidgets import QApplication

from picture_book.coordinators import ShelfCoordinator, ViewerController
from picture_book.core import CatalogError
from picture_book.io import CatalogStore, DatabaseManager
from picture_book.services import CoverImageService, SettingsManager
from picture_book.ui import MainWindow, ShelfScreen, ViewerScreen
from picture_book.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())

    # 2. Initialize Application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Picture Book")
    app.setOrganizationName("PictureBook")

    # 3. Initialize Infrastructure
    database = DatabaseManager(settings.get_database_path())
    database.ensure_schema()
    catalog_store = CatalogStore(database.connection)
    seed_error = None
    try:
        catalog_store.seed_sample_data_if_empty()
    except CatalogError as e:
        # Start with whatever the catalog holds
        logger.error("Failed to seed sample books: %s", e)
        seed_error = e
    cover_service = CoverImageService(settings.get_assets_dir())
    logger.info("Catalog opened at %s with %d books", database.db_path, len(catalog_store))

    # 4. Construct UI
    main_window = MainWindow()
    shelf_screen = ShelfScreen(cover_service=cover_service)
    viewer_screen = ViewerScreen(device_idiom=settings.get_device_idiom())

    # 5. Instantiate Coordinators (Dependency Injection)
    viewer_controller = ViewerController(
        viewer_screen=viewer_screen,
        catalog_store=catalog_store,
        main_window=main_window,
        hide_delay_ms=settings.get_controls_hide_delay_ms(),
        pages_per_book=settings.get_pages_per_book(),
        device_idiom=settings.get_device_idiom(),
    )
    shelf_coordinator = ShelfCoordinator(
        shelf_screen=shelf_screen,
        catalog_store=catalog_store,
        viewer_controller=viewer_controller,
        main_window=main_window,
    )

    # 6. Signal Wiring (Connect UI signals to Controller slots)
    main_window.next_page.connect(viewer_controller.next_page)
    main_window.previous_page.connect(viewer_controller.previous_page)
    main_window.viewer_close_requested.connect(viewer_controller.close)
    viewer_controller.closed.connect(shelf_coordinator.show_shelf)

    # 7. Show UI and start event loop
    shelf_coordinator.show_shelf()
    main_window.show()
    if seed_error is not None:
        main_window.show_error("絵本を準備できませんでした", str(seed_error))

    try:
        return app.exec()
    finally:
        shelf_coordinator.shutdown()
        database.close()


if __name__ == "__main__":
    sys.exit(main())
