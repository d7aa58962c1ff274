"""Viewer Controller - Session state for reading one picture book."""

from dataclasses import dataclass
from typing import List

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from picture_book.core import (
    DEFAULT_TOTAL_PAGES,
    Book,
    CatalogError,
    ReadingMode,
    StoryPage,
    build_story_pages,
    reading_mode_from_name,
)
from picture_book.io import CatalogStore
from picture_book.utils.logging import get_logger

from .page_layout import is_landscape

logger = get_logger(__name__)

DEFAULT_HIDE_DELAY_MS = 3000


@dataclass(frozen=True)
class ViewerState:
    """Snapshot of the viewer handed to the screen for rendering."""

    book: Book
    page: StoryPage
    current_page: int
    total_pages: int
    reading_mode: ReadingMode
    controls_visible: bool
    is_playing: bool
    is_landscape: bool

    @property
    def can_go_previous(self) -> bool:
        return self.current_page > 0

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages - 1

    @property
    def show_audio_controls(self) -> bool:
        return self.reading_mode.has_audio

    @property
    def page_label(self) -> str:
        return f"{self.current_page + 1} / {self.total_pages}"


class ViewerController(QObject):
    """
    Manages the live reading session and the control overlay.

    The overlay hides itself after ``hide_delay_ms`` of inactivity. Any
    interaction or page change while it is visible restarts the countdown;
    the countdown is cancelled whenever the overlay is hidden and started
    again when it is shown.
    """

    closed = Signal()

    def __init__(
        self,
        viewer_screen,
        catalog_store: CatalogStore,
        main_window,
        hide_delay_ms: int = DEFAULT_HIDE_DELAY_MS,
        pages_per_book: int = DEFAULT_TOTAL_PAGES,
        device_idiom: str = "phone",
    ):
        super().__init__()

        if viewer_screen is None:
            raise ValueError("ViewerScreen must not be None")
        if catalog_store is None:
            raise ValueError("CatalogStore must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if pages_per_book <= 0:
            raise ValueError("pages_per_book must be positive")

        self.viewer_screen = viewer_screen
        self.catalog_store = catalog_store
        self.main_window = main_window
        self.pages_per_book = pages_per_book
        self.device_idiom = device_idiom

        self.hide_timer = QTimer(self)
        self.hide_timer.setSingleShot(True)
        self.hide_timer.setInterval(hide_delay_ms)
        self.hide_timer.timeout.connect(self._on_hide_timeout)

        # Session state
        self.current_book: Book | None = None
        self.pages: List[StoryPage] = []
        self.current_page: int = 0
        self.reading_mode: ReadingMode = ReadingMode.SILENT
        self.controls_visible: bool = True
        self.is_playing: bool = False
        self.is_landscape: bool = False

        self.viewer_screen.page_tapped.connect(self.toggle_controls)
        self.viewer_screen.controls_touched.connect(self.register_interaction)
        self.viewer_screen.next_requested.connect(self.next_page)
        self.viewer_screen.previous_requested.connect(self.previous_page)
        self.viewer_screen.reading_mode_selected.connect(self.handle_reading_mode_selected)
        self.viewer_screen.playback_toggled.connect(self.toggle_playback)
        self.viewer_screen.rotation_hint_requested.connect(self.show_rotation_hint)
        self.viewer_screen.viewport_resized.connect(self.handle_viewport_resized)
        self.viewer_screen.close_requested.connect(self.close)

    @property
    def is_open(self) -> bool:
        return self.current_book is not None

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def hides_controls_in_landscape(self) -> bool:
        return self.device_idiom == "phone"

    def state(self) -> ViewerState:
        """Return a snapshot of the session.

        Raises:
            RuntimeError: if no book is open.
        """
        if self.current_book is None:
            raise RuntimeError("No book is open in the viewer")
        return ViewerState(
            book=self.current_book,
            page=self.pages[self.current_page],
            current_page=self.current_page,
            total_pages=self.total_pages,
            reading_mode=self.reading_mode,
            controls_visible=self.controls_visible,
            is_playing=self.is_playing,
            is_landscape=self.is_landscape,
        )

    @Slot(str)
    def open_book(self, book_id: str) -> bool:
        """
        Open a book for reading and record the read.

        Args:
            book_id: Id of the book in the catalog.

        Returns:
            True if the viewer is now showing the book.
        """
        try:
            book = self.catalog_store.increment_read_count(book_id)
        except CatalogError as e:
            logger.error("Failed to open book %s: %s", book_id, e)
            self.main_window.show_error("絵本を開けませんでした", str(e))
            return False

        self.current_book = book
        self.pages = build_story_pages(book, self.pages_per_book)
        self.current_page = 0
        self.reading_mode = ReadingMode.SILENT
        self.is_playing = False

        if self.is_landscape and self.hides_controls_in_landscape:
            self._hide_controls()
        else:
            self._show_controls()

        self._render()
        self.main_window.display_viewer_view(self.viewer_screen)
        return True

    @Slot()
    def close(self):
        """Leave the viewer and return to the shelf."""
        self.hide_timer.stop()
        self.is_playing = False
        self.current_book = None
        self.pages = []
        self.current_page = 0
        self.closed.emit()

    @Slot()
    def toggle_controls(self):
        """Handle a tap on the page surface."""
        if not self.is_open:
            return
        if self.controls_visible:
            self._hide_controls()
        else:
            self._show_controls()
        self._render()

    @Slot()
    def register_interaction(self):
        """Restart the hide countdown after the user touched a control."""
        self._restart_hide_timer()

    @Slot()
    def next_page(self):
        """Navigate to the next page."""
        self.go_to_page(self.current_page + 1)

    @Slot()
    def previous_page(self):
        """Navigate to the previous page."""
        self.go_to_page(self.current_page - 1)

    def go_to_page(self, page_number: int):
        """
        Jump to a specific page.

        Targets outside [0, total_pages) are ignored.

        Args:
            page_number: The page number to jump to (0-indexed)
        """
        if not self.is_open:
            return
        self._restart_hide_timer()
        if 0 <= page_number < self.total_pages and page_number != self.current_page:
            self.current_page = page_number
            self._render()

    @property
    def can_go_previous(self) -> bool:
        return self.is_open and self.current_page > 0

    @property
    def can_go_next(self) -> bool:
        return self.is_open and self.current_page < self.total_pages - 1

    def set_reading_mode(self, mode: ReadingMode):
        """Switch narration mode; switching to silent stops playback."""
        if not self.is_open:
            return
        self.reading_mode = mode
        if not mode.has_audio:
            self.is_playing = False
        self._restart_hide_timer()
        self._render()

    @Slot(str)
    def handle_reading_mode_selected(self, mode_name: str):
        self.set_reading_mode(reading_mode_from_name(mode_name))

    @Slot()
    def toggle_playback(self):
        """Flip play/pause. Narration audio itself is not implemented."""
        if not self.is_open or not self.reading_mode.has_audio:
            return
        self.is_playing = not self.is_playing
        self._restart_hide_timer()
        self._render()

    @Slot()
    def show_rotation_hint(self):
        self._restart_hide_timer()
        self.viewer_screen.show_rotation_hint(self.is_landscape)

    @Slot(int, int)
    def handle_viewport_resized(self, width: int, height: int):
        """
        Track orientation from the viewport size.

        On a phone the overlay hides when entering landscape and shows when
        returning to portrait. On a tablet its visibility is unchanged.
        """
        landscape = is_landscape(width, height)
        if landscape == self.is_landscape:
            return
        self.is_landscape = landscape
        if not self.is_open:
            return
        if self.hides_controls_in_landscape:
            if landscape:
                self._hide_controls()
            else:
                self._show_controls()
        self._render()

    def _show_controls(self):
        self.controls_visible = True
        self._restart_hide_timer()

    def _hide_controls(self):
        self.controls_visible = False
        self.hide_timer.stop()

    def _restart_hide_timer(self):
        if self.is_open and self.controls_visible:
            self.hide_timer.start()

    @Slot()
    def _on_hide_timeout(self):
        if self.is_open and self.controls_visible:
            self.controls_visible = False
            self._render()

    def _render(self):
        """Push the current session state to the screen."""
        if self.current_book is None:
            return
        self.viewer_screen.render_state(self.state())
