"""Shelf screen - Grid view of the picture books in the catalog."""

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from picture_book.core import Book
from picture_book.services import CoverImageService

COLUMNS = 2
COVER_HEIGHT = 200

STAR_FILLED = "★"
STAR_EMPTY = "☆"


def read_count_text(read_count: int) -> str:
    return f"読了: {read_count}回"


class BookTile(QWidget):
    """A single book tile: cover with favorite star, title and read button.

    Signals:
        favorite_clicked: Emitted with the book id when the star is clicked.
        read_clicked: Emitted with the book id when the read button is clicked.
    """

    favorite_clicked = Signal(str)
    read_clicked = Signal(str)

    def __init__(self, book: Book, cover_service: Optional[CoverImageService] = None, parent=None):
        super().__init__(parent)
        self.book = book
        self.cover_service = cover_service
        self._setup_ui()

    def _setup_ui(self):
        """Build the tile UI: cover, star button, read-count badge, title, read button."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        # Cover with the favorite button overlaid at the top-right
        cover_container = QWidget()
        cover_container.setFixedHeight(COVER_HEIGHT)
        cover_grid = QGridLayout(cover_container)
        cover_grid.setContentsMargins(0, 0, 0, 0)

        self.cover_label = QLabel()
        self.cover_label.setAlignment(Qt.AlignCenter)
        pixmap = None
        if self.cover_service is not None:
            pixmap = self.cover_service.load_pixmap(self.book.cover_image_name, COVER_HEIGHT)
        if pixmap is not None:
            self.cover_label.setPixmap(pixmap)
        else:
            self._set_placeholder()
        cover_grid.addWidget(self.cover_label, 0, 0)

        self.favorite_button = QPushButton(STAR_FILLED if self.book.is_favorite else STAR_EMPTY)
        self.favorite_button.setFixedSize(40, 40)
        self.favorite_button.setCursor(Qt.PointingHandCursor)
        self.favorite_button.setStyleSheet("""
            QPushButton {
                background-color: rgba(255, 255, 255, 230);
                color: #f5c400;
                border: none;
                border-radius: 20px;
                font-size: 22px;
            }
        """)
        self.favorite_button.clicked.connect(self._on_favorite_clicked)
        cover_grid.addWidget(self.favorite_button, 0, 0, Qt.AlignTop | Qt.AlignRight)

        self.read_count_label = QLabel(read_count_text(self.book.read_count))
        self.read_count_label.setStyleSheet("""
            QLabel {
                color: white;
                background-color: rgba(0, 0, 0, 128);
                border-radius: 5px;
                padding: 4px 8px;
                font-size: 12px;
            }
        """)
        self.read_count_label.setVisible(self.book.read_count > 0)
        cover_grid.addWidget(self.read_count_label, 0, 0, Qt.AlignBottom | Qt.AlignHCenter)

        layout.addWidget(cover_container)

        self.title_label = QLabel(self.book.title)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("QLabel { font-size: 14px; font-weight: 500; }")
        layout.addWidget(self.title_label)

        self.read_button = QPushButton("読む")
        self.read_button.setCursor(Qt.PointingHandCursor)
        self.read_button.setStyleSheet("""
            QPushButton {
                background-color: #1e6fff;
                color: white;
                border: none;
                border-radius: 5px;
                padding: 8px;
                font-weight: bold;
            }
        """)
        self.read_button.clicked.connect(self._on_read_clicked)
        layout.addWidget(self.read_button)

    def _set_placeholder(self):
        """Draw a gradient placeholder when the cover image is not bundled."""
        self.cover_label.setText("📖")
        self.cover_label.setStyleSheet("""
            QLabel {
                border-radius: 10px;
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 rgba(0, 0, 255, 77), stop:1 rgba(128, 0, 128, 77));
                color: white;
                font-size: 50px;
            }
        """)

    def _on_favorite_clicked(self):
        self.favorite_clicked.emit(self.book.id)

    def _on_read_clicked(self):
        self.read_clicked.emit(self.book.id)


class ShelfScreen(QWidget):
    """Main shelf screen displaying books in a 2-column grid.

    Signals:
        favorite_toggled: Emitted when the star on a tile is clicked (book id).
        read_requested: Emitted when the read button on a tile is clicked (book id).
        favorites_filter_toggled: Emitted when the header star is clicked.
    """

    favorite_toggled = Signal(str)
    read_requested = Signal(str)
    favorites_filter_toggled = Signal()

    def __init__(self, cover_service: Optional[CoverImageService] = None, parent=None):
        super().__init__(parent)
        self.cover_service = cover_service
        self._books: List[Book] = []
        self._favorites_only = False
        self._setup_ui()

    def _setup_ui(self):
        """Build the shelf screen layout."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(20, 20, 20, 20)

        app_title = QLabel("えほんのほんだな")
        app_title.setStyleSheet("QLabel { font-size: 28px; font-weight: bold; }")
        main_layout.addWidget(app_title)

        # Filter header
        header_layout = QHBoxLayout()
        self.header_label = QLabel()
        self.header_label.setStyleSheet("QLabel { font-size: 20px; font-weight: bold; }")
        header_layout.addWidget(self.header_label)
        header_layout.addStretch()

        self.filter_button = QPushButton()
        self.filter_button.setFixedSize(40, 40)
        self.filter_button.setStyleSheet("""
            QPushButton {
                color: #f5c400;
                border: none;
                font-size: 24px;
            }
        """)
        self.filter_button.clicked.connect(self.favorites_filter_toggled)
        header_layout.addWidget(self.filter_button)
        main_layout.addLayout(header_layout)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setStyleSheet("QScrollArea { border: none; }")

        self.grid_container = QWidget()
        self.grid_layout = QGridLayout(self.grid_container)
        self.grid_layout.setSpacing(20)
        self.grid_layout.setContentsMargins(0, 0, 0, 0)

        scroll_area.setWidget(self.grid_container)
        main_layout.addWidget(scroll_area)

        # Empty state label (hidden when books present)
        self.empty_label = QLabel()
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setMinimumHeight(200)
        self.empty_label.setStyleSheet("QLabel { color: gray; font-size: 16px; }")
        self.empty_label.hide()
        self.grid_layout.addWidget(self.empty_label, 0, 0, 1, COLUMNS)

        self._update_header()

    @property
    def favorites_only(self) -> bool:
        return self._favorites_only

    def display_books(self, books: List[Book], favorites_only: bool = False):
        """Display the given books in the grid.

        Args:
            books: Books to display, already filtered and ordered.
            favorites_only: Whether the favorites filter is active.
        """
        self._books = list(books)
        self._favorites_only = favorites_only
        self._update_header()
        self._clear_grid()

        if not self._books:
            self.empty_label.setText(
                "お気に入りの絵本がありません" if favorites_only else "絵本がありません"
            )
            self.empty_label.show()
            return

        self.empty_label.hide()

        for idx, book in enumerate(self._books):
            row = idx // COLUMNS
            col = idx % COLUMNS

            tile = BookTile(book, self.cover_service)
            tile.favorite_clicked.connect(self.favorite_toggled.emit)
            tile.read_clicked.connect(self.read_requested.emit)

            self.grid_layout.addWidget(tile, row, col)

    def tiles(self) -> List[BookTile]:
        """Return the tiles currently shown, in grid order."""
        result = []
        for i in range(self.grid_layout.count()):
            widget = self.grid_layout.itemAt(i).widget()
            if isinstance(widget, BookTile):
                result.append(widget)
        return result

    def _update_header(self):
        self.header_label.setText("お気に入りの絵本" if self._favorites_only else "すべての絵本")
        self.filter_button.setText(STAR_FILLED if self._favorites_only else STAR_EMPTY)

    def _clear_grid(self):
        """Remove all tiles from the grid."""
        for tile in self.tiles():
            self.grid_layout.removeWidget(tile)
            tile.setParent(None)
            tile.deleteLater()
