"""Main Window - Application shell switching between shelf and viewer."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtWidgets import QMainWindow, QMessageBox, QStackedWidget


class MainWindow(QMainWindow):
    """Provides the application shell, menus and keyboard shortcut handling."""

    # Signals for page navigation while the viewer is showing
    next_page = Signal()
    previous_page = Signal()
    # Signal emitted when the user asks to leave the viewer
    viewer_close_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("えほんのほんだな")
        self.setGeometry(100, 100, 900, 700)

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)
        self._viewer_widget = None

        self._create_menu_bar()

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def display_shelf_view(self, shelf_screen):
        """Show the shelf screen."""
        self._show(shelf_screen)

    def display_viewer_view(self, viewer_screen):
        """Show the viewer screen."""
        self._viewer_widget = viewer_screen
        self._show(viewer_screen)

    def is_viewer_showing(self) -> bool:
        return self._viewer_widget is not None and self.stack.currentWidget() is self._viewer_widget

    def _show(self, widget):
        if self.stack.indexOf(widget) == -1:
            self.stack.addWidget(widget)
        self.stack.setCurrentWidget(widget)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard events while reading.

        - Right arrow / Space: next page
        - Left arrow: previous page
        - Escape: back to the shelf
        """
        if not self.is_viewer_showing():
            super().keyPressEvent(event)
            return

        key = event.key()
        if key in (Qt.Key.Key_Right, Qt.Key.Key_Space):
            self.next_page.emit()
        elif key == Qt.Key.Key_Left:
            self.previous_page.emit()
        elif key == Qt.Key.Key_Escape:
            self.viewer_close_requested.emit()
        else:
            super().keyPressEvent(event)
