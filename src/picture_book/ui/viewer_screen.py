"""Viewer screen - Full-window page surface with a control overlay."""

from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QIcon
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMenu,
    QMessageBox,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from picture_book.coordinators.page_layout import PageLayout, compute_page_layout
from picture_book.coordinators.viewer_controller import ViewerState
from picture_book.core import READING_MODE_ICONS, READING_MODE_LABELS, ReadingMode

SWIPE_DISTANCE = 50
WHEEL_NOTCH = 120

ROUND_BUTTON_STYLE = """
    QPushButton, QToolButton {
        background-color: rgba(0, 0, 0, 153);
        color: white;
        border: none;
        border-radius: 22px;
        font-size: 18px;
    }
    QPushButton:disabled {
        color: rgba(255, 255, 255, 80);
    }
"""


def gradient_style(hue: float) -> str:
    """Stylesheet for the placeholder illustration of a page."""
    top = QColor.fromHsvF(min(hue, 1.0), 0.5, 0.8)
    bottom = QColor.fromHsvF(min(hue, 1.0), 0.3, 0.6)
    return (
        "QLabel { background: qlineargradient(x1:0, y1:0, x2:1, y2:1, "
        f"stop:0 {top.name()}, stop:1 {bottom.name()}); color: white; }}"
    )


class ViewerScreen(QWidget):
    """Renders one page of a book and the reading controls.

    The screen holds no session state of its own; it draws whatever
    ViewerState it is given and reports user input through signals.

    Signals:
        page_tapped: The page surface (outside any control) was clicked.
        controls_touched: A control was used without changing state.
        next_requested / previous_requested: Navigation buttons, a horizontal
            drag across the page or the mouse wheel.
        reading_mode_selected: A reading mode was picked (mode value string).
        playback_toggled: The play/pause button was clicked.
        rotation_hint_requested: The rotate button was clicked.
        viewport_resized: The screen changed size (width, height).
        close_requested: The close button was clicked.
    """

    page_tapped = Signal()
    controls_touched = Signal()
    next_requested = Signal()
    previous_requested = Signal()
    reading_mode_selected = Signal(str)
    playback_toggled = Signal()
    rotation_hint_requested = Signal()
    viewport_resized = Signal(int, int)
    close_requested = Signal()

    def __init__(self, device_idiom: str = "phone", parent=None):
        super().__init__(parent)
        self.device_idiom = device_idiom
        self.current_state: ViewerState | None = None
        self._press_pos = None
        self._wheel_remainder = 0
        self.setStyleSheet("ViewerScreen { background-color: black; }")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self._setup_ui()

    def _setup_ui(self):
        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)

        # Page surface
        self.page_surface = QWidget()
        surface_layout = QVBoxLayout(self.page_surface)
        surface_layout.setContentsMargins(0, 0, 0, 0)
        surface_layout.setSpacing(0)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setWordWrap(True)
        surface_layout.addWidget(self.image_label)

        self.text_label = QLabel()
        self.text_label.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
        self.text_label.setWordWrap(True)
        self.text_label.setStyleSheet("QLabel { color: white; background-color: black; }")
        surface_layout.addWidget(self.text_label)

        grid.addWidget(self.page_surface, 0, 0)

        # Control overlay
        self.controls = QWidget()
        controls_layout = QVBoxLayout(self.controls)
        controls_layout.setContentsMargins(16, 16, 16, 16)
        controls_layout.addWidget(self._build_top_bar())
        controls_layout.addStretch()
        controls_layout.addWidget(self._build_bottom_bar())
        grid.addWidget(self.controls, 0, 0)

    def _build_top_bar(self) -> QWidget:
        bar = QWidget()
        layout = QHBoxLayout(bar)
        layout.setContentsMargins(0, 0, 0, 0)

        self.close_button = QPushButton("✕")
        self.close_button.setFixedSize(44, 44)
        self.close_button.setStyleSheet(ROUND_BUTTON_STYLE)
        self.close_button.clicked.connect(self.close_requested)
        layout.addWidget(self.close_button)

        layout.addStretch()
        self.title_label = QLabel()
        self.title_label.setStyleSheet("""
            QLabel {
                color: white;
                font-weight: bold;
                background-color: rgba(0, 0, 0, 153);
                border-radius: 15px;
                padding: 8px 20px;
            }
        """)
        layout.addWidget(self.title_label)
        layout.addStretch()

        self.mode_button = QToolButton()
        self.mode_button.setFixedSize(44, 44)
        self.mode_button.setStyleSheet(ROUND_BUTTON_STYLE)
        self.mode_button.setPopupMode(QToolButton.InstantPopup)
        self.mode_menu = QMenu(self.mode_button)
        self.mode_actions = {}
        for mode in ReadingMode:
            action = self.mode_menu.addAction(
                QIcon.fromTheme(READING_MODE_ICONS[mode]),
                READING_MODE_LABELS[mode],
            )
            action.setCheckable(True)
            action.triggered.connect(
                lambda checked=False, value=mode.value: self.reading_mode_selected.emit(value)
            )
            self.mode_actions[mode] = action
        self.mode_menu.aboutToShow.connect(self.controls_touched.emit)
        self.mode_button.setMenu(self.mode_menu)
        layout.addWidget(self.mode_button)

        self.rotate_button = QPushButton("⟳")
        self.rotate_button.setFixedSize(44, 44)
        self.rotate_button.setStyleSheet(ROUND_BUTTON_STYLE)
        self.rotate_button.clicked.connect(self.rotation_hint_requested)
        layout.addWidget(self.rotate_button)

        return bar

    def _build_bottom_bar(self) -> QWidget:
        bar = QWidget()
        layout = QVBoxLayout(bar)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(15)

        # Audio controls (shown in audio modes only)
        self.audio_controls = QWidget()
        audio_layout = QHBoxLayout(self.audio_controls)
        audio_layout.setSpacing(30)
        audio_layout.addStretch()

        self.previous_button = QPushButton("⏮")
        self.previous_button.setFixedSize(44, 44)
        self.previous_button.setStyleSheet(ROUND_BUTTON_STYLE)
        self.previous_button.clicked.connect(self.previous_requested)
        audio_layout.addWidget(self.previous_button)

        self.play_button = QPushButton("▶")
        self.play_button.setFixedSize(56, 56)
        self.play_button.setStyleSheet(ROUND_BUTTON_STYLE)
        self.play_button.clicked.connect(self.playback_toggled)
        audio_layout.addWidget(self.play_button)

        self.next_button = QPushButton("⏭")
        self.next_button.setFixedSize(44, 44)
        self.next_button.setStyleSheet(ROUND_BUTTON_STYLE)
        self.next_button.clicked.connect(self.next_requested)
        audio_layout.addWidget(self.next_button)

        audio_layout.addStretch()
        layout.addWidget(self.audio_controls)

        self.page_dots_label = QLabel()
        self.page_dots_label.setAlignment(Qt.AlignCenter)
        self.page_dots_label.setStyleSheet("QLabel { color: white; font-size: 10px; }")
        layout.addWidget(self.page_dots_label)

        self.page_label = QLabel()
        self.page_label.setAlignment(Qt.AlignCenter)
        self.page_label.setStyleSheet("""
            QLabel {
                color: white;
                font-size: 12px;
                background-color: rgba(0, 0, 0, 153);
                border-radius: 10px;
                padding: 6px 12px;
            }
        """)
        layout.addWidget(self.page_label, alignment=Qt.AlignHCenter)

        return bar

    def render_state(self, state: ViewerState):
        """Redraw the page and the overlay from a viewer snapshot."""
        self.current_state = state
        page = state.page

        self.image_label.setStyleSheet(gradient_style(page.hue))
        self.text_label.setText(page.text)

        self.title_label.setText(state.book.title)
        self.mode_button.setIcon(QIcon.fromTheme(READING_MODE_ICONS[state.reading_mode]))
        self.mode_button.setToolTip(READING_MODE_LABELS[state.reading_mode])
        for mode, action in self.mode_actions.items():
            action.setChecked(mode is state.reading_mode)

        self.audio_controls.setVisible(state.show_audio_controls)
        self.previous_button.setEnabled(state.can_go_previous)
        self.next_button.setEnabled(state.can_go_next)
        self.play_button.setText("⏸" if state.is_playing else "▶")

        self.page_dots_label.setText(self.page_dots(state.current_page, state.total_pages))
        self.page_label.setText(state.page_label)

        self.controls.setVisible(state.controls_visible)
        self._apply_layout()

    @staticmethod
    def page_dots(current_page: int, total_pages: int) -> str:
        dots: List[str] = ["●" if index == current_page else "○" for index in range(total_pages)]
        return " ".join(dots)

    def current_layout(self) -> PageLayout:
        return compute_page_layout(self.width(), self.height(), self.device_idiom)

    def _apply_layout(self):
        if self.current_state is None:
            return
        layout = self.current_layout()
        page = self.current_state.page
        font = f"font-size: {layout.font_size}px; font-weight: 500;"
        padding = f"padding: 30px {layout.text_padding}px 0px {layout.text_padding}px;"

        if layout.text_overlaid:
            # Illustration fills the window; the text is drawn on top of it
            self.image_label.setMinimumHeight(0)
            self.image_label.setMaximumHeight(16777215)
            self.image_label.setText(f"ページ {page.page_number}\n\n{page.text}")
            self.image_label.setStyleSheet(
                gradient_style(page.hue).replace("color: white;", f"color: white; {font}")
            )
            self.text_label.hide()
        else:
            self.image_label.setFixedHeight(layout.image_height)
            self.image_label.setText(f"ページ {page.page_number}")
            self.text_label.setStyleSheet(
                f"QLabel {{ color: white; background-color: black; {font} {padding} }}"
            )
            self.text_label.show()

    def show_rotation_hint(self, is_landscape: bool):
        """Tell the reader how to switch orientation."""
        title = "縦向きで読む" if is_landscape else "横向きで読む"
        lines = [
            "デバイスを回転させてください",
            "",
            "・画面の向きのロックがオフになっていることを確認",
        ]
        if not is_landscape:
            lines.append("・横向きでは画像が全画面表示されます")
        QMessageBox.information(self, title, "\n".join(lines))

    def mousePressEvent(self, event):
        """Presses that reach the screen itself landed outside any control."""
        if event.button() == Qt.LeftButton:
            self._press_pos = event.position()
        else:
            super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        """A horizontal drag turns the page; anything shorter is a tap."""
        if event.button() != Qt.LeftButton or self._press_pos is None:
            super().mouseReleaseEvent(event)
            return
        delta = event.position() - self._press_pos
        self._press_pos = None
        if abs(delta.x()) >= SWIPE_DISTANCE and abs(delta.x()) > abs(delta.y()):
            # Dragging the page to the left reveals the next one
            if delta.x() < 0:
                self.next_requested.emit()
            else:
                self.previous_requested.emit()
        else:
            self.page_tapped.emit()

    def wheelEvent(self, event):
        """Turn one page per wheel notch, in either scroll direction."""
        angle = event.angleDelta()
        step = angle.x() if abs(angle.x()) > abs(angle.y()) else angle.y()
        self._wheel_remainder += step
        while abs(self._wheel_remainder) >= WHEEL_NOTCH:
            if self._wheel_remainder < 0:
                self._wheel_remainder += WHEEL_NOTCH
                self.next_requested.emit()
            else:
                self._wheel_remainder -= WHEEL_NOTCH
                self.previous_requested.emit()
        event.accept()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.viewport_resized.emit(self.width(), self.height())
        self._apply_layout()
