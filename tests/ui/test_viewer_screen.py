#!/usr/bin/env python3
"""
Tests for ViewerScreen - validates rendering of viewer state.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QPoint, QPointF, Qt
from PySide6.QtGui import QWheelEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from picture_book.coordinators import ViewerController, ViewerState
from picture_book.core import Book, ReadingMode, build_story_pages
from picture_book.io import CatalogStore, DatabaseManager
from picture_book.ui import ViewerScreen


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def make_state(current_page=0, reading_mode=ReadingMode.SILENT, controls_visible=True,
               is_playing=False):
    book = Book(
        id="book_003",
        title="かぐや姫",
        cover_image_name="kaguya",
        created_at=datetime(2025, 7, 2, tzinfo=timezone.utc),
    )
    pages = build_story_pages(book)
    return ViewerState(
        book=book,
        page=pages[current_page],
        current_page=current_page,
        total_pages=len(pages),
        reading_mode=reading_mode,
        controls_visible=controls_visible,
        is_playing=is_playing,
        is_landscape=False,
    )


def make_screen(width=390, height=844, device_idiom="phone"):
    ensure_qt_app()
    screen = ViewerScreen(device_idiom=device_idiom)
    screen.resize(width, height)
    return screen


def test_render_shows_title_text_and_page_label():
    screen = make_screen()
    screen.render_state(make_state())

    assert screen.title_label.text() == "かぐや姫"
    assert "かぐや姫" in screen.text_label.text()
    assert screen.page_label.text() == "1 / 5"
    assert screen.page_dots_label.text() == "● ○ ○ ○ ○"


def test_silent_mode_hides_audio_controls():
    screen = make_screen()
    screen.render_state(make_state())

    assert screen.audio_controls.isHidden()


def test_audio_mode_shows_controls_with_boundaries():
    screen = make_screen()
    screen.render_state(make_state(current_page=4, reading_mode=ReadingMode.AUDIO_MANUAL))

    assert not screen.audio_controls.isHidden()
    assert screen.previous_button.isEnabled()
    assert not screen.next_button.isEnabled()


def test_play_button_reflects_playback():
    screen = make_screen()
    screen.render_state(make_state(reading_mode=ReadingMode.AUDIO_AUTO, is_playing=True))
    assert screen.play_button.text() == "⏸"

    screen.render_state(make_state(reading_mode=ReadingMode.AUDIO_AUTO, is_playing=False))
    assert screen.play_button.text() == "▶"


def test_reading_mode_menu_marks_current_mode():
    screen = make_screen()
    screen.render_state(make_state(reading_mode=ReadingMode.AUDIO_MANUAL))

    assert screen.mode_actions[ReadingMode.AUDIO_MANUAL].isChecked()
    assert not screen.mode_actions[ReadingMode.SILENT].isChecked()


def test_selecting_mode_emits_value():
    screen = make_screen()
    selected = []
    screen.reading_mode_selected.connect(selected.append)

    screen.mode_actions[ReadingMode.AUDIO_AUTO].trigger()

    assert selected == ["audio_auto"]


def test_hidden_controls():
    screen = make_screen()
    screen.render_state(make_state(controls_visible=False))

    assert screen.controls.isHidden()


def test_portrait_layout_puts_text_below_image():
    screen = make_screen(390, 844)
    screen.render_state(make_state())

    assert not screen.text_label.isHidden()
    assert screen.image_label.maximumHeight() == 219
    assert screen.image_label.text() == "ページ 1"


def test_landscape_layout_overlays_text_on_image():
    screen = make_screen(844, 390)
    screen.render_state(make_state())

    assert screen.text_label.isHidden()
    assert "かぐや姫" in screen.image_label.text()


def test_buttons_emit_signals():
    screen = make_screen()
    screen.render_state(make_state(current_page=2, reading_mode=ReadingMode.AUDIO_MANUAL))
    events = []
    screen.next_requested.connect(lambda: events.append("next"))
    screen.previous_requested.connect(lambda: events.append("previous"))
    screen.playback_toggled.connect(lambda: events.append("play"))
    screen.close_requested.connect(lambda: events.append("close"))
    screen.show()

    QTest.mouseClick(screen.next_button, Qt.LeftButton)
    QTest.mouseClick(screen.previous_button, Qt.LeftButton)
    QTest.mouseClick(screen.play_button, Qt.LeftButton)
    QTest.mouseClick(screen.close_button, Qt.LeftButton)

    assert events == ["next", "previous", "play", "close"]


def test_click_on_screen_emits_page_tapped():
    screen = make_screen()
    taps = []
    screen.page_tapped.connect(lambda: taps.append(True))
    screen.show()

    QTest.mouseClick(screen, Qt.LeftButton)

    assert taps == [True]


def test_resize_reports_viewport():
    screen = make_screen()
    sizes = []
    screen.viewport_resized.connect(lambda w, h: sizes.append((w, h)))
    screen.show()

    screen.resize(844, 390)
    QApplication.processEvents()

    assert sizes[-1] == (844, 390)
    screen.hide()


# ============================================================================
# Pointer navigation
# ============================================================================


@pytest.fixture
def reading_session():
    ensure_qt_app()
    database = DatabaseManager(":memory:")
    database.ensure_schema()
    store = CatalogStore(database.connection)
    store.seed_sample_data_if_empty()
    screen = make_screen()
    controller = ViewerController(screen, store, MagicMock(), hide_delay_ms=60000)
    screen.show()
    controller.open_book("book_001")
    yield screen, controller
    controller.close()
    database.close()


def scroll(screen, dy=0, dx=0):
    center = QPointF(100, 100)
    event = QWheelEvent(
        center,
        center,
        QPoint(0, 0),
        QPoint(dx, dy),
        Qt.NoButton,
        Qt.NoModifier,
        Qt.NoScrollPhase,
        False,
    )
    QApplication.sendEvent(screen, event)


def drag(screen, start_x, end_x, y=400):
    QTest.mousePress(screen, Qt.LeftButton, Qt.NoModifier, QPoint(start_x, y))
    QTest.mouseRelease(screen, Qt.LeftButton, Qt.NoModifier, QPoint(end_x, y))


def test_wheel_turns_pages_in_silent_mode(reading_session):
    screen, controller = reading_session
    assert controller.state().reading_mode is ReadingMode.SILENT
    assert not screen.audio_controls.isVisibleTo(screen)

    for _ in range(6):
        scroll(screen, dy=-120)
    assert controller.state().current_page == 4

    for _ in range(6):
        scroll(screen, dy=120)
    assert controller.state().current_page == 0


def test_horizontal_wheel_and_partial_notches(reading_session):
    screen, controller = reading_session

    scroll(screen, dx=-120)
    assert controller.state().current_page == 1

    scroll(screen, dy=-60)
    assert controller.state().current_page == 1
    scroll(screen, dy=-60)
    assert controller.state().current_page == 2


def test_drag_turns_pages_and_clamps(reading_session):
    screen, controller = reading_session

    drag(screen, 300, 100)
    assert controller.state().current_page == 1

    drag(screen, 100, 300)
    drag(screen, 100, 300)
    assert controller.state().current_page == 0

    for _ in range(6):
        drag(screen, 300, 100)
    assert controller.state().current_page == 4


def test_short_drag_is_a_tap(reading_session):
    screen, controller = reading_session
    assert controller.state().controls_visible is True

    drag(screen, 200, 190)

    assert controller.state().current_page == 0
    assert controller.state().controls_visible is False
