"""Tests for CoverImageService - cover name resolution and loading."""

import pytest
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication

from picture_book.services import CoverImageService


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def assets_dir(tmp_path):
    directory = tmp_path / "covers"
    directory.mkdir()
    return directory


def _write_image(path, width=40, height=80):
    image = QImage(width, height, QImage.Format_RGB32)
    image.fill(QColor("red"))
    assert image.save(str(path))


def test_resolve_missing_cover_returns_none(assets_dir):
    service = CoverImageService(assets_dir)
    assert service.resolve("urashima") is None


def test_resolve_empty_name_returns_none(assets_dir):
    assert CoverImageService(assets_dir).resolve("") is None


def test_resolve_prefers_png(assets_dir):
    (assets_dir / "momotaro.jpg").write_bytes(b"")
    (assets_dir / "momotaro.png").write_bytes(b"")

    assert CoverImageService(assets_dir).resolve("momotaro") == assets_dir / "momotaro.png"


def test_resolve_falls_back_to_jpeg(assets_dir):
    (assets_dir / "kaguya.jpeg").write_bytes(b"")

    assert CoverImageService(assets_dir).resolve("kaguya") == assets_dir / "kaguya.jpeg"


def test_load_pixmap_scales_to_height(assets_dir):
    ensure_qt_app()
    _write_image(assets_dir / "tsuru.png")

    pixmap = CoverImageService(assets_dir).load_pixmap("tsuru", 200)

    assert pixmap is not None
    assert pixmap.height() == 200
    assert pixmap.width() == 100


def test_load_pixmap_unreadable_file_returns_none(assets_dir):
    ensure_qt_app()
    (assets_dir / "broken.png").write_bytes(b"not an image")

    assert CoverImageService(assets_dir).load_pixmap("broken", 200) is None


def test_load_pixmap_missing_returns_none(assets_dir):
    ensure_qt_app()
    assert CoverImageService(assets_dir).load_pixmap("missing", 200) is None
