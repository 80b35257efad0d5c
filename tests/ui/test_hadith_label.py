"""Tests for HadithLabel styling and rendering."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication

from hadith_overlay.core import OverlaySettings
from hadith_overlay.ui import HadithLabel


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_label_renders_rich_text():
    ensure_qt_app()
    label = HadithLabel()

    label.show_markup('<span style="color: #FFFFFF;">Text</span>')

    assert label.textFormat() == Qt.TextFormat.RichText
    assert label.wordWrap()
    assert label.text() == '<span style="color: #FFFFFF;">Text</span>'


def test_apply_style_sets_translucent_background():
    ensure_qt_app()
    label = HadithLabel()

    label.apply_style(OverlaySettings(background_color="#102030", background_opacity=1.0))

    style = label.styleSheet()
    assert "rgba(16, 32, 48, 255)" in style
    assert "padding: 20px" in style
    assert "border-radius: 12px" in style


def test_apply_style_zero_opacity():
    ensure_qt_app()
    label = HadithLabel()

    label.apply_style(OverlaySettings(background_color="#FFFFFF", background_opacity=0.0))

    assert "rgba(255, 255, 255, 0)" in label.styleSheet()


def test_invalid_color_falls_back_to_black():
    ensure_qt_app()
    label = HadithLabel()

    label.apply_style(OverlaySettings(background_color="not-a-color", background_opacity=1.0))

    assert "rgba(0, 0, 0, 255)" in label.styleSheet()


def test_apply_style_sets_width_bounds_and_font():
    ensure_qt_app()
    label = HadithLabel()

    label.apply_style(OverlaySettings(max_width=900, font_size=18))

    assert label.maximumWidth() == 900
    assert label.minimumWidth() == 400
    assert label.font().pointSize() == 18


def test_narrow_max_width_lowers_minimum():
    ensure_qt_app()
    label = HadithLabel()

    label.apply_style(OverlaySettings(max_width=300))

    assert label.minimumWidth() == 300
    assert label.maximumWidth() == 300
