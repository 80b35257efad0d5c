"""Tests for the tray indicator menu."""

from unittest.mock import MagicMock

from PySide6.QtWidgets import QApplication

from hadith_overlay.ui import HadithIndicator


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


def test_menu_lists_actions_in_order():
    ensure_qt_app()
    indicator = HadithIndicator()

    texts = [action.text() for action in indicator.menu.actions() if not action.isSeparator()]

    assert texts == ["Refresh Hadith", "Settings", "Quit"]
    indicator.release()


def test_refresh_action_emits_refresh_requested():
    ensure_qt_app()
    indicator = HadithIndicator()
    listener = MagicMock()
    indicator.refresh_requested.connect(listener)

    indicator.refresh_action.trigger()

    listener.assert_called_once()
    indicator.release()


def test_settings_action_emits_settings_requested():
    ensure_qt_app()
    indicator = HadithIndicator()
    listener = MagicMock()
    indicator.settings_requested.connect(listener)

    indicator.settings_action.trigger()

    listener.assert_called_once()
    indicator.release()


def test_quit_action_emits_quit_requested():
    ensure_qt_app()
    indicator = HadithIndicator()
    listener = MagicMock()
    indicator.quit_requested.connect(listener)

    indicator.quit_action.trigger()

    listener.assert_called_once()
    indicator.release()
