"""Unit tests for SettingsStore."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from hadith_overlay.core import OverlaySettings, SettingsKey
from hadith_overlay.io import SettingsStore


def ensure_qt_app():
    if QApplication.instance() is None:
        QApplication([])


@pytest.fixture
def store(tmp_path):
    """Provide a SettingsStore backed by a temporary INI file without a watcher."""
    return SettingsStore.from_file(tmp_path / "settings.ini", watch_file=False)


class TestSnapshot:
    def test_empty_store_gives_defaults(self, store):
        assert store.snapshot() == OverlaySettings()

    def test_written_values_round_trip_through_snapshot(self, store):
        store.set_value(SettingsKey.FONT_SIZE, 20)
        store.set_value(SettingsKey.ALWAYS_ON_TOP, True)
        store.set_value(SettingsKey.ENABLED_LANGUAGES, {"tr", "en"})

        snapshot = store.snapshot()

        assert snapshot.font_size == 20
        assert snapshot.always_on_top is True
        assert snapshot.enabled_languages == frozenset({"en", "tr"})

    def test_values_survive_reopening_the_file(self, tmp_path):
        path = tmp_path / "settings.ini"
        first = SettingsStore.from_file(path, watch_file=False)
        first.set_value(SettingsKey.POSITION_X, 105)
        first.set_value(SettingsKey.POSITION_Y, 107)
        first.close()

        second = SettingsStore.from_file(path, watch_file=False)
        snapshot = second.snapshot()

        assert (snapshot.position_x, snapshot.position_y) == (105, 107)


class TestNotifications:
    def test_set_value_emits_changed_with_key(self, store):
        listener = MagicMock()
        store.changed.connect(listener)

        store.set_value(SettingsKey.SHOW_SOURCE, False)

        listener.assert_called_once_with(SettingsKey.SHOW_SOURCE)

    def test_set_values_writes_everything_before_notifying(self, store):
        seen = []
        store.changed.connect(
            lambda key: seen.append((key, store.snapshot().position_x, store.snapshot().position_y))
        )

        store.set_values({SettingsKey.POSITION_X: 105, SettingsKey.POSITION_Y: 107})

        assert seen == [
            (SettingsKey.POSITION_X, 105, 107),
            (SettingsKey.POSITION_Y, 105, 107),
        ]

    def test_set_values_with_unknown_key_writes_nothing(self, store):
        listener = MagicMock()
        store.changed.connect(listener)

        with pytest.raises(KeyError):
            store.set_values({SettingsKey.FONT_SIZE: 30, "window-title": "x"})

        assert store.snapshot().font_size == OverlaySettings().font_size
        listener.assert_not_called()

    def test_unknown_key_is_rejected(self, store):
        with pytest.raises(KeyError):
            store.set_value("window-title", "x")

    def test_ensure_defaults_writes_every_key_without_notifying(self, store):
        listener = MagicMock()
        store.changed.connect(listener)

        store.ensure_defaults()

        assert store.file_path.exists()
        assert store.snapshot() == OverlaySettings()
        listener.assert_not_called()


class TestFileWatching:
    def test_external_edit_emits_changed(self, tmp_path):
        ensure_qt_app()
        store = SettingsStore.from_file(tmp_path / "watched.ini")
        store.ensure_defaults()
        listener = MagicMock()
        store.changed.connect(listener)

        store._on_file_changed(str(store.file_path))

        listener.assert_called_once_with("")
        store.close()

    def test_file_path_is_the_ini_file(self, store, tmp_path):
        assert store.file_path == tmp_path / "settings.ini"
