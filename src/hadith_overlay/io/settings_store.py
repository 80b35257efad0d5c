"""Settings Store - QSettings-backed configuration with change notification."""

from pathlib import Path
from typing import Any, Mapping, Optional

from PySide6.QtCore import QFileSystemWatcher, QObject, QSettings, Signal, Slot

from hadith_overlay.core import OverlaySettings, SettingsKey
from hadith_overlay.logger_config import get_logger

logger = get_logger(__name__)

ORGANIZATION_NAME = "HadithOverlay"
APPLICATION_NAME = "hadith-overlay"


class SettingsStore(QObject):
    """
    Shared configuration store for the overlay.

    Reads produce immutable OverlaySettings snapshots. Every write made
    through the store emits ``changed`` with the written key; edits made to
    the INI file by other programs emit ``changed`` with an empty key.
    """

    # Signal emitted after a value changed (settings key, "" when unknown)
    changed = Signal(str)

    def __init__(self, settings: Optional[QSettings] = None, watch_file: bool = True):
        super().__init__()

        if settings is None:
            settings = QSettings(
                QSettings.Format.IniFormat,
                QSettings.Scope.UserScope,
                ORGANIZATION_NAME,
                APPLICATION_NAME,
            )
        self._settings = settings
        self._watcher: Optional[QFileSystemWatcher] = None

        if watch_file:
            self._start_watching()

    @classmethod
    def from_file(cls, path: Path, watch_file: bool = True) -> "SettingsStore":
        """Create a store backed by an explicit INI file."""
        return cls(QSettings(str(path), QSettings.Format.IniFormat), watch_file=watch_file)

    @property
    def file_path(self) -> Path:
        """Location of the backing INI file."""
        return Path(self._settings.fileName())

    def snapshot(self) -> OverlaySettings:
        """Read every known key once and return a typed snapshot."""
        values = {
            key: self._settings.value(key)
            for key in SettingsKey.ALL
            if self._settings.contains(key)
        }
        return OverlaySettings.from_mapping(values)

    def set_value(self, key: str, value: Any) -> None:
        """
        Write a single key and notify subscribers.

        Raises:
            KeyError: if key is not a known settings key.
        """
        self.set_values({key: value})

    def set_values(self, values: Mapping[str, Any]) -> None:
        """
        Write several keys, then notify once per key in write order.

        Every key is written before the first notification, so subscribers
        never read a half-written group such as an x/y position pair.

        Raises:
            KeyError: if any key is not a known settings key. Nothing is written.
        """
        unknown = [key for key in values if key not in SettingsKey.ALL]
        if unknown:
            raise KeyError(f"Unknown settings key: {unknown[0]}")

        for key, value in values.items():
            if key == SettingsKey.ENABLED_LANGUAGES and not isinstance(value, str):
                value = ",".join(sorted(value))
            self._settings.setValue(key, value)

        for key in values:
            self.changed.emit(key)

    def ensure_defaults(self) -> None:
        """Write defaults for missing keys so the INI file lists every option."""
        defaults = OverlaySettings()
        written = False
        for key in SettingsKey.ALL:
            if self._settings.contains(key):
                continue
            value = getattr(defaults, key.replace("-", "_"))
            if key == SettingsKey.ENABLED_LANGUAGES:
                value = ",".join(sorted(value))
            self._settings.setValue(key, value)
            written = True

        if written:
            self._settings.sync()
            if self._watcher is not None:
                self._watch_path()

    def close(self) -> None:
        """Flush pending writes and stop watching the INI file."""
        if self._watcher is not None:
            self._watcher.fileChanged.disconnect(self._on_file_changed)
            self._watcher.deleteLater()
            self._watcher = None
        self._settings.sync()

    def _start_watching(self) -> None:
        self._watcher = QFileSystemWatcher(self)
        self._watcher.fileChanged.connect(self._on_file_changed)
        self._watch_path()

    def _watch_path(self) -> None:
        path = self._settings.fileName()
        if Path(path).exists() and path not in self._watcher.files():
            self._watcher.addPath(path)

    @Slot(str)
    def _on_file_changed(self, path: str) -> None:
        """Reload after an external edit; QSettings replaces the file atomically, so re-add it."""
        if self._watcher is None:
            return
        self._watch_path()
        self._settings.sync()
        logger.debug("Settings file %s changed, reloaded", path)
        self.changed.emit("")
