"""I/O layer - Content file access and the settings store."""

from .hadith_loader import DEFAULT_DATA_FILE, HadithLoader
from .settings_store import SettingsStore

__all__ = ["HadithLoader", "DEFAULT_DATA_FILE", "SettingsStore"]
