"""Domain layer - Pure entities and value objects."""

from .drag_state import IDLE, DragState, Dragging, Idle
from .hadith_entry import LANGUAGE_FIELDS, NOT_AVAILABLE, HadithEntry
from .overlay_settings import (
    MAX_REFRESH_INTERVAL,
    SUPPORTED_LANGUAGES,
    OverlaySettings,
    SettingsKey,
)

__all__ = [
    "HadithEntry",
    "LANGUAGE_FIELDS",
    "NOT_AVAILABLE",
    "OverlaySettings",
    "SettingsKey",
    "SUPPORTED_LANGUAGES",
    "MAX_REFRESH_INTERVAL",
    "DragState",
    "Dragging",
    "Idle",
    "IDLE",
]
