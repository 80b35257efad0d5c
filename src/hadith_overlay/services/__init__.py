"""Services layer - content selection, rendering, scheduling and configuration."""

from hadith_overlay.services.app_config import AppConfig
from hadith_overlay.services.hadith_picker import pick_random
from hadith_overlay.services.markup_renderer import (
    ENABLE_LANGUAGE_WARNING,
    LTR_MARK,
    NO_CONTENT_MESSAGE,
    escape_markup,
    render_markup,
)
from hadith_overlay.services.refresh_scheduler import RefreshScheduler

__all__ = [
    "AppConfig",
    "pick_random",
    "render_markup",
    "escape_markup",
    "NO_CONTENT_MESSAGE",
    "ENABLE_LANGUAGE_WARNING",
    "LTR_MARK",
    "RefreshScheduler",
]
