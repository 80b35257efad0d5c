"""
Hadith Overlay - a desktop widget showing a random multilingual hadith.

This package provides:
- A draggable, translucent overlay on the desktop or above all windows
- Arabic text with optional English, Turkish, German and French translations
- Periodic refresh driven by a live settings file
"""

__version__ = "0.1.0"

# Make key components available at package level
from hadith_overlay.core import HadithEntry, OverlaySettings
from hadith_overlay.io import HadithLoader
from hadith_overlay.services import render_markup

__all__ = [
    "HadithEntry",
    "OverlaySettings",
    "HadithLoader",
    "render_markup",
]
