"""Markup Renderer - composes the Qt rich-text document shown by the overlay."""

import html
import math
from typing import List, Optional

from hadith_overlay.core import HadithEntry, OverlaySettings

NO_CONTENT_MESSAGE = "No hadiths available"
ENABLE_LANGUAGE_WARNING = (
    '<span style="color: #FF0000;">Please enable at least one language in settings</span>'
)

LTR_MARK = "\u200e"
LTR_PREFIX = LTR_MARK * 3

ARABIC_SIZE_FACTOR = 1.1
METADATA_SIZE_OFFSET = 2
BLOCK_SEPARATOR = "<br><br>"
LINE_SEPARATOR = "<br>"

# (language code, entry field, settings attribute holding the color)
LANGUAGE_ORDER = (
    ("en", "english", "english_color"),
    ("tr", "turkish", "turkish_color"),
    ("de", "german", "german_color"),
    ("fr", "french", "french_color"),
)


def escape_markup(text: str) -> str:
    """Escape & < > " ' so free-form text cannot break the document."""
    return html.escape(text, quote=True)


def render_markup(entry: Optional[HadithEntry], settings: OverlaySettings) -> str:
    """
    Build the overlay document for one entry.

    Composition order:
    1. Arabic block (always, when present) at 1.1x the base size
    2. Enabled translations in fixed order english, turkish, german, french
    3. A warning instead of 1-2 when neither produced anything
    4. Narrator line, when enabled and present
    5. Source line, when enabled and present

    Args:
        entry: The entry to render, or None when no content is loaded.
        settings: Configuration snapshot.

    Returns:
        The rich-text document, trimmed of surrounding whitespace.
    """
    if entry is None:
        return NO_CONTENT_MESSAGE

    blocks: List[str] = []

    arabic = entry.text_for("arabic")
    if arabic:
        arabic_size = _round_half_up(settings.font_size * ARABIC_SIZE_FACTOR)
        blocks.append(
            f'<span style="font-size: {arabic_size}pt; color: {settings.arabic_color}; '
            f'background-color: {settings.arabic_background_color};">'
            f"{escape_markup(arabic)}</span>"
        )

    for code, field_name, color_attr in LANGUAGE_ORDER:
        if not settings.is_language_enabled(code):
            continue
        text = entry.text_for(field_name)
        if not text:
            continue
        blocks.append(
            _directed_span(text, settings.font_size, getattr(settings, color_attr))
        )

    body = BLOCK_SEPARATOR.join(blocks)
    if not body.strip():
        body = ENABLE_LANGUAGE_WARNING

    metadata: List[str] = []
    meta_size = max(1, settings.font_size - METADATA_SIZE_OFFSET)

    narrator = entry.text_for("narrator")
    if settings.show_narrator and narrator:
        metadata.append(
            _directed_span(f"📖 Narrator: {narrator}", meta_size, settings.source_color)
        )

    source = entry.text_for("source")
    if settings.show_source and source:
        metadata.append(
            _directed_span(f"📚 Source: {source}", meta_size, settings.source_color)
        )

    document = body
    if metadata:
        document += BLOCK_SEPARATOR + LINE_SEPARATOR.join(metadata)

    return document.strip()


def _directed_span(text: str, size: int, color: str) -> str:
    """Wrap text in a sized, colored span forced to left-to-right."""
    return (
        f'<span style="font-size: {size}pt; color: {color};">'
        f"{LTR_PREFIX}{escape_markup(text)}{LTR_MARK}</span>"
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
