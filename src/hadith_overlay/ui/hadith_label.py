"""Hadith Label - frameless rich-text widget that floats on the desktop."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QLabel, QWidget

from hadith_overlay.core import OverlaySettings

MIN_WIDTH = 400
PADDING = 20
BORDER_RADIUS = 12
FALLBACK_BACKGROUND = "#000000"


class HadithLabel(QLabel):
    """Displays the rendered hadith document with a translucent rounded background."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

        self.setObjectName("HadithLabel")
        self.setTextFormat(Qt.TextFormat.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)

    def apply_style(self, settings: OverlaySettings):
        """Recompute background, padding, width bounds and base font from settings."""
        color = QColor(settings.background_color)
        if not color.isValid():
            color = QColor(FALLBACK_BACKGROUND)
        color.setAlphaF(settings.background_opacity)

        self.setStyleSheet(
            "QLabel#HadithLabel { "
            f"background-color: rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()}); "
            f"padding: {PADDING}px; "
            f"border-radius: {BORDER_RADIUS}px; "
            "}"
        )

        self.setMinimumWidth(min(MIN_WIDTH, settings.max_width))
        self.setMaximumWidth(settings.max_width)

        font = self.font()
        font.setPointSize(settings.font_size)
        self.setFont(font)
        self.adjustSize()

    def show_markup(self, markup: str):
        """Replace the displayed document and shrink-wrap the widget around it."""
        self.setText(markup)
        self.adjustSize()
