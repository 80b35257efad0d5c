"""UI layer - PySide6 presentation components."""

from .hadith_indicator import HadithIndicator
from .hadith_label import HadithLabel

__all__ = ["HadithLabel", "HadithIndicator"]
