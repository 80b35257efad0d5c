"""HadithEntry entity - one multilingual text record."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Placeholder written by the scraper for translations it could not find
NOT_AVAILABLE = "Not available on the source page"

LANGUAGE_FIELDS = ("arabic", "english", "turkish", "german", "french")
METADATA_FIELDS = ("narrator", "source")


@dataclass(frozen=True)
class HadithEntry:
    """Represents a single hadith with optional per-language texts and metadata.

    All fields hold plain, unescaped text.
    """

    arabic: Optional[str] = None
    english: Optional[str] = None
    turkish: Optional[str] = None
    german: Optional[str] = None
    french: Optional[str] = None
    narrator: Optional[str] = None
    source: Optional[str] = None

    def text_for(self, field_name: str) -> Optional[str]:
        """Return the field's text, or None when missing, empty or the sentinel."""
        value = getattr(self, field_name, None)
        if not value or value == NOT_AVAILABLE:
            return None
        return value

    def has_any_language(self) -> bool:
        """Returns True if at least one language field carries real text."""
        return any(self.text_for(name) for name in LANGUAGE_FIELDS)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HadithEntry":
        """Build an entry from a decoded JSON record, ignoring non-string values."""
        values = {}
        for name in LANGUAGE_FIELDS + METADATA_FIELDS:
            value = data.get(name)
            if isinstance(value, str):
                values[name] = value
        return cls(**values)
