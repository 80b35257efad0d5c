"""OverlaySettings - immutable snapshot of the overlay configuration."""

from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Iterable, Mapping, Optional

# Arabic is always rendered and therefore never part of the enabled set
SUPPORTED_LANGUAGES = ("en", "tr", "de", "fr")

# Longest interval a Qt timer can hold: signed 32-bit milliseconds
MAX_REFRESH_INTERVAL = (2**31 - 1) // (60 * 1000)


class SettingsKey:
    """Names of the keys in the settings store."""

    ENABLED_LANGUAGES = "enabled-languages"
    SHOW_SOURCE = "show-source"
    SHOW_NARRATOR = "show-narrator"
    BACKGROUND_COLOR = "background-color"
    ARABIC_COLOR = "arabic-color"
    ARABIC_BACKGROUND_COLOR = "arabic-background-color"
    TURKISH_COLOR = "turkish-color"
    ENGLISH_COLOR = "english-color"
    GERMAN_COLOR = "german-color"
    FRENCH_COLOR = "french-color"
    SOURCE_COLOR = "source-color"
    BACKGROUND_OPACITY = "background-opacity"
    FONT_SIZE = "font-size"
    MAX_WIDTH = "max-width"
    ALWAYS_ON_TOP = "always-on-top"
    REFRESH_INTERVAL = "refresh-interval"
    POSITION_X = "position-x"
    POSITION_Y = "position-y"

    ALL = (
        ENABLED_LANGUAGES,
        SHOW_SOURCE,
        SHOW_NARRATOR,
        BACKGROUND_COLOR,
        ARABIC_COLOR,
        ARABIC_BACKGROUND_COLOR,
        TURKISH_COLOR,
        ENGLISH_COLOR,
        GERMAN_COLOR,
        FRENCH_COLOR,
        SOURCE_COLOR,
        BACKGROUND_OPACITY,
        FONT_SIZE,
        MAX_WIDTH,
        ALWAYS_ON_TOP,
        REFRESH_INTERVAL,
        POSITION_X,
        POSITION_Y,
    )


@dataclass(frozen=True)
class OverlaySettings:
    """Typed configuration read at one instant, one field per settings key."""

    enabled_languages: FrozenSet[str] = field(default_factory=lambda: frozenset({"en"}))
    show_source: bool = True
    show_narrator: bool = True
    background_color: str = "#000000"
    arabic_color: str = "#FFFFFF"
    arabic_background_color: str = "#1A1A2E"
    turkish_color: str = "#FFD700"
    english_color: str = "#FFFFFF"
    german_color: str = "#87CEEB"
    french_color: str = "#98FB98"
    source_color: str = "#CCCCCC"
    background_opacity: float = 0.7
    font_size: int = 14
    max_width: int = 800
    always_on_top: bool = False
    refresh_interval: int = 30
    position_x: int = 100
    position_y: int = 100

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "OverlaySettings":
        """
        Build a snapshot from raw store values keyed by settings key.

        Raw values may be strings (INI backend) or native types. Missing or
        unparsable values fall back to the field default.

        Args:
            values: Mapping of settings key to raw value.

        Returns:
            A new OverlaySettings instance.
        """
        defaults = cls()

        def read(key: str, convert: Callable[[Any], Any], default: Any) -> Any:
            if key not in values:
                return default
            converted = convert(values[key])
            return default if converted is None else converted

        opacity = read(SettingsKey.BACKGROUND_OPACITY, _to_float, defaults.background_opacity)

        return cls(
            enabled_languages=read(
                SettingsKey.ENABLED_LANGUAGES, _to_languages, defaults.enabled_languages
            ),
            show_source=read(SettingsKey.SHOW_SOURCE, _to_bool, defaults.show_source),
            show_narrator=read(SettingsKey.SHOW_NARRATOR, _to_bool, defaults.show_narrator),
            background_color=read(SettingsKey.BACKGROUND_COLOR, _to_color, defaults.background_color),
            arabic_color=read(SettingsKey.ARABIC_COLOR, _to_color, defaults.arabic_color),
            arabic_background_color=read(
                SettingsKey.ARABIC_BACKGROUND_COLOR, _to_color, defaults.arabic_background_color
            ),
            turkish_color=read(SettingsKey.TURKISH_COLOR, _to_color, defaults.turkish_color),
            english_color=read(SettingsKey.ENGLISH_COLOR, _to_color, defaults.english_color),
            german_color=read(SettingsKey.GERMAN_COLOR, _to_color, defaults.german_color),
            french_color=read(SettingsKey.FRENCH_COLOR, _to_color, defaults.french_color),
            source_color=read(SettingsKey.SOURCE_COLOR, _to_color, defaults.source_color),
            background_opacity=min(max(opacity, 0.0), 1.0),
            font_size=read(SettingsKey.FONT_SIZE, _to_positive_int, defaults.font_size),
            max_width=read(SettingsKey.MAX_WIDTH, _to_positive_int, defaults.max_width),
            always_on_top=read(SettingsKey.ALWAYS_ON_TOP, _to_bool, defaults.always_on_top),
            refresh_interval=read(
                SettingsKey.REFRESH_INTERVAL, _to_refresh_interval, defaults.refresh_interval
            ),
            position_x=read(SettingsKey.POSITION_X, _to_int, defaults.position_x),
            position_y=read(SettingsKey.POSITION_Y, _to_int, defaults.position_y),
        )

    def is_language_enabled(self, code: str) -> bool:
        return code in self.enabled_languages


def _to_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    return None


def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _to_positive_int(value: Any) -> Optional[int]:
    number = _to_int(value)
    if number is None or number < 1:
        return None
    return number


def _to_refresh_interval(value: Any) -> Optional[int]:
    number = _to_positive_int(value)
    if number is None or number > MAX_REFRESH_INTERVAL:
        return None
    return number


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_color(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _to_languages(value: Any) -> Optional[FrozenSet[str]]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        codes: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        codes = value
    else:
        return None
    return frozenset(
        code.strip()
        for code in codes
        if isinstance(code, str) and code.strip() in SUPPORTED_LANGUAGES
    )
