"""
Theme preferences: colors and font of the board. Presentation only, but stored with the same line-based convention as the game snapshot.
----

    <background color as packed RGB integer>
    <button color as packed RGB integer>
    <font name>
    <font size>

Colors are written as 0xRRGGBB integers. When reading, only the lower 24 bits are kept, so files holding signed ARGB
integers (ex. -4144960 for light gray with an opaque alpha channel) load fine as well.
"""

from dataclasses import dataclass, replace
from typing import Optional, Self

from src.core.config import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_BUTTON_COLOR,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
)
from src.core.exceptions import (
    InvalidRequestError,
    InvalidThemeError,
    MissingPreferencesError,
)

RGB_MASK = 0xFFFFFF
NUM_THEME_LINES = 4


def pack_rgb(red: int, green: int, blue: int) -> int:
    for channel in (red, green, blue):
        if not 0 <= channel <= 255:
            raise InvalidThemeError(f"Color channel {channel} outside of 0-255.")
    return (red << 16) | (green << 8) | blue


def unpack_rgb(color: int) -> tuple[int, int, int]:
    color &= RGB_MASK
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def is_storable_font_name(font_name: str) -> bool:
    """The font name has a line of its own in the preferences, and surrounding whitespace is not kept when reading"""
    if not font_name or font_name.strip() != font_name:
        return False
    return "".join(font_name.splitlines()) == font_name


@dataclass(frozen=True)
class Theme:
    background_color: int
    button_color: int
    font_name: str
    font_size: int

    @classmethod
    def default(cls) -> Self:
        """Light gray background, white buttons, 60pt Arial"""
        return cls(
            DEFAULT_BACKGROUND_COLOR,
            DEFAULT_BUTTON_COLOR,
            DEFAULT_FONT_NAME,
            DEFAULT_FONT_SIZE,
        )

    def as_tuple(self) -> tuple[int, int, str, int]:
        return self.background_color, self.button_color, self.font_name, self.font_size


# The themes offered in the theme selector
PRESETS: dict[str, Theme] = {
    "Classic Mode": Theme.default(),
    "Dark Mode": replace(
        Theme.default(),
        background_color=pack_rgb(64, 64, 64),
        button_color=pack_rgb(0, 0, 0),
    ),
    "Light Mode": replace(
        Theme.default(),
        background_color=pack_rgb(255, 255, 255),
        button_color=pack_rgb(173, 216, 230),
    ),
}


def apply_preset(theme: Theme, preset_name: str) -> Theme:
    """Presets only swap the colors. The font stays what the user picked."""
    if preset_name not in PRESETS:
        raise InvalidRequestError(
            f"Unknown theme {preset_name!r}. Pick one from {', '.join(PRESETS)}"
        )
    preset = PRESETS[preset_name]
    return replace(
        theme,
        background_color=preset.background_color,
        button_color=preset.button_color,
    )


def customize_theme(
    theme: Theme,
    background_color: Optional[int] = None,
    button_color: Optional[int] = None,
    font_name: Optional[str] = None,
    font_size: Optional[int | str] = None,
) -> Theme:
    """
    New theme with the user's choices applied.
    ----

    * a color left at None keeps the current color (ex. color picker was cancelled)
    * a blank font name keeps the current font, and the font size is then ignored as well
    * a font name with a line break, or a font size that is not a positive integer, raises InvalidThemeError.
      The caller keeps the old theme.
    """
    updated = replace(
        theme,
        background_color=theme.background_color
        if background_color is None
        else background_color & RGB_MASK,
        button_color=theme.button_color
        if button_color is None
        else button_color & RGB_MASK,
    )
    if font_name is None or not font_name.strip():
        return updated

    font_name = font_name.strip()
    if not is_storable_font_name(font_name):
        raise InvalidThemeError(f"Font name {font_name!r} cannot be saved: no line breaks allowed.")
    size = theme.font_size if font_size is None else _parse_font_size(font_size)
    return replace(updated, font_name=font_name, font_size=size)


def serialize_theme(theme: Theme) -> str:
    """Raises InvalidThemeError for a font name that would not read back"""
    if not is_storable_font_name(theme.font_name):
        raise InvalidThemeError(
            f"Font name {theme.font_name!r} cannot be saved: it must be a single line without surrounding whitespace."
        )

    lines = [
        str(theme.background_color & RGB_MASK),
        str(theme.button_color & RGB_MASK),
        theme.font_name,
        str(theme.font_size),
    ]
    return "\n".join(lines) + "\n"


def deserialize_theme(text: str) -> Theme:
    """Raises MissingPreferencesError when a line is missing or cannot be parsed"""
    lines = [line.strip() for line in text.splitlines()]
    if len(lines) < NUM_THEME_LINES:
        raise MissingPreferencesError(
            f"Theme preferences need {NUM_THEME_LINES} lines, found {len(lines)}."
        )

    background, button, font_name, font_size = lines[:NUM_THEME_LINES]
    if not font_name:
        raise MissingPreferencesError("Theme preferences hold no font name.")

    try:
        return Theme(
            background_color=int(background) & RGB_MASK,
            button_color=int(button) & RGB_MASK,
            font_name=font_name,
            font_size=_parse_font_size(font_size),
        )
    except (ValueError, InvalidThemeError) as e:
        raise MissingPreferencesError(f"Cannot parse theme preferences: {e}") from e


def _parse_font_size(font_size: int | str) -> int:
    try:
        size = int(font_size)
    except ValueError as e:
        raise InvalidThemeError(f"Font size must be a number, got {font_size!r}.") from e
    if size <= 0:
        raise InvalidThemeError(f"Font size must be positive, got {size}.")
    return size
