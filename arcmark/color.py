"""Named and RGB colours used in styles and meta properties."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class ColorError(ValueError):
    """Raised when a colour description cannot be understood."""


class ColorLiteral(Enum):
    """Colour names the markup accepts."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    INDIGO = "indigo"
    VIOLET = "violet"
    BLACK = "black"
    WHITE = "white"
    GRAY = "gray"
    BROWN = "brown"
    PINK = "pink"
    PURPLE = "purple"
    CYAN = "cyan"
    MAGENTA = "magenta"
    LIME = "lime"
    TEAL = "teal"
    MAROON = "maroon"
    NAVY = "navy"


_LITERAL_RGB: dict[ColorLiteral, tuple[int, int, int]] = {
    ColorLiteral.RED: (255, 0, 0),
    ColorLiteral.ORANGE: (255, 165, 0),
    ColorLiteral.YELLOW: (255, 255, 0),
    ColorLiteral.GREEN: (0, 255, 0),
    ColorLiteral.BLUE: (0, 0, 255),
    ColorLiteral.INDIGO: (75, 0, 130),
    ColorLiteral.VIOLET: (127, 0, 255),
    ColorLiteral.BLACK: (0, 0, 0),
    ColorLiteral.WHITE: (255, 255, 255),
    ColorLiteral.GRAY: (128, 128, 128),
    ColorLiteral.BROWN: (165, 42, 42),
    ColorLiteral.PINK: (255, 192, 203),
    ColorLiteral.PURPLE: (128, 0, 128),
    ColorLiteral.CYAN: (0, 255, 255),
    ColorLiteral.MAGENTA: (255, 0, 255),
    ColorLiteral.LIME: (0, 255, 0),
    ColorLiteral.TEAL: (0, 128, 128),
    ColorLiteral.MAROON: (128, 0, 0),
    ColorLiteral.NAVY: (0, 0, 128),
}

_BYTE = re.compile(r"\+?[0-9]+")


def _parse_channel(text: str) -> int:
    stripped = text.strip()
    if _BYTE.fullmatch(stripped):
        value = int(stripped)
        if value <= 255:
            return value
    raise ColorError(f"Invalid value for rgb literal: {text}")


@dataclass(frozen=True)
class Color:
    """Either a named colour or an explicit ``(r, g, b)`` triple."""

    value: ColorLiteral | tuple[int, int, int]

    @classmethod
    def from_string(cls, string: str) -> Color:
        """Parse a colour name such as ``red`` or a triple such as ``(255, 0, 0)``."""
        if string.startswith("("):
            parts = string[1:-1].split(",")
            if len(parts) == 3:
                red, green, blue = (_parse_channel(part) for part in parts)
                return cls((red, green, blue))
            if len(parts) > 3:
                raise ColorError(f"Too many values for rgb literal: {string}")
            raise ColorError(f"Insufficient values for rgb literal: {string}")
        try:
            return cls(ColorLiteral(string.lower().strip()))
        except ValueError:
            raise ColorError(f"Invalid color literal: {string}") from None

    def to_rgb(self) -> tuple[int, int, int]:
        """The red, green and blue channels of this colour."""
        if isinstance(self.value, ColorLiteral):
            return _LITERAL_RGB[self.value]
        return self.value

    def build(self) -> str:
        """The CSS form of this colour."""
        red, green, blue = self.to_rgb()
        return f"rgb({red}, {green}, {blue})"