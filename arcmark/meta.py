"""Document-wide properties declared with ``<meta key=value />`` tags."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from .color import Color, ColorError


class MetaError(ValueError):
    """Raised when a meta property is malformed beyond recovery."""


class MetaKind(Enum):
    """The meta property keys the markup understands."""

    NAME = "name"
    TITLE = "title"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_COLOR = "font-color"
    BACKGROUND_COLOR = "background-color"
    ALLOW_HTML = "allow-html"
    TEXT_FONT_SIZE = "text-font-size"
    TEXT_COLOR = "text-color"
    H1_FONT_SIZE = "h1-font-size"
    H1_COLOR = "h1-color"
    H2_FONT_SIZE = "h2-font-size"
    H2_COLOR = "h2-color"
    H3_FONT_SIZE = "h3-font-size"
    H3_COLOR = "h3-color"
    H4_FONT_SIZE = "h4-font-size"
    H4_COLOR = "h4-color"


MetaValue = Union[str, int, bool, Color]

_U8 = re.compile(r"\+?[0-9]+")


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _to_u8(value: str) -> int:
    if _U8.fullmatch(value) and int(value) <= 255:
        return int(value)
    raise MetaError(f"Invalid integer value for meta property: {value}")


def _to_color(value: str) -> Color | None:
    try:
        return Color.from_string(value)
    except ColorError as err:
        print(err, file=sys.stderr)
        return None


def _to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise MetaError(f"Invalid boolean value for allow-html: {lowered}")


_CONVERTERS: dict[MetaKind, Callable[[str], MetaValue | None]] = {
    MetaKind.NAME: str,
    MetaKind.TITLE: str,
    MetaKind.FONT_FAMILY: str,
    MetaKind.FONT_SIZE: _to_u8,
    MetaKind.FONT_COLOR: _to_color,
    MetaKind.BACKGROUND_COLOR: _to_color,
    MetaKind.ALLOW_HTML: _to_bool,
    MetaKind.TEXT_FONT_SIZE: _to_u8,
    MetaKind.TEXT_COLOR: _to_color,
    MetaKind.H1_FONT_SIZE: _to_u8,
    MetaKind.H1_COLOR: _to_color,
    MetaKind.H2_FONT_SIZE: _to_u8,
    MetaKind.H2_COLOR: _to_color,
    MetaKind.H3_FONT_SIZE: _to_u8,
    MetaKind.H3_COLOR: _to_color,
    MetaKind.H4_FONT_SIZE: _to_u8,
    MetaKind.H4_COLOR: _to_color,
}

_TEMPLATES: dict[MetaKind, str] = {
    MetaKind.TITLE: "<title>{}</title>",
    MetaKind.FONT_FAMILY: "<style>* {{ font-family: {}; }}</style>",
    MetaKind.FONT_SIZE: "<style>span {{ font-size: {}px; }}</style>",
    MetaKind.FONT_COLOR: "<style>span {{ color: {}; }}</style>",
    MetaKind.BACKGROUND_COLOR: "<style>html, body, main {{ background-color: {}; }}</style>",
    MetaKind.TEXT_FONT_SIZE: "<style>p {{ font-size: {}px !important; }}</style>",
    MetaKind.TEXT_COLOR: "<style>p {{ color: {}; }}</style>",
    MetaKind.H1_FONT_SIZE: "<style>.h1size {{ font-size: {}px !important; }}</style>",
    MetaKind.H1_COLOR: "<style>.h1size {{ color: {}; }}</style>",
    MetaKind.H2_FONT_SIZE: "<style>.h2size {{ font-size: {}px !important; }}</style>",
    MetaKind.H2_COLOR: "<style>.h2size {{ color: {}; }}</style>",
    MetaKind.H3_FONT_SIZE: "<style>.h3size {{ font-size: {}px !important; }}</style>",
    MetaKind.H3_COLOR: "<style>.h3size {{ color: {}; }}</style>",
    MetaKind.H4_FONT_SIZE: "<style>.h4size {{ font-size: {}px !important; }}</style>",
    MetaKind.H4_COLOR: "<style>.h4size {{ color: {}; }}</style>",
}


@dataclass(frozen=True)
class MetaProperty:
    """One meta property and its converted value."""

    kind: MetaKind
    value: MetaValue

    def build(self) -> str:
        """The HTML this property adds to the document head; empty if none."""
        template = _TEMPLATES.get(self.kind)
        if template is None:
            return ""
        if isinstance(self.value, Color):
            text = self.value.build()
        else:
            text = str(self.value)
        return template.format(_escape(text))


def parse_meta(string: str) -> MetaProperty | None:
    """Parse ``key=value``; return None for an empty value or an invalid colour."""
    key, separator, value = string.partition("=")
    if not separator:
        raise MetaError(f"Invalid <meta /> property: {string}")
    key = key.strip()
    value = value.strip()
    if not value:
        print(f"Invalid <meta /> property: {string}", file=sys.stderr)
        return None
    try:
        kind = MetaKind(key)
    except ValueError:
        raise MetaError(f"Invalid <meta /> property: {key}") from None
    converted = _CONVERTERS[kind](value)
    if converted is None:
        return None
    return MetaProperty(kind, converted)