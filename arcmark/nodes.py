"""Syntax-tree nodes of an Arc document and their HTML form."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from .color import Color, ColorError


class StyleError(ValueError):
    """Raised when a character style such as ``red:16:blue`` is malformed."""


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


@dataclass(frozen=True)
class Style:
    """Foreground colour, font size and background colour of a span."""

    color: Optional[Color] = None
    size: Optional[int] = None
    background: Optional[Color] = None

    def css(self) -> tuple[str | None, str]:
        """The CSS class and inline style this syntax contributes."""
        style = ""
        if self.color is not None:
            style += f"color: {self.color.build()};"
        if self.size is not None:
            style += f"font-size: {self.size}px;"
        if self.background is not None:
            style += f"background-color: {self.background.build()};"
        return None, style


@dataclass(frozen=True)
class Heading:
    """A heading of level 1 to 4."""

    level: int

    def css(self) -> tuple[str | None, str]:
        """The CSS class and inline style this syntax contributes."""
        return f"h{self.level}size", ""


@dataclass(frozen=True)
class Italic:
    """Italic text."""

    def css(self) -> tuple[str | None, str]:
        """The CSS class and inline style this syntax contributes."""
        return None, "font-style: italic;"


StyledSyntax = Union[Style, Heading, Italic]

_DIGITS = re.compile(r"[0-9]+")


def _parse_size(value: str) -> int | None:
    if not value.strip():
        return None
    digits = value[1:] if value.startswith("+") else value
    if not value:
        reason = "cannot parse integer from empty string"
    elif not _DIGITS.fullmatch(digits):
        reason = "invalid digit found in string"
    elif int(digits) > 255:
        reason = "number too large to fit in target type"
    else:
        return int(digits)
    raise StyleError(f"Invalid value for font size: '{value}', msg:`{reason}`")


def _parse_color(value: str) -> Color | None:
    if not value.strip():
        return None
    try:
        return Color.from_string(value)
    except ColorError as err:
        raise StyleError(str(err)) from err


def new_style(src: str) -> Style:
    """Parse ``color[:size[:background]]``, any part of which may be empty."""
    if not src.replace(":", ""):
        raise StyleError("Invalid style syntax: Empty")
    parts = src.split(":")
    if len(parts) > 3:
        raise StyleError(f"Invalid style syntax: {src}")
    color = _parse_color(parts[0])
    size = _parse_size(parts[1]) if len(parts) > 1 else None
    background = _parse_color(parts[2]) if len(parts) > 2 else None
    return Style(color, size, background)


class Indicator(Enum):
    """Markers that open or close lists, or draw a rule."""

    START_OF_ORDERED_LIST = "<ol>"
    START_OF_UNORDERED_LIST = "<ul>"
    END_OF_ORDERED_LIST = "</ol>"
    END_OF_UNORDERED_LIST = "</ul>"
    HORIZONTAL_LINE = "<hr />"


@dataclass(frozen=True)
class Bold:
    text: str


@dataclass(frozen=True)
class Definition:
    term: str
    definition: str


@dataclass(frozen=True)
class Link:
    src: str
    text: Optional[str] = None


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class BlockMath:
    src: str


@dataclass(frozen=True)
class InlineMath:
    src: str


BlockedContent = Union[Bold, Definition, Link, PlainText, BlockMath, InlineMath]


@dataclass(frozen=True)
class BlockedNode:
    """A leaf holding one piece of content."""

    content: BlockedContent

    def build(self) -> str:
        """The HTML of this leaf."""
        match self.content:
            case Bold(text):
                return f"<strong>{_escape(text)}</strong>"
            case Link(src, text):
                label = src if text is None else text
                return f'<a href="{_escape(src)}">{_escape(label)}</a>'
            case PlainText(text):
                return f"<span>{_escape(text)}</span>"
            case Definition(term, definition):
                return (
                    '<span><span style="color: red;text-decoration: underline;">'
                    f"{_escape(term)}</span>: <span>{_escape(definition)}</span></span>"
                )
            case InlineMath(src):
                return f"<span>\\({src}\\)</span>"
            case BlockMath(src):
                return f"<span>$${src}$$</span>"
        raise TypeError(f"Unknown content: {self.content!r}")


def _resolve_syntax(syntax: list[StyledSyntax]) -> tuple[str, str]:
    css_class: str | None = None
    style = ""
    for item in syntax:
        item_class, item_style = item.css()
        if css_class is None:
            css_class = item_class
        style += item_style
    return css_class or "", style


def _build_all(nodes: list[Node]) -> str:
    return "".join(node.build() for node in nodes)


@dataclass
class Inline:
    """A styled span of content."""

    syntax: list[StyledSyntax] = field(default_factory=list)
    content: list[Node] = field(default_factory=list)

    def build(self) -> str:
        """The HTML of this span."""
        css_class, style = _resolve_syntax(self.syntax)
        return (
            f'<span class="{_escape(css_class)}" style="{_escape(style)}">'
            f"{_build_all(self.content)}</span>"
        )


@dataclass
class ListItem:
    """A styled item of an ordered or unordered list."""

    syntax: list[StyledSyntax] = field(default_factory=list)
    content: list[Node] = field(default_factory=list)

    def build(self) -> str:
        """The HTML of this list item."""
        css_class, style = _resolve_syntax(self.syntax)
        return (
            f'<li class="{_escape(css_class)}" style="{_escape(style)}">'
            f"{_build_all(self.content)}</li>"
        )


@dataclass(frozen=True)
class IndicatorNode:
    """A node standing for a list boundary or a horizontal rule."""

    indicate: Indicator

    def build(self) -> str:
        """The HTML tag of this indicator."""
        return self.indicate.value


@dataclass
class TableCell:
    """A table cell, possibly spanning several rows or columns."""

    content: list[Node]
    is_heading: bool
    style: str
    rowspan: int = 1
    colspan: int = 1

    def add_merge_row(self) -> None:
        """Extend the cell one row further down."""
        self.rowspan += 1

    def add_merge_col(self) -> None:
        """Extend the cell one column further right."""
        self.colspan += 1

    def build(self) -> str:
        """The HTML of this cell."""
        tag = "th" if self.is_heading else "td"
        return (
            f'<{tag} colspan="{self.colspan}" rowspan="{self.rowspan}" '
            f'style="{_escape(self.style)}">{_build_all(self.content)}</{tag}>'
        )


def _single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _format_single(value: float) -> str:
    for precision in range(1, 18):
        text = f"{value:.{precision}g}"
        if _single(float(text)) == value:
            break
    return format(Decimal(text), "f")


def _dimension(value: float) -> str:
    return _format_single(_single(_single(value) * 10.0))


@dataclass
class Table:
    """A table with an optional size, given in tenths of pixels."""

    position: tuple[Optional[float], Optional[float]] = (None, None)
    rows: list[list[TableCell]] = field(default_factory=list)

    def _size_style(self) -> str:
        width, height = self.position
        if width is None or height is None:
            return "width: auto; height: auto;"
        return f"width: {_dimension(width)}px; height: {_dimension(height)}px;"

    def build(self) -> str:
        """The HTML of this table."""
        body = "".join(
            "<tr>" + "".join(cell.build() for cell in row) + "</tr>" for row in self.rows
        )
        return f'<table style="{self._size_style()}"><tbody>{body}</tbody></table>'


Node = Union[BlockedNode, Inline, ListItem, IndicatorNode, Table]