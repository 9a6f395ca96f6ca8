"""Tokens and the tokenizer for inline Arc markup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator

from .constants import (
    BACKSLASH_LEFT_PARENTHESIS_INLINE_REGEX,
    BLOCK_MATH_REGEX,
    BOLD_REGEX,
    CHARACTER_STYLE_REGEX,
    INLINE_MATH_REGEX,
    ITALIC_REGEX,
    LINK_REGEX,
    LITERAL_RIGHT_PARENTHESIS_REGEX,
    NEWLINE_REGEX,
    RIGHT_PARENTHESIS_REGEX,
    STRING_REGEX,
)


class LexerError(ValueError):
    """Raised when the source cannot be split into tokens."""


class TokenKind(Enum):
    """The kinds of token the markup is made of."""

    END_OF_LINE = auto()
    EOF = auto()
    CHARACTER_STYLE = auto()
    META_DATA = auto()
    UNORDERED_LIST = auto()
    ORDERED_LIST = auto()
    ITALIC = auto()
    BOLD = auto()
    DEFINITION = auto()
    HEADING = auto()
    BACKSLASH_LEFT_PARENTHESIS_INLINE = auto()
    RIGHT_PARENTHESIS = auto()
    LITERAL_RIGHT_PARENTHESIS = auto()
    STRING = auto()
    LINK = auto()
    TABLE = auto()
    INLINE_MATH = auto()
    BLOCK_MATH = auto()
    HORIZONTAL_LINE = auto()


@dataclass(frozen=True)
class Token:
    """A token; ``value`` is set only for kinds that carry text."""

    kind: TokenKind
    value: str | None = None


@dataclass(frozen=True)
class RegexPattern:
    """A compiled pattern and the function turning its match into a token."""

    regex: re.Pattern
    handler: Callable[[re.Match], Token]


def _bare(kind: TokenKind) -> Callable[[re.Match], Token]:
    return lambda match: Token(kind)


def _captured(kind: TokenKind) -> Callable[[re.Match], Token]:
    return lambda match: Token(kind, match.group(1))


def _whole(kind: TokenKind) -> Callable[[re.Match], Token]:
    return lambda match: Token(kind, match.group(0))


_INLINE_PATTERNS: tuple[RegexPattern, ...] = tuple(
    RegexPattern(re.compile(pattern), handler)
    for pattern, handler in (
        (NEWLINE_REGEX, _bare(TokenKind.END_OF_LINE)),
        (INLINE_MATH_REGEX, _captured(TokenKind.INLINE_MATH)),
        (BLOCK_MATH_REGEX, _captured(TokenKind.BLOCK_MATH)),
        (LINK_REGEX, _captured(TokenKind.LINK)),
        (CHARACTER_STYLE_REGEX, _captured(TokenKind.CHARACTER_STYLE)),
        (LITERAL_RIGHT_PARENTHESIS_REGEX, _bare(TokenKind.LITERAL_RIGHT_PARENTHESIS)),
        (
            BACKSLASH_LEFT_PARENTHESIS_INLINE_REGEX,
            _bare(TokenKind.BACKSLASH_LEFT_PARENTHESIS_INLINE),
        ),
        (BOLD_REGEX, _captured(TokenKind.BOLD)),
        (ITALIC_REGEX, _bare(TokenKind.ITALIC)),
        (RIGHT_PARENTHESIS_REGEX, _bare(TokenKind.RIGHT_PARENTHESIS)),
        (STRING_REGEX, _whole(TokenKind.STRING)),
    )
)


def inline_patterns() -> tuple[RegexPattern, ...]:
    """The patterns of inline markup, in the order they are tried."""
    return _INLINE_PATTERNS


class InlineLexer:
    """Splits inline markup, such as the text of a table cell, into tokens."""

    def __init__(self, source: str) -> None:
        self.source = source

    def _scan(self) -> Iterator[Token]:
        position = 0
        while position < len(self.source):
            # Each pattern sees only the unread rest, so look-behinds stop at it.
            rest = self.source[position:]
            for pattern in _INLINE_PATTERNS:
                match = pattern.regex.match(rest)
                if match is None:
                    continue
                if match.end() == 0:
                    raise LexerError(f"Zero length match at position {position}")
                yield pattern.handler(match)
                position += match.end()
                break
            else:
                raise LexerError(
                    f"No pattern matched at position {position}, reminder: {rest}"
                )
        yield Token(TokenKind.EOF)

    def tokenize(self) -> list[Token]:
        """All tokens of the source, ending with an EOF token."""
        return list(self._scan())


def tokenize_inline(source: str) -> list[Token]:
    """Tokenize inline markup."""
    return InlineLexer(source).tokenize()