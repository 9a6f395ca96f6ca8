"""Turns a token stream into a document, including embedded tables."""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import Iterable, Optional

from .constants import MULTIPLE_NEWLINE_REGEX, WIDTH_HEIGHT_REGEX
from .document import Document
from .lexer import Token, TokenKind, tokenize_inline
from .meta import parse_meta
from .nodes import (
    BlockMath,
    BlockedNode,
    Bold,
    Definition,
    Heading,
    Indicator,
    IndicatorNode,
    Inline,
    InlineMath,
    Italic,
    Link,
    ListItem,
    Node,
    PlainText,
    StyleError,
    Table,
    TableCell,
    new_style,
)

DEFINITION_DELIMITER = "-@[]"

_MULTIPLE_NEWLINES = re.compile(MULTIPLE_NEWLINE_REGEX)
_WIDTH_HEIGHT = re.compile(WIDTH_HEIGHT_REGEX)

_LIST_ENDS = {
    Indicator.START_OF_ORDERED_LIST: Indicator.END_OF_ORDERED_LIST,
    Indicator.START_OF_UNORDERED_LIST: Indicator.END_OF_UNORDERED_LIST,
}


class ParseError(ValueError):
    """Raised when the tokens do not form a valid document."""


def _value(token: Token) -> str:
    if token.value is None:
        raise ParseError(f"{token.kind.name} token with no internal value")
    return token.value


def _list_start(line: list[Node]) -> Optional[Indicator]:
    if line and isinstance(line[0], IndicatorNode) and line[0].indicate in _LIST_ENDS:
        return line[0].indicate
    return None


def _group_lists(lines: list[list[Node]]) -> list[list[Node]]:
    """Gather consecutive list lines between opening and closing indicators."""
    pending = deque(lines)
    grouped: list[list[Node]] = []
    while pending:
        line = pending.popleft()
        start = _list_start(line)
        if start is None:
            grouped.append(line)
            continue
        grouped.append([line[0]])
        grouped.append(line[1:])
        while pending and (not pending[0] or _list_start(pending[0]) is start):
            following = pending.popleft()
            if following:
                grouped.append(following[1:])
        grouped.append([IndicatorNode(_LIST_ENDS[start])])
    return grouped


class Parser:
    """Builds a document from tokens; each parser parses once."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._stack: list[Token] = list(tokens)[::-1]
        self.document = Document()

    def parse(self) -> Document:
        """Parse all tokens and return the finished document."""
        while not self._at_eof():
            line: list[Node] = []
            while not self._at_end_of_line() and not self._at_eof():
                match self._kind():
                    case TokenKind.META_DATA:
                        self._parse_meta()
                    case TokenKind.ORDERED_LIST:
                        line.append(IndicatorNode(Indicator.START_OF_ORDERED_LIST))
                        line.append(self._parse_line())
                    case TokenKind.UNORDERED_LIST:
                        line.append(IndicatorNode(Indicator.START_OF_UNORDERED_LIST))
                        line.append(self._parse_line())
                    case TokenKind.TABLE:
                        parse_table(_value(self._consume()), self.document)
                    case TokenKind.BLOCK_MATH:
                        src = _value(self._consume())
                        line.append(BlockedNode(BlockMath(src)))
                    case TokenKind.HORIZONTAL_LINE:
                        self._consume()
                        line.append(IndicatorNode(Indicator.HORIZONTAL_LINE))
                    case _:
                        line.append(self._parse_line())
            if self._at_end_of_line():
                self._consume()
            self.document.append_node(line)
        self.document.nodes = _group_lists(self.document.nodes)
        return self.document

    def _parse_line(self) -> Node:
        is_list = self._kind() in (TokenKind.ORDERED_LIST, TokenKind.UNORDERED_LIST)
        if is_list:
            self._consume()
        syntax = self._parse_syntax()
        content = self._parse_content()
        if is_list:
            return ListItem(syntax, content)
        return Inline(syntax, content)

    def _parse_syntax(self) -> list:
        syntax: list = []
        while True:
            match self._kind():
                case TokenKind.CHARACTER_STYLE:
                    src = _value(self._consume())
                    try:
                        syntax.append(new_style(src))
                    except StyleError as err:
                        print(f"Invalid style syntax: {err}", file=sys.stderr)
                case TokenKind.ITALIC:
                    self._consume()
                    syntax.append(Italic())
                case TokenKind.HEADING:
                    syntax.append(Heading(len(_value(self._consume()))))
                case _:
                    return syntax

    def _parse_content(self) -> list[Node]:
        content: list[Node] = []
        while self._kind() is not TokenKind.END_OF_LINE and not self._at_eof():
            match self._kind():
                case TokenKind.BACKSLASH_LEFT_PARENTHESIS_INLINE:
                    self._consume()
                    content.append(self._parse_line())
                    self._expect(TokenKind.RIGHT_PARENTHESIS)
                case TokenKind.RIGHT_PARENTHESIS:
                    break
                case TokenKind.STRING:
                    content.append(BlockedNode(PlainText(_value(self._consume()))))
                case TokenKind.LITERAL_RIGHT_PARENTHESIS:
                    self._consume()
                    content.append(BlockedNode(PlainText(")")))
                case TokenKind.BOLD:
                    content.append(BlockedNode(Bold(_value(self._consume()))))
                case TokenKind.DEFINITION:
                    parts = _value(self._consume()).split(DEFINITION_DELIMITER)
                    if len(parts) < 2:
                        raise ParseError("Definition without an expression")
                    content.append(BlockedNode(Definition(parts[0], parts[1])))
                case TokenKind.LINK:
                    src = _value(self._consume())
                    text = None
                    if self._kind() is TokenKind.STRING:
                        text = _value(self._consume())
                    content.append(BlockedNode(Link(src, text)))
                case TokenKind.INLINE_MATH:
                    content.append(BlockedNode(InlineMath(_value(self._consume()))))
                case other:
                    raise ParseError(f"Unexpected {other.name} token inside a line")
        return content

    def _parse_meta(self) -> None:
        src = _value(self._consume())
        meta = parse_meta(src)
        if meta is None:
            print(f"Invalid <meta /> tag: {src}", file=sys.stderr)
        else:
            self.document.append_meta(meta)

    def _consume(self) -> Token:
        if self._at_eof():
            raise ParseError("Unexpected end of input")
        return self._stack.pop()

    def _expect(self, kind: TokenKind) -> Token:
        token = self._consume()
        if token.kind is not kind:
            raise ParseError(f"Expected {kind.name}, got {token.kind.name}")
        return token

    def _at_eof(self) -> bool:
        return len(self._stack) <= 1 or self._stack[-1].kind is TokenKind.EOF

    def _at_end_of_line(self) -> bool:
        return bool(self._stack) and self._stack[-1].kind is TokenKind.END_OF_LINE

    def _kind(self) -> TokenKind:
        return self._stack[-1].kind if self._stack else TokenKind.EOF


def parse_tokens(tokens: Iterable[Token]) -> Document:
    """Parse a token stream into a document."""
    return Parser(tokens).parse()


def _parse_position(line: str) -> tuple[Optional[float], Optional[float]]:
    match = _WIDTH_HEIGHT.search(line)
    if match is None:
        return None, None
    return float(match.group(1)), float(match.group(2))


def _format_style(cell: str) -> tuple[str, str]:
    cell = cell.strip()
    starts, ends = cell.startswith("="), cell.endswith("=")
    if starts and ends:
        return cell[1:-1], "text-align: center;"
    if starts:
        return cell[1:], "text-align: left;"
    if ends:
        return cell[:-1], "text-align: right;"
    return cell, ""


def parse_table(src: str, document: Document) -> None:
    """Parse the body of a table block and append it to the document."""
    lines = _MULTIPLE_NEWLINES.sub("\n", src).split("\n")
    position = _parse_position(lines[0].strip())
    if position != (None, None):
        lines = lines[1:]

    rows: list[list[TableCell]] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        is_heading = line.startswith("[") and line.endswith("]")
        if is_heading:
            line = line[1:-1]
        upper = rows[-1] if rows else None
        row: list[TableCell] = []
        rows.append(row)
        for index, cell in enumerate(line.split(";")):
            content, style = _format_style(cell)
            marker = content.strip()
            if marker == "_":
                if index == 0 or index - 1 >= len(row):
                    raise ParseError("Row merge with no left neighbor")
                row[index - 1].add_merge_col()
            elif marker == "^":
                if upper is None:
                    raise ParseError("Column merge with no upper row")
                if index >= len(upper):
                    raise ParseError("Column merge with no upper neighbor")
                upper[index].add_merge_row()
            else:
                cell_lines = Parser(tokenize_inline(content)).parse().nodes
                if not cell_lines:
                    raise ParseError("Empty table cell")
                row.append(TableCell(cell_lines[-1], is_heading, style))

    document.append_node([Table(position, rows)])