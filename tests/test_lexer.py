import pytest

from arcmark.constants import NEWLINE_REGEX, STRING_REGEX
from arcmark.lexer import (
    InlineLexer,
    LexerError,
    Token,
    TokenKind,
    inline_patterns,
    tokenize_inline,
)

K = TokenKind


def _kinds(tokens):
    return [token.kind for token in tokens]


def test_plain_text():
    tokens = tokenize_inline("Hello World")
    assert tokens == [Token(K.STRING, "Hello World"), Token(K.EOF)]


def test_trailing_newline():
    tokens = tokenize_inline("Hello World\n")
    assert tokens == [Token(K.STRING, "Hello World"), Token(K.END_OF_LINE), Token(K.EOF)]


def test_several_lines():
    tokens = tokenize_inline("Hello World\nHello World\n\nHello World")
    assert _kinds(tokens) == [
        K.STRING,
        K.END_OF_LINE,
        K.STRING,
        K.END_OF_LINE,
        K.END_OF_LINE,
        K.STRING,
        K.EOF,
    ]
    assert [t.value for t in tokens if t.kind is K.STRING] == ["Hello World"] * 3


def test_empty_source_gives_only_eof():
    assert tokenize_inline("") == [Token(K.EOF)]


def test_nested_parentheses():
    tokens = tokenize_inline(r"text \( text \( text ) text ) text")
    assert tokens == [
        Token(K.STRING, "text "),
        Token(K.BACKSLASH_LEFT_PARENTHESIS_INLINE),
        Token(K.STRING, " text "),
        Token(K.BACKSLASH_LEFT_PARENTHESIS_INLINE),
        Token(K.STRING, " text "),
        Token(K.RIGHT_PARENTHESIS),
        Token(K.STRING, " text "),
        Token(K.RIGHT_PARENTHESIS),
        Token(K.STRING, " text"),
        Token(K.EOF),
    ]


def test_bold():
    tokens = tokenize_inline("This is **bold text** here")
    assert tokens == [
        Token(K.STRING, "This is "),
        Token(K.BOLD, "bold text"),
        Token(K.STRING, " here"),
        Token(K.EOF),
    ]


def test_italic():
    tokens = tokenize_inline("~Some Text")
    assert tokens == [Token(K.ITALIC), Token(K.STRING, "Some Text"), Token(K.EOF)]


def test_italic_with_unclosed_bracket():
    tokens = tokenize_inline("~[red:16:(")
    assert tokens == [Token(K.ITALIC), Token(K.STRING, "[red:16:("), Token(K.EOF)]


def test_italic_with_parenthesis():
    tokens = tokenize_inline("~[red:16:(255, 0, 0)] some text next")
    assert tokens == [
        Token(K.ITALIC),
        Token(K.STRING, "[red:16:(255, 0, 0"),
        Token(K.RIGHT_PARENTHESIS),
        Token(K.STRING, "] some text next"),
        Token(K.EOF),
    ]


def test_triple_tilde_is_text():
    tokens = tokenize_inline("~~~Hello World~~~")
    assert tokens == [Token(K.STRING, "~~~Hello World~~~"), Token(K.EOF)]


def test_character_style_and_bold():
    tokens = tokenize_inline("%[::red] some text next **bold**")
    assert tokens == [
        Token(K.CHARACTER_STYLE, "::red"),
        Token(K.STRING, "some text next "),
        Token(K.BOLD, "bold"),
        Token(K.EOF),
    ]


def test_link_followed_by_text():
    tokens = tokenize_inline("&[www.google.com/path/to/page]  some char \n")
    assert tokens == [
        Token(K.LINK, "www.google.com/path/to/page"),
        Token(K.STRING, " some char "),
        Token(K.END_OF_LINE),
        Token(K.EOF),
    ]


def test_inline_math():
    assert tokenize_inline("<math x = 1/>") == [Token(K.INLINE_MATH, "x = 1"), Token(K.EOF)]


def test_block_math():
    assert tokenize_inline("<math> x = 1 </math>") == [
        Token(K.BLOCK_MATH, "x = 1"),
        Token(K.EOF),
    ]


def test_inline_math_between_text():
    tokens = tokenize_inline("Hello World <math x = 1/> This is next line")
    assert tokens == [
        Token(K.STRING, "Hello World "),
        Token(K.INLINE_MATH, "x = 1"),
        Token(K.STRING, " This is next line"),
        Token(K.EOF),
    ]


def test_literal_right_parenthesis():
    tokens = tokenize_inline(r"\(%[yellow](second time parsing\))")
    assert tokens == [
        Token(K.BACKSLASH_LEFT_PARENTHESIS_INLINE),
        Token(K.CHARACTER_STYLE, "yellow"),
        Token(K.STRING, "(second time parsing"),
        Token(K.LITERAL_RIGHT_PARENTHESIS),
        Token(K.RIGHT_PARENTHESIS),
        Token(K.EOF),
    ]


@pytest.mark.parametrize("source", ["- item", "1. item", "# title", "---"])
def test_block_syntax_is_plain_text_inline(source):
    assert tokenize_inline(source) == [Token(K.STRING, source), Token(K.EOF)]


@pytest.mark.parametrize("source", ["**unclosed", "<math/>"])
def test_unmatched_source_raises(source):
    with pytest.raises(LexerError):
        tokenize_inline(source)


def test_error_reports_position():
    with pytest.raises(LexerError, match=r"No pattern matched at position 2, reminder: \*\*c"):
        tokenize_inline("ab**c")


@pytest.mark.parametrize(
    "source",
    ["Hello World", "a\nb\n\nc", "some ( text\nmore text", "Hello\\ World\\"],
)
def test_plain_lines_round_trip(source):
    tokens = tokenize_inline(source)
    assert tokens[-1] == Token(K.EOF)
    assert _kinds(tokens).count(K.EOF) == 1
    rebuilt = "".join("\n" if t.kind is K.END_OF_LINE else t.value or "" for t in tokens)
    assert rebuilt == source


def test_lexer_object_matches_function_and_is_repeatable():
    source = "~ %[red] some char \\(&[www.google.com/path/to/page] some char)"
    lexer = InlineLexer(source)
    first = lexer.tokenize()
    assert first == lexer.tokenize()
    assert first == tokenize_inline(source)


def test_pattern_handler_builds_token():
    string_pattern = inline_patterns()[-1]
    match = string_pattern.regex.match("Hello World")
    assert string_pattern.handler(match) == Token(K.STRING, "Hello World")