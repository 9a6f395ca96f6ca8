"""Compiled patterns of the Arc markup syntax and the default stylesheet."""

import re

_V = re.VERBOSE

# Plain text: anything up to a bold marker, an escaped parenthesis,
# an inline math tag, a closing parenthesis or the end of the line.
STRING_REGEX = re.compile(
    r"""
    (?:
        (?! \*\* | \\\( | \\\) | <math\b[^>]*/> )
        [^)\n]
    )+
    """,
    _V,
)
NEWLINE_REGEX = re.compile(r"\n")
WHITESPACE_REGEX = re.compile(r"\s+")
LINK_REGEX = re.compile(
    r"""
    &\[
    (
        (?:https?://)?
        [a-zA-Z0-9.-]+ \. [a-zA-Z]{2,}
        (?:/[^\s]*)*
    )
    \] [ ]?
    """,
    _V,
)
DEFINITION_REGEX = re.compile(r"@\[ (.*?) \] [ ]? ' (.*?) '", _V)
CHARACTER_STYLE_REGEX = re.compile(r"%\[ (.*?) \] [ ]?", _V)
META_DATA_REGEX_SHORT = re.compile(r"<meta[ ] ([^\n]*) >", _V)
META_DATA_REGEX_LONG = re.compile(r"<meta[ ] ([^\n]*) />", _V)
LITERAL_RIGHT_PARENTHESIS_REGEX = re.compile(r"\\ \)", _V)
BACKSLASH_LEFT_PARENTHESIS_INLINE_REGEX = re.compile(r"\\ \(", _V)
BOLD_REGEX = re.compile(r"\*\* (.*?) \*\*", _V)
HEADING_REGEX = re.compile(r"(\#{1,4}) [ ]", _V)
ORDERED_LIST_REGEX = re.compile(r"\d+ \. [ ]", _V)
UNORDERED_LIST_REGEX = re.compile(r"- [ ]", _V)
ITALIC_REGEX = re.compile(r"(?<!~) ~ (?!~) [ ]?", _V)
RIGHT_PARENTHESIS_REGEX = re.compile(r"\)")
CRLF_REGEX = re.compile(r"\\ \s* \n", _V)
COMMENT_REGEX = re.compile(r"\n? /// .*", _V)
TABLE_CONTAINER_REGEX = re.compile(
    r"""
    ^---\s*table!\s*\n
    (?P<content>.*?)
    \n---\s*$
    """,
    re.MULTILINE | re.DOTALL | _V,
)
MULTIPLE_NEWLINE_REGEX = re.compile(r"\n{2,}")
WIDTH_HEIGHT_REGEX = re.compile(
    r"""
    \( \s*
    (\d+ (?:\.\d+)?)
    \s* , \s*
    (\d+ (?:\.\d+)?)
    \s* \)
    """,
    _V,
)
INLINE_MATH_REGEX = re.compile(r"<math \s+ (?P<content>.*?) \s* / \s* >", _V)
BLOCK_MATH_REGEX = re.compile(r"<math> \s* (?P<content>[\s\S]*?) \s* </math>", _V)
HORIZONTAL_LINE_REGEX = re.compile(r"^ -{3,}", _V)
ANTI_META_REGEX = re.compile(r"<body> (<br[ ]/>)+", _V)

_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("*", ("box-sizing: border-box", "white-space: pre")),
    (
        ":root",
        (
            "--text-color: #2c3e50",
            "--background-color: #ffffff",
            "--link-color: #3498db",
            "--code-background: #f8f9fa",
            "--border-color: #e9ecef",
            "--blockquote-color: #6c757d",
        ),
    ),
    ("ul, ol", ("margin-top: 0", "margin-bottom: 0")),
    ("body", ("color: var(--text-color)", "line-height: 1.6")),
    ("a", ("color: var(--link-color)", "text-decoration: none")),
    ("a:hover", ("text-decoration: underline",)),
    (
        "code",
        (
            "background-color: var(--code-background)",
            "padding: 0.2em 0.4em",
            "border-radius: 3px",
            "font-family: monospace",
        ),
    ),
    (
        "blockquote",
        (
            "border-left: 4px solid var(--border-color)",
            "margin: 0",
            "padding-left: 1em",
            "color: var(--blockquote-color)",
        ),
    ),
    (".h1size", ("font-size: 2em",)),
    (".h2size", ("font-size: 1.5em",)),
    (".h3size", ("font-size: 1.25em",)),
    (".h4size", ("font-size: 1.125em",)),
    (
        "table",
        (
            "border: 1px solid #ccc",
            "font-family: Arial, sans-serif",
            "font-size: 14px",
            "border-collapse: collapse",
            "white-space: normal",
        ),
    ),
    ("tbody", ("white-space: normal",)),
    (
        "table td, table th",
        ("border: 1px solid #ccc", "padding: 10px", "white-space: normal"),
    ),
    ("table th", ("background-color: #f4f4f4",)),
    ("table tr:nth-child(even)", ("background-color: #f9f9f9",)),
)


def _render_rules(rules: tuple[tuple[str, tuple[str, ...]], ...]) -> str:
    blocks = (
        f"{selector} {{\n" + "".join(f"  {decl};\n" for decl in decls) + "}\n"
        for selector, decls in rules
    )
    return "\n" + "\n".join(blocks) + "\n"


STYLE = _render_rules(_RULES)