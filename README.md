# arcmark

`arcmark` is a library for a compact markup language. It tokenizes inline
markup, parses token streams into a document tree, and renders that
document as a complete HTML page with a built-in stylesheet and MathJax
loaded for formulas.

## Quick start

```python
from arcmark.lexer import tokenize_inline
from arcmark.parser import parse_tokens

tokens = tokenize_inline("Hello **world**, see <math x = 1/>")
document = parse_tokens(tokens)
html = document.build()
```

`document.meta` holds the parsed meta properties, and `document.nodes`
holds one list of nodes per line.

## Inline markup

`tokenize_inline` (or `InlineLexer(source).tokenize()`) understands:

| Markup | Result |
| --- | --- |
| `**bold**` | bold text |
| `~ text` | italic span |
| `%[red:16:blue] text` | text colour, font size in px, background colour |
| `%[(255, 0, 0)] text` | colours may also be given as `(r, g, b)` |
| `\( nested )` | a nested, separately styled span |
| `\)` | a literal `)` |
| `&[example.com/page] label` | a link, with an optional label |
| `<math x = 1/>` | inline math |
| `<math> x = 1 </math>` | block math |
| a newline | ends a line |

Everything else is plain text. Input that no pattern matches raises
`LexerError`.

## The parser

`Parser(tokens).parse()`, or `parse_tokens(tokens)`, builds a `Document`.
Besides the tokens above it also handles tokens of kind `META_DATA`,
`HEADING`, `ORDERED_LIST`, `UNORDERED_LIST`, `DEFINITION`, `TABLE` and
`HORIZONTAL_LINE` when they appear in the stream, for example when built by
hand with `Token(TokenKind.HEADING, "##")`. Consecutive list lines are
grouped between opening and closing list tags.

Tables can also be parsed directly with `parse_table(src, document)`, which
appends a `Table` node to the document. Each line of `src` is a row, with
cells separated by `;`. A row wrapped in `[ ]` is a heading row. A cell
holding `_` merges into its left neighbour, and `^` merges into the cell
above. A cell starting with `=` is aligned left, one ending with `=` right,
and one with both centred. An optional first line `(width, height)` sets the
size of the table, in tenths of pixels.

## Building blocks

```python
from arcmark.color import Color
from arcmark.meta import parse_meta
from arcmark.nodes import new_style

Color.from_string("(255, 128, 0)").build()   # "rgb(255, 128, 0)"
parse_meta("title=My Page").build()          # "<title>My Page</title>"
new_style("red:16:navy")                     # a Style node
```

Colour names are `red`, `orange`, `yellow`, `green`, `blue`, `indigo`,
`violet`, `black`, `white`, `gray`, `brown`, `pink`, `purple`, `cyan`,
`magenta`, `lime`, `teal`, `maroon` and `navy`, in any case.

Meta keys are `name`, `title`, `font-family`, `font-size`, `font-color`,
`background-color`, `allow-html`, `text-font-size`, `text-color`, and
`h1-` to `h4-` followed by `font-size` or `color`. `parse_meta` returns
`None` for an empty value or an unknown colour.

Invalid input raises `ColorError`, `MetaError`, `StyleError`, `LexerError`
or `ParseError`, each defined in the module it comes from.

## What it does not do

- There is no tokenizer for whole documents: `tokenize_inline` does not
  recognise meta tags, headings, list markers, definitions, table blocks or
  horizontal lines. Those reach the parser only as tokens you supply.
- There is no command-line tool; the package does not read or write files
  or open a browser. Call `Document.build()` and write the string yourself.