import pytest

from arcmark.color import Color, ColorLiteral
from arcmark.nodes import (
    BlockedNode,
    BlockMath,
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
    PlainText,
    Style,
    StyleError,
    Table,
    TableCell,
    new_style,
)

RED = Color(ColorLiteral.RED)
BLUE = Color(ColorLiteral.BLUE)


def test_html_plain_text():
    assert BlockedNode(PlainText("Hello World")).build() == "<span>Hello World</span>"


def test_html_bold():
    assert BlockedNode(Bold("Hello World")).build() == "<strong>Hello World</strong>"


def test_html_link_with_text():
    node = BlockedNode(Link("https://www.google.com", "Google"))
    assert node.build() == '<a href="https://www.google.com">Google</a>'


def test_html_link_without_text():
    node = BlockedNode(Link("https://www.google.com"))
    assert node.build() == (
        '<a href="https://www.google.com">https://www.google.com</a>'
    )


def test_html_definition():
    node = BlockedNode(Definition("term", "definition"))
    assert node.build() == (
        '<span><span style="color: red;text-decoration: underline;">term</span>'
        ": <span>definition</span></span>"
    )


def test_html_styled_inline():
    node = Inline([Style(RED, 16, BLUE)], [BlockedNode(PlainText("Hello World"))])
    assert node.build() == (
        '<span class="" style="color: rgb(255, 0, 0);font-size: 16px;'
        'background-color: rgb(0, 0, 255);"><span>Hello World</span></span>'
    )


def test_html_escapes_text():
    assert BlockedNode(PlainText("a < b & c")).build() == "<span>a &lt; b &amp; c</span>"


def test_html_math():
    assert BlockedNode(InlineMath("x = 1")).build() == "<span>\\(x = 1\\)</span>"
    assert BlockedNode(BlockMath("x = 1")).build() == "<span>$$x = 1$$</span>"


def test_heading_class_and_italic_style():
    node = Inline([Italic(), Heading(2), Heading(3)], [BlockedNode(PlainText("T"))])
    assert node.build() == (
        '<span class="h2size" style="font-style: italic;"><span>T</span></span>'
    )


def test_list_item():
    node = ListItem([], [BlockedNode(PlainText("item"))])
    assert node.build() == '<li class="" style=""><span>item</span></li>'


def test_indicators():
    assert IndicatorNode(Indicator.START_OF_ORDERED_LIST).build() == "<ol>"
    assert IndicatorNode(Indicator.END_OF_UNORDERED_LIST).build() == "</ul>"
    assert IndicatorNode(Indicator.HORIZONTAL_LINE).build() == "<hr />"


def test_empty_style_css():
    assert Style().css() == (None, "")


def test_new_style_background_only():
    assert new_style("::red") == Style(None, None, RED)


def test_new_style_size_and_background():
    assert new_style(":16:red") == Style(None, 16, RED)


def test_new_style_color_and_size():
    assert new_style("red:16") == Style(RED, 16, None)


def test_new_style_all_parts():
    assert new_style("red:16:blue") == Style(RED, 16, BLUE)


def test_new_style_too_many_parts():
    with pytest.raises(StyleError, match="Invalid style syntax: red:16:blue:extra"):
        new_style("red:16:blue:extra")


@pytest.mark.parametrize("src", ["", "::"])
def test_new_style_empty(src):
    with pytest.raises(StyleError) as excinfo:
        new_style(src)
    assert str(excinfo.value) == "Invalid style syntax: Empty"


def test_new_style_color_only():
    assert new_style("red") == Style(RED, None, None)


def test_new_style_rgb_background():
    assert new_style("::(255, 0, 0)") == Style(None, None, Color((255, 0, 0)))


def test_new_style_rgb_mixed():
    assert new_style("red:16:(255, 0, 0)") == Style(RED, 16, Color((255, 0, 0)))
    assert new_style("(255, 0, 0):16:blue") == Style(Color((255, 0, 0)), 16, BLUE)
    assert new_style("(255, 0, 0):16:(0, 0, 255)") == Style(
        Color((255, 0, 0)), 16, Color((0, 0, 255))
    )


def test_new_style_rgb_only():
    assert new_style("(255, 0, 0)") == Style(Color((255, 0, 0)), None, None)


@pytest.mark.parametrize(
    "src, message",
    [
        ("invalid", "Invalid color literal: invalid"),
        (
            "red:invalid",
            "Invalid value for font size: 'invalid', msg:`invalid digit found in string`",
        ),
        ("red:16:invalid", "Invalid color literal: invalid"),
        ("red:16:(255, 0, 0, 0)", "Too many values for rgb literal: (255, 0, 0, 0)"),
        ("red:16:(255, 0)", "Insufficient values for rgb literal: (255, 0)"),
    ],
)
def test_invalid_styles(src, message):
    with pytest.raises(StyleError) as excinfo:
        new_style(src)
    assert str(excinfo.value) == message


def test_style_size_too_large():
    with pytest.raises(StyleError, match="number too large"):
        new_style("red:300")


def test_table_cell_merges():
    cell = TableCell([BlockedNode(PlainText("c"))], False, "")
    cell.add_merge_col()
    cell.add_merge_row()
    cell.add_merge_row()
    assert cell.build() == '<td colspan="2" rowspan="3" style=""><span>c</span></td>'


def test_table_heading_cell():
    cell = TableCell([], True, "text-align: center;")
    assert cell.build() == (
        '<th colspan="1" rowspan="1" style="text-align: center;"></th>'
    )


def test_table_auto_size():
    table = Table(rows=[[TableCell([BlockedNode(PlainText("x"))], False, "")]])
    assert table.build() == (
        '<table style="width: auto; height: auto;"><tbody><tr>'
        '<td colspan="1" rowspan="1" style=""><span>x</span></td>'
        "</tr></tbody></table>"
    )


def test_table_fixed_size():
    table = Table((12.5, 22.4), [])
    assert "width: 125px; height: 224px;" in table.build()
    assert table.build().endswith("<tbody></tbody></table>")