"""The parsed document and its rendering as a complete HTML page."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .constants import ANTI_META_REGEX, STYLE
from .meta import MetaProperty
from .nodes import Node

MATHJAX_SRC = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"

_CLEANUPS: tuple[tuple[str, str], ...] = (
    ('class=""', ""),
    ('style=""', ""),
    ("</ol><br />", "</ol>"),
    ("</ul><br />", "</ul>"),
    ("</table><br /><br />", "</table>"),
    ("</li><br />", "</li>"),
    ("<ol><br />", "<ol>"),
    ("<ul><br />", "<ul>"),
)

_ANTI_META = re.compile(ANTI_META_REGEX)


@dataclass
class Document:
    """Meta properties and the lines of nodes of a document."""

    meta: list[MetaProperty] = field(default_factory=list)
    nodes: list[list[Node]] = field(default_factory=list)

    def append_meta(self, meta: MetaProperty) -> None:
        """Add a meta property."""
        self.meta.append(meta)

    def append_node(self, node: list[Node]) -> None:
        """Add one line of nodes."""
        self.nodes.append(node)

    def build(self) -> str:
        """Render the whole document as an HTML page."""
        head_meta = "".join(prop.build() for prop in self.meta)
        body = "<br />".join(
            "".join(node.build() for node in line) for line in self.nodes
        )
        page = (
            f'<!DOCTYPE html><html lang="en"><head>{head_meta}'
            f'<meta charset="UTF-8"><script src="{MATHJAX_SRC}"></script>'
            f"<style>{STYLE}</style></head><body>{body}</body></html>"
        )
        for old, new in _CLEANUPS:
            page = page.replace(old, new)
        return _ANTI_META.sub("<body>", page)