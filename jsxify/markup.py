"""Markup node model, BeautifulSoup adapter and HTML serialization."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Sequence, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, PreformattedString, ProcessingInstruction

from .errors import UnsupportedNodeKind

# See https://developer.mozilla.org/en-US/docs/Glossary/Void_element
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Text inside these elements is emitted without escaping.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

AttributeValue = Union[str, int, float]


@dataclass
class MarkupElement:
    name: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)
    children: List["MarkupNode"] = field(default_factory=list)
    # Parsed input and the offset of this element's start tag within it.
    source: Optional[str] = field(default=None, compare=False, repr=False)
    source_offset: Optional[int] = field(default=None, compare=False, repr=False)
    kind: Literal["element"] = field(default="element", init=False)

    def source_markup(self) -> Optional[str]:
        """Return the markup between this element's tags exactly as written.

        ``None`` when the element was not parsed from text or its end tag
        cannot be located.
        """
        if self.source is None or self.source_offset is None:
            return None
        return _inner_source(self.source, self.source_offset)


@dataclass
class MarkupText:
    data: str
    kind: Literal["text"] = field(default="text", init=False)


@dataclass
class MarkupComment:
    data: str
    kind: Literal["comment"] = field(default="comment", init=False)


MarkupNode = Union[MarkupElement, MarkupText, MarkupComment]

# Checked in order: Doctype and friends subclass NavigableString.
_UNSUPPORTED_STRINGS = (
    (Doctype, "doctype"),
    (CData, "cdata"),
    (ProcessingInstruction, "processing-instruction"),
    (Declaration, "declaration"),
)


def _unsupported_kind(node: PreformattedString) -> str:
    for cls, kind in _UNSUPPORTED_STRINGS:
        if isinstance(node, cls):
            return kind
    return type(node).__name__.lower()


_START_TAG_RE = re.compile(r"""<([^\s/>]+)(?:[^>"']|"[^"]*"|'[^']*')*>""")
_TAG_TOKEN_RE = re.compile(r"<!--.*?-->|<(/?)([A-Za-z][^\s/>]*)", re.DOTALL)


def _inner_source(text: str, offset: int) -> Optional[str]:
    start = _START_TAG_RE.match(text, offset)
    if start is None:
        return None
    if start.group(0).endswith("/>"):
        return ""
    name = start.group(1).lower()
    depth = 1
    for token in _TAG_TOKEN_RE.finditer(text, start.end()):
        if token.group(2) is None or token.group(2).lower() != name:
            continue
        depth += -1 if token.group(1) else 1
        if depth == 0:
            return text[start.end() : token.start()]
    return None


class _SourceText:
    """Maps bs4 ``(sourceline, sourcepos)`` pairs back onto the parsed text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.line_starts = [0]
        for line in text.split("\n")[:-1]:
            self.line_starts.append(self.line_starts[-1] + len(line) + 1)

    def offset(self, tag: Tag) -> Optional[int]:
        line, column = tag.sourceline, tag.sourcepos
        if line is None or column is None or not 0 < line <= len(self.line_starts):
            return None
        return self.line_starts[line - 1] + column

    def tag_name(self, tag: Tag, offset: Optional[int]) -> str:
        # html.parser lower-cases names; JSX needs `linearGradient` as written.
        if offset is not None:
            match = _START_TAG_RE.match(self.text, offset)
            if match and match.group(1).lower() == tag.name:
                return match.group(1)
        return tag.name


def _from_soup(node: object, source: _SourceText) -> MarkupNode:
    if isinstance(node, Tag):
        offset = source.offset(node)
        return MarkupElement(
            name=source.tag_name(node, offset),
            attributes=dict(node.attrs),
            children=[_from_soup(child, source) for child in node.contents],
            source=source.text if offset is not None else None,
            source_offset=offset,
        )
    if isinstance(node, Comment):
        return MarkupComment(data=str(node))
    if isinstance(node, PreformattedString):
        raise UnsupportedNodeKind(_unsupported_kind(node))
    if isinstance(node, NavigableString):
        return MarkupText(data=str(node))
    raise UnsupportedNodeKind(type(node).__name__)


def parse_markup(text: str) -> List[MarkupNode]:
    """Parse an HTML fragment into its top-level markup nodes.

    The stdlib ``html.parser`` builder is used so that no ``<html>`` or
    ``<body>`` wrappers are injected and whitespace-only text is kept.
    Attribute values stay plain strings, including ``class`` and ``rel``.
    Tag names keep the case they have in ``text``.
    """
    soup = BeautifulSoup(text, "html.parser", multi_valued_attributes=None)
    source = _SourceText(text)
    return [_from_soup(node, source) for node in soup.contents]


def _start_tag(node: MarkupElement) -> str:
    parts = [node.name]
    for name, value in node.attributes.items():
        # Boolean attributes are written bare: `<input disabled>`.
        if value == "":
            parts.append(name)
        else:
            parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
    return "<" + " ".join(parts) + ">"


def _render_node(node: MarkupNode, raw_text: bool) -> str:
    if node.kind == "text":
        return node.data if raw_text else html.escape(node.data, quote=False)
    if node.kind == "comment":
        return f"<!--{node.data}-->"
    if node.kind == "element":
        start = _start_tag(node)
        if node.name.lower() in VOID_ELEMENTS and not node.children:
            return start
        inner = _render_children(node.children, raw_text=node.name.lower() in RAW_TEXT_ELEMENTS)
        return f"{start}{inner}</{node.name}>"
    raise UnsupportedNodeKind(str(getattr(node, "kind", type(node).__name__)))


def _render_children(children: Sequence[MarkupNode], raw_text: bool = False) -> str:
    return "".join(_render_node(child, raw_text) for child in children)


def markup_to_html(nodes: Sequence[MarkupNode]) -> str:
    """Serialize markup nodes back to an HTML string."""
    return _render_children(nodes)


__all__ = [
    "MarkupComment",
    "MarkupElement",
    "MarkupNode",
    "MarkupText",
    "VOID_ELEMENTS",
    "markup_to_html",
    "parse_markup",
]
