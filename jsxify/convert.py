"""Convert HTML fragments to JSX source.

The pipeline parses the markup into :mod:`jsxify.markup` nodes, turns each
node into a :mod:`jsxify.jsx_ast` node and prints the result with
:func:`jsxify.generator.generate`. A single top-level node becomes the whole
expression; several top-level nodes are grouped in a ``<>...</>`` fragment.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from .attributes import convert_attributes, create_jsx_attribute
from .config import DEFAULT_OPTIONS, ConvertOptions
from .entities import encode_jsx_text
from .errors import UnsupportedNodeKind
from .generator import generate
from .jsx_ast import (
    BlockStatement,
    ExpressionStatement,
    JSXChild,
    JSXElement,
    JSXEmptyExpression,
    JSXExpressionContainer,
    JSXFragment,
    JSXText,
    ObjectExpression,
    ObjectProperty,
    Statement,
    StringLiteral,
)
from .markup import AttributeValue, MarkupElement, MarkupNode, markup_to_html, parse_markup

logger = logging.getLogger(__name__)

RAW_HTML_ATTRIBUTE = "dangerouslySetInnerHTML"
RAW_HTML_KEY = "__html"


def _has_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def _node_kind(node: Any) -> str:
    return str(getattr(node, "kind", type(node).__name__))


def create_jsx_element(
    name: str,
    attributes: Dict[str, AttributeValue],
    children: Sequence[MarkupNode],
    options: ConvertOptions = DEFAULT_OPTIONS,
    *,
    raw_html: Optional[str] = None,
) -> JSXElement:
    """Build a JSX element.

    Raw-content tags become self-closing with their content in
    ``dangerouslySetInnerHTML``. ``raw_html`` is that content as written in
    the input; without it the children are serialized again.
    """
    if options.is_raw_content_tag(name):
        html_string = raw_html if raw_html is not None else markup_to_html(children)
        logger.debug("Passing <%s> content through as raw HTML (%d chars)", name, len(html_string))
        raw_attr = create_jsx_attribute(
            RAW_HTML_ATTRIBUTE,
            ObjectExpression([ObjectProperty(key=RAW_HTML_KEY, value=StringLiteral(html_string))]),
        )
        return JSXElement(
            name=name,
            attributes=[*convert_attributes(attributes, options), raw_attr],
            self_closing=True,
        )

    jsx_children: List[JSXChild] = []
    for child in children:
        jsx_children.extend(html_to_jsx_children(child, options))
    return JSXElement(
        name=name,
        attributes=convert_attributes(attributes, options),
        self_closing=not children,
        children=[child for child in jsx_children if child is not None and not _is_empty_text(child)],
    )


def _is_empty_text(child: JSXChild) -> bool:
    return child.type == "JSXText" and not child.value


def _element_to_jsx(node: MarkupElement, options: ConvertOptions) -> JSXElement:
    raw_html = node.source_markup() if options.is_raw_content_tag(node.name) else None
    return create_jsx_element(node.name, node.attributes, node.children, options, raw_html=raw_html)


def html_to_jsx_root(node: MarkupNode, options: ConvertOptions = DEFAULT_OPTIONS) -> Statement:
    """Convert a lone top-level node into a statement."""
    kind = _node_kind(node)
    if kind == "element":
        return ExpressionStatement(_element_to_jsx(node, options))
    if kind == "text":
        return ExpressionStatement(StringLiteral(node.data))
    if kind == "comment":
        return BlockStatement(inner_comment=node.data)
    raise UnsupportedNodeKind(kind)


def html_to_jsx_children(node: MarkupNode, options: ConvertOptions = DEFAULT_OPTIONS) -> List[JSXChild]:
    """Convert a node nested in an element or fragment into JSX children."""
    kind = _node_kind(node)
    if kind == "element":
        return [_element_to_jsx(node, options)]
    if kind == "text":
        return [JSXText(encode_jsx_text(node.data))]
    if kind == "comment":
        return [JSXExpressionContainer(JSXEmptyExpression(inner_comment=node.data))]
    raise UnsupportedNodeKind(kind)


def wrap_with_fragment(nodes: Sequence[MarkupNode], options: ConvertOptions = DEFAULT_OPTIONS) -> Statement:
    if len(nodes) == 1:
        return html_to_jsx_root(nodes[0], options)

    children: List[JSXChild] = []
    for node in nodes:
        children.extend(html_to_jsx_children(node, options))
    return ExpressionStatement(JSXFragment(children=children))


def convert(html: Optional[str], options: Optional[ConvertOptions] = None) -> Optional[str]:
    """Convert an HTML fragment to JSX source.

    Returns ``None`` when ``html`` is missing, empty or only whitespace.
    Raises :class:`~jsxify.errors.UnsupportedNodeKind` for doctypes, CDATA
    sections and other nodes that have no JSX equivalent.
    """
    if not _has_string(html):
        return None

    html = html.strip()
    if not html:
        return None

    options = options or DEFAULT_OPTIONS
    nodes = parse_markup(html)
    program = wrap_with_fragment(nodes, options)

    code = generate(program)
    if code.endswith(";"):
        code = code[:-1]
    return code


__all__ = [
    "convert",
    "create_jsx_element",
    "html_to_jsx_children",
    "html_to_jsx_root",
    "wrap_with_fragment",
]
