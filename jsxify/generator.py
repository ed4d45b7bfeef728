"""Compact source printer for the JSX syntax tree."""

from __future__ import annotations

import json
import re
from typing import List, Optional, Sequence

from .jsx_ast import JSXAttribute, Node, ObjectExpression

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def string_literal(value: str) -> str:
    """Render ``value`` as a double-quoted JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def _comment(text: Optional[str]) -> str:
    if text is None:
        return ""
    # A block comment ends at the first `*/`.
    return "/*" + text.replace("*/", "* /") + "*/"


def _property_key(key: str) -> str:
    if IDENTIFIER_RE.match(key):
        return key
    return string_literal(key)


def _object(node: ObjectExpression) -> str:
    if not node.properties:
        return "{}"
    parts = [f"{_property_key(prop.key)}: {generate(prop.value)}" for prop in node.properties]
    return "{ " + ", ".join(parts) + " }"


def _attribute(node: JSXAttribute) -> str:
    value = node.value
    if value.type == "StringLiteral":
        # Quoted JSX attribute strings cannot escape `"` and decode `&...;`.
        if '"' in value.value or "&" in value.value:
            return f"{node.name}={{{string_literal(value.value)}}}"
        return f'{node.name}="{value.value}"'
    return f"{node.name}={{{generate(value)}}}"


def _children(children: Sequence[Node]) -> str:
    return "".join(generate(child) for child in children)


def generate(node: Node) -> str:
    """Render a JSX syntax tree node as source text."""
    ntype = node.type
    if ntype == "ExpressionStatement":
        return generate(node.expression) + ";"
    if ntype == "BlockStatement":
        if node.inner_comment is None:
            return "{}"
        return "{ " + _comment(node.inner_comment) + " }"
    if ntype == "StringLiteral":
        return string_literal(node.value)
    if ntype == "ObjectExpression":
        return _object(node)
    if ntype == "ObjectProperty":
        return f"{_property_key(node.key)}: {generate(node.value)}"
    if ntype == "JSXAttribute":
        return _attribute(node)
    if ntype == "JSXText":
        return node.value
    if ntype == "JSXEmptyExpression":
        if node.inner_comment is None:
            return ""
        return " " + _comment(node.inner_comment) + " "
    if ntype == "JSXExpressionContainer":
        return "{" + generate(node.expression) + "}"
    if ntype == "JSXFragment":
        return "<>" + _children(node.children) + "</>"
    if ntype == "JSXElement":
        parts: List[str] = [f"<{node.name}"]
        parts.extend(" " + _attribute(attr) for attr in node.attributes)
        if node.self_closing:
            parts.append(" />")
            return "".join(parts)
        parts.append(">")
        parts.append(_children(node.children))
        parts.append(f"</{node.name}>")
        return "".join(parts)
    raise TypeError(f"Cannot generate code for node type {ntype!r}")


__all__ = ["generate", "string_literal"]
