"""JSX syntax tree produced by the converter and consumed by the generator.

Node and field names follow the Babel AST so the tree reads like the one a
JavaScript toolchain would build. Every node carries a ``type`` discriminant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union


@dataclass
class StringLiteral:
    value: str
    type: Literal["StringLiteral"] = field(default="StringLiteral", init=False)


@dataclass
class ObjectProperty:
    key: str
    value: "Expression"
    type: Literal["ObjectProperty"] = field(default="ObjectProperty", init=False)


@dataclass
class ObjectExpression:
    properties: List[ObjectProperty] = field(default_factory=list)
    type: Literal["ObjectExpression"] = field(default="ObjectExpression", init=False)


@dataclass
class JSXEmptyExpression:
    inner_comment: Optional[str] = None
    """Comment printed inside the otherwise empty ``{}``."""
    type: Literal["JSXEmptyExpression"] = field(default="JSXEmptyExpression", init=False)


@dataclass
class JSXExpressionContainer:
    expression: Union["Expression", JSXEmptyExpression]
    type: Literal["JSXExpressionContainer"] = field(default="JSXExpressionContainer", init=False)


@dataclass
class JSXText:
    value: str
    type: Literal["JSXText"] = field(default="JSXText", init=False)


@dataclass
class JSXAttribute:
    name: str
    value: Union[StringLiteral, ObjectExpression]
    type: Literal["JSXAttribute"] = field(default="JSXAttribute", init=False)


@dataclass
class JSXElement:
    name: str
    attributes: List[JSXAttribute] = field(default_factory=list)
    self_closing: bool = False
    children: List["JSXChild"] = field(default_factory=list)
    type: Literal["JSXElement"] = field(default="JSXElement", init=False)


@dataclass
class JSXFragment:
    children: List["JSXChild"] = field(default_factory=list)
    type: Literal["JSXFragment"] = field(default="JSXFragment", init=False)


@dataclass
class ExpressionStatement:
    expression: "Expression"
    type: Literal["ExpressionStatement"] = field(default="ExpressionStatement", init=False)


@dataclass
class BlockStatement:
    inner_comment: Optional[str] = None
    type: Literal["BlockStatement"] = field(default="BlockStatement", init=False)


Expression = Union[StringLiteral, ObjectExpression, JSXElement, JSXFragment]
JSXChild = Union[JSXElement, JSXExpressionContainer, JSXText]
Statement = Union[ExpressionStatement, BlockStatement]
Node = Union[
    Statement,
    Expression,
    JSXAttribute,
    JSXChild,
    JSXEmptyExpression,
    ObjectProperty,
]


__all__ = [
    "BlockStatement",
    "Expression",
    "ExpressionStatement",
    "JSXAttribute",
    "JSXChild",
    "JSXElement",
    "JSXEmptyExpression",
    "JSXExpressionContainer",
    "JSXFragment",
    "JSXText",
    "Node",
    "ObjectExpression",
    "ObjectProperty",
    "Statement",
    "StringLiteral",
]
