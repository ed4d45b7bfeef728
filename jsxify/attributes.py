"""Translate HTML attributes into JSX attributes."""

from __future__ import annotations

import logging
import re
from typing import List, Mapping, Optional, Tuple

from .attribute_names import ATTRIBUTE_NAMES
from .config import DEFAULT_OPTIONS, ConvertOptions
from .errors import MalformedStyleDeclaration
from .jsx_ast import JSXAttribute, ObjectExpression, ObjectProperty, StringLiteral
from .markup import AttributeValue

logger = logging.getLogger(__name__)

hyphen_lower_re = re.compile(r"-([a-z0-9])")


# Convert `background-color` -> `backgroundColor`
#         `-webkit-transition` -> `WebkitTransition`
#         `-ms-transform` -> `msTransform`
#         `--brand-color` -> `--brand-color`
def to_camel(prop: str) -> str:
    if prop.startswith("--"):
        return prop
    prop = prop.lower()
    if prop.startswith("-ms-"):
        prop = prop[1:]
    return hyphen_lower_re.sub(lambda match: match.group(1).upper(), prop)


def _parse_declaration(declaration: str) -> Tuple[str, str]:
    prop, sep, value = declaration.partition(":")
    prop = prop.strip()
    value = value.strip()
    if not sep or not prop or not value:
        raise MalformedStyleDeclaration(declaration)
    return prop, value


def parse_style(style: str, *, camel_case: bool = True) -> List[Tuple[str, str]]:
    """Split a ``style`` attribute into ordered ``(property, value)`` pairs.

    Empty declarations are dropped. Declarations that are not
    ``property: value`` pairs are skipped rather than failing the conversion.
    """
    declarations: List[Tuple[str, str]] = []
    for raw in style.split(";"):
        if not raw.strip():
            continue
        try:
            prop, value = _parse_declaration(raw)
        except MalformedStyleDeclaration as exc:
            logger.debug("Skipping style declaration: %s", exc)
            continue
        declarations.append((to_camel(prop) if camel_case else prop, value))
    return declarations


def _stringify(value: AttributeValue) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def create_jsx_attribute(name: str, value: object) -> JSXAttribute:
    if isinstance(value, (StringLiteral, ObjectExpression)):
        return JSXAttribute(name=name, value=value)
    return JSXAttribute(name=name, value=StringLiteral(_stringify(value)))


def convert_attribute(
    name: str,
    value: AttributeValue,
    options: ConvertOptions = DEFAULT_OPTIONS,
) -> Optional[JSXAttribute]:
    """Map one HTML attribute to its JSX form, or ``None`` to drop it."""
    lowered = name.lower()
    if lowered == "style":
        if not isinstance(value, str) or not value:
            return None
        declarations = parse_style(value, camel_case=options.camel_case_style)
        if not declarations:
            return None
        style = ObjectExpression([ObjectProperty(key=prop, value=StringLiteral(val)) for prop, val in declarations])
        return create_jsx_attribute("style", style)

    if lowered == "class":
        return create_jsx_attribute(options.class_attribute, value)

    jsx_name = ATTRIBUTE_NAMES.get(lowered, name)
    return create_jsx_attribute(jsx_name, value)


def convert_attributes(
    attribs: Mapping[str, AttributeValue],
    options: ConvertOptions = DEFAULT_OPTIONS,
) -> List[JSXAttribute]:
    converted: List[JSXAttribute] = []
    for name, value in attribs.items():
        attribute = convert_attribute(name, value, options)
        if attribute is not None:
            converted.append(attribute)
    return converted


__all__ = [
    "convert_attribute",
    "convert_attributes",
    "create_jsx_attribute",
    "parse_style",
    "to_camel",
]
