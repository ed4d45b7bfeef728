"""Exceptions raised by the HTML to JSX converter."""

from __future__ import annotations


class JsxifyError(Exception):
    """Base class for conversion errors."""


class UnsupportedNodeKind(JsxifyError):
    """A markup node that is not an element, text or comment was encountered."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown node type: {kind}")
        self.kind = kind


class MalformedStyleDeclaration(JsxifyError, ValueError):
    """A ``style`` declaration is not a ``property: value`` pair."""

    def __init__(self, declaration: str) -> None:
        super().__init__(f"Malformed style declaration: {declaration!r}")
        self.declaration = declaration


class InvalidOptions(JsxifyError, ValueError):
    """Conversion options could not be loaded or validated."""


__all__ = [
    "InvalidOptions",
    "JsxifyError",
    "MalformedStyleDeclaration",
    "UnsupportedNodeKind",
]
