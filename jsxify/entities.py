"""Character reference encoding for JSX text children."""

from __future__ import annotations

import re
from html.entities import codepoint2name, html5
from typing import Dict

# Markup-significant characters, control characters other than tab/LF/CR,
# and everything outside ASCII.
_ENCODE_RE = re.compile("[<>'\"&\x01-\x08\x0b\x0c\x0e-\x1f\x7f-\U0010ffff]")
_BRACE_RUN_RE = re.compile(r"(\{+|\}+)")


def _build_entity_names() -> Dict[str, str]:
    candidates: Dict[str, list[str]] = {}
    for name, char in html5.items():
        if len(char) != 1 or not name.endswith(";"):
            continue
        candidates.setdefault(char, []).append(name[:-1])

    names: Dict[str, str] = {}
    for char, options in candidates.items():
        # Prefer short lower-case spellings: "quot" over "QUOT".
        options.sort(key=lambda option: (option != option.lower(), len(option), option))
        names[char] = options[0]
    for codepoint, name in codepoint2name.items():
        names[chr(codepoint)] = name
    return names


ENTITY_NAMES: Dict[str, str] = _build_entity_names()


def _reference(match: re.Match) -> str:
    char = match.group(0)
    name = ENTITY_NAMES.get(char)
    if name is not None:
        return f"&{name};"
    return f"&#{ord(char)};"


def encode_text(text: str) -> str:
    """Replace reserved and non-ASCII characters with character references.

    Named HTML references are used where one exists, decimal references
    otherwise. Printable ASCII other than ``& < > " '`` is left untouched.
    """
    return _ENCODE_RE.sub(_reference, text)


def escape_braces(text: str) -> str:
    """Wrap runs of ``{`` or ``}`` in a string expression: ``{{`` -> ``{"{{"}``."""
    return _BRACE_RUN_RE.sub(r'{"\1"}', text)


def encode_jsx_text(text: str) -> str:
    return escape_braces(encode_text(text))


__all__ = ["ENTITY_NAMES", "encode_jsx_text", "encode_text", "escape_braces"]
