from __future__ import annotations

import pytest

from jsxify.entities import encode_jsx_text, encode_text, escape_braces


def test_printable_ascii_is_untouched() -> None:
    text = "plain ASCII text 123 !?#%()*+,-./:;=@[]^_`|~"
    assert encode_text(text) == text


def test_reserved_characters_are_encoded() -> None:
    assert encode_text("<a> & \"b\" 'c'") == "&lt;a&gt; &amp; &quot;b&quot; &apos;c&apos;"


def test_layout_whitespace_is_kept() -> None:
    assert encode_text("a\tb\nc\r\n") == "a\tb\nc\r\n"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("naïve café", "na&iuml;ve caf&eacute;"),
        ("\u00a0", "&nbsp;"),
        ("© 2024", "&copy; 2024"),
        ("\U0001f600", "&#128512;"),
        ("\x07", "&#7;"),
    ],
)
def test_non_ascii_and_control_characters(text: str, expected: str) -> None:
    assert encode_text(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("no braces", "no braces"),
        ("{{a}} {b}", '{"{{"}a{"}}"} {"{"}b{"}"}'),
        ("{}", '{"{"}{"}"}'),
        ("}{", '{"}"}{"{"}'),
    ],
)
def test_escape_braces(text: str, expected: str) -> None:
    assert escape_braces(text) == expected


def test_encode_jsx_text_encodes_before_escaping_braces() -> None:
    assert encode_jsx_text("<{x}>") == '&lt;{"{"}x{"}"}&gt;'
