from __future__ import annotations

import pytest

from jsxify.attribute_names import POSSIBLE_STANDARD_NAMES
from jsxify.config import ConvertOptions
from jsxify.convert import (
    convert,
    create_jsx_element,
    html_to_jsx_children,
    html_to_jsx_root,
    wrap_with_fragment,
)
from jsxify.errors import UnsupportedNodeKind
from jsxify.generator import generate
from jsxify.jsx_ast import BlockStatement, ExpressionStatement, StringLiteral
from jsxify.markup import MarkupComment, MarkupText


def test_regular_html() -> None:
    assert convert("<div>Hello World</div>") == "<div>Hello World</div>"


def test_comment_inside_element_keeps_surrounding_text() -> None:
    html = """
      <div>
        <!-- This is a comment. -->
        Hello World!
      </div>
    """

    assert convert(html) == "<div>\n        { /* This is a comment. */ }\n        Hello World!\n      </div>"


def test_only_text_becomes_string_literal() -> None:
    assert convert("Hello World!") == '"Hello World!"'


def test_root_text_is_not_entity_encoded() -> None:
    assert convert('He said "hi" & left') == '"He said \\"hi\\" & left"'


def test_only_comment() -> None:
    assert convert("<!-- This is a comment. -->") == "{ /* This is a comment. */ }"
    assert convert("<!-- c -->") == "{ /* c */ }"


def test_singular_tags() -> None:
    assert convert("<div>Hello <br /> World!</div>") == "<div>Hello <br /> World!</div>"


def test_void_element_without_slash() -> None:
    assert convert('<img src="a.png" alt="">') == '<img src="a.png" alt="" />'


def test_self_closes_empty_element() -> None:
    assert convert("<div></div>") == "<div />"


def test_converts_class_to_class_name() -> None:
    assert convert('<div class="container">HelloWorld!</div>') == '<div className="container">HelloWorld!</div>'


def test_style_string_to_object() -> None:
    html = '<div style="color: red; background: red;">HelloWorld!</div>'
    assert convert(html) == '<div style={{ color: "red", background: "red" }}>HelloWorld!</div>'


def test_style_properties_are_camel_cased() -> None:
    html = '<div style="background-color: #fff; -webkit-transition: none; --gap: 4px"></div>'
    expected = '<div style={{ backgroundColor: "#fff", WebkitTransition: "none", "--gap": "4px" }} />'
    assert convert(html) == expected


def test_malformed_style_declaration_is_skipped() -> None:
    assert convert('<p style="color red; margin: 0">x</p>') == '<p style={{ margin: "0" }}>x</p>'


def test_style_without_declarations_is_dropped() -> None:
    assert convert('<div style=""></div>') == "<div />"
    assert convert('<div style="nonsense"></div>') == "<div />"


def test_converts_react_attributes() -> None:
    html_attrs = ""
    jsx_attrs = ""
    for html_name, react_name in POSSIBLE_STANDARD_NAMES:
        if html_name in ("style", "class"):
            continue
        html_attrs += f' {html_name}="s"'
        jsx_attrs += f' {react_name}="s"'

    assert convert(f"<div{html_attrs}>HelloWorld</div>") == f"<div{jsx_attrs}>HelloWorld</div>"


def test_unknown_attributes_pass_through() -> None:
    html = '<button data-id="7" aria-label="Close" for="x" tabindex="1">x</button>'
    expected = '<button data-id="7" aria-label="Close" htmlFor="x" tabIndex="1">x</button>'
    assert convert(html) == expected


def test_attribute_value_with_double_quote() -> None:
    assert convert("<div title='say \"hi\"'></div>") == '<div title={"say \\"hi\\""} />'


def test_attribute_value_with_ampersand_is_a_string_expression() -> None:
    assert convert('<a title="&amp;copy;">x</a>') == '<a title={"&copy;"}>x</a>'
    assert convert('<a href="?a=1&amp;b=2">x</a>') == '<a href={"?a=1&b=2"}>x</a>'


@pytest.mark.parametrize("html", [None, "", "   ", "\n\t  \n"])
def test_empty_input_returns_none(html: str | None) -> None:
    assert convert(html) is None


def test_surrounding_whitespace_is_trimmed() -> None:
    assert convert("\n   <span>x</span>  \n") == "<span>x</span>"


def test_multiple_roots_are_wrapped_in_fragment() -> None:
    assert convert("<span>a</span><span>b</span>") == "<><span>a</span><span>b</span></>"


def test_whitespace_between_roots_is_kept() -> None:
    assert convert("<a></a>\n<b></b>") == "<><a />\n<b /></>"


def test_comment_next_to_root_element_is_inline() -> None:
    assert convert("<!-- c --><div></div>") == "<>{ /* c */ }<div /></>"


def test_nested_comment_between_text() -> None:
    assert convert("<p>a<!--x-->b</p>") == "<p>a{ /*x*/ }b</p>"


def test_text_is_entity_encoded() -> None:
    html = "<p>a &lt; b &amp; \"c\" It's café&nbsp;©</p>"
    expected = "<p>a &lt; b &amp; &quot;c&quot; It&apos;s caf&eacute;&nbsp;&copy;</p>"
    assert convert(html) == expected


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ("<p>{name}</p>", '<p>{"{"}name{"}"}</p>'),
        ("<p>{{ x }}</p>", '<p>{"{{"} x {"}}"}</p>'),
        ("<p>{}</p>", '<p>{"{"}{"}"}</p>'),
        ("<p>}{</p>", '<p>{"}"}{"{"}</p>'),
    ],
)
def test_braces_are_escaped(html: str, expected: str) -> None:
    assert convert(html) == expected


def test_pre_content_is_passed_through_as_raw_html() -> None:
    html = '<pre class="code">a &lt; b <b>bold</b></pre>'
    expected = '<pre className="code" dangerouslySetInnerHTML={{ __html: "a &lt; b <b>bold</b>" }} />'
    assert convert(html) == expected


def test_pre_keeps_newlines_and_comments() -> None:
    html = "<div><pre>line1\nline2<!-- note --></pre></div>"
    expected = '<div><pre dangerouslySetInnerHTML={{ __html: "line1\\nline2<!-- note -->" }} /></div>'
    assert convert(html) == expected


def test_empty_pre() -> None:
    assert convert("<pre></pre>") == '<pre dangerouslySetInnerHTML={{ __html: "" }} />'


def test_pre_content_is_the_input_substring() -> None:
    html = "<pre>a&nbsp;b <input disabled> <a href='x'>y</a> <br/></pre>"
    expected = "<pre dangerouslySetInnerHTML={{ __html: \"a&nbsp;b <input disabled> <a href='x'>y</a> <br/>\" }} />"
    assert convert(html) == expected


def test_pre_substring_on_a_later_line() -> None:
    html = "<div>\n  <p>x</p>\n  <pre>  a&amp;b\n</pre>\n</div>"
    expected = '<div>\n  <p>x</p>\n  <pre dangerouslySetInnerHTML={{ __html: "  a&amp;b\\n" }} />\n</div>'
    assert convert(html) == expected


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ("<pre>a<pre>b</pre>c</pre>", '<pre dangerouslySetInnerHTML={{ __html: "a<pre>b</pre>c" }} />'),
        ("<pre>a<!-- </pre> -->b</pre>", '<pre dangerouslySetInnerHTML={{ __html: "a<!-- </pre> -->b" }} />'),
        ("<PRE>x &amp; <B>y</B></PRE>", '<PRE dangerouslySetInnerHTML={{ __html: "x &amp; <B>y</B>" }} />'),
    ],
)
def test_pre_end_tag_is_matched(html: str, expected: str) -> None:
    assert convert(html) == expected


def test_unclosed_pre_falls_back_to_serialized_children() -> None:
    html = "<div><pre>a &amp; b</div>"
    assert convert(html) == '<div><pre dangerouslySetInnerHTML={{ __html: "a &amp; b" }} /></div>'


def test_raw_content_without_source_is_serialized() -> None:
    element = create_jsx_element("pre", {}, [MarkupText("a < b")])
    assert generate(element) == '<pre dangerouslySetInnerHTML={{ __html: "a &lt; b" }} />'


def test_tag_name_case_is_preserved() -> None:
    html = '<svg viewBox="0 0 1 1"><linearGradient id="g"></linearGradient><feGaussianBlur stdDeviation="2"/></svg>'
    expected = '<svg viewBox="0 0 1 1"><linearGradient id="g" /><feGaussianBlur stdDeviation="2" /></svg>'
    assert convert(html) == expected
    assert convert("<DIV>x</div>") == "<DIV>x</DIV>"


def test_doctype_is_unsupported() -> None:
    with pytest.raises(UnsupportedNodeKind) as exc_info:
        convert("<!DOCTYPE html><p>x</p>")
    assert exc_info.value.kind == "doctype"


def test_nested_doctype_fails_whole_conversion() -> None:
    with pytest.raises(UnsupportedNodeKind):
        convert("<div><p>ok</p><!DOCTYPE html></div>")


def test_options_change_class_attribute_and_raw_tags() -> None:
    options = ConvertOptions(class_attribute="class", raw_content_tags=["code"])
    html = '<div class="a"><code><b>x</b></code><pre>y</pre></div>'
    expected = '<div class="a"><code dangerouslySetInnerHTML={{ __html: "<b>x</b>" }} /><pre>y</pre></div>'
    assert convert(html, options) == expected


def test_options_keep_css_property_names() -> None:
    options = ConvertOptions(camel_case_style=False)
    assert convert('<i style="font-size: 2px"></i>', options) == '<i style={{ "font-size": "2px" }} />'


def test_conversion_is_deterministic() -> None:
    html = '<ul class="list"><li>One</li><li style="color: red">Two</li></ul><p>{x}</p>'
    assert convert(html) == convert(html)


def test_numeric_attribute_values_are_stringified() -> None:
    element = create_jsx_element("input", {"size": 10, "step": 0.5, "max": 3.0}, [])
    assert generate(element) == '<input size="10" step="0.5" max="3" />'


def test_numeric_style_value_is_dropped() -> None:
    assert generate(create_jsx_element("div", {"style": 5}, [])) == "<div />"


def test_style_with_numeric_looking_values() -> None:
    html = '<div style="opacity: 0.5; z-index: 2"></div>'
    assert convert(html) == '<div style={{ opacity: "0.5", zIndex: "2" }} />'


def test_zero_nodes_make_an_empty_fragment() -> None:
    assert generate(wrap_with_fragment([])) == "<></>;"


def test_root_and_child_modes() -> None:
    assert html_to_jsx_root(MarkupText("hi")) == ExpressionStatement(StringLiteral("hi"))
    assert html_to_jsx_root(MarkupComment(" c ")) == BlockStatement(inner_comment=" c ")
    [child] = html_to_jsx_children(MarkupText("a < b"))
    assert child.value == "a &lt; b"


def test_unknown_node_kind_raises() -> None:
    with pytest.raises(UnsupportedNodeKind) as exc_info:
        html_to_jsx_children(object())  # type: ignore[arg-type]
    assert exc_info.value.kind == "object"
