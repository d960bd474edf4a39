from __future__ import annotations

from deltahtml.parser.base import Element, Mention, Operation
from deltahtml.parser.inline import INLINE_RULES, format_inline
from deltahtml.parser.sanitize import safe_color, safe_link


def test_plain_text_is_a_leaf() -> None:
    assert format_inline(Operation("plain")) == "plain"


def test_unrecognized_attributes_are_ignored() -> None:
    assert format_inline(Operation("x", {"header": 1, "indent": 2})) == "x"


def test_rule_order_decides_nesting() -> None:
    node = format_inline(Operation("x", {"script": "sub", "link": "https://a.example", "bold": True}))

    assert node == Element(
        "strong",
        children=[
            Element(
                "a",
                [("href", "https://a.example"), ("target", "_blank")],
                [Element("sub", children=["x"])],
            )
        ],
    )


def test_every_rule_wraps_exactly_once() -> None:
    attributes = {
        "underline": True,
        "italic": True,
        "bold": True,
        "strike": True,
        "code": True,
        "color": "#000",
        "background": "rgb(1, 2, 3)",
        "font": "serif",
        "size": "huge",
        "link": "https://example.com",
        "script": "super",
    }
    node = format_inline(Operation("x", attributes))

    tags = []
    while isinstance(node, Element):
        tags.append(node.tag)
        (node,) = node.children
    assert node == "x"
    assert tags == ["u", "em", "strong", "s", "code", "span", "span", "span", "span", "a", "sup"]
    assert [key for key, _ in INLINE_RULES] == list(attributes)


def test_false_flags_are_dropped() -> None:
    assert format_inline(Operation("x", {"bold": False, "italic": None})) == "x"


def test_mention_is_substituted_and_wrapped() -> None:
    node = format_inline(Operation(Mention("+", "first_name"), {"italic": True}))
    assert node == Element("em", children=["+first_name"])


def test_unknown_embed_renders_nothing() -> None:
    assert format_inline(Operation({"image": "https://example.com/a.png"})) is None


def test_safe_link() -> None:
    assert safe_link("https://example.com/a?b=c#d") == "https://example.com/a?b=c#d"
    assert safe_link("HTTP://EXAMPLE.COM") == "HTTP://EXAMPLE.COM"
    assert safe_link("mailto:user@example.com") == "mailto:user@example.com"
    assert safe_link("https://") is None
    assert safe_link("https://[::1") is None
    assert safe_link("ftp://example.com") is None
    assert safe_link("https://example.com/a b") is None
    assert safe_link(None) is None


def test_safe_color() -> None:
    assert safe_color("#abc") == "#abc"
    assert safe_color("rgba(0, 0, 0, 0.5)") == "rgba(0, 0, 0, 0.5)"
    assert safe_color("tomato") == "tomato"
    assert safe_color("url(javascript:alert(1))") is None
    assert safe_color(12) is None
