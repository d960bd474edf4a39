"""Convert a single non-terminating Delta operation into an inline node."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .base import Element, Mention, Node, Operation
from .sanitize import safe_color, safe_link

logger = logging.getLogger(__name__)

_FONT_FAMILIES = {"serif", "monospace"}
_FONT_SIZES = {"small": "0.75em", "large": "1.5em", "huge": "2.5em"}
_SCRIPTS = {"super": "sup", "sub": "sub"}

Wrapper = Callable[[Any], "Element | None"]


def _flag(tag: str) -> Wrapper:
    def wrap(value: Any) -> Element | None:
        return Element(tag) if value is True else None

    return wrap


def _style(prop: str, validate: Callable[[Any], str | None]) -> Wrapper:
    def wrap(value: Any) -> Element | None:
        checked = validate(value)
        if checked is None:
            return None
        return Element("span", [("style", f"{prop}: {checked};")])

    return wrap


def _font(value: Any) -> str | None:
    return value if isinstance(value, str) and value in _FONT_FAMILIES else None


def _size(value: Any) -> str | None:
    return _FONT_SIZES.get(value) if isinstance(value, str) else None


def _link(value: Any) -> Element | None:
    href = safe_link(value)
    if href is None:
        return None
    return Element("a", [("href", href), ("target", "_blank")])


def _script(value: Any) -> Element | None:
    tag = _SCRIPTS.get(value) if isinstance(value, str) else None
    return Element(tag) if tag else None


# Outermost first: with underline, italic and bold all set the result is
# <u><em><strong>text</strong></em></u>.
INLINE_RULES: tuple[tuple[str, Wrapper], ...] = (
    ("underline", _flag("u")),
    ("italic", _flag("em")),
    ("bold", _flag("strong")),
    ("strike", _flag("s")),
    ("code", _flag("code")),
    ("color", _style("color", safe_color)),
    ("background", _style("background-color", safe_color)),
    ("font", _style("font-family", _font)),
    ("size", _style("font-size", _size)),
    ("link", _link),
    ("script", _script),
)


def format_inline(op: Operation) -> Node | None:
    """Wrap the operation's content in one tag per recognized attribute.

    Unsupported values (an unknown font, a ``javascript:`` link, ...) drop only
    that attribute. Returns ``None`` for embeds other than mentions.
    """
    node: Node
    if isinstance(op.insert, str):
        node = op.insert
    elif isinstance(op.insert, Mention):
        node = op.insert.token
    else:
        logger.debug("dropping unsupported embed %s", sorted(op.insert))
        return None

    for key, wrap in reversed(INLINE_RULES):
        if key not in op.attributes:
            continue
        wrapper = wrap(op.attributes[key])
        if wrapper is None:
            logger.debug("dropping unsupported %s value %r", key, op.attributes[key])
            continue
        wrapper.children.append(node)
        node = wrapper

    return node
