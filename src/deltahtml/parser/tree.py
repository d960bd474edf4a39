"""Final assembly of the block sequence into the output tree."""

from __future__ import annotations

from .base import Element, Node

PRESERVE_WHITESPACE_STYLE = "white-space: pre-wrap;"


def finalize(blocks: list[Node], *, preserve_whitespace: bool = False) -> list[Node]:
    """Return the document tree in reading order.

    Blocks are built in document order already. With ``preserve_whitespace``
    the whole sequence is wrapped in a single ``div`` that keeps runs of
    spaces and tabs intact.
    """
    nodes = list(blocks)
    if preserve_whitespace:
        return [Element("div", [("style", PRESERVE_WHITESPACE_STYLE)], nodes)]
    return nodes
