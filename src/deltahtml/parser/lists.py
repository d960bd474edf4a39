"""Merge list items into nested ``<ol>``/``<ul>`` containers."""

from __future__ import annotations

from .base import Element, Node

LIST_KINDS = {"ordered": "ol", "bullet": "ul"}


def merge_list_item(blocks: list[Node], item: Element, kind: str, indent: int) -> list[Node]:
    """Add ``item`` to the document at ``indent`` levels below the list root.

    Continues the last block when it is a ``kind`` container; otherwise a new
    container chain is started, so switching from ``ol`` to ``ul`` always
    opens a sibling list.
    """
    last = blocks[-1] if blocks else None
    if isinstance(last, Element) and last.tag == kind:
        _merge_into(last, item, kind, indent)
    else:
        blocks.append(_new_list(item, kind, indent))
    return blocks


def _merge_into(container: Element, item: Element, kind: str, indent: int) -> None:
    # Indent is relative to ``container``; walk down one nesting per level.
    while indent > 0:
        last = container.children[-1] if container.children else None
        if not (isinstance(last, Element) and last.tag == kind):
            container.children.append(_new_list(item, kind, indent - 1))
            return
        container = last
        indent -= 1
    container.children.append(item)


def _new_list(item: Element, kind: str, indent: int) -> Element:
    node = Element(kind, children=[item])
    for _ in range(indent):
        node = Element(kind, children=[node])
    return node
