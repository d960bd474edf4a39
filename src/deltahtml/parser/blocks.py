"""Line-by-line state machine that groups inline nodes into block elements."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from deltahtml.config import ConvertOptions
from deltahtml.errors import MalformedDeltaError

from .base import Element, LineFragment, Node, Operation
from .inline import format_inline
from .lists import LIST_KINDS, merge_list_item

logger = logging.getLogger(__name__)

_ALIGNMENTS = {"left", "center", "right", "justify"}


class BlockBuilder:
    """Consume line fragments and emit block-level elements.

    Inline nodes accumulate in ``line`` until a line-ending fragment arrives;
    the attributes on that fragment decide which block the line becomes.
    """

    def __init__(self, options: ConvertOptions | None = None) -> None:
        self.options = options or ConvertOptions()
        self.blocks: list[Node] = []
        self.line: list[Node] = []

    def build(self, fragments: Iterable[LineFragment]) -> list[Node]:
        self.blocks = []
        self.line = []
        for fragment in fragments:
            self.feed(fragment)
        if self.line:
            raise MalformedDeltaError("document ends without a closing newline")
        return self.blocks

    def feed(self, fragment: LineFragment) -> None:
        if not fragment.line_end:
            self._push_inline(fragment.op)
            return

        text = fragment.text[:-1]
        blank = not text and not self.line
        if text:
            self._push_inline(Operation(text, fragment.attributes))
        self._close_line(fragment.attributes, blank=blank)

    def _push_inline(self, op: Operation) -> None:
        node = format_inline(op)
        if node is not None:
            self.line.append(node)

    def _close_line(self, attrs: dict[str, Any], *, blank: bool) -> None:
        children, self.line = self.line, []

        level = attrs.get("header")
        if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= 6:
            self.blocks.append(Element(f"h{level}", children=children))
            return

        if attrs.get("blockquote") is True:
            self.blocks.append(Element("blockquote", children=children))
            return

        language = attrs.get("code-block")
        if language is True:
            self.blocks.append(Element("pre", children=children))
            return
        if isinstance(language, str) and language:
            self.blocks.append(Element("pre", [("data-language", language)], children))
            return

        list_value = attrs.get("list")
        kind = LIST_KINDS.get(list_value) if isinstance(list_value, str) else None
        if kind is not None:
            indent = self._indent(attrs.get("indent"))
            merge_list_item(self.blocks, Element("li", children=children), kind, indent)
            return

        self.blocks.append(self._paragraph(attrs, children, blank=blank))

    def _paragraph(self, attrs: dict[str, Any], children: list[Node], *, blank: bool) -> Element:
        paragraph = Element("p", children=children)

        align = attrs.get("align")
        indent = self._indent(attrs.get("indent"))
        if isinstance(align, str) and align in _ALIGNMENTS:
            paragraph.attrs.append(("style", f"text-align: {align};"))
        elif indent:
            paragraph.attrs.append(("style", f"padding-left: {indent * 2}em;"))
        elif blank:
            paragraph.children.append(Element("br"))

        if attrs.get("direction") == "rtl":
            paragraph.attrs.append(("dir", "rtl"))
        return paragraph

    def _indent(self, value: Any) -> int:
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, int):
            logger.debug("dropping unsupported indent value %r", value)
            return 0
        if value > self.options.max_indent:
            logger.warning("clamping indent %d to %d", value, self.options.max_indent)
            return self.options.max_indent
        return max(value, 0)
