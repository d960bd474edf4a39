"""Convert Quill Delta documents into sanitized HTML."""

from __future__ import annotations

from typing import Any

from deltahtml.config import ConvertOptions
from deltahtml.errors import DeltaError, MalformedDeltaError
from deltahtml.parser import BlockBuilder, Node, finalize, normalize, split_lines
from deltahtml.renderer import render_html

__version__ = "0.1.0"


def delta_to_tree(
    delta: Any,
    options: ConvertOptions | None = None,
    *,
    preserve_whitespace: bool | None = None,
) -> list[Node]:
    """Build the HTML element tree for a Delta document.

    ``delta`` is a list of operations, a ``{"ops": [...]}`` envelope or the
    JSON text of either. Raises :class:`MalformedDeltaError` on input that
    breaks the Delta contract.
    """
    options = (options or ConvertOptions()).merged(preserve_whitespace=preserve_whitespace)
    fragments = split_lines(normalize(delta))
    blocks = BlockBuilder(options).build(fragments)
    return finalize(blocks, preserve_whitespace=options.preserve_whitespace)


def delta_to_html(
    delta: Any,
    options: ConvertOptions | None = None,
    *,
    preserve_whitespace: bool | None = None,
) -> str:
    """Convert a Delta document to an HTML fragment.

    >>> delta_to_html([{"insert": "word\\n"}])
    '<p>word</p>'
    """
    return render_html(delta_to_tree(delta, options, preserve_whitespace=preserve_whitespace))


__all__ = [
    "ConvertOptions",
    "DeltaError",
    "MalformedDeltaError",
    "delta_to_html",
    "delta_to_tree",
]
