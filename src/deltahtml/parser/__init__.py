"""Delta parsing package."""

from .base import Element, LineFragment, Mention, Node, Operation
from .blocks import BlockBuilder
from .inline import format_inline
from .lists import merge_list_item
from .normalizer import normalize, split_lines
from .tree import finalize

__all__ = [
    "Element",
    "LineFragment",
    "Mention",
    "Node",
    "Operation",
    "BlockBuilder",
    "format_inline",
    "merge_list_item",
    "normalize",
    "split_lines",
    "finalize",
]
