"""Validate raw Delta input and split it into one-newline-per-fragment form."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from deltahtml.errors import MalformedDeltaError

from .base import LineFragment, Mention, Operation

logger = logging.getLogger(__name__)


def normalize(delta: Any) -> list[Operation]:
    """Turn a Delta payload into validated :class:`Operation` objects.

    ``delta`` may be a list of op mappings, a ``{"ops": [...]}`` envelope, or
    the JSON text of either. The caller's structures are never modified.
    """
    if isinstance(delta, (str, bytes, bytearray)):
        try:
            delta = json.loads(delta)
        except json.JSONDecodeError as exc:
            raise MalformedDeltaError(f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc

    if isinstance(delta, Mapping):
        if "ops" not in delta:
            raise MalformedDeltaError("envelope has no 'ops' field")
        delta = delta["ops"]

    if isinstance(delta, (str, bytes, Mapping)) or not isinstance(delta, Iterable):
        raise MalformedDeltaError(f"expected a list of operations, got {type(delta).__name__}")

    return [_to_operation(index, raw) for index, raw in enumerate(delta)]


def _to_operation(index: int, raw: Any) -> Operation:
    if not isinstance(raw, Mapping):
        raise MalformedDeltaError(f"expected a mapping, got {type(raw).__name__}", index=index)
    if "insert" not in raw:
        raise MalformedDeltaError("missing 'insert'", index=index)

    attributes = raw.get("attributes") or {}
    if not isinstance(attributes, Mapping):
        raise MalformedDeltaError("'attributes' must be a mapping", index=index)

    insert = raw["insert"]
    if isinstance(insert, str):
        return Operation(insert=insert, attributes=dict(attributes))
    if isinstance(insert, Mapping):
        return Operation(insert=_to_embed(index, insert), attributes=dict(attributes))
    raise MalformedDeltaError(f"'insert' must be text or an embed, got {type(insert).__name__}", index=index)


def _to_embed(index: int, insert: Mapping[str, Any]) -> Mention | dict[str, Any]:
    if "mention" not in insert:
        return dict(insert)

    mention = insert["mention"]
    if not isinstance(mention, Mapping):
        raise MalformedDeltaError("mention embed must be a mapping", index=index)
    try:
        return Mention(denotation_char=str(mention["denotationChar"]), id=str(mention["id"]))
    except KeyError as exc:
        raise MalformedDeltaError(f"mention embed is missing {exc.args[0]!r}", index=index) from exc


def split_lines(ops: Iterable[Operation]) -> list[LineFragment]:
    """Expand text runs so that every fragment holds at most one newline.

    Each ``\\n`` ends a fragment (``line_end=True``) whose text runs up to and
    including that newline; any remainder after the last newline becomes a
    non-terminating fragment. Embeds pass through unchanged.
    """
    fragments: list[LineFragment] = []
    for op in ops:
        if not isinstance(op.insert, str):
            fragments.append(LineFragment(op))
            continue

        text = op.insert
        start = 0
        while True:
            newline = text.find("\n", start)
            if newline == -1:
                break
            piece = text[start:newline + 1]
            fragments.append(LineFragment(Operation(piece, dict(op.attributes)), line_end=True))
            start = newline + 1

        if start < len(text):
            fragments.append(LineFragment(Operation(text[start:], dict(op.attributes))))
        elif start == 0:
            logger.debug("skipping empty text insert")

    return fragments
