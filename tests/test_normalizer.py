from __future__ import annotations

import pytest

from deltahtml.errors import MalformedDeltaError
from deltahtml.parser.base import Mention, Operation
from deltahtml.parser.normalizer import normalize, split_lines


def _shape(fragments) -> list[tuple[str, bool]]:
    return [(fragment.text, fragment.line_end) for fragment in fragments]


def test_normalize_accepts_envelope_and_copies_attributes() -> None:
    attrs = {"bold": True}
    ops = normalize({"ops": [{"insert": "x", "attributes": attrs}]})

    assert ops == [Operation("x", {"bold": True})]
    assert ops[0].attributes is not attrs


def test_normalize_parses_mentions() -> None:
    ops = normalize([{"insert": {"mention": {"denotationChar": "@", "id": "ada", "value": "Ada"}}}])
    assert ops[0].insert == Mention(denotation_char="@", id="ada")
    assert ops[0].insert.token == "@ada"


@pytest.mark.parametrize(
    ("delta", "message"),
    [
        ({"foo": []}, "no 'ops'"),
        (42, "expected a list"),
        ([{"attributes": {}}], "op 0: missing 'insert'"),
        ([{"insert": "a"}, "b"], "op 1: expected a mapping"),
        ([{"insert": 3}], "'insert' must be text"),
        ([{"insert": "a", "attributes": ["bold"]}], "'attributes' must be a mapping"),
        ([{"insert": {"mention": {"id": "x"}}}], "missing 'denotationChar'"),
        ("{not json", "invalid JSON"),
    ],
)
def test_normalize_rejects_malformed_input(delta: object, message: str) -> None:
    with pytest.raises(MalformedDeltaError, match=message):
        normalize(delta)


def test_split_interior_newlines() -> None:
    fragments = split_lines([Operation("zero\none", {"bold": True})])

    assert _shape(fragments) == [("zero\n", True), ("one", False)]
    assert all(fragment.attributes == {"bold": True} for fragment in fragments)


def test_split_consecutive_newlines_share_attributes() -> None:
    fragments = split_lines([Operation("\n\n", {"indent": 1})])

    assert _shape(fragments) == [("\n", True), ("\n", True)]
    assert fragments[0].attributes is not fragments[1].attributes


def test_split_keeps_single_terminator_and_embeds() -> None:
    mention = Mention("+", "x")
    fragments = split_lines([Operation("word\n"), Operation(mention), Operation("\n")])

    assert _shape(fragments) == [("word\n", True), ("", False), ("\n", True)]
    assert fragments[1].op.insert is mention


def test_split_skips_empty_text() -> None:
    assert split_lines([Operation("")]) == []
