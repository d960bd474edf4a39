"""Core intermediate representation (IR) for Delta documents and the HTML tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(slots=True, frozen=True)
class Mention:
    denotation_char: str
    id: str

    @property
    def token(self) -> str:
        return f"{self.denotation_char}{self.id}"


@dataclass(slots=True)
class Operation:
    """One Delta insert: text or an embed, plus formatting attributes."""

    insert: str | Mention | dict[str, Any]
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class LineFragment:
    op: Operation
    line_end: bool = False

    @property
    def text(self) -> str:
        return self.op.insert if isinstance(self.op.insert, str) else ""

    @property
    def attributes(self) -> dict[str, Any]:
        return self.op.attributes


@dataclass(slots=True)
class Element:
    tag: str
    attrs: list[tuple[str, str]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)


Node = Union[str, Element]
