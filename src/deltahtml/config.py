"""Conversion options."""

from __future__ import annotations

from dataclasses import dataclass, replace

# Quill itself never produces more than eight indent levels.
DEFAULT_MAX_INDENT = 8


@dataclass(slots=True, frozen=True)
class ConvertOptions:
    preserve_whitespace: bool = False
    max_indent: int = DEFAULT_MAX_INDENT

    def __post_init__(self) -> None:
        if self.max_indent < 0:
            raise ValueError("max_indent must be >= 0")

    def merged(self, **overrides: object) -> ConvertOptions:
        """Return a copy with the non-``None`` overrides applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values) if values else self
