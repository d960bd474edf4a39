"""Serialize the element tree into HTML, optionally as a standalone page."""

from __future__ import annotations

import html
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from deltahtml.parser.base import Node

VOID_ELEMENTS = frozenset({"br", "hr", "img"})


class HTMLRenderer:
    """Render element trees as HTML fragments or full pages."""

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "page.html"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def render_fragment(self, nodes: list[Node]) -> str:
        return render_html(nodes)

    def render_page(self, nodes: list[Node], *, title: str | None = None) -> str:
        template = self._env.get_template(self._template_name)
        return template.render(
            page_title=title or "Untitled",
            body=Markup(self.render_fragment(nodes)),
        )


def _render_node(node: Node) -> str:
    if isinstance(node, str):
        return html.escape(node, quote=False)

    attrs = "".join(f' {name}="{html.escape(value)}"' for name, value in node.attrs)
    if node.tag in VOID_ELEMENTS:
        return f"<{node.tag}{attrs}/>"
    inner = "".join(_render_node(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def render_html(nodes: list[Node]) -> str:
    """Serialize ``nodes`` without a page wrapper."""
    return "".join(_render_node(node) for node in nodes)
