"""Renderer package."""

from .html_renderer import HTMLRenderer, render_html

__all__ = ["HTMLRenderer", "render_html"]
