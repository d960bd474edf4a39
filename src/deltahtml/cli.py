"""deltahtml CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import click

from deltahtml import delta_to_tree
from deltahtml.config import ConvertOptions
from deltahtml.errors import DeltaError
from deltahtml.renderer.html_renderer import HTMLRenderer


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Output HTML path")
@click.option("--preserve-whitespace", is_flag=True, help="Keep runs of spaces and tabs verbatim")
@click.option("--standalone", is_flag=True, help="Wrap the fragment in a complete HTML page")
@click.option("--title", type=str, default=None, help="Page title for --standalone output")
@click.option("--verbose", "-v", is_flag=True, help="Log dropped attributes and other details")
def main(
    input_file: TextIO,
    output: Path | None,
    preserve_whitespace: bool,
    standalone: bool,
    title: str | None,
    verbose: bool,
) -> None:
    """Convert a Quill Delta JSON document (file or '-' for stdin) into HTML."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    options = ConvertOptions(preserve_whitespace=preserve_whitespace)
    try:
        tree = delta_to_tree(input_file.read(), options)
    except DeltaError as exc:
        raise click.ClickException(f"Cannot convert {input_file.name}: {exc}") from exc

    renderer = HTMLRenderer()
    if standalone:
        html = renderer.render_page(tree, title=title)
    else:
        html = renderer.render_fragment(tree)

    if output is None:
        click.echo(html)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    click.echo(f"Rendered: {output}", err=True)


if __name__ == "__main__":  # pragma: no cover
    main()
