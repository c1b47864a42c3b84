"""CLI command: stylebind render -- print the CSS of a stylesheet."""

from __future__ import annotations

import click

from stylebind.cli.loader import load_sheet


@click.command()
@click.argument("reference")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True), help="Write CSS to a file.")
def render(reference: str, output: str | None) -> None:
    """Render the stylesheet REFERENCE (MODULE:ATTR) as CSS."""
    sheet = load_sheet(reference)
    text = sheet.render()
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
        click.echo(f"Wrote {len(sheet.snapshot())} rule(s) to {output}")
        return
    click.echo(text, nl=False)
