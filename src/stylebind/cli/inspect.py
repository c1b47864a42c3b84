"""CLI command: stylebind inspect -- summarize the rules of a stylesheet."""

from __future__ import annotations

import click

from stylebind.cli.loader import load_sheet
from stylebind.errors import UnresolvedSelfSelector
from stylebind.rules import KeyframesRule, MediaRule, StyleRule


def _describe(rule) -> str:
    if isinstance(rule, StyleRule):
        try:
            target = rule.selector.as_text()
        except UnresolvedSelfSelector:
            target = "<unbound self>"
        return f"style      {target}  ({len(rule.properties)} properties)"
    if isinstance(rule, KeyframesRule):
        return f"keyframes  {rule.name}  ({len(rule.frames)} frames)"
    if isinstance(rule, MediaRule):
        return f"media      {rule.query}  ({len(rule.rules)} rules)"
    return repr(rule)


@click.command()
@click.argument("reference")
def inspect(reference: str) -> None:
    """Summarize the rules of the stylesheet REFERENCE (MODULE:ATTR)."""
    sheet = load_sheet(reference)
    rules = sheet.snapshot()

    click.echo(f"Sheet: {sheet.name}")
    click.echo(f"Prefix: {'on' if sheet.use_prefix else 'off'}")
    click.echo(f"Rules: {len(rules)}")
    click.echo()
    for index, rule in enumerate(rules):
        click.echo(f"  {index:>3}  {_describe(rule)}")
