"""CLI command: selectorkit kinds -- list fragment kinds in rank order."""

from __future__ import annotations

import click

from selectorkit.model.fragment import FragmentKind


@click.command()
def kinds() -> None:
    """List fragment kinds with their rank and rendered form."""
    for kind in FragmentKind:
        repeat = "once" if kind.singleton else "repeatable"
        click.echo(f"{kind.rank}  {kind.label:<15} {kind.render('x'):<6} {repeat}")
