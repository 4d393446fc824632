"""CLI command: selectorkit build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from selectorkit import builder
from selectorkit.errors import SelectorError
from selectorkit.model import Combinator, CompoundSelector, FragmentKind, SelectorNode

_KIND_NAMES = {
    "element": FragmentKind.TYPE,
    "type": FragmentKind.TYPE,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

_COMBINATOR_NAMES = {
    "descendant": Combinator.DESCENDANT,
    "": Combinator.DESCENDANT,
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
}


def _parse_fragment(token: str) -> tuple[FragmentKind, str]:
    name, sep, value = token.partition("=")
    kind = _KIND_NAMES.get(name.strip().lower())
    if not sep or kind is None:
        raise click.BadParameter(
            f"{token!r} is neither KIND=VALUE nor a combinator "
            f"(kinds: {', '.join(sorted(_KIND_NAMES))})",
            param_hint="TOKENS",
        )
    return kind, value


def assemble(tokens: tuple[str, ...] | list[str]) -> SelectorNode:
    """Build a selector tree from CLI tokens.

    Fragment tokens extend the current compound selector; combinator tokens
    close it and start the next one.
    """
    compounds: list[CompoundSelector] = []
    combinators: list[Combinator] = []
    current: CompoundSelector | None = None

    for token in tokens:
        combinator = _COMBINATOR_NAMES.get(token.strip().lower())
        if combinator is not None:
            if current is None:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector", param_hint="TOKENS"
                )
            compounds.append(current)
            combinators.append(combinator)
            current = None
            continue

        kind, value = _parse_fragment(token)
        if current is None:
            current = builder.start(kind, value)
        else:
            current = current.append(kind, value)

    if current is None:
        raise click.BadParameter(
            "expected a selector after the last combinator", param_hint="TOKENS"
        )
    compounds.append(current)

    tree: SelectorNode = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        tree = builder.combine(tree, combinator, right)
    return tree


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Assemble a selector from KIND=VALUE and combinator tokens.

    \b
    Example:
        selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
        selectorkit build element=ul class=menu '>' element=li
    """
    try:
        selector = assemble(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
