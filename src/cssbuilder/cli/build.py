"""CLI command: cssbuilder build -- assemble a selector from part tokens."""

from __future__ import annotations

import logging
import sys

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.objects import to_json
from cssbuilder.selector import Combinator, Part, Selector, SelectorBuilder, SelectorFragment

logger = logging.getLogger(__name__)

# Token prefixes accepted as KIND=VALUE.
_KINDS: dict[str, Part] = {
    "element": Part.ELEMENT,
    "id": Part.ID,
    "class": Part.CLASS,
    "attr": Part.ATTRIBUTE,
    "pseudo-class": Part.PSEUDO_CLASS,
    "pseudo-element": Part.PSEUDO_ELEMENT,
}


def _split_tokens(
    tokens: tuple[str, ...],
) -> tuple[list[SelectorFragment], list[str]]:
    """Group part tokens into fragments separated by combinator tokens."""
    fragments: list[SelectorFragment] = []
    combinators: list[str] = []
    current: SelectorFragment | None = None

    for token in tokens:
        kind, sep, value = token.partition("=")
        if sep:
            if kind not in _KINDS:
                raise click.UsageError(
                    f"Unknown part {kind!r} in {token!r}; expected one of: "
                    + ", ".join(_KINDS)
                )
            if current is None:
                current = SelectorFragment()
                fragments.append(current)
            current.add(_KINDS[kind], value)
            continue

        if current is None:
            raise click.UsageError(f"Combinator {token!r} has no selector before it")
        member = Combinator.lookup(token)
        combinators.append(member.value if member is not None else token)
        current = None

    if current is None:
        raise click.UsageError("Expected a selector part after the last combinator")
    return fragments, combinators


def _assemble(
    builder: SelectorBuilder,
    fragments: list[SelectorFragment],
    combinators: list[str],
) -> Selector:
    """Right-nest fragments: a + b ~ c becomes combine(a, '+', combine(b, '~', c))."""
    result: Selector = fragments[-1]
    for fragment, token in reversed(list(zip(fragments[:-1], combinators))):
        result = builder.combine(fragment, token, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--strict/--permissive",
    default=False,
    help="Reject combinators other than ' ', '>', '+', '~'",
)
@click.option("--json", "as_json", is_flag=True, help="Print the selector tree as JSON")
@click.option("--indent", type=int, default=None, help="JSON indentation")
def build(tokens: tuple[str, ...], strict: bool, as_json: bool, indent: int | None) -> None:
    """Build a selector from KIND=VALUE parts and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Any other token is a combinator (' ', '>', '+', '~', or descendant,
    child, adjacent, sibling) and starts a new compound selector.

    \b
    Example:
        cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    config = BuilderConfig(strict_combinators=strict, json_indent=indent)
    builder = SelectorBuilder(config)

    try:
        fragments, combinators = _split_tokens(tokens)
        selector = _assemble(builder, fragments, combinators)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    logger.debug(
        "build: %d fragment(s), combinators=%r", len(fragments), combinators
    )
    if as_json:
        click.echo(to_json(selector, indent=config.json_indent))
    else:
        click.echo(selector.stringify())
