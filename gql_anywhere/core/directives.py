"""Evaluation of the @skip and @include directives."""

from collections.abc import Iterable, Mapping
from typing import Any

from graphql import DirectiveNode

from .arguments import value_from_node
from .errors import InvalidDirective


def should_include(
    directives: Iterable[DirectiveNode] | None,
    variables: Mapping[str, Any],
) -> bool:
    """Decide whether a selection is included.

    A selection is included when its @include condition holds (default True)
    and its @skip condition does not (default False). A repeated directive
    must hold every time: any @skip(if: true) skips, any @include(if: false)
    excludes. Any other directive is ignored.
    """
    skip = False
    include = True
    for directive in directives or ():
        name = directive.name.value
        if name == "skip":
            skip = _condition(directive, variables) or skip
        elif name == "include":
            include = _condition(directive, variables) and include
    return include and not skip


def _condition(directive: DirectiveNode, variables: Mapping[str, Any]) -> bool:
    """Resolve the `if` argument of a @skip or @include directive."""
    name = directive.name.value
    cond = [a.value for a in directive.arguments or () if a.name.value == "if"]
    if len(cond) != 1:
        raise InvalidDirective(name, "expected exactly one 'if' argument")

    value = value_from_node(cond[0], variables)
    if not isinstance(value, bool):
        raise InvalidDirective(name, f"'if' must be a Boolean, got {value!r}")
    return value
