"""Argument resolution.

Converts graphql-core argument AST nodes into plain Python values, looking up
variable references in the supplied variables.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
    VariableNode,
)

from .errors import MissingVariable


def resolve_arguments(
    argument_nodes: Iterable[ArgumentNode] | None,
    variables: Mapping[str, Any],
) -> dict[str, Any]:
    """Resolve a field's arguments into a name -> value mapping.

    Args:
        argument_nodes: The field's argument nodes (may be None or empty)
        variables: Variable values supplied for this execution

    Returns:
        A dict with one entry per argument, in document order

    Raises:
        MissingVariable: If an argument references an unsupplied variable
    """
    if not argument_nodes:
        return {}
    return {
        arg.name.value: value_from_node(arg.value, variables)
        for arg in argument_nodes
    }


def lookup_variable(name: str, variables: Mapping[str, Any]) -> Any:
    """Return the value of a variable, failing if it was not supplied."""
    if name not in variables:
        raise MissingVariable(name)
    return variables[name]


def value_from_node(node: ValueNode, variables: Mapping[str, Any]) -> Any:
    """Convert a single value node into a Python value."""
    if isinstance(node, VariableNode):
        return lookup_variable(node.name.value, variables)
    if isinstance(node, IntValueNode):
        return int(node.value)
    if isinstance(node, FloatValueNode):
        return float(node.value)
    if isinstance(node, (StringValueNode, BooleanValueNode, EnumValueNode)):
        # Enums resolve to their bare name
        return node.value
    if isinstance(node, NullValueNode):
        return None
    if isinstance(node, ListValueNode):
        return [value_from_node(item, variables) for item in node.values]
    if isinstance(node, ObjectValueNode):
        return {
            field.name.value: value_from_node(field.value, variables)
            for field in node.fields
        }
    raise TypeError(f"Unsupported value node: {type(node).__name__}")
