"""Intermediate values handed between the execution stages.

The query itself stays a graphql-core AST; these dataclasses only describe
what the selection walker and the field executor produce for one field.
"""

from dataclasses import dataclass

from graphql import FieldNode


@dataclass(frozen=True)
class ExecInfo:
    """Per-field metadata passed to the resolver."""
    is_leaf: bool  # True if the field has no sub-selection
    result_key: str  # Alias if present, else the field name


@dataclass
class FieldExecution:
    """One included field, as produced by the selection walker."""
    name: str
    result_key: str
    node: FieldNode
    is_leaf: bool

    @classmethod
    def from_node(cls, node: FieldNode) -> "FieldExecution":
        """Build a field execution from its AST node."""
        name = node.name.value
        return cls(
            name=name,
            result_key=node.alias.value if node.alias else name,
            node=node,
            is_leaf=node.selection_set is None,
        )

    @property
    def info(self) -> ExecInfo:
        """Return the resolver info for this field."""
        return ExecInfo(is_leaf=self.is_leaf, result_key=self.result_key)
