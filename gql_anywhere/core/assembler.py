"""Result assembler.

Turns a (value, selection set) pair into the pruned output value:

- None stays None and nothing beneath it is resolved
- lists (at any nesting depth) map element-wise onto lists of the same shape
- any other value becomes the root for the selection set's fields
"""

from collections.abc import Mapping
from typing import Any

from graphql import FragmentDefinitionNode, SelectionSetNode

from .field_executor import execute_field
from .options import DEFAULT_OPTIONS, DuplicateKeyPolicy, ExecutionOptions
from .resolvers import Resolver
from .walker import collect_fields


def is_list_value(value: Any) -> bool:
    """Check if a value is fanned out element-wise."""
    return isinstance(value, (list, tuple))


class ResultAssembler:
    """Assembles the output of one execution.

    Usage:
        assembler = ResultAssembler(resolver, variables, context, fragments)
        result = assembler.assemble_root(root_value, selection_set)
    """

    def __init__(
        self,
        resolver: Resolver,
        variables: Mapping[str, Any],
        context: Any,
        fragments: Mapping[str, FragmentDefinitionNode],
        options: ExecutionOptions = DEFAULT_OPTIONS,
    ):
        self.resolver = resolver
        self.variables = variables
        self.context = context
        self.fragments = fragments
        self.options = options

    def assemble_root(self, root_value: Any, selection_set: SelectionSetNode) -> dict[str, Any]:
        """Assemble the top-level selection set.

        The root value is always handed to the resolvers as-is, even when it
        is None or a list, so a resolver may ignore it and produce the data
        from the context instead.
        """
        return self._assemble_object(root_value, selection_set)

    def assemble(self, value: Any, selection_set: SelectionSetNode) -> Any:
        """Assemble a value against a sub-selection."""
        if value is None:
            return None
        if is_list_value(value):
            return self._assemble_list(value, selection_set)
        return self._assemble_object(value, selection_set)

    def _assemble_list(self, values: Any, selection_set: SelectionSetNode) -> list[Any]:
        """Map nested lists onto nested lists of the same shape.

        Walks the data with an explicit stack, so arbitrarily deep lists do
        not grow the Python call stack.
        """
        result: list[Any] = []
        stack = [(iter(values), result)]
        while stack:
            items, target = stack[-1]
            for item in items:
                if is_list_value(item):
                    nested: list[Any] = []
                    target.append(nested)
                    stack.append((iter(item), nested))
                    break
                if item is None:
                    target.append(None)
                else:
                    target.append(self._assemble_object(item, selection_set))
            else:
                stack.pop()
        return result

    def _assemble_object(self, root_value: Any, selection_set: SelectionSetNode) -> dict[str, Any]:
        """Resolve every included field of the selection set against a root."""
        result: dict[str, Any] = {}
        for field in collect_fields(selection_set, self.variables, self.fragments):
            value = execute_field(
                self.resolver, field, root_value, self.variables, self.context
            )
            if not field.is_leaf:
                value = self.assemble(value, field.node.selection_set)
            self._store(result, field.result_key, value)
        return result

    def _store(self, result: dict[str, Any], key: str, value: Any):
        if key in result and self.options.duplicate_keys is DuplicateKeyPolicy.MERGE:
            value = merge_values(result[key], value)
        result[key] = value


def merge_values(existing: Any, incoming: Any) -> Any:
    """Deep-merge two results that share a result key.

    Mappings merge key by key, equal-length lists merge element-wise, and
    in every other case the incoming value wins. Neither input is mutated.
    Like list assembly, the merge runs on an explicit stack, so nesting depth
    does not grow the Python call stack.
    """
    holder: list[Any] = [None]
    # (existing, incoming, container to write into, slot in that container)
    stack: list[tuple[Any, Any, Any, Any]] = [(existing, incoming, holder, 0)]
    while stack:
        existing, incoming, target, slot = stack.pop()
        if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
            merged = dict(existing)
            target[slot] = merged
            for key, value in incoming.items():
                if key in merged:
                    stack.append((merged[key], value, merged, key))
                else:
                    merged[key] = value
        elif (
            is_list_value(existing)
            and is_list_value(incoming)
            and len(existing) == len(incoming)
        ):
            merged_list: list[Any] = [None] * len(existing)
            target[slot] = merged_list
            stack.extend(
                (a, b, merged_list, i)
                for i, (a, b) in enumerate(zip(existing, incoming))
            )
        else:
            target[slot] = incoming
    return holder[0]
