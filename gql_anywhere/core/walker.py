"""Selection walker.

Expands a selection set (fields, inline fragments and fragment spreads) into
the flat, ordered list of fields to execute against one root value. The walk
depends only on the query, the variables and the fragment registry; it never
looks at the data.
"""

from collections.abc import Mapping
from typing import Any

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionSetNode,
)

from .directives import should_include
from .errors import InvalidDocument, MissingFragment
from .ir import FieldExecution


def collect_fields(
    selection_set: SelectionSetNode,
    variables: Mapping[str, Any],
    fragments: Mapping[str, FragmentDefinitionNode],
) -> list[FieldExecution]:
    """Flatten a selection set into the fields to execute, in document order.

    Fragment contents are spliced in at the position of the fragment, so
    fields from fragments merge with their siblings.

    Raises:
        MissingFragment: If a spread names a fragment that is not defined
        InvalidDocument: If fragment spreads form a cycle
    """
    fields: list[FieldExecution] = []
    _collect(selection_set, variables, fragments, fields, ())
    return fields


def _collect(
    selection_set: SelectionSetNode,
    variables: Mapping[str, Any],
    fragments: Mapping[str, FragmentDefinitionNode],
    fields: list[FieldExecution],
    spread_path: tuple[str, ...],
):
    for selection in selection_set.selections:
        if not should_include(selection.directives, variables):
            continue

        if isinstance(selection, FieldNode):
            fields.append(FieldExecution.from_node(selection))
        elif isinstance(selection, InlineFragmentNode):
            # Type conditions are not checked: there is no schema
            _collect(selection.selection_set, variables, fragments, fields, spread_path)
        elif isinstance(selection, FragmentSpreadNode):
            name = selection.name.value
            fragment = fragments.get(name)
            if fragment is None:
                raise MissingFragment(name)
            if name in spread_path:
                cycle = " -> ".join(spread_path + (name,))
                raise InvalidDocument(f"Fragment spreads form a cycle: {cycle}")
            _collect(
                fragment.selection_set,
                variables,
                fragments,
                fields,
                spread_path + (name,),
            )
