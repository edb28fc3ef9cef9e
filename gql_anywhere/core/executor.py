"""Document executor.

Runs a GraphQL document against any Python value, using a single resolver
to produce each field, and returns the result pruned to the query's shape.

Examples:
    # Pick fields out of a REST response
    execute(property_resolver, "{ title user { login } }", issue)

    # Resolve everything from the context
    execute(resolver, query, None, store, {"first": 10})
"""

import logging
from collections.abc import Mapping
from typing import Any

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    SelectionSetNode,
    parse,
)

from .assembler import ResultAssembler
from .errors import InvalidDocument
from .fragments import build_fragment_map
from .options import DEFAULT_OPTIONS, ExecutionOptions
from .resolvers import Resolver, result_key_resolver

logger = logging.getLogger(__name__)


def execute(
    resolver: Resolver,
    document: DocumentNode | str,
    root_value: Any = None,
    context: Any = None,
    variables: Mapping[str, Any] | None = None,
    *,
    options: ExecutionOptions | None = None,
    operation_name: str | None = None,
) -> dict[str, Any]:
    """Execute a document against a root value.

    Args:
        resolver: Called once per included field to produce its value
        document: Parsed document, or query text to parse with graphql-core
        root_value: Value the top-level fields are resolved against
        context: Passed unchanged to every resolver call
        variables: Values for the variables the document references
        options: Execution options (defaults to ExecutionOptions())
        operation_name: Operation to run when the document has several

    Returns:
        The result mapping, shaped like the root selection set

    Raises:
        InvalidDocument: If no root selection set can be found
        MissingFragment: If a fragment spread names an undefined fragment
        MissingVariable: If an argument references an unsupplied variable
        Exception: Whatever the resolver raises, unchanged
    """
    if isinstance(document, str):
        document = parse(document)
    if variables is None:
        variables = {}

    fragments = build_fragment_map(document)
    selection_set = get_root_selection_set(document, operation_name)
    logger.debug(
        "Executing document: %d root selections, %d fragments",
        len(selection_set.selections),
        len(fragments),
    )

    assembler = ResultAssembler(
        resolver,
        variables,
        context,
        fragments,
        options or DEFAULT_OPTIONS,
    )
    return assembler.assemble_root(root_value, selection_set)


def get_root_selection_set(
    document: DocumentNode,
    operation_name: str | None = None,
) -> SelectionSetNode:
    """Find the selection set execution starts from.

    That is the first operation's (or the named operation's) selection set.
    A document without operations runs its first fragment definition
    directly.
    """
    operations = [
        d for d in document.definitions if isinstance(d, OperationDefinitionNode)
    ]

    if operation_name is not None:
        for operation in operations:
            if operation.name and operation.name.value == operation_name:
                return operation.selection_set
        raise InvalidDocument(f"Unknown operation named {operation_name!r}")

    if operations:
        return operations[0].selection_set

    for definition in document.definitions:
        if isinstance(definition, FragmentDefinitionNode):
            return definition.selection_set

    raise InvalidDocument("Document contains no operation or fragment definition")


def filter_data(
    document: DocumentNode | str,
    data: Any,
    variables: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Keep only the parts of `data` that the document selects.

    Values are read by result key, so aliased fields are looked up under
    their alias.
    """
    return execute(result_key_resolver, document, data, None, variables)
