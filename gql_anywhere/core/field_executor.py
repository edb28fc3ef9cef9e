"""Field executor: invokes the resolver for a single field."""

import logging
from collections.abc import Mapping
from typing import Any

from .arguments import resolve_arguments
from .ir import FieldExecution
from .resolvers import Resolver

logger = logging.getLogger(__name__)


def execute_field(
    resolver: Resolver,
    field: FieldExecution,
    root_value: Any,
    variables: Mapping[str, Any],
    context: Any,
) -> Any:
    """Resolve one field against the current root value.

    The resolver receives the field's real name; the alias only decides
    where the value lands in the output, via ``info.result_key``.
    Exceptions raised by the resolver propagate unchanged.
    """
    args = resolve_arguments(field.node.arguments, variables)
    logger.debug("Resolving %s as %r (leaf=%s)", field.name, field.result_key, field.is_leaf)
    return resolver(field.name, root_value, args, context, field.info)
