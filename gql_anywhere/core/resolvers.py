"""Resolver protocol and built-in resolvers.

A resolver produces the value of one field. It receives the field name, the
value the field is being resolved against, the field's resolved arguments,
the caller's context and an ExecInfo.

Example usage:
    from gql_anywhere import execute

    # Read properties straight off plain data
    result = execute(property_resolver, "{ title user { login } }", issue)

    # Custom resolver
    def resolver(field_name, root, args, context, info):
        if info.is_leaf:
            return context.lookup(root, field_name)
        return context.follow(root, field_name, **args)
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .ir import ExecInfo


@runtime_checkable
class Resolver(Protocol):
    """Protocol for field resolvers.

    Any callable with this signature works, including plain functions and
    lambdas. Raising aborts the whole execution.
    """

    def __call__(
        self,
        field_name: str,
        root_value: Any,
        args: dict[str, Any],
        context: Any,
        info: ExecInfo,
    ) -> Any:
        ...


def _read(root: Any, key: str) -> Any:
    if root is None:
        return None
    if isinstance(root, Mapping):
        return root.get(key)
    return getattr(root, key, None)


def property_resolver(
    field_name: str,
    root_value: Any,
    args: dict[str, Any],
    context: Any,
    info: ExecInfo,
) -> Any:
    """Read the field by name from a mapping key or an object attribute.

    Missing keys and attributes resolve to None.
    """
    return _read(root_value, field_name)


def result_key_resolver(
    field_name: str,
    root_value: Any,
    args: dict[str, Any],
    context: Any,
    info: ExecInfo,
) -> Any:
    """Read the field by its result key (alias if present).

    Useful for filtering data that already has the query's shape, such as a
    GraphQL response, where values are stored under their aliases.
    """
    return _read(root_value, info.result_key)
