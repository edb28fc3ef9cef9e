"""Run GraphQL queries against any Python value with a single resolver."""

from .core import (
    AnywhereError,
    DuplicateKeyPolicy,
    ExecInfo,
    ExecutionOptions,
    InvalidDirective,
    InvalidDocument,
    MissingFragment,
    MissingVariable,
    Resolver,
    execute,
    filter_data,
    property_resolver,
    result_key_resolver,
)

__version__ = "0.1.0"

__all__ = [
    "execute",
    "filter_data",
    "ExecInfo",
    "ExecutionOptions",
    "DuplicateKeyPolicy",
    "Resolver",
    "property_resolver",
    "result_key_resolver",
    "AnywhereError",
    "InvalidDocument",
    "InvalidDirective",
    "MissingFragment",
    "MissingVariable",
]
