"""Core modules for executing GraphQL documents against arbitrary data."""

from .arguments import resolve_arguments, value_from_node
from .assembler import ResultAssembler, merge_values
from .auth import Auth, BearerAuth, HeaderAuth, NoAuth
from .directives import should_include
from .errors import (
    AnywhereError,
    InvalidDirective,
    InvalidDocument,
    MissingFragment,
    MissingVariable,
)
from .executor import execute, filter_data, get_root_selection_set
from .field_executor import execute_field
from .fragments import build_fragment_map
from .ir import ExecInfo, FieldExecution
from .loader import load_document, load_json, load_variables
from .options import DuplicateKeyPolicy, ExecutionOptions
from .resolvers import Resolver, property_resolver, result_key_resolver
from .walker import collect_fields

__all__ = [
    # Executor
    "execute",
    "filter_data",
    "get_root_selection_set",
    # Stages
    "build_fragment_map",
    "should_include",
    "resolve_arguments",
    "value_from_node",
    "collect_fields",
    "execute_field",
    "ResultAssembler",
    "merge_values",
    # IR types
    "ExecInfo",
    "FieldExecution",
    # Options
    "DuplicateKeyPolicy",
    "ExecutionOptions",
    # Resolvers
    "Resolver",
    "property_resolver",
    "result_key_resolver",
    # Errors
    "AnywhereError",
    "InvalidDocument",
    "InvalidDirective",
    "MissingFragment",
    "MissingVariable",
    # Loading
    "load_document",
    "load_json",
    "load_variables",
    # Auth
    "Auth",
    "BearerAuth",
    "HeaderAuth",
    "NoAuth",
]
