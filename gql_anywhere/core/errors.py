"""Exceptions raised while executing a document.

Resolver exceptions are never wrapped: they reach the caller exactly as the
resolver raised them.
"""


class AnywhereError(Exception):
    """Base exception for all document execution errors."""


class InvalidDocument(AnywhereError):
    """Raised when the document has no usable root selection set."""


class InvalidDirective(InvalidDocument):
    """Raised when a @skip or @include directive is malformed."""

    def __init__(self, directive: str, message: str):
        self.directive = directive
        super().__init__(f"Invalid @{directive} directive: {message}")


class MissingFragment(AnywhereError):
    """Raised when a fragment spread names an undefined fragment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No fragment named {name!r}")


class MissingVariable(AnywhereError):
    """Raised when an argument references a variable that was not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid variable referenced in arguments: {name!r}")
