"""Execution options."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DuplicateKeyPolicy(Enum):
    """How to combine two fields that land on the same result key."""
    OVERWRITE = "overwrite"  # The later field replaces the earlier value
    MERGE = "merge"          # Nested results are merged recursively


class ExecutionOptions(BaseModel):
    """Configuration for a single execution.

    Example:
        options = ExecutionOptions(duplicate_keys=DuplicateKeyPolicy.MERGE)
        execute(resolver, query, data, options=options)
    """

    model_config = ConfigDict(frozen=True)

    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.OVERWRITE


DEFAULT_OPTIONS = ExecutionOptions()
