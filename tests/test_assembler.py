"""Tests for the result assembler and execution options."""

import pytest
from graphql import parse
from pydantic import ValidationError

from gql_anywhere.core.assembler import ResultAssembler, merge_values
from gql_anywhere.core.options import DuplicateKeyPolicy, ExecutionOptions
from gql_anywhere.core.resolvers import property_resolver


@pytest.fixture
def selection_set():
    """Selection set of `{ b }`."""
    return parse("{ b }").definitions[0].selection_set


@pytest.fixture
def assembler():
    return ResultAssembler(property_resolver, {}, None, {})


class TestAssemble:
    """Tests for ResultAssembler.assemble."""

    def test_none(self, assembler, selection_set):
        assert assembler.assemble(None, selection_set) is None

    def test_object(self, assembler, selection_set):
        assert assembler.assemble({"b": 1, "c": 2}, selection_set) == {"b": 1}

    def test_list_shape_is_preserved(self, assembler, selection_set):
        value = [[{"b": 1}], [], [[{"b": 2}, None]], {"b": 3}]
        assert assembler.assemble(value, selection_set) == [
            [{"b": 1}],
            [],
            [[{"b": 2}, None]],
            {"b": 3},
        ]

    def test_root_is_never_fanned_out(self, selection_set):
        seen = []

        def resolver(field_name, root, args, context, info):
            seen.append(root)
            return len(root)

        assembler = ResultAssembler(resolver, {}, None, {})
        assert assembler.assemble_root([1, 2, 3], selection_set) == {"b": 3}
        assert seen == [[1, 2, 3]]

    def test_none_root_is_still_resolved(self, selection_set):
        assembler = ResultAssembler(lambda *_: "x", {}, None, {})
        assert assembler.assemble_root(None, selection_set) == {"b": "x"}


class TestMergeValues:
    """Tests for merge_values."""

    def test_mappings_merge_recursively(self):
        existing = {"a": 1, "n": {"x": 1}}
        incoming = {"b": 2, "n": {"y": 2}}
        assert merge_values(existing, incoming) == {"a": 1, "b": 2, "n": {"x": 1, "y": 2}}

    def test_inputs_are_not_mutated(self):
        existing = {"n": {"x": 1}}
        incoming = {"n": {"y": 2}}
        merge_values(existing, incoming)
        assert existing == {"n": {"x": 1}}
        assert incoming == {"n": {"y": 2}}

    def test_equal_length_lists_merge_element_wise(self):
        assert merge_values([{"a": 1}, None], [{"b": 2}, {"c": 3}]) == [
            {"a": 1, "b": 2},
            {"c": 3},
        ]

    def test_incoming_wins_otherwise(self):
        assert merge_values([1, 2], [3]) == [3]
        assert merge_values({"a": 1}, None) is None
        assert merge_values("x", {"a": 1}) == {"a": 1}
        assert merge_values({"a": 1}, {"a": 2}) == {"a": 2}

    def test_existing_keys_keep_their_position(self):
        merged = merge_values({"a": {"x": 1}, "b": 2}, {"c": 3, "a": {"y": 2}})
        assert list(merged) == ["a", "b", "c"]
        assert merged["a"] == {"x": 1, "y": 2}

    def test_deep_lists(self):
        existing, incoming = [{"a": 1}], [{"b": 2}]
        for _ in range(5000):
            existing, incoming = [existing], [incoming]

        node = merge_values(existing, incoming)
        while isinstance(node, list):
            node = node[0]
        assert node == {"a": 1, "b": 2}


class TestExecutionOptions:
    """Tests for ExecutionOptions."""

    def test_defaults_to_overwrite(self):
        assert ExecutionOptions().duplicate_keys is DuplicateKeyPolicy.OVERWRITE

    def test_accepts_policy_value(self):
        options = ExecutionOptions(duplicate_keys="merge")
        assert options.duplicate_keys is DuplicateKeyPolicy.MERGE

    def test_rejects_unknown_policy(self):
        with pytest.raises(ValidationError):
            ExecutionOptions(duplicate_keys="append")

    def test_is_frozen(self):
        options = ExecutionOptions()
        with pytest.raises(ValidationError):
            options.duplicate_keys = DuplicateKeyPolicy.MERGE
