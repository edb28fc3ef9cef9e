"""Tests for the fragment registry and the selection walker."""

import pytest
from graphql import parse

from gql_anywhere.core.errors import InvalidDocument, MissingFragment
from gql_anywhere.core.fragments import build_fragment_map
from gql_anywhere.core.ir import FieldExecution
from gql_anywhere.core.walker import collect_fields


def walk(source: str, variables=None):
    """Collect the root fields of the document's first definition."""
    document = parse(source)
    fragments = build_fragment_map(document)
    return collect_fields(document.definitions[0].selection_set, variables or {}, fragments)


def keys(fields):
    return [f.result_key for f in fields]


class TestBuildFragmentMap:
    """Tests for build_fragment_map."""

    def test_collects_fragments_by_name(self):
        document = parse("{ a } fragment F on T { x } fragment G on U { y }")
        fragments = build_fragment_map(document)

        assert set(fragments) == {"F", "G"}
        assert fragments["F"].type_condition.name.value == "T"

    def test_document_without_fragments(self):
        assert build_fragment_map(parse("{ a }")) == {}


class TestCollectFields:
    """Tests for collect_fields."""

    def test_plain_fields_in_order(self):
        fields = walk("{ c a b }")
        assert keys(fields) == ["c", "a", "b"]

    def test_alias_is_result_key(self):
        (field,) = walk("{ alias: name }")
        assert field.name == "name"
        assert field.result_key == "alias"

    def test_is_leaf(self):
        leaf, branch = walk("{ a b { c } }")
        assert leaf.is_leaf is True
        assert branch.is_leaf is False
        assert branch.info.is_leaf is False
        assert branch.info.result_key == "b"

    def test_is_leaf_is_required(self):
        node = parse("{ a }").definitions[0].selection_set.selections[0]
        with pytest.raises(TypeError):
            FieldExecution(name="a", result_key="a", node=node)

    def test_fragments_are_spliced_in_place(self):
        fields = walk("""
            {
              a
              ... on Type { b c }
              d
              ...F
              g
            }
            fragment F on Other { e f }
        """)
        assert keys(fields) == ["a", "b", "c", "d", "e", "f", "g"]

    def test_nested_fragments(self):
        fields = walk("""
            { ...Outer }
            fragment Outer on T { a ... { b ...Inner } }
            fragment Inner on T { c }
        """)
        assert keys(fields) == ["a", "b", "c"]

    def test_duplicates_are_kept(self):
        fields = walk("{ a ... on T { a } }")
        assert keys(fields) == ["a", "a"]

    def test_skipped_nodes_contribute_nothing(self):
        fields = walk("""
            {
              a @skip(if: true)
              ... on T @include(if: false) { b }
              ...F @skip(if: $hide)
              c
            }
            fragment F on T { d }
        """, {"hide": True})
        assert keys(fields) == ["c"]

    def test_skipped_spread_of_missing_fragment_is_not_resolved(self):
        fields = walk("{ ...Missing @skip(if: true) a }")
        assert keys(fields) == ["a"]

    def test_missing_fragment(self):
        with pytest.raises(MissingFragment) as exc_info:
            walk("{ a ...Missing }")
        assert exc_info.value.name == "Missing"

    def test_fragment_cycle(self):
        with pytest.raises(InvalidDocument, match="cycle"):
            walk("""
                { ...A }
                fragment A on T { x ...B }
                fragment B on T { ...A }
            """)

    def test_same_fragment_twice_is_not_a_cycle(self):
        fields = walk("{ ...F ...F } fragment F on T { x }")
        assert keys(fields) == ["x", "x"]
