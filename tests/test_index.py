"""Tests for familygraph/tree_layout/index.py - relationship normalization."""
import logging

import pytest

from familygraph.tree_layout.index import build_index, parent_child_pair
from tests.conftest import rel

IDS = ["A", "B", "C", "D"]


class TestSpouseLookup:
    def test_bidirectional(self):
        index = build_index([rel("spouse", "A", "B")], IDS)
        assert index.spouse("A") == "B"
        assert index.spouse("B") == "A"
        assert index.spouse("C") is None

    def test_repeat_pair_is_noop(self):
        index = build_index([rel("spouse", "A", "B"), rel("spouse", "B", "A")], IDS)
        assert dict(index.spouse_of) == {"A": "B", "B": "A"}

    def test_second_spouse_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="familygraph.tree_layout.index"):
            index = build_index([rel("spouse", "A", "B"), rel("spouse", "C", "A")], IDS)
        assert index.spouse("A") == "B"
        assert index.spouse("C") is None
        assert "already has a spouse" in caplog.text


class TestParentChildLookup:
    def test_children_in_relationship_order(self):
        index = build_index([rel("parent", "A", "C"), rel("parent", "A", "B")], IDS)
        assert index.children("A") == ("C", "B")
        assert index.parents("C") == ("A",)

    def test_multiple_parents(self):
        index = build_index([rel("parent", "A", "C"), rel("parent", "B", "C")], IDS)
        assert index.parents("C") == ("A", "B")
        assert index.has_parents("C")
        assert not index.has_parents("A")

    def test_duplicates_removed(self):
        index = build_index([rel("parent", "A", "C"), rel("parent", "A", "C", rid="dup")], IDS)
        assert index.children("A") == ("C",)
        assert index.parents("C") == ("A",)

    def test_child_kind_is_reversed(self):
        # hosted table stores (child, parent) for kind "child"
        index = build_index([rel("child", "C", "A")], IDS)
        assert index.children("A") == ("C",)
        assert index.parents("C") == ("A",)

    def test_kind_is_case_insensitive(self):
        index = build_index([rel("PARENT", "A", "B"), rel("Spouse", "C", "D")], IDS)
        assert index.children("A") == ("B",)
        assert index.spouse("C") == "D"


class TestDefensiveFiltering:
    def test_dangling_reference_dropped(self):
        index = build_index([rel("parent", "A", "ghost"), rel("spouse", "ghost", "B")], IDS)
        assert index.children("A") == ()
        assert index.spouse("B") is None
        assert "ghost" not in index.parents_of

    def test_self_relationship_dropped(self):
        index = build_index([rel("spouse", "A", "A"), rel("parent", "B", "B")], IDS)
        assert index.spouse("A") is None
        assert index.children("B") == ()

    def test_unknown_kind_ignored(self):
        index = build_index([rel("sibling", "A", "B")], IDS)
        assert not index.spouse_of
        assert not index.children_of

    def test_empty(self):
        index = build_index([], [])
        assert not index.spouse_of and not index.children_of and not index.parents_of


class TestImmutability:
    def test_mappings_are_read_only(self):
        index = build_index([rel("parent", "A", "B")], IDS)
        with pytest.raises(TypeError):
            index.children_of["A"] = ("C",)

    def test_parent_child_pair(self):
        assert parent_child_pair(rel("parent", "A", "B")) == ("A", "B")
        assert parent_child_pair(rel("child", "B", "A")) == ("A", "B")
        assert parent_child_pair(rel("spouse", "A", "B")) is None
