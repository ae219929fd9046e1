"""Tests for familygraph/tree_layout/couples.py."""
from familygraph.tree_layout.couples import Group, GroupKind, group_generation


class TestGroupGeneration:
    def test_pairs_spouses_in_scan_order(self):
        groups = group_generation(["A", "X", "B"], {"A": "B", "B": "A"})
        assert groups == [
            Group(GroupKind.COUPLE, ("A", "B")),
            Group(GroupKind.SINGLE, ("X",)),
        ]

    def test_spouse_in_other_generation_stays_single(self):
        groups = group_generation(["A", "C"], {"A": "Z", "Z": "A"})
        assert [g.kind for g in groups] == [GroupKind.SINGLE, GroupKind.SINGLE]
        assert [g.members for g in groups] == [("A",), ("C",)]

    def test_no_spouses(self):
        groups = group_generation(["A", "B"], {})
        assert [g.members for g in groups] == [("A",), ("B",)]
        assert not any(g.is_couple for g in groups)

    def test_ids_with_separator_characters(self):
        groups = group_generation(["a+b", "a", "c", "b+c"], {"a+b": "c", "c": "a+b", "a": "b+c", "b+c": "a"})
        assert [g.members for g in groups] == [("a+b", "c"), ("a", "b+c")]

    def test_every_member_once(self):
        ids = ["A", "B", "C", "D", "E"]
        spouse_of = {"A": "D", "D": "A", "B": "C", "C": "B"}
        groups = group_generation(ids, spouse_of)
        members = [m for g in groups for m in g.members]
        assert sorted(members) == ids
        assert len(members) == len(set(members))
        assert [g.members for g in groups] == [("A", "D"), ("B", "C"), ("E",)]
