"""Tests for familygraph/tree_layout/positions.py - row layout and couple anchors."""
import pytest

from familygraph.config import LayoutConfig
from familygraph.tree_layout.couples import Group, GroupKind
from familygraph.tree_layout.positions import layout_rows, row_width

COUPLE = GroupKind.COUPLE
SINGLE = GroupKind.SINGLE


@pytest.fixture
def config():
    return LayoutConfig()


class TestRowWidth:
    def test_mixed_row(self, config):
        groups = [Group(COUPLE, ("A", "B")), Group(SINGLE, ("C",))]
        # couple 200+50+200, gap 100, single 200
        assert row_width(groups, config) == 750

    def test_empty_row(self, config):
        assert row_width([], config) == 0.0


class TestLayoutRows:
    def test_centred_couple_and_anchor(self, config):
        layout = layout_rows({0: [Group(COUPLE, ("A", "B"))]}, ["A", "B"], config)
        assert layout.positions["A"] == (375.0, 100.0)
        assert layout.positions["B"] == (625.0, 100.0)
        # midway between centres 475 and 725, 30 below the 120-high row
        assert layout.anchors[("A", "B")] == (600.0, 250.0)

    def test_rows_stack_by_generation(self, config):
        groups = {
            0: [Group(SINGLE, ("A",))],
            1: [Group(SINGLE, ("B",)), Group(SINGLE, ("C",))],
        }
        layout = layout_rows(groups, ["A", "B", "C"], config)
        assert layout.positions["A"] == (500.0, 100.0)
        assert layout.positions["B"] == (350.0, 350.0)
        assert layout.positions["C"] == (650.0, 350.0)
        assert dict(layout.row_y) == {0: 100.0, 1: 350.0}

    def test_wide_row_clamped_to_margin(self, config):
        ids = [f"p{i}" for i in range(8)]
        layout = layout_rows({0: [Group(SINGLE, (pid,)) for pid in ids]}, ids, config)
        assert layout.positions["p0"][0] == config.margin
        assert layout.positions["p7"][0] == config.margin + 7 * 300

    def test_no_overlap_within_row(self, config):
        groups = {0: [
            Group(COUPLE, ("A", "B")),
            Group(SINGLE, ("C",)),
            Group(COUPLE, ("D", "E")),
            Group(SINGLE, ("F",)),
        ]}
        layout = layout_rows(groups, list("ABCDEF"), config)
        xs = sorted(x for x, _ in layout.positions.values())
        for left, right in zip(xs, xs[1:]):
            assert left + config.node_width <= right

    def test_unplaced_person_gets_fallback_grid(self, config):
        layout = layout_rows({0: [Group(SINGLE, ("A",))]}, ["A", "X", "Y", "Z", "W"], config)
        # two rows below the last generation, three per line
        assert layout.positions["X"] == (100.0, 600.0)
        assert layout.positions["Y"] == (400.0, 600.0)
        assert layout.positions["Z"] == (700.0, 600.0)
        assert layout.positions["W"] == (100.0, 850.0)

    def test_custom_config(self):
        cfg = LayoutConfig(node_width=100, couple_gap=10, group_gap=20, viewport_width=500, top_offset=0)
        layout = layout_rows({2: [Group(COUPLE, ("A", "B"))]}, ["A", "B"], cfg)
        # width 210 -> start 145, y = 2 * 250
        assert layout.positions["A"] == (145.0, 500.0)
        assert layout.positions["B"] == (255.0, 500.0)

    def test_node_geometry_helpers(self, config):
        layout = layout_rows({0: [Group(SINGLE, ("A",))]}, ["A"], config)
        assert layout.center("A") == (600.0, 160.0)
        assert layout.top_center("A") == (600.0, 100.0)
        assert layout.bottom_center("A") == (600.0, 220.0)
        assert layout.width == 700.0
        assert layout.height == 220.0

    def test_empty(self, config):
        layout = layout_rows({}, [], config)
        assert dict(layout.positions) == {}
        assert layout.width == 0.0
