from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from ..config import LayoutConfig
from .couples import Group

logger = logging.getLogger(__name__)

XY = Tuple[float, float]


@dataclass(frozen=True)
class LayoutResult:
    positions: Mapping[str, XY]  # top-left corner per person
    anchors: Mapping[Tuple[str, ...], XY]  # couple members -> child attachment point
    groups: Mapping[int, Tuple[Group, ...]]
    row_y: Mapping[int, float]
    node_width: float
    node_height: float

    def center(self, person_id: str) -> XY:
        x, y = self.positions[person_id]
        return x + self.node_width / 2.0, y + self.node_height / 2.0

    def top_center(self, person_id: str) -> XY:
        x, y = self.positions[person_id]
        return x + self.node_width / 2.0, y

    def bottom_center(self, person_id: str) -> XY:
        x, y = self.positions[person_id]
        return x + self.node_width / 2.0, y + self.node_height

    @property
    def width(self) -> float:
        if not self.positions:
            return 0.0
        return max(x for x, _ in self.positions.values()) + self.node_width

    @property
    def height(self) -> float:
        if not self.positions:
            return 0.0
        return max(y for _, y in self.positions.values()) + self.node_height


def group_width(group: Group, config: LayoutConfig) -> float:
    if group.is_couple:
        return 2 * config.node_width + config.couple_gap
    return config.node_width


def row_width(groups: Sequence[Group], config: LayoutConfig) -> float:
    if not groups:
        return 0.0
    return sum(group_width(g, config) for g in groups) + config.group_gap * (len(groups) - 1)


def layout_rows(
    groups_by_generation: Mapping[int, Sequence[Group]],
    person_ids: Sequence[str],
    config: LayoutConfig,
) -> LayoutResult:
    """
    Deterministic row layout:
    - one row per generation, top to bottom
    - each row centred in the viewport, never left of the margin
    - a couple's anchor sits midway between the two node centres,
      anchor_drop below the bottom edge of the row
    """
    pos: Dict[str, XY] = {}
    anchors: Dict[Tuple[str, ...], XY] = {}
    row_y: Dict[int, float] = {}

    for generation in sorted(groups_by_generation):
        groups = groups_by_generation[generation]
        y = config.top_offset + generation * config.generation_spacing
        row_y[generation] = y

        x_cursor = max((config.viewport_width - row_width(groups, config)) / 2.0, config.margin)
        for group in groups:
            if group.is_couple:
                left, right = group.members
                pos[left] = (x_cursor, y)
                pos[right] = (x_cursor + config.node_width + config.couple_gap, y)
                left_cx = x_cursor + config.node_width / 2.0
                right_cx = pos[right][0] + config.node_width / 2.0
                anchors[group.members] = ((left_cx + right_cx) / 2.0, y + config.node_height + config.anchor_drop)
            else:
                pos[group.members[0]] = (x_cursor, y)
            x_cursor += group_width(group, config) + config.group_gap

    missing = [pid for pid in dict.fromkeys(person_ids) if pid not in pos]
    if missing:
        logger.warning("%d person(s) had no row position; using fallback grid", len(missing))
        last = max(row_y, default=-1)
        base_y = config.top_offset + (last + 2) * config.generation_spacing
        for i, pid in enumerate(missing):
            col, line = i % config.fallback_columns, i // config.fallback_columns
            pos[pid] = (
                config.margin + col * (config.node_width + config.group_gap),
                base_y + line * config.generation_spacing,
            )

    return LayoutResult(
        positions=MappingProxyType(pos),
        anchors=MappingProxyType(anchors),
        groups=MappingProxyType({g: tuple(gs) for g, gs in groups_by_generation.items()}),
        row_y=MappingProxyType(row_y),
        node_width=config.node_width,
        node_height=config.node_height,
    )
