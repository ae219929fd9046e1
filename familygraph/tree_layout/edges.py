from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from urllib.parse import quote

from ..models import EdgeKind
from .couples import Group
from .index import RelationshipIndex
from .positions import LayoutResult, XY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutedEdge:
    id: str
    kind: EdgeKind
    path: Tuple[XY, ...]
    source: str
    target: str
    parent_ids: Tuple[str, ...] = ()
    anchor: Optional[XY] = None


def _id_part(person_id: str) -> str:
    # percent-encode so ':' and '+' inside a person id cannot fake a separator
    return quote(person_id, safe="")


def spouse_edge_id(a: str, b: str) -> str:
    lo, hi = sorted((a, b))
    return f"{EdgeKind.SPOUSE.value}:{_id_part(lo)}:{_id_part(hi)}"


def parent_child_edge_id(parent_ids: Iterable[str], child_id: str) -> str:
    parents = "+".join(_id_part(pid) for pid in sorted(parent_ids))
    return f"{EdgeKind.PARENT_CHILD.value}:{parents}:{_id_part(child_id)}"


def _simplify(points: Iterable[XY]) -> Tuple[XY, ...]:
    out: List[XY] = []
    for p in points:
        if out and out[-1] == p:
            continue
        if len(out) >= 2:
            (x0, y0), (x1, y1) = out[-2], out[-1]
            if (x0 == x1 == p[0]) or (y0 == y1 == p[1]):
                out[-1] = p  # straight run, drop the middle point
                continue
        out.append(p)
    return tuple(out)


def elbow_path(start: XY, end: XY) -> Tuple[XY, ...]:
    """Vertical drop, horizontal run at the midway bus, vertical drop into the target."""
    sx, sy = start
    ex, ey = end
    bus_y = (sy + ey) / 2.0
    return _simplify([start, (sx, bus_y), (ex, bus_y), end])


def group_children(group: Group, index: RelationshipIndex) -> List[str]:
    """Union of the members' children, member order first, de-duplicated."""
    kids: List[str] = []
    for member in group.members:
        for cid in index.children(member):
            if cid not in kids:
                kids.append(cid)
    return kids


def synthesize_edges(layout: LayoutResult, index: RelationshipIndex) -> List[RoutedEdge]:
    edges: List[RoutedEdge] = []

    for generation in sorted(layout.groups):
        for group in layout.groups[generation]:
            if group.is_couple:
                left, right = group.members
                _, left_cy = layout.center(left)
                _, right_cy = layout.center(right)
                edges.append(RoutedEdge(
                    id=spouse_edge_id(left, right),
                    kind=EdgeKind.SPOUSE,
                    path=(
                        (layout.positions[left][0] + layout.node_width, left_cy),
                        (layout.positions[right][0], right_cy),
                    ),
                    source=left,
                    target=right,
                    parent_ids=group.members,
                ))

            anchor = layout.anchors.get(group.members) if group.is_couple else None
            start = anchor if anchor is not None else layout.bottom_center(group.members[0])

            for cid in group_children(group, index):
                if cid not in layout.positions:
                    logger.debug("Skipping edge to unplaced child %s", cid)
                    continue
                edges.append(RoutedEdge(
                    id=parent_child_edge_id(group.members, cid),
                    kind=EdgeKind.PARENT_CHILD,
                    path=elbow_path(start, layout.top_center(cid)),
                    source=group.members[0],
                    target=cid,
                    parent_ids=group.members,
                    anchor=anchor,
                ))

    return edges
