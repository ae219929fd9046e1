from __future__ import annotations
from typing import Dict, List, Tuple

from ..models import EdgeKind, Gender
from ..schemas import GraphOut

SIBLING_PALETTE = [
    "#FFA07A", "#98FB98", "#87CEFA", "#DDA0DD", "#F4A460",
    "#66CDAA", "#FFB6C1", "#E6E6FA", "#20B2AA"
]

GENDER_COLORS = {
    Gender.MALE: "#87CEFA",
    Gender.FEMALE: "#FFB6C1",
}
DEFAULT_COLOR = "#D3D3D3"


def build_node_colors(graph: GraphOut) -> List[str]:
    """
    One color per node, in graph.nodes order.
    Children share the palette color of the parent group that first drew an
    edge to them; everyone else is colored by gender.
    """
    parent_key_of: Dict[str, Tuple[str, ...]] = {}
    for edge in graph.edges:
        if edge.kind == EdgeKind.PARENT_CHILD and edge.target not in parent_key_of:
            parent_key_of[edge.target] = tuple(edge.parent_ids)

    parent_keys = list(dict.fromkeys(parent_key_of.values()))
    parent_color_map = {k: SIBLING_PALETTE[i % len(SIBLING_PALETTE)] for i, k in enumerate(parent_keys)}

    node_colors: List[str] = []
    for node in graph.nodes:
        key = parent_key_of.get(node.id)
        if key is not None:
            node_colors.append(parent_color_map[key])
        else:
            node_colors.append(GENDER_COLORS.get(node.payload.gender, DEFAULT_COLOR))
    return node_colors
