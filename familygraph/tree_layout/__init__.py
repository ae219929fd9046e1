from .couples import Group, GroupKind, group_generation, group_generations
from .edges import RoutedEdge, synthesize_edges
from .generations import GenerationAssignment, assign_generations
from .index import RelationshipIndex, build_index
from .positions import LayoutResult, layout_rows

__all__ = [
    "GenerationAssignment",
    "Group",
    "GroupKind",
    "LayoutResult",
    "RelationshipIndex",
    "RoutedEdge",
    "assign_generations",
    "build_index",
    "group_generation",
    "group_generations",
    "layout_rows",
    "synthesize_edges",
]
