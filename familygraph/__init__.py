from .config import LayoutConfig
from .graph import build_graph, build_graph_json
from .models import EdgeKind, Gender, Person, RelKind, Relationship

__all__ = [
    "EdgeKind",
    "Gender",
    "LayoutConfig",
    "Person",
    "RelKind",
    "Relationship",
    "build_graph",
    "build_graph_json",
]
