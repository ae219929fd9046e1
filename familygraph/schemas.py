from pydantic import BaseModel
from typing import List, Optional

from .models import EdgeKind, Person


class Point(BaseModel):
    x: float
    y: float


class NodeOut(BaseModel):
    id: str
    position: Point  # top-left corner of the node box
    width: float
    height: float
    generation: int
    payload: Person


class EdgeOut(BaseModel):
    id: str
    kind: EdgeKind
    path: List[Point]
    source: str
    target: str
    parent_ids: List[str] = []
    anchor: Optional[Point] = None


class GraphOut(BaseModel):
    nodes: List[NodeOut]
    edges: List[EdgeOut]
    generations: int
    width: float
    height: float
