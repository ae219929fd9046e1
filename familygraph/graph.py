"""Full pipeline: people + relationships -> positioned nodes and routed edges."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from .config import LayoutConfig
from .models import Person, Relationship
from .schemas import EdgeOut, GraphOut, NodeOut, Point
from .tree_layout import (
    assign_generations,
    build_index,
    group_generations,
    layout_rows,
    synthesize_edges,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _coerce(model: Type[M], record: Any) -> M:
    if isinstance(record, model):
        return record
    if isinstance(record, Mapping):
        return model.model_validate(dict(record))
    return model.model_validate(record, from_attributes=True)


def coerce_people(people: Iterable[Any]) -> List[Person]:
    """Validate person records, keeping the first record for a repeated id."""
    out: List[Person] = []
    seen: set[str] = set()
    for raw in people:
        person = _coerce(Person, raw)
        if person.id in seen:
            logger.warning("Ignoring duplicate person id %s", person.id)
            continue
        seen.add(person.id)
        out.append(person)
    return out


def coerce_relationships(relationships: Iterable[Any]) -> List[Relationship]:
    return [_coerce(Relationship, raw) for raw in relationships]


def build_graph(
    people: Iterable[Any],
    relationships: Iterable[Any],
    config: Optional[LayoutConfig] = None,
) -> GraphOut:
    """
    Run the layout pipeline from scratch.

    Records may be Person/Relationship models, plain mappings or any object
    carrying the same attributes. Output nodes follow the input person order;
    edges follow generation, group and child order.
    """
    config = config or LayoutConfig()
    persons = coerce_people(people)
    rels = coerce_relationships(relationships)
    person_ids = [p.id for p in persons]

    index = build_index(rels, person_ids)
    assignment = assign_generations(person_ids, index)
    groups = group_generations(assignment, index.spouse_of)
    layout = layout_rows(groups, person_ids, config)
    routed = synthesize_edges(layout, index)

    nodes = [
        NodeOut(
            id=p.id,
            position=Point(x=layout.positions[p.id][0], y=layout.positions[p.id][1]),
            width=config.node_width,
            height=config.node_height,
            generation=assignment.generation_of[p.id],
            payload=p,
        )
        for p in persons
    ]
    edges = [
        EdgeOut(
            id=e.id,
            kind=e.kind,
            path=[Point(x=x, y=y) for x, y in e.path],
            source=e.source,
            target=e.target,
            parent_ids=list(e.parent_ids),
            anchor=Point(x=e.anchor[0], y=e.anchor[1]) if e.anchor is not None else None,
        )
        for e in routed
    ]

    logger.info(
        "Laid out %d people in %d generation(s) with %d edge(s)",
        len(nodes), len(assignment.by_generation), len(edges),
    )
    return GraphOut(
        nodes=nodes,
        edges=edges,
        generations=len(assignment.by_generation),
        width=layout.width,
        height=layout.height,
    )


def build_graph_json(
    people: Iterable[Any],
    relationships: Iterable[Any],
    config: Optional[LayoutConfig] = None,
) -> dict:
    """JSON-ready dict for a canvas rendering layer."""
    return build_graph(people, relationships, config).model_dump(mode="json")
