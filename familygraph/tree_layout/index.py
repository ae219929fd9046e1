from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..models import RelKind, Relationship

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelationshipIndex:
    """
    Read-only lookups built from the relationship list:
    - spouse_of[person_id] = spouse_id (both directions)
    - children_of[parent_id] = (child_id, ...) in relationship order
    - parents_of[child_id] = (parent_id, ...)
    """
    spouse_of: Mapping[str, str]
    children_of: Mapping[str, Tuple[str, ...]]
    parents_of: Mapping[str, Tuple[str, ...]]

    def spouse(self, person_id: str) -> Optional[str]:
        return self.spouse_of.get(person_id)

    def children(self, person_id: str) -> Tuple[str, ...]:
        return self.children_of.get(person_id, ())

    def parents(self, person_id: str) -> Tuple[str, ...]:
        return self.parents_of.get(person_id, ())

    def has_parents(self, person_id: str) -> bool:
        return bool(self.parents_of.get(person_id))


def parent_child_pair(rel: Relationship) -> Optional[Tuple[str, str]]:
    """Return (parent_id, child_id) for parent/child records, else None."""
    kind = rel.rel_kind
    if kind == RelKind.PARENT:
        return rel.first_id, rel.second_id
    if kind == RelKind.CHILD:
        return rel.second_id, rel.first_id
    return None


def build_index(relationships: Iterable[Relationship], person_ids: Iterable[str]) -> RelationshipIndex:
    known = set(person_ids)

    spouse_of: Dict[str, str] = {}
    children_of: Dict[str, List[str]] = {}
    parents_of: Dict[str, List[str]] = {}
    seen_pairs: set[Tuple[str, str]] = set()

    for rel in relationships:
        a, b = rel.first_id, rel.second_id
        if a not in known or b not in known:
            logger.debug("Dropping relationship %s: unknown person id", rel.id)
            continue
        if a == b:
            logger.debug("Dropping relationship %s: person related to self", rel.id)
            continue

        if rel.rel_kind == RelKind.SPOUSE:
            if spouse_of.get(a) == b:
                continue  # same couple recorded twice
            if a in spouse_of or b in spouse_of:
                logger.warning(
                    "Ignoring spouse relationship %s: %s or %s already has a spouse",
                    rel.id, a, b,
                )
                continue
            spouse_of[a] = b
            spouse_of[b] = a
            continue

        pair = parent_child_pair(rel)
        if pair is None:
            logger.debug("Ignoring relationship %s of kind %r", rel.id, rel.kind)
            continue
        if pair in seen_pairs:
            continue
        seen_pairs.add(pair)
        parent_id, child_id = pair
        children_of.setdefault(parent_id, []).append(child_id)
        parents_of.setdefault(child_id, []).append(parent_id)

    return RelationshipIndex(
        spouse_of=MappingProxyType(spouse_of),
        children_of=MappingProxyType({k: tuple(v) for k, v in children_of.items()}),
        parents_of=MappingProxyType({k: tuple(v) for k, v in parents_of.items()}),
    )
