from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from .index import RelationshipIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationAssignment:
    generation_of: Mapping[str, int]
    by_generation: Mapping[int, Tuple[str, ...]]  # ascending keys, first-assignment order
    roots: Tuple[str, ...]
    orphans: Tuple[str, ...]

    @property
    def max_generation(self) -> int:
        return max(self.by_generation, default=-1)


def find_roots(person_ids: Sequence[str], index: RelationshipIndex) -> List[str]:
    """People nobody names as a child, in input order."""
    return [pid for pid in person_ids if not index.has_parents(pid)]


def assign_generations(person_ids: Sequence[str], index: RelationshipIndex) -> GenerationAssignment:
    """
    Depth-first generation numbering from every root.

    - roots get generation 0; a child first reached from a parent at g gets g+1
    - the first assignment wins, so a child with two parents keeps the
      generation of whichever parent reached it first and cycles terminate
    - with no roots at all (every person is somebody's child) the first
      person is used as the root
    - anyone never reached is an orphan, placed one generation below the
      deepest assigned row, in input order
    """
    person_ids = list(dict.fromkeys(person_ids))  # stable de-dupe

    generation_of: Dict[str, int] = {}
    order: List[str] = []

    def _assign(pid: str, generation: int) -> None:
        generation_of[pid] = generation
        order.append(pid)

    roots = find_roots(person_ids, index)
    if not roots and person_ids:
        logger.info("No root person found; using %s as root", person_ids[0])
        roots = [person_ids[0]]

    for root in roots:
        if root in generation_of:
            continue
        _assign(root, 0)
        stack = [root]
        while stack:
            pid = stack.pop()
            generation = generation_of[pid]
            fresh = [cid for cid in index.children(pid) if cid not in generation_of]
            for cid in fresh:
                _assign(cid, generation + 1)
            # reversed so the first child is expanded first
            stack.extend(reversed(fresh))

    orphans = [pid for pid in person_ids if pid not in generation_of]
    if orphans:
        orphan_generation = max(generation_of.values()) + 1 if generation_of else 0
        logger.info("Placing %d orphan(s) in generation %d", len(orphans), orphan_generation)
        for pid in orphans:
            _assign(pid, orphan_generation)

    grouped: Dict[int, List[str]] = {}
    for pid in order:
        grouped.setdefault(generation_of[pid], []).append(pid)

    return GenerationAssignment(
        generation_of=MappingProxyType(generation_of),
        by_generation=MappingProxyType({g: tuple(grouped[g]) for g in sorted(grouped)}),
        roots=tuple(roots),
        orphans=tuple(orphans),
    )
