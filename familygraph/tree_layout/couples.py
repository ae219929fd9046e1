from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

from .generations import GenerationAssignment


class GroupKind(enum.Enum):
    COUPLE = "couple"
    SINGLE = "single"


@dataclass(frozen=True)
class Group:
    kind: GroupKind
    members: Tuple[str, ...]

    @property
    def is_couple(self) -> bool:
        return self.kind == GroupKind.COUPLE


def group_generation(ids: Sequence[str], spouse_of: Mapping[str, str]) -> List[Group]:
    """
    Split one generation row into couples and singles, keeping scan order.
    A spouse who sits in another generation is not pulled into this row.
    """
    in_row = set(ids)
    processed: set[str] = set()
    groups: List[Group] = []

    for pid in ids:
        if pid in processed:
            continue
        spouse = spouse_of.get(pid)
        if spouse is not None and spouse != pid and spouse in in_row and spouse not in processed:
            groups.append(Group(GroupKind.COUPLE, (pid, spouse)))
            processed.update((pid, spouse))
        else:
            groups.append(Group(GroupKind.SINGLE, (pid,)))
            processed.add(pid)

    return groups


def group_generations(
    assignment: GenerationAssignment,
    spouse_of: Mapping[str, str],
) -> Dict[int, List[Group]]:
    return {g: group_generation(ids, spouse_of) for g, ids in assignment.by_generation.items()}
