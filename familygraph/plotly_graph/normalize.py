from __future__ import annotations
from datetime import date
from typing import Optional, Tuple

from ..models import Gender, Person


def format_year(value: Optional[date]) -> Optional[str]:
    return None if value is None else f"{value.year:04d}"


def normalize_person(person: Person) -> Tuple[str, str]:
    """
    Returns:
      display_label -> short label on the node:
                         'First Last' (first + last token of the name),
                         plus a second line 'b. 1900 d. 1970' when dates exist
      hover_label   -> full label for hover:
                         full name, gender, dates, living status and note,
                         one fact per line
    """
    parts = person.name.split()
    if len(parts) <= 1:
        short = person.name
    else:
        short = f"{parts[0]} {parts[-1]}"

    born = format_year(person.birth_date)
    died = format_year(person.death_date)
    years = " ".join(s for s in (born and f"b. {born}", died and f"d. {died}") if s)
    display_label = f"{short}\n{years}" if years else short

    lines = [person.name]
    if person.gender != Gender.UNKNOWN:
        lines.append(person.gender.value.capitalize())
    if person.birth_date:
        lines.append(f"Born {person.birth_date.isoformat()}")
    if person.death_date:
        lines.append(f"Died {person.death_date.isoformat()}")
    elif person.is_alive is False:
        lines.append("Deceased")
    if person.note:
        lines.append(person.note)
    hover_label = "\n".join(lines)

    return display_label, hover_label
