# familygraph/importers/family_tree_json.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from ..models import Person, Relationship

logger = logging.getLogger(__name__)


def parse_family_tree_json(path: str | Path) -> Dict[str, Any]:
    """
    Parse a JSON export of the person and relationship tables.

    Expected schema:
    {
      "people": [ { "id": str, "name": str, "gender": str, "birth_date": str, ... }, ... ],
      "relationships": [ { "id": str, "kind": str, "first_id": str, "second_id": str }, ... ]
    }
    "members" is accepted in place of "people", and the hosted table column
    names (person1_id, person2_id, relationship_type, date_of_birth, ...) are
    accepted inside the rows.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))

    with open(p, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("JSON root must be an object")

    if "people" not in data and "members" in data:
        data["people"] = data.pop("members")

    if "people" not in data or "relationships" not in data:
        raise ValueError("JSON must contain 'people' and 'relationships' arrays")

    if not isinstance(data["people"], list):
        raise ValueError("'people' must be an array")

    if not isinstance(data["relationships"], list):
        raise ValueError("'relationships' must be an array")

    return data


def _error_summary(e: ValidationError) -> str:
    return "; ".join(err["msg"] for err in e.errors())


def extract_people(data: Dict[str, Any]) -> Tuple[List[Person], List[str]]:
    """
    Validate the people array. Rows that are not objects or fail validation
    are skipped with a warning.

    Returns tuple of (people, warnings).
    """
    people: List[Person] = []
    warnings: List[str] = []

    for i, row in enumerate(data.get("people", []), start=1):
        if not isinstance(row, dict):
            warnings.append(f"Person {i}: Skipped non-object row")
            continue
        try:
            people.append(Person.model_validate(row))
        except ValidationError as e:
            warnings.append(f"Person {i}: Skipped ({_error_summary(e)})")

    return people, warnings


def extract_relationships(data: Dict[str, Any]) -> Tuple[List[Relationship], List[str]]:
    """
    Validate the relationships array. Kinds the layout does not draw are
    kept here; the relationship index ignores them.

    Returns tuple of (relationships, warnings).
    """
    relationships: List[Relationship] = []
    warnings: List[str] = []

    for i, row in enumerate(data.get("relationships", []), start=1):
        if not isinstance(row, dict):
            warnings.append(f"Relationship {i}: Skipped non-object row")
            continue
        try:
            relationships.append(Relationship.model_validate(row))
        except ValidationError as e:
            warnings.append(f"Relationship {i}: Skipped ({_error_summary(e)})")

    return relationships, warnings


def load_family_tree_json(path: str | Path) -> Tuple[List[Person], List[Relationship], List[str]]:
    data = parse_family_tree_json(path)
    people, person_warnings = extract_people(data)
    relationships, rel_warnings = extract_relationships(data)
    warnings = person_warnings + rel_warnings
    for w in warnings:
        logger.warning("%s: %s", Path(path).name, w)
    return people, relationships, warnings
