from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Type, TypeVar

import pandas as pd
from pydantic import BaseModel, ValidationError

from ..models import Person, Relationship

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# field -> accepted column names (first match wins)
PEOPLE_COLUMNS: Dict[str, Sequence[str]] = {
    "id": ("id",),
    "name": ("name", "display_name"),
}
RELATIONSHIP_COLUMNS: Dict[str, Sequence[str]] = {
    "kind": ("kind", "relationship_type", "type"),
    "first_id": ("first_id", "person1_id"),
    "second_id": ("second_id", "person2_id"),
}


def _read_frame(path: str | Path, required: Dict[str, Sequence[str]]) -> pd.DataFrame:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))

    # ids stay strings ("007" is not 7)
    df = pd.read_csv(p, comment="#", dtype=str, skipinitialspace=True)
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [field for field, names in required.items() if not any(n in df.columns for n in names)]
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)} in file {path}")

    df = df.astype(object).where(pd.notna(df), None)
    for col in df.columns:
        df[col] = df[col].map(lambda v: v.strip() if isinstance(v, str) else v)
    return df


def _rows_to_models(df: pd.DataFrame, model: Type[M], label: str, path: str | Path) -> Tuple[List[M], List[str]]:
    records: List[M] = []
    warnings: List[str] = []
    for line_no, row in enumerate(df.to_dict(orient="records"), start=2):  # header is line 1
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            msg = f"{label} line {line_no}: Skipped ({'; '.join(err['msg'] for err in e.errors())})"
            warnings.append(msg)
            logger.warning("%s: %s", Path(path).name, msg)
    return records, warnings


def read_people_csv(path: str | Path) -> Tuple[List[Person], List[str]]:
    """
    Reads a people CSV (columns id, name and optionally gender, birth_date,
    death_date, is_alive, photo_ref, note, or the hosted table names).
    Supports comment lines starting with '#'.
    """
    df = _read_frame(path, PEOPLE_COLUMNS)
    return _rows_to_models(df, Person, "Person", path)


def read_relationships_csv(path: str | Path) -> Tuple[List[Relationship], List[str]]:
    """Reads a relationships CSV (columns id?, kind, first_id, second_id)."""
    df = _read_frame(path, RELATIONSHIP_COLUMNS)
    return _rows_to_models(df, Relationship, "Relationship", path)
