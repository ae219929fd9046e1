"""Input records: people and the typed relationships between them."""
from __future__ import annotations

import enum
import math
import re
from datetime import date, datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class Gender(enum.Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNKNOWN = "unknown"


class RelKind(enum.Enum):
    SPOUSE = "spouse"
    PARENT = "parent"
    # Stored by the hosted table with the pair reversed: (child, parent)
    CHILD = "child"


class EdgeKind(enum.Enum):
    SPOUSE = "spouse"
    PARENT_CHILD = "parent-child"


_GENDER_SHORT = {"m": Gender.MALE, "f": Gender.FEMALE, "o": Gender.OTHER, "u": Gender.UNKNOWN}
_YEAR_RE = re.compile(r"^\d{4}$")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value.strip().lower() in ("", "nan", "none", "null")


def _as_id(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return value


def parse_gender(value: Any) -> Gender:
    """Map free-form gender input (enum values, M/F/O/U, any case) to Gender."""
    if isinstance(value, Gender):
        return value
    if _is_blank(value):
        return Gender.UNKNOWN
    raw = str(value).strip().lower()
    if raw in _GENDER_SHORT:
        return _GENDER_SHORT[raw]
    try:
        return Gender(raw)
    except ValueError:
        return Gender.UNKNOWN


def parse_date(value: Any) -> Optional[date]:
    """
    Lenient date parsing for user-entered genealogy data.

    Accepts date/datetime objects, ISO strings (only the first 10 characters
    are read, so timestamps work), bare years as str or int. Anything else
    becomes None instead of failing the whole record.
    """
    if _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return date(value, 1, 1) if 1 <= value <= 9999 else None
    raw = str(value).strip()
    if _YEAR_RE.match(raw):
        return date(int(raw), 1, 1)
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


class Person(BaseModel):
    id: str
    name: str = Field(validation_alias=AliasChoices("name", "display_name"))
    gender: Gender = Gender.UNKNOWN
    birth_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("birth_date", "date_of_birth"))
    death_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("death_date", "date_of_death"))
    is_alive: Optional[bool] = None
    photo_ref: Optional[str] = Field(default=None, validation_alias=AliasChoices("photo_ref", "photo_url"))
    note: Optional[str] = Field(default=None, validation_alias=AliasChoices("note", "notes"))

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v):
        if _is_blank(v):
            raise ValueError("person id is required")
        return _as_id(v)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        if _is_blank(v):
            raise ValueError("person name is required")
        return str(v).strip()

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, v):
        return parse_gender(v)

    @field_validator("birth_date", "death_date", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return parse_date(v)

    @field_validator("is_alive", "photo_ref", "note", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return None if _is_blank(v) else v

    @model_validator(mode="after")
    def derive_is_alive(self):
        # a recorded death date settles an unknown living status
        if self.is_alive is None and self.death_date is not None:
            self.is_alive = False
        return self


class Relationship(BaseModel):
    """
    A typed pair of person ids.

    kind "parent": first_id is the parent, second_id the child.
    kind "child":  first_id is the child, second_id the parent.
    kind "spouse": symmetric.

    The kind is kept as a lower-cased string so that records with kinds this
    engine does not draw still load; the relationship index ignores them.
    """

    id: Optional[str] = None
    kind: str = Field(validation_alias=AliasChoices("kind", "relationship_type", "type"))
    first_id: str = Field(validation_alias=AliasChoices("first_id", "person1_id"))
    second_id: str = Field(validation_alias=AliasChoices("second_id", "person2_id"))

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v):
        return None if _is_blank(v) else _as_id(v)

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v):
        if _is_blank(v):
            raise ValueError("relationship kind is required")
        return str(v).strip().lower()

    @field_validator("first_id", "second_id", mode="before")
    @classmethod
    def validate_person_ids(cls, v):
        if _is_blank(v):
            raise ValueError("relationship person id is required")
        return _as_id(v)

    @model_validator(mode="after")
    def default_id(self):
        if self.id is None:
            self.id = f"{self.kind}:{self.first_id}:{self.second_id}"
        return self

    @property
    def rel_kind(self) -> Optional[RelKind]:
        try:
            return RelKind(self.kind)
        except ValueError:
            return None
