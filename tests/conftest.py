"""Shared fixtures for the familygraph test suite."""
import pytest

from familygraph.models import Person, Relationship


def person(pid, name=None, **kwargs):
    return Person(id=pid, name=name or pid, **kwargs)


def rel(kind, first, second, rid=None):
    return Relationship(id=rid, kind=kind, first_id=first, second_id=second)


# ── Two parents, two children, one grandchild ──

@pytest.fixture
def family_people():
    return [
        person("P1", "Arthur Pendle", gender="male", birth_date="1920-05-01"),
        person("P2", "Beatrice Pendle", gender="female"),
        person("C1", "Clara Pendle", gender="female"),
        person("C2", "Colin Pendle", gender="male"),
        person("G1", "Gwen Pendle"),
    ]


@pytest.fixture
def family_rels():
    return [
        rel("spouse", "P1", "P2"),
        rel("parent", "P1", "C1"),
        rel("parent", "P2", "C1"),
        rel("parent", "P1", "C2"),
        rel("parent", "P2", "C2"),
        rel("parent", "C1", "G1"),
    ]


@pytest.fixture
def family(family_people, family_rels):
    return family_people, family_rels


@pytest.fixture
def family_json(tmp_path):
    """Export in the hosted table layout (members table column names)."""
    path = tmp_path / "family.json"
    path.write_text(
        """{
  "members": [
    {"id": "p1", "name": "Arthur Pendle", "gender": "male", "date_of_birth": "1920-05-01"},
    {"id": "p2", "name": "Beatrice Pendle", "gender": "female", "date_of_death": "1999-12-31"},
    {"id": "c1", "name": "Clara Pendle", "gender": "female", "notes": "Eldest"}
  ],
  "relationships": [
    {"id": "r1", "person1_id": "p1", "person2_id": "p2", "relationship_type": "spouse"},
    {"id": "r2", "person1_id": "p1", "person2_id": "c1", "relationship_type": "parent"},
    {"id": "r3", "person1_id": "c1", "person2_id": "p2", "relationship_type": "child"}
  ]
}
""",
        encoding="utf-8",
    )
    return path
