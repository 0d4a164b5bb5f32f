"""
Pytest configuration and fixtures for testing.
"""
import pytest

from app.models.dto.scoring import Atom

DAY_MS = 24 * 60 * 60 * 1000.0
NOW_MS = 1_750_000_000_000.0


def days_ago(days: float) -> float:
    return NOW_MS - days * DAY_MS


def make_atom(
    atom_id: str = "a1",
    kind: str = "task",
    updated_days_ago: float = 0.0,
    created_days_ago: float = 60.0,
    **overrides,
) -> Atom:
    """Build an Atom with times expressed as days before NOW_MS."""
    data = {
        "id": atom_id,
        "type": kind,
        "updatedAt": days_ago(updated_days_ago),
        "createdAt": days_ago(created_days_ago),
        "status": "open",
        "content": "Medium length content that has no special keywords at all.",
    }
    data.update(overrides)
    return Atom.model_validate(data)


def raw_atom(atom_id: str = "a1", **overrides) -> dict:
    """Wire-format atom record (camelCase, kind under `type`)."""
    data = {
        "id": atom_id,
        "type": "task",
        "updatedAt": NOW_MS,
        "createdAt": days_ago(60),
        "status": "open",
        "links": [],
        "dueDate": None,
        "pinnedTier": None,
        "pinnedStaleness": False,
        "importance": None,
        "energy": None,
        "content": "Medium length content that has no special keywords at all.",
    }
    data.update(overrides)
    return data


@pytest.fixture
def now_ms() -> float:
    return NOW_MS


@pytest.fixture
def atom_factory():
    return make_atom
