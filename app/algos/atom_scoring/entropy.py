"""
Entropy (collection health) algorithm.

Aggregates whole-collection load signals into a single score:
- open task load against the task cap
- inbox load against the inbox cap
- share of stale atoms
- share of old atoms with no links

Score ranges from 0.0 (tidy) to 1.0 (overloaded).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from app.algos.atom_scoring.staleness import compute_staleness, index_atoms
from app.algos.atom_scoring.units import ORPHAN_MIN_AGE_MS, elapsed_ms


class EntropyLevel(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class CapStatus(str, Enum):
    """Fill state of a capped list."""
    OK = "ok"
    WARNING = "warning"
    FULL = "full"


OPEN_TASK_STATUSES = frozenset({"open", "in-progress"})

# Staleness above this counts an atom as stale
STALE_THRESHOLD = 0.7

TASK_LOAD_WEIGHT = 0.35
INBOX_LOAD_WEIGHT = 0.35
STALE_WEIGHT = 0.20
ZERO_LINK_WEIGHT = 0.10

YELLOW_THRESHOLD = 0.5
RED_THRESHOLD = 0.75

CAP_WARNING_RATIO = 0.8


@dataclass(frozen=True)
class EntropyResult:
    score: float
    level: EntropyLevel
    open_tasks: int
    stale_count: int
    zero_link_count: int
    inbox_count: int


def is_open_task(atom) -> bool:
    return atom.kind == "task" and atom.status in OPEN_TASK_STATUSES


def count_open_tasks(atoms: Sequence) -> int:
    return sum(1 for atom in atoms if is_open_task(atom))


def entropy_level(score: float) -> EntropyLevel:
    if score < YELLOW_THRESHOLD:
        return EntropyLevel.GREEN
    if score < RED_THRESHOLD:
        return EntropyLevel.YELLOW
    return EntropyLevel.RED


def compute_entropy(
    atoms: Sequence,
    inbox_count: int,
    inbox_cap: int,
    task_cap: int,
    now_ms: float,
) -> EntropyResult:
    """
    Compute the entropy health score for a full atom collection.

    Staleness is evaluated here independently of any other scoring pass.

    Formula:
        score = 0.35 × open_tasks/task_cap + 0.35 × inbox_count/inbox_cap +
                0.20 × stale_count/total + 0.10 × zero_link_count/total

    Caps and the atom total are floored at 1.
    """
    atoms_by_id = index_atoms(atoms)

    open_tasks = 0
    stale_count = 0
    zero_link_count = 0

    for atom in atoms:
        if is_open_task(atom):
            open_tasks += 1

        if compute_staleness(atom, atoms_by_id, now_ms) > STALE_THRESHOLD:
            stale_count += 1

        if not atom.links and elapsed_ms(atom.created_at, now_ms) > ORPHAN_MIN_AGE_MS:
            zero_link_count += 1

    inbox_cap = max(inbox_cap, 1)
    task_cap = max(task_cap, 1)
    total = max(len(atoms), 1)

    score = (
        TASK_LOAD_WEIGHT * (open_tasks / task_cap)
        + INBOX_LOAD_WEIGHT * (inbox_count / inbox_cap)
        + STALE_WEIGHT * (stale_count / total)
        + ZERO_LINK_WEIGHT * (zero_link_count / total)
    )
    score = max(0.0, min(1.0, score))

    return EntropyResult(
        score=score,
        level=entropy_level(score),
        open_tasks=open_tasks,
        stale_count=stale_count,
        zero_link_count=zero_link_count,
        inbox_count=inbox_count,
    )


def compute_cap_status(count: int, cap: int) -> CapStatus:
    """Full at the cap, warning from 80% of it."""
    if count >= cap:
        return CapStatus.FULL
    if count >= cap * CAP_WARNING_RATIO:
        return CapStatus.WARNING
    return CapStatus.OK
