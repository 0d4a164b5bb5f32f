"""
Compression candidate filter.

Flags atoms that are worth archiving or summarizing:
- stale: staleness above 0.8
- orphan: no links and older than 14 days

Stale wins when both apply. Pinned atoms are never flagged.
"""

from dataclasses import dataclass
from typing import List, Sequence

from app.algos.atom_scoring.staleness import compute_staleness, index_atoms
from app.algos.atom_scoring.units import COMPRESSION_MIN_AGE_MS, elapsed_ms, ms_to_days

STALE_THRESHOLD = 0.8


@dataclass(frozen=True)
class CandidateResult:
    id: str
    reason: str
    staleness: float


def stale_reason(days_since_edit: int) -> str:
    return f"Stale: {days_since_edit} days since last edit"


def orphan_reason(days_old: int) -> str:
    return f"Orphan: no links to active items ({days_old} days old)"


def filter_compression_candidates(atoms: Sequence, now_ms: float) -> List[CandidateResult]:
    """
    Return compression candidates in input order.

    Staleness is evaluated here independently of any other scoring pass.
    Day counts in reasons are truncated to whole days.
    """
    atoms_by_id = index_atoms(atoms)
    candidates: List[CandidateResult] = []

    for atom in atoms:
        if atom.pinned_staleness:
            continue

        staleness = compute_staleness(atom, atoms_by_id, now_ms)
        created_age_ms = elapsed_ms(atom.created_at, now_ms)

        if staleness > STALE_THRESHOLD:
            days_since_edit = int(ms_to_days(elapsed_ms(atom.updated_at, now_ms)))
            reason = stale_reason(days_since_edit)
        elif not atom.links and created_age_ms > COMPRESSION_MIN_AGE_MS:
            reason = orphan_reason(int(ms_to_days(created_age_ms)))
        else:
            continue

        candidates.append(CandidateResult(id=atom.id, reason=reason, staleness=staleness))

    return candidates
