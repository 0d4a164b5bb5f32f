"""
Priority scoring algorithm.

Computes urgency for task and event atoms from five factors:
- deadline urgency: concave ramp over the last 30 days before the due date
- importance: atom's own importance (0-1), None defaults to 0.5
- recency: linear fade to zero over 30 days since last edit
- dependency urgency: 0.7 if a linked task is recently active, else 0
- energy boost: small nudge towards quick work, away from deep work

Atoms with a pinned tier skip the formula and take the tier's fixed score.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from app.algos.atom_scoring.energy import classify_energy, energy_boost
from app.algos.atom_scoring.staleness import index_atoms
from app.algos.atom_scoring.units import elapsed_ms, ms_to_days


class PriorityTier(str, Enum):
    """Discrete priority buckets, highest first."""
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    SOMEDAY = "Someday"


SCORED_KINDS = frozenset({"task", "event"})

# Fixed scores for pinned tiers
PINNED_TIER_SCORES = {
    PriorityTier.CRITICAL: 0.90,
    PriorityTier.HIGH: 0.70,
    PriorityTier.MEDIUM: 0.50,
    PriorityTier.LOW: 0.30,
    PriorityTier.SOMEDAY: 0.10,
}

# Lower bounds (inclusive), checked in order
TIER_THRESHOLDS = (
    (0.80, PriorityTier.CRITICAL),
    (0.60, PriorityTier.HIGH),
    (0.40, PriorityTier.MEDIUM),
    (0.20, PriorityTier.LOW),
)

DEADLINE_HORIZON_DAYS = 30.0
RECENCY_HORIZON_DAYS = 30.0

DEPENDENCY_URGENCY = 0.7
# Linked task staleness below this counts as recently active
ACTIVE_DEPENDENCY_STALENESS = 0.3


@dataclass(frozen=True)
class PriorityWeights:
    """Weights for the priority factors. Defaults sum to 1.0."""

    deadline: float = 0.40
    importance: float = 0.25
    recency: float = 0.15
    dependency: float = 0.15
    energy: float = 0.05


DEFAULT_WEIGHTS = PriorityWeights()


def is_scored_kind(kind: str) -> bool:
    return kind in SCORED_KINDS


def parse_tier(value: str) -> PriorityTier:
    """Parse a pinned tier case-insensitively. Unrecognized strings become Someday."""
    lowered = value.lower()
    for tier in PriorityTier:
        if tier.value.lower() == lowered:
            return tier
    return PriorityTier.SOMEDAY


def tier_to_score(tier: PriorityTier) -> float:
    return PINNED_TIER_SCORES[tier]


def score_to_tier(score: float) -> PriorityTier:
    for lower_bound, tier in TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return PriorityTier.SOMEDAY


def compute_deadline_urgency(due_date: Optional[float], now_ms: float) -> float:
    """
    Urgency from the due date.

    Returns:
        0.0 without a due date or when due more than 30 days out,
        1.0 when due now or overdue,
        1 - sqrt(days_remaining / 30) in between.
    """
    if due_date is None:
        return 0.0

    days_remaining = ms_to_days(due_date) - ms_to_days(now_ms)
    if days_remaining <= 0.0:
        return 1.0
    if days_remaining > DEADLINE_HORIZON_DAYS:
        return 0.0
    return 1.0 - math.sqrt(days_remaining / DEADLINE_HORIZON_DAYS)


def compute_importance_factor(importance: Optional[float]) -> float:
    importance = importance if importance is not None else 0.5
    return max(0.0, min(1.0, importance))


def compute_recency_factor(updated_at: float, now_ms: float) -> float:
    age_days = ms_to_days(elapsed_ms(updated_at, now_ms))
    return max(0.0, 1.0 - age_days / RECENCY_HORIZON_DAYS)


def compute_dependency_urgency(
    atom,
    atoms_by_id: Mapping[str, object],
    staleness_by_id: Mapping[str, float],
) -> float:
    """
    0.7 if any linked atom is a task with staleness < 0.3, else 0.0.

    Staleness stands in for "recently active"; a linked task missing from
    staleness_by_id counts as fully stale.
    """
    for link_id in atom.links:
        linked = atoms_by_id.get(link_id)
        if linked is None or linked.kind != "task":
            continue
        if staleness_by_id.get(link_id, 1.0) < ACTIVE_DEPENDENCY_STALENESS:
            return DEPENDENCY_URGENCY
    return 0.0


def compute_priority_factors(
    atom,
    atoms_by_id: Mapping[str, object],
    staleness_by_id: Mapping[str, float],
    now_ms: float,
) -> Dict[str, float]:
    """Unweighted factor values for the computed (non-pinned) path."""
    return {
        "deadline": compute_deadline_urgency(atom.due_date, now_ms),
        "importance": compute_importance_factor(atom.importance),
        "recency": compute_recency_factor(atom.updated_at, now_ms),
        "dependency": compute_dependency_urgency(atom, atoms_by_id, staleness_by_id),
        "energy": energy_boost(classify_energy(atom)),
    }


def compute_priority_score(
    atom,
    all_atoms: Union[Sequence, Mapping[str, object]],
    staleness_by_id: Mapping[str, float],
    now_ms: float,
    weights: PriorityWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    Compute the weighted priority score, ignoring any pinned tier.

    Formula:
        score = 0.40 × deadline + 0.25 × importance + 0.15 × recency +
                0.15 × dependency + 0.05 × energy_boost

    Returns:
        Score from 0.0 to 1.0
    """
    if isinstance(all_atoms, Mapping):
        atoms_by_id = all_atoms
    else:
        atoms_by_id = index_atoms(all_atoms)

    factors = compute_priority_factors(atom, atoms_by_id, staleness_by_id, now_ms)
    score = (
        weights.deadline * factors["deadline"]
        + weights.importance * factors["importance"]
        + weights.recency * factors["recency"]
        + weights.dependency * factors["dependency"]
        + weights.energy * factors["energy"]
    )
    return max(0.0, min(1.0, score))


def compute_priority(
    atom,
    all_atoms: Union[Sequence, Mapping[str, object]],
    staleness_by_id: Mapping[str, float],
    now_ms: float,
    weights: PriorityWeights = DEFAULT_WEIGHTS,
) -> Optional[Tuple[float, PriorityTier]]:
    """
    Compute (score, tier) for a task or event atom.

    Returns None for kinds that are not scored.
    """
    if not is_scored_kind(atom.kind):
        return None

    if atom.pinned_tier is not None:
        tier = parse_tier(atom.pinned_tier)
        return tier_to_score(tier), tier

    score = compute_priority_score(atom, all_atoms, staleness_by_id, now_ms, weights)
    return score, score_to_tier(score)
