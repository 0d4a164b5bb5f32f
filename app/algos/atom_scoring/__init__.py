# Atom scoring algorithms
# Pure functions for staleness, priority, entropy and compression

from app.algos.atom_scoring.staleness import (
    compute_raw_staleness,
    compute_staleness,
    compute_staleness_map,
    compute_opacity,
)
from app.algos.atom_scoring.energy import (
    EnergyLevel,
    classify_energy,
    energy_boost,
    infer_energy,
    parse_energy,
)
from app.algos.atom_scoring.priority import (
    PriorityTier,
    PriorityWeights,
    compute_priority,
    compute_priority_score,
    parse_tier,
    score_to_tier,
    tier_to_score,
)
from app.algos.atom_scoring.entropy import (
    CapStatus,
    EntropyLevel,
    compute_cap_status,
    compute_entropy,
    count_open_tasks,
    entropy_level,
)
from app.algos.atom_scoring.compression import filter_compression_candidates

__all__ = [
    "compute_raw_staleness",
    "compute_staleness",
    "compute_staleness_map",
    "compute_opacity",
    "EnergyLevel",
    "classify_energy",
    "energy_boost",
    "infer_energy",
    "parse_energy",
    "PriorityTier",
    "PriorityWeights",
    "compute_priority",
    "compute_priority_score",
    "parse_tier",
    "score_to_tier",
    "tier_to_score",
    "CapStatus",
    "EntropyLevel",
    "compute_cap_status",
    "compute_entropy",
    "count_open_tasks",
    "entropy_level",
    "filter_compression_candidates",
]
