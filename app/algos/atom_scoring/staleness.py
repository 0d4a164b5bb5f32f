"""
Staleness algorithm.

Computes how neglected an atom is from the time elapsed since its last edit.
Score ranges from 0.0 (just edited) to 1.0 (fully stale).

Formula: staleness = 1 - 2^(-age / effective_half_life)

The base half-life is stretched by two independent, multiplicative boosts:
- onboarding forgiveness: atoms created < 30 days ago decay at half speed (x2.0)
- link freshness: atoms linked to at least one fresh atom decay slower (x1.5)

Link freshness looks only one level deep. A linked atom's freshness is its raw
decay (base half-life, no boosts, pinning ignored), so cycles in the link
graph can never recurse.
"""

from typing import Dict, Iterable, Mapping, Sequence, Union

from app.algos.atom_scoring.units import (
    HALF_LIFE_MS,
    ONBOARDING_WINDOW_MS,
    elapsed_ms,
)

ONBOARDING_HALF_LIFE_MULTIPLIER = 2.0
LINK_FRESHNESS_HALF_LIFE_MULTIPLIER = 1.5

# Raw staleness below this marks a linked atom as fresh
FRESH_LINK_THRESHOLD = 0.5

# Opacity fades with staleness but never below this floor
MIN_OPACITY = 0.6
OPACITY_FADE = 0.4


def _decay(age_ms: float, half_life_ms: float) -> float:
    staleness = 1.0 - 2.0 ** (-age_ms / half_life_ms)
    return max(0.0, min(1.0, staleness))


def index_atoms(atoms: Iterable) -> Dict[str, object]:
    """Build the flat id -> atom lookup used for link resolution."""
    return {atom.id: atom for atom in atoms}


def compute_raw_staleness(updated_at: float, now_ms: float) -> float:
    """
    Compute unboosted staleness from the last edit time alone.

    Examples:
        - updated now → 0.0
        - updated 14 days ago → 0.5
        - updated 28 days ago → 0.75
    """
    return _decay(elapsed_ms(updated_at, now_ms), HALF_LIFE_MS)


def has_fresh_link(atom, atoms_by_id: Mapping[str, object], now_ms: float) -> bool:
    """True if any id in atom.links resolves to an atom with raw staleness < 0.5."""
    for link_id in atom.links:
        linked = atoms_by_id.get(link_id)
        if linked is None:
            continue
        if compute_raw_staleness(linked.updated_at, now_ms) < FRESH_LINK_THRESHOLD:
            return True
    return False


def effective_half_life_ms(atom, atoms_by_id: Mapping[str, object], now_ms: float) -> float:
    """Base half-life with onboarding and link-freshness boosts applied."""
    half_life = HALF_LIFE_MS

    if elapsed_ms(atom.created_at, now_ms) < ONBOARDING_WINDOW_MS:
        half_life *= ONBOARDING_HALF_LIFE_MULTIPLIER

    if has_fresh_link(atom, atoms_by_id, now_ms):
        half_life *= LINK_FRESHNESS_HALF_LIFE_MULTIPLIER

    return half_life


def compute_staleness(
    atom,
    all_atoms: Union[Sequence, Mapping[str, object]],
    now_ms: float,
) -> float:
    """
    Compute boosted staleness for a single atom.

    Args:
        atom: Atom to score
        all_atoms: Full atom collection, or a prebuilt id -> atom index
        now_ms: Current time (ms since epoch)

    Returns:
        Score from 0.0 (fresh) to 1.0 (stale). Always 0.0 for pinned atoms.
    """
    if atom.pinned_staleness:
        return 0.0

    if isinstance(all_atoms, Mapping):
        atoms_by_id = all_atoms
    else:
        atoms_by_id = index_atoms(all_atoms)

    half_life = effective_half_life_ms(atom, atoms_by_id, now_ms)
    return _decay(elapsed_ms(atom.updated_at, now_ms), half_life)


def compute_staleness_map(atoms: Sequence, now_ms: float) -> Dict[str, float]:
    """Compute staleness for every atom, keyed by atom id."""
    atoms_by_id = index_atoms(atoms)
    return {
        atom.id: compute_staleness(atom, atoms_by_id, now_ms)
        for atom in atoms
    }


def compute_opacity(staleness: float) -> float:
    """Visual fade for stale atoms: 1.0 when fresh, 0.6 when fully stale."""
    return max(MIN_OPACITY, min(1.0, 1.0 - staleness * OPACITY_FADE))
