"""
Energy classification.

Buckets an atom by the cognitive effort it likely takes. An explicit override
on the atom always wins; otherwise the level is inferred from its content.
"""

from enum import Enum
from typing import Optional


class EnergyLevel(str, Enum):
    """Cognitive-effort buckets."""
    QUICK = "Quick"
    MEDIUM = "Medium"
    DEEP = "Deep"


QUICK_MAX_LENGTH = 50
DEEP_MIN_LENGTH = 200

QUICK_KEYWORDS = ("quick", "5 min", "brief")
DEEP_KEYWORDS = ("research", "write", "design", "plan", "review all")

# Contribution to the priority energy factor
ENERGY_BOOSTS = {
    EnergyLevel.QUICK: 0.1,
    EnergyLevel.MEDIUM: 0.0,
    EnergyLevel.DEEP: -0.05,
}


def parse_energy(value: str) -> EnergyLevel:
    """Parse a user override. Unrecognized strings fall back to Medium."""
    lowered = value.lower()
    if lowered == "quick":
        return EnergyLevel.QUICK
    if lowered == "deep":
        return EnergyLevel.DEEP
    return EnergyLevel.MEDIUM


def infer_energy(content: str) -> EnergyLevel:
    """
    Infer energy from content length and keywords.

    The Quick check runs first, so short content mentioning "design" is Quick.
    """
    lowered = content.lower()

    if len(content) < QUICK_MAX_LENGTH or any(k in lowered for k in QUICK_KEYWORDS):
        return EnergyLevel.QUICK

    if len(content) > DEEP_MIN_LENGTH or any(k in lowered for k in DEEP_KEYWORDS):
        return EnergyLevel.DEEP

    return EnergyLevel.MEDIUM


def classify_energy(atom) -> EnergyLevel:
    override: Optional[str] = atom.energy
    if override is not None:
        return parse_energy(override)
    return infer_energy(atom.content)


def energy_boost(level: EnergyLevel) -> float:
    return ENERGY_BOOSTS[level]
