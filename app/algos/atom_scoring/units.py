"""Time-unit constants shared by the scoring algorithms.

All timestamps handled by the engine are milliseconds since the Unix epoch.
"""

MS_PER_DAY = 24.0 * 60.0 * 60.0 * 1000.0

# Staleness half-life
HALF_LIFE_MS = 14.0 * MS_PER_DAY

# Atoms younger than this decay at half speed
ONBOARDING_WINDOW_MS = 30.0 * MS_PER_DAY

# Minimum age before an unlinked atom counts towards entropy
ORPHAN_MIN_AGE_MS = 7.0 * MS_PER_DAY

# Minimum age before an unlinked atom becomes a compression candidate
COMPRESSION_MIN_AGE_MS = 14.0 * MS_PER_DAY


def elapsed_ms(since_ms: float, now_ms: float) -> float:
    """Milliseconds from since_ms to now_ms, clamped at zero for future timestamps."""
    return max(0.0, now_ms - since_ms)


def ms_to_days(ms: float) -> float:
    return ms / MS_PER_DAY
