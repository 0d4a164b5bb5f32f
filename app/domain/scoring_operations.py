"""
Scoring Operations - Domain Logic for the scoring engine

Public entry points used by the API layer (and any other embedding host).
Each operation validates the atom collection, then runs a full, stateless
recomputation over it.

Pattern: Sync static methods, no session, no shared state between calls.
Each operation derives staleness on its own; passes are never shared.
"""

import logging
import math
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from app.algos.atom_scoring import (
    classify_energy,
    compute_cap_status,
    compute_entropy,
    compute_opacity,
    compute_priority,
    compute_staleness_map,
    count_open_tasks,
    filter_compression_candidates,
)
from app.algos.atom_scoring.staleness import index_atoms
from app.core.config import settings
from app.domain.exceptions import MalformedInputError
from app.models.dto.scoring import (
    Atom,
    AtomScore,
    CapConfig,
    CapStatusResponse,
    CompressionCandidate,
    EntropyScore,
)

logger = logging.getLogger(__name__)

_atom_list_adapter = TypeAdapter(List[Atom])

AtomsInput = Sequence[Union[Atom, Dict[str, Any]]]


def _format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into 'atoms.<index>.<field>: message; ...'."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in ("atoms", *error.get("loc", ())))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def _validate_counter(operation: str, name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedInputError(operation, f"{name} must be a non-negative integer, got {value!r}")
    return value


def _validate_now(operation: str, now_ms: float) -> float:
    if (
        isinstance(now_ms, bool)
        or not isinstance(now_ms, (int, float))
        or not math.isfinite(now_ms)
        or now_ms < 0
    ):
        raise MalformedInputError(operation, f"now_ms must be a finite, non-negative number, got {now_ms!r}")
    return float(now_ms)


class ScoringOperations:
    """
    Scoring engine operations.

    All methods are pure functions of their inputs: nothing is cached or
    persisted, and identical inputs give identical outputs.
    """

    @staticmethod
    def parse_atoms(atoms: Iterable[Union[Atom, Dict[str, Any]]], operation: str = "parse_atoms") -> List[Atom]:
        """
        Validate raw atom records.

        Raises:
            MalformedInputError: If any record is missing a required field or
                has a field of the wrong type. No partial result is returned.
        """
        try:
            return _atom_list_adapter.validate_python(list(atoms))
        except ValidationError as exc:
            logger.warning(f"{operation}: rejected atom collection ({exc.error_count()} errors)")
            raise MalformedInputError(operation, _format_validation_error(exc)) from exc
        except TypeError as exc:
            raise MalformedInputError(operation, str(exc)) from exc

    @staticmethod
    def compute_scores(atoms: AtomsInput, now_ms: float) -> Dict[str, AtomScore]:
        """
        Compute staleness, priority, energy and opacity for every atom.

        Staleness is computed for all atoms first, since priority's
        dependency factor reads linked atoms' staleness.

        Returns:
            Map of atom id -> AtomScore
        """
        parsed = ScoringOperations.parse_atoms(atoms, "compute_scores")
        now_ms = _validate_now("compute_scores", now_ms)
        atoms_by_id = index_atoms(parsed)
        staleness_by_id = compute_staleness_map(parsed, now_ms)

        scores: Dict[str, AtomScore] = {}
        for atom in parsed:
            staleness = staleness_by_id[atom.id]
            priority = compute_priority(atom, atoms_by_id, staleness_by_id, now_ms)
            if priority is None:
                priority_score, priority_tier = 0.0, None
            else:
                priority_score, priority_tier = priority

            scores[atom.id] = AtomScore(
                id=atom.id,
                staleness=staleness,
                priority_tier=priority_tier,
                priority_score=priority_score,
                energy=classify_energy(atom),
                opacity=compute_opacity(staleness),
            )

        logger.debug(f"compute_scores: scored {len(scores)} atoms")
        return scores

    @staticmethod
    def compute_entropy(
        atoms: AtomsInput,
        inbox_count: int,
        inbox_cap: int,
        task_cap: int,
        now_ms: float,
    ) -> EntropyScore:
        """Compute the collection health score (caps floored at 1)."""
        parsed = ScoringOperations.parse_atoms(atoms, "compute_entropy")
        now_ms = _validate_now("compute_entropy", now_ms)
        inbox_count = _validate_counter("compute_entropy", "inbox_count", inbox_count)
        inbox_cap = _validate_counter("compute_entropy", "inbox_cap", inbox_cap)
        task_cap = _validate_counter("compute_entropy", "task_cap", task_cap)

        result = compute_entropy(parsed, inbox_count, inbox_cap, task_cap, now_ms)

        logger.debug(
            f"compute_entropy: score={result.score:.3f} level={result.level.value} "
            f"open={result.open_tasks} stale={result.stale_count} "
            f"zero_link={result.zero_link_count} inbox={result.inbox_count}"
        )
        return EntropyScore(**asdict(result))

    @staticmethod
    def filter_compression_candidates(atoms: AtomsInput, now_ms: float) -> List[CompressionCandidate]:
        """Return stale or orphaned atoms in input order."""
        parsed = ScoringOperations.parse_atoms(atoms, "filter_compression_candidates")
        now_ms = _validate_now("filter_compression_candidates", now_ms)
        candidates = filter_compression_candidates(parsed, now_ms)

        logger.debug(
            f"filter_compression_candidates: {len(candidates)} of {len(parsed)} atoms flagged"
        )
        return [CompressionCandidate(**asdict(c)) for c in candidates]

    @staticmethod
    def compute_cap_status(
        atoms: AtomsInput,
        inbox_count: int,
        caps: Optional[CapConfig] = None,
    ) -> CapStatusResponse:
        """Inbox and open-task fill state against the configured caps."""
        parsed = ScoringOperations.parse_atoms(atoms, "compute_cap_status")
        inbox_count = _validate_counter("compute_cap_status", "inbox_count", inbox_count)
        if caps is None:
            caps = CapConfig(
                inbox_cap=settings.DEFAULT_INBOX_CAP,
                task_cap=settings.DEFAULT_TASK_CAP,
            )

        return CapStatusResponse(
            inbox_status=compute_cap_status(inbox_count, caps.inbox_cap),
            task_status=compute_cap_status(count_open_tasks(parsed), caps.task_cap),
        )

    @staticmethod
    def ping() -> str:
        return "pong"

    @staticmethod
    def version() -> str:
        return settings.VERSION
