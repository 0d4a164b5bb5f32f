"""Scoring API endpoints.

Pattern: Sync routes + Sync domain operations.
FastAPI runs sync handlers in its thread pool; every call is independent.
"""

import time
from typing import Dict, List, Optional

from fastapi import APIRouter

from app.core.config import settings
from app.domain.scoring_operations import ScoringOperations
from app.models.dto.scoring import (
    AtomScore,
    CapStatusRequest,
    CapStatusResponse,
    CompressionCandidate,
    CompressionRequest,
    EntropyRequest,
    EntropyScore,
    ScoresRequest,
)


router = APIRouter(tags=["scoring"])


def _resolve_now(now_ms: Optional[float]) -> float:
    """Caller-supplied time, or the server clock in ms."""
    return now_ms if now_ms is not None else time.time() * 1000.0


@router.post(
    "/scores",
    response_model=Dict[str, AtomScore],
    summary="Score all atoms"
)
def compute_scores(request: ScoresRequest) -> Dict[str, AtomScore]:
    """
    Staleness, priority, energy and opacity for every atom, keyed by id.
    """
    return ScoringOperations.compute_scores(request.atoms, _resolve_now(request.now_ms))


@router.post(
    "/entropy",
    response_model=EntropyScore,
    summary="Compute collection entropy"
)
def compute_entropy(request: EntropyRequest) -> EntropyScore:
    """
    Aggregate health score for the atom collection.
    Caps default to the configured inbox and task caps.
    """
    inbox_cap = request.inbox_cap if request.inbox_cap is not None else settings.DEFAULT_INBOX_CAP
    task_cap = request.task_cap if request.task_cap is not None else settings.DEFAULT_TASK_CAP
    return ScoringOperations.compute_entropy(
        request.atoms,
        request.inbox_count,
        inbox_cap,
        task_cap,
        _resolve_now(request.now_ms),
    )


@router.post(
    "/compression-candidates",
    response_model=List[CompressionCandidate],
    summary="List compression candidates"
)
def filter_compression_candidates(request: CompressionRequest) -> List[CompressionCandidate]:
    """
    Stale or orphaned atoms eligible for archival, in input order.
    """
    return ScoringOperations.filter_compression_candidates(
        request.atoms, _resolve_now(request.now_ms)
    )


@router.post(
    "/caps/status",
    response_model=CapStatusResponse,
    summary="Inbox and task cap status"
)
def compute_cap_status(request: CapStatusRequest) -> CapStatusResponse:
    """
    ok / warning (80% of cap) / full for the inbox and open tasks.
    """
    return ScoringOperations.compute_cap_status(request.atoms, request.inbox_count, request.caps)
