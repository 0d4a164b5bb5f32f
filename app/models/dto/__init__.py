# Data Transfer Objects (DTOs)
# Request/response models for API endpoints

from app.models.dto.scoring import (
    Atom,
    AtomScore,
    EntropyScore,
    CompressionCandidate,
    CapConfig,
    CapStatusResponse,
    ScoresRequest,
    EntropyRequest,
    CompressionRequest,
    CapStatusRequest,
)

__all__ = [
    "Atom",
    "AtomScore",
    "EntropyScore",
    "CompressionCandidate",
    "CapConfig",
    "CapStatusResponse",
    "ScoresRequest",
    "EntropyRequest",
    "CompressionRequest",
    "CapStatusRequest",
]
