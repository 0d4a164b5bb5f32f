"""
Scoring DTOs.

Input atoms and scoring results exchanged with the embedding host.
Wire names are lower-camel-case; the atom kind travels as `type`.
Snake_case names are accepted on input as well.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.algos.atom_scoring.energy import EnergyLevel
from app.algos.atom_scoring.entropy import CapStatus, EntropyLevel
from app.algos.atom_scoring.priority import PriorityTier


class CamelModel(BaseModel):
    """Base model with camelCase aliases and finite floats only."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        from_attributes=True,
    )


class Atom(CamelModel):
    """A task, event or note from the knowledge graph. Read-only input.

    Strict: wrong-typed values (e.g. a string timestamp) are rejected, not
    coerced. Ints are still accepted for float fields.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str
    kind: str = Field(alias="type", description="Atom kind: task, event, note, ...")
    updated_at: float = Field(description="Last edit time (ms since epoch)")
    created_at: float = Field(description="Creation time (ms since epoch)")
    status: str
    links: List[str] = Field(default_factory=list, description="Ids of linked atoms")
    due_date: Optional[float] = Field(default=None, description="Due time (ms since epoch)")
    pinned_tier: Optional[str] = Field(default=None, description="Priority tier override")
    pinned_staleness: bool = Field(default=False, description="Freeze staleness at 0")
    importance: Optional[float] = Field(default=None, description="Importance (0-1), 0.5 when absent")
    energy: Optional[str] = Field(default=None, description="Energy level override")
    content: str = ""

    @field_validator("links", "pinned_staleness", "content", mode="before")
    @classmethod
    def _null_as_default(cls, value, info):
        if value is None:
            return {"links": [], "pinned_staleness": False, "content": ""}[info.field_name]
        return value


class AtomScore(CamelModel):
    """Derived scores for one atom."""

    id: str
    staleness: float = Field(description="Decay since last edit (0-1)")
    priority_tier: Optional[PriorityTier] = Field(
        default=None, description="Priority bucket (tasks and events only)"
    )
    priority_score: float = Field(description="Priority (0-1), 0 for unscored kinds")
    energy: EnergyLevel
    opacity: float = Field(description="Visual fade (0.6-1.0)")


class EntropyScore(CamelModel):
    """Collection-wide health score and the counts behind it."""

    score: float = Field(description="Health score (0-1), higher is worse")
    level: EntropyLevel
    open_tasks: int
    stale_count: int
    zero_link_count: int
    inbox_count: int


class CompressionCandidate(CamelModel):
    """An atom eligible for archival or summarization."""

    id: str
    reason: str
    staleness: float


class CapConfig(CamelModel):
    """Inbox and open-task caps with guardrails."""

    inbox_cap: int = Field(default=20, ge=10, le=30)
    task_cap: int = Field(default=30, ge=15, le=50)


class CapStatusResponse(CamelModel):
    inbox_status: CapStatus
    task_status: CapStatus


# === Requests ===


class ScoresRequest(CamelModel):
    atoms: List[Atom]
    now_ms: Optional[float] = Field(
        default=None, ge=0.0, description="Current time (ms since epoch), server clock if omitted"
    )


class EntropyRequest(CamelModel):
    atoms: List[Atom]
    inbox_count: int = Field(ge=0)
    inbox_cap: Optional[int] = Field(default=None, ge=0, description="Defaults to configured inbox cap")
    task_cap: Optional[int] = Field(default=None, ge=0, description="Defaults to configured task cap")
    now_ms: Optional[float] = Field(default=None, ge=0.0)


class CompressionRequest(CamelModel):
    atoms: List[Atom]
    now_ms: Optional[float] = Field(default=None, ge=0.0)


class CapStatusRequest(CamelModel):
    atoms: List[Atom]
    inbox_count: int = Field(ge=0)
    caps: Optional[CapConfig] = None

