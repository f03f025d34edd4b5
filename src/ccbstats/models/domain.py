"""Domain models for ccbstats.

Pure Python dataclasses representing the extraction and aggregation
entities. These are independent of pydantic and the HTTP layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias


# ============================================================================
# Roll Domain
# ============================================================================

OutcomeKind = Literal["critical", "success", "failure", "fumble", "special"]


@dataclass(frozen=True)
class RollEvent:
    """One parsed skill check.

    Attributes:
        participant: Whitespace-normalized speaker name.
        skill: Trimmed skill name from the bracket pair.
        outcome: Classified outcome.
        label: Outcome label exactly as it appeared in the transcript.
    """

    participant: str
    skill: str
    outcome: OutcomeKind
    label: str = ""


# ============================================================================
# Aggregation Domain
# ============================================================================


@dataclass
class ParticipantStats:
    """Running totals for one participant."""

    total_rolls: int = 0
    total_success: int = 0
    total_critical: int = 0
    total_fumble: int = 0
    critical_skills: dict[str, int] = field(default_factory=dict)
    fumble_skills: dict[str, int] = field(default_factory=dict)


AggregationResult: TypeAlias = dict[str, ParticipantStats]
