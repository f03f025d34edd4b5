"""Pydantic models for the ccbstats API.

Rates are carried as two-decimal strings, exactly as they are displayed.
"""

from typing import Literal

from pydantic import BaseModel


class SkillCount(BaseModel):
    """One skill and how often it produced the tracked outcome."""

    skill: str
    count: int


class ParticipantReport(BaseModel):
    """Display-ready statistics for one participant."""

    name: str
    total_rolls: int
    total_success: int
    total_critical: int
    total_fumble: int
    fumble_rate: str  # percent of rolls
    critical_rate: str  # percent of successes
    success_rate: str  # percent of rolls
    critical_skills: list[SkillCount]
    fumble_skills: list[SkillCount]


class AnalysisRequest(BaseModel):
    """Transcript submitted for analysis."""

    html: str
    ignored_participants: list[str] | None = None


class AnalysisResponse(BaseModel):
    """Reports for every participant, highest roll count first."""

    participants: list[ParticipantReport]
    total_rolls: int


class ExportRequest(BaseModel):
    """Transcript plus what to copy.

    mode "single" copies the participant given by name with the detailed
    template; mode "all" copies every displayed participant (participants,
    or everyone when null) with the combined template.
    """

    html: str
    ignored_participants: list[str] | None = None
    mode: Literal["single", "all"] = "all"
    name: str | None = None
    participants: list[str] | None = None


class ExportResponse(BaseModel):
    """Plain text ready for the clipboard."""

    text: str
