"""Display-ready reports built from aggregated statistics."""

from __future__ import annotations

from typing import Iterable

from ccbstats.aggregation.summary import (
    critical_rate,
    format_rate,
    fumble_rate,
    rank_participants,
    sorted_skill_counts,
    success_rate,
)
from ccbstats.models.domain import AggregationResult, ParticipantStats
from ccbstats.models.types import ParticipantReport, SkillCount

# Shown by renderers in place of an empty skill list
NONE_PLACEHOLDER = "なし"


def _skill_counts(skills: dict[str, int]) -> list[SkillCount]:
    return [SkillCount(skill=skill, count=count) for skill, count in sorted_skill_counts(skills)]


def build_report(name: str, stats: ParticipantStats) -> ParticipantReport:
    """Build the report for one participant.

    Args:
        name: Participant name.
        stats: Aggregated statistics.

    Returns:
        ParticipantReport with formatted rates and sorted skill lists.
    """
    return ParticipantReport(
        name=name,
        total_rolls=stats.total_rolls,
        total_success=stats.total_success,
        total_critical=stats.total_critical,
        total_fumble=stats.total_fumble,
        fumble_rate=format_rate(fumble_rate(stats)),
        critical_rate=format_rate(critical_rate(stats)),
        success_rate=format_rate(success_rate(stats)),
        critical_skills=_skill_counts(stats.critical_skills),
        fumble_skills=_skill_counts(stats.fumble_skills),
    )


def build_reports(
    result: AggregationResult,
    names: Iterable[str] | None = None,
) -> list[ParticipantReport]:
    """Build reports ordered by total_rolls, highest first."""
    return [build_report(name, stats) for name, stats in rank_participants(result, names)]
