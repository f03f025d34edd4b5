"""Per-participant roll statistics.

Folds extracted RollEvents into ParticipantStats and derives the rates
shown to users. Domain logic is pure: no I/O, no shared state.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ccbstats.models.domain import AggregationResult, ParticipantStats, RollEvent

logger = logging.getLogger(__name__)


def record_event(stats: ParticipantStats, event: RollEvent) -> None:
    """Apply one event to a participant's running totals.

    Every event counts as a roll. Criticals also count as successes;
    failures and bare specials add nothing beyond the roll.

    Args:
        stats: Totals to mutate in place.
        event: Classified roll.
    """
    stats.total_rolls += 1

    if event.outcome == "critical":
        stats.total_critical += 1
        stats.total_success += 1
        stats.critical_skills[event.skill] = stats.critical_skills.get(event.skill, 0) + 1
    elif event.outcome == "fumble":
        stats.total_fumble += 1
        stats.fumble_skills[event.skill] = stats.fumble_skills.get(event.skill, 0) + 1
    elif event.outcome == "success":
        stats.total_success += 1
    # "failure" and "special" only count toward total_rolls


def aggregate_events(events: Iterable[RollEvent]) -> AggregationResult:
    """Fold roll events into per-participant statistics.

    Args:
        events: RollEvents in extraction order.

    Returns:
        Fresh mapping of participant name to ParticipantStats.
    """
    result: AggregationResult = {}

    for event in events:
        stats = result.get(event.participant)
        if stats is None:
            stats = ParticipantStats()
            result[event.participant] = stats
        record_event(stats, event)

    return result


# ============================================================================
# Derived metrics
# ============================================================================


def _percent(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator * 100


def fumble_rate(stats: ParticipantStats) -> float:
    """Fumbles as a percentage of all rolls."""
    return _percent(stats.total_fumble, stats.total_rolls)


def critical_rate(stats: ParticipantStats) -> float:
    """Criticals as a percentage of successes."""
    return _percent(stats.total_critical, stats.total_success)


def success_rate(stats: ParticipantStats) -> float:
    """Successes (criticals included) as a percentage of all rolls."""
    return _percent(stats.total_success, stats.total_rolls)


def format_rate(value: float) -> str:
    """Render a percentage with two decimal places."""
    return f"{value:.2f}"


# ============================================================================
# Ordering
# ============================================================================


def rank_participants(
    result: AggregationResult,
    names: Iterable[str] | None = None,
) -> list[tuple[str, ParticipantStats]]:
    """Order participants by total_rolls, highest first.

    The sort is stable, so ties keep their input order.

    Args:
        result: Aggregated statistics.
        names: Optional subset to rank (e.g. blocks still on screen).
            Names missing from result are skipped.

    Returns:
        List of (name, stats) pairs.
    """
    if names is None:
        selected = list(result.items())
    else:
        selected = []
        for name in names:
            stats = result.get(name)
            if stats is None:
                logger.warning("No statistics for participant %r", name)
                continue
            selected.append((name, stats))

    return sorted(selected, key=lambda item: item[1].total_rolls, reverse=True)


def sorted_skill_counts(skills: dict[str, int]) -> list[tuple[str, int]]:
    """Return (skill, count) pairs ordered by skill name."""
    return sorted(skills.items())
