"""Plain-text summaries for copying to the clipboard.

Two templates: a detailed one for a single participant, and a compact
one used when every displayed participant is copied at once.
"""

from __future__ import annotations

from typing import Iterable

from ccbstats.aggregation.summary import (
    format_rate,
    rank_participants,
    sorted_skill_counts,
    success_rate,
)
from ccbstats.core.errors import NoDataFound
from ccbstats.models.domain import AggregationResult, ParticipantStats

RULE = "-" * 20
SKILL_INDENT = "　"  # full-width space
EMPTY_SKILLS = "（なし）"
ALL_HEADER_MARK = "◆"


def format_skills(skills: dict[str, int]) -> str:
    """Render skill counts one per line, sorted by skill name.

    Lines after the first carry the full-width indent; the template
    supplies the indent for the first line.
    """
    lines = [f"{skill}: {count}回" for skill, count in sorted_skill_counts(skills)]
    if not lines:
        return EMPTY_SKILLS
    return f"\n{SKILL_INDENT}".join(lines)


def _skill_sections(stats: ParticipantStats) -> str:
    return (
        "クリティカルした技能:\n"
        f"{SKILL_INDENT}{format_skills(stats.critical_skills)}\n"
        "\n"
        "ファンブルした技能:\n"
        f"{SKILL_INDENT}{format_skills(stats.fumble_skills)}"
    )


def _rolls_line(stats: ParticipantStats) -> str:
    return f"判定合計: {stats.total_rolls}回 (成功率: {format_rate(success_rate(stats))}%)"


def format_participant(name: str, stats: ParticipantStats) -> str:
    """Format one participant's statistics.

    Args:
        name: Participant name.
        stats: Aggregated statistics.

    Returns:
        Multi-line text block.
    """
    return (
        f"{name}\n"
        f"{RULE}\n"
        f"{_rolls_line(stats)}\n"
        f"クリティカル合計: {stats.total_critical}回\n"
        f"ファンブル合計: {stats.total_fumble}回\n"
        "\n"
        f"{_skill_sections(stats)}"
    )


def _format_compact(name: str, stats: ParticipantStats) -> str:
    return (
        f"{ALL_HEADER_MARK} {name}\n"
        f"{RULE}\n"
        f"{_rolls_line(stats)}\n"
        f"クリティカル: {stats.total_critical}回 / ファンブル: {stats.total_fumble}回\n"
        "\n"
        f"{_skill_sections(stats)}"
    )


def format_all(
    result: AggregationResult,
    displayed: Iterable[str] | None = None,
) -> str:
    """Format every displayed participant, highest roll count first.

    Args:
        result: Aggregated statistics.
        displayed: Names still shown to the user; None means all of result.

    Returns:
        Blocks separated by blank lines.

    Raises:
        NoDataFound: Nothing left to format.
    """
    ranked = rank_participants(result, displayed)
    if not ranked:
        raise NoDataFound("No participant statistics to export")

    blocks = [_format_compact(name, stats) for name, stats in ranked]
    return "\n\n\n".join(blocks).strip()
