#!/usr/bin/env python3
"""Summarize CCB skill checks in a saved transcript.

Usage:
    python scripts/analyze_log.py session.html
    python scripts/analyze_log.py session.html --ignore KP --ignore GM
    python scripts/analyze_log.py session.html --copy-text

Exit codes:
    0: Statistics printed
    1: File unreadable, not markup, or no rolls found
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from ccbstats.config import configure_logging  # noqa: E402
from ccbstats.core.engine import analyze_transcript, require_data  # noqa: E402
from ccbstats.core.errors import AnalysisError  # noqa: E402
from ccbstats.export.clipboard import format_all  # noqa: E402
from ccbstats.export.report import NONE_PLACEHOLDER, build_reports  # noqa: E402
from ccbstats.models.types import ParticipantReport, SkillCount  # noqa: E402

logger = logging.getLogger("analyze_log")


def _skill_lines(skills: list[SkillCount]) -> list[str]:
    if not skills:
        return [f"    {NONE_PLACEHOLDER}"]
    return [f"    {s.skill}: {s.count} 回" for s in skills]


def print_report(report: ParticipantReport) -> None:
    """Print one participant's report."""
    print(report.name)
    print(f"  判定合計: {report.total_rolls} 回")
    print(f"  クリティカル合計: {report.total_critical} 回")
    print(f"  ファンブル合計: {report.total_fumble} 回")
    print(f"  ファンブル確率: {report.fumble_rate} %")
    print(f"  クリティカル確率（成功内）: {report.critical_rate} %")
    print(f"  平均成功確率: {report.success_rate} %")
    print("  クリティカルした技能:")
    for line in _skill_lines(report.critical_skills):
        print(line)
    print("  ファンブルした技能:")
    for line in _skill_lines(report.fumble_skills):
        print(line)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("transcript", type=Path, help="Saved HTML transcript")
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        help="Speaker to exclude (repeatable; default from CCBSTATS_IGNORED_PARTICIPANTS)",
    )
    parser.add_argument(
        "--copy-text",
        action="store_true",
        help="Print the combined clipboard text instead of the report",
    )
    args = parser.parse_args()

    configure_logging()

    try:
        markup = args.transcript.read_bytes()
    except OSError as e:
        logger.error("Could not read %s: %s", args.transcript, e)
        return 1

    try:
        result = require_data(analyze_transcript(markup, args.ignore))
    except AnalysisError as e:
        logger.error("%s: %s", args.transcript, e)
        return 1

    if args.copy_text:
        print(format_all(result))
        return 0

    for index, report in enumerate(build_reports(result)):
        if index:
            print()
        print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
