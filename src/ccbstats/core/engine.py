"""Analysis engine: transcript markup in, per-participant statistics out.

This module is the thin orchestrator that:
1. Parses markup into a tree
2. Extracts RollEvents lazily
3. Folds them into an AggregationResult
"""

from __future__ import annotations

import logging
from typing import Iterable

from ccbstats.aggregation.summary import aggregate_events
from ccbstats.config import load_settings
from ccbstats.core.errors import NoDataFound, ParseFailure
from ccbstats.extract.transcript import extract_events, has_content_elements, parse_markup
from ccbstats.models.domain import AggregationResult

logger = logging.getLogger(__name__)


def _decode(markup: str | bytes) -> str:
    if isinstance(markup, bytes):
        try:
            return markup.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseFailure(f"Transcript is not valid UTF-8: {e}") from e
    if not isinstance(markup, str):
        raise ParseFailure(f"Expected transcript text, got {type(markup).__name__}")
    return markup


def analyze_transcript(
    markup: str | bytes,
    ignored_participants: Iterable[str] | None = None,
) -> AggregationResult:
    """Compute per-participant roll statistics for one transcript.

    A document with no recognizable rolls yields an empty mapping; use
    require_data() to turn that into NoDataFound.

    Args:
        markup: HTML transcript text (bytes are decoded as UTF-8).
        ignored_participants: Speakers to exclude. Defaults to the
            configured set (CCBSTATS_IGNORED_PARTICIPANTS).

    Returns:
        Mapping of participant name to ParticipantStats.

    Raises:
        ParseFailure: Input is not markup, or the run failed unexpectedly.
    """
    text = _decode(markup)

    if ignored_participants is None:
        ignored_participants = load_settings().ignored_participants

    try:
        tree = parse_markup(text)
    except Exception as e:
        logger.exception("Failed to parse transcript markup")
        raise ParseFailure(f"Failed to parse transcript: {e}") from e

    if not has_content_elements(tree):
        raise ParseFailure("Transcript contains no markup elements")

    try:
        result = aggregate_events(extract_events(tree, ignored_participants))
    except Exception as e:
        logger.exception("Transcript analysis failed")
        raise ParseFailure(f"Transcript analysis failed: {e}") from e

    logger.info(
        "Analyzed transcript: %d participants, %d rolls",
        len(result),
        sum(stats.total_rolls for stats in result.values()),
    )
    return result


def require_data(result: AggregationResult) -> AggregationResult:
    """Return result unchanged, or raise NoDataFound if it is empty."""
    if not result:
        raise NoDataFound("No CCB rolls found in transcript")
    return result
