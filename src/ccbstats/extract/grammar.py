"""Roll-announcement grammar for CCB skill checks.

The dice bot announces a check as, for example:

    CCB<=60 【目星】 (1D100<=60) ＞ 3 ＞ 決定的成功/スペシャル

As a token sequence:

    MARKER  "CCB<="
    SKILL   "【" <anything but "】"> "】"
    SEP     "＞"
    TARGET  ASCII digits (the rolled value)
    SEP     "＞"
    LABEL   one outcome label from OUTCOME_LABELS

Arbitrary text may sit between tokens and around the whole sequence;
the search is non-anchored and does not cross line breaks outside the
skill bracket.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ccbstats.models.domain import OutcomeKind

LABEL_CRITICAL_SPECIAL = "決定的成功/スペシャル"
LABEL_CRITICAL_SPECIAL_WIDE = "決定的成功／スペシャル"
LABEL_CRITICAL = "決定的成功"
LABEL_SPECIAL = "スペシャル"
LABEL_FUMBLE = "致命的失敗"
LABEL_SUCCESS = "成功"
LABEL_FAILURE = "失敗"

# Longest label first within each prefix family
OUTCOME_LABELS: dict[str, OutcomeKind] = {
    LABEL_CRITICAL_SPECIAL: "critical",
    LABEL_CRITICAL_SPECIAL_WIDE: "critical",
    LABEL_CRITICAL: "critical",
    LABEL_SPECIAL: "special",
    LABEL_FUMBLE: "fumble",
    LABEL_SUCCESS: "success",
    LABEL_FAILURE: "failure",
}

ROLL_PATTERN = re.compile(
    r"CCB<=.*?"
    r"【(?P<skill>[^】]+)】"
    r".*?＞\s*[0-9]+\s*＞\s*"
    r"(?P<label>" + "|".join(re.escape(label) for label in OUTCOME_LABELS) + r")"
)


@dataclass(frozen=True)
class RollMatch:
    """Skill and outcome label pulled out of one roll announcement."""

    skill: str
    label: str


def match_roll(content: str) -> RollMatch | None:
    """Search roll content for a CCB announcement.

    Args:
        content: Text of the last fragment of a log entry.

    Returns:
        RollMatch with trimmed skill and label, or None if nothing matched.
    """
    match = ROLL_PATTERN.search(content)
    if match is None:
        return None
    return RollMatch(
        skill=match.group("skill").strip(),
        label=match.group("label").strip(),
    )


def classify_label(label: str) -> OutcomeKind | None:
    """Map a raw outcome label to its OutcomeKind.

    Returns None for labels outside the vocabulary.
    """
    return OUTCOME_LABELS.get(label)
