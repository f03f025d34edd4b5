"""Event extractor for saved dice-bot transcripts.

Each log entry is a <p> whose <span> fragments end with the speaker name
followed by the message body. Entries that do not look like a roll are
skipped silently; transcripts are mostly chat and system notices.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, Tag

from ccbstats.config import DEFAULT_IGNORED_PARTICIPANTS
from ccbstats.extract.grammar import classify_label, match_roll
from ccbstats.models.domain import RollEvent

logger = logging.getLogger(__name__)

ENTRY_TAG = "p"
FRAGMENT_TAG = "span"
# HTML5 tree construction: an unclosed <p> ends at the next <p>
HTML_PARSER = "html5lib"
DOCUMENT_SCAFFOLD = frozenset({"html", "head", "body"})


def parse_markup(markup: str) -> BeautifulSoup:
    """Parse transcript markup into a queryable tree."""
    return BeautifulSoup(markup, HTML_PARSER)


def has_content_elements(tree: BeautifulSoup) -> bool:
    """Whether the tree holds any element besides the html/head/body scaffold.

    The HTML5 builder adds the scaffold to every document, including empty
    strings and plain text.
    """
    return tree.find(lambda tag: tag.name not in DOCUMENT_SCAFFOLD) is not None


def normalize_name(text: str) -> str:
    """Collapse runs of whitespace to one space and trim."""
    return " ".join(text.split())


def iter_entries(tree: BeautifulSoup | Tag) -> Iterator[Tag]:
    """Yield log-entry nodes in document order."""
    yield from tree.find_all(ENTRY_TAG)


def entry_fragments(entry: Tag) -> list[str]:
    """Return the text of every inline fragment under an entry."""
    return [span.get_text() for span in entry.find_all(FRAGMENT_TAG)]


def extract_events(
    tree: BeautifulSoup | Tag,
    ignored_participants: Iterable[str] = DEFAULT_IGNORED_PARTICIPANTS,
) -> Iterator[RollEvent]:
    """Yield a RollEvent for every recognizable skill check in the tree.

    Speaker is the second-to-last fragment, roll content the last one.
    An entry is skipped when it has fewer than two fragments, its speaker
    is ignored or blank, its content does not match the roll grammar, or
    the matched skill is blank.

    Args:
        tree: Parsed transcript (see parse_markup).
        ignored_participants: Speaker names to exclude (exact match).

    Yields:
        RollEvent in document order.
    """
    ignored = frozenset(ignored_participants)

    for index, entry in enumerate(iter_entries(tree)):
        fragments = entry_fragments(entry)
        if len(fragments) < 2:
            continue

        participant = normalize_name(fragments[-2])
        content = fragments[-1].strip()

        if participant in ignored:
            logger.debug("entry %d: ignored speaker %r", index, participant)
            continue
        if not participant:
            logger.debug("entry %d: blank speaker", index)
            continue

        roll = match_roll(content)
        if roll is None:
            continue
        if not roll.skill:
            logger.debug("entry %d: blank skill name", index)
            continue

        outcome = classify_label(roll.label)
        if outcome is None:
            # Unreachable while the pattern and the label table share a vocabulary
            logger.warning("entry %d: unknown outcome label %r", index, roll.label)
            continue

        yield RollEvent(
            participant=participant,
            skill=roll.skill,
            outcome=outcome,
            label=roll.label,
        )
