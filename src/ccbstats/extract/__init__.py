"""Event extraction from transcript markup.

- extract/grammar.py    - roll-announcement pattern and label classification
- extract/transcript.py - walks <p>/<span> entries and yields RollEvents
"""

from ccbstats.extract.grammar import RollMatch, classify_label, match_roll
from ccbstats.extract.transcript import (
    extract_events,
    has_content_elements,
    normalize_name,
    parse_markup,
)

__all__ = [
    "RollMatch",
    "classify_label",
    "extract_events",
    "has_content_elements",
    "match_roll",
    "normalize_name",
    "parse_markup",
]
