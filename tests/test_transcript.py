"""Tests for the transcript event extractor."""

import types
from html import escape

from builders import CRITICAL, FAILURE, FUMBLE, SUCCESS, entry, roll, transcript

from ccbstats.extract.transcript import (
    extract_events,
    has_content_elements,
    normalize_name,
    parse_markup,
)
from ccbstats.models.domain import RollEvent


def events_for(html: str, **kwargs) -> list[RollEvent]:
    return list(extract_events(parse_markup(html), **kwargs))


class TestNormalizeName:
    """Test speaker name normalization."""

    def test_collapses_and_trims(self):
        assert normalize_name("  Alice \n   Smith\t") == "Alice Smith"

    def test_full_width_space_collapsed(self):
        assert normalize_name("探索者　　太郎") == "探索者 太郎"


class TestExtractEvents:
    """Test event extraction from parsed transcripts."""

    def test_session_yields_events_in_document_order(self, session_html):
        events = events_for(session_html)
        assert [(e.participant, e.skill, e.outcome) for e in events] == [
            ("Alice", "目星", "critical"),
            ("Alice", "図書館", "success"),
            ("Alice", "目星", "failure"),
            ("Bob", "聞き耳", "fumble"),
        ]

    def test_raw_label_is_kept(self):
        events = events_for(transcript(entry("Alice", CRITICAL)))
        assert events[0].label == "決定的成功/スペシャル"

    def test_returns_lazy_iterator(self):
        """Extraction is a generator, not a materialized list."""
        result = extract_events(parse_markup(transcript(entry("Alice", SUCCESS))))
        assert isinstance(result, types.GeneratorType)
        assert len(list(result)) == 1
        assert list(result) == []

    def test_default_ignored_speakers_skipped(self):
        html = transcript(entry("KP", CRITICAL), entry("system", FUMBLE))
        assert events_for(html) == []

    def test_ignore_is_case_sensitive(self):
        events = events_for(transcript(entry("kp", SUCCESS)))
        assert [e.participant for e in events] == ["kp"]

    def test_custom_ignore_list_replaces_default(self):
        html = transcript(entry("KP", SUCCESS), entry("GM", SUCCESS))
        events = events_for(html, ignored_participants={"GM"})
        assert [e.participant for e in events] == ["KP"]

    def test_fewer_than_two_fragments_skipped(self):
        html = transcript(
            "<p><span>CCB&lt;=60 【目星】 ＞ 42 ＞ 成功</span></p>",
            "<p>no spans at all</p>",
        )
        assert events_for(html) == []

    def test_uses_last_two_fragments(self):
        """Leading fragments such as tab names are ignored."""
        html = transcript(
            "<p><span>[info]</span><span>extra</span><span>Carol</span>"
            f"<span>{escape(SUCCESS)}</span></p>"
        )
        events = events_for(html)
        assert [e.participant for e in events] == ["Carol"]

    def test_exactly_two_fragments(self):
        html = transcript(f"<p><span>Dave</span><span>{escape(FAILURE)}</span></p>")
        assert events_for(html)[0].participant == "Dave"

    def test_speaker_whitespace_normalized(self):
        html = transcript(entry("  Alice \n  Smith ", SUCCESS))
        assert events_for(html)[0].participant == "Alice Smith"

    def test_blank_speaker_skipped(self):
        assert events_for(transcript(entry("   ", SUCCESS))) == []

    def test_blank_skill_skipped(self):
        html = transcript(entry("Alice", "CCB<=60 【  】 (1D100<=60) ＞ 42 ＞ 成功"))
        assert events_for(html) == []

    def test_skill_trimmed(self):
        html = transcript(entry("Alice", roll(" 目星 ", 10, "成功")))
        assert events_for(html)[0].skill == "目星"

    def test_non_roll_entries_skipped(self):
        html = transcript(
            entry("Alice", "こんにちは"),
            entry("Alice", "1D100 ＞ 42"),
            entry("Alice", "CCB<=60 【目星】"),
        )
        assert events_for(html) == []

    def test_bare_special_emitted(self):
        events = events_for(transcript(entry("Alice", roll("目星", 10, "スペシャル"))))
        assert events[0].outcome == "special"

    def test_markup_inside_content_fragment(self):
        """Content text is read through nested inline markup."""
        html = transcript(
            "<p><span>Alice</span>"
            "<span>CCB&lt;=60 【<b>目星</b>】 (1D100&lt;=60) ＞ 3 ＞ 決定的成功</span></p>"
        )
        events = events_for(html)
        assert [(e.skill, e.outcome) for e in events] == [("目星", "critical")]

    def test_unclosed_entries_end_at_next_entry(self):
        """An unclosed <p> does not swallow the following entry's fragments."""
        html = transcript(
            f"<p><span>Alice</span><span>{escape(SUCCESS)}</span>",
            f"<p><span>Alice</span><span>{escape(CRITICAL)}</span>",
        )
        events = events_for(html)
        assert [(e.participant, e.outcome) for e in events] == [
            ("Alice", "success"),
            ("Alice", "critical"),
        ]


class TestHasContentElements:
    """Test detection of real markup beyond the document scaffold."""

    def test_plain_text_has_none(self):
        assert not has_content_elements(parse_markup("just text"))

    def test_empty_document_has_none(self):
        assert not has_content_elements(parse_markup(""))

    def test_paragraph_counts(self):
        assert has_content_elements(parse_markup("<p>hello</p>"))
