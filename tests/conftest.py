"""Shared pytest fixtures for ccbstats tests."""

import pytest

from builders import CRITICAL, FUMBLE, entry, roll, transcript


@pytest.fixture
def session_html() -> str:
    """A short session with chat, system notices and rolls."""
    return transcript(
        entry("KP", "それでは始めます"),
        entry("system", "[ Alice ] SAN : 60 → 59"),
        entry("Alice", CRITICAL),
        entry("Alice", roll("図書館", 20, "成功", target=70)),
        entry("Alice", roll("目星", 88, "失敗", target=60)),
        entry("Bob", FUMBLE),
        entry("Bob", "いやな予感がする"),
        entry("KP", roll("幸運", 1, "決定的成功")),
        "<p><span>lonely fragment</span></p>",
    )
