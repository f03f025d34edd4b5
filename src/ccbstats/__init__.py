"""ccbstats: skill-check statistics from Call of Cthulhu dice-bot transcripts."""

__version__ = "0.1.0"
