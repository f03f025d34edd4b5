"""Errors surfaced by the analysis engine."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for engine errors."""


class ParseFailure(AnalysisError):
    """Input could not be interpreted as markup, or the run failed unexpectedly."""


class NoDataFound(AnalysisError):
    """Parsing succeeded but no recognizable roll was found."""
