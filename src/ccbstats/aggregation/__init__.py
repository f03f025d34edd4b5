"""Aggregation module for roll statistics.

- Folds RollEvents into per-participant ParticipantStats
- Derives rates and orderings for presentation
- Forbidden: markup parsing, text formatting
"""
