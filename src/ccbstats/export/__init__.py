"""Presentation helpers that consume an AggregationResult.

- export/report.py    - display-ready per-participant reports
- export/clipboard.py - plain-text templates for copying
"""
