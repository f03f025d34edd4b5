"""API module for ccbstats.

- Validates transcript payloads
- Runs the analysis engine and returns reports or export text
- Forbidden: persistence, cross-request state
"""
