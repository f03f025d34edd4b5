"""Data models for ccbstats.

- models/domain.py - dataclasses used by the engine
- models/types.py  - pydantic models for the API boundary
"""
