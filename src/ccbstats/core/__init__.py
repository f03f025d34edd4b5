"""Engine entry point and error taxonomy.

- core/engine.py - parse, extract and aggregate one transcript
- core/errors.py - ParseFailure / NoDataFound
"""
