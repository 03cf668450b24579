"""
Test suite for numcore

Contains:
- tests/unit/          : Unit and property tests for src.core.math
"""
