"""
Test suite for fn_math

Contains:
- tests/unit/          : Unit tests for individual modules
"""
