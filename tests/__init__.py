"""
Test suite for ratiomath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
