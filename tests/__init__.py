"""
Test suite for approx

Contains:
- tests/unit/          : Unit tests for individual modules
"""
