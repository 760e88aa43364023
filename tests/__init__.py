"""
Test suite for the Strassen multiplier

Contains:
- tests/unit/          : Unit tests for individual modules
"""
