"""
Test suite for checked-sum

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
