"""
Test suite for bigdecimalint

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
