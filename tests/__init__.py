"""
Test suite for rangekit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
