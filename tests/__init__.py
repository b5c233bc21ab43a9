"""
Test suite for uncontrolled-number

Contains:
- tests/unit/          : Unit tests for individual modules
"""
