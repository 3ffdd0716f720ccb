"""
Test suite for complexkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
