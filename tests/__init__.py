"""
Test suite for lang-tour

Contains:
- tests/unit/          : Unit tests for individual modules
"""
