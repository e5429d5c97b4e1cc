"""
Test suite for statcore

Contains:
- tests/unit/          : Unit tests for individual modules
"""
