"""
Test suite for the fixed-point time-series toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
