"""
Test suite for mpcalc

Contains:
- tests/unit/          : Unit tests for individual modules and the shell
"""
