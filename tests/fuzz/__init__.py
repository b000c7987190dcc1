"""Fuzz testing for lintfuzz's own analyzer.

This package contains:
- test_builtin_rules_property: Built-in rules must survive the fuzz driver

Tests here are skipped unless pytest runs with -m fuzz.

Python 3.13+.
"""
