"""Hypothesis strategies for lintfuzz property-based testing.

Strategies are organized by domain:

- python: Python source texts (generated programs, layout noise, chaos)
- config: Rule ids and configurations

Usage:
    from tests.strategies import python_programs, rule_configurations

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - python_programs, layout_noise_sources, python_chaos_sources
    - rule_configurations
"""

from .config import rule_configurations, rule_ids, rule_values
from .python import (
    NAMES,
    layout_noise_sources,
    none_comparisons,
    python_chaos_sources,
    python_programs,
)

__all__ = [
    "NAMES",
    "layout_noise_sources",
    "none_comparisons",
    "python_chaos_sources",
    "python_programs",
    "rule_configurations",
    "rule_ids",
    "rule_values",
]
