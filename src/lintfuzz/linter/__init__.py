"""Reference analyzer: rule protocol, registry, fixer, and Linter.

Exports:
    Linter - Rule-based analyzer for Python source
    FixResult - Outcome of one analyze-and-fix pass
    Rule, RuleMeta, RuleContext, Fixer - Rule authoring API
    RuleRegistry - Rule id to Rule class mapping
    create_default_registry, get_shared_registry - Built-in rule registries
    apply_fixes, FixOutcome - Fix combination

Python 3.13+.
"""

from .fixer import FixOutcome, apply_fixes
from .linter import FixResult, Linter
from .registry import RuleRegistry, create_default_registry, get_shared_registry
from .rule import Fixer, Rule, RuleContext, RuleMeta, merge_edits

__all__ = [
    "FixOutcome",
    "FixResult",
    "Fixer",
    "Linter",
    "Rule",
    "RuleContext",
    "RuleMeta",
    "RuleRegistry",
    "apply_fixes",
    "create_default_registry",
    "get_shared_registry",
    "merge_edits",
]
