"""Diagnostic system for lintfuzz.

Provides analysis findings, text edits, the exception hierarchy, and
failure report formatting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, TextEdit
from .errors import (
    AnalyzerFault,
    ConfigurationError,
    LintFuzzError,
    RuleDefinitionError,
)
from .formatter import FailureFormatter

__all__ = [
    "AnalyzerFault",
    "ConfigurationError",
    "Diagnostic",
    "FailureFormatter",
    "LintFuzzError",
    "RuleDefinitionError",
    "TextEdit",
]
