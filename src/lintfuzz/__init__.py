"""lintfuzz - Fuzz testing for rule-based static analyzers.

Feeds generated source texts through an analyzer with every rule enabled,
detects rule crashes and fixes that break syntax, and reduces the rule set
of every failure to a 1-minimal reproducer.

Public API:
    fuzz - Run a fuzz session and return FailureRecords
    Fuzzer - Reusable driver with run statistics
    FailureRecord - One reported bug (serializable)
    Configuration - Immutable rule configuration
    Linter - Reference analyzer for Python source
    ProgramGenerator - Reference generator of Python programs

Exceptions:
    LintFuzzError - Base exception class
    AnalyzerFault - A rule raised during analysis or fixing
    ConfigurationError - Malformed rule configuration
    RuleDefinitionError - Invalid rule registration

Submodules:
    lintfuzz.fuzzer - Driver, pipelines, reducer, reporter, protocols
    lintfuzz.linter - Rule API, registry, fixer
    lintfuzz.rules - Built-in rules
    lintfuzz.syntax - Source handling and syntax validation
    lintfuzz.diagnostics - Diagnostics, errors and report formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .configuration import Configuration, RuleConfig
from .diagnostics import (
    AnalyzerFault,
    ConfigurationError,
    Diagnostic,
    LintFuzzError,
    RuleDefinitionError,
)
from .enums import FaultKind, Severity
from .fuzzer import FailureRecord, Fuzzer, fuzz
from .generation import ProgramGenerator
from .linter import Linter

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("lintfuzz")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnalyzerFault",
    "Configuration",
    "ConfigurationError",
    "Diagnostic",
    "FailureRecord",
    "FaultKind",
    "Fuzzer",
    "LintFuzzError",
    "Linter",
    "ProgramGenerator",
    "RuleConfig",
    "RuleDefinitionError",
    "Severity",
    "__version__",
    "fuzz",
]
