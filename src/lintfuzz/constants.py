"""Shared constants for lintfuzz.

Constants are grouped by domain:
- Autofix limits: Bounds on the fix-then-validate loop
- Fuzzing defaults: Values used by the CLI and the reference generator
- Rule defaults: Default options of the built-in rules
- Input limits: Size guards for replayed records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Autofix limits
    "MAX_AUTOFIX_PASSES",
    # Fuzzing defaults
    "DEFAULT_FUZZ_COUNT",
    "DEFAULT_MAX_STATEMENTS",
    "DEFAULT_MAX_DEPTH",
    # Rule defaults
    "DEFAULT_MAX_LINE_LENGTH",
    "DEFAULT_MAX_EMPTY_LINES",
    # Input limits
    "MAX_SOURCE_SIZE",
    "PARSE_ERROR_PREFIX",
]

# ============================================================================
# AUTOFIX LIMITS
# ============================================================================

# Upper bound on fix-then-validate passes per candidate.
# Fix chains that have not converged after this many passes are dropped
# without a finding: slow convergence alone is not reported as a bug.
MAX_AUTOFIX_PASSES: int = 10

# ============================================================================
# FUZZING DEFAULTS
# ============================================================================

DEFAULT_FUZZ_COUNT: int = 1000

# Reference program generator shape
DEFAULT_MAX_STATEMENTS: int = 8
DEFAULT_MAX_DEPTH: int = 3

# ============================================================================
# RULE DEFAULTS
# ============================================================================

DEFAULT_MAX_LINE_LENGTH: int = 100
DEFAULT_MAX_EMPTY_LINES: int = 2

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size of a record text accepted by `lintfuzz repro` (10 MiB)
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Prefix of synthesized parse-failure diagnostics
PARSE_ERROR_PREFIX: str = "Parsing error: "
