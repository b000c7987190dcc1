"""Collaborator protocols of the fuzz harness.

The harness core depends only on these structural types, never on the
reference Linter. Any object with matching methods can be fuzzed.

Python 3.13+.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, TypeAlias, runtime_checkable

from lintfuzz.configuration import Configuration
from lintfuzz.diagnostics import Diagnostic
from lintfuzz.syntax import SyntaxFault

__all__ = [
    "Analyzer",
    "FixResultLike",
    "ProgramGenerator",
    "RuleSource",
    "SyntaxChecker",
]

# Returns one candidate text per call
ProgramGenerator: TypeAlias = Callable[[], str]


class FixResultLike(Protocol):
    """Result of one analyze-and-fix pass.

    ``fixed_text`` is None when no fix changed the text.
    """

    @property
    def fixed_text(self) -> str | None: ...


@runtime_checkable
class Analyzer(Protocol):
    """Rule-based analyzer under test."""

    def analyze(self, text: str, config: Configuration) -> Sequence[Diagnostic]: ...

    def analyze_and_fix(self, text: str, config: Configuration) -> FixResultLike: ...


@runtime_checkable
class RuleSource(Protocol):
    """Provider of the maximal configuration."""

    def get_full_configuration(self) -> Configuration: ...


@runtime_checkable
class SyntaxChecker(Protocol):
    """Validator of fix output. Returns None when the text is valid."""

    def validate(self, text: str) -> SyntaxFault | None: ...
