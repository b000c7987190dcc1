"""lintfuzz exception hierarchy.

All exceptions optionally store a Diagnostic for structured error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "AnalyzerFault",
    "ConfigurationError",
    "LintFuzzError",
    "RuleDefinitionError",
]


class LintFuzzError(Exception):
    """Base exception for all lintfuzz errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LintFuzzError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class AnalyzerFault(LintFuzzError):
    """Uncaught fault from rule evaluation or fix application.

    Raised by the reference Linter with the original exception chained as
    ``__cause__``. Pipelines catch it (and any other Exception raised by an
    analyzer) and turn it into a crash fault.

    Attributes:
        rule_id: Rule that was running when the fault occurred (optional)
    """

    def __init__(self, message: str | Diagnostic, *, rule_id: str | None = None) -> None:
        """Initialize AnalyzerFault.

        Args:
            message: Error message string OR Diagnostic object
            rule_id: Rule that raised
        """
        super().__init__(message)
        self.rule_id = rule_id


class ConfigurationError(LintFuzzError):
    """Malformed rule configuration.

    Examples:
    - Unknown severity keyword
    - Option list without a leading severity
    - ``rules`` that is not a mapping
    """


class RuleDefinitionError(LintFuzzError):
    """Invalid rule registration.

    Examples:
    - Empty or non-string rule id
    - Registering an id twice
    - Registering something that is not a Rule subclass
    """
