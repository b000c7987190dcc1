"""Syntax validation for fix output.

The autofix pipeline re-validates every fixed text before feeding it to
the next pass. Validation never raises for malformed input: a rejected
text is described by a SyntaxFault value.

References:
- Python language reference, "Lexical analysis" and "Full grammar"
"""

import ast
import logging
from dataclasses import dataclass

from lintfuzz.constants import PARSE_ERROR_PREFIX
from lintfuzz.diagnostics import Diagnostic
from lintfuzz.enums import Severity

__all__ = [
    "PythonSyntaxValidator",
    "SyntaxFault",
    "build_parse_diagnostic",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SyntaxFault:
    """Parser rejection of a text.

    Attributes:
        message: Parser message (e.g., "invalid syntax")
        line: 1-based line reported by the parser
        column: Column reported by the parser (1-based, as CPython reports it)
    """

    message: str
    line: int
    column: int

    @classmethod
    def from_exception(cls, error: Exception) -> "SyntaxFault":
        """Build a fault from a parser exception.

        ValueError covers null bytes on interpreters that do not report
        them as SyntaxError; RecursionError and MemoryError cover inputs
        nested too deeply for the parser.
        """
        if isinstance(error, SyntaxError):
            return cls(
                message=error.msg or "invalid syntax",
                line=error.lineno or 1,
                column=error.offset or 0,
            )
        return cls(message=str(error) or type(error).__name__, line=1, column=0)


def build_parse_diagnostic(fault: SyntaxFault) -> Diagnostic:
    """Synthesize the fatal diagnostic describing a parse failure.

    Args:
        fault: Parser rejection

    Returns:
        Diagnostic with no rule, fatal=True, error severity and a
        ``"Parsing error: "`` prefixed message

    Example:
        >>> build_parse_diagnostic(SyntaxFault("invalid syntax", 1, 6)).to_dict()
        {'ruleId': None, 'fatal': True, 'severity': 2, 'message': 'Parsing error: invalid syntax',
         'line': 1, 'column': 6, 'nodeType': None}
    """
    return Diagnostic(
        rule_id=None,
        fatal=True,
        severity=Severity.ERROR,
        message=PARSE_ERROR_PREFIX + fault.message,
        line=fault.line,
        column=fault.column,
        node_type=None,
    )


class PythonSyntaxValidator:
    """Syntax validator backed by the CPython parser.

    Thread-safe validator with no mutable instance state.

    Usage:
        validator = PythonSyntaxValidator()
        fault = validator.validate(text)
        if fault is not None:
            print(f"{fault.line}:{fault.column} {fault.message}")
    """

    __slots__ = ()

    def validate(self, text: str) -> SyntaxFault | None:
        """Validate text as a Python module.

        Args:
            text: Source text

        Returns:
            None if text parses, otherwise the SyntaxFault
        """
        try:
            ast.parse(text)
        except (SyntaxError, ValueError, RecursionError, MemoryError) as e:
            fault = SyntaxFault.from_exception(e)
            logger.debug("Rejected text at %d:%d: %s", fault.line, fault.column, fault.message)
            return fault
        return None

    def __repr__(self) -> str:
        return "PythonSyntaxValidator()"
