"""Diagnostic data structures.

Defines analysis findings, text edits, and their serializable shapes.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

from lintfuzz.enums import Severity

__all__ = [
    "Diagnostic",
    "TextEdit",
]


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replacement of a half-open character range of a source text.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
        text: Replacement text

    Example:
        Source: "x == None"
        TextEdit(start=2, end=4, text="is") turns it into "x is None"
    """

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:
        """Validate range invariants."""
        if self.start < 0:
            msg = f"Edit start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Edit end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def apply(self, source: str) -> str:
        """Return source with this edit spliced in."""
        return source[: self.start] + self.text + source[self.end :]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One analysis finding or synthesized parse fault.

    Parse-level diagnostics carry no rule: ``rule_id is None`` exactly when
    ``fatal`` is True.

    Attributes:
        rule_id: Reporting rule, or None for parse failures
        fatal: True for parse failures
        severity: Severity of the finding
        message: Human-readable message
        line: 1-based line number
        column: Column number (0-based for rule findings, as reported by
            the parser for parse failures)
        node_type: AST node type the finding is attached to (optional)
        end_line: 1-based end line (optional)
        end_column: End column (optional)
        fix: Suggested edit (optional)
    """

    rule_id: str | None
    fatal: bool
    severity: Severity
    message: str
    line: int
    column: int
    node_type: str | None = None
    end_line: int | None = None
    end_column: int | None = None
    fix: TextEdit | None = None

    def __post_init__(self) -> None:
        """Validate the rule/fatal pairing."""
        if (self.rule_id is None) != self.fatal:
            msg = (
                "Diagnostic must be fatal exactly when it has no rule id "
                f"(rule_id={self.rule_id!r}, fatal={self.fatal!r})"
            )
            raise ValueError(msg)

    @property
    def is_fixable(self) -> bool:
        """True if the finding carries a fix."""
        return self.fix is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the external camelCase shape.

        End positions are only emitted when known, so parse diagnostics
        serialize to exactly ``ruleId, fatal, severity, message, line,
        column, nodeType``.
        """
        data: dict[str, Any] = {
            "ruleId": self.rule_id,
            "fatal": self.fatal,
            "severity": int(self.severity),
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "nodeType": self.node_type,
        }
        if self.end_line is not None:
            data["endLine"] = self.end_line
        if self.end_column is not None:
            data["endColumn"] = self.end_column
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Diagnostic":
        """Parse the external shape produced by to_dict().

        Raises:
            ValueError: If a field has the wrong type or the rule/fatal
                pairing is invalid
        """
        try:
            end_line = data.get("endLine")
            end_column = data.get("endColumn")
            return cls(
                rule_id=data.get("ruleId"),
                fatal=bool(data.get("fatal", False)),
                severity=Severity.parse(data.get("severity", Severity.ERROR)),
                message=str(data.get("message", "")),
                line=int(data.get("line", 1)),
                column=int(data.get("column", 0)),
                node_type=data.get("nodeType"),
                end_line=int(end_line) if end_line is not None else None,
                end_column=int(end_column) if end_column is not None else None,
            )
        except TypeError as e:
            msg = f"Malformed diagnostic: {e}"
            raise ValueError(msg) from e
