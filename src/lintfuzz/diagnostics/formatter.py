"""Failure report formatting service.

Centralizes output formatting of diagnostics and failure records with
configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lintfuzz.enums import FaultKind, OutputFormat, Severity

from .codes import Diagnostic

if TYPE_CHECKING:
    from lintfuzz.fuzzer.reporter import FailureRecord

__all__ = ["FailureFormatter"]


@dataclass(frozen=True, slots=True)
class FailureFormatter:
    """Failure report formatting service.

    Attributes:
        output_format: Output style (text, json)
        truncate: Shorten long candidate texts and tracebacks
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when truncating

    Example:
        >>> formatter = FailureFormatter()
        >>> print(formatter.format_diagnostic(parse_diagnostic))
        error[parse]: Parsing error: invalid syntax
          --> line 1, column 6

        >>> formatter = FailureFormatter(output_format=OutputFormat.JSON)
        >>> print(formatter.format(record))
        {"type": "autofix", "text": "...", "config": {...}, "error": {...}}
    """

    output_format: OutputFormat = OutputFormat.TEXT
    truncate: bool = False
    color: bool = False
    max_content_length: int = 500

    def format(self, record: "FailureRecord") -> str:
        """Format a single failure record."""
        match self.output_format:
            case OutputFormat.TEXT:
                return self._format_text(record)
            case OutputFormat.JSON:
                import json  # noqa: PLC0415

                return json.dumps(record.to_dict(), ensure_ascii=False)

    def format_all(self, records: Iterable["FailureRecord"]) -> str:
        """Format multiple records.

        Text output separates records with blank lines; JSON output is a
        single indented array.
        """
        if self.output_format is OutputFormat.JSON:
            import json  # noqa: PLC0415

            return json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)
        return "\n\n".join(self._format_text(r) for r in records)

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        """Format a diagnostic in compiler style.

        Example output:
            error[eol-last]: Newline required at end of file but not found.
              --> line 3, column 7
        """
        severity = "warning" if diagnostic.severity is Severity.WARN else "error"
        if self.color:
            code = "1;33" if severity == "warning" else "1;31"
            severity = f"\033[{code}m{severity}\033[0m"
        rule = diagnostic.rule_id if diagnostic.rule_id is not None else "parse"
        return (
            f"{severity}[{rule}]: {diagnostic.message}\n"
            f"  --> line {diagnostic.line}, column {diagnostic.column}"
        )

    def _format_text(self, record: "FailureRecord") -> str:
        """Format a record as a multi-line report.

        Example output:
            autofix failure (rules: prefer-is-none=2)
            --- text ---
            ...
            --- error ---
            error[parse]: Parsing error: invalid syntax
              --> line 1, column 6
        """
        rules = ", ".join(
            f"{rule_id}={value}" if isinstance(value, int) else f"{rule_id}={value!r}"
            for rule_id, value in record.config.to_dict()["rules"].items()
        )
        if record.type is FaultKind.AUTOFIX and isinstance(record.error, Diagnostic):
            error = self.format_diagnostic(record.error)
        else:
            error = self._maybe_truncate(str(record.error)).rstrip("\n")
        return "\n".join(
            [
                f"{record.type} failure (rules: {rules or 'none'})",
                "--- text ---",
                self._maybe_truncate(record.text),
                "--- error ---",
                error,
            ]
        )

    def _maybe_truncate(self, text: str) -> str:
        """Truncate text if truncation is enabled."""
        if self.truncate and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
