"""Enumerations for lintfuzz type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import IntEnum, StrEnum

__all__ = [
    "FaultKind",
    "OutputFormat",
    "Severity",
]


class Severity(IntEnum):
    """Rule strictness level.

    IntEnum so that serialized configurations carry plain integers
    (``{"rules": {"eol-last": 2}}``) while code compares by name.
    """

    OFF = 0
    """Rule disabled"""

    WARN = 1
    """Findings reported as warnings"""

    ERROR = 2
    """Findings reported as errors"""

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Parse an integer or keyword severity.

        Args:
            value: 0/1/2 or "off"/"warn"/"error" (case-insensitive)

        Returns:
            Matching Severity member

        Raises:
            ValueError: If value is not a recognized severity
        """
        if isinstance(value, bool):
            msg = f"Severity must be 0, 1, 2, 'off', 'warn' or 'error', got {value!r}"
            raise ValueError(msg)
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        msg = f"Severity must be 0, 1, 2, 'off', 'warn' or 'error', got {value!r}"
        raise ValueError(msg)


class FaultKind(StrEnum):
    """Category of a fault detected by a pipeline.

    StrEnum provides automatic string conversion: str(FaultKind.CRASH) == "crash"
    """

    CRASH = "crash"
    """The analyzer raised while analyzing or fixing a text"""

    AUTOFIX = "autofix"
    """A fix produced text the parser rejects"""


class OutputFormat(StrEnum):
    """Output format options for failure reports."""

    TEXT = "text"  # Human-readable multi-line report (default)
    JSON = "json"  # JSON format for tooling integration
