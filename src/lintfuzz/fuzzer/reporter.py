"""Failure records: the output of a fuzz run.

Serialized shape:
    {
        "type": "crash" | "autofix",
        "text": "<candidate at the moment of the fault>",
        "config": {"rules": {"<rule id>": 2 | [2, ...options]}},
        "error": "<traceback>" | {"ruleId": null, "fatal": true, ...}
    }

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from lintfuzz.configuration import Configuration
from lintfuzz.diagnostics import Diagnostic
from lintfuzz.enums import FaultKind

from .pipelines import FaultDescriptor

__all__ = ["FailureRecord", "build_failure_record"]


@dataclass(frozen=True, slots=True)
class FailureRecord:
    """One reported bug.

    Attributes:
        type: crash or autofix
        text: Candidate state at the moment of the fault
        config: Minimal reproducing configuration
        error: Traceback string for crash, parse Diagnostic for autofix
    """

    type: FaultKind
    text: str
    config: Configuration
    error: str | Diagnostic

    def __post_init__(self) -> None:
        """Validate that error matches the record type."""
        expected = str if self.type is FaultKind.CRASH else Diagnostic
        if not isinstance(self.error, expected):
            msg = (
                f"{self.type} records require a {expected.__name__} error, "
                f"got {type(self.error).__name__}"
            )
            raise TypeError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the external JSON-compatible shape."""
        error = self.error.to_dict() if isinstance(self.error, Diagnostic) else self.error
        return {
            "type": str(self.type),
            "text": self.text,
            "config": self.config.to_dict(),
            "error": error,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FailureRecord":
        """Parse the shape produced by to_dict().

        Raises:
            ValueError: If type is unknown or a field is missing
            ConfigurationError: If config is malformed
        """
        if not isinstance(data, Mapping):
            msg = f"Failure record must be an object, got {type(data).__name__}"
            raise ValueError(msg)
        try:
            kind = FaultKind(data["type"])
            text = data["text"]
            config = Configuration.from_dict(data["config"])
            raw_error = data["error"]
        except KeyError as e:
            msg = f"Failure record is missing field {e.args[0]!r}"
            raise ValueError(msg) from e
        if not isinstance(text, str):
            msg = f"Failure record text must be a string, got {type(text).__name__}"
            raise ValueError(msg)
        if kind is FaultKind.CRASH:
            return cls(type=kind, text=text, config=config, error=str(raw_error))
        if not isinstance(raw_error, Mapping):
            msg = f"Autofix record error must be an object, got {type(raw_error).__name__}"
            raise ValueError(msg)
        error = Diagnostic.from_dict(dict(raw_error))
        return cls(type=kind, text=text, config=config, error=error)


def build_failure_record(fault: FaultDescriptor, minimal_config: Configuration) -> FailureRecord:
    """Combine a fault and its minimal configuration into a FailureRecord."""
    return FailureRecord(
        type=fault.kind,
        text=fault.text,
        config=minimal_config,
        error=fault.error,
    )
