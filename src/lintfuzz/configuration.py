"""Rule configuration model.

A Configuration maps rule ids to RuleConfig entries. Configurations are
immutable: the fuzz driver fetches one full configuration per run and the
reducer derives smaller copies from it with restrict().

Serialized form:
    {"rules": {"eol-last": 2, "max-line-length": [2, {"max": 80}]}}

Each entry serializes to a bare severity when it has no options, otherwise
to a list of severity followed by the options.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from lintfuzz.diagnostics import ConfigurationError
from lintfuzz.enums import Severity

__all__ = [
    "Configuration",
    "RuleConfig",
    "RuleValue",
]

# Serialized rule entry: bare severity or [severity, *options]
RuleValue: TypeAlias = int | str | list[Any] | tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """One rule's enablement.

    Attributes:
        severity: Off, warn, or error
        options: Extra rule options (empty when defaults apply)
    """

    severity: Severity
    options: tuple[Any, ...] = ()

    @property
    def enabled(self) -> bool:
        """True unless the rule is switched off."""
        return self.severity is not Severity.OFF

    @classmethod
    def from_value(cls, value: RuleValue) -> "RuleConfig":
        """Parse a serialized rule entry.

        Args:
            value: ``2``, ``"error"``, ``[2, opt, ...]`` or ``["warn", opt, ...]``

        Returns:
            Parsed RuleConfig

        Raises:
            ConfigurationError: If value is not a valid rule entry
        """
        match value:
            case list() | tuple():
                if not value:
                    msg = "Rule configuration list must start with a severity"
                    raise ConfigurationError(msg)
                severity, *options = value
                return cls(_parse_severity(severity), tuple(options))
            case _:
                return cls(_parse_severity(value))

    def to_value(self) -> int | list[Any]:
        """Serialize to the simplest representable form."""
        if not self.options:
            return int(self.severity)
        return [int(self.severity), *self.options]


def _parse_severity(value: object) -> Severity:
    try:
        return Severity.parse(value)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


@dataclass(frozen=True, slots=True)
class Configuration:
    """A full or reduced rule set.

    The rules mapping is copied on construction and exposed read-only.
    The driver and the reducer share one instance.

    Example:
        >>> full = Configuration.from_dict({"rules": {"a": 2, "b": [1, "x"]}})
        >>> full.restrict(["b"]).to_dict()
        {'rules': {'b': [1, 'x']}}
    """

    rules: Mapping[str, RuleConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the rules mapping."""
        frozen: dict[str, RuleConfig] = {}
        for rule_id, rule_config in self.rules.items():
            if not isinstance(rule_id, str) or not rule_id:
                msg = f"Rule id must be a non-empty string, got {rule_id!r}"
                raise ConfigurationError(msg)
            if not isinstance(rule_config, RuleConfig):
                rule_config = RuleConfig.from_value(rule_config)
            frozen[rule_id] = rule_config
        object.__setattr__(self, "rules", MappingProxyType(frozen))

    @property
    def rule_ids(self) -> tuple[str, ...]:
        """Rule ids in insertion order."""
        return tuple(self.rules)

    def enabled_rules(self) -> Iterator[tuple[str, RuleConfig]]:
        """Iterate over (rule_id, RuleConfig) pairs that are not switched off."""
        for rule_id, rule_config in self.rules.items():
            if rule_config.enabled:
                yield rule_id, rule_config

    def restrict(self, rule_ids: Iterable[str]) -> "Configuration":
        """Derive a configuration holding only the given rules.

        Order follows this configuration, not the argument. Ids that are
        not part of this configuration are ignored.
        """
        keep = set(rule_ids)
        return Configuration({rid: cfg for rid, cfg in self.rules.items() if rid in keep})

    def to_dict(self) -> dict[str, dict[str, int | list[Any]]]:
        """Serialize to ``{"rules": {rule_id: severity | [severity, *options]}}``."""
        return {"rules": {rid: cfg.to_value() for rid, cfg in self.rules.items()}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """Parse the shape produced by to_dict().

        Raises:
            ConfigurationError: If ``rules`` is missing or malformed
        """
        if not isinstance(data, Mapping):
            msg = f"Configuration must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)
        rules = data.get("rules")
        if not isinstance(rules, Mapping):
            msg = f"Configuration 'rules' must be a mapping, got {type(rules).__name__}"
            raise ConfigurationError(msg)
        return cls({rid: RuleConfig.from_value(value) for rid, value in rules.items()})

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self.rules

    def __repr__(self) -> str:
        return f"Configuration(rules={len(self.rules)})"
