"""Rule registry and the maximal-configuration bridge.

Architecture:
    - RuleRegistry: Maps rule ids to Rule subclasses
    - full_configuration(): Every registered rule at error severity with
      its default options; the starting point of every fuzz run
    - get_shared_registry(): Frozen module-level registry of built-in rules

To fuzz extra rules, copy a registry and register them on the copy:

    registry = create_default_registry()
    registry.register(MyRule)
    linter = Linter(registry)

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterator

from lintfuzz.configuration import Configuration, RuleConfig
from lintfuzz.diagnostics import RuleDefinitionError
from lintfuzz.enums import Severity

from .rule import Rule

__all__ = [
    "RuleRegistry",
    "create_default_registry",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Registry of lint rules keyed by id.

    Supports dict-like introspection:
        - list_rules(): List all registered rule ids
        - get(rule_id): Get a rule class
        - __iter__: Iterate over rule ids in registration order
        - __len__: Count registered rules
        - __contains__: Check if a rule exists (supports 'in' operator)

    Example:
        >>> registry = RuleRegistry()
        >>> registry.register(EolLast)
        >>> "eol-last" in registry
        True
        >>> registry.full_configuration().to_dict()
        {'rules': {'eol-last': 2}}
    """

    __slots__ = ("_frozen", "_rules")

    def __init__(self) -> None:
        """Initialize empty rule registry."""
        self._rules: dict[str, type[Rule]] = {}
        self._frozen = False

    def register(self, rule: type[Rule], *, rule_id: str | None = None) -> None:
        """Register a rule class.

        Args:
            rule: Rule subclass
            rule_id: Id to register under (default: rule.name)

        Raises:
            TypeError: If the registry is frozen
            RuleDefinitionError: If rule is not a Rule subclass, the id is
                empty, or the id is already registered
        """
        if self._frozen:
            msg = "Cannot modify frozen RuleRegistry; use copy() to get a mutable registry"
            raise TypeError(msg)
        if not isinstance(rule, type) or not issubclass(rule, Rule):
            msg = f"Expected a Rule subclass, got {rule!r}"
            raise RuleDefinitionError(msg)

        rule_id = rule.name if rule_id is None else rule_id
        if not isinstance(rule_id, str) or not rule_id:
            msg = f"Rule id must be a non-empty string ({rule.__name__})"
            raise RuleDefinitionError(msg)
        if rule_id in self._rules:
            msg = f"Rule '{rule_id}' is already registered"
            raise RuleDefinitionError(msg)

        self._rules[rule_id] = rule
        logger.debug("Registered rule: %s", rule_id)

    def unregister(self, rule_id: str) -> None:
        """Remove a rule.

        Raises:
            TypeError: If the registry is frozen
            KeyError: If the rule is not registered
        """
        if self._frozen:
            msg = "Cannot modify frozen RuleRegistry; use copy() to get a mutable registry"
            raise TypeError(msg)
        del self._rules[rule_id]

    def get(self, rule_id: str) -> type[Rule] | None:
        """Get a rule class by id, or None if not registered."""
        return self._rules.get(rule_id)

    def list_rules(self) -> list[str]:
        """List all registered rule ids."""
        return list(self._rules)

    def full_configuration(self) -> Configuration:
        """Every registered rule at error severity with default options."""
        return Configuration(
            {
                rule_id: RuleConfig(Severity.ERROR, rule.meta.default_options)
                for rule_id, rule in self._rules.items()
            }
        )

    def freeze(self) -> None:
        """Reject further modification."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> "RuleRegistry":
        """Create an unfrozen shallow copy of this registry."""
        new_registry = RuleRegistry()
        new_registry._rules = self._rules.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __repr__(self) -> str:
        return f"RuleRegistry(rules={len(self._rules)})"


def create_default_registry() -> RuleRegistry:
    """Create a new, unfrozen registry holding the built-in rules."""
    from lintfuzz.rules import BUILTIN_RULES  # noqa: PLC0415 - rules import this package

    registry = RuleRegistry()
    for rule in BUILTIN_RULES:
        registry.register(rule)
    return registry


_SHARED_REGISTRY: RuleRegistry | None = None


def get_shared_registry() -> RuleRegistry:
    """Get the shared, frozen registry of built-in rules.

    Calling register() on the returned registry raises TypeError. To add
    rules, use copy() or create_default_registry().
    """
    # pylint: disable=global-statement
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = create_default_registry()
        _SHARED_REGISTRY.freeze()
    return _SHARED_REGISTRY
