"""Reference rule-based linter for Python source.

Linter.analyze parses the text once, instantiates every enabled rule with
its own RuleContext, and walks the tree in pre-order, dispatching each
node to the handlers registered for its type. Findings come back sorted
by position.

Failure modes:
    - Text that does not parse yields exactly one fatal diagnostic
    - A configured rule id with no registered rule yields a diagnostic
      at 1:0 instead of raising
    - Any exception raised by a rule (handler, constructor, or fix
      callable) is re-raised as AnalyzerFault chained to the original

Python 3.13+.
"""

import ast
import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from lintfuzz.configuration import Configuration
from lintfuzz.diagnostics import AnalyzerFault, Diagnostic
from lintfuzz.enums import Severity
from lintfuzz.syntax import SourceCode, SyntaxFault, build_parse_diagnostic

from .fixer import apply_fixes
from .registry import RuleRegistry, get_shared_registry
from .rule import Rule, RuleContext

__all__ = ["FixResult", "Linter"]

logger = logging.getLogger(__name__)

_Handler: TypeAlias = tuple[str, Callable[[ast.AST], None]]


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of one analyze-and-fix pass.

    Attributes:
        fixed_text: Text after applying fixes, or None when no fix
            changed the text
        diagnostics: Findings of the pass, computed on the input text
    """

    fixed_text: str | None
    diagnostics: tuple[Diagnostic, ...]


class Linter:
    """Rule-based analyzer backed by a RuleRegistry.

    Thread-safe: holds no per-analysis state.

    Usage:
        linter = Linter()
        config = linter.get_full_configuration()
        for diagnostic in linter.analyze(text, config):
            print(diagnostic.line, diagnostic.message)
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        """Initialize Linter.

        Args:
            registry: Rules to run (default: shared built-in registry)
        """
        self._registry = registry if registry is not None else get_shared_registry()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def get_full_configuration(self) -> Configuration:
        """Every registered rule enabled at error severity."""
        return self._registry.full_configuration()

    def analyze(self, text: str, config: Configuration) -> list[Diagnostic]:
        """Analyze text with the enabled rules of config.

        Args:
            text: Source text
            config: Rules to run

        Returns:
            Findings sorted by (line, column)

        Raises:
            AnalyzerFault: If a rule raises
        """
        try:
            source = SourceCode.parse(text)
        except (SyntaxError, ValueError, RecursionError, MemoryError) as e:
            return [build_parse_diagnostic(SyntaxFault.from_exception(e))]

        diagnostics: list[Diagnostic] = []
        contexts: list[RuleContext] = []
        listeners: defaultdict[str, list[_Handler]] = defaultdict(list)

        for rule_id, rule_config in config.enabled_rules():
            rule_cls = self._registry.get(rule_id)
            if rule_cls is None:
                diagnostics.append(_missing_rule_diagnostic(rule_id))
                continue
            context = RuleContext(
                rule_id,
                rule_config.severity,
                rule_config.options or rule_cls.meta.default_options,
                source,
                fixable=rule_cls.meta.fixable,
            )
            rule = _instantiate(rule_id, rule_cls, context)
            contexts.append(context)
            for node_type, handler in rule.handlers():
                listeners[node_type].append((rule_id, handler))

        if listeners:
            _traverse(source.tree, listeners)

        for context in contexts:
            diagnostics.extend(context.diagnostics)
        diagnostics.sort(key=lambda d: (d.line, d.column))
        logger.debug("Analyzed %d chars with %d rules: %d findings",
                     len(text), len(contexts), len(diagnostics))
        return diagnostics

    def analyze_and_fix(self, text: str, config: Configuration) -> FixResult:
        """Analyze text and apply every non-conflicting fix once.

        Raises:
            AnalyzerFault: If a rule raises
        """
        diagnostics = self.analyze(text, config)
        outcome = apply_fixes(text, diagnostics)
        fixed_text = outcome.output if outcome.output != text else None
        return FixResult(fixed_text=fixed_text, diagnostics=tuple(diagnostics))

    def __repr__(self) -> str:
        return f"Linter(registry={self._registry!r})"


def _missing_rule_diagnostic(rule_id: str) -> Diagnostic:
    return Diagnostic(
        rule_id=rule_id,
        fatal=False,
        severity=Severity.ERROR,
        message=f"Definition for rule '{rule_id}' was not found.",
        line=1,
        column=0,
    )


def _instantiate(rule_id: str, rule_cls: type[Rule], context: RuleContext) -> Rule:
    try:
        return rule_cls(context)
    except Exception as e:
        msg = f"Rule '{rule_id}' failed to initialize: {type(e).__name__}: {e}"
        raise AnalyzerFault(msg, rule_id=rule_id) from e


def _traverse(tree: ast.AST, listeners: dict[str, list[_Handler]]) -> None:
    """Pre-order walk dispatching each node to its listeners."""
    stack: list[ast.AST] = [tree]
    while stack:
        node = stack.pop()
        for rule_id, handler in listeners.get(type(node).__name__, ()):
            try:
                handler(node)
            except Exception as e:
                msg = f"Rule '{rule_id}' raised {type(e).__name__}: {e}"
                raise AnalyzerFault(msg, rule_id=rule_id) from e
        stack.extend(reversed(list(ast.iter_child_nodes(node))))
