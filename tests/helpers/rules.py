"""Test-only rules and analyzers.

Rule factories build Rule subclasses whose behavior depends only on the
exact analyzed text, so fuzz runs over them are deterministic. Register
them into a fresh registry (registry_with) so built-in rules cannot
interfere with the scenario under test.

Scripted analyzers implement the collaborator protocols directly, for
pipeline tests that should not involve the reference Linter at all.
"""

from __future__ import annotations

import ast
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from lintfuzz.configuration import Configuration
from lintfuzz.diagnostics import Diagnostic
from lintfuzz.linter import FixResult, Rule, RuleContext, RuleMeta, RuleRegistry

CRASH_MESSAGE = "error thrown from a rule"
TEST_RULE_ID = "test-fuzzer-rule"

# Comment suffix marking generated candidates in driver scenarios
GUARD = "# guard"

# Rejected by the CPython parser
INVALID_SYNTAX = "this is not valid python syntax"


def expected_syntax_error(text: str = INVALID_SYNTAX) -> SyntaxError:
    """The SyntaxError the CPython parser raises for text."""
    try:
        ast.parse(text)
    except SyntaxError as e:
        return e
    msg = f"{text!r} unexpectedly parsed"
    raise AssertionError(msg)


def make_rule(
    rule_id: str,
    on_module: Callable[[RuleContext], None],
    *,
    fixable: bool = False,
) -> type[Rule]:
    """Build a rule that calls on_module(context) once per analysis."""

    def visit_Module(self: Rule, node: ast.Module) -> None:  # noqa: N802
        on_module(self.context)

    class_name = "Rule_" + rule_id.replace("-", "_")
    return type(
        class_name,
        (Rule,),
        {"name": rule_id, "meta": RuleMeta(fixable=fixable), "visit_Module": visit_Module},
    )


def inert_rule(rule_id: str) -> type[Rule]:
    """Rule that never reports and never raises."""
    return make_rule(rule_id, lambda context: None)


def inert_rules(count: int, prefix: str = "inert") -> list[type[Rule]]:
    return [inert_rule(f"{prefix}-{index}") for index in range(count)]


def crash_when(text: str, rule_id: str = TEST_RULE_ID) -> type[Rule]:
    """Rule that raises TypeError exactly when the analyzed text equals text."""

    def on_module(context: RuleContext) -> None:
        if context.source.text == text:
            raise TypeError(CRASH_MESSAGE)

    return make_rule(rule_id, on_module)


def rewrite_when(
    rewrites: Mapping[str, str],
    rule_id: str = TEST_RULE_ID,
    *,
    crash_on: frozenset[str] = frozenset(),
) -> type[Rule]:
    """Fixable rule replacing a whole text with rewrites[text].

    Texts in crash_on make the rule raise instead.
    """

    def on_module(context: RuleContext) -> None:
        text = context.source.text
        if text in crash_on:
            raise TypeError(CRASH_MESSAGE)
        if text in rewrites:
            replacement = rewrites[text]
            context.report(
                "no foos allowed",
                offset=0,
                end_offset=len(text),
                fix=lambda fixer: fixer.replace_text_range((0, len(text)), replacement),
            )

    return make_rule(rule_id, on_module, fixable=True)


def registry_with(*rules: type[Rule]) -> RuleRegistry:
    """Fresh registry holding exactly rules, in order."""
    registry = RuleRegistry()
    for rule in rules:
        registry.register(rule)
    return registry


@dataclass
class ScriptedAnalyzer:
    """Analyzer driven by lookup tables instead of rules.

    Attributes:
        fixes: text -> fixed text returned by analyze_and_fix
        crashes: texts on which both methods raise
        crash_rule: when set, crashes only happen while this rule is configured
        calls: (method, text, rule ids) of every call, in order
    """

    fixes: Mapping[str, str] = field(default_factory=dict)
    crashes: frozenset[str] = frozenset()
    crash_rule: str | None = None
    full_config: Configuration = field(
        default_factory=lambda: Configuration({TEST_RULE_ID: 2})
    )
    calls: list[tuple[str, str, tuple[str, ...]]] = field(default_factory=list)

    def _maybe_crash(self, text: str, config: Configuration) -> None:
        if text in self.crashes and (self.crash_rule is None or self.crash_rule in config):
            raise TypeError(CRASH_MESSAGE)

    def analyze(self, text: str, config: Configuration) -> Sequence[Diagnostic]:
        self.calls.append(("analyze", text, config.rule_ids))
        self._maybe_crash(text, config)
        return []

    def analyze_and_fix(self, text: str, config: Configuration) -> FixResult:
        self.calls.append(("analyze_and_fix", text, config.rule_ids))
        self._maybe_crash(text, config)
        return FixResult(fixed_text=self.fixes.get(text), diagnostics=())

    def get_full_configuration(self) -> Configuration:
        return self.full_config
