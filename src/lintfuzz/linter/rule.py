"""Rule protocol for the reference linter.

A rule is a Rule subclass with a unique ``name``, a RuleMeta, and any
number of ``visit_<NodeType>`` handlers. Handler names follow the stdlib
ast.NodeVisitor convention; ``visit_Module`` sees the whole program.

Handlers report findings through their RuleContext. Fixes are built with
a Fixer and attached lazily: the fix callable runs inside report(), so a
fixer bug surfaces as a fault of the reporting rule.

Example:
    class NoPrint(Rule):
        name = "no-print"
        meta = RuleMeta(description="Disallow print()", fixable=True)

        def visit_Call(self, node: ast.Call) -> None:
            if isinstance(node.func, ast.Name) and node.func.id == "print":
                self.context.report(
                    "Unexpected print()",
                    node=node,
                    fix=lambda fixer: fixer.replace_text(node.func, "log"),
                )

Python 3.13+.
"""

import ast
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

from lintfuzz.diagnostics import Diagnostic, RuleDefinitionError, TextEdit
from lintfuzz.enums import Severity
from lintfuzz.syntax import SourceCode

__all__ = [
    "FixFunction",
    "Fixer",
    "Rule",
    "RuleContext",
    "RuleMeta",
    "merge_edits",
]

# Half-open character range
TextRange: TypeAlias = tuple[int, int]

# A fix callable returns one edit, several edits to merge, or nothing
FixFunction: TypeAlias = Callable[["Fixer"], TextEdit | Iterable[TextEdit] | None]


@dataclass(frozen=True, slots=True)
class RuleMeta:
    """Static rule metadata.

    Attributes:
        description: One-line summary
        fixable: Whether the rule may attach fixes to its findings
        default_options: Options used when the configuration supplies none
    """

    description: str = ""
    fixable: bool = False
    default_options: tuple[Any, ...] = ()


class Fixer:
    """Builds TextEdits relative to one SourceCode.

    Thread-safe: holds only a reference to immutable source.
    """

    __slots__ = ("_source",)

    def __init__(self, source: SourceCode) -> None:
        self._source = source

    def replace_text_range(self, text_range: TextRange, text: str) -> TextEdit:
        start, end = text_range
        return TextEdit(start=start, end=end, text=text)

    def replace_text(self, node: ast.AST, text: str) -> TextEdit:
        return self.replace_text_range(self._source.node_range(node), text)

    def insert_text_before_range(self, text_range: TextRange, text: str) -> TextEdit:
        return self.replace_text_range((text_range[0], text_range[0]), text)

    def insert_text_before(self, node: ast.AST, text: str) -> TextEdit:
        return self.insert_text_before_range(self._source.node_range(node), text)

    def insert_text_after_range(self, text_range: TextRange, text: str) -> TextEdit:
        return self.replace_text_range((text_range[1], text_range[1]), text)

    def insert_text_after(self, node: ast.AST, text: str) -> TextEdit:
        return self.insert_text_after_range(self._source.node_range(node), text)

    def remove_range(self, text_range: TextRange) -> TextEdit:
        return self.replace_text_range(text_range, "")

    def remove(self, node: ast.AST) -> TextEdit:
        return self.remove_range(self._source.node_range(node))


def merge_edits(edits: Sequence[TextEdit], source_text: str) -> TextEdit:
    """Merge the edits of one report into a single edit.

    The merged edit spans from the first start to the last end; original
    text between edits is kept.

    Raises:
        ValueError: If edits is empty or two edits overlap
    """
    if not edits:
        msg = "Cannot merge an empty list of edits"
        raise ValueError(msg)
    if len(edits) == 1:
        return edits[0]

    ordered = sorted(edits, key=lambda edit: (edit.start, edit.end))
    parts: list[str] = []
    cursor = ordered[0].start
    for edit in ordered:
        if edit.start < cursor:
            msg = "Fix objects must not overlap in a report"
            raise ValueError(msg)
        parts.append(source_text[cursor : edit.start])
        parts.append(edit.text)
        cursor = edit.end
    return TextEdit(start=ordered[0].start, end=cursor, text="".join(parts))


class RuleContext:
    """Per-rule, per-analysis reporting context.

    Attributes:
        rule_id: Id the rule is configured under
        severity: Configured severity
        options: Configured options (rule defaults when none configured)
        source: Text being analyzed
    """

    __slots__ = ("_diagnostics", "_fixable", "options", "rule_id", "severity", "source")

    def __init__(
        self,
        rule_id: str,
        severity: Severity,
        options: tuple[Any, ...],
        source: SourceCode,
        *,
        fixable: bool = False,
    ) -> None:
        self.rule_id = rule_id
        self.severity = severity
        self.options = options
        self.source = source
        self._fixable = fixable
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Findings reported so far."""
        return tuple(self._diagnostics)

    def option(self, key: str, default: Any) -> Any:
        """Look up a keyword in the first option when it is a mapping."""
        if self.options and isinstance(self.options[0], dict):
            return self.options[0].get(key, default)
        return default

    def report(
        self,
        message: str,
        *,
        node: ast.AST | None = None,
        offset: int | None = None,
        end_offset: int | None = None,
        fix: FixFunction | None = None,
    ) -> None:
        """Report a finding.

        The location comes from node when given, else from offset/end_offset
        (character offsets), else the start of the text.

        Raises:
            RuleDefinitionError: If a non-fixable rule supplies a fix
            ValueError: If the fix returns overlapping edits
        """
        if node is not None:
            start, end = self.source.node_range(node)
        elif offset is not None:
            start = offset
            end = offset if end_offset is None else end_offset
        else:
            start = end = 0

        edit: TextEdit | None = None
        if fix is not None:
            if not self._fixable:
                msg = f"Fixable rules must set meta.fixable (rule '{self.rule_id}')"
                raise RuleDefinitionError(msg)
            produced = fix(Fixer(self.source))
            if isinstance(produced, TextEdit):
                edit = produced
            elif produced is not None:
                edits = list(produced)
                edit = merge_edits(edits, self.source.text) if edits else None

        line, column = self.source.location(start)
        end_line, end_column = self.source.location(end)
        self._diagnostics.append(
            Diagnostic(
                rule_id=self.rule_id,
                fatal=False,
                severity=self.severity,
                message=message,
                line=line,
                column=column,
                node_type=type(node).__name__ if node is not None else None,
                end_line=end_line,
                end_column=end_column,
                fix=edit,
            )
        )


class Rule:
    """Base class for lint rules.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__: maps AST node type names to handler method names.
    """

    name: ClassVar[str] = ""
    meta: ClassVar[RuleMeta] = RuleMeta()
    _handlers: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._handlers = {
            attr.removeprefix("visit_"): attr
            for attr in dir(cls)
            if attr.startswith("visit_") and callable(getattr(cls, attr))
        }

    def __init__(self, context: RuleContext) -> None:
        self.context = context

    def handlers(self) -> Iterator[tuple[str, Callable[[ast.AST], None]]]:
        """Yield (node type name, bound handler) pairs."""
        for node_type, attr in self._handlers.items():
            yield node_type, getattr(self, attr)
