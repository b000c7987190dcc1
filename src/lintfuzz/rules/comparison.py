"""Comparison rules.

Python 3.13+.
"""

import ast
import re

from lintfuzz.diagnostics import TextEdit
from lintfuzz.linter import Fixer, Rule, RuleMeta

__all__ = ["PreferIsNone"]

# First equality operator in the gap between two operands; comments are
# matched too so an operator inside a comment is never picked.
_OPERATOR_PATTERN = re.compile(r"#[^\n]*|==|!=")

_REPLACEMENTS = {"==": "is", "!=": "is not"}


def _is_none(node: ast.expr) -> bool:
    return isinstance(node, ast.Constant) and node.value is None


def _is_literal(node: ast.expr) -> bool:
    """True for constants that ``is`` must not be used with."""
    return isinstance(node, ast.Constant) and not (
        node.value is None or node.value is Ellipsis or isinstance(node.value, bool)
    )


class PreferIsNone(Rule):
    """Require ``is None`` / ``is not None`` instead of ``== None`` / ``!= None``.

    Only single-operator comparisons are checked; chained comparisons
    such as ``a == None == b`` are left alone.
    """

    name = "prefer-is-none"
    meta = RuleMeta(description="Require identity comparison with None", fixable=True)

    def visit_Compare(self, node: ast.Compare) -> None:
        if len(node.ops) != 1 or not isinstance(node.ops[0], (ast.Eq, ast.NotEq)):
            return
        left, right = node.left, node.comparators[0]
        if not (_is_none(left) or _is_none(right)):
            return
        if _is_literal(left) or _is_literal(right):
            return

        operator = "==" if isinstance(node.ops[0], ast.Eq) else "!="
        self.context.report(
            f"Use '{_REPLACEMENTS[operator]}' to compare with None.",
            node=node,
            fix=lambda fixer: self._fix(fixer, left, right),
        )

    def _fix(self, fixer: Fixer, left: ast.expr, right: ast.expr) -> TextEdit | None:
        source = self.context.source
        gap_start = source.node_range(left)[1]
        gap_end = source.node_range(right)[0]
        text = source.text
        for match in _OPERATOR_PATTERN.finditer(text, gap_start, gap_end):
            token = match.group()
            if token.startswith("#"):
                continue
            start, end = match.span()
            replacement = _REPLACEMENTS[token]
            if start > 0 and not text[start - 1].isspace():
                replacement = " " + replacement
            if end < len(text) and not text[end].isspace():
                replacement += " "
            return fixer.replace_text_range((start, end), replacement)
        return None
