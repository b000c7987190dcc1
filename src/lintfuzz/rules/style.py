"""Style rules without fixes.

Python 3.13+.
"""

import ast

from lintfuzz.constants import DEFAULT_MAX_LINE_LENGTH
from lintfuzz.linter import Rule, RuleMeta

from .whitespace import iter_lines

__all__ = ["MaxLineLength", "NoBareExcept"]


class NoBareExcept(Rule):
    """Disallow ``except:`` without an exception type."""

    name = "no-bare-except"
    meta = RuleMeta(description="Disallow bare except clauses")

    def visit_ExceptHandler(self, node: ast.ExceptHandler) -> None:
        if node.type is None:
            self.context.report("Unexpected bare 'except:'.", node=node)


class MaxLineLength(Rule):
    """Enforce a maximum line length.

    Options:
        {"max": int} - longest allowed line in characters (default 100)
    """

    name = "max-line-length"
    meta = RuleMeta(
        description="Enforce a maximum line length",
        default_options=({"max": DEFAULT_MAX_LINE_LENGTH},),
    )

    def visit_Module(self, node: ast.Module) -> None:
        limit = self.context.option("max", DEFAULT_MAX_LINE_LENGTH)
        for start, body, _ in iter_lines(self.context.source.text):
            if len(body) > limit:
                self.context.report(
                    f"This line has a length of {len(body)}. Maximum allowed is {limit}.",
                    offset=start,
                    end_offset=start + len(body),
                )
