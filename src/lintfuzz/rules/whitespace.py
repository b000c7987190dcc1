"""Layout rules: trailing whitespace, final newline, blank-line runs.

These rules look at raw lines rather than nodes, so each registers a
single ``visit_Module`` handler and scans the text once.

Python 3.13+.
"""

import ast
from collections.abc import Iterator

from lintfuzz.constants import DEFAULT_MAX_EMPTY_LINES
from lintfuzz.linter import Rule, RuleMeta
from lintfuzz.syntax.position import LINE_TERMINATOR

__all__ = ["EolLast", "NoMultipleEmptyLines", "NoTrailingSpaces"]

_TRAILING_WHITESPACE = " \t\f"


def iter_lines(text: str) -> Iterator[tuple[int, str, int]]:
    """Yield (start offset, line body, offset after terminator) per line.

    The body excludes the terminator. A text ending in a terminator has
    no extra empty line after it.
    """
    start = 0
    for match in LINE_TERMINATOR.finditer(text):
        yield start, text[start : match.start()], match.end()
        start = match.end()
    if start < len(text):
        yield start, text[start:], len(text)


def iter_logical_blanks(text: str) -> Iterator[tuple[int, str, int, bool]]:
    """Like iter_lines, with a flag telling whether the line is blank.

    A whitespace-only line that follows a backslash continuation belongs
    to the continued statement and is not blank. Backslashes inside
    comments or strings also suppress the flag; such lines are left alone.
    """
    previous = ""
    for start, body, next_start in iter_lines(text):
        yield start, body, next_start, not body.strip() and not previous.endswith("\\")
        previous = body


class NoTrailingSpaces(Rule):
    """Disallow whitespace at the end of lines."""

    name = "no-trailing-spaces"
    meta = RuleMeta(description="Disallow trailing whitespace at the end of lines", fixable=True)

    def visit_Module(self, node: ast.Module) -> None:
        for start, body, _, blank in iter_logical_blanks(self.context.source.text):
            stripped = body.rstrip(_TRAILING_WHITESPACE)
            # Whitespace-only continuation lines must keep their content
            if len(stripped) == len(body) or (not stripped and not blank):
                continue
            ws_start = start + len(stripped)
            ws_end = start + len(body)
            self.context.report(
                "Trailing spaces not allowed.",
                offset=ws_start,
                end_offset=ws_end,
                fix=lambda fixer: fixer.remove_range((ws_start, ws_end)),
            )


class EolLast(Rule):
    """Require a newline at the end of non-empty files."""

    name = "eol-last"
    meta = RuleMeta(description="Require newline at the end of files", fixable=True)

    def visit_Module(self, node: ast.Module) -> None:
        text = self.context.source.text
        if not text or text.endswith(("\n", "\r")):
            return
        end = len(text)
        self.context.report(
            "Newline required at end of file but not found.",
            offset=end,
            fix=lambda fixer: fixer.insert_text_after_range((end, end), "\n"),
        )


class NoMultipleEmptyLines(Rule):
    """Disallow runs of more than ``max`` blank lines.

    Options:
        {"max": int} - longest allowed run (default 2)
    """

    name = "no-multiple-empty-lines"
    meta = RuleMeta(
        description="Disallow multiple empty lines",
        fixable=True,
        default_options=({"max": DEFAULT_MAX_EMPTY_LINES},),
    )

    def visit_Module(self, node: ast.Module) -> None:
        limit = self.context.option("max", DEFAULT_MAX_EMPTY_LINES)
        run: list[tuple[int, int]] = []
        for start, _, next_start, blank in iter_logical_blanks(self.context.source.text):
            if blank:
                run.append((start, next_start))
                continue
            self._check_run(run, limit)
            run = []
        self._check_run(run, limit)

    def _check_run(self, run: list[tuple[int, int]], limit: int) -> None:
        if len(run) <= limit:
            return
        excess_start = run[limit][0]
        excess_end = run[-1][1]
        plural = "line" if limit == 1 else "lines"
        self.context.report(
            f"More than {limit} blank {plural} not allowed.",
            offset=excess_start,
            end_offset=excess_end,
            fix=lambda fixer: fixer.remove_range((excess_start, excess_end)),
        )
