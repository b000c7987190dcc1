"""Tests for the built-in rules.

Each rule runs alone through a Linter on a dedicated registry, so
findings and fixes of other rules never mix in.
"""

from __future__ import annotations

import ast

import pytest
from hypothesis import given

from lintfuzz import fuzz
from lintfuzz.configuration import Configuration
from lintfuzz.diagnostics import Diagnostic
from lintfuzz.linter import Linter, Rule
from lintfuzz.rules import (
    EolLast,
    MaxLineLength,
    NoBareExcept,
    NoMultipleEmptyLines,
    NoTrailingSpaces,
    PreferIsNone,
)
from lintfuzz.rules.whitespace import iter_lines, iter_logical_blanks
from tests.helpers.rules import registry_with
from tests.strategies import none_comparisons


def _run(rule: type[Rule], text: str, value: object = 2) -> list[Diagnostic]:
    return Linter(registry_with(rule)).analyze(text, Configuration({rule.name: value}))


def _fix(rule: type[Rule], text: str, value: object = 2) -> str | None:
    return Linter(registry_with(rule)).analyze_and_fix(text, Configuration({rule.name: value})).fixed_text


# ============================================================================
# LINE ITERATION
# ============================================================================


class TestIterLines:
    """Test iter_lines."""

    def test_mixed_terminators(self) -> None:
        assert list(iter_lines("a\r\nb\rc\nd")) == [
            (0, "a", 3),
            (3, "b", 5),
            (5, "c", 7),
            (7, "d", 8),
        ]

    def test_trailing_terminator_adds_no_line(self) -> None:
        assert list(iter_lines("a\n")) == [(0, "a", 2)]

    def test_empty(self) -> None:
        assert list(iter_lines("")) == []

    def test_whitespace_after_continuation_is_not_blank(self) -> None:
        flags = [blank for *_, blank in iter_logical_blanks("x = 1\\\n    \n\n")]

        assert flags == [False, False, True]


# ============================================================================
# WHITESPACE RULES
# ============================================================================


class TestNoTrailingSpaces:
    """Test no-trailing-spaces."""

    def test_reports_each_line(self) -> None:
        diagnostics = _run(NoTrailingSpaces, "a = 1  \nb = 2\t\nc = 3\n")

        assert [(d.line, d.column) for d in diagnostics] == [(1, 5), (2, 5)]

    def test_fix_removes_whitespace(self) -> None:
        assert _fix(NoTrailingSpaces, "a = 1  \r\nb = 2 \n") == "a = 1\r\nb = 2\n"

    def test_whitespace_only_line(self) -> None:
        assert _fix(NoTrailingSpaces, "a = 1\n   \nb = 2\n") == "a = 1\n\nb = 2\n"

    def test_clean_text(self) -> None:
        assert _run(NoTrailingSpaces, "a = 1\n") == []

    @pytest.mark.parametrize("text", ["x = 1\\\n    ", "x = 1\\\n  \t\n"])
    def test_whitespace_only_continuation_line_kept(self, text: str) -> None:
        assert _run(NoTrailingSpaces, text) == []

    def test_continuation_line_with_content_is_stripped(self) -> None:
        assert _fix(NoTrailingSpaces, "x = 1 + \\\n    2  \n") == "x = 1 + \\\n    2\n"

    def test_all_builtin_fixes_keep_continuation_valid(self) -> None:
        text = "x = 1\\\n    "

        assert fuzz(
            count=1,
            program_generator=lambda: text,
            check_autofixes=True,
            analyzer=Linter(),
        ) == []


class TestEolLast:
    """Test eol-last."""

    def test_missing_newline(self) -> None:
        (diagnostic,) = _run(EolLast, "a = 1")

        assert (diagnostic.line, diagnostic.column) == (1, 5)
        assert _fix(EolLast, "a = 1") == "a = 1\n"

    @pytest.mark.parametrize("text", ["", "a = 1\n", "a = 1\r\n", "a = 1\r"])
    def test_terminated_or_empty(self, text: str) -> None:
        assert _run(EolLast, text) == []


class TestNoMultipleEmptyLines:
    """Test no-multiple-empty-lines."""

    def test_default_allows_two(self) -> None:
        assert _run(NoMultipleEmptyLines, "a = 1\n\n\nb = 2\n") == []

    def test_fix_removes_excess(self) -> None:
        assert _fix(NoMultipleEmptyLines, "a = 1\n\n\n\n\nb = 2\n") == "a = 1\n\n\nb = 2\n"

    def test_option_max(self) -> None:
        (diagnostic,) = _run(NoMultipleEmptyLines, "a = 1\n\n\nb = 2\n", [2, {"max": 1}])

        assert diagnostic.message == "More than 1 blank line not allowed."
        assert diagnostic.line == 3

    def test_trailing_run(self) -> None:
        assert _fix(NoMultipleEmptyLines, "a = 1\n\n\n\n") == "a = 1\n\n\n"

    def test_whitespace_lines_count_as_blank(self) -> None:
        assert _fix(NoMultipleEmptyLines, "a = 1\n \n\t\n \nb = 2\n") == "a = 1\n \n\t\nb = 2\n"

    def test_continuation_line_does_not_count_as_blank(self) -> None:
        text = "x = 1\\\n \n\n\nb = 2\n"

        assert _fix(NoMultipleEmptyLines, text, [2, {"max": 0}]) == "x = 1\\\n \nb = 2\n"


# ============================================================================
# COMPARISON RULES
# ============================================================================


class TestPreferIsNone:
    """Test prefer-is-none."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("x == None\n", "x is None\n"),
            ("x != None\n", "x is not None\n"),
            ("x==None\n", "x is None\n"),
            ("None == x\n", "None is x\n"),
            ("(x) == None\n", "(x) is None\n"),
            ("(x  # a == b\n == None)\n", "(x  # a == b\n is None)\n"),
            ("é == None\n", "é is None\n"),
        ],
    )
    def test_fix(self, text: str, expected: str) -> None:
        assert _fix(PreferIsNone, text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "x is None\n",
            "x == 1\n",
            "a == None == b\n",
            "x < None\n",
            "1 == None\n",
        ],
    )
    def test_ignored(self, text: str) -> None:
        assert _run(PreferIsNone, text) == []

    def test_node_type(self) -> None:
        (diagnostic,) = _run(PreferIsNone, "y = x == None\n")

        assert diagnostic.node_type == "Compare"
        assert diagnostic.column == 4

    @given(none_comparisons())
    def test_fix_output_parses(self, text: str) -> None:
        fixed = _fix(PreferIsNone, text)

        assert fixed is not None
        tree = ast.parse(fixed)
        compare = tree.body[0].value  # type: ignore[attr-defined]
        assert isinstance(compare.ops[0], (ast.Is, ast.IsNot))


# ============================================================================
# STYLE RULES
# ============================================================================


class TestNoBareExcept:
    """Test no-bare-except."""

    def test_bare_except(self) -> None:
        (diagnostic,) = _run(NoBareExcept, "try:\n    pass\nexcept:\n    pass\n")

        assert diagnostic.line == 3
        assert diagnostic.fix is None

    def test_typed_except(self) -> None:
        assert _run(NoBareExcept, "try:\n    pass\nexcept ValueError:\n    pass\n") == []


class TestMaxLineLength:
    """Test max-line-length."""

    def test_default_limit(self) -> None:
        assert _run(MaxLineLength, "x = '" + "a" * 200 + "'\n")
        assert _run(MaxLineLength, "x = 1\n") == []

    def test_option_max(self) -> None:
        (diagnostic,) = _run(MaxLineLength, "abc = 1\n", [2, {"max": 5}])

        assert diagnostic.message == "This line has a length of 7. Maximum allowed is 5."

    def test_not_fixable(self) -> None:
        assert _fix(MaxLineLength, "abc = 1\n", [2, {"max": 5}]) is None
