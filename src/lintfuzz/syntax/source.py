"""Parsed source text handed to rules.

SourceCode bundles the raw text, its ast.Module, and the offset tables
rules need to turn AST positions into character ranges for fixes.

Python 3.13+.
"""

import ast
from dataclasses import dataclass, field

from .position import (
    LINE_TERMINATOR,
    line_start_offsets,
    offset_to_location,
    utf8_column_to_offset,
)

__all__ = ["SourceCode"]


@dataclass(frozen=True, slots=True)
class SourceCode:
    """Immutable view of one analyzed text.

    Attributes:
        text: Exact source text (no newline normalization)
        tree: Parsed module

    Usage:
        source = SourceCode.parse("x == None\\n")
        start, end = source.node_range(source.tree.body[0].value)
        source.text[start:end]  # "x == None"
    """

    text: str
    tree: ast.Module
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_line_starts", line_start_offsets(self.text))

    @classmethod
    def parse(cls, text: str) -> "SourceCode":
        """Parse text into a SourceCode.

        Raises:
            SyntaxError: If text is not a valid Python module
            ValueError: If text contains null bytes (older interpreters)
        """
        return cls(text=text, tree=ast.parse(text))

    @property
    def lines(self) -> list[str]:
        """Source lines without terminators."""
        return LINE_TERMINATOR.split(self.text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_text(self, line: int) -> str:
        """Text of a 1-based line, without its terminator."""
        start = self._line_starts[line - 1]
        match = LINE_TERMINATOR.search(self.text, start)
        return self.text[start:] if match is None else self.text[start : match.start()]

    def offset(self, line: int, column: int) -> int:
        """Character offset of a 1-based line and 0-based character column."""
        if line < 1 or line > len(self._line_starts):
            msg = f"Line {line} out of range 1..{len(self._line_starts)}"
            raise ValueError(msg)
        return self._line_starts[line - 1] + column

    def ast_offset(self, line: int, byte_column: int) -> int:
        """Character offset of an ast (lineno, col_offset) pair."""
        return self.offset(line, utf8_column_to_offset(self.line_text(line), byte_column))

    def node_range(self, node: ast.AST) -> tuple[int, int]:
        """Half-open character range covered by a located node.

        Raises:
            ValueError: If the node carries no position information
        """
        lineno = getattr(node, "lineno", None)
        end_lineno = getattr(node, "end_lineno", None)
        if lineno is None or end_lineno is None:
            msg = f"{type(node).__name__} node has no source position"
            raise ValueError(msg)
        start = self.ast_offset(lineno, node.col_offset)  # type: ignore[attr-defined]
        end = self.ast_offset(end_lineno, node.end_col_offset)  # type: ignore[attr-defined]
        return start, end

    def get_text(self, node: ast.AST | None = None) -> str:
        """Source text of a node, or the whole text when node is None."""
        if node is None:
            return self.text
        start, end = self.node_range(node)
        return self.text[start:end]

    def location(self, offset: int) -> tuple[int, int]:
        """1-based line and 0-based column of a character offset."""
        return offset_to_location(self._line_starts, min(offset, len(self.text)))
