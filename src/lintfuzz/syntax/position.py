"""Position utilities for source text.

Converts between character offsets and line/column positions for
diagnostics and fixes. Python's ast reports columns as UTF-8 byte
offsets; utf8_column_to_offset bridges those to character offsets.

Conventions: lines are 1-based, columns are 0-based character counts.
Line terminators are ``\\r\\n``, ``\\r`` and ``\\n``, as in the CPython
tokenizer; other characters str.splitlines() breaks on do not end a line.
"""

import re
from bisect import bisect_right

__all__ = [
    "LINE_TERMINATOR",
    "line_start_offsets",
    "offset_to_location",
    "utf8_column_to_offset",
]

LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")


def line_start_offsets(source: str) -> tuple[int, ...]:
    """Character offset of the start of every line.

    Example:
        >>> line_start_offsets("ab\\ncd\\r\\n")
        (0, 3, 7)
    """
    return (0, *(match.end() for match in LINE_TERMINATOR.finditer(source)))


def offset_to_location(line_starts: tuple[int, ...], offset: int) -> tuple[int, int]:
    """Get 1-based line and 0-based column from a character offset.

    Args:
        line_starts: Result of line_start_offsets() for the source
        offset: Character offset in source

    Returns:
        (line, column) tuple

    Example:
        >>> starts = line_start_offsets("hello\\nworld")
        >>> offset_to_location(starts, 2)   # 'l' in "hello"
        (1, 2)
        >>> offset_to_location(starts, 6)   # 'w' in "world"
        (2, 0)
    """
    if offset < 0:
        msg = f"Position must be >= 0, got {offset}"
        raise ValueError(msg)
    index = bisect_right(line_starts, offset) - 1
    return index + 1, offset - line_starts[index]


def utf8_column_to_offset(line_text: str, byte_column: int) -> int:
    """Convert a UTF-8 byte column within a line to a character column.

    Example:
        >>> utf8_column_to_offset("é = 1", 3)  # 'é' is two bytes
        2
    """
    return len(line_text.encode("utf-8")[:byte_column].decode("utf-8", errors="ignore"))
