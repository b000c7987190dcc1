"""Built-in rules of the reference analyzer.

BUILTIN_RULES lists them in registration order; create_default_registry()
registers exactly these.

Python 3.13+.
"""

from .comparison import PreferIsNone
from .style import MaxLineLength, NoBareExcept
from .whitespace import EolLast, NoMultipleEmptyLines, NoTrailingSpaces

__all__ = [
    "BUILTIN_RULES",
    "EolLast",
    "MaxLineLength",
    "NoBareExcept",
    "NoMultipleEmptyLines",
    "NoTrailingSpaces",
    "PreferIsNone",
]

BUILTIN_RULES = (
    NoTrailingSpaces,
    EolLast,
    NoMultipleEmptyLines,
    PreferIsNone,
    NoBareExcept,
    MaxLineLength,
)
