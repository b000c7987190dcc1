"""Source handling for the reference analyzer.

Exports:
    SourceCode - Parsed text with node range helpers
    PythonSyntaxValidator - ast.parse backed validator
    SyntaxFault - Parser rejection value
    build_parse_diagnostic - Fatal diagnostic for a SyntaxFault

Python 3.13+.
"""

from .source import SourceCode
from .validator import PythonSyntaxValidator, SyntaxFault, build_parse_diagnostic

__all__ = [
    "PythonSyntaxValidator",
    "SourceCode",
    "SyntaxFault",
    "build_parse_diagnostic",
]
