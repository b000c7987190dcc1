"""Combine the fixes of one analysis pass into a single output text.

Fixes are applied in range order. A fix whose range overlaps or touches
the previously applied one is skipped and left for the next pass, so one
pass never applies two edits to the same region.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from lintfuzz.diagnostics import Diagnostic, TextEdit

__all__ = ["FixOutcome", "apply_fixes"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FixOutcome:
    """Result of applying fixes.

    Attributes:
        output: Text after applying the non-conflicting fixes
        applied: Diagnostics whose fixes were applied
        skipped: Fixable diagnostics left for a later pass
    """

    output: str
    applied: tuple[Diagnostic, ...]
    skipped: tuple[Diagnostic, ...]

    @property
    def fixed(self) -> bool:
        """True if at least one fix was applied."""
        return bool(self.applied)


def apply_fixes(text: str, diagnostics: Iterable[Diagnostic]) -> FixOutcome:
    """Apply every non-conflicting fix attached to diagnostics.

    Args:
        text: Source text the diagnostics refer to
        diagnostics: Findings from one analysis pass

    Returns:
        FixOutcome with the combined output
    """
    fixable = sorted(
        (d for d in diagnostics if d.fix is not None),
        key=lambda d: (d.fix.start, d.fix.end),  # type: ignore[union-attr]
    )
    if not fixable:
        return FixOutcome(output=text, applied=(), skipped=())

    parts: list[str] = []
    applied: list[Diagnostic] = []
    skipped: list[Diagnostic] = []
    last_end = -1
    for diagnostic in fixable:
        edit: TextEdit = diagnostic.fix  # type: ignore[assignment]
        if edit.start <= last_end or edit.end > len(text):
            skipped.append(diagnostic)
            continue
        parts.append(text[max(last_end, 0) : edit.start])
        parts.append(edit.text)
        last_end = edit.end
        applied.append(diagnostic)

    parts.append(text[max(last_end, 0) :])
    if skipped:
        logger.debug("Deferred %d conflicting fix(es) to the next pass", len(skipped))
    return FixOutcome(output="".join(parts), applied=tuple(applied), skipped=tuple(skipped))
