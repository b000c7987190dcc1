"""Hypothesis strategies for generating Python source texts.

Strategy Categories:
- Valid programs: Seeded ProgramGenerator output
- Layout noise: Valid statements with trailing whitespace, blank-line
  runs, CRLF/CR line endings and a missing final newline
- Chaos: Arbitrary text, mostly rejected by the parser
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from lintfuzz.generation import ProgramGenerator

# =============================================================================
# Constants
# =============================================================================

NAMES = ("a", "b", "value", "items", "x")

_SIMPLE_STATEMENTS = (
    "pass",
    "x = 1",
    "value = a + b",
    "print(value)",
    "items = [1, 2, 3]",
    "a == None",
    "b != None",
    "result = (a == None)",
)

_TERMINATORS = ("\n", "\r\n", "\r")


# =============================================================================
# Valid programs
# =============================================================================


@composite
def python_programs(draw: st.DrawFn) -> str:
    """Generate a valid program from a seeded ProgramGenerator.

    Events emitted:
    - program_shape={statements}x{depth}: Generator shape
    """
    seed = draw(st.integers(min_value=0, max_value=2**32 - 1))
    statements = draw(st.integers(min_value=1, max_value=8))
    depth = draw(st.integers(min_value=0, max_value=3))
    event(f"program_shape={statements}x{depth}")
    return ProgramGenerator(seed, max_statements=statements, max_depth=depth)()


@composite
def none_comparisons(draw: st.DrawFn) -> str:
    """Generate a single ``== None`` / ``!= None`` comparison statement.

    Spacing around the operator varies, including none at all.
    """
    operand = draw(st.sampled_from(NAMES))
    operator = draw(st.sampled_from(["==", "!="]))
    left_pad = draw(st.sampled_from(["", " ", "  "]))
    right_pad = draw(st.sampled_from(["", " ", "\t"]))
    reverse = draw(st.booleans())
    event(f"comparison={operator}{'_reversed' if reverse else ''}")
    if reverse:
        return f"None{left_pad}{operator}{right_pad}{operand}\n"
    return f"{operand}{left_pad}{operator}{right_pad}None\n"


@composite
def layout_noise_sources(draw: st.DrawFn) -> str:
    """Generate valid top-level statements with noisy layout.

    Events emitted:
    - terminator={name}: Line terminator used
    - continuation=True: A statement continues onto a whitespace-only line
    - final_newline={bool}: Whether the text ends with a terminator
    """
    terminator = draw(st.sampled_from(_TERMINATORS))
    event(f"terminator={terminator!r}")
    lines: list[str] = []
    for statement in draw(st.lists(st.sampled_from(_SIMPLE_STATEMENTS), min_size=1, max_size=6)):
        trailing = draw(st.sampled_from(["", " ", "  ", "\t", " \t"]))
        lines.append(statement + trailing)
        if terminator != "\r" and draw(st.booleans()):
            # Backslash continuation onto a whitespace-only line
            event("continuation=True")
            lines[-1] = f"{statement} \\"
            lines.append(draw(st.sampled_from([" ", "    ", "\t"])))
        blanks = draw(st.integers(min_value=0, max_value=4))
        lines.extend(draw(st.sampled_from(["", " ", "\t"])) for _ in range(blanks))
    final_newline = draw(st.booleans())
    event(f"final_newline={final_newline}")
    text = terminator.join(lines)
    return text + terminator if final_newline else text


# =============================================================================
# Chaos
# =============================================================================


@composite
def python_chaos_sources(draw: st.DrawFn) -> str:
    """Generate arbitrary text biased toward Python punctuation.

    Events emitted:
    - strategy=chaos_{kind}: Alphabet used
    """
    kind = draw(st.sampled_from(["punctuation", "unicode"]))
    event(f"strategy=chaos_{kind}")
    if kind == "punctuation":
        alphabet = st.sampled_from(list("abx01 ()[]{}:=!<>#'\"\\\t\n\r,.+-*/"))
        return "".join(draw(st.lists(alphabet, max_size=60)))
    return draw(st.text(max_size=60))
