"""Reference program generator.

Produces syntactically valid Python modules by grammar-directed random
construction, then perturbs the layout (trailing whitespace, runs of
blank lines, long lines, missing final newline) so that layout rules
have something to report and fix.

Strategy:
1. Choose a statement count, then build each statement recursively,
   bounded by max_depth for compound statements
2. Build expressions from a small pool of names and literals, biased
   toward comparisons with None
3. Apply layout noise per line

The generator is seeded: two instances with the same seed and shape
produce the same sequence of candidates.

Usage:
    generator = ProgramGenerator(seed=1234)
    text = generator()

Python 3.13+. Zero external dependencies.
"""

import random

from lintfuzz.constants import DEFAULT_MAX_DEPTH, DEFAULT_MAX_STATEMENTS

__all__ = ["ProgramGenerator"]

NAMES = ("a", "b", "value", "items", "result", "node", "count", "x")
FUNCTIONS = ("f", "g", "len", "print", "process")
EXCEPTIONS = ("ValueError", "KeyError", "Exception", "OSError")
INDENT = "    "


class ProgramGenerator:
    """Seeded generator of Python source candidates.

    Calling the instance returns one candidate text.

    Attributes:
        max_statements: Upper bound on statements per block
        max_depth: Upper bound on compound statement nesting
        generated: Number of candidates produced so far
    """

    __slots__ = ("_random", "generated", "max_depth", "max_statements", "seed")

    def __init__(
        self,
        seed: int | None = None,
        *,
        max_statements: int = DEFAULT_MAX_STATEMENTS,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if max_statements < 1:
            msg = f"max_statements must be >= 1, got {max_statements}"
            raise ValueError(msg)
        if max_depth < 0:
            msg = f"max_depth must be >= 0, got {max_depth}"
            raise ValueError(msg)
        self.seed = seed
        self.max_statements = max_statements
        self.max_depth = max_depth
        self.generated = 0
        self._random = random.Random(seed)

    def __call__(self) -> str:
        rng = self._random
        lines = self._block(depth=0, indent="")
        noisy = [self._noise(line) for line in lines]
        text = "\n".join(noisy)
        if rng.random() >= 0.2:
            text += "\n"
        self.generated += 1
        return text

    def __repr__(self) -> str:
        return (
            f"ProgramGenerator(seed={self.seed!r}, max_statements={self.max_statements}, "
            f"max_depth={self.max_depth})"
        )

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _block(self, depth: int, indent: str) -> list[str]:
        rng = self._random
        upper = self.max_statements if depth == 0 else max(1, self.max_statements // 2)
        count = rng.randint(1, upper)
        lines: list[str] = []
        for _ in range(count):
            lines.extend(self._statement(depth, indent))
            if rng.random() < 0.15:
                lines.extend([""] * rng.randint(1, 4))
        return lines

    def _statement(self, depth: int, indent: str) -> list[str]:
        rng = self._random
        simple = ("assign", "call", "pass", "augassign")
        compound = ("if", "for", "while", "def", "try")
        kind = rng.choice(simple + compound if depth < self.max_depth else simple)
        inner = indent + INDENT

        match kind:
            case "assign":
                return [f"{indent}{rng.choice(NAMES)} = {self._expression(2)}"]
            case "augassign":
                return [f"{indent}{rng.choice(NAMES)} += {self._literal()}"]
            case "call":
                return [f"{indent}{self._call(2)}"]
            case "pass":
                return [f"{indent}pass"]
            case "if":
                lines = [f"{indent}if {self._condition()}:", *self._block(depth + 1, inner)]
                if rng.random() < 0.5:
                    lines += [f"{indent}else:", *self._block(depth + 1, inner)]
                return lines
            case "for":
                header = f"{indent}for {rng.choice(NAMES)} in {rng.choice(NAMES)}:"
                return [header, *self._block(depth + 1, inner)]
            case "while":
                body = self._block(depth + 1, inner)
                return [f"{indent}while {self._condition()}:", *body, f"{inner}break"]
            case "def":
                params = ", ".join(rng.sample(NAMES, rng.randint(0, 3)))
                body = self._block(depth + 1, inner)
                return [
                    f"{indent}def {rng.choice(FUNCTIONS)}_{depth}({params}):",
                    *body,
                    f"{inner}return {self._expression(1)}",
                ]
            case _:
                handler = "except:" if rng.random() < 0.3 else f"except {rng.choice(EXCEPTIONS)}:"
                return [
                    f"{indent}try:",
                    *self._block(depth + 1, inner),
                    f"{indent}{handler}",
                    *self._block(depth + 1, inner),
                ]

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _condition(self) -> str:
        rng = self._random
        operand = rng.choice(NAMES)
        match rng.randrange(4):
            case 0:
                return f"{operand} == None"
            case 1:
                return f"{operand} != None"
            case 2:
                return f"{operand} is not None"
            case _:
                return f"{operand} < {self._literal()}"

    def _literal(self) -> str:
        rng = self._random
        match rng.randrange(4):
            case 0:
                return str(rng.randint(0, 1000))
            case 1:
                return repr("".join(rng.choice("abcxyz _") for _ in range(rng.randint(0, 12))))
            case 2:
                # Long enough to trip line length limits
                return repr("x" * rng.randint(60, 140))
            case _:
                return "None"

    def _call(self, budget: int) -> str:
        rng = self._random
        args = ", ".join(self._expression(budget - 1) for _ in range(rng.randint(0, 3)))
        return f"{rng.choice(FUNCTIONS)}({args})"

    def _expression(self, budget: int) -> str:
        rng = self._random
        if budget <= 0:
            return rng.choice((rng.choice(NAMES), self._literal()))
        match rng.randrange(5):
            case 0:
                return self._call(budget)
            case 1:
                return f"({self._condition()})"
            case 2:
                return f"{self._expression(budget - 1)} + {self._expression(budget - 1)}"
            case 3:
                return rng.choice(NAMES)
            case _:
                return self._literal()

    # ------------------------------------------------------------------
    # Layout noise
    # ------------------------------------------------------------------

    def _noise(self, line: str) -> str:
        rng = self._random
        if rng.random() < 0.15:
            return line + rng.choice((" ", "  ", "\t", " \t "))
        return line
