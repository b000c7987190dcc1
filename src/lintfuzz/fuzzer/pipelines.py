"""Fault-detecting pipelines.

A pipeline runs one candidate text through the analyzer under one
configuration and converts any fault into a FaultDescriptor value.
Exceptions raised by the analyzer never escape a pipeline; they are
caught at the single call site around each analyzer invocation.

Architecture:
    - CrashOnlyPipeline: one analyze() call
    - AutofixPipeline: up to max_passes analyze_and_fix() calls, each
      fixed text re-validated by the parser before the next pass

Python 3.13+.
"""

import logging
import traceback
from dataclasses import dataclass
from typing import Protocol

from lintfuzz.configuration import Configuration
from lintfuzz.constants import MAX_AUTOFIX_PASSES
from lintfuzz.diagnostics import Diagnostic
from lintfuzz.enums import FaultKind
from lintfuzz.syntax import PythonSyntaxValidator, build_parse_diagnostic

from .protocols import Analyzer, SyntaxChecker

__all__ = [
    "AutofixPipeline",
    "CrashOnlyPipeline",
    "FaultDescriptor",
    "Pipeline",
    "format_signature",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FaultDescriptor:
    """Data form of a fault detected by a pipeline.

    Attributes:
        kind: crash or autofix
        text: Candidate state at the moment of the fault. For a crash, the
            text handed to the faulting call; for an autofix fault, the
            invalid fix output
        signature: Formatted traceback (crash only)
        diagnostic: Synthesized parse diagnostic (autofix only)
        pass_number: 1-based autofix pass that faulted (1 for crash-only)
        input_text: Text fed to the faulting pass
    """

    kind: FaultKind
    text: str
    signature: str | None = None
    diagnostic: Diagnostic | None = None
    pass_number: int = 1
    input_text: str | None = None

    def __post_init__(self) -> None:
        """Validate that each kind carries its payload."""
        if self.kind is FaultKind.CRASH and self.signature is None:
            msg = "Crash faults require a signature"
            raise ValueError(msg)
        if self.kind is FaultKind.AUTOFIX and self.diagnostic is None:
            msg = "Autofix faults require a diagnostic"
            raise ValueError(msg)

    @property
    def error(self) -> str | Diagnostic:
        """Signature for crash faults, diagnostic for autofix faults."""
        if self.kind is FaultKind.CRASH:
            return self.signature  # type: ignore[return-value]
        return self.diagnostic  # type: ignore[return-value]


class Pipeline(Protocol):
    """Anything that turns (text, config) into an optional fault."""

    def run(self, text: str, config: Configuration) -> FaultDescriptor | None: ...


def format_signature(error: BaseException) -> str:
    """Render an exception and its chain as a traceback string."""
    return "".join(traceback.format_exception(error))


class CrashOnlyPipeline:
    """Detect analyzer crashes with a single analyze() call.

    Usage:
        pipeline = CrashOnlyPipeline(linter)
        fault = pipeline.run(text, config)
    """

    __slots__ = ("analyzer",)

    def __init__(self, analyzer: Analyzer) -> None:
        self.analyzer = analyzer

    def run(self, text: str, config: Configuration) -> FaultDescriptor | None:
        try:
            self.analyzer.analyze(text, config)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.debug("Analyzer crashed: %s: %s", type(e).__name__, e)
            return FaultDescriptor(
                kind=FaultKind.CRASH,
                text=text,
                signature=format_signature(e),
                input_text=text,
            )
        return None

    def __repr__(self) -> str:
        return f"CrashOnlyPipeline(analyzer={self.analyzer!r})"


class AutofixPipeline:
    """Detect crashes and syntax-breaking fixes across repeated fix passes.

    Each pass analyzes and fixes the current text. A pass that changes
    nothing ends the run without a fault. Fix output that the parser
    rejects is an autofix fault; an exception on any pass is a crash
    fault on the text that pass received. Exhausting max_passes ends
    the run without a fault.

    Attributes:
        analyzer: Analyzer under test
        parser: Syntax validator for fix output
        max_passes: Upper bound on fix passes
    """

    __slots__ = ("analyzer", "max_passes", "parser")

    def __init__(
        self,
        analyzer: Analyzer,
        parser: SyntaxChecker | None = None,
        max_passes: int = MAX_AUTOFIX_PASSES,
    ) -> None:
        if max_passes < 1:
            msg = f"max_passes must be >= 1, got {max_passes}"
            raise ValueError(msg)
        self.analyzer = analyzer
        self.parser = parser if parser is not None else PythonSyntaxValidator()
        self.max_passes = max_passes

    def run(self, text: str, config: Configuration) -> FaultDescriptor | None:
        current = text
        for pass_number in range(1, self.max_passes + 1):
            try:
                result = self.analyzer.analyze_and_fix(current, config)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.debug(
                    "Analyzer crashed on pass %d: %s: %s", pass_number, type(e).__name__, e
                )
                return FaultDescriptor(
                    kind=FaultKind.CRASH,
                    text=current,
                    signature=format_signature(e),
                    pass_number=pass_number,
                    input_text=current,
                )

            fixed_text = result.fixed_text
            if fixed_text is None:
                logger.debug("Fixes converged after %d pass(es)", pass_number)
                return None

            syntax_fault = self.parser.validate(fixed_text)
            if syntax_fault is not None:
                logger.debug(
                    "Pass %d produced invalid output at %d:%d: %s",
                    pass_number,
                    syntax_fault.line,
                    syntax_fault.column,
                    syntax_fault.message,
                )
                return FaultDescriptor(
                    kind=FaultKind.AUTOFIX,
                    text=fixed_text,
                    diagnostic=build_parse_diagnostic(syntax_fault),
                    pass_number=pass_number,
                    input_text=current,
                )
            current = fixed_text

        logger.debug("Fixes did not converge within %d passes", self.max_passes)
        return None

    def __repr__(self) -> str:
        return (
            f"AutofixPipeline(analyzer={self.analyzer!r}, parser={self.parser!r}, "
            f"max_passes={self.max_passes})"
        )
