"""Fuzz driver: generate, detect, reduce, report.

For each iteration the driver pulls one candidate from the program
generator, runs it through the selected pipeline with the full
configuration, and on a fault reduces the configuration against the
same pipeline and the same candidate before recording the failure.

The full configuration is fetched once per run and never mutated. The
loop is strictly sequential: generators may depend on call order and
analyzers are not assumed reentrant.

Example:
    >>> from lintfuzz import Linter, ProgramGenerator, fuzz
    >>> records = fuzz(
    ...     count=100,
    ...     program_generator=ProgramGenerator(seed=0),
    ...     check_autofixes=True,
    ...     analyzer=Linter(),
    ... )

Python 3.13+.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from lintfuzz.configuration import Configuration
from lintfuzz.constants import MAX_AUTOFIX_PASSES
from lintfuzz.enums import FaultKind

from .pipelines import AutofixPipeline, CrashOnlyPipeline, Pipeline
from .protocols import Analyzer, ProgramGenerator, RuleSource, SyntaxChecker
from .reducer import Reducer, build_oracle
from .reporter import FailureRecord, build_failure_record

__all__ = ["FuzzStats", "Fuzzer", "ProgressCallback", "fuzz"]

logger = logging.getLogger(__name__)

# Invoked after every iteration with (completed iterations, findings so far)
ProgressCallback: TypeAlias = Callable[[int, int], None]


@dataclass(slots=True)
class FuzzStats:
    """Counters of one fuzz run.

    Attributes:
        iterations: Candidates processed
        crashes: Crash records produced
        autofix_failures: Autofix records produced
        oracle_calls: Pipeline re-runs spent on reduction
        elapsed: Wall-clock seconds
    """

    iterations: int = 0
    crashes: int = 0
    autofix_failures: int = 0
    oracle_calls: int = 0
    elapsed: float = 0.0

    @property
    def findings(self) -> int:
        return self.crashes + self.autofix_failures


class Fuzzer:
    """Reusable fuzz driver bound to one analyzer and pipeline.

    Args:
        analyzer: Analyzer under test
        check_autofixes: Use the autofix pipeline instead of crash-only
        rule_source: Provider of the full configuration (default: the
            analyzer, which must then implement get_full_configuration)
        parser: Syntax validator for fix output (autofix only)
        max_passes: Fix pass bound (autofix only)

    Raises:
        TypeError: If no rule source is given and the analyzer is not one
    """

    __slots__ = ("_pipeline", "_rule_source", "analyzer", "check_autofixes", "stats")

    def __init__(
        self,
        analyzer: Analyzer,
        *,
        check_autofixes: bool = False,
        rule_source: RuleSource | None = None,
        parser: SyntaxChecker | None = None,
        max_passes: int = MAX_AUTOFIX_PASSES,
    ) -> None:
        if rule_source is None:
            if not isinstance(analyzer, RuleSource):
                msg = (
                    f"{type(analyzer).__name__} does not provide get_full_configuration(); "
                    "pass rule_source explicitly"
                )
                raise TypeError(msg)
            rule_source = analyzer
        self.analyzer = analyzer
        self.check_autofixes = check_autofixes
        self._rule_source = rule_source
        self._pipeline: Pipeline = (
            AutofixPipeline(analyzer, parser, max_passes)
            if check_autofixes
            else CrashOnlyPipeline(analyzer)
        )
        self.stats = FuzzStats()

    @property
    def pipeline(self) -> Pipeline:
        return self._pipeline

    def run(
        self,
        count: int,
        program_generator: ProgramGenerator,
        progress_callback: ProgressCallback | None = None,
    ) -> list[FailureRecord]:
        """Fuzz count candidates and return every failure found.

        Analyzer faults never escape; exceptions raised by the program
        generator or the progress callback propagate.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            msg = f"count must be >= 0, got {count}"
            raise ValueError(msg)

        self.stats = FuzzStats()
        started = time.perf_counter()
        full_config = self._rule_source.get_full_configuration()
        if len(full_config) == 0:
            logger.warning("Full configuration has no rules; only parse-level faults can occur")

        records: list[FailureRecord] = []
        for iteration in range(count):
            text = program_generator()
            record = self._check(text, full_config)
            if record is not None:
                records.append(record)
                logger.info(
                    "Iteration %d: %s failure reduced to %s",
                    iteration,
                    record.type,
                    ", ".join(record.config.rule_ids) or "no rules",
                )
            self.stats.iterations += 1
            if progress_callback is not None:
                progress_callback(iteration + 1, len(records))

        self.stats.elapsed = time.perf_counter() - started
        logger.info(
            "Fuzzed %d candidate(s) in %.2fs: %d crash(es), %d autofix failure(s)",
            self.stats.iterations,
            self.stats.elapsed,
            self.stats.crashes,
            self.stats.autofix_failures,
        )
        return records

    def _check(self, text: str, full_config: Configuration) -> FailureRecord | None:
        fault = self._pipeline.run(text, full_config)
        if fault is None:
            return None

        reducer = Reducer(build_oracle(self._pipeline, text, fault.kind))
        minimal_config = reducer.reduce(full_config)
        self.stats.oracle_calls += reducer.oracle_calls
        if fault.kind is FaultKind.CRASH:
            self.stats.crashes += 1
        else:
            self.stats.autofix_failures += 1
        return build_failure_record(fault, minimal_config)

    def __repr__(self) -> str:
        return f"Fuzzer(pipeline={self._pipeline!r}, stats={self.stats!r})"


def fuzz(
    *,
    count: int,
    program_generator: ProgramGenerator,
    check_autofixes: bool,
    analyzer: Analyzer,
    rule_source: RuleSource | None = None,
    parser: SyntaxChecker | None = None,
    max_passes: int = MAX_AUTOFIX_PASSES,
    progress_callback: ProgressCallback | None = None,
) -> list[FailureRecord]:
    """Fuzz an analyzer and return its failure records.

    Args:
        count: Number of candidates to generate (>= 0)
        program_generator: Called exactly count times, in order
        check_autofixes: Select the autofix pipeline over crash-only
        analyzer: Analyzer under test
        rule_source: Full configuration provider (default: analyzer)
        parser: Fix output validator (default: CPython parser)
        max_passes: Fix pass bound
        progress_callback: Called with (completed, findings) per iteration

    Returns:
        One FailureRecord per faulting candidate, in generation order

    Raises:
        ValueError: If count is negative
        TypeError: If no rule source is available
    """
    fuzzer = Fuzzer(
        analyzer,
        check_autofixes=check_autofixes,
        rule_source=rule_source,
        parser=parser,
        max_passes=max_passes,
    )
    return fuzzer.run(count, program_generator, progress_callback)
