"""Minimal reproducer search over rule sets.

The reducer shrinks the full configuration to a set of rules that still
reproduces a fault on a fixed text. Each candidate set is judged by an
oracle that re-runs the original pipeline and reports whether a fault of
the same kind recurs. Only the kind is compared; messages and line
numbers may differ between the full and the reduced run.

Algorithm (one-rule-at-a-time elimination):
    1. active := every rule of the full configuration
    2. For each rule of a snapshot of active, drop it tentatively and
       keep the drop if the oracle still faults
    3. Repeat until a whole round drops nothing

The result is 1-minimal: removing any single remaining rule makes the
fault disappear. It is not guaranteed to be the smallest reproducing
set. A set is never emptied, since a single remaining rule is never
tested for removal.

Cost is bounded by rounds x rules oracle calls.

Python 3.13+.
"""

import logging
from collections.abc import Callable
from typing import TypeAlias

from lintfuzz.configuration import Configuration
from lintfuzz.enums import FaultKind

from .pipelines import Pipeline

__all__ = ["Oracle", "Reducer", "build_oracle", "reduce"]

logger = logging.getLogger(__name__)

# Returns True when the fault under reduction recurs with the given rules
Oracle: TypeAlias = Callable[[Configuration], bool]


def build_oracle(pipeline: Pipeline, text: str, fault_kind: FaultKind) -> Oracle:
    """Wrap a pipeline as a reduction oracle for one text and fault kind.

    Args:
        pipeline: Pipeline that detected the fault
        text: Originally generated candidate text
        fault_kind: Kind of the detected fault

    Returns:
        Callable that re-runs the pipeline and compares fault kinds
    """

    def oracle(config: Configuration) -> bool:
        fault = pipeline.run(text, config)
        return fault is not None and fault.kind is fault_kind

    return oracle


class Reducer:
    """Iterative one-at-a-time rule eliminator.

    Deterministic: the same oracle outcomes give the same result.

    Attributes:
        oracle_calls: Oracle invocations made by the last reduce()
        rounds: Elimination rounds made by the last reduce()
    """

    __slots__ = ("_oracle", "oracle_calls", "rounds")

    def __init__(self, oracle: Oracle) -> None:
        self._oracle = oracle
        self.oracle_calls = 0
        self.rounds = 0

    def reduce(self, full_config: Configuration) -> Configuration:
        """Shrink full_config to a 1-minimal reproducing configuration.

        An empty configuration is returned unchanged. The full
        configuration is not re-tested: the caller already observed the
        fault with it.
        """
        self.oracle_calls = 0
        self.rounds = 0
        if len(full_config) == 0:
            logger.warning("Nothing to reduce: configuration has no rules")
            return full_config

        active = list(full_config.rule_ids)
        while True:
            self.rounds += 1
            removed = 0
            for rule_id in tuple(active):
                if len(active) == 1:
                    break
                candidate = [r for r in active if r != rule_id]
                self.oracle_calls += 1
                if self._oracle(full_config.restrict(candidate)):
                    active = candidate
                    removed += 1
            logger.debug(
                "Reduction round %d: removed %d rule(s), %d remain",
                self.rounds,
                removed,
                len(active),
            )
            if removed == 0:
                break

        logger.debug(
            "Reduced %d rules to %d in %d round(s), %d oracle call(s)",
            len(full_config),
            len(active),
            self.rounds,
            self.oracle_calls,
        )
        return full_config.restrict(active)

    def __repr__(self) -> str:
        return f"Reducer(oracle_calls={self.oracle_calls}, rounds={self.rounds})"


def reduce(
    text: str,
    full_config: Configuration,
    fault_kind: FaultKind,
    pipeline: Pipeline,
) -> Configuration:
    """Reduce full_config for a fault of fault_kind found on text.

    Convenience wrapper around build_oracle() and Reducer.
    """
    return Reducer(build_oracle(pipeline, text, fault_kind)).reduce(full_config)
