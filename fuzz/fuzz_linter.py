#!/usr/bin/env python3
"""Reference Linter Fuzzer (Atheris).

Targets: lintfuzz.linter.Linter through both fuzz pipelines.

Coverage-guided bytes are decoded into a source text, or used to seed a
ProgramGenerator candidate, and run through the crash
pipeline and the autofix pipeline with the full built-in configuration.
Any fault from a built-in rule is a finding.

Usage:
    python fuzz/fuzz_linter.py -max_total_time=60
    python fuzz/fuzz_linter.py corpus/ -runs=100000
"""

from __future__ import annotations

import atexit
import json
import logging
import sys
from typing import TypeAlias

# --- PEP 695 Type Aliases ---
FuzzStats: TypeAlias = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("-" * 80, file=sys.stderr)
    print("ERROR: 'atheris' not found.", file=sys.stderr)
    print("Install the fuzz extra: pip install -e '.[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

# Suppress harness logging during fuzzing
logging.getLogger("lintfuzz").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["lintfuzz"]):
    from lintfuzz.fuzzer import AutofixPipeline, CrashOnlyPipeline
    from lintfuzz.generation import ProgramGenerator
    from lintfuzz.linter import Linter


class UnexpectedFinding(Exception):  # noqa: N818 - Domain-specific name
    """Raised when a pipeline reports a fault on fuzzer input."""


_LINTER = Linter()
_FULL_CONFIG = _LINTER.get_full_configuration()
_CRASH_PIPELINE = CrashOnlyPipeline(_LINTER)
_AUTOFIX_PIPELINE = AutofixPipeline(_LINTER)


def _candidate(fdp: atheris.FuzzedDataProvider) -> str:
    """Decode raw text, or build a generator candidate from a fuzzer seed."""
    if fdp.ConsumeBool():
        seed = fdp.ConsumeIntInRange(0, 2**32 - 1)
        return ProgramGenerator(seed=seed)()
    return fdp.ConsumeUnicodeNoSurrogates(fdp.remaining_bytes())


def test_one_input(data: bytes) -> None:
    """Atheris entry point: run one candidate through both pipelines."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    text = _candidate(fdp)

    for pipeline in (_CRASH_PIPELINE, _AUTOFIX_PIPELINE):
        fault = pipeline.run(text, _FULL_CONFIG)
        if fault is not None:
            _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
            msg = f"{fault.kind} fault on pass {fault.pass_number}:\n{fault.error}"
            raise UnexpectedFinding(msg)


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
