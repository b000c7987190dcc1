"""Fuzz harness core.

Exports:
    fuzz, Fuzzer, FuzzStats - Driver
    CrashOnlyPipeline, AutofixPipeline, FaultDescriptor - Fault detection
    Reducer, reduce, build_oracle - Minimal reproducer search
    FailureRecord, build_failure_record - Results
    Analyzer, RuleSource, SyntaxChecker, ProgramGenerator - Collaborator protocols

Python 3.13+.
"""

from .driver import FuzzStats, Fuzzer, ProgressCallback, fuzz
from .pipelines import AutofixPipeline, CrashOnlyPipeline, FaultDescriptor, Pipeline
from .protocols import Analyzer, ProgramGenerator, RuleSource, SyntaxChecker
from .reducer import Oracle, Reducer, build_oracle, reduce
from .reporter import FailureRecord, build_failure_record

__all__ = [
    "Analyzer",
    "AutofixPipeline",
    "CrashOnlyPipeline",
    "FailureRecord",
    "FaultDescriptor",
    "FuzzStats",
    "Fuzzer",
    "Oracle",
    "Pipeline",
    "ProgramGenerator",
    "ProgressCallback",
    "Reducer",
    "RuleSource",
    "SyntaxChecker",
    "build_failure_record",
    "build_oracle",
    "fuzz",
    "reduce",
]
