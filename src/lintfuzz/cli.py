"""Command-line interface.

Subcommands:
    run     Fuzz the reference analyzer with generated programs
    repro   Re-run a stored crash, or re-parse stored fix output
    rules   List the built-in rules

Usage:
    lintfuzz run -n 500 --seed 7 --autofix --output failures.json
    lintfuzz repro failures.json --index 2
    lintfuzz rules

Exit Codes (run):
    0   No failures found
    1   At least one failure found

Exit Codes (repro):
    0   Record did not reproduce
    1   Crash reproduced, or stored fix output still fails to parse
    2   File read or parse error

Python 3.13+.
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from lintfuzz.constants import DEFAULT_FUZZ_COUNT, MAX_AUTOFIX_PASSES, MAX_SOURCE_SIZE
from lintfuzz.diagnostics import FailureFormatter, LintFuzzError
from lintfuzz.enums import FaultKind, OutputFormat
from lintfuzz.fuzzer import FailureRecord, fuzz
from lintfuzz.fuzzer.pipelines import format_signature
from lintfuzz.generation import ProgramGenerator
from lintfuzz.linter import Linter, get_shared_registry
from lintfuzz.syntax import PythonSyntaxValidator, build_parse_diagnostic

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="lintfuzz",
        description="Fuzz a rule-based analyzer for crashes and syntax-breaking fixes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Crash-only run over 1000 generated programs:
  lintfuzz run

  # Autofix run, reproducible, failures saved for later replay:
  lintfuzz run -n 200 --seed 42 --autofix --output failures.json

  # Replay the third stored failure:
  lintfuzz repro failures.json --index 2
""",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Fuzz the reference analyzer")
    run.add_argument(
        "-n",
        "--count",
        type=int,
        default=DEFAULT_FUZZ_COUNT,
        help=f"Number of candidates to generate (default: {DEFAULT_FUZZ_COUNT})",
    )
    run.add_argument("--seed", type=int, default=None, help="Generator seed")
    run.add_argument(
        "--autofix",
        action="store_true",
        help="Check fix output instead of crashes only",
    )
    run.add_argument(
        "--max-passes",
        type=int,
        default=MAX_AUTOFIX_PASSES,
        help=f"Fix pass bound (default: {MAX_AUTOFIX_PASSES})",
    )
    run.add_argument("--output", "-o", type=Path, help="Write failure records as JSON")
    run.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Report format on stdout (default: text)",
    )

    repro = subparsers.add_parser(
        "repro",
        help="Re-run a stored crash record or re-parse stored fix output",
    )
    repro.add_argument("file", type=Path, help="JSON file written by 'lintfuzz run --output'")
    repro.add_argument("--index", type=int, default=0, help="Record index (default: 0)")

    subparsers.add_parser("rules", help="List built-in rules")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cmd_run(args: argparse.Namespace) -> int:
    if args.count < 0:
        print(f"[ERROR] Count must be >= 0, got {args.count}", file=sys.stderr)
        return 2
    if args.max_passes < 1:
        print(f"[ERROR] Max passes must be >= 1, got {args.max_passes}", file=sys.stderr)
        return 2

    generator = ProgramGenerator(seed=args.seed)
    records = fuzz(
        count=args.count,
        program_generator=generator,
        check_autofixes=args.autofix,
        analyzer=Linter(),
        max_passes=args.max_passes,
    )

    formatter = FailureFormatter(output_format=OutputFormat(args.format), truncate=True)
    if records:
        print(formatter.format_all(records))

    if args.output is not None:
        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %d record(s) to %s", len(records), args.output)

    if records:
        print(f"[FINDING] {len(records)} failure(s) in {args.count} candidate(s)", file=sys.stderr)
        return 1
    print(f"[OK] No failures in {args.count} candidate(s)", file=sys.stderr)
    return 0


def _load_record(path: Path, index: int) -> FailureRecord:
    """Read one record from a JSON file holding a record or a list of records.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is too large, not JSON, or the record is invalid
        LintFuzzError: If the record's configuration is malformed
    """
    if path.stat().st_size > MAX_SOURCE_SIZE:
        msg = f"File exceeds {MAX_SOURCE_SIZE} bytes"
        raise ValueError(msg)
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        msg = f"Expected a record or a list of records, got {type(data).__name__}"
        raise ValueError(msg)
    if not -len(data) <= index < len(data):
        msg = f"Index {index} out of range for {len(data)} record(s)"
        raise ValueError(msg)
    return FailureRecord.from_dict(data[index])


def _cmd_repro(args: argparse.Namespace) -> int:
    try:
        record = _load_record(args.file, args.index)
    except (OSError, ValueError, LintFuzzError) as e:
        print(f"[ERROR] Cannot load record: {e}", file=sys.stderr)
        return 2

    print(f"[INFO] Replaying {record.type} record from {args.file}")
    print(f"[INFO] Rules: {', '.join(record.config.rule_ids) or 'none'}")
    print(f"[INFO] Input preview: {record.text[:100]!r}")
    print()

    formatter = FailureFormatter()
    if record.type is FaultKind.AUTOFIX:
        # Records keep the fix output, not the text it was computed from
        print("[INFO] Autofix records are rechecked with the parser only")
        fault = PythonSyntaxValidator().validate(record.text)
        if fault is None:
            print("[OK] Stored fix output parses; record did not reproduce")
            return 0
        print("[FINDING] Stored fix output is still rejected by the parser:")
        print(formatter.format_diagnostic(build_parse_diagnostic(fault)))
        return 1

    try:
        Linter().analyze_and_fix(record.text, record.config)
    except Exception as e:  # pylint: disable=broad-exception-caught
        print(f"[FINDING] Analyzer crashed with {type(e).__name__}: {e}")
        print()
        print("Full traceback:")
        print("-" * 60)
        print(format_signature(e), end="")
        print("-" * 60)
        return 1
    print("[OK] Analyzer completed; record did not reproduce")
    return 0


def _cmd_rules(_args: argparse.Namespace) -> int:
    registry = get_shared_registry()
    width = max((len(rule_id) for rule_id in registry), default=0)
    for rule_id in registry:
        rule = registry.get(rule_id)
        if rule is None:
            continue
        marker = "fix" if rule.meta.fixable else "   "
        print(f"{rule_id:<{width}}  {marker}  {rule.meta.description}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    match args.command:
        case "run":
            return _cmd_run(args)
        case "repro":
            return _cmd_repro(args)
        case _:
            return _cmd_rules(args)


if __name__ == "__main__":
    sys.exit(main())
