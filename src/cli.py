"""Command-line entry point for lang-tour.

Subcommands:
- demo   (default): full demonstration sequence, reads one stdin line
- table  : reads one stdin line and prints its multiplication table
- sum    : sum of even integers in [BOTTOM, TOP]

Exit codes: 0 on success, 1 on invalid numeric input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from src.core.contracts import validate_multiplication_table, validate_range_sum
from src.core.domain.range_bounds import RangeBounds
from src.core.math.range_sum import compute_range_sum
from src.demo import DemoConfig, run_demo
from src.table.multiplication import (
    InvalidNumericInput,
    build_multiplication_table,
    read_multiplicand,
    write_table,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1

_DEFAULTS = DemoConfig()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lang-tour",
        description="Loops, closures, a multiplication table and an even-sum helper.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    sub = p.add_subparsers(dest="command")

    demo = sub.add_parser("demo", help="Run the full demonstration sequence.")
    demo.add_argument("--height", type=int, default=_DEFAULTS.pattern_height)
    demo.add_argument("--count-limit", type=int, default=_DEFAULTS.count_limit)
    demo.add_argument("--bottom", type=int, default=_DEFAULTS.sum_bottom)
    demo.add_argument("--top", type=int, default=_DEFAULTS.sum_top)

    table = sub.add_parser("table", help="Read a number from stdin and print its table.")
    table.add_argument("--json", action="store_true", help="Emit the table as JSON.")

    total = sub.add_parser("sum", help="Sum the even integers in [BOTTOM, TOP].")
    total.add_argument("bottom", type=int)
    total.add_argument("top", type=int)
    total.add_argument("--json", action="store_true", help="Emit the result as JSON.")

    return p


def _run_table(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> None:
    num = read_multiplicand(stdin)
    table = build_multiplication_table(num)
    if args.json:
        payload = table.model_dump()
        validate_multiplication_table(payload)
        stdout.write(json.dumps(payload) + "\n")
    else:
        write_table(table, stdout)


def _run_sum(args: argparse.Namespace, stdout: TextIO) -> None:
    result = compute_range_sum(RangeBounds(bottom=args.bottom, top=args.top))
    if args.json:
        payload = result.model_dump()
        validate_range_sum(payload)
        stdout.write(json.dumps(payload) + "\n")
    else:
        stdout.write(f"{result.total}\n")


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    command = args.command or "demo"
    logger.info("running %s", command)

    try:
        if command == "table":
            _run_table(args, stdin, stdout)
        elif command == "sum":
            _run_sum(args, stdout)
        else:
            config = DemoConfig(
                pattern_height=getattr(args, "height", _DEFAULTS.pattern_height),
                count_limit=getattr(args, "count_limit", _DEFAULTS.count_limit),
                sum_bottom=getattr(args, "bottom", _DEFAULTS.sum_bottom),
                sum_top=getattr(args, "top", _DEFAULTS.sum_top),
            )
            run_demo(config, stdin=stdin, stdout=stdout)
    except InvalidNumericInput as e:
        stdout.flush()
        logger.error("%s", e)
        return EXIT_INVALID_INPUT

    stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
