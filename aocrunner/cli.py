"""Command line: run the solvers for the requested days and time them."""

from __future__ import annotations

import re
import sys
import time
from typing import Iterable, Sequence, TextIO

from .days import get_day_solver

_DAY_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_DAY_VALUE = 255


def parse_days(args: Sequence[str]) -> list[int]:
    """Parse day numbers given on the command line."""
    if not args:
        raise ValueError("Please provide the day(s) to run as a command-line argument.")
    days = []
    for arg in args:
        if not _DAY_PATTERN.fullmatch(arg) or int(arg) > _MAX_DAY_VALUE:
            raise ValueError(f"Not a valid day: {arg!r}")
        days.append(int(arg))
    return days


def run_days(days: Iterable[int], out: TextIO | None = None) -> float:
    """Run each day's solver, report answers and timings; return total ms."""
    out = sys.stdout if out is None else out
    runtime = 0.0
    for day in days:
        solver = get_day_solver(day)
        start = time.perf_counter_ns()
        p1, p2 = solver()
        elapsed_ms = (time.perf_counter_ns() - start) / 1_000_000
        print(f"\n=== Day {day:02} ===", file=out)
        print(f"  · Part 1: {p1}", file=out)
        print(f"  · Part 2: {p2}", file=out)
        print(f"  · Elapsed: {elapsed_ms:.4f} ms", file=out)
        runtime += elapsed_ms
    print(f"Total runtime: {runtime:.4f} ms", file=out)
    return runtime


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        run_days(parse_days(args))
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())