"""Solvers for the twenty-five puzzle days."""

from __future__ import annotations

from typing import Callable

from .solution import Solution

SolutionPair = tuple[Solution, Solution]
Solver = Callable[[], SolutionPair]

FIRST_DAY = 1
LAST_DAY = 25


def _starting_answers() -> SolutionPair:
    """Return the starting answer pair: zero for both parts."""
    return Solution(0), Solution(0)


SOLVERS: dict[int, Solver] = {
    day: _starting_answers for day in range(FIRST_DAY, LAST_DAY + 1)
}


def get_day_solver(day: int) -> Solver:
    """The solver for the given day, 1 to 25."""
    try:
        return SOLVERS[day]
    except KeyError:
        raise ValueError(f"No solver for day {day}") from None