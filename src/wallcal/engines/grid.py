from __future__ import annotations

from typing import Iterator, List, Tuple

from ..core.time import day_of_week, days_in_month
from ..core.types import DayCell

Grid = List[List[DayCell]]


def num_rows(year: int, month: int) -> int:
    total = day_of_week(year, month, 1) + days_in_month(year, month)
    if total <= 28:
        return 4
    if total <= 35:
        return 5
    return 6


def compute_month_grid(year: int, month: int) -> Grid:
    """Sunday-first weeks covering ``month``, padded with neighbouring-month days."""
    first = day_of_week(year, month, 1)
    n_days = days_in_month(year, month)

    prev_month, prev_year = (11, year - 1) if month == 0 else (month - 1, year)
    next_month, next_year = (0, year + 1) if month == 11 else (month + 1, year)
    prev_days = days_in_month(prev_year, prev_month)

    grid: Grid = []
    counter = 1 - first
    for _ in range(num_rows(year, month)):
        row: List[DayCell] = []
        for _ in range(7):
            if counter < 1:
                row.append(DayCell(prev_days + counter, prev_month, prev_year, False))
            elif counter > n_days:
                row.append(DayCell(counter - n_days, next_month, next_year, False))
            else:
                row.append(DayCell(counter, month, year, True))
            counter += 1
        grid.append(row)
    return grid


def grid_corners(grid: Grid) -> Iterator[Tuple[DayCell, str]]:
    """The four corner cells: sunrise on the left column, sunset on the right."""
    yield grid[0][0], "sunrise"
    yield grid[0][6], "sunset"
    yield grid[-1][0], "sunrise"
    yield grid[-1][6], "sunset"
