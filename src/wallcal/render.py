"""What each day cell of a month shows: the renderer-facing view of an EventMap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from .core.types import CalendarEvent, DateKey
from .engines.grid import compute_month_grid
from .engines.holidays import HOLIDAY_IMAGES

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_LETTERS = ("S", "M", "T", "W", "T", "F", "S")

OVERFLOW_OPACITY = 0.9
CURRENT_MONTH_OPACITY = 1.0


@dataclass(frozen=True)
class CellView:
    date_text: str
    day_letter: Optional[str]   # first row only
    description: Optional[str]  # labels joined by newlines, None when empty
    moon_dot: bool
    opacity: float


def cell_view(
    date: int, is_current_month: bool, events: Tuple[CalendarEvent, ...], row: int, col: int
) -> CellView:
    return CellView(
        date_text=str(date),
        day_letter=DAY_LETTERS[col] if row == 0 else None,
        description="\n".join(e.label for e in events) if events else None,
        moon_dot=any(e.is_moon for e in events),
        opacity=CURRENT_MONTH_OPACITY if is_current_month else OVERFLOW_OPACITY,
    )


def month_view(
    year: int, month: int, events: Mapping[DateKey, Tuple[CalendarEvent, ...]]
) -> List[List[CellView]]:
    """Overflow cells carry their own date's events too."""
    out = []
    for r, row in enumerate(compute_month_grid(year, month)):
        out.append([
            cell_view(c.date, c.is_current_month, events.get(c.key, ()), r, col)
            for col, c in enumerate(row)
        ])
    return out


def holiday_image_cells(year: int, month: int) -> List[Tuple[str, int, int]]:
    """(image_name, row, col) for each decorative image placed in this month."""
    grid = compute_month_grid(year, month)
    out = []
    for img in HOLIDAY_IMAGES:
        if img.month != month:
            continue
        target = img.rule.resolve(year)
        if target is None:
            continue
        for r, row in enumerate(grid):
            for col, c in enumerate(row):
                if c.is_current_month and c.date == target.day:
                    out.append((img.image_name, r, col))
    return out


def format_month(
    year: int, month: int, events: Mapping[DateKey, Tuple[CalendarEvent, ...]], w: int = 10
) -> str:
    """Plain-text month: a date line and up to two label lines per week row."""
    view = month_view(year, month, events)
    title = f"{MONTH_NAMES[month]} {year}"
    header = " ".join(letter.ljust(w) for letter in DAY_LETTERS)
    lines = [title, header, "-" * len(header)]
    for row in view:
        dates = []
        for c in row:
            mark = "*" if c.moon_dot else ""
            text = f"{c.date_text}{mark}" if c.opacity == CURRENT_MONTH_OPACITY else f"({c.date_text}){mark}"
            dates.append(text.ljust(w))
        lines.append(" ".join(dates))
        for k in range(2):
            parts = []
            for c in row:
                labels = c.description.split("\n") if c.description else []
                parts.append((labels[k] if k < len(labels) else "")[:w].ljust(w))
            lines.append(" ".join(parts).rstrip())
    return "\n".join(lines)
