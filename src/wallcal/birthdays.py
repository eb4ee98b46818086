"""Free-text birthday list: one ``Mon D [YYYY] Name`` per line."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .core.types import Birthday

MONTH_ABBREVS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_LEGACY_PREFIX = re.compile(r"^birthday\s+", re.IGNORECASE)
_WITH_YEAR = re.compile(r"^(\w+)\s+(\d+)\s+(\d{4})\s+(.+)$", re.IGNORECASE | re.ASCII)
_NO_YEAR = re.compile(r"^(\w+)\s+(\d+)\s+(.+)$", re.IGNORECASE | re.ASCII)


def month_from_token(token: str) -> Optional[int]:
    prefix = token.lower()[:3]
    if prefix in MONTH_ABBREVS:
        return MONTH_ABBREVS.index(prefix)
    return None


def parse_birthday_line(line: str) -> Optional[Birthday]:
    line = _LEGACY_PREFIX.sub("", line.strip())
    if not line:
        return None

    m = _WITH_YEAR.match(line)
    if m:
        month = month_from_token(m.group(1))
        if month is None:
            return None
        return Birthday(month, int(m.group(2)), int(m.group(3)), m.group(4).strip())

    m = _NO_YEAR.match(line)
    if m:
        month = month_from_token(m.group(1))
        if month is None:
            return None
        return Birthday(month, int(m.group(2)), None, m.group(3).strip())
    return None


def parse_birthdays(text: str) -> List[Birthday]:
    """Best effort: lines that do not parse are dropped."""
    out = []
    for raw in text.split("\n"):
        b = parse_birthday_line(raw)
        if b is not None:
            out.append(b)
    return out


def ordinal_suffix(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def birthday_label(b: Birthday, year: int) -> str:
    if b.birth_year is None:
        return f"{b.name}'s Birthday"
    age = year - b.birth_year
    return f"{b.name}'s {age}{ordinal_suffix(age)} Birthday"


def format_birthdays(birthdays: Iterable[Birthday]) -> str:
    """Inverse of parse_birthdays, one record per line."""
    lines = []
    for b in birthdays:
        mon = MONTH_ABBREVS[b.month].capitalize()
        if b.birth_year is None:
            lines.append(f"{mon} {b.day} {b.name}")
        else:
            lines.append(f"{mon} {b.day} {b.birth_year} {b.name}")
    return "\n".join(lines)
