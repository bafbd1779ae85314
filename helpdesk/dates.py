"""Calendar dates written as d/m/yyyy."""

from __future__ import annotations

from dataclasses import dataclass

REFERENCE_DAY = 18
REFERENCE_MONTH = 2
REFERENCE_YEAR = 2025


@dataclass(frozen=True)
class Date:
    """A day, month and year."""

    day: int
    month: int
    year: int

    def years_until_reference(self):
        """Whole years from this date until 18/02/2025, counted like a birthday."""
        years = REFERENCE_YEAR - self.year
        if self.month > REFERENCE_MONTH or (
            self.month == REFERENCE_MONTH and self.day > REFERENCE_DAY
        ):
            years -= 1
        return years

    def __str__(self):
        return f"{self.day}/{self.month}/{self.year}"


def parse_date(text):
    """Parse 'd/m/yyyy' into a Date; raises ValueError on bad input."""
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise ValueError(f"invalid date: {text!r}")
    try:
        day, month, year = (int(part) for part in parts)
    except ValueError:
        raise ValueError(f"invalid date: {text!r}") from None
    return Date(day, month, year)


def read_date(scanner):
    """Read a date line from a scanner and skip the whitespace after it."""
    date = parse_date(scanner.read_line())
    scanner.skip_whitespace()
    return date