"""Number of days in a month of a given year."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})
FEBRUARY = 2


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days of the month (1-12) in the given year."""
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == FEBRUARY:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"invalid month: {month}")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_int(prompt: str, minimum: int, maximum: int, stream: TextIO, out: TextIO) -> int:
    """Prompt until a line holds an integer within [minimum, maximum]."""
    while True:
        out.write(f"{prompt} ({minimum}-{maximum}): ")
        line = stream.readline()
        if not line:
            raise EOFError("no more input")
        value = _to_int(line)
        if minimum <= value <= maximum:
            return value
        out.write("Invalid input. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Ask for month and year and print the number of days."""
    stdin, stdout = sys.stdin, sys.stdout
    try:
        month = read_int("Monat", 1, 12, stdin, stdout)
        year = read_int("Jahr", 1600, 9999, stdin, stdout)
    except EOFError:
        stdout.write("\n")
        return 1
    stdout.write(f"Monat: {month}, Jahr: {year} \n")
    stdout.write(f"{year} ist {'ein' if is_leap_year(year) else 'kein'} Schaltjahr\n")
    stdout.write(f"Der Monat {month:02d}-{year} hat {days_in_month(month, year)} Tage.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())