from __future__ import annotations

from typing import Literal, Tuple

from .conversion import DateArg, _unpack, is_gregorian_leap
from .core.errors import InvalidDateError

Script = Literal["ethiopic", "latin"]

MONTH_NAMES: Tuple[str, ...] = (
    "መስከረም",  # Meskerem
    "ጥቅምት",   # Tikimt
    "ህዳር",    # Hidar
    "ታህሳስ",   # Tahsas
    "ጥር",      # Tir
    "የካቲት",   # Yekatit
    "መጋቢት",   # Megabit
    "ሚያዝያ",   # Miazia
    "ግንቦት",   # Ginbot
    "ሰኔ",      # Sene
    "ሐምሌ",     # Hamle
    "ነሐሴ",     # Nehase
    "ጳጉሜ",     # Pagume
)

MONTH_NAMES_LATIN: Tuple[str, ...] = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahsas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Ginbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagume",
)

PAGUME = 13

__all__ = [
    "MONTH_NAMES",
    "MONTH_NAMES_LATIN",
    "PAGUME",
    "month_name",
    "format_ethiopian",
    "is_leap_year",
    "is_gregorian_leap_year",
    "days_in_month",
    "validate_ethiopian",
]


def _names(script: Script) -> Tuple[str, ...]:
    if script == "ethiopic":
        return MONTH_NAMES
    if script == "latin":
        return MONTH_NAMES_LATIN
    raise ValueError("script must be 'ethiopic' or 'latin'")


def month_name(month: int, *, script: Script = "ethiopic") -> str:
    names = _names(script)
    if not 1 <= month <= len(names):
        raise InvalidDateError(f"Ethiopian month must be in 1..13, got {month}")
    return names[month - 1]


def format_ethiopian(*args: DateArg, script: Script = "ethiopic") -> str:
    """
    Render an Ethiopian date as "{year} {monthName} {day}".

    Accepts (y, m, d) or a packed triple, e.g. the output of to_ethiopian.
    """
    year, month, day = _unpack(args)
    return f"{year} {month_name(month, script=script)} {day}"


def is_leap_year(year: int) -> bool:
    """
    Ethiopian leap year: Pagume has 6 days.

    The following year starts one day later, which is the `(y-1) % 4 == 3`
    branch of new_year_day.
    """
    return year % 4 == 3


def is_gregorian_leap_year(year: int) -> bool:
    return is_gregorian_leap(year)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= PAGUME:
        raise InvalidDateError(f"Ethiopian month must be in 1..13, got {month}")
    if month == PAGUME:
        return 6 if is_leap_year(year) else 5
    return 30


def validate_ethiopian(*args: DateArg) -> Tuple[int, int, int]:
    """Unpack and range-check an Ethiopian triple; returns it as a plain tuple."""
    year, month, day = _unpack(args)
    n = days_in_month(year, month)
    if not 1 <= day <= n:
        raise InvalidDateError(
            f"Day {day} out of range for {MONTH_NAMES_LATIN[month - 1]} {year} (1..{n})"
        )
    return year, month, day
