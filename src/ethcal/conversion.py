from __future__ import annotations

import logging
import operator
from typing import List, Sequence, Union

from .core.errors import InvalidDateError
from .core.types import DateTriple

log = logging.getLogger(__name__)

# Gregorian month numbers in walk order, slot 1 = September.
_GREGORIAN_ORDER = (8, 9, 10, 11, 12, 1, 2, 3, 4, 5, 6, 7, 8, 9)

# Ethiopian month numbers in walk order, slot 1 = Tahsas (the month holding 1 January).
_ETHIOPIAN_ORDER = (0, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 1, 2, 3, 4)

# Day 277 of 1582 is 4 October, the last date before the reform gap. Ethiopian
# years up to 1575 start with the pre-reform new year quirk.
_REFORM_YEAR = 1582
_REFORM_LAST_JULIAN_DOY = 277
_QUIRK_LAST_YEAR = 1575
_QUIRK_MAX_ELAPSED = 37

DateArg = Union[int, Sequence[int]]


def _unpack(args: tuple) -> DateTriple:
    """
    Accept either (y, m, d) or a single packed (y, m, d) sequence.

    Zero, None, missing and surplus components are all rejected.
    """
    if len(args) == 1 and not isinstance(args[0], int):
        try:
            inputs = list(args[0])
        except TypeError:
            inputs = [args[0]]
    else:
        inputs = list(args)

    if len(inputs) != 3:
        raise InvalidDateError(f"Malformed input can't be converted: expected 3 components, got {len(inputs)}")

    out: List[int] = []
    for x in inputs:
        if x is None or isinstance(x, bool):
            raise InvalidDateError(f"Malformed input can't be converted: {inputs!r}")
        try:
            v = operator.index(x)
        except TypeError:
            raise InvalidDateError(f"Malformed input can't be converted: {inputs!r}") from None
        if v == 0:
            raise InvalidDateError(f"Malformed input can't be converted: {inputs!r}")
        out.append(v)
    return out[0], out[1], out[2]


def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def new_year_day(year: int) -> int:
    """
    Day of September (Gregorian) on which Meskerem 1 of Ethiopian `year` falls.

    The offset grows with the Gregorian century corrections and moves one day
    later when the previous Ethiopian year closed with a 6-day Pagume.
    """
    d = year // 100 - year // 400 - 4
    if (year - 1) % 4 == 3:
        d += 1
    return d


def to_gregorian(*args: DateArg) -> DateTriple:
    """Ethiopian (year, month, day) -> Gregorian (year, month, day)."""
    year, month, day = _unpack(args)

    nyd = new_year_day(year)
    g_year = year + 7

    # slot 0 only ever holds days for the pre-1575 quirk (then August, 31 days)
    months = [0, 30, 31, 30, 31, 31, 28, 31, 30, 31, 30, 31, 31, 30]
    if is_gregorian_leap(g_year + 1):
        months[6] = 29

    until = (month - 1) * 30 + day
    if until <= _QUIRK_MAX_ELAPSED and year <= _QUIRK_LAST_YEAR:
        until += 28
        months[0] = 31
    else:
        until += nyd - 1
    # The sixth day of a leap Pagume is already counted by new_year_day of the
    # following year; it is not added again here.

    m = 0
    g_day = 0
    for i, length in enumerate(months):
        m = i
        if until <= length:
            g_day = until
            break
        until -= length
    else:
        raise InvalidDateError(f"Ethiopian date {year}-{month}-{day} runs past the Gregorian month table.")

    if m > 4:
        g_year += 1

    out = (g_year, _GREGORIAN_ORDER[m], g_day)
    log.debug("to_gregorian(%d, %d, %d) -> %r (new_year_day=%d)", year, month, day, out, nyd)
    return out


def to_ethiopian(*args: DateArg) -> DateTriple:
    """Gregorian (year, month, day) -> Ethiopian (year, month, day)."""
    year, month, day = _unpack(args)

    if year == _REFORM_YEAR and month == 10 and 5 <= day <= 14:
        raise InvalidDateError("Invalid Date between 5-14 October 1582.")

    g_months = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    # slot 14 is the Tahsas that holds 11 December onwards
    e_months = [0, 30, 30, 30, 30, 30, 30, 30, 30, 30, 5, 30, 30, 30, 30]

    if is_gregorian_leap(year):
        g_months[2] = 29

    e_year = year - 8
    if e_year % 4 == 3:
        e_months[10] = 6

    nyd = new_year_day(year - 8)

    until = sum(g_months[1:month]) + day

    tahsas = 26 if e_year % 4 == 0 else 25
    if year < _REFORM_YEAR or (year == _REFORM_YEAR and until <= _REFORM_LAST_JULIAN_DOY):
        e_months[1] = 0
        e_months[2] = tahsas
    else:
        tahsas = nyd - 3
        e_months[1] = tahsas

    m = 1
    e_day = 0
    while m < len(e_months):
        if until <= e_months[m]:
            e_day = until + (30 - tahsas) if (m == 1 or e_months[m] == 0) else until
            break
        until -= e_months[m]
        m += 1
    else:
        # the pre-reform table is a few days short of a year; late December falls off its end
        raise InvalidDateError(f"No Ethiopian date for {year}-{month:02d}-{day:02d} in the pre-reform table.")

    if m > 10:
        e_year += 1

    out = (e_year, _ETHIOPIAN_ORDER[m], e_day)
    log.debug("to_ethiopian(%d, %d, %d) -> %r (tahsas=%d)", year, month, day, out, tahsas)
    return out
