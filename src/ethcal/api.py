from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .conversion import DateArg, new_year_day, to_ethiopian, to_gregorian
from .core.errors import InvalidDateError
from .core.types import CalendarDate, DateTriple
from .months import Script, days_in_month, format_ethiopian, validate_ethiopian


def _as_date(t: DateTriple) -> date:
    try:
        return date(*t)
    except ValueError as e:
        raise InvalidDateError(f"No civil date for {t!r}: {e}") from e


def ethiopian_from_date(d: date) -> CalendarDate:
    y, m, day = to_ethiopian(d.year, d.month, d.day)
    return CalendarDate(y, m, day, "ethiopian")


def gregorian_from_ethiopian(*args: DateArg) -> CalendarDate:
    y, m, day = to_gregorian(*args)
    return CalendarDate(y, m, day, "gregorian")


def date_from_ethiopian(*args: DateArg) -> date:
    """Ethiopian (y, m, d) or packed triple -> datetime.date, after range checks."""
    t = validate_ethiopian(*args)
    return _as_date(to_gregorian(t))


def to_ethiopian_date_string(d: date, *, script: Script = "ethiopic") -> str:
    return format_ethiopian(to_ethiopian(d.year, d.month, d.day), script=script)


def today() -> CalendarDate:
    return ethiopian_from_date(date.today())


def new_year_date(year: int) -> date:
    """Gregorian date of Meskerem 1 of Ethiopian `year`."""
    return date_from_ethiopian(year, 1, 1)


def new_year_info(year: int, *, as_date: bool = True) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "Y": year,
        "new_year_day": new_year_day(year),
        "leap_pagume": days_in_month(year - 1, 13) == 6,
    }
    if as_date:
        out["date"] = new_year_date(year)
    return out


def month_bounds(year: int, month: int) -> Dict[str, Any]:
    n = days_in_month(year, month)
    return {
        "Y": year,
        "M": month,
        "days": n,
        "first_date": date_from_ethiopian(year, month, 1),
        "last_date": date_from_ethiopian(year, month, n),
    }


def first_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["first_date"]


def last_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["last_date"]


def month_days(year: int, month: int) -> List[Dict[str, Any]]:
    """One row per day of an Ethiopian month, paired with its Gregorian date."""
    rows = []
    for day in range(1, days_in_month(year, month) + 1):
        rows.append({"day": day, "date": date_from_ethiopian(year, month, day)})
    return rows


def ethiopian_years_around(d: Optional[date] = None, *, span: int = 25) -> List[int]:
    """The 2*span+1 Ethiopian years centred on the Ethiopian year of `d` (default: today)."""
    if span < 0:
        raise ValueError("span must be non-negative")
    if d is None:
        d = date.today()
    current = ethiopian_from_date(d).year
    return list(range(current - span, current + span + 1))
