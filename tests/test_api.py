# tests/test_api.py

from datetime import date
from unittest.mock import patch

import pytest

import ethcal
from ethcal.core.errors import InvalidDateError
from ethcal.core.types import CalendarDate


def test_calendar_date_unpacks_as_triple():
    c = CalendarDate(2017, 1, 1)
    y, m, d = c
    assert (y, m, d) == (2017, 1, 1)
    assert c.as_tuple() == (2017, 1, 1)
    assert len(c) == 3
    assert c.system == "ethiopian"


def test_ethiopian_from_date():
    assert ethcal.ethiopian_from_date(date(2024, 9, 11)) == CalendarDate(2017, 1, 1, "ethiopian")


def test_gregorian_from_ethiopian():
    assert ethcal.gregorian_from_ethiopian(2017, 1, 1) == CalendarDate(2024, 9, 11, "gregorian")


def test_date_from_ethiopian():
    assert ethcal.date_from_ethiopian(2016, 4, 28) == date(2024, 1, 7)
    assert ethcal.date_from_ethiopian((2015, 13, 6)) == date(2023, 9, 11)
    assert ethcal.date_from_ethiopian(CalendarDate(2017, 4, 29)) == date(2025, 1, 7)


def test_date_from_ethiopian_validates():
    with pytest.raises(InvalidDateError):
        ethcal.date_from_ethiopian(2016, 13, 6)
    with pytest.raises(InvalidDateError):
        ethcal.date_from_ethiopian(2016, 2, 31)


def test_to_ethiopian_date_string():
    assert ethcal.to_ethiopian_date_string(date(2024, 9, 11), script="latin") == "2017 Meskerem 1"
    assert ethcal.to_ethiopian_date_string(date(2024, 9, 11)) == f"2017 {ethcal.MONTH_NAMES[0]} 1"


def test_new_year_date_and_info():
    assert ethcal.new_year_date(2016) == date(2023, 9, 12)
    assert ethcal.new_year_date(2017) == date(2024, 9, 11)

    info = ethcal.new_year_info(2016)
    assert info["Y"] == 2016
    assert info["new_year_day"] == 12
    assert info["leap_pagume"] is True
    assert info["date"] == date(2023, 9, 12)

    info = ethcal.new_year_info(2017, as_date=False)
    assert info["leap_pagume"] is False
    assert "date" not in info


def test_month_bounds():
    b = ethcal.month_bounds(2016, 13)
    assert b["days"] == 5
    assert b["first_date"] == date(2024, 9, 6)
    assert b["last_date"] == date(2024, 9, 10)

    assert ethcal.first_day_of_month(2017, 1) == date(2024, 9, 11)
    assert ethcal.last_day_of_month(2017, 1) == date(2024, 10, 10)


def test_month_days_are_contiguous():
    rows = ethcal.month_days(2016, 6)
    assert [r["day"] for r in rows] == list(range(1, 31))
    for a, b in zip(rows, rows[1:]):
        assert (b["date"] - a["date"]).days == 1


def test_ethiopian_years_around():
    assert ethcal.ethiopian_years_around(date(2024, 9, 11), span=2) == [2015, 2016, 2017, 2018, 2019]
    assert len(ethcal.ethiopian_years_around(date(2024, 1, 1))) == 51
    with pytest.raises(ValueError):
        ethcal.ethiopian_years_around(date(2024, 1, 1), span=-1)


def test_today_uses_current_date():
    with patch("ethcal.api.date") as mock_date:
        mock_date.today.return_value = date(2024, 9, 11)
        assert ethcal.today() == CalendarDate(2017, 1, 1, "ethiopian")


def test_today_in_late_december():
    with patch("ethcal.api.date") as mock_date:
        mock_date.today.return_value = date(2023, 12, 25)
        assert ethcal.today() == CalendarDate(2016, 4, 15, "ethiopian")
    assert ethcal.to_ethiopian_date_string(date(2023, 12, 31), script="latin") == "2016 Tahsas 21"
