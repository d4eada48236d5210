"""ethcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .conversion import (
    to_gregorian,
    to_ethiopian,
    new_year_day,
)
from .months import (
    MONTH_NAMES,
    MONTH_NAMES_LATIN,
    month_name,
    format_ethiopian,
    is_leap_year,
    is_gregorian_leap_year,
    days_in_month,
    validate_ethiopian,
)
from .api import (
    ethiopian_from_date,
    gregorian_from_ethiopian,
    date_from_ethiopian,
    to_ethiopian_date_string,
    today,
    new_year_date,
    new_year_info,
    month_bounds,
    month_days,
    first_day_of_month,
    last_day_of_month,
    ethiopian_years_around,
)
from .core.errors import EthcalError, InvalidDateError
from .core.types import CalendarDate

__all__ = [
    "to_gregorian",
    "to_ethiopian",
    "new_year_day",
    "MONTH_NAMES",
    "MONTH_NAMES_LATIN",
    "month_name",
    "format_ethiopian",
    "is_leap_year",
    "is_gregorian_leap_year",
    "days_in_month",
    "validate_ethiopian",
    "ethiopian_from_date",
    "gregorian_from_ethiopian",
    "date_from_ethiopian",
    "to_ethiopian_date_string",
    "today",
    "new_year_date",
    "new_year_info",
    "month_bounds",
    "month_days",
    "first_day_of_month",
    "last_day_of_month",
    "ethiopian_years_around",
    "EthcalError",
    "InvalidDateError",
    "CalendarDate",
]
