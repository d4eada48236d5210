"""Diagnostics package.

- round_trip, new_years_table, pretty_month: always available, print to stdout
- new_year_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "new_year_scatter"]
