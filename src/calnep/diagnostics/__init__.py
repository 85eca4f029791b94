"""Diagnostics package.

Light-weight command-line checks; new_year_scatter additionally needs the
optional diagnostics extras (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "new_year_scatter"]
