"""Packaged month-length table (bs_month_days.csv)."""
