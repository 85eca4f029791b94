# tests/test_formatting.py

from datetime import date

import pytest

from calnep import NepaliDate, YMD, format_number, render
from calnep.core.errors import InvalidInputError, InvariantViolationError
from calnep.formatting import (
    FORMAT_TOKENS,
    bs_month_name,
    from_devanagari_digits,
    to_devanagari_digits,
    weekday_name,
)


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("YYYY-MM-DD", "2081-01-01"),
        ("YY/M/D", "81/1/1"),
        ("MMMM D, YYYY", "Baishakh 1, 2081"),
        ("MMM DD", "Bai 01"),
        ("[Year] YYYY", "Year 2081"),
        ("[MMMM] MMMM", "MMMM Baishakh"),
        ("no tokens here", "no tokens here"),
    ],
)
def test_bs_tokens(fmt, expected):
    assert render(YMD(2081, 0, 1), fmt) == expected


def test_substituted_text_is_not_rescanned():
    # "Mangsir" starts with M, which is itself a token
    assert NepaliDate(2081, 7, 1).format("MMMM M") == "Mangsir 8"
    assert NepaliDate(2081, 6, 3).format("D MMMM") == "3 Kartik"


def test_bs_weekday_tokens_are_literal():
    assert render(YMD(2081, 0, 1), "dddd ddd YYYY") == "dddd ddd 2081"


def test_ad_rendering():
    d = date(2024, 4, 13)
    assert render(d, "dddd, MMMM D, YYYY", calendar="AD") == "Saturday, April 13, 2024"
    assert render(d, "ddd MMM DD YY", calendar="AD") == "Sat Apr 13 24"
    assert render(d, "YYYY-MM-DD", locale="ne", calendar="AD") == "२०२४-०४-१३"
    assert render(d, "dddd", locale="ne", calendar="AD") == "शनिबार"


def test_ad_rendering_needs_a_date():
    with pytest.raises(InvalidInputError):
        render(YMD(2081, 0, 1), calendar="AD")


def test_nepali_locale():
    d = YMD(2079, 10, 5)
    assert render(d, "YYYY-MM-DD", locale="ne") == "२०७९-११-०५"
    assert render(d, "D MMMM YYYY", locale="ne") == "५ फाल्गुन २०७९"
    assert render(d, "[at] D", locale="ne") == "at ५"


def test_year_padding():
    assert render(YMD(5, 0, 1), "YYYY YY") == "0005 05"


def test_unknown_locale_or_calendar():
    with pytest.raises(InvalidInputError):
        render(YMD(2081, 0, 1), locale="fr")
    with pytest.raises(InvalidInputError):
        render(YMD(2081, 0, 1), calendar="JD")


def test_digits():
    assert format_number(2081) == "2081"
    assert format_number(2081, "ne") == "२०८१"
    assert to_devanagari_digits("12:05") == "१२:०५"
    assert from_devanagari_digits("२०८१-०१-०१") == "2081-01-01"


def test_name_lookups():
    assert bs_month_name(0) == "Baishakh"
    assert bs_month_name(11, "ne") == "चैत्र"
    assert bs_month_name(9, short=True) == "Mag"
    assert weekday_name(0) == "Sunday"
    assert weekday_name(6, "ne", short=True) == "शनि"
    with pytest.raises(InvariantViolationError):
        bs_month_name(12)
    with pytest.raises(InvariantViolationError):
        weekday_name(7)


def test_token_table():
    assert set(FORMAT_TOKENS) == {"YYYY", "YY", "MMMM", "MMM", "MM", "M", "DD", "D", "dddd", "ddd"}
