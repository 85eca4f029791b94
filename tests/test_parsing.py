# tests/test_parsing.py

import pytest

from calnep.core.errors import InvalidInputError
from calnep.parsing import coerce_triple, parse_date_string


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2079-11-05", (2079, 11, 5)),
        ("2079/11/5", (2079, 11, 5)),
        ("2079.1.05", (2079, 1, 5)),
        ("05-11-2079", (2079, 11, 5)),
        ("5/11/2079", (2079, 11, 5)),
        ("  2079-11-05  ", (2079, 11, 5)),
        ("२०७९-११-०५", (2079, 11, 5)),
    ],
)
def test_date_forms(text, expected):
    p = parse_date_string(text)
    assert (p.year, p.month, p.day) == expected
    assert p.month_index == expected[1] - 1
    assert p.time == (0, 0, 0)


def test_time_suffix():
    p = parse_date_string("2079-11-05 14:30")
    assert p.time == (14, 30, 0)
    p = parse_date_string("05-11-2079 7:05:09")
    assert p.time == (7, 5, 9)
    p = parse_date_string("२०७९-११-०५ ०९:१५")
    assert p.time == (9, 15, 0)


def test_explicit_order():
    p = parse_date_string("05-11-79", order="DMY")
    assert (p.year, p.month, p.day) == (79, 11, 5)
    p = parse_date_string("79-11-05", order="ymd")
    assert (p.year, p.month, p.day) == (79, 11, 5)
    # an explicit order wins over the four-digit heuristic
    p = parse_date_string("2079-11-05", order="DMY")
    assert (p.year, p.month, p.day) == (5, 11, 2079)


@pytest.mark.parametrize(
    "text, order",
    [
        ("05-11-79", None),
        ("2079-11", None),
        ("2079-11-05-01", None),
        ("abc", None),
        ("", None),
        ("2079-11-05 14", None),
        ("2079-11-05 14:30 extra", None),
        ("2079_11_05", None),
        ("2079-11-05", "MDY"),
    ],
)
def test_rejected(text, order):
    with pytest.raises(InvalidInputError):
        parse_date_string(text, order)


def test_non_string():
    with pytest.raises(InvalidInputError):
        parse_date_string(20791105)


def test_coerce_triple():
    assert coerce_triple((2079, 10, 5)) == (2079, 10, 5)
    assert coerce_triple([2079, 10, 5]) == (2079, 10, 5)
    for bad in [(2079, 10), (2079, 10, 5, 1), (2079, True, 5), (2079, 10.0, 5), "207"]:
        with pytest.raises(InvalidInputError):
            coerce_triple(bad)
