# tests/test_table.py

import pytest

from calnep.core.errors import InvalidInputError, OutOfRangeError
from calnep.engines.specs import ENV_TABLE, load_month_table, packaged_month_table
from calnep.engines.table import CalendarTable


@pytest.fixture
def table():
    return CalendarTable(packaged_month_table())


def test_packaged_table_shape(table):
    assert table.min_year == 1970
    assert table.max_year == 2100
    assert len(table) == 131
    for y in table.years:
        row = table.month_days(y)
        assert len(row) == 12
        assert all(28 <= n <= 32 for n in row)
        assert table.year_length(y) in (365, 366)


def test_month_length_known_values(table):
    assert table.month_length(2079, 0) == 31
    assert table.month_length(2081, 3) == 32
    assert table.month_length(2000, 0) == 30
    assert table.year_length(2081) == 366
    assert table.year_length(2080) == 365


def test_published_rows_before_2000(table):
    assert table.month_days(1972) == (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31)
    assert table.month_days(1989) == (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30)
    assert sum(table.year_length(y) for y in range(1970, 2000)) == 10958


@pytest.mark.parametrize("year, month_index", [(1969, 0), (2101, 0), (2079, 12), (2079, -1)])
def test_month_length_out_of_range(table, year, month_index):
    with pytest.raises(OutOfRangeError):
        table.month_length(year, month_index)


def test_validate_and_is_valid(table):
    assert table.is_valid(2079, 0, 31)
    assert not table.is_valid(2079, 0, 32)
    assert not table.is_valid(2079, 0, 0)
    assert not table.is_valid(2101, 0, 1)
    table.validate(2079, 0, 31)
    with pytest.raises(OutOfRangeError):
        table.validate(2079, 0, 32)


def test_table_is_read_only(table):
    with pytest.raises(TypeError):
        table._rows[2079] = (30,) * 12
    assert isinstance(table.month_days(2079), tuple)


def test_contains_and_iter(table):
    assert 2079 in table
    assert 2101 not in table
    assert list(table)[:2] == [1970, 1971]


@pytest.mark.parametrize(
    "month_days",
    [
        {},
        {2000: (30,) * 12, 2002: (30,) * 12},
        {2000: (30,) * 11},
        {2000: (30,) * 11 + (0,)},
    ],
)
def test_malformed_tables_rejected(month_days):
    with pytest.raises(InvalidInputError):
        CalendarTable(month_days)


def test_env_override(tmp_path, monkeypatch):
    path = tmp_path / "table.csv"
    path.write_text(
        "year,m1,m2,m3,m4,m5,m6,m7,m8,m9,m10,m11,m12\n"
        "1970,31,31,32,31,31,31,30,29,30,29,30,30\n"
        "1971,31,31,32,31,32,30,30,29,30,29,30,30\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(ENV_TABLE, str(path))
    rows = load_month_table()
    assert sorted(rows) == [1970, 1971]
    assert rows[1971][4] == 32


def test_env_override_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_TABLE, str(tmp_path / "nope.csv"))
    with pytest.raises(InvalidInputError):
        load_month_table()


def test_malformed_csv_row(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("year,m1,m2\n1970,31,31\n", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_month_table(str(path))
