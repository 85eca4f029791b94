# tests/test_cli.py

from calnep.cli import main


def test_shorthand_to_bs(capsys):
    assert main(["2024-04-13"]) == 0
    assert capsys.readouterr().out.strip() == "2081-01-01"


def test_to_bs_format_and_locale(capsys):
    assert main(["to-bs", "2023-02-17", "--format", "D MMMM YYYY"]) == 0
    assert capsys.readouterr().out.strip() == "5 Falgun 2079"

    assert main(["to-bs", "2023-02-17", "--locale", "ne"]) == 0
    assert capsys.readouterr().out.strip() == "२०७९-११-०५"


def test_to_bs_debug(capsys):
    assert main(["to-bs", "2023-02-17", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "2079-11-05" in out
    assert "'ordinal'" in out


def test_to_ad(capsys):
    assert main(["to-ad", "2081-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2024-04-13"

    assert main(["to-ad", "2079-11-05", "--format", "dddd, MMMM D, YYYY"]) == 0
    assert capsys.readouterr().out.strip() == "Friday, February 17, 2023"


def test_errors_exit_2(capsys):
    assert main(["to-ad", "2081-13-01"]) == 2
    assert capsys.readouterr().err.startswith("error:")

    assert main(["to-bs", "1800-01-01"]) == 2
    assert capsys.readouterr().err.startswith("error:")

    assert main(["to-bs", "yesterday"]) == 2


def test_log_level(capsys):
    assert main(["--log-level", "DEBUG", "to-bs", "2024-04-13"]) == 0
    assert capsys.readouterr().out.strip() == "2081-01-01"


def test_month(capsys):
    assert main(["month", "2081", "1"]) == 0
    out = capsys.readouterr().out
    assert "BS 2081 Baishakh (01)" in out
    assert "Apr/May 2024" in out
    assert "04-13" in out and "05-13" in out


def test_month_nepali(capsys):
    assert main(["month", "2081", "1", "--locale", "ne"]) == 0
    out = capsys.readouterr().out
    assert "बैशाख" in out
    assert "३१" in out


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "2080", "--to-year", "2081"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Year")
    assert lines[2].split() == ["2080", "2023-04-14", "Friday", "365"]
    assert lines[3].split() == ["2081", "2024-04-13", "Saturday", "366"]


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "300", "--seed", "1"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
