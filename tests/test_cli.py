# tests/test_cli.py

import sys
from unittest.mock import patch

import pytest

from ethcal import cli
from ethcal.diagnostics import new_year_scatter


def test_to_greg(capsys):
    assert cli.main(["to-greg", "2017", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2024-09-11"


def test_date_shorthand(capsys):
    assert cli.main(["2024-09-11"]) == 0
    out = capsys.readouterr().out
    assert "2017-01-01" in out
    assert "Meskerem" in out


def test_to_eth_subcommand(capsys):
    assert cli.main(["to-eth", "2024-01-07"]) == 0
    assert "2016 Tahsas 28" in capsys.readouterr().out


def test_invalid_dates_exit_2(capsys):
    assert cli.main(["to-greg", "2016", "13", "6"]) == 2
    assert "error" in capsys.readouterr().err

    assert cli.main(["to-eth", "1582-10-10"]) == 2
    assert "1582" in capsys.readouterr().err


def test_impossible_gregorian_date_exit_2(capsys):
    assert cli.main(["to-eth", "2023-02-30"]) == 2
    assert "2023-02-30" in capsys.readouterr().err

    assert cli.main(["2023-13-45"]) == 2
    assert capsys.readouterr().out == ""


def test_to_eth_late_december(capsys):
    assert cli.main(["to-eth", "2023-12-25"]) == 0
    assert "2016-04-15  2016 Tahsas 15" in capsys.readouterr().out


def test_new_years_table(capsys):
    assert cli.main(["new-years", "--from-year", "2015", "--to-year", "2017"]) == 0
    out = capsys.readouterr().out
    assert "2023-09-12" in out
    assert "2024-09-11" in out


def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--eth", "2017", "1", "--greg", "2024", "9"]) == 0
    out = capsys.readouterr().out
    assert "Meskerem" in out
    assert "Gregorian month  2024-09" in out


def test_round_trip_diagnostic(capsys):
    assert cli.main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_scatter_requires_numpy():
    with patch.dict(sys.modules, {"numpy": None}):
        with pytest.raises(RuntimeError, match="numpy"):
            new_year_scatter.main(["--start-year", "2000", "--end-year", "2010"])


def test_scatter_writes_png(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    outbase = str(tmp_path / "ny")
    assert cli.main(["diag", "new-year-scatter", "--start-year", "1990", "--end-year", "2030", "--outbase", outbase]) == 0
    assert (tmp_path / "ny.png").exists()
