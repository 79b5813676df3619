import io

import pytest

from aocrunner.cli import main, parse_days, run_days


def test_parse_days_keeps_order():
    assert parse_days(["3", "1", "25"]) == [3, 1, 25]
    assert parse_days(["+7"]) == [7]


@pytest.mark.parametrize("arg", ["x", "-1", "256", "", "1.5", " 2"])
def test_parse_days_rejects_invalid(arg):
    with pytest.raises(ValueError, match="Not a valid day"):
        parse_days([arg])


def test_parse_days_requires_arguments():
    with pytest.raises(ValueError, match="Please provide the day"):
        parse_days([])


def test_run_days_report():
    out = io.StringIO()
    total = run_days([1, 12], out)
    text = out.getvalue()
    assert total >= 0
    assert "\n=== Day 01 ===\n" in text
    assert "=== Day 12 ===" in text
    assert text.count("  · Part 1: 0\n") == 2
    assert text.count("  · Part 2: 0\n") == 2
    assert text.count(" ms\n") == 3
    assert text.rstrip("\n").splitlines()[-1].startswith("Total runtime: ")


def test_run_days_unknown_day_after_valid_ones():
    out = io.StringIO()
    with pytest.raises(ValueError):
        run_days([2, 30], out)
    assert "=== Day 02 ===" in out.getvalue()
    assert "Total runtime" not in out.getvalue()


def test_main_success(capsys):
    assert main(["5"]) == 0
    captured = capsys.readouterr()
    assert "=== Day 05 ===" in captured.out
    assert "Total runtime:" in captured.out


def test_main_without_days(capsys):
    assert main([]) == 1
    assert "Please provide the day" in capsys.readouterr().err


def test_main_bad_day(capsys):
    assert main(["abc"]) == 1
    assert "Not a valid day" in capsys.readouterr().err