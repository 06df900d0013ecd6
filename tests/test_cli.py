"""CLI tests — make_change and check_greedy_coin_change entry points.

Tests cover:
    - parse_coins / parse_amount argument parsing
    - make_change.main: output, choice table, CSV, infeasible exit status
    - check_greedy_coin_change: analyze, first_counterexample, main summary + CSV
"""

import argparse
import csv

import pytest

import check_greedy_coin_change as greedy_cli
import make_change as cli
from coin_change import CoinChangeError, compute_min_coins


# -- argument parsing ---------------------------------------------------------

def test_parse_coins_sorts_and_dedupes():
    assert cli.parse_coins("25,1,10,5,1") == [1, 5, 10, 25]
    assert cli.parse_coins("1, 5,") == [1, 5]


@pytest.mark.parametrize("text", ["", "1,x", "0,1", "1,-5"])
def test_parse_coins_rejects_bad_input(text):
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_coins(text)


def test_parse_amount():
    assert cli.parse_amount("63") == 63
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_amount("-1")
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_amount("six")


# -- make_change.main ---------------------------------------------------------

def test_main_prints_count_and_coins(capsys):
    status = cli.main(["--coins", "1,5,10,21,25", "--amount", "63"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Making change for 63 requires 3 coins" in out
    assert "They are: 21 21 21" in out
    assert "Summary: 3 x 21" in out


def test_main_show_table_lists_every_amount(capsys):
    cli.main(["--coins", "1,5,10,21,25", "--amount", "63", "--show-table"])
    lines = capsys.readouterr().out.splitlines()
    table = lines[lines.index("Coins used for each amount (amount: coin):") + 1:]
    assert len(table) == 64
    assert table[0].split() == ["0:", "-"]
    assert table[63].split() == ["63:", "21"]


def test_main_zero_amount(capsys):
    assert cli.main(["--coins", "1,5,10,25", "--amount", "0"]) == 0
    out = capsys.readouterr().out
    assert "requires 0 coins" in out
    assert "Summary" not in out


def test_main_tie_break_is_smallest_coin_first(capsys):
    cli.main(["--coins", "25,10,5,1", "--amount", "11"])
    assert "They are: 1 10" in capsys.readouterr().out


def test_main_infeasible_exits_1(capsys):
    status = cli.main(["--coins", "5,10", "--amount", "3"])
    captured = capsys.readouterr()
    assert status == 1
    assert "cannot be made exactly" in captured.err
    assert "requires" not in captured.out


def test_main_writes_csv(tmp_path, capsys):
    path = tmp_path / "table.csv"
    cli.main(["--coins", "5,10", "--amount", "10", "--outfile", str(path)])
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["amount", "min_coins", "last_coin"]
    assert rows[1] == ["0", "0", ""]
    assert rows[4] == ["3", "", ""]
    assert rows[11] == ["10", "1", "10"]


@pytest.mark.parametrize("method", ["memo", "naive"])
def test_main_recursive_methods(method, capsys):
    assert cli.main(["--coins", "1,5,10,25", "--amount", "26", "--method", method]) == 0
    assert "Making change for 26 requires 2 coins" in capsys.readouterr().out


def test_main_recursive_infeasible(capsys):
    assert cli.main(["--coins", "5,10", "--amount", "3", "--method", "memo"]) == 1


def test_main_recursive_too_deep_exits_1(capsys):
    status = cli.main(["--coins", "1", "--amount", "100000", "--method", "memo"])
    assert status == 1
    assert "use --method table" in capsys.readouterr().err


def test_help_warns_naive_is_for_small_amounts(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--help"])
    assert exc.value.code == 0
    help_text = " ".join(capsys.readouterr().out.split())
    assert "naive is exponential: keep amounts below about 100" in help_text


def test_main_reports_library_error_with_exit_1(monkeypatch, capsys):
    def broken_make_change(coins, amount):
        raise CoinChangeError("choice table is corrupt")

    monkeypatch.setattr(cli, "make_change", broken_make_change)
    status = cli.main(["--coins", "1,5", "--amount", "3"])
    captured = capsys.readouterr()
    assert status == 1
    assert "Error: choice table is corrupt" in captured.err
    assert "requires" not in captured.out


def test_main_recursive_rejects_table_options():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--coins", "1,5", "--amount", "3", "--method", "memo", "--show-table"])
    assert exc.value.code == 2


def test_main_bad_arguments_exit_2():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--coins", "0,5", "--amount", "3"])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        cli.main(["--coins", "1,5", "--amount", "-3"])
    assert exc.value.code == 2


# -- check_greedy_coin_change -------------------------------------------------

def test_analyze_us_coins_greedy_ok():
    rows, all_ok = greedy_cli.analyze([1, 5, 10, 25], 100)
    assert all_ok is True
    assert len(rows) == 100
    assert all(r.reachable and r.greedy_is_optimal for r in rows)


def test_analyze_with_21_cent_coin():
    rows, all_ok = greedy_cli.analyze([1, 5, 10, 21, 25], 100)
    assert all_ok is False
    row = rows[62]
    assert row.amount == 63
    assert row.greedy_num_coins == 6
    assert row.optimal_num_coins == 3
    assert row.greedy_is_optimal is False


def test_analyze_marks_unreachable():
    rows, all_ok = greedy_cli.analyze([5, 10], 10)
    assert all_ok is True
    assert rows[2].reachable is False
    assert rows[2].greedy_is_optimal is None
    assert rows[4].greedy_is_optimal is True


def test_first_counterexample():
    assert greedy_cli.first_counterexample([1, 5, 10, 25], 100) is None
    assert greedy_cli.first_counterexample([1, 5, 10, 21, 25], 100) == (31, [25, 5, 1], [10, 21])
    # greedy gets stuck at 6 with {3, 4}
    assert greedy_cli.first_counterexample([3, 4], 10) == (6, None, [3, 3])


def test_greedy_main_reports_and_saves(tmp_path, capsys):
    path = tmp_path / "results.csv"
    status = greedy_cli.main(["--coins", "1,5,10,21,25", "--n", "70", "--outfile", str(path)])
    out = capsys.readouterr().out
    assert status == 0
    assert "Reachable amounts: 70/70" in out
    assert "First counterexample: 31 -> greedy 25 5 1; optimal 10 21" in out
    assert "NOT greedy-optimal" in out
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][0] == "amount"
    assert len(rows) == 71


def test_greedy_main_all_ok(tmp_path, capsys):
    path = tmp_path / "results.csv"
    greedy_cli.main(["--coins", "1,5,10,25", "--n", "50", "--outfile", str(path)])
    out = capsys.readouterr().out
    assert "Greedy matched optimal for all reachable amounts" in out


def test_greedy_main_rejects_empty_range(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        greedy_cli.main(["--coins", "1,5", "--n", "0", "--outfile", str(tmp_path / "r.csv")])
    assert exc.value.code == 2
    assert "--n must be at least 1" in capsys.readouterr().err


def test_greedy_main_builds_table_once(tmp_path, monkeypatch, capsys):
    calls = []

    def counting_compute(coins, target):
        calls.append(target)
        return compute_min_coins(coins, target)

    monkeypatch.setattr(greedy_cli, "compute_min_coins", counting_compute)
    greedy_cli.main(["--coins", "1,5,10,21,25", "--n", "70", "--outfile", str(tmp_path / "r.csv")])
    assert calls == [70]
    assert "First counterexample: 31" in capsys.readouterr().out


def test_first_counterexample_reuses_rows_and_choice_table():
    coins = [1, 5, 10, 21, 25]
    cost, choice = compute_min_coins(coins, 70)
    rows, _ = greedy_cli.analyze(coins, 70, cost=cost)
    assert greedy_cli.first_counterexample(coins, 70, rows=rows, choice=choice) == (31, [25, 5, 1], [10, 21])
