#!/usr/bin/env python3
"""
Make change for an amount with the fewest coins.

Builds the cost/choice tables bottom-up for amounts 0..amount, then walks the
choice table back from the amount to list the coins used.

Coins are sorted ascending before solving, so when two coins tie for an
amount the smaller one is recorded (11 from 1,5,10,25 prints "1 10").

Usage examples:
  python make_change.py --coins 1,5,10,21,25 --amount 63
  python make_change.py --coins 1,5,10,21,25 --amount 63 --show-table
  python make_change.py --coins 1,5,10,25 --amount 63 --outfile table.csv
  python make_change.py --coins 1,5,10,25 --amount 30 --method naive

Exit status: 0 on success, 1 if the amount cannot be made exactly, 2 on bad arguments.
"""

from __future__ import annotations
import argparse
import csv
import logging
import sys
from typing import List, Optional

from coin_change import (
    Change,
    CoinChangeError,
    InfeasibleAmountError,
    count_coins,
    make_change,
)
from recursive_change import memo_min_coins, rec_min_coins

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)-15s|%(name)-8s|%(funcName)-16s|%(lineno)-5d][%(levelname)8s] %(message)s"


def parse_coins(s: str) -> List[int]:
    try:
        coins = sorted({int(x) for x in s.split(",") if x.strip() != ""})
    except ValueError:
        raise argparse.ArgumentTypeError("Coins must be integers separated by commas, e.g. 1,5,10,25")

    if not coins:
        raise argparse.ArgumentTypeError("At least one coin denomination is required.")
    if any(c <= 0 for c in coins):
        raise argparse.ArgumentTypeError("All coin denominations must be positive integers.")
    return coins


def parse_amount(s: str) -> int:
    try:
        amount = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Amount must be an integer, got {s!r}")
    if amount < 0:
        raise argparse.ArgumentTypeError("Amount must be non-negative.")
    return amount


def save_csv(change: Change, path: str) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["amount", "min_coins", "last_coin"])
        for a, (n, c) in enumerate(zip(change.cost_table, change.choice_table)):
            writer.writerow([
                a,
                "" if n is None else n,
                "" if c is None else c,
            ])


def print_choice_table(change: Change) -> None:
    print("Coins used for each amount (amount: coin):")
    for a, c in enumerate(change.choice_table):
        print(f"{a:6d}: {'-' if c is None else c}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Make change with the minimum number of coins.")
    parser.add_argument("--coins", required=True, type=parse_coins,
                        help="Comma-separated coin denominations (e.g., 1,5,10,21,25)")
    parser.add_argument("--amount", required=True, type=parse_amount,
                        help="Amount to make change for (non-negative integer)")
    parser.add_argument("--method", choices=["table", "memo", "naive"], default="table",
                        help="table = bottom-up with coin list (default); memo/naive = recursive, count only "
                             "(naive is exponential: keep amounts below about 100)")
    parser.add_argument("--show-table", action="store_true", default=False,
                        help="Print the coin chosen for every amount 0..amount (table method only)")
    parser.add_argument("--outfile", type=str, default=None,
                        help="Write the cost/choice tables to this CSV path (table method only)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def run_recursive(method: str, coins: List[int], amount: int) -> int:
    solver = memo_min_coins if method == "memo" else rec_min_coins
    try:
        n: Optional[int] = solver(coins, amount)
    except RecursionError:
        print(f"Amount {amount} is too large for --method {method}; use --method table.", file=sys.stderr)
        return 1
    if n is None:
        print(f"Amount {amount} cannot be made exactly from coins {coins}.", file=sys.stderr)
        return 1
    print(f"Making change for {amount} requires {n} coins")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, args.log_level))

    coins = args.coins
    amount = args.amount
    logger.info("Solving amount %d with coins %s (method=%s)", amount, coins, args.method)

    if args.method != "table":
        if args.show_table or args.outfile:
            parser.error("--show-table and --outfile need --method table")
        return run_recursive(args.method, coins, amount)

    try:
        change = make_change(coins, amount)
    except InfeasibleAmountError as e:
        logger.info("Infeasible: %s", e)
        print(f"{e}.", file=sys.stderr)
        return 1
    except CoinChangeError as e:  # library misuse; CLI parsing rejects bad input first
        logger.error("Could not make change: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Making change for {amount} requires {change.num_coins} coins")
    print("They are:", " ".join(str(c) for c in change.coins))
    if change.coins:
        summary = ", ".join(f"{k} x {c}" for c, k in count_coins(change.coins).items())
        print(f"Summary: {summary}")

    if args.show_table:
        print_choice_table(change)
    if args.outfile:
        save_csv(change, args.outfile)
        print(f"Table saved to: {args.outfile}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
