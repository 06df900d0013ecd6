#!/usr/bin/env python3
"""
Check whether the greedy coin-change algorithm is optimal for a given currency system.

Given a list of coin denominations, this script:
  - Builds one minimum-coin table for amounts 1..n and runs greedy on each amount
  - Records for each amount whether greedy matches the true optimum
  - Reports the first amount where greedy loses, with both coin lists
  - Saves results to a CSV

Usage examples:
  python check_greedy_coin_change.py --coins 1,5,10,25 --n 100
  python check_greedy_coin_change.py --coins 1,5,10,21,25 --n 100 --outfile results.csv
"""

from __future__ import annotations
import argparse
import csv
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from coin_change import compute_min_coins, greedy_change, reconstruct
from make_change import LOG_FORMAT, parse_coins

logger = logging.getLogger(__name__)


@dataclass
class ResultRow:
    amount: int
    reachable: bool
    greedy_num_coins: Optional[int]
    optimal_num_coins: Optional[int]
    greedy_is_optimal: Optional[bool]


def analyze(coins: List[int], n: int,
            cost: Optional[List[Optional[int]]] = None) -> Tuple[List[ResultRow], bool]:
    """Greedy vs optimal for 1..n; pass a cost table from compute_min_coins(coins, n) to reuse it."""
    if cost is None:
        cost, _ = compute_min_coins(coins, n)
    rows: List[ResultRow] = []

    all_reachable_cases_greedy_ok = True

    for amt in range(1, n + 1):
        opt = cost[amt]
        gr_coins = greedy_change(amt, coins)
        gr = None if gr_coins is None else len(gr_coins)
        reachable = opt is not None
        if reachable:
            greedy_ok = (gr == opt)
            all_reachable_cases_greedy_ok &= greedy_ok
        else:
            greedy_ok = None  # N/A if unreachable

        rows.append(
            ResultRow(
                amount=amt,
                reachable=reachable,
                greedy_num_coins=gr,
                optimal_num_coins=opt,
                greedy_is_optimal=greedy_ok,
            )
        )

    logger.debug("Analyzed %d amounts for coins %s", n, coins)
    return rows, all_reachable_cases_greedy_ok


def first_counterexample(coins: List[int], n: int,
                         rows: Optional[List[ResultRow]] = None,
                         choice: Optional[List[Optional[int]]] = None,
                         ) -> Optional[Tuple[int, Optional[List[int]], List[int]]]:
    """
    Smallest reachable amount in 1..n where greedy is not optimal: (amount, greedy coins, optimal coins).
    Rows from analyze and the matching choice table are reused when given.
    """
    if choice is None:
        cost, choice = compute_min_coins(coins, n)
        if rows is None:
            rows, _ = analyze(coins, n, cost=cost)
    elif rows is None:
        rows, _ = analyze(coins, n)
    for r in rows:
        if r.reachable and r.greedy_is_optimal is False:
            return r.amount, greedy_change(r.amount, coins), reconstruct(choice, r.amount)
    return None


def save_csv(rows: List[ResultRow], path: str) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["amount", "reachable", "greedy_num_coins", "optimal_num_coins", "greedy_is_optimal"])
        for r in rows:
            writer.writerow([
                r.amount,
                r.reachable,
                "" if r.greedy_num_coins is None else r.greedy_num_coins,
                "" if r.optimal_num_coins is None else r.optimal_num_coins,
                "" if r.greedy_is_optimal is None else r.greedy_is_optimal,
            ])


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check greedy optimality for a coin system.")
    parser.add_argument("--coins", required=True, type=parse_coins,
                        help="Comma-separated coin denominations (e.g., 1,5,10,25)")
    parser.add_argument("--n", type=int, default=100, help="Test amounts 1..n (default: 100)")
    parser.add_argument("--outfile", type=str, default="greedy_check_results.csv",
                        help="CSV output path (default: greedy_check_results.csv)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, args.log_level))

    coins = args.coins
    n = args.n
    if n < 1:
        parser.error("--n must be at least 1")

    # Basic sanity notes for the user
    if 1 not in coins:
        print("Note: 1 is not in the coin system; some amounts may be unreachable.")

    cost, choice = compute_min_coins(coins, n)
    rows, all_ok = analyze(coins, n, cost=cost)
    save_csv(rows, args.outfile)

    # Summary
    reachable_counts = sum(1 for r in rows if r.reachable)
    mismatches = [r.amount for r in rows if r.reachable and r.greedy_is_optimal is False]
    print(f"Analyzed amounts 1..{n} for coins {coins}.")
    print(f"Reachable amounts: {reachable_counts}/{n}")
    if mismatches:
        print(f"Greedy failed on {len(mismatches)} reachable amount(s): {mismatches}")
        amt, gr_coins, opt_coins = first_counterexample(coins, n, rows=rows, choice=choice)
        greedy_text = "no exact change" if gr_coins is None else " ".join(map(str, gr_coins))
        print(f"First counterexample: {amt} -> greedy {greedy_text}; optimal {' '.join(map(str, opt_coins))}")
        print("=> The currency system is NOT greedy-optimal over the tested range.")
    else:
        if reachable_counts == 0:
            print("No reachable amounts in the tested range.")
        else:
            print("Greedy matched optimal for all reachable amounts in the tested range.")
    print(f"Results saved to: {args.outfile}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
