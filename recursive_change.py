"""
Top-down versions of the minimum-coin problem, kept as reference implementations.

  rec_min_coins:  plain recursion, re-solves the same sub-amounts over and over
                  (exponential; with a unit coin, amounts past ~100 effectively hang)
  memo_min_coins: the same recursion with a cache of sub-amount results

Both return None for unreachable amounts and should agree with
coin_change.min_coins. Recursion depth grows with amount / min(coins).
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional

from coin_change import validate_amount, validate_coins

logger = logging.getLogger(__name__)


def _best_of(sub_results: Iterable[Optional[int]]) -> Optional[int]:
    best = None
    for r in sub_results:
        if r is not None and (best is None or r + 1 < best):
            best = r + 1
    return best


def rec_min_coins(coins: Iterable[int], amount: int) -> Optional[int]:
    coins = validate_coins(coins)
    amount = validate_amount(amount)
    calls = 0

    def solve(a: int) -> Optional[int]:
        nonlocal calls
        calls += 1
        if a == 0:
            return 0
        if a in coins:
            return 1
        return _best_of(solve(a - c) for c in coins if c <= a)

    result = solve(amount)
    logger.debug("rec_min_coins(%d) made %d calls", amount, calls)
    return result


def memo_min_coins(coins: Iterable[int], amount: int,
                   memo: Optional[Dict[int, Optional[int]]] = None) -> Optional[int]:
    """Memoized recursion; pass the same memo dict to reuse results across calls with the same coins."""
    coins = validate_coins(coins)
    amount = validate_amount(amount)
    if memo is None:
        memo = {}

    def solve(a: int) -> Optional[int]:
        if a == 0:
            return 0
        if a in memo:
            return memo[a]
        result = _best_of(solve(a - c) for c in coins if c <= a)
        memo[a] = result
        return result

    result = solve(amount)
    logger.debug("memo_min_coins(%d) cached %d sub-amounts", amount, len(memo))
    return result
