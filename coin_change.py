"""
Minimum-coin change making by bottom-up tabulation.

Given coin denominations (unbounded supply of each) and a target amount:
  - compute_min_coins fills a cost table (min #coins for every amount 0..target)
    and a parallel choice table (one coin used in an optimal solution),
  - reconstruct walks the choice table back down from the target to list the coins,
  - make_change does both and refuses to return a count for unreachable amounts.

Unreachable amounts are None in both tables, never a large-number stand-in.

Tie-break: when several coins give the same minimal count for an amount, the
first coin in the caller's order wins. With coins given ascending, 11 from
{1, 5, 10, 25} comes out as [1, 10].

A greedy "largest coin first" helper is included for comparison; it is optimal
for some systems (1, 5, 10, 25) and not for others (1, 5, 10, 21, 25 at 63).
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


# ---------- Errors ----------

class CoinChangeError(ValueError):
    """Base class for all change-making errors."""


class InvalidDenominationsError(CoinChangeError):
    pass


class InvalidAmountError(CoinChangeError):
    pass


class InfeasibleAmountError(CoinChangeError):
    """The amount cannot be formed exactly from the given coins."""

    def __init__(self, amount: int, coins: Optional[List[int]] = None):
        self.amount = amount
        self.coins = coins
        if coins is None:
            msg = f"Amount {amount} cannot be made exactly"
        else:
            msg = f"Amount {amount} cannot be made exactly from coins {coins}"
        super().__init__(msg)


# ---------- Validation ----------

def _is_int(x) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def validate_coins(coins: Iterable[int]) -> List[int]:
    """Check denominations; drop duplicates, keeping the first occurrence's position."""
    if coins is None:
        raise InvalidDenominationsError("Coin denominations are required.")
    values = list(coins)
    if not values:
        raise InvalidDenominationsError("At least one coin denomination is required.")
    for c in values:
        if not _is_int(c):
            raise InvalidDenominationsError(f"Coin denominations must be integers, got {c!r}.")
        if c <= 0:
            raise InvalidDenominationsError(f"All coin denominations must be positive integers, got {c}.")
    return list(dict.fromkeys(values))


def validate_amount(amount: int) -> int:
    if not _is_int(amount):
        raise InvalidAmountError(f"Amount must be an integer, got {amount!r}.")
    if amount < 0:
        raise InvalidAmountError(f"Amount must be non-negative, got {amount}.")
    return amount


# ---------- Tabulation / reconstruction ----------

def compute_min_coins(coins: Iterable[int], target: int) -> Tuple[List[Optional[int]], List[Optional[int]]]:
    """
    Unbounded coin-change DP for minimum coins over amounts 0..target.

    cost[a]   = min #coins to make a, or None if unreachable
    choice[a] = a coin used by that optimum, or None (always None at 0)

    Amounts are filled in ascending order so every a - c is final before a.
    """
    coins = validate_coins(coins)
    target = validate_amount(target)

    cost: List[Optional[int]] = [None] * (target + 1)
    choice: List[Optional[int]] = [None] * (target + 1)
    cost[0] = 0
    for a in range(1, target + 1):
        best = None
        best_coin = None
        for c in coins:
            if c > a:
                continue
            prev = cost[a - c]
            if prev is None:
                continue
            cand = prev + 1
            if best is None or cand < best:
                best = cand
                best_coin = c
        cost[a] = best
        choice[a] = best_coin

    logger.debug("Built tables for coins %s up to %d (reachable target: %s)",
                 coins, target, cost[target] is not None)
    return cost, choice


def reconstruct(choice_table: List[Optional[int]], target: int) -> List[int]:
    """Follow the choice table from target down to 0; returns the coins in the order taken."""
    if not _is_int(target) or target < 0 or target >= len(choice_table):
        raise InvalidAmountError(
            f"Amount {target!r} is outside the table (0..{len(choice_table) - 1})."
        )
    used: List[int] = []
    remaining = target
    while remaining > 0:
        coin = choice_table[remaining]
        if coin is None:
            raise InfeasibleAmountError(remaining)
        if coin <= 0 or coin > remaining:
            raise CoinChangeError(f"Choice table entry {coin!r} at amount {remaining} is not usable.")
        used.append(coin)
        remaining -= coin
    return used


@dataclass
class Change:
    amount: int
    coins: List[int]
    cost_table: List[Optional[int]] = field(repr=False)
    choice_table: List[Optional[int]] = field(repr=False)

    @property
    def num_coins(self) -> int:
        return len(self.coins)


def make_change(coins: Iterable[int], amount: int) -> Change:
    """Minimum-coin change for amount, or InfeasibleAmountError if there is none."""
    coins = validate_coins(coins)
    cost, choice = compute_min_coins(coins, amount)
    if cost[amount] is None:
        raise InfeasibleAmountError(amount, coins)
    used = reconstruct(choice, amount)
    return Change(amount=amount, coins=used, cost_table=cost, choice_table=choice)


def min_coins(coins: Iterable[int], amount: int) -> Optional[int]:
    """Minimum coin count only; None if unreachable."""
    cost, _ = compute_min_coins(coins, amount)
    return cost[amount]


# ---------- Greedy ----------

def greedy_change(amount: int, coins: Iterable[int]) -> Optional[List[int]]:
    """
    Greedy: repeatedly take the largest coin <= remaining amount.
    Returns the coins used, or None if it cannot make exact change.
    """
    amount = validate_amount(amount)
    coins_desc = sorted(validate_coins(coins), reverse=True)
    remaining = amount
    used: List[int] = []
    for c in coins_desc:
        if remaining <= 0:
            break
        take = remaining // c
        if take > 0:
            used.extend([c] * take)
            remaining -= take * c
    return used if remaining == 0 else None


def count_coins(coins_used: Iterable[int]) -> Dict[int, int]:
    """Denomination -> how many times it is used, largest denomination first."""
    counts: Dict[int, int] = {}
    for c in sorted(coins_used, reverse=True):
        counts[c] = counts.get(c, 0) + 1
    return counts
