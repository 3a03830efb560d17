"""Coin change: counting combinations and finding the fewest coins."""

from __future__ import annotations

from collections.abc import Iterable


def _validate(coins: Iterable[int], total: int) -> list[int]:
    values = list(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    if total < 0:
        raise ValueError("total must not be negative")
    return values


def count_ways(coins: Iterable[int], total: int) -> int:
    """Count the combinations of coins, each usable any number of times, summing to ``total``."""
    values = _validate(coins, total)
    ways = [1] + [0] * total
    for coin in values:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def min_coins(coins: Iterable[int], total: int) -> int | None:
    """Return the fewest coins summing to ``total``, or ``None`` if it cannot be made."""
    values = _validate(coins, total)
    best: list[int | None] = [0] + [None] * total
    for amount in range(1, total + 1):
        candidates = [
            best[amount - coin] + 1
            for coin in values
            if coin <= amount and best[amount - coin] is not None
        ]
        best[amount] = min(candidates, default=None)
    return best[total]