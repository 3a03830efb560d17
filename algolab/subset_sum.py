"""Subset sum: deciding whether a subset reaches a total and counting such subsets."""

from __future__ import annotations

from collections.abc import Iterable


def _validate(weights: Iterable[int]) -> list[int]:
    values = list(weights)
    if any(weight < 0 for weight in values):
        raise ValueError("weights must not be negative")
    return values


def has_subset_sum(weights: Iterable[int], total: int) -> bool:
    """Return whether some subset of ``weights`` sums exactly to ``total``.

    The empty subset reaches a total of 0. A negative total is never reached.
    """
    values = _validate(weights)
    if total < 0:
        return False
    limit = (1 << (total + 1)) - 1
    reachable = 1
    for weight in values:
        reachable = (reachable | (reachable << weight)) & limit
    return bool((reachable >> total) & 1)


def count_subsets(weights: Iterable[int], total: int) -> int:
    """Count the subsets of ``weights``, each item used at most once, summing to ``total``.

    A total of 0 is reached in exactly one way, so zero weights only
    multiply the count for positive totals.
    """
    values = _validate(weights)
    if total < 0:
        return 0
    ways = [1] + [0] * total
    for weight in values:
        if weight == 0:
            ways = [ways[0]] + [2 * count for count in ways[1:]]
            continue
        for amount in range(total, weight - 1, -1):
            ways[amount] += ways[amount - weight]
    return ways[total]