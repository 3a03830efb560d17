"""Interval dynamic programming: matrix chain order and optimal binary search trees."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import accumulate


def _check_dims(dims: Sequence[int]) -> tuple[int, ...]:
    values = tuple(dims)
    if len(values) < 2:
        raise ValueError("at least one matrix (two dimensions) is needed")
    return values


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` (counting from 1) has shape ``dims[i - 1] x dims[i]``.
    Solved by memoized recursion over split points.
    """
    values = _check_dims(dims)

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + values[i - 1] * values[k] * values[j]
            for k in range(i, j)
        )

    return cost(1, len(values) - 1)


def matrix_chain_table(dims: Sequence[int]) -> int:
    """Return the same cost as :func:`matrix_chain_cost`, filling a table by chain length."""
    values = _check_dims(dims)
    count = len(values) - 1
    table = {(i, i): 0 for i in range(1, count + 1)}
    for length in range(2, count + 1):
        for i in range(1, count - length + 2):
            j = i + length - 1
            table[i, j] = min(
                table[i, k] + table[k + 1, j] + values[i - 1] * values[k] * values[j]
                for k in range(i, j)
            )
    return table[1, count]


def optimal_bst_cost(frequencies: Sequence[int]) -> int:
    """Return the least total search cost of a binary search tree over sorted keys.

    ``frequencies[i]`` is how often key ``i`` is searched; a key at depth d
    (the root at depth 1) costs d times its frequency.
    """
    freq = list(frequencies)
    count = len(freq)
    if count == 0:
        return 0
    prefix = [0, *accumulate(freq)]
    table: dict[tuple[int, int], int] = {(i, i): freq[i] for i in range(count)}

    def cell(i: int, j: int) -> int:
        return table[i, j] if i <= j else 0

    for span in range(1, count):
        for i in range(count - span):
            j = i + span
            weight = prefix[j + 1] - prefix[i]
            table[i, j] = weight + min(
                cell(i, root - 1) + cell(root + 1, j) for root in range(i, j + 1)
            )
    return table[0, count - 1]