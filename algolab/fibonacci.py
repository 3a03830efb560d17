"""Fibonacci numbers and the staircase count built on them."""

from __future__ import annotations


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def fibonacci_table(n: int) -> list[int]:
    """Return the Fibonacci numbers F(0) through F(n)."""
    _check(n)
    table = [0, 1][: n + 1]
    while len(table) <= n:
        table.append(table[-1] + table[-2])
    return table


def fibonacci(n: int) -> int:
    """Return F(n), with F(0) = 0 and F(1) = 1."""
    return fibonacci_table(n)[n]


def count_stair_ways(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two at a time."""
    _check(n)
    return fibonacci(n + 1)