"""0/1, unbounded and fractional knapsack problems."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Item:
    """An item with a weight and a value."""

    weight: int
    value: int


def _as_items(items: Iterable) -> list[Item]:
    result = [i if isinstance(i, Item) else Item(*i) for i in items]
    if any(item.weight < 0 for item in result):
        raise ValueError("item weights must not be negative")
    return result


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack(items: Iterable, capacity: int) -> int:
    """Return the best total value taking each item at most once (memoized)."""
    goods = _as_items(items)
    _check_capacity(capacity)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        item = goods[count - 1]
        skip = best(count - 1, room)
        if room < item.weight:
            return skip
        return max(item.value + best(count - 1, room - item.weight), skip)

    return best(len(goods), capacity)


def knapsack_table(items: Iterable, capacity: int) -> int:
    """Return the best total value taking each item at most once (tabulated)."""
    goods = _as_items(items)
    _check_capacity(capacity)
    row = [0] * (capacity + 1)
    for item in goods:
        previous = row
        row = [
            previous[room]
            if room < item.weight or room == 0
            else max(item.value + previous[room - item.weight], previous[room])
            for room in range(capacity + 1)
        ]
    return row[capacity]


def unbounded_knapsack(items: Iterable, capacity: int) -> int:
    """Return the best total value when each item may be taken any number of times."""
    goods = _as_items(items)
    _check_capacity(capacity)
    if any(item.weight == 0 for item in goods):
        raise ValueError("item weights must be positive when items repeat")
    best = [0] * (capacity + 1)
    for room in range(1, capacity + 1):
        best[room] = max(
            (item.value + best[room - item.weight] for item in goods if item.weight <= room),
            default=0,
        )
    return best[capacity]


def fractional_knapsack(items: Iterable, capacity: int) -> float:
    """Return the best value when items may be split, filling by value per weight."""
    goods = _as_items(items)
    _check_capacity(capacity)
    if any(item.weight == 0 for item in goods):
        raise ValueError("item weights must be positive")
    ordered = sorted(goods, key=lambda item: item.value / item.weight, reverse=True)
    room = capacity
    total = 0.0
    for item in ordered:
        if item.weight <= room:
            total += item.value
            room -= item.weight
        else:
            total += room / item.weight * item.value
            break
    return total