"""Optimal merge pattern for combining sorted files."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Return the least total cost of merging all sizes two at a time.

    Merging two files costs the sum of their sizes; the two smallest are
    always merged first. Fewer than two files cost nothing.
    """
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) >= 2:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total