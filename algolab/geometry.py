"""Point-set problems: closest and farthest pairs, hull edges, centrality."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import combinations


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: int
    y: int

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)


def _as_points(points: Iterable) -> list[Point]:
    return [p if isinstance(p, Point) else Point(*p) for p in points]


def _at_least(points: list[Point], count: int) -> None:
    if len(points) < count:
        raise ValueError(f"at least {count} point(s) are needed")


def closest_pair(points: Iterable) -> tuple[float, Point, Point]:
    """Return the smallest distance and the first pair that has it."""
    pts = _as_points(points)
    _at_least(pts, 2)
    best: tuple[float, Point, Point] | None = None
    for a, b in combinations(pts, 2):
        d = a.distance(b)
        if best is None or d < best[0]:
            best = (d, a, b)
    return best


def farthest_pair(points: Iterable) -> tuple[float, Point, Point]:
    """Return the largest distance and the first pair that has it."""
    pts = _as_points(points)
    _at_least(pts, 2)
    best = (0.0, pts[0], pts[1])
    for a, b in combinations(pts, 2):
        d = a.distance(b)
        if d > best[0]:
            best = (d, a, b)
    return best


def convex_hull_edges(points: Iterable) -> list[tuple[Point, Point]]:
    """Return the pairs whose line has every point on one side of it.

    Points lying on the line count for neither side.
    """
    pts = _as_points(points)
    edges = []
    for p, q in combinations(pts, 2):
        a = p.y - q.y
        b = q.x - p.x
        c = q.x * p.y - p.x * q.y
        values = [a * r.x + b * r.y - c for r in pts]
        if not (any(v > 0 for v in values) and any(v < 0 for v in values)):
            edges.append((p, q))
    return edges


def _total_distance(point: Point, pts: list[Point]) -> float:
    return sum(point.distance(other) for other in pts)


def most_central_point(points: Iterable) -> tuple[float, Point]:
    """Return the point whose mean distance to all points is smallest.

    The mean is taken over every point, the point itself included.
    """
    pts = _as_points(points)
    _at_least(pts, 1)
    best: tuple[float, Point] | None = None
    for point in pts:
        average = _total_distance(point, pts) / len(pts)
        if best is None or average < best[0]:
            best = (average, point)
    return best


def most_remote_point(points: Iterable) -> tuple[float, Point]:
    """Return the point whose mean distance to the other points is largest."""
    pts = _as_points(points)
    _at_least(pts, 2)
    best: tuple[float, Point] | None = None
    for point in pts:
        average = _total_distance(point, pts) / (len(pts) - 1)
        if best is None or average > best[0]:
            best = (average, point)
    return best


def sort_by_x(points: Iterable) -> list[Point]:
    """Return the points ordered by x coordinate."""
    return sorted(_as_points(points), key=lambda p: p.x)


def _closest_distance(pts: list[Point]) -> float:
    if len(pts) <= 3:
        return min(a.distance(b) for a, b in combinations(pts, 2))
    mid = len(pts) // 2
    mid_x = pts[mid].x
    best = min(_closest_distance(pts[:mid]), _closest_distance(pts[mid:]))
    strip = sorted((p for p in pts if abs(p.x - mid_x) < best), key=lambda p: p.y)
    for i, p in enumerate(strip):
        for q in strip[i + 1 :]:
            if q.y - p.y >= best:
                break
            best = min(best, p.distance(q))
    return best


def closest_pair_divide_and_conquer(points: Iterable) -> float:
    """Return the smallest pairwise distance by splitting on x."""
    pts = sort_by_x(points)
    _at_least(pts, 2)
    return _closest_distance(pts)