"""Backtracking searches: n-queens, Hamiltonian cycles and permutations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import product


def n_queens_solutions(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each placement is a tuple holding the column of the queen in each row.
    Placements come out in lexicographic order.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    placed: list[int] = []

    def safe(col: int) -> bool:
        row = len(placed)
        return all(
            c != col and abs(row - r) != abs(c - col) for r, c in enumerate(placed)
        )

    def place() -> Iterator[tuple[int, ...]]:
        if len(placed) == n:
            yield tuple(placed)
            return
        for col in range(n):
            if safe(col):
                placed.append(col)
                yield from place()
                placed.pop()

    yield from place()


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Return the first board found by filling columns left to right.

    The board is a list of rows holding 1 where a queen stands and 0
    elsewhere. ``None`` means no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows: list[int] = []  # rows[col] is the row of the queen in that column

    def safe(row: int) -> bool:
        col = len(rows)
        return all(
            r != row and abs(col - c) != abs(r - row) for c, r in enumerate(rows)
        )

    def solve() -> bool:
        if len(rows) == n:
            return True
        for row in range(n):
            if safe(row):
                rows.append(row)
                if solve():
                    return True
                rows.pop()
        return False

    if not solve():
        return None
    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(rows):
        board[row][col] = 1
    return board


def hamiltonian_cycle(graph: Sequence[Sequence[int]], start: int) -> list[int] | None:
    """Find a Hamiltonian cycle beginning and ending at ``start``.

    ``graph`` is a square adjacency matrix. Vertices after the start are
    tried in increasing order from vertex 1, so vertex 0 is only ever
    visited as the starting vertex. The cycle is returned with the start
    repeated at the end, or ``None`` when the search finds none.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is out of range")

    path = [start]

    def extend() -> bool:
        if len(path) == size:
            return graph[path[-1]][path[0]] == 1
        for vertex in range(1, size):
            if graph[path[-1]][vertex] != 0 and vertex not in path:
                path.append(vertex)
                if extend():
                    return True
                path.pop()
        return False

    if not extend():
        return None
    return [*path, start]


def permutations_with_repetition(chars: str, length: int) -> Iterator[str]:
    """Yield every string of ``length`` characters drawn from ``chars``.

    Characters may repeat. The first character of the result varies
    fastest.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    for combo in product(chars, repeat=length):
        yield "".join(reversed(combo))


def permutations(text: str) -> Iterator[str]:
    """Yield the permutations of ``text`` in swap order.

    Position by position, each remaining character is swapped into place
    and the rest permuted before swapping back.
    """
    chars = list(text)
    last = len(chars) - 1

    def walk(left: int) -> Iterator[str]:
        if left == last:
            yield "".join(chars)
            return
        for i in range(left, len(chars)):
            chars[left], chars[i] = chars[i], chars[left]
            yield from walk(left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    if chars:
        yield from walk(0)