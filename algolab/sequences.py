"""Counting dice sums and the shortest common supersequence."""

from __future__ import annotations


def count_dice_ways(dice: int, faces: int, total: int) -> int:
    """Count the ways ``dice`` dice with faces 1..``faces`` can show ``total``.

    Dice are distinguishable, so order matters.
    """
    if dice < 1:
        raise ValueError("at least one die is needed")
    if faces < 0:
        raise ValueError("faces must not be negative")
    if total < 1:
        return 0
    row = [1 if 1 <= j <= faces else 0 for j in range(total + 1)]
    for _ in range(dice - 1):
        row = [
            sum(row[j - k] for k in range(1, min(faces, j - 1) + 1))
            for j in range(total + 1)
        ]
    return row[total]


def shortest_common_supersequence_length(first: str, second: str) -> int:
    """Return the length of the shortest string holding both inputs as subsequences."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(1 + previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1]))
        previous = current
    return previous[len(second)]