"""Brute-force substring searches, including skip patterns."""

from __future__ import annotations

from collections.abc import Iterator


def _require(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def _char_at(text: str, index: int) -> str | None:
    return text[index] if 0 <= index < len(text) else None


def _matches(text: str, pattern: str) -> Iterator[int]:
    for i in range(len(text) - len(pattern) + 1):
        if text.startswith(pattern, i):
            yield i


def find_all(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` occurs, overlaps included."""
    _require(pattern)
    return list(_matches(text, pattern))


def find_first(text: str, pattern: str) -> int | None:
    """Return the first index where ``pattern`` occurs, or ``None``."""
    _require(pattern)
    return next(_matches(text, pattern), None)


def find_reversed(text: str, pattern: str) -> int | None:
    """Return the first index where ``pattern`` reversed occurs, or ``None``."""
    _require(pattern)
    return find_first(text, pattern[::-1])


def reverse_search(text: str, pattern: str) -> int | None:
    """Scan from the end for ``pattern`` read right to left.

    A match at ``i`` has ``pattern[0]`` at ``i``, ``pattern[1]`` at ``i - 1``
    and so on. Candidates run from ``len(text) - len(pattern)`` down to 0;
    the lowest matching index is returned, or ``None``.
    """
    _require(pattern)
    width = len(pattern)
    backwards = pattern[::-1]
    found = None
    for i in range(len(text) - width, -1, -1):
        begin = i - width + 1
        if begin >= 0 and text[begin : i + 1] == backwards:
            found = i
    return found


def reverse_substring(text: str, start: int, length: int) -> str:
    """Return ``text`` with ``length`` characters from ``start`` reversed."""
    if start < 0 or length < 0 or start + length > len(text):
        raise ValueError("substring lies outside the text")
    end = start + length
    return text[:start] + text[start:end][::-1] + text[end:]


def _skip_match(text: str, pattern: str, start: int) -> bool:
    return all(
        _char_at(text, start + 2 * offset) == ch for offset, ch in enumerate(pattern)
    )


def skip_search(text: str, pattern: str) -> int | None:
    """Return the first index where ``pattern`` occurs on every other character."""
    _require(pattern)
    return next(
        (i for i in range(len(text)) if _skip_match(text, pattern, i)), None
    )


def skip_count(text: str, pattern: str) -> int:
    """Count the indexes where ``pattern`` occurs on every other character."""
    _require(pattern)
    return sum(1 for i in range(len(text)) if _skip_match(text, pattern, i))


def _growing_positions(start: int) -> Iterator[int]:
    index, skip = start, 2
    while True:
        yield index
        index += skip
        skip += 1


def growing_skip_search(text: str, pattern: str) -> int | None:
    """Find ``pattern`` at gaps of 2, 3, 4, ... characters.

    Candidates run up to ``len(text) - len(pattern)``. Pattern characters
    whose position falls past the end of the text are not checked. Returns
    the first matching index, or ``None``.
    """
    _require(pattern)
    size = len(text)
    for start in range(size - len(pattern) + 1):
        if all(
            text[pos] == ch
            for ch, pos in zip(pattern, _growing_positions(start))
            if pos < size
        ):
            return start
    return None


def growing_skip_count(text: str, pattern: str) -> int:
    """Count the indexes where ``pattern`` occurs at gaps of 2, 3, 4, ...

    The first character must match. The k-th pattern character is only
    checked while the gap ``k + 2`` is shorter than the text; a checked
    position past the end of the text is a mismatch.
    """
    _require(pattern)
    size = len(text)
    checked = pattern[: max(size - 2, 0)]
    count = 0
    for start in range(size):
        if text[start] != pattern[0]:
            continue
        if all(
            pos < size and text[pos] == ch
            for ch, pos in zip(checked, _growing_positions(start))
        ):
            count += 1
    return count