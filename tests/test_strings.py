import pytest

from algolab.strings import (
    find_all,
    find_first,
    find_reversed,
    growing_skip_count,
    growing_skip_search,
    reverse_search,
    reverse_substring,
    skip_count,
    skip_search,
)


def test_find_all_positions_are_matches():
    text, pattern = "abcabcabcdabcdabcdabcd", "abcd"
    positions = find_all(text, pattern)
    assert positions
    assert all(text[i : i + len(pattern)] == pattern for i in positions)
    assert len(positions) == text.count(pattern)
    assert positions == sorted(positions)


def test_find_all_counts_overlaps():
    positions = find_all("aaaa", "aa")
    assert len(positions) == len("aaaa") - len("aa") + 1


def test_find_all_pattern_longer_than_text():
    assert find_all("ab", "abc") == []


def test_find_first_agrees_with_find():
    text = "abcabcabcdabcdabcdf"
    assert find_first(text, "abcdf") == text.find("abcdf")
    assert find_first(text, "zzz") is None


def test_find_reversed():
    text = "hello world"
    assert find_reversed(text, "dlrow") == text.find("world")
    assert find_reversed(text, "xyz") is None


def test_reverse_search_source_example():
    text = "abcdef"
    assert reverse_search(text, "f") == len(text) - 1


def test_reverse_search_reads_backwards():
    text = "xxcbaxx"
    assert reverse_search(text, "abc") == text.find("cba") + len("abc") - 1
    assert reverse_search(text, "cba") is None


def test_reverse_substring_invariants():
    text = "hello,keerthi!"
    result = reverse_substring(text, 7, 5)
    assert result[:7] == text[:7]
    assert result[12:] == text[12:]
    assert result[7:12] == text[7:12][::-1]
    assert reverse_substring(result, 7, 5) == text


def test_reverse_substring_out_of_range():
    with pytest.raises(ValueError):
        reverse_substring("abc", 2, 5)
    with pytest.raises(ValueError):
        reverse_substring("abc", -1, 1)


def test_skip_search_positions():
    text, pattern = "abcdefghij", "fhj"
    index = skip_search(text, pattern)
    assert index == text.index("f")
    assert all(text[index + 2 * k] == ch for k, ch in enumerate(pattern))
    assert skip_search(text, "fgh") is None


def test_skip_count_source_example():
    assert skip_count("abcdeafcgehi", "acei") == 1


def test_skip_count_single_char_counts_occurrences():
    text = "banana"
    assert skip_count(text, "a") == text.count("a")


def test_growing_skip_search_source_example():
    assert growing_skip_search("abcdefghijjlmnopqrstuv", "acfjou") == 0


def test_growing_skip_search_not_found():
    assert growing_skip_search("abcdefghij", "ax") is None


def test_growing_skip_count_source_example():
    assert growing_skip_count("abcdefghiabcdef", "ac") == 2


@pytest.mark.parametrize(
    "func",
    [find_all, find_first, find_reversed, reverse_search, skip_search, skip_count,
     growing_skip_search, growing_skip_count],
)
def test_empty_pattern_rejected(func):
    with pytest.raises(ValueError):
        func("abc", "")