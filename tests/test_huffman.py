import pytest

from algolab.huffman import build_huffman_tree, huffman_codes

SYMBOLS = ["a", "b", "c", "d", "e", "f"]
FREQUENCIES = [5, 9, 12, 13, 16, 45]


def _internal_total(node):
    if node.is_leaf():
        return 0
    return node.frequency + _internal_total(node.left) + _internal_total(node.right)


def _decode(root, bits):
    out = []
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node.is_leaf():
            out.append(node.symbol)
            node = root
    return "".join(out)


def test_example_codes():
    assert huffman_codes(SYMBOLS, FREQUENCIES) == {
        "f": "0",
        "c": "100",
        "d": "101",
        "a": "1100",
        "b": "1101",
        "e": "111",
    }


def test_codes_follow_leaf_order():
    assert list(huffman_codes(SYMBOLS, FREQUENCIES)) == ["f", "c", "d", "a", "b", "e"]


def test_codes_are_prefix_free():
    codes = list(huffman_codes(SYMBOLS, FREQUENCIES).values())
    for x in codes:
        for y in codes:
            if x != y:
                assert not y.startswith(x)


def test_weighted_length_equals_internal_frequencies():
    codes = huffman_codes(SYMBOLS, FREQUENCIES)
    weighted = sum(f * len(codes[s]) for s, f in zip(SYMBOLS, FREQUENCIES))
    assert weighted == _internal_total(build_huffman_tree(SYMBOLS, FREQUENCIES))


def test_root_frequency_is_total():
    root = build_huffman_tree(SYMBOLS, FREQUENCIES)
    assert root.frequency == sum(FREQUENCIES)
    assert not root.is_leaf()
    assert root.symbol is None


def test_encode_decode_round_trip():
    codes = huffman_codes(SYMBOLS, FREQUENCIES)
    message = "fabdecaffe"
    bits = "".join(codes[ch] for ch in message)
    assert _decode(build_huffman_tree(SYMBOLS, FREQUENCIES), bits) == message


def test_two_symbols_are_leaves():
    root = build_huffman_tree(["x", "y"], [3, 1])
    assert root.left.is_leaf() and root.right.is_leaf()
    assert root.left.symbol == "y"
    assert huffman_codes(["x", "y"], [3, 1]) == {"y": "0", "x": "1"}


def test_single_symbol_has_empty_code():
    assert huffman_codes(["z"], [7]) == {"z": ""}


@pytest.mark.parametrize(
    "symbols, frequencies",
    [(["a", "b"], [1]), ([], []), (["a", "b"], [1, -2])],
)
def test_invalid_input_raises(symbols, frequencies):
    with pytest.raises(ValueError):
        build_huffman_tree(symbols, frequencies)