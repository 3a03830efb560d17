"""Huffman coding built on a binary min-heap."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no symbol."""

    symbol: str | None
    frequency: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return self.left is None and self.right is None


class _MinHeap:
    """A binary min-heap of nodes ordered by frequency."""

    def __init__(self, nodes: list[HuffmanNode]) -> None:
        self._items = nodes
        for index in range(len(nodes) // 2 - 1, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self, index: int) -> None:
        items = self._items
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < len(items) and items[child].frequency < items[smallest].frequency:
                    smallest = child
            if smallest == index:
                return
            items[smallest], items[index] = items[index], items[smallest]
            index = smallest

    def pop(self) -> HuffmanNode:
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        items = self._items
        items.append(node)
        index = len(items) - 1
        while index and node.frequency < items[(index - 1) // 2].frequency:
            items[index] = items[(index - 1) // 2]
            index = (index - 1) // 2
        items[index] = node


def build_huffman_tree(symbols: Sequence[str], frequencies: Sequence[int]) -> HuffmanNode:
    """Build the Huffman tree by repeatedly joining the two rarest nodes.

    The first node taken from the heap becomes the left child.
    """
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    if any(f < 0 for f in frequencies):
        raise ValueError("frequencies must not be negative")
    heap = _MinHeap([HuffmanNode(s, f) for s, f in zip(symbols, frequencies)])
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(None, left.frequency + right.frequency, left, right))
    return heap.pop()


def _codes(node: HuffmanNode, prefix: str) -> Iterator[tuple[str, str]]:
    if node.left is not None:
        yield from _codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _codes(node.right, prefix + "1")
    if node.is_leaf():
        yield node.symbol, prefix


def huffman_codes(symbols: Sequence[str], frequencies: Sequence[int]) -> dict[str, str]:
    """Return each symbol's code, in left-to-right order of the tree's leaves.

    Going left appends "0" and going right "1"; a lone symbol gets "".
    """
    return dict(_codes(build_huffman_tree(symbols, frequencies), ""))