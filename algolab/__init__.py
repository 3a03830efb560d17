"""Classic algorithms: backtracking, brute-force search, divide and conquer, dynamic programming and greedy methods."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "chain",
    "coins",
    "fibonacci",
    "geometry",
    "graphs",
    "huffman",
    "knapsack",
    "merging",
    "sequences",
    "sorting",
    "strings",
    "subset_sum",
]