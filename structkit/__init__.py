"""Classic data structures: fixed-capacity and typed arrays, a linked deque, an adjacency-matrix graph, a binary search tree, times of day and keyed collections."""

__version__ = "0.1.0"