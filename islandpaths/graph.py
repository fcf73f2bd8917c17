"""Islands and the bridges between them, kept as an adjacency matrix."""

from typing import Iterator, List, Optional, Tuple

from .errors import IslandCountError


def is_valid_label(label):
    """Return True when the label is non-empty and made of ASCII letters only."""
    return bool(label) and all(
        "a" <= ch <= "z" or "A" <= ch <= "Z" for ch in label
    )


class Graph:
    """A fixed-capacity set of islands with symmetric bridge prices.

    Islands are numbered in the order they were added. A price of zero
    means there is no bridge.
    """

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._labels: List[str] = []
        self._matrix: List[List[int]] = [[0] * capacity for _ in range(capacity)]

    def __len__(self):
        return len(self._labels)

    def __contains__(self, label):
        return label in self._labels

    @property
    def labels(self):
        """The island labels in index order."""
        return tuple(self._labels)

    def add_island(self, label):
        """Add an island and return its index."""
        if label in self._labels:
            raise ValueError(f"island {label!r} already present")
        if len(self._labels) >= self.capacity:
            raise IslandCountError()
        self._labels.append(label)
        return len(self._labels) - 1

    def index_of(self, label) -> Optional[int]:
        """Return the index of the island, or None if it is unknown."""
        try:
            return self._labels.index(label)
        except ValueError:
            return None

    def label_at(self, index):
        """Return the label of the island at the given index."""
        return self._labels[index]

    def _require(self, label):
        index = self.index_of(label)
        if index is None:
            raise KeyError(label)
        return index

    def connect(self, first, second, price):
        """Join two islands, given by label, with a bridge of the given price."""
        a = self._require(first)
        b = self._require(second)
        self._matrix[a][b] = price
        self._matrix[b][a] = price

    def price(self, first, second):
        """Return the bridge price between two island indices (0 if none)."""
        return self._matrix[first][second]

    def has_bridge(self, first, second):
        """Return True when the islands, given by label, are joined."""
        a = self.index_of(first)
        b = self.index_of(second)
        if a is None or b is None:
            return False
        return self._matrix[a][b] != 0

    def neighbours(self, index) -> Iterator[Tuple[int, int]]:
        """Yield (index, price) for every bridge from the island, by index."""
        for other, cost in enumerate(self._matrix[index]):
            if cost != 0:
                yield other, cost