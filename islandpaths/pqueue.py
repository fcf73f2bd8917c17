"""An ordered queue of islands keyed by their best known distance."""

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Iterator, List, Optional


@dataclass
class QueueEntry:
    """An island in the queue with its distance and the routes found to it."""

    label: str
    price: int
    routes: List[List[int]] = field(default_factory=list)


class PriorityQueue:
    """Entries kept in ascending price order, starting from a root at price 0.

    A new entry is placed after the last entry whose price is strictly
    lower, so it comes before entries of equal price.
    """

    def __init__(self, root):
        self._entries: List[QueueEntry] = [QueueEntry(root, 0)]

    def __iter__(self) -> Iterator[QueueEntry]:
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def insert(self, label, estimate, price):
        """Offer the island at distance estimate + price.

        An island already queued keeps the lower of its old and new price
        and is moved to its new place when the price drops.
        """
        new_price = estimate + price
        for pos, entry in enumerate(self._entries):
            if entry.label != label:
                continue
            if entry.price <= new_price:
                return
            entry.price = new_price
            if pos == 0:
                return
            del self._entries[pos]
            self._place(entry)
            return
        self._place(QueueEntry(label, new_price))

    def _place(self, entry):
        for pos, (before, after) in enumerate(pairwise(self._entries), 1):
            if before.price < entry.price <= after.price:
                self._entries.insert(pos, entry)
                return
        self._entries.append(entry)

    def find(self, label) -> Optional[QueueEntry]:
        """Return the entry for the island, or None."""
        return next((e for e in self._entries if e.label == label), None)

    def first_unvisited(self, visited) -> Optional[QueueEntry]:
        """Return the first entry whose label is not in visited, or None."""
        return next((e for e in self._entries if e.label not in visited), None)