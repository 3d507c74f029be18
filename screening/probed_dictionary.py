from typing import Iterable

import numpy as np

from screening.errors import TableSaturatedError
from screening.hashing import hash_new, table_index

DEFAULT_PROBING_SIZE = 20000


class ProbedDictionary():
    """
    Fixed size hash table using open addressing with linear probing
    Nothing is ever deleted, so there are no tombstones and a lookup stops at
    the first empty slot. The table always keeps one slot free, which is what
    guarantees that stop.
    Args:
        capacity: number of slots, must stay larger than the wordlist
    """

    def __init__(self, capacity: int = DEFAULT_PROBING_SIZE):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self.capacity = capacity
        self.items_added = 0
        self.longest_probe = 0
        self.slots = np.empty(capacity, dtype=object)

    def _home_index(self, word: str) -> int:
        return table_index(hash_new(word), self.capacity)

    def insert(self, word: str):
        """Places the word in the first free slot at or after its home slot"""
        if self.items_added + 1 >= self.capacity:
            raise TableSaturatedError(
                f"Probing table with {self.capacity} slots can't hold more than "
                f"{self.capacity - 1} words, increase its size"
            )
        index = self._home_index(word)
        probes = 0
        while self.slots[index] is not None:
            index = (index + 1) % self.capacity
            probes += 1
        self.slots[index] = word
        self.items_added += 1
        self.longest_probe = max(self.longest_probe, probes)

    def insert_all(self, words: Iterable[str]):
        for word in words:
            self.insert(word)

    def contains(self, word: str) -> bool:
        index = self._home_index(word)
        while self.slots[index] is not None:
            if self.slots[index] == word:
                return True
            index = (index + 1) % self.capacity
        return False

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self.items_added

    def get_info(self) -> dict:
        return {
            'capacity': self.capacity,
            'items_added': self.items_added,
            'load_factor': self.items_added / self.capacity,
            'longest_probe': self.longest_probe,
        }
