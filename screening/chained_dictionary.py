from typing import Iterable

import numpy as np

from screening.hashing import hash_old, table_index

DEFAULT_CHAINING_SIZE = 1000


class ChainedDictionary():
    """
    Fixed size hash table that resolves collisions with separate chaining
    Args:
        capacity: number of buckets, kept small relative to the wordlist so
            buckets grow long and collisions are actually exercised
    """

    def __init__(self, capacity: int = DEFAULT_CHAINING_SIZE):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self.capacity = capacity
        self.items_added = 0
        self.buckets = np.empty(capacity, dtype=object)

    def _index(self, word: str) -> int:
        return table_index(hash_old(word), self.capacity)

    def insert(self, word: str):
        """Appends the word to its bucket, duplicates included"""
        index = self._index(word)
        if self.buckets[index] is None:
            self.buckets[index] = []
        self.buckets[index].append(word)
        self.items_added += 1

    def insert_all(self, words: Iterable[str]):
        for word in words:
            self.insert(word)

    def contains(self, word: str) -> bool:
        bucket = self.buckets[self._index(word)]
        if bucket is None:
            return False
        return word in bucket

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self.items_added

    def get_info(self) -> dict:
        bucket_sizes = np.fromiter(
            (len(bucket) for bucket in self.buckets if bucket is not None),
            dtype=np.int64
        )
        return {
            'capacity': self.capacity,
            'items_added': self.items_added,
            'load_factor': self.items_added / self.capacity,
            'occupied_buckets': int(bucket_sizes.size),
            'longest_bucket': int(bucket_sizes.max()) if bucket_sizes.size else 0,
        }
