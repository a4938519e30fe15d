"""
hash_table.py — Hash Table Engine (separate chaining)
======================================================
Fixed number of buckets, each a Python list of HashEntry objects.

Design decisions:
  - The hash is the sum of the key's UTF-16 code units modulo
    `bucket_count`, so a character outside the BMP counts as its two
    surrogate halves.  It is deliberately weak so collisions show up with
    ordinary words; the chains are the thing being taught.
  - No resizing and no load-factor policy.  A chain can grow without
    bound; lookups in it degrade to O(k).
  - `insert` on an existing key overwrites the value in place, so a key
    lives in at most one bucket, at most once.
  - Values are generic (`V`); the visualizer stores strings.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, Tuple, TypeVar

from structures.results import OpResult, Reason

V = TypeVar("V")

DEFAULT_BUCKET_COUNT = 10


def char_code_total(key: str) -> int:
    """Sum of the UTF-16 code units of `key`."""
    data = key.encode("utf-16-le", "surrogatepass")
    return sum(int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2))


@dataclass
class HashEntry(Generic[V]):
    key:   str
    value: V

    def to_dict(self) -> dict:
        return {"key": self.key, "value": self.value}


class HashTable(Generic[V]):
    """
    Attributes:
        bucket_count : Number of buckets, fixed at construction.
        buckets      : bucket_count chains of HashEntry.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
        self.bucket_count: int                        = bucket_count
        self.buckets:      List[List[HashEntry[V]]]   = [[] for _ in range(bucket_count)]

    # ==================================================================
    # HASHING
    # ==================================================================
    def hash(self, key: str) -> int:
        return char_code_total(key) % self.bucket_count

    def _find(self, key: str) -> Tuple[int, int]:
        """(bucket index, position inside the chain or -1)."""
        index = self.hash(key)
        for pos, entry in enumerate(self.buckets[index]):
            if entry.key == key:
                return index, pos
        return index, -1

    # ==================================================================
    # CRUD
    # ==================================================================
    def insert(self, key: str, value: V) -> int:
        """Insert or update.  Returns the bucket index used."""
        index, pos = self._find(key)
        if pos >= 0:
            self.buckets[index][pos].value = value
        else:
            self.buckets[index].append(HashEntry(key, value))
        return index

    def get(self, key: str) -> Optional[V]:
        index, pos = self._find(key)
        if pos < 0:
            return None
        return self.buckets[index][pos].value

    def delete(self, key: str) -> OpResult:
        index, pos = self._find(key)
        if pos < 0:
            return OpResult.fail(Reason.NOT_FOUND, index=index)
        removed = self.buckets[index].pop(pos)
        return OpResult.ok(index=index, value=removed.value)

    def has(self, key: str) -> bool:
        return self._find(key)[1] >= 0

    def clear(self) -> None:
        for chain in self.buckets:
            chain.clear()

    # ==================================================================
    # SNAPSHOT
    # ==================================================================
    def bucket(self, index: int) -> List[HashEntry[V]]:
        """Copy of one chain, in insertion order."""
        return list(self.buckets[index])

    def entries(self) -> List[Tuple[int, List[HashEntry[V]]]]:
        """Every bucket, empty ones included, in index order."""
        return [(i, list(chain)) for i, chain in enumerate(self.buckets)]

    def load_factor(self) -> float:
        return len(self) / self.bucket_count

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return sum(len(chain) for chain in self.buckets)

    def __repr__(self) -> str:
        return f"HashTable(buckets={self.bucket_count}, entries={len(self)})"
