"""String hashing, list removal helpers, a fixed-size hash table and file reading."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import Generic, Iterator, MutableSequence, TypeVar

T = TypeVar("T")

DEFAULT_TABLE_SIZE = 32

_HASH_A = 54059
_HASH_B = 76963
_HASH_C = 86969
_HASH_SEED = 37
_U64 = (1 << 64) - 1


def string_hash(text: str) -> int:
    """Small multiplicative string hash; the empty string hashes to 0.

    The text ends at the first NUL character, and bytes above 127 count as
    negative, as a signed character would.
    """
    text = text.split("\0", 1)[0]
    if not text:
        return 0
    result = _HASH_SEED
    for byte in text.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        result = ((result * _HASH_A) ^ ((char * _HASH_B) & _U64)) & _U64
    return result % _HASH_C


def remove_item_linear(items: MutableSequence[T], item: T) -> None:
    """Remove the first occurrence of ``item``, keeping the order of the rest."""
    index = _find(items, item)
    del items[index]


def remove_item_fast(items: MutableSequence[T], item: T) -> None:
    """Remove the first occurrence of ``item`` by moving the last element into its place."""
    index = _find(items, item)
    items[index] = items[-1]
    items.pop()


def remove_at_linear(items: MutableSequence[T], index: int) -> None:
    """Remove the element at ``index``, keeping the order of the rest."""
    _check_index(items, index)
    del items[index]


def remove_at_fast(items: MutableSequence[T], index: int) -> None:
    """Remove the element at ``index`` by moving the last element into its place."""
    _check_index(items, index)
    items[index] = items[-1]
    items.pop()


def _find(items: MutableSequence[T], item: T) -> int:
    for index, candidate in enumerate(items):
        if candidate == item:
            return index
    raise ValueError(f"{item!r} is not in the sequence")


def _check_index(items: MutableSequence[T], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for {len(items)} items")


def file_size(stream: io.IOBase) -> int:
    """Size of a seekable stream in bytes; its position is left unchanged."""
    position = stream.tell()
    try:
        stream.seek(0, os.SEEK_END)
        return stream.tell()
    finally:
        stream.seek(position, os.SEEK_SET)


def read_text_file(path: str | os.PathLike[str]) -> str:
    """Read a whole text file."""
    with open(path, "rt", encoding="utf-8") as handle:
        return handle.read()


@dataclass
class _Slot(Generic[T]):
    key: int | None = None
    value: T | None = None


class HashTable(Generic[T]):
    """Fixed-capacity open-addressing table keyed by the hash of a string.

    Only the hash of a key is stored, so two keys with the same hash clash.
    """

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[_Slot[T]] = [_Slot() for _ in range(size)]
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _probe(self, hashed: int) -> Iterator[_Slot[T]]:
        size = len(self._slots)
        for step in range(size):
            yield self._slots[(hashed + step) % size]

    @staticmethod
    def _hash_key(key: str) -> int:
        if not key or key[0] == "\0":
            raise ValueError("key must not be empty")
        return string_hash(key)

    def add(self, key: str, value: T) -> None:
        """Store ``value`` under ``key``; the key must be new and the table not full."""
        if self._count >= len(self._slots):
            raise OverflowError("hash table is full")
        hashed = self._hash_key(key)
        for slot in self._probe(hashed):
            if slot.key == hashed:
                raise KeyError(key)
            if slot.key is None:
                slot.key = hashed
                slot.value = value
                break
        self._count += 1

    def get(self, key: str) -> T:
        """Return the value stored under ``key``."""
        hashed = self._hash_key(key)
        for slot in self._probe(hashed):
            if slot.key == hashed:
                return slot.value  # type: ignore[return-value]
            if slot.key is None:
                break
        raise KeyError(key)

    def remove(self, key: str) -> None:
        """Forget ``key``."""
        hashed = self._hash_key(key)
        for slot in self._probe(hashed):
            if slot.key == hashed:
                slot.key = None
                slot.value = None
                self._count -= 1
                return
        raise KeyError(key)

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.get(key)
        except (KeyError, ValueError):
            return False
        return True

    def __len__(self) -> int:
        return self._count