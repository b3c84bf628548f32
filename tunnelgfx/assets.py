"""Textures, images and a keyed registry for loaded assets."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from tunnelgfx.util import DEFAULT_TABLE_SIZE, HashTable, remove_item_fast

T = TypeVar("T")

_TGA_HEADER_SIZE = 18


@dataclass(frozen=True)
class Rect:
    """A region of a texture in normalised coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0


@dataclass(frozen=True)
class Texture:
    """A texture's source file and pixel size."""

    path: str
    width: int
    height: int

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "Texture":
        """Read the size of a TGA file from its header."""
        with open(path, "rb") as handle:
            header = handle.read(_TGA_HEADER_SIZE)
        if len(header) < _TGA_HEADER_SIZE:
            raise ValueError(f"{os.fspath(path)!r} is too short to be a TGA file")
        width = int.from_bytes(header[12:14], "little")
        height = int.from_bytes(header[14:16], "little")
        return cls(os.fspath(path), width, height)


@dataclass(frozen=True)
class Image:
    """A rectangle of a texture."""

    texture: Texture
    rect: Rect = field(default_factory=Rect)


class AssetRegistry(Generic[T]):
    """Assets stored under string keys, remembering the registered keys."""

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        self._table: HashTable[T] = HashTable(size)
        self._keys: list[str] = []

    def register(self, key: str, value: T) -> None:
        self._table.add(key, value)
        self._keys.append(key)

    def get(self, key: str) -> T:
        return self._table.get(key)

    def deregister(self, key: str) -> None:
        self._table.remove(key)
        remove_item_fast(self._keys, key)

    def keys(self) -> list[str]:
        return list(self._keys)

    def clear(self) -> None:
        """Deregister every asset."""
        while self._keys:
            self.deregister(self._keys[-1])

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)