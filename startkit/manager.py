"""A fixed-size, open-addressed store for named resources."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any

from .errors import ErrorCode, StartError

TABLE_SIZE = 256
_CONSTANT = Fraction("0.6180339887")
_MASK = (1 << 64) - 1


def _key_bytes(key: str):
    """Yield the key's bytes as signed characters, as a byte string would read."""
    for byte in key.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def pjw_hash(key: str) -> int:
    """Weinberger hash of ``key`` on 64-bit words."""
    hash_coding = 0
    for char in _key_bytes(key):
        hash_coding = ((hash_coding << 4) + char) & _MASK
        top = hash_coding & 0xF0000000
        if top:
            hash_coding ^= top >> 24
            hash_coding ^= top
    return hash_coding


def multiplicative_hash(key: str) -> int:
    """Multiplicative hash of ``key`` in the range ``[1, TABLE_SIZE - 1]``."""
    accumulator = 0
    for char in _key_bytes(key):
        accumulator = (accumulator * 31 + char) & _MASK
    product = float(accumulator * _CONSTANT)
    hash_coding = math.floor(TABLE_SIZE * math.fmod(product, 1.0))
    return hash_coding or 1


def _probe(key: str):
    """Yield the slots visited when probing for ``key``."""
    first = pjw_hash(key)
    step = multiplicative_hash(key)
    for i in range(TABLE_SIZE):
        yield (first + i * step) % TABLE_SIZE


class ResourceManager:
    """Stores resources under string keys using double hashing."""

    def __init__(self) -> None:
        self._slots: list[tuple[str, Any] | None] = [None] * TABLE_SIZE
        self._size = 0

    def insert(self, key: str, data: Any) -> bool:
        """Store ``data`` under ``key``.

        Returns True if inserted, False if ``key`` is already present.
        """
        if data is None:
            raise StartError(ErrorCode.NULL_POINTER, "cannot store None")
        if self._size == TABLE_SIZE:
            raise StartError(ErrorCode.INVALID_RANGE, "resource table is full")
        if self.lookup(key) is not None:
            return False
        for position in _probe(key):
            if self._slots[position] is None:
                self._slots[position] = (key, data)
                self._size += 1
                return True
        raise StartError(ErrorCode.INVALID_RANGE, f"no free slot for {key!r}")

    def lookup(self, key: str) -> Any:
        """Return the data stored under ``key``, or None."""
        for position in _probe(key):
            slot = self._slots[position]
            if slot is None:
                return None
            if slot[0] == key:
                return slot[1]
        return None

    def remove(self, key: str) -> Any:
        """Remove ``key`` and return its data, or None if it was not found."""
        for position in _probe(key):
            slot = self._slots[position]
            if slot is None:
                return None
            if slot[0] == key:
                self._slots[position] = None
                self._size -= 1
                return slot[1]
        return None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None


default_manager = ResourceManager()