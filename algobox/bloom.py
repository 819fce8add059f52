"""A small Bloom filter built on four additive character hashes."""

from __future__ import annotations

from collections.abc import Iterable

_MULTIPLIERS = (1, 3, 5, 7)


def _codes(item: str | bytes) -> Iterable[int]:
    if isinstance(item, (bytes, bytearray)):
        return item
    if isinstance(item, str):
        return map(ord, item)
    raise TypeError(f"cannot hash an item of type {type(item).__name__}")


class BloomFilter:
    """A Bloom filter of *size* bits.

    Item *k* of :meth:`hashes` is the sum of the item's character codes,
    each multiplied by 1, 3, 5 or 7, taken modulo the size.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._bits = [False] * size

    def __repr__(self) -> str:
        return f"BloomFilter(size={self.size})"

    def hashes(self, item: str | bytes) -> tuple[int, ...]:
        """Return the four bit positions that *item* maps to."""
        total = sum(_codes(item))
        return tuple(total * factor % self.size for factor in _MULTIPLIERS)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (str, bytes, bytearray)):
            return False
        return all(self._bits[position] for position in self.hashes(item))

    def add(self, item: str | bytes) -> None:
        """Set the bits of *item*."""
        for position in self.hashes(item):
            self._bits[position] = True

    def check_and_add(self, item: str | bytes) -> bool:
        """Tell whether *item* may already be present; if it surely is not, add it."""
        if item in self:
            return True
        self.add(item)
        return False

    def bits(self) -> tuple[bool, ...]:
        """Return the filter's bits, position 0 first."""
        return tuple(self._bits)