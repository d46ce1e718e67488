"""A fixed-size array of bits with bounds-checked access."""

from __future__ import annotations

from collections.abc import Iterator

from bitarray import bitarray


class Bitset:
    """A fixed number of bits, all cleared on creation."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("bitset size must be greater than 0")
        self._bits = bitarray(size)
        self._bits.setall(False)

    def __len__(self) -> int:
        return len(self._bits)

    def __repr__(self) -> str:
        return f"Bitset(size={len(self)})"

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._bits):
            raise IndexError(f"bitset index {index} out of range 0..{len(self._bits) - 1}")

    def fill(self, value: bool) -> None:
        """Set every bit to ``value``."""
        self._bits.setall(bool(value))

    def __getitem__(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits[index])

    def __setitem__(self, index: int, value: bool) -> None:
        self._check(index)
        self._bits[index] = bool(value)

    def set_range(self, start: int, stop: int, step: int, value: bool) -> None:
        """Set the bits at ``range(start, stop, step)`` to ``value``."""
        if step <= 0:
            raise ValueError("step must be positive")
        if start < 0 or stop > len(self._bits):
            raise IndexError("bitset range out of bounds")
        if start >= stop:
            return
        self._bits[start:stop:step] = bool(value)

    def indices(self, start: int = 0) -> Iterator[int]:
        """Yield, in increasing order, the indices of set bits from ``start`` on."""
        position = max(start, 0)
        size = len(self._bits)
        while position < size:
            found = self._bits.find(1, position)
            if found < 0:
                return
            yield found
            position = found + 1