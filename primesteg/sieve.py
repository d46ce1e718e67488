"""The sieve of Eratosthenes over a bitset."""

from __future__ import annotations

from math import isqrt

from .bitset import Bitset


def eratosthenes(bitset: Bitset) -> Bitset:
    """Leave set exactly the bits whose index is prime; return the same bitset."""
    size = len(bitset)
    bitset.fill(True)
    bitset[0] = False
    bitset[1] = False
    for i in range(2, isqrt(size) + 1):
        if bitset[i]:
            bitset.set_range(i * i, size, i, False)
    return bitset