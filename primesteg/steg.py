"""Recover a message hidden in the low bits of a PPM image at prime offsets."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .bitset import Bitset
from .errors import FatalError, report_fatal
from .ppm import read_ppm
from .sieve import eratosthenes

START_PRIME = 101


def decode_message(data: bytes, start: int = START_PRIME) -> bytes:
    """Collect the lowest bit of each byte at a prime index from ``start`` on.

    Bits fill each character least significant first; decoding stops at the
    first NUL character, which is not part of the result.
    """
    primes = eratosthenes(Bitset(len(data)))
    message = bytearray()
    char = 0
    bit = 0
    for index in primes.indices(start):
        char |= (data[index] & 1) << bit
        bit += 1
        if bit == 8:
            if char == 0:
                break
            message.append(char)
            char = 0
            bit = 0
    return bytes(message)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return report_fatal("Invalid number of arguments")
    try:
        image = read_ppm(args[0])
        message = decode_message(image.data)
    except (FatalError, ValueError, IndexError) as exc:
        return report_fatal(exc)
    print(f"The message is: {message.decode('utf-8', errors='replace')}")
    return 0