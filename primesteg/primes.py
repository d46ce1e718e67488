"""Print the largest primes below a limit and the time the sieve took."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from .bitset import Bitset
from .errors import FatalError, report_fatal, warning
from .sieve import eratosthenes

PRINT_LIMIT = 10
BITSET_SIZE = 333_000_000


def last_primes(bitset: Bitset, count: int) -> list[int]:
    """Return, in ascending order, the ``count`` largest set indices above 0."""
    found: list[int] = []
    index = len(bitset) - 1
    while index > 0 and len(found) < count:
        if bitset[index]:
            found.append(index)
        index -= 1
    found.reverse()
    return found


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="primes", description="Print the last primes below a limit."
    )
    parser.add_argument(
        "limit", nargs="?", type=int, default=BITSET_SIZE,
        help=f"size of the sieve (default {BITSET_SIZE})",
    )
    args = parser.parse_args(argv)

    start = time.process_time()
    try:
        bitset = eratosthenes(Bitset(args.limit))
    except (FatalError, ValueError, IndexError) as exc:
        return report_fatal(exc)
    for prime in last_primes(bitset, PRINT_LIMIT):
        print(prime)
    warning(f"Time={time.process_time() - start:.3g}")
    return 0