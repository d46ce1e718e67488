import pytest

from primesteg.bitset import Bitset
from primesteg.primes import PRINT_LIMIT, last_primes, main
from primesteg.sieve import eratosthenes


def test_last_three_primes_below_thirty():
    assert last_primes(eratosthenes(Bitset(30)), 3) == [19, 23, 29]


@pytest.mark.parametrize("count", [1, 5, 10, 40])
def test_last_primes_is_tail_of_all_primes(count):
    bits = eratosthenes(Bitset(500))
    everything = list(bits.indices())
    assert last_primes(bits, count) == everything[-count:]


def test_fewer_primes_than_requested():
    bits = eratosthenes(Bitset(12))
    assert last_primes(bits, 50) == list(bits.indices())


def test_zero_count_gives_empty_list():
    assert last_primes(eratosthenes(Bitset(100)), 0) == []


def test_main_prints_primes_and_time(capsys):
    assert main(["1000"]) == 0
    captured = capsys.readouterr()
    expected = last_primes(eratosthenes(Bitset(1000)), PRINT_LIMIT)
    assert captured.out.split() == [str(p) for p in expected]
    assert captured.err.startswith("Warning: Time=")


def test_main_reports_unusable_limit(capsys):
    assert main(["1"]) == 1
    assert capsys.readouterr().err.startswith("Error: ")