# primesteg

A small toolkit built around the sieve of Eratosthenes:

- `primesteg.bitset.Bitset`: a fixed-size, bounds-checked set of bits, all cleared on creation.
- `primesteg.sieve.eratosthenes`: leaves set exactly the bits whose index is prime.
- `primesteg.primes.last_primes`: the largest set indices of a bitset, in ascending order.
- `primesteg.ppm.read_ppm` and `primesteg.ppm.parse_ppm`: load binary PPM images into a `PpmImage` (`width`, `height`, `maxval`, `data`).
- `primesteg.steg.decode_message`: recovers a text hidden in the least significant bits of the image bytes found at prime offsets, starting from offset 101.

## Installation

```
pip install .
```

## Command line

Print the last ten primes below 333,000,000, one per line. The processor time the sieve took goes to standard error as a `Warning: Time=...` line.

```
primes
```

A different sieve size can be given as an argument:

```
primes 1000
```

Decode the message hidden in a PPM image:

```
steg-decode picture.ppm
```

This prints `The message is: ...`. Bits are taken from the bytes at prime offsets from 101 on, filling each character least significant bit first, and decoding stops at the first NUL character. If the number of arguments is wrong, or the image is missing or malformed, an `Error: ...` line goes to standard error and the exit status is 1.

## Library use

```python
from primesteg.bitset import Bitset
from primesteg.sieve import eratosthenes
from primesteg.primes import last_primes
from primesteg.ppm import read_ppm
from primesteg.steg import decode_message

bits = Bitset(100)
eratosthenes(bits)
print(last_primes(bits, 3))        # [83, 89, 97]
print(list(bits.indices(90)))      # [97]

image = read_ppm("picture.ppm")
print(decode_message(image.data, 101))
```

Creating a `Bitset` of size 0 or less raises `ValueError`; indexing it outside `0 <= index < len(bitset)` raises `IndexError`. A file that cannot be opened, a malformed header, or too little pixel data raises `PpmError`, a subclass of `primesteg.errors.FatalError`.

## What it does not do

- The header's two-character magic number is read but not checked, and `maxval` is recorded but not used: pixel data is taken as raw bytes, three per pixel.
- There is no way to write PPM images or to hide a message in one; only decoding is provided.

## Tests

```
pip install .[test]
pytest
```