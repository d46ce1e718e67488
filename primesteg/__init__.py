"""Prime sieve on a bitset and a decoder for messages hidden in PPM images."""

__version__ = "0.1.0"