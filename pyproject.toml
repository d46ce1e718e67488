[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primesteg"
version = "0.1.0"
description = "Sieve of Eratosthenes on a compact bitset, and a decoder for messages hidden at prime offsets of PPM images"
requires-python = ">=3.10"
keywords = ["primes", "eratosthenes", "bitset", "steganography", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "bitarray",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
primes = "primesteg.primes:main"
steg-decode = "primesteg.steg:main"

[tool.hatch.build.targets.wheel]
packages = ["primesteg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
