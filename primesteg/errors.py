"""Diagnostics shared by the command-line tools."""

from __future__ import annotations

import sys


class FatalError(Exception):
    """A condition after which a tool cannot continue."""


def warning(message: str) -> None:
    """Print a warning line to standard error."""
    print(f"Warning: {message}", file=sys.stderr)


def report_fatal(error: object) -> int:
    """Print an error line to standard error and return the exit status to use."""
    print(f"Error: {error}", file=sys.stderr)
    return 1