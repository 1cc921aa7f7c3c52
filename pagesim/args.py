"""Command-line arguments and memory-reference input shared by the simulators."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

EXPECTED_ARGUMENTS = 3

_C_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Arguments:
    """Settings for one simulation run."""

    n_physical: int
    page_size: int
    file_name: str


class ArgumentCountError(ValueError):
    """Raised when the number of command-line arguments is wrong."""

    def __init__(self, got: int, expected: int = EXPECTED_ARGUMENTS) -> None:
        super().__init__(f"Wrong argument count expected {expected}, but got {got}.")
        self.expected = expected
        self.got = got


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does; 0 if there is none."""
    match = _LEADING_INT.match(text.lstrip(_C_WHITESPACE))
    return int(match.group()) if match else 0


def parse_arguments(argv: Sequence[str]) -> Arguments:
    """Build Arguments from ``[physical_pages, page_size, file_name]``."""
    if len(argv) != EXPECTED_ARGUMENTS:
        raise ArgumentCountError(len(argv))
    physical, page_size, file_name = argv
    return Arguments(atoi(physical), atoi(page_size), file_name)


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def read_pages(path: str | os.PathLike[str], page_size: int) -> list[int]:
    """Read one address per line and return the page number of each."""
    if page_size == 0:
        raise ValueError("page size must not be zero")
    with open(path, "rb") as stream:
        return [
            _truncating_div(atoi(line.decode("latin-1")), page_size)
            for line in stream
        ]