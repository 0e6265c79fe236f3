"""FizzBuzz sequence printer."""

import sys
from collections.abc import Iterator
from typing import TextIO

DEFAULT_LIMIT = 100


def fizzbuzz(n: int) -> str:
    """
    Word for a single number of the sequence.

    Multiples of 15 give "FizzBuzz", other multiples of 3 give "Fizz",
    other multiples of 5 give "Buzz", and every other number is itself.
    """
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def iter_fizzbuzz(limit: int = DEFAULT_LIMIT) -> Iterator[str]:
    """Yield the sequence for 1 through limit inclusive."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    for i in range(1, limit + 1):
        yield fizzbuzz(i)


def print_fizzbuzz(limit: int = DEFAULT_LIMIT, file: TextIO | None = None) -> None:
    out = file if file is not None else sys.stdout
    for word in iter_fizzbuzz(limit):
        print(word, file=out)
    print("FizzBuzz completed!", file=out)
