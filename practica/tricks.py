"""Assorted exercises: patterns, bit tricks and string conversion."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import reduce
from operator import xor
from typing import Iterable, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parse_int: the value and whether the whole text was a number."""

    value: int
    valid: bool


def arrow(n: int) -> str:
    """Draw an arrow pointing left whose widest row has n + 1 stars."""
    upper = ["  " * (n - i) + "*" * (i + 1) for i in range(n + 1)]
    lower = ["  " * (i + 1) + "*" * (n - i) for i in range(n)]
    return "".join(line + "\n" for line in upper + lower)


def trimmed_average(scores: Sequence[int]) -> float:
    """Average of the scores after dropping one highest and one lowest."""
    if len(scores) < 3:
        raise ValueError("need at least three scores")
    return (sum(scores) - max(scores) - min(scores)) / (len(scores) - 2)


def single_numbers(values: Iterable[int]) -> list[int]:
    """Values that occur exactly once, in their original order."""
    values = list(values)
    counts = Counter(values)
    return [v for v in values if counts[v] == 1]


def find_single_pair(values: Sequence[int]) -> tuple[int, int]:
    """Find the two values that occur once when all others occur twice.

    The first value returned is the one with the lowest differing bit set.
    """
    combined = reduce(xor, values, 0)
    if combined == 0:
        raise ValueError("no two distinct unpaired values")
    pos = (combined & -combined).bit_length() - 1
    first = reduce(xor, (v for v in values if (v >> pos) & 1), 0)
    second = reduce(xor, (v for v in values if not (v >> pos) & 1), 0)
    return first, second


def naive_atoi(text: str) -> int:
    """Convert a string of decimal digits by place value, without checks."""
    return reduce(lambda acc, ch: acc * 10 + (ord(ch) - ord("0")), text, 0)


def parse_int(text: str) -> ParseResult:
    """Parse a leading signed decimal integer the careful way.

    Leading whitespace and one sign are accepted. Digits stop at the first
    other character, which makes the result invalid; an empty string or a
    value outside the 32-bit range gives an invalid zero.
    """
    if not text:
        return ParseResult(0, False)
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            return ParseResult(value, False)
        value = value * 10 + sign * (ord(ch) - ord("0"))
        if not _INT_MIN <= value <= _INT_MAX:
            return ParseResult(0, False)
    return ParseResult(value, True)


def swap_odd_even_bits(n: int) -> int:
    """Swap each pair of adjacent bits of a 32-bit integer."""
    bits = n & 0xFFFFFFFF
    swapped = (((bits & 0x55555555) << 1) + ((bits & 0xAAAAAAAA) >> 1)) & 0xFFFFFFFF
    return swapped - (1 << 32) if swapped & 0x80000000 else swapped


def fibonacci_distance(n: int) -> int:
    """Fewest +1/-1 steps that turn n into a Fibonacci number."""
    if n < 0:
        raise ValueError("n must not be negative")
    low, high = 0, 1
    while not low <= n <= high:
        low, high = high, low + high
    return min(n - low, high - n)


def replace_spaces(text: str) -> str:
    """Replace every space with %20."""
    return text.replace(" ", "%20")