"""First exercises: small arithmetic, searching, recursion and printing."""

from __future__ import annotations

import argparse
import random
from itertools import islice
from math import isqrt
from typing import Iterable, Iterator, Sequence

PI = 3.1415926
MAX_ATTEMPTS = 3
MESSAGE_CODES = (73, 32, 99, 97, 110, 32, 100, 111, 32, 105, 116, 33)

TOO_SMALL = "猜小了"
TOO_BIG = "猜大了"
CORRECT = "猜对了"

_PLANE = (
    "    **    \n"
    "    **    \n"
    "**********\n"
    "**********\n"
    "  *    *  \n"
    "  *    *  \n"
)

_STUDENTS = "Name\tAge\tGender\n----------------------\nJack\t18\tman\n"

_ASCII_DIGITS = "0123456789"


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder that goes with it."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def plane() -> str:
    """Return a small aeroplane drawn with stars."""
    return _PLANE


def student_table() -> str:
    """Return a tab-separated table with one student."""
    return _STUDENTS


def is_prime(x: int) -> bool:
    """Whether x is a prime, by trial division up to its square root."""
    if x < 2:
        return False
    return all(x % j for j in range(2, isqrt(x) + 1))


def primes_between(start: int, stop: int) -> list[int]:
    """Primes from start to stop, both included."""
    return [i for i in range(start, stop + 1) if is_prime(i)]


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def leap_years(start: int, stop: int) -> list[int]:
    """Leap years from start to stop, both included."""
    return [year for year in range(start, stop + 1) if is_leap_year(year)]


def larger(x: int, y: int) -> int:
    """The larger of two numbers."""
    return x if x > y else y


def sign_step(x: int) -> int:
    """1 for negative x, 0 for zero, -1 for positive x."""
    if x < 0:
        return 1
    if x == 0:
        return 0
    return -1


def divmod_trunc(a: int, b: int) -> tuple[int, int]:
    """Integer quotient truncated toward zero, and the remainder."""
    return _trunc_divmod(a, b)


def is_even(n: int) -> bool:
    """Whether n is even."""
    return n % 2 == 0


def odd_numbers(limit: int) -> list[int]:
    """Odd numbers from 1 to limit."""
    return [i for i in range(1, limit + 1) if i % 2 != 0]


def ascii_message(codes: Iterable[int]) -> str:
    """Turn character codes into text."""
    return "".join(map(chr, codes))


def _scan_int(text: str, pos: int, width: int) -> tuple[int, int]:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    limit = min(pos + width, len(text))
    end = pos
    if end < limit and text[end] in "+-":
        end += 1
    digits_start = end
    while end < limit and text[end] in _ASCII_DIGITS:
        end += 1
    if end == digits_start:
        raise ValueError(f"expected a number at position {pos} of {text!r}")
    return int(text[pos:end]), end


def parse_birthday(text: str) -> tuple[int, int, int]:
    """Split a date written as YYYYMMDD into year, month and day."""
    year, pos = _scan_int(text, 0, 4)
    month, pos = _scan_int(text, pos, 2)
    day, _ = _scan_int(text, pos, 2)
    return year, month, day


def format_scores(
    student_id: int, c_score: float, math_score: float, english_score: float
) -> str:
    """Describe a student's three scores with two decimals each."""
    return (
        f"The each subject score of No. {student_id} is "
        f"{c_score:.2f}, {math_score:.2f}, {english_score:.2f}.\n"
    )


def max_of(values: Iterable[int]) -> int:
    """The largest of the values."""
    values = list(values)
    if not values:
        raise ValueError("max_of() needs at least one value")
    return max(values)


def sphere_volume(r: float) -> float:
    """Volume of a sphere of radius r."""
    return 4 * PI * (r * r * r) / 3


def bmi(weight: float, height: float) -> float:
    """Body mass index from kilograms and centimetres."""
    metres = height / 100.0
    return weight / (metres * metres)


def factorial(n: int) -> int:
    """n!, with 1 for n below 1."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def factorial_sum(n: int) -> int:
    """1! + 2! + ... + n!."""
    total = 0
    term = 1
    for i in range(1, n + 1):
        term *= i
        total += term
    return total


def linear_search(values: Sequence[int], n: int) -> int | None:
    """Index of the first occurrence of n, or None."""
    return next((i for i, value in enumerate(values) if value == n), None)


def binary_search(values: Sequence[int], k: int) -> int | None:
    """Index of k in ascending values by bisection, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] < k:
            left = mid + 1
        elif values[mid] > k:
            right = mid - 1
        else:
            return mid
    return None


def converge_frames(text: str) -> Iterator[str]:
    """Reveal text from both ends toward the middle, one frame per step."""
    frame = ["#"] * len(text)
    for left in range((len(text) + 1) // 2):
        right = len(text) - 1 - left
        frame[left] = text[left]
        frame[right] = text[right]
        yield "".join(frame)


def check_password(attempts: Iterable[str], password: str) -> bool:
    """Whether one of the first three attempts matches the password."""
    return any(attempt == password for attempt in islice(attempts, MAX_ATTEMPTS))


class GuessingGame:
    """Guess a number from 1 to 100 with bigger/smaller hints."""

    def __init__(self, secret: int | None = None) -> None:
        self.secret = random.randint(1, 100) if secret is None else secret
        self.attempts = 0
        self.solved = False

    def guess(self, n: int) -> str:
        """Return the hint for a guess."""
        self.attempts += 1
        if n < self.secret:
            return TOO_SMALL
        if n > self.secret:
            return TOO_BIG
        self.solved = True
        return CORRECT


def digits(n: int) -> list[int]:
    """Decimal digits of a non-negative number, most significant first."""
    if n < 0:
        raise ValueError("digits() needs a non-negative number")
    if n > 9:
        return digits(n // 10) + [n % 10]
    return [n]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number of 1, 1, 2, 3, 5, ...; 1 for n up to 2."""
    a, b = 1, 1
    for _ in range(n - 2):
        a, b = b, a + b
    return b


def frog_jumps(n: int) -> int:
    """Ways to climb n steps taking one or two at a time."""
    if n < 0:
        raise ValueError("the number of steps must not be negative")
    a, b = 1, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def hanoi_moves(n: int) -> int:
    """Moves needed to shift a Hanoi tower of n discs; 1 for n up to 1."""
    return 2 ** max(n, 1) - 1


def sort_descending3(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Three numbers from largest to smallest."""
    if a < b:
        a, b = b, a
    if a < c:
        a, c = c, a
    if b < c:
        b, c = c, b
    return a, b, c


def multiples_of_three(limit: int) -> list[int]:
    """Multiples of three from 1 to limit."""
    return [i for i in range(1, limit + 1) if i % 3 == 0]


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor by counting down from the smaller number."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd_brute() needs positive numbers")
    m = min(a, b)
    while a % m or b % m:
        m -= 1
    return m


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while (remainder := _trunc_divmod(a, b)[1]) != 0:
        a, b = b, remainder
    return b


def count_nines(limit: int) -> int:
    """How many digits 9 are written out in the numbers 1 to limit."""
    return sum(str(i).count("9") for i in range(1, limit + 1))


def alternating_harmonic(n: int) -> float:
    """1 - 1/2 + 1/3 - ... up to the n-th term."""
    total = 0.0
    sign = 1
    for i in range(1, n + 1):
        total += sign * (1.0 / i)
        sign = -sign
    return total


def multiplication_table(n: int) -> str:
    """Lower-triangular multiplication table up to n."""
    return "".join(
        "".join(f"{i} * {j} = {i * j}  " for j in range(1, i + 1)) + "\n"
        for i in range(1, n + 1)
    )


def main(argv: list[str] | None = None) -> int:
    """Print the primes in a range followed by their count."""
    parser = argparse.ArgumentParser(description="List primes in a range.")
    parser.add_argument("--start", type=int, default=100)
    parser.add_argument("--stop", type=int, default=200)
    args = parser.parse_args(argv)
    primes = primes_between(args.start, args.stop)
    print("".join(f"{p} " for p in primes))
    print(f"count = {len(primes)}")
    return 0