"""Second set of exercises: recursion, bit counting, patterns and strings."""

from __future__ import annotations

from practica.basics import gcd, is_leap_year

EQUILATERAL = "等边三角形"
ISOSCELES = "等腰三角形"
SCALENE = "普通三角形"
NOT_A_TRIANGLE = "不是三角形"

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def reverse_string(text: str) -> str:
    """The characters of text in reverse order."""
    return text[::-1]


def digit_sum(x: int) -> int:
    """Sum of the decimal digits of x; numbers up to 9 are returned as they are."""
    if x > 9:
        return digit_sum(x // 10) + x % 10
    return x


def power(n: int, k: int) -> float:
    """n raised to the integer power k, which may be negative."""
    return float(n) ** k


def count_ones(n: int) -> int:
    """Number of 1 bits in the 32-bit two's complement form of n."""
    return bin(n & _WORD_MASK).count("1")


def count_diff_bits(m: int, n: int) -> int:
    """Number of bit positions in which two 32-bit integers differ."""
    return count_ones(m ^ n)


def odd_even_bits(num: int) -> tuple[list[int], list[int]]:
    """Split a 32-bit integer into two bit sequences, most significant first.

    The first list holds bits 30, 28, ..., 0 and the second bits 31, 29, ..., 1.
    """
    first = [(num >> i) & 1 for i in range(30, -1, -2)]
    second = [(num >> i) & 1 for i in range(31, -1, -2)]
    return first, second


def x_pattern(n: int) -> str:
    """An n by n cross drawn with stars on both diagonals."""
    return "".join(
        "".join("*" if i == j or i + j == n - 1 else " " for j in range(n)) + "\n"
        for i in range(n)
    )


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of the Gregorian calendar."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be from 1 to 12, got {month}")
    days = _DAYS[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


def classify_triangle(a: int, b: int, c: int) -> str:
    """Name the kind of triangle the three sides make."""
    if not (a + b > c and c > a - b):
        return NOT_A_TRIANGLE
    if a == b == c:
        return EQUILATERAL
    if a == b or a == c or b == c:
        return ISOSCELES
    return SCALENE


def repunit_sum(a: int, n: int) -> int:
    """Sum a + aa + aaa + ... of the first n terms."""
    total = 0
    term = 0
    for _ in range(n):
        term = term * 10 + a
        total += term
    return total


def _is_narcissistic(i: int) -> bool:
    text = str(i)
    return sum(int(d) ** len(text) for d in text) == i


def narcissistic_numbers(limit: int) -> list[int]:
    """Numbers from 0 to limit equal to the sum of their digits each raised
    to the number of digits."""
    return [i for i in range(0, limit + 1) if _is_narcissistic(i)]


def diamond(lines: int) -> str:
    """A diamond of stars whose upper half has the given number of rows."""
    upper = [" " * (lines - 1 - i) + "*" * (2 * i + 1) for i in range(lines)]
    lower = [
        " " * (i + 1) + "*" * (2 * (lines - 1 - i) - 1) for i in range(lines - 1)
    ]
    return "".join(line + "\n" for line in upper + lower)


def soda_bottles(money: int) -> int:
    """Sodas one can drink at one per unit, trading two empties for a new one."""
    if money < 0:
        raise ValueError("money must not be negative")
    count = money
    bottles = money
    while bottles >= 2:
        bottles -= 1
        count += 1
    return count


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("lcm() needs positive numbers")
    return a // gcd(a, b) * b


def reverse_words(sentence: str) -> str:
    """Reverse the order of space-separated words, keeping each word intact."""
    return " ".join(reversed(sentence.split(" ")))