"""Puzzles and drills: digit tricks, logic riddles, rotations and matrices."""

from __future__ import annotations

from itertools import product
from typing import Sequence

from practica.basics import gcd

ELEVEN_DISCOUNT = 0.7
TWELVE_DISCOUNT = 0.8
COUPON_VALUE = 50

_SUSPECTS = "abcd"


def parity_digits(n: int) -> int:
    """Replace each decimal digit by 1 if it is odd and 0 if it is even."""
    if n < 0:
        raise ValueError("parity_digits() needs a non-negative number")
    return int("".join(str(int(d) % 2) for d in str(n)))


def right_triangle(n: int) -> str:
    """A right-aligned triangle of stars with n rows."""
    return "".join("  " * (n - 1 - i) + "* " * (i + 1) + "\n" for i in range(n))


def sale_price(price: float, month: int, day: int, coupon: bool) -> float:
    """Price paid on the 11.11 or 12.12 sale; never below zero.

    On 11 November the price is cut to 70%, on 12 December to 80%; a coupon
    takes off another 50 on those days only.
    """
    if month == day == 11:
        price *= ELEVEN_DISCOUNT
        if coupon:
            price -= COUPON_VALUE
    elif month == day == 12:
        price *= TWELVE_DISCOUNT
        if coupon:
            price -= COUPON_VALUE
    return max(price, 0.0)


def diving_ranking() -> list[tuple[int, int, int, int, int]]:
    """Places (a, b, c, d, e) for which each divers' claim is half right.

    Candidates whose places multiply to 120 are kept, as the riddle's
    checks demand.
    """
    return [
        (a, b, c, d, e)
        for a, b, c, d, e in product(range(1, 6), repeat=5)
        if (b == 2) + (a == 3) == 1
        and (b == 2) + (e == 4) == 1
        and (c == 1) + (d == 2) == 1
        and (e == 4) + (a == 1) == 1
        and a * b * c * d * e == 120
    ]


def find_murderer() -> list[str]:
    """Suspects for whom exactly three of the four statements hold."""
    return [
        killer
        for killer in _SUSPECTS
        if (killer != "a") + (killer == "c") + (killer == "d") + (killer != "d")
        == 3
    ]


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for i in range(rows):
        if i == 0:
            triangle.append([1])
            continue
        previous = triangle[-1]
        middle = [x + y for x, y in zip(previous, previous[1:])]
        triangle.append([1, *middle, 1])
    return triangle


def format_pascal(rows: int) -> str:
    """Pascal's triangle as centred text, each number followed by a space."""
    return "".join(
        " " * (rows - 1 - i) + "".join(f"{x} " for x in row) + "\n"
        for i, row in enumerate(pascal_triangle(rows))
    )


def rotate_left(text: str, k: int) -> str:
    """Move the first k characters to the end; k wraps around the length."""
    if not text:
        return text
    k %= len(text)
    return text[k:] + text[:k]


def young_search(matrix: Sequence[Sequence[int]], k: int) -> tuple[int, int] | None:
    """Find k in a matrix ascending along rows and columns, from the top right.

    Returns (row, column) or None.
    """
    if not matrix:
        return None
    x, y = 0, len(matrix[0]) - 1
    while x < len(matrix) and y >= 0:
        value = matrix[x][y]
        if k > value:
            x += 1
        elif k < value:
            y -= 1
        else:
            return x, y
    return None


def is_rotation(s1: str, s2: str) -> bool:
    """Whether s2 is s1 rotated by some number of characters."""
    return len(s1) == len(s2) and s2 in s1 + s1


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Rows and columns swapped."""
    return [list(column) for column in zip(*matrix)]


def is_upper_triangular(matrix: Sequence[Sequence[int]]) -> bool:
    """Whether every element below the main diagonal is zero."""
    return all(
        value == 0 for i, row in enumerate(matrix) for value in row[:i]
    )


def is_monotonic(values: Sequence[int]) -> bool:
    """Whether values never decrease or never increase."""
    pairs = list(zip(values, values[1:]))
    return all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)


def gcd_lcm_sum(n: int, m: int) -> int:
    """Greatest common divisor plus least common multiple of two positives."""
    if n <= 0 or m <= 0:
        raise ValueError("gcd_lcm_sum() needs positive numbers")
    divisor = gcd(n, m)
    return n * m // divisor + divisor


def hollow_square(n: int) -> str:
    """The outline of an n by n square, each star followed by a space."""
    edge = "* " * n + "\n"
    middle = "* " + "  " * (n - 2) + "* " + "\n"
    return edge + middle * max(n - 2, 0) + edge