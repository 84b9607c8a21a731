"""Textbook exercises: arrays, formulas, matrices and string copying."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from cmath import sqrt as complex_sqrt
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, Sequence

PI = 3.14
TOLERANCE = 1e-5
TOWER_HEIGHT = 10
VOWELS = frozenset("aeiou")

_TOWER_CENTRES = ((2, 2), (-2, 2), (2, -2), (-2, -2))


@dataclass(frozen=True)
class CircleMetrics:
    """Measures of a circle, a sphere and a cylinder sharing one radius."""

    circumference: float
    area: float
    sphere_surface: float
    sphere_volume: float
    cylinder_volume: float


@dataclass(frozen=True)
class QuadraticRoots:
    """Roots of a*x**2 + b*x + c = 0 with the discriminant that decides them."""

    discriminant: int
    x1: complex | float
    x2: complex | float

    @property
    def real(self) -> bool:
        """Whether both roots are real."""
        return self.discriminant >= 0


def _is_odd(value: int) -> bool:
    return value % 2 == 1


def partition_odd_even(values: Iterable[int]) -> list[int]:
    """Move odd numbers before even ones by swapping from both ends."""
    result = list(values)
    left, right = 0, len(result) - 1
    while left < right:
        while left < right and _is_odd(result[left]):
            left += 1
        while left < right and not _is_odd(result[right]):
            right -= 1
        if left < right:
            result[left], result[right] = result[right], result[left]
            left += 1
            right -= 1
    return result


def stable_odd_even(values: Iterable[int]) -> list[int]:
    """Odd numbers then even numbers, each group keeping its order."""
    values = list(values)
    return [v for v in values if _is_odd(v)] + [v for v in values if not _is_odd(v)]


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences; on ties the second one goes first."""
    return list(heapq.merge(second, first))


def shift_letters(text: str, shift: int) -> str:
    """Move every character the given number of code points along."""
    return "".join(chr(ord(ch) + shift) for ch in text)


def circle_metrics(r: float, h: float) -> CircleMetrics:
    """Circumference, areas and volumes for radius r and cylinder height h."""
    area = PI * r * r
    return CircleMetrics(
        circumference=2 * PI * r,
        area=area,
        sphere_surface=4 * PI * r * r,
        sphere_volume=4 / 3 * PI * r * r * r,
        cylinder_volume=area * h,
    )


def max3(a: int, b: int, c: int) -> int:
    """The largest of three numbers."""
    if a >= b and a >= c:
        return a
    if b >= a and b >= c:
        return b
    return c


def grade(score: int) -> str:
    """Letter grade A to E for a score out of 100."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "E"


def describe_number(text: str) -> tuple[int, list[str], list[str]]:
    """Number of digits, the digits in order and the digits reversed."""
    return len(text), list(text), list(reversed(text))


def building_height(x: float, y: float) -> int:
    """Height at a point: the towers of radius 1 around (±2, ±2) are 10 high."""
    inside = any((x - cx) ** 2 + (y - cy) ** 2 <= 1 for cx, cy in _TOWER_CENTRES)
    return TOWER_HEIGHT if inside else 0


def sqrt_newton(a: float) -> float:
    """Square root by Newton's iteration, stopping when steps fall below 1e-5."""
    if a <= 0:
        raise ValueError("sqrt_newton() needs a positive number")
    current = float(a)
    while True:
        following = 0.5 * (current + a / current)
        if abs(current - following) <= TOLERANCE:
            return following
        current = following


def insert_sorted(values: Sequence[int], a: int) -> list[int]:
    """A copy of ascending values with a inserted after any equal elements."""
    result = list(values)
    result.insert(bisect_right(result, a), a)
    return result


def saddle_points(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Elements that are the largest in their row and the smallest in their column.

    Each point is given as (row, column, value).
    """
    points = []
    for i, row in enumerate(matrix):
        row_max = max(row)
        for j, value in enumerate(row):
            if value == row_max and all(other[j] >= row_max for other in matrix):
                points.append((i, j, value))
    return points


def parallelogram(rows: int, cols: int) -> str:
    """A slanted block of stars, each row shifted one step further right."""
    return "".join("   " * i + "*  " * cols + "\n" for i in range(rows))


def quadratic_roots(a: int, b: int, c: int) -> QuadraticRoots:
    """Solve a*x**2 + b*x + c = 0; complex roots when the discriminant is negative."""
    if a == 0:
        raise ValueError("the quadratic coefficient must not be zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = sqrt(discriminant)
        return QuadraticRoots(
            discriminant, (-b + root) / (2 * a), (-b - root) / (2 * a)
        )
    if discriminant == 0:
        x = -b / (2 * a)
        return QuadraticRoots(discriminant, x, x)
    real = -b / (2 * a)
    imaginary = complex_sqrt(discriminant) / (2 * a)
    return QuadraticRoots(discriminant, real + imaginary, real - imaginary)


def vowels(text: str) -> str:
    """The lower-case vowels of text, in order."""
    return "".join(ch for ch in text if ch in VOWELS)


def bubble_sort(values: Iterable[int]) -> list[int]:
    """A sorted copy, by bubble sort that stops once a pass makes no swap."""
    result = list(values)
    for done in range(len(result) - 1):
        swapped = False
        for j in range(len(result) - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def int_to_string(n: int) -> str:
    """Decimal digits of a non-negative integer, built recursively."""
    if n < 0:
        raise ValueError("int_to_string() needs a non-negative number")
    head = int_to_string(n // 10) if n > 9 else ""
    return head + chr(ord("0") + n % 10)