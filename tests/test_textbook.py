import math

import pytest

from practica.textbook import (
    TOWER_HEIGHT,
    bubble_sort,
    building_height,
    circle_metrics,
    describe_number,
    grade,
    insert_sorted,
    int_to_string,
    max3,
    merge_sorted,
    parallelogram,
    partition_odd_even,
    quadratic_roots,
    saddle_points,
    shift_letters,
    sqrt_newton,
    stable_odd_even,
    vowels,
)


def _odds_before_evens(values):
    parities = [v % 2 for v in values]
    return parities == sorted(parities, reverse=True)


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [2, 4, 6, 1], [1, 3, 5], [2, 4], [], [7]],
)
def test_partition_odd_even_is_permutation_with_odds_first(values):
    result = partition_odd_even(values)
    assert sorted(result) == sorted(values)
    assert _odds_before_evens(result)


def test_partition_does_not_mutate_input():
    values = [2, 1, 4, 3]
    partition_odd_even(values)
    assert values == [2, 1, 4, 3]


def test_stable_odd_even_keeps_relative_order():
    values = [8, 3, 6, 1, 4, 9, 2]
    result = stable_odd_even(values)
    assert _odds_before_evens(result)
    assert [v for v in result if v % 2] == [3, 1, 9]
    assert [v for v in result if not v % 2] == [8, 6, 4, 2]


def test_merge_sorted_source_example():
    first = [1, 3, 7, 9, 22]
    second = [2, 8, 10, 17, 33, 44]
    result = merge_sorted(first, second)
    assert result == sorted(first + second)
    assert len(result) == len(first) + len(second)


def test_merge_sorted_with_empty_side():
    assert merge_sorted([], [1, 2]) == [1, 2]
    assert merge_sorted([1, 2], []) == [1, 2]


def test_shift_letters_source_example():
    assert shift_letters("China", 4) == "Glmre"


def test_shift_letters_round_trip():
    text = "hello world"
    assert shift_letters(shift_letters(text, 4), -4) == text


def test_circle_metrics_relations():
    m = circle_metrics(2.0, 5.0)
    assert m.sphere_surface == pytest.approx(4 * m.area)
    assert m.cylinder_volume == pytest.approx(m.area * 5.0)
    assert m.circumference * 2.0 == pytest.approx(2 * m.area)
    assert m.sphere_volume == pytest.approx(m.sphere_surface * 2.0 / 3)


@pytest.mark.parametrize("a,b,c", [(1, 2, 3), (3, 2, 1), (2, 3, 1), (5, 5, 1), (4, 4, 4)])
def test_max3(a, b, c):
    assert max3(a, b, c) == max(a, b, c)


@pytest.mark.parametrize(
    "score,letter",
    [(100, "A"), (90, "A"), (89, "B"), (80, "B"), (70, "C"), (60, "D"), (59, "E"), (0, "E")],
)
def test_grade(score, letter):
    assert grade(score) == letter


def test_describe_number():
    count, forward, backward = describe_number("12345")
    assert count == len("12345")
    assert "".join(forward) == "12345"
    assert "".join(backward) == "12345"[::-1]


@pytest.mark.parametrize(
    "x,y,height",
    [(2, 2, TOWER_HEIGHT), (-2, 2, TOWER_HEIGHT), (3, 2, TOWER_HEIGHT),
     (-2, -2.5, TOWER_HEIGHT), (0, 0, 0), (4, 4, 0)],
)
def test_building_height(x, y, height):
    assert building_height(x, y) == height


@pytest.mark.parametrize("a", [1, 2, 9, 10, 12345])
def test_sqrt_newton_matches_math(a):
    assert abs(sqrt_newton(a) - math.sqrt(a)) < 1e-4


@pytest.mark.parametrize("a", [0, -4])
def test_sqrt_newton_rejects_non_positive(a):
    with pytest.raises(ValueError):
        sqrt_newton(a)


@pytest.mark.parametrize("a", [0, 3, 6, 1])
def test_insert_sorted(a):
    values = [1, 2, 3, 4, 5]
    result = insert_sorted(values, a)
    assert result == sorted(values + [a])
    assert values == [1, 2, 3, 4, 5]


def test_saddle_points_all_equal():
    matrix = [[1] * 4 for _ in range(3)]
    assert len(saddle_points(matrix)) == 3 * 4


def test_saddle_points_source_example():
    matrix = [[1, 2, 3, 4], [2, 3, 4, 5], [3, 4, 5, 6]]
    assert saddle_points(matrix) == [(0, 3, 4)]


def test_saddle_points_none():
    assert saddle_points([[1, 2], [2, 1]]) == []


def test_parallelogram_shape():
    lines = parallelogram(3, 4).splitlines()
    assert len(lines) == 3
    for i, line in enumerate(lines):
        assert line.count("*") == 4
        assert line.startswith("   " * i + "*")


def test_quadratic_complex_roots_satisfy_vieta():
    roots = quadratic_roots(1, 2, 5)
    assert not roots.real
    assert roots.x1 + roots.x2 == pytest.approx(-2)
    assert roots.x1 * roots.x2 == pytest.approx(5)
    assert roots.x1 == roots.x2.conjugate()


def test_quadratic_distinct_real_roots():
    roots = quadratic_roots(1, -5, 6)
    assert roots.real
    for x in (roots.x1, roots.x2):
        assert x * x - 5 * x + 6 == pytest.approx(0)
    assert roots.x1 != roots.x2


def test_quadratic_double_root():
    roots = quadratic_roots(1, 2, 1)
    assert roots.discriminant == 0
    assert roots.x1 == roots.x2 == pytest.approx(-1)


def test_quadratic_rejects_zero_leading_coefficient():
    with pytest.raises(ValueError):
        quadratic_roots(0, 2, 1)


def test_vowels():
    assert vowels("hello") == "eo"
    assert vowels("AEIOU") == ""


def test_bubble_sort_source_array():
    values = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    assert bubble_sort(values) == sorted(values)
    assert values[0] == 9


@pytest.mark.parametrize("values", [[], [1], [3, 1, 2, 1], [1, 2, 3]])
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("n", [0, 7, 10, 1234, 987654321])
def test_int_to_string(n):
    assert int_to_string(n) == str(n)


def test_int_to_string_rejects_negative():
    with pytest.raises(ValueError):
        int_to_string(-1)