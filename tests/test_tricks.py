import random

import pytest

from practica.tricks import (
    ParseResult,
    arrow,
    fibonacci_distance,
    find_single_pair,
    naive_atoi,
    parse_int,
    replace_spaces,
    single_numbers,
    swap_odd_even_bits,
    trimmed_average,
)

SAMPLE = [1, 2, 3, 4, 5, 6, 1, 2, 3, 4]


def test_arrow_three():
    expected = [
        "      *",
        "    **",
        "  ***",
        "****",
        "  ***",
        "    **",
        "      *",
    ]
    assert arrow(3) == "\n".join(expected) + "\n"


@pytest.mark.parametrize("n", [2, 5, 20])
def test_arrow_shape(n):
    lines = arrow(n).splitlines()
    assert len(lines) == 2 * n + 1
    assert max(line.count("*") for line in lines) == n + 1


def test_trimmed_average_constant():
    assert trimmed_average([70] * 7) == 70


def test_trimmed_average_ignores_extremes():
    base = [60, 61, 62, 63, 64, 65, 66]
    assert trimmed_average(base) == trimmed_average([0, 61, 62, 63, 64, 65, 100])


def test_trimmed_average_too_short():
    with pytest.raises(ValueError):
        trimmed_average([1, 2])


def test_single_numbers():
    assert single_numbers(SAMPLE) == [5, 6]


def test_find_single_pair_sample():
    assert find_single_pair(SAMPLE) == (5, 6)


def test_find_single_pair_shuffled():
    rng = random.Random(7)
    for _ in range(20):
        pair = rng.sample(range(-50, 50), 2)
        paired = rng.sample(range(100, 200), 5)
        values = paired * 2 + pair
        rng.shuffle(values)
        assert set(find_single_pair(values)) == set(pair)


def test_find_single_pair_none():
    with pytest.raises(ValueError):
        find_single_pair([3, 3])


def test_naive_atoi():
    assert naive_atoi("123456") == 123456
    for n in (0, 7, 42, 1000, 987654):
        assert naive_atoi(str(n)) == n


def test_parse_int_stops_at_letters():
    assert parse_int("-123abc456") == ParseResult(-123, False)


def test_parse_int_valid():
    assert parse_int("  +42") == ParseResult(42, True)
    assert parse_int("2147483647") == ParseResult(2147483647, True)
    assert parse_int("-2147483648") == ParseResult(-2147483648, True)


def test_parse_int_invalid():
    assert parse_int("") == ParseResult(0, False)
    assert parse_int("2147483648") == ParseResult(0, False)
    assert parse_int("-99999999999") == ParseResult(0, False)


def test_swap_bits_value():
    assert swap_odd_even_bits(10) == 5
    assert swap_odd_even_bits(0x55555555) & 0xFFFFFFFF == 0xAAAAAAAA


@pytest.mark.parametrize("n", [0, 1, 10, 12345, -1, -77, 2**31 - 1, -(2**31)])
def test_swap_bits_involution(n):
    assert swap_odd_even_bits(swap_odd_even_bits(n)) == n


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 8, 13, 21, 144])
def test_fibonacci_distance_zero(n):
    assert fibonacci_distance(n) == 0


def test_fibonacci_distance_values():
    assert fibonacci_distance(4) == 1
    for n in range(200):
        assert fibonacci_distance(n) <= n


def test_fibonacci_distance_negative():
    with pytest.raises(ValueError):
        fibonacci_distance(-1)


def test_replace_spaces():
    assert replace_spaces("We Are Happy.") == "We%20Are%20Happy."
    assert replace_spaces("nospace") == "nospace"


def test_replace_spaces_invariant():
    text = " a  b c "
    result = replace_spaces(text)
    assert " " not in result
    assert result.count("%20") == text.count(" ")