import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoshelf.numbers import ascii_value, fibonacci, hcf, power


def test_fibonacci_ninth():
    assert fibonacci(9) == 34


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_fibonacci_small_values_returned(n):
    assert fibonacci(n) == n


@given(st.integers(2, 300))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@given(st.integers(1, 10_000), st.integers(1, 10_000))
def test_hcf_matches_gcd(a, b):
    assert hcf(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(0, 7), (7, 0), (0, 0)])
def test_hcf_zero_gives_zero(a, b):
    assert hcf(a, b) == 0


def test_hcf_equal_values():
    assert hcf(13, 13) == 13


def test_hcf_rejects_negative():
    with pytest.raises(ValueError):
        hcf(-4, 6)


@given(st.integers(-50, 50), st.integers(0, 40))
def test_power_matches_builtin(x, y):
    assert power(x, y) == x**y


def test_power_zero_exponent():
    assert power(0, 0) == 1


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@given(st.characters(max_codepoint=127))
def test_ascii_value_round_trip(char):
    assert chr(ascii_value(char)) == char


@pytest.mark.parametrize("text", ["", "ab", "é"])
def test_ascii_value_rejects(text):
    with pytest.raises(ValueError):
        ascii_value(text)