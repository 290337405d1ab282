import math

import pytest

from algolib.gcd import (
    bezout_coefficients,
    binary_gcd_iterative,
    binary_gcd_recursive,
    divide,
)


@pytest.mark.parametrize("gcd", [binary_gcd_recursive, binary_gcd_iterative])
@pytest.mark.parametrize("a, b, expected", [(14, 7, 7), (4, 2, 2), (31, 2, 1), (33, 11, 11)])
def test_known_gcds(gcd, a, b, expected):
    assert gcd(a, b) == expected


@pytest.mark.parametrize("gcd", [binary_gcd_recursive, binary_gcd_iterative])
def test_zero_operand(gcd):
    assert gcd(0, 5) == 5
    assert gcd(12, 0) == 12


@pytest.mark.parametrize("gcd", [binary_gcd_recursive, binary_gcd_iterative])
def test_agrees_with_math_gcd(gcd):
    for a in range(0, 60):
        for b in range(0, 60):
            assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("gcd", [binary_gcd_recursive, binary_gcd_iterative])
def test_large_values(gcd):
    assert gcd(131313131, 12343545) == math.gcd(131313131, 12343545)


@pytest.mark.parametrize("gcd", [binary_gcd_recursive, binary_gcd_iterative])
def test_negative_rejected(gcd):
    with pytest.raises(ValueError):
        gcd(-4, 2)


def test_divide():
    assert divide(10, 2) == 0
    assert divide(10, 3) == 1
    assert divide(2, 10) == 2


def test_divide_by_non_positive_rejected():
    with pytest.raises(ValueError):
        divide(10, 0)


def test_bezout_coprime():
    x, y = bezout_coefficients(11, 6)
    assert x * 11 + y * 6 == 1


def test_bezout_with_common_factor():
    x, y = bezout_coefficients(12, 6)
    assert x * 12 + y * 6 == 6


@pytest.mark.parametrize("a, b", [(-11, 6), (11, -6), (-12, -18), (131313131, 121212121), (7, 0)])
def test_bezout_identity(a, b):
    x, y = bezout_coefficients(a, b)
    assert x * a + y * b == math.gcd(a, b)