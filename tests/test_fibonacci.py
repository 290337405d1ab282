import pytest

from algolib.fibonacci import fib_iter, fib_matrix, fib_recursive

FIRST = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


@pytest.mark.parametrize("fib", [fib_iter, fib_recursive, fib_matrix])
def test_twenty_fifth(fib):
    assert fib(25) == 75025


@pytest.mark.parametrize("fib", [fib_iter, fib_recursive, fib_matrix])
def test_first_values(fib):
    assert [fib(n) for n in range(len(FIRST))] == FIRST


@pytest.mark.parametrize("fib", [fib_iter, fib_matrix])
def test_hundredth(fib):
    assert fib(100) == 354224848179261915075


def test_iter_and_matrix_agree():
    assert [fib_iter(n) for n in range(200)] == [fib_matrix(n) for n in range(200)]


@pytest.mark.parametrize("fib", [fib_iter, fib_recursive, fib_matrix])
def test_negative_rejected(fib):
    with pytest.raises(ValueError):
        fib(-1)