import pytest

from algolib.stack import Stack


def test_stack_scenario():
    s = Stack()
    assert s.is_empty()
    assert len(s) == 0

    s.push(1)
    s.push(2)
    s.push(3)
    assert list(s) == [3, 2, 1]
    assert len(s) == 3

    assert s.pop() == 3
    assert len(s) == 2
    assert s.peek() == 2
    assert len(s) == 2


def test_empty_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()