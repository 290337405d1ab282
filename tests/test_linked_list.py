import pytest

from algolib.linked_list import LinkedList


def _filled(values, *, front=False):
    lst = LinkedList()
    for value in values:
        if front:
            lst.prepend(value)
        else:
            lst.append(value)
    return lst


def test_prepend_and_get():
    lst = _filled([1, 2, 3], front=True)
    assert [lst.get(i).value for i in range(3)] == [3, 2, 1]


def test_append_and_get():
    lst = _filled([1, 2, 3])
    assert [lst.get(i).value for i in range(3)] == [1, 2, 3]


def test_add_inserts_at_index():
    lst = _filled([1, 2, 3])
    lst.add(8, 1)
    assert list(lst) == [1, 8, 2, 3]
    assert len(lst) == 4


def test_add_at_ends():
    lst = _filled([1, 2])
    lst.add(0, 0)
    lst.add(9, 3)
    assert list(lst) == [0, 1, 2, 9]
    assert lst.tail.value == 9


def test_add_out_of_range():
    with pytest.raises(IndexError):
        _filled([1]).add(5, 3)


def test_full_scenario():
    first = _filled([1, 2, 3], front=True)
    second = _filled([1, 2, 3])
    second.add(8, 1)

    first.concat(second)
    assert len(first) == 7
    assert sum(first) == 20

    assert first.find(1) == 3

    first.remove(8)
    assert sum(first) == 12
    assert list(first) == [3, 2, 1, 1, 2, 3]

    first.clear()
    assert len(first) == 0
    assert first.is_empty()


def test_remove_head_and_tail():
    lst = _filled([1, 2, 3])
    lst.remove(1)
    lst.remove(3)
    assert list(lst) == [2]
    assert lst.head is lst.tail


def test_remove_errors():
    with pytest.raises(ValueError):
        LinkedList().remove(1)
    with pytest.raises(ValueError):
        _filled([1, 2]).remove(7)


def test_find_errors():
    with pytest.raises(ValueError):
        LinkedList().find(1)
    with pytest.raises(ValueError):
        _filled([1]).find(2)


def test_get_out_of_range():
    with pytest.raises(IndexError):
        _filled([1, 2]).get(2)


def test_concat_into_empty():
    lst = LinkedList()
    lst.concat(_filled([4, 5]))
    assert list(lst) == [4, 5]
    assert len(lst) == 2