import pytest

from algolib.hash_table import HashTable, hash_code


def _filled():
    table = HashTable(1000)
    table.put("foo", "bar")
    table.put("fiz", "buzz")
    table.put("bruce", "wayne")
    table.put("peter", "parker")
    table.put("clark", "kent")
    return table


def test_get():
    table = _filled()
    assert table.get("foo") == "bar"
    assert len(table) == 5


def test_put_overwrites():
    table = _filled()
    table.put("peter", "bob")
    assert table.get("peter") == "bob"
    assert len(table) == 5


def test_delete_and_iterate():
    table = _filled()
    table.delete("peter")
    with pytest.raises(KeyError):
        table.get("peter")
    assert len(table) == 4
    assert sorted(table) == [("bruce", "wayne"), ("clark", "kent"), ("fiz", "buzz"), ("foo", "bar")]


def test_delete_missing_is_ignored():
    table = _filled()
    table.delete("nobody")
    assert len(table) == 5


def test_collisions_in_tiny_table():
    table = HashTable(1)
    table.put("a", 1)
    table.put("b", 2)
    assert table.get("a") == 1
    assert table.get("b") == 2
    assert len(table) == 2


def test_hash_code():
    assert hash_code("Hello World!") == 969099747


def test_hash_code_empty():
    assert hash_code("") == 0


def test_bad_capacity():
    with pytest.raises(ValueError):
        HashTable(0)