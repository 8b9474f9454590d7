import pytest

from dsakit.hashing import HashTable, first_recurring


def _source_table():
    table = HashTable()
    table.insert(1, 1)
    table.insert(2, 2)
    table.insert(2, 3)
    table.insert(2, 8)
    table.insert(12, 21)
    return table


def test_later_insert_replaces_value():
    assert _source_table().get(2) == 8


def test_display_format():
    assert str(_source_table()) == "1----->1\n2----->8\n12----->21"


def test_items_in_slot_order():
    assert _source_table().items() == [(1, 1), (2, 8), (12, 21)]


def test_missing_key_raises():
    table = _source_table()
    with pytest.raises(KeyError):
        table.get(99)


def test_colliding_keys_both_retrievable():
    table = HashTable()
    table.insert(1, "a")
    table.insert(129, "b")
    assert table.get(1) == "a"
    assert table.get(129) == "b"


def test_remove_keeps_probe_chain_intact():
    table = HashTable()
    table.insert(1, "a")
    table.insert(129, "b")
    table.remove(1)
    assert table.get(129) == "b"
    with pytest.raises(KeyError):
        table.get(1)


def test_remove_missing_raises():
    table = HashTable()
    with pytest.raises(KeyError):
        table.remove(5)


def test_reinsert_after_remove():
    table = HashTable()
    table.insert(3, "x")
    table.remove(3)
    table.insert(3, "y")
    assert table.get(3) == "y"
    assert table.items() == [(3, "y")]


def test_full_table_raises_but_updates_work():
    table = HashTable(size=2)
    table.insert(0, "a")
    table.insert(1, "b")
    with pytest.raises(OverflowError):
        table.insert(2, "c")
    table.insert(1, "z")
    assert table.get(1) == "z"


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        HashTable(size=0)


def test_first_recurring_source_example():
    assert first_recurring([1, 2, 3, 4, 5, 6, 4, 5, 2, 3, 4]) == 4


def test_first_recurring_none_when_all_distinct():
    assert first_recurring([1, 2, 3]) is None
    assert first_recurring([]) is None


def test_first_recurring_strings():
    assert first_recurring("abcb") == "b"