import pytest

from dsakit.linked_list import LinkedList


def make(*items):
    ll = LinkedList()
    for item in items:
        ll.append(item)
    return ll


def test_append_keeps_order():
    ll = make(2, 4, 6, 8, 10)
    assert list(ll) == [2, 4, 6, 8, 10]
    assert len(ll) == 5


def test_prepend_puts_items_in_front():
    ll = LinkedList()
    ll.prepend(1)
    ll.prepend(2)
    ll.prepend(3)
    assert list(ll) == [3, 2, 1]


def test_constructor_from_iterable():
    assert list(LinkedList([7, 8, 9])) == [7, 8, 9]


def test_insert_at_zero_prepends():
    ll = make(1, 2)
    ll.insert(0, 0)
    assert list(ll) == [0, 1, 2]


def test_insert_in_middle_lands_at_position():
    ll = make(2, 4, 6, 8, 10)
    ll.insert(3, 4)
    assert list(ll) == [2, 4, 6, 8, 3, 10]
    assert len(ll) == 6


def test_insert_past_end_appends():
    ll = make(1, 2)
    ll.insert(99, 50)
    assert list(ll)[-1] == 99
    ll.append(100)
    assert list(ll)[-2:] == [99, 100]


def test_insert_negative_raises():
    ll = make(1)
    with pytest.raises(IndexError):
        ll.insert(5, -1)
    assert list(ll) == [1]


def test_remove_is_one_based_and_returns_value():
    ll = make(2, 4, 6, 8, 3, 10)
    assert ll.remove(4) == 8
    assert ll.remove(1) == 2
    assert list(ll) == [4, 6, 3, 10]


def test_remove_out_of_range_raises():
    ll = make(4, 6, 3, 10)
    with pytest.raises(IndexError):
        ll.remove(5)
    with pytest.raises(IndexError):
        ll.remove(0)
    assert len(ll) == 4


def test_remove_last_then_append_updates_tail():
    ll = make(1, 2, 3)
    assert ll.remove(3) == 3
    ll.append(4)
    assert list(ll) == [1, 2, 4]


def test_remove_all_empties_list():
    ll = make(1, 2)
    ll.remove(1)
    ll.remove(1)
    assert len(ll) == 0
    assert list(ll) == []
    ll.append(5)
    assert list(ll) == [5]


def test_str_format():
    assert str(make(1, 2)) == "1-->2-->"
    assert str(LinkedList()) == ""