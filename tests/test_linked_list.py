import pytest

from algokit.linked_list import EmptyListError, LinkedList


def test_empty_format():
    assert LinkedList().format() == "START --> NULL"


def test_format_lists_values_in_order():
    assert LinkedList([4, 5]).format() == "START --> 4 --> 5 --> NULL"


def test_insert_begin_and_end():
    ll = LinkedList()
    ll.insert_end(2)
    ll.insert_begin(1)
    ll.insert_end(3)
    assert list(ll) == [1, 2, 3]
    assert len(ll) == 3


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_places_value_at_position(position):
    ll = LinkedList([10, 20, 30])
    ll.insert_at(position, 99)
    values = list(ll)
    assert values[position - 1] == 99
    assert [v for v in values if v != 99] == [10, 20, 30]
    assert len(ll) == 4


@pytest.mark.parametrize("position", [0, 5, -1])
def test_insert_at_out_of_range(position):
    ll = LinkedList([10, 20, 30])
    with pytest.raises(IndexError):
        ll.insert_at(position, 99)
    assert list(ll) == [10, 20, 30]


def test_delete_begin_and_end():
    ll = LinkedList([1, 2, 3])
    assert ll.delete_begin() == 1
    assert ll.delete_end() == 3
    assert list(ll) == [2]


@pytest.mark.parametrize("position", [1, 2, 3])
def test_delete_at(position):
    original = [10, 20, 30]
    ll = LinkedList(original)
    assert ll.delete_at(position) == original[position - 1]
    assert list(ll) == original[: position - 1] + original[position:]


def test_delete_at_out_of_range():
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.delete_at(3)
    assert len(ll) == 2


@pytest.mark.parametrize("method", ["delete_begin", "delete_end"])
def test_delete_from_empty(method):
    with pytest.raises(EmptyListError):
        getattr(LinkedList(), method)()


def test_delete_at_from_empty():
    with pytest.raises(EmptyListError):
        LinkedList().delete_at(1)


def test_round_trip_drain():
    values = [5, 6, 7, 8]
    ll = LinkedList(values)
    drained = [ll.delete_begin() for _ in range(len(values))]
    assert drained == values
    assert len(ll) == 0