import pytest

from rpnkit.linkedlist import LinkedList


def test_insert_puts_values_at_front():
    ll = LinkedList()
    ll.insert("A")
    ll.insert("B")
    assert list(ll) == ["B", "A"]


def test_insert_and_erase_sequence():
    ll = LinkedList()
    ll.insert(1)
    ll.insert(2)
    ll.insert(3)
    assert ll.first().data == 3

    ll.insert_after(ll.first(), 4)
    assert ll.first().next.data == 4

    ll.erase_first()
    assert ll.first().data == 4
    assert list(ll) == [4, 2, 1]
    assert len(ll) == 3


def test_copy_matches_and_is_independent():
    ll = LinkedList()
    for value in (1, 2, 3):
        ll.insert(value)
    copy = ll.copy()
    assert list(copy) == [3, 2, 1]
    copy.erase_first()
    assert list(ll) == [3, 2, 1]
    assert list(copy) == [2, 1]


def test_constructor_keeps_order():
    ll = LinkedList([1, 2, 3])
    assert list(ll) == [1, 2, 3]
    assert len(ll) == 3


def test_empty_list_has_no_first():
    ll = LinkedList()
    assert ll.first() is None
    assert len(ll) == 0


def test_erase_first_returns_new_first():
    ll = LinkedList(["x", "y"])
    following = ll.erase_first()
    assert following.data == "y"
    assert ll.erase_first() is None
    assert len(ll) == 0


def test_erase_first_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().erase_first()


def test_erase_next_returns_item_after_removed():
    ll = LinkedList([1, 2, 3, 4])
    head = ll.first()
    following = ll.erase_next(head)
    assert following.data == 3
    assert list(ll) == [1, 3, 4]


def test_erase_next_at_end_raises():
    ll = LinkedList([1])
    with pytest.raises(IndexError):
        ll.erase_next(ll.first())


def test_prev_links():
    ll = LinkedList([1, 2, 3])
    third = ll.first().next.next
    assert third.prev.data == 2
    assert ll.first().prev is None


def test_foreign_item_rejected():
    one = LinkedList([1])
    other = LinkedList([2])
    with pytest.raises(ValueError):
        other.insert_after(one.first(), 5)


def test_removed_item_cannot_be_used():
    ll = LinkedList([1, 2])
    removed = ll.first()
    ll.erase_first()
    with pytest.raises(ValueError):
        ll.insert_after(removed, 9)