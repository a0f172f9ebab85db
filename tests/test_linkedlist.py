import pytest

from cubed.linkedlist import LinkedList, Node


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert ll.last() is None
    assert list(ll) == []


def test_push_back_keeps_order():
    ll = LinkedList()
    for item in ["a", "b", "c"]:
        ll.push_back(item)
    assert list(ll) == ["a", "b", "c"]
    assert len(ll) == 3


def test_push_front_reverses_order():
    ll = LinkedList()
    for item in [1, 2, 3]:
        ll.push_front(item)
    assert list(ll) == [3, 2, 1]


def test_nodes_are_linked():
    ll = LinkedList([1, 2])
    assert isinstance(ll.head, Node)
    assert ll.head.content == 1
    assert ll.head.next.content == 2
    assert ll.head.next.next is None


def test_last_returns_final_node():
    ll = LinkedList(["x", "y", "z"])
    assert ll.last().content == "z"
    ll.push_back("w")
    assert ll.last().content == "w"


def test_push_back_returns_new_node():
    ll = LinkedList()
    node = ll.push_back(5)
    assert ll.last() is node
    assert ll.head is node


def test_for_each_visits_in_order():
    ll = LinkedList([4, 5, 6])
    seen = []
    ll.for_each(seen.append)
    assert seen == [4, 5, 6]


def test_map_builds_new_list_and_leaves_original():
    ll = LinkedList([1, 2, 3])
    mapped = ll.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(ll) == [1, 2, 3]
    assert mapped is not ll


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(v):
        if v == 3:
            raise RuntimeError("boom")
        return v * 2

    ll = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        ll.map(f, deleted.append)
    assert deleted == [2, 4]
    assert list(ll) == [1, 2, 3, 4]


def test_clear_calls_delete_on_each_content():
    deleted = []
    ll = LinkedList(["p", "q"])
    ll.clear(deleted.append)
    assert deleted == ["p", "q"]
    assert len(ll) == 0
    assert ll.head is None


def test_clear_without_delete_empties():
    ll = LinkedList([1, 2, 3])
    ll.clear()
    assert list(ll) == []