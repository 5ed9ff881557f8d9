from collections import deque

import pytest

from handcontainers.linked_list import LinkedList


def test_push_back_keeps_order():
    lst = LinkedList()
    for value in ["a", "b", "c"]:
        lst.push_back(value)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for value in [1, 2, 3]:
        lst.push_front(value)
    assert list(lst) == [3, 2, 1]


def test_init_from_iterable_and_reversed():
    lst = LinkedList(range(5))
    assert list(lst) == list(range(5))
    assert list(reversed(lst)) == list(reversed(range(5)))


def test_front_and_back():
    lst = LinkedList([10, 20, 30])
    assert lst.front() == 10
    assert lst.back() == 30


def test_pop_both_ends():
    lst = LinkedList([1, 2, 3, 4])
    assert lst.pop_front() == 1
    assert lst.pop_back() == 4
    assert list(lst) == [2, 3]
    assert len(lst) == 2


def test_pop_until_empty():
    lst = LinkedList([1, 2])
    lst.pop_back()
    lst.pop_back()
    assert lst.is_empty()
    assert list(lst) == []
    assert list(reversed(lst)) == []


@pytest.mark.parametrize("method", ["pop_back", "pop_front", "front", "back"])
def test_empty_access_raises(method):
    lst = LinkedList()
    with pytest.raises(IndexError):
        getattr(lst, method)()
    assert len(lst) == 0
    assert list(lst) == []


def test_clear():
    lst = LinkedList("xyz")
    lst.clear()
    assert len(lst) == 0
    assert lst.is_empty()
    lst.push_back("q")
    assert list(lst) == ["q"]


def test_extend_appends():
    lst = LinkedList([1, 2])
    lst.extend([3, 4])
    assert list(lst) == [1, 2, 3, 4]


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = original.copy()
    duplicate.push_back(4)
    original.pop_front()
    assert list(duplicate) == [1, 2, 3, 4]
    assert list(original) == [2, 3]


def test_mixed_operations_match_model():
    lst = LinkedList()
    model = deque()
    for i in range(50):
        if i % 3 == 0:
            lst.push_front(i)
            model.appendleft(i)
        else:
            lst.push_back(i)
            model.append(i)
        if i % 7 == 6:
            assert lst.pop_front() == model.popleft()
        if i % 11 == 10:
            assert lst.pop_back() == model.pop()
    assert list(lst) == list(model)
    assert len(lst) == len(model)