import copy

import pytest

from handcontainers.vector import Vector


def test_empty_vector_has_no_capacity():
    v = Vector()
    assert len(v) == 0
    assert v.capacity == 0
    assert v.is_empty()


def test_push_back_grows_capacity_by_doubling():
    v = Vector()
    v.push_back(0)
    assert v.capacity == 1
    for i in range(1, 10):
        before = v.capacity
        full = len(v) == before
        v.push_back(i)
        if full:
            assert v.capacity == 2 * before
        else:
            assert v.capacity == before
        assert v.capacity >= len(v)
    assert list(v) == list(range(10))
    assert v.capacity == 16


def test_walkthrough_from_demo():
    v1 = Vector()
    for i in range(10):
        v1.push_back(i)
    v2 = v1.copy()
    assert list(v2) == list(range(10))
    v1.resize(5)
    assert list(v1) == [0, 1, 2, 3, 4]
    v1.reserve(20)
    assert v1.capacity == 20
    v1.push_back(100)
    v1.push_back(200)
    assert list(v1) == [0, 1, 2, 3, 4, 100, 200]
    assert v1.insert(2, 999) == 2
    assert list(v1) == [0, 1, 999, 2, 3, 4, 100, 200]
    v1.erase(3)
    assert list(v1) == [0, 1, 999, 3, 4, 100, 200]


def test_initializer_shrink_front_back():
    v4 = Vector([1, 2, 3, 4, 5])
    v4.shrink_to_fit()
    assert v4.capacity == len(v4) == 5
    assert v4.front() == 1
    assert v4.back() == 5


def test_strings():
    strings = Vector()
    for word in ("Hello", "World", "!"):
        strings.push_back(word)
    assert " ".join(strings) == "Hello World !"


def test_filled_sets_size_and_capacity():
    v = Vector.filled(3, "x")
    assert list(v) == ["x", "x", "x"]
    assert v.capacity == len(v)


def test_filled_rejects_negative_count():
    with pytest.raises(ValueError):
        Vector.filled(-1, 0)


def test_copy_is_independent_and_keeps_capacity():
    v = Vector([1, 2])
    v.reserve(10)
    c = v.copy()
    assert c.capacity == v.capacity
    c.push_back(3)
    assert list(v) == [1, 2]
    assert list(copy.copy(v)) == [1, 2]


def test_pop_back_returns_last_and_keeps_capacity():
    v = Vector([1, 2, 3])
    cap = v.capacity
    assert v.pop_back() == 3
    assert list(v) == [1, 2]
    assert v.capacity == cap


def test_pop_back_empty_raises():
    with pytest.raises(IndexError):
        Vector().pop_back()


def test_clear_keeps_capacity():
    v = Vector([1, 2, 3])
    cap = v.capacity
    v.clear()
    assert v.is_empty()
    assert v.capacity == cap


def test_resize_grow_pads_and_grows_capacity():
    v = Vector([1, 2])
    v.resize(3, 7)
    assert list(v) == [1, 2, 7]
    assert v.capacity == max(3, 2 * 2)
    v.resize(10)
    assert len(v) == 10
    assert v[9] is None
    assert v.capacity == 10


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        Vector([1]).resize(-1)


def test_reserve_never_shrinks():
    v = Vector([1, 2, 3])
    v.reserve(1)
    assert v.capacity == len(v)


def test_at_bounds():
    v = Vector(["a", "b"])
    assert v.at(1) == "b"
    with pytest.raises(IndexError):
        v.at(2)
    with pytest.raises(IndexError):
        v.at(-1)


def test_front_back_empty_raise():
    with pytest.raises(IndexError):
        Vector().front()
    with pytest.raises(IndexError):
        Vector().back()


def test_getitem_setitem_with_negative_index():
    v = Vector([1, 2, 3])
    v[-1] = 30
    v[0] = 10
    assert list(v) == [10, 2, 30]
    assert v[-2] == 2
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-4] = 0


def test_insert_at_end_and_out_of_range():
    v = Vector([1, 2])
    assert v.insert(len(v), 3) == 2
    assert list(v) == [1, 2, 3]
    with pytest.raises(IndexError):
        v.insert(5, 0)
    with pytest.raises(IndexError):
        v.insert(-1, 0)


def test_insert_into_empty_vector():
    v = Vector()
    v.insert(0, "only")
    assert list(v) == ["only"]
    assert v.capacity == 1


def test_erase_out_of_range():
    v = Vector([1])
    with pytest.raises(IndexError):
        v.erase(1)
    assert v.erase(0) == 0
    assert v.is_empty()


def test_swap_exchanges_items_and_capacity():
    a = Vector([1, 2, 3])
    b = Vector(["x"])
    b.reserve(8)
    a.swap(b)
    assert list(a) == ["x"]
    assert a.capacity == 8
    assert list(b) == [1, 2, 3]
    assert b.capacity == 3


def test_reversed_iteration():
    v = Vector([1, 2, 3])
    assert list(reversed(v)) == [3, 2, 1]


def test_equality_ignores_capacity():
    a = Vector([1, 2])
    b = Vector([1, 2])
    b.reserve(10)
    assert a == b
    assert a != Vector([1, 2, 3])
    assert (a == [1, 2]) is False


def test_lexicographic_ordering():
    short = Vector([1, 2])
    longer = Vector([1, 2, 0])
    bigger = Vector([1, 3])
    assert short < longer
    assert longer < bigger
    assert bigger > short
    assert short <= Vector([1, 2])
    assert short >= Vector([1, 2])
    assert not longer <= short
    assert not short >= longer


def test_ordering_with_other_type_raises():
    with pytest.raises(TypeError):
        Vector([1]) < [1]


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector([1]))