import pytest

from dstructs.doubly_linked import DoublyLinkedList, EmptyListError


def test_add_last_keeps_order():
    lst = DoublyLinkedList()
    for value in range(1, 11):
        lst.add_last(value)
    assert list(lst) == list(range(1, 11))
    assert len(lst) == 10


def test_add_first_prepends():
    lst = DoublyLinkedList()
    lst.add_first(1)
    lst.add_first(2)
    lst.add_last(3)
    assert list(lst) == [2, 1, 3]
    assert (lst.first(), lst.last()) == (2, 3)


def test_reversed_matches_forward():
    lst = DoublyLinkedList([4, 8, 15, 16])
    assert list(reversed(lst)) == [16, 15, 8, 4]


def test_is_empty():
    lst = DoublyLinkedList()
    assert lst.is_empty()
    lst.add_first(15)
    assert not lst.is_empty()


@pytest.mark.parametrize(
    "operation",
    [
        pytest.param(lambda lst: lst.first(), id="first"),
        pytest.param(lambda lst: lst.last(), id="last"),
        pytest.param(lambda lst: lst.remove(1), id="remove"),
        pytest.param(lambda lst: lst.remove_first(), id="remove_first"),
        pytest.param(lambda lst: lst.remove_last(), id="remove_last"),
        pytest.param(lambda lst: lst.get(0), id="get"),
        pytest.param(lambda lst: lst.copy(), id="copy"),
        pytest.param(lambda lst: lst.render(), id="render"),
        pytest.param(lambda lst: lst.render_reversed(), id="render_reversed"),
    ],
)
def test_operations_on_empty_list_raise(operation):
    with pytest.raises(EmptyListError):
        operation(DoublyLinkedList())


@pytest.mark.parametrize(
    "values, target, expected",
    [
        ([1, 2, 3, 4], 1, [2, 3, 4]),
        ([1, 2, 3, 4], 3, [1, 2, 4]),
        ([1, 2, 3, 4], 4, [1, 2, 3]),
        ([7], 7, []),
    ],
)
def test_remove_positions(values, target, expected):
    lst = DoublyLinkedList(values)
    lst.remove(target)
    assert list(lst) == expected
    assert list(reversed(lst)) == expected[::-1]
    assert len(lst) == len(expected)


def test_remove_missing_raises_value_error():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.remove(99)
    assert list(lst) == [1, 2]


def test_remove_first_and_last():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.remove_first() == 1
    assert lst.remove_last() == 3
    assert list(lst) == [2]
    assert lst.first() == lst.last() == 2
    lst.remove_last()
    assert lst.is_empty()


def test_get_returns_indexed_value():
    lst = DoublyLinkedList([10, 20, 30, 40])
    assert [lst.get(i) for i in range(4)] == [10, 20, 30, 40]


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_get_out_of_bounds(index):
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2, 3, 4]).get(index)


def test_copy_is_independent():
    original = DoublyLinkedList([1, 2, 3])
    clone = original.copy()
    clone.add_last(4)
    assert list(original) == [1, 2, 3]
    assert list(clone) == [1, 2, 3, 4]


def test_merge_concatenates():
    first = DoublyLinkedList(range(1, 11))
    second = DoublyLinkedList(range(11, 21))
    merged = first.merge(second)
    assert list(merged) == list(range(1, 21))
    assert len(merged) == 20
    assert list(first) == list(range(1, 11))


def test_merge_with_empty_raises():
    with pytest.raises(EmptyListError):
        DoublyLinkedList([1]).merge(DoublyLinkedList())


@pytest.mark.parametrize(
    "values, reverse, expected",
    [
        ([15], False, "L -> 15 -> NULL\n--------------\n"),
        ([1, 2, 3], True, "L -> 3 -> 2 -> 1 -> NULL\n"),
    ],
)
def test_render(values, reverse, expected):
    lst = DoublyLinkedList(values)
    rendered = lst.render_reversed() if reverse else lst.render()
    assert rendered == expected