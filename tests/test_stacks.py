import pytest

from dstructs.doubly_linked import DoublyLinkedList
from dstructs.stacks import Stack, StackEmptyError, StackFullError, StaticStack


def test_stack_push_peek_pop():
    stack = Stack()
    for value in (15, 20, 25):
        stack.push(value)
    assert stack.peek() == 25
    assert stack.pop() == 25
    assert stack.peek() == 20
    assert len(stack) == 2


def test_stack_render_matches_list_render():
    stack = Stack()
    stack.push(15)
    stack.push(20)
    assert stack.render() == DoublyLinkedList([15, 20]).render()


def test_stack_lifo_order():
    stack = Stack()
    values = [3, 1, 4, 1, 5]
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == list(reversed(values))
    assert stack.is_empty()


@pytest.mark.parametrize("operation", ["peek", "pop", "render"])
def test_stack_empty_errors(operation):
    with pytest.raises(StackEmptyError):
        getattr(Stack(), operation)()


def test_static_stack_fills_and_pops():
    stack = StaticStack(4)
    for value in (5, 3, 2, 15):
        stack.push(value)
    assert stack.is_full()
    assert stack.pop() == 15
    assert stack.peek() == 2
    assert len(stack) == 3
    assert not stack.is_full()


def test_static_stack_push_when_full():
    stack = StaticStack(1)
    stack.push(7)
    with pytest.raises(StackFullError):
        stack.push(8)
    assert len(stack) == 1


def test_static_stack_render():
    stack = StaticStack(4)
    for value in (5, 3, 2):
        stack.push(value)
    expected = (
        "===================\n"
        "Capacity: 4\n"
        "Size: 3\n"
        "Top: 2\n"
        "-----------------\n"
        "data[0] = '5'\n"
        "data[1] = '3'\n"
        "data[2] = '2'\n"
        "===================\n"
    )
    assert stack.render() == expected


@pytest.mark.parametrize("operation", ["peek", "pop", "render"])
def test_static_stack_empty_errors(operation):
    with pytest.raises(StackEmptyError):
        getattr(StaticStack(3), operation)()


def test_static_stack_negative_capacity():
    with pytest.raises(ValueError):
        StaticStack(-1)