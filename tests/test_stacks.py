import pytest

from schedsim.stacks import ArrayStack, LinkedStack


def test_linked_stack_lifo_order():
    s = LinkedStack()
    for n in [1, 2, 3, 4, 5]:
        s.push(n)
    assert s.peek() == 5
    assert [s.pop() for _ in range(len(s))] == [5, 4, 3, 2, 1]
    assert s.is_empty()


def test_linked_stack_str_top_first():
    s = LinkedStack()
    assert str(s) == "{ }"
    for n in [1, 2, 3]:
        s.push(n)
    assert str(s) == "{ 3 2 1 }"
    assert list(s) == [3, 2, 1]


def test_linked_stack_holds_strings():
    s = LinkedStack()
    s.push("(")
    s.push("+")
    assert s.pop() == "+"
    assert s.peek() == "("


def test_linked_stack_is_unbounded():
    s = LinkedStack()
    for n in range(100):
        s.push(n)
    assert len(s) == 100
    assert s.peek() == 99


def test_linked_stack_empty_errors():
    s = LinkedStack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()


def test_linked_stack_clear():
    s = LinkedStack()
    s.push(1)
    s.push(2)
    s.clear()
    assert s.is_empty()
    assert len(s) == 0


def test_array_stack_top_and_rear():
    s = ArrayStack()
    for n in [5, 4, 3, 2, 1]:
        s.push(n)
    assert s.top() == 1
    assert s.rear() == 5
    s.push(6)
    assert s.top() == 6
    assert str(s) == "[ 6 1 2 3 4 5 ]"


def test_array_stack_pop_returns_top():
    s = ArrayStack()
    for n in [5, 4, 3]:
        s.push(n)
    assert s.pop() == 3
    assert s.pop() == 4
    assert list(s) == [5]


def test_array_stack_capacity():
    s = ArrayStack()
    for n in range(10):
        s.push(n)
    assert s.is_full()
    with pytest.raises(OverflowError):
        s.push(10)
    assert len(s) == 10


def test_array_stack_custom_capacity():
    s = ArrayStack(capacity=1)
    s.push("x")
    assert s.is_full()
    with pytest.raises(OverflowError):
        s.push("y")


def test_array_stack_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=-3)


def test_array_stack_empty_errors_and_clear():
    s = ArrayStack()
    s.push(1)
    s.clear()
    assert s.is_empty()
    assert str(s) == "[ ]"
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.top()
    with pytest.raises(IndexError):
        s.rear()