import pytest

from dsakit.stacks import (
    ArrayStack,
    LinkedStack,
    StackOverflowError,
    StackUnderflowError,
    infix_to_postfix,
    is_balanced,
    precedence,
)


def test_array_stack_source_sequence():
    s = ArrayStack(5)
    for value in [1, 2, 3, 4, 5]:
        s.push(value)
    with pytest.raises(StackOverflowError):
        s.push(6)
    assert s.capacity == 5
    assert s.is_empty() is False
    assert s.is_full() is True
    assert s.pop() == 5
    assert s.peek() == 4


def test_array_stack_len_tracks_items():
    s = ArrayStack(3)
    assert len(s) == 0
    s.push("a")
    s.push("b")
    assert len(s) == 2
    s.pop()
    assert len(s) == 1


def test_array_stack_underflow():
    s = ArrayStack(2)
    with pytest.raises(StackUnderflowError):
        s.pop()
    with pytest.raises(StackUnderflowError):
        s.peek()


def test_array_stack_negative_size():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_array_stack_lifo_order():
    s = ArrayStack(4)
    for value in [10, 20, 30]:
        s.push(value)
    assert [s.pop(), s.pop(), s.pop()] == [30, 20, 10]
    assert s.is_empty() is True


def test_linked_stack_source_sequence():
    s = LinkedStack()
    assert s.is_empty() is True
    for value in [1, 2, 3, 4, 5, 6]:
        s.push(value)
    assert s.is_empty() is False
    assert s.pop() == 6
    assert s.peek() == 5


def test_linked_stack_underflow():
    s = LinkedStack()
    with pytest.raises(StackUnderflowError):
        s.pop()
    with pytest.raises(StackUnderflowError):
        s.peek()


def test_linked_stack_drains_in_reverse():
    s = LinkedStack()
    values = [3, 1, 4, 1, 5]
    for value in values:
        s.push(value)
    drained = [s.pop() for _ in values]
    assert drained == values[::-1]
    assert s.is_empty() is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(a+b)*[c*(a+b)]", True),
        ("", True),
        ("{[()]}", True),
        ("(]", False),
        (")", False),
        ("(", False),
        ("([)]", False),
    ],
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected


@pytest.mark.parametrize(
    "op, expected", [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("a", 0), ("(", 0)]
)
def test_precedence(op, expected):
    assert precedence(op) == expected


def test_infix_to_postfix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"
    assert infix_to_postfix("a*b+c") == "ab*c+"


def test_infix_to_postfix_keeps_every_character():
    expression = "12 + 14 * 15 + 4"
    result = infix_to_postfix(expression)
    assert sorted(result) == sorted(expression)
    assert result.endswith("+")


def test_infix_without_operators_is_unchanged():
    assert infix_to_postfix("abc") == "abc"