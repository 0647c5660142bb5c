"""测试解析上下文栈."""

import pytest

from bencode2json.exceptions import BencodeStackError
from bencode2json.stack import Stack, State


def test_initial_state() -> None:
    """新栈只包含初始状态."""
    stack = Stack()

    assert stack.peek() is State.INITIAL
    assert len(stack) == 1


def test_push_and_pop() -> None:
    """push() 和 pop() 应成对工作."""
    stack = Stack()
    stack.push(State.EXPECTING_FIRST_LIST_ITEM_OR_END)

    assert stack.peek() is State.EXPECTING_FIRST_LIST_ITEM_OR_END
    assert stack.pop() is State.EXPECTING_FIRST_LIST_ITEM_OR_END
    assert stack.peek() is State.INITIAL


def test_swap_top() -> None:
    """swap_top() 只替换栈顶."""
    stack = Stack()
    stack.push(State.EXPECTING_FIRST_DICT_FIELD_OR_END)
    stack.swap_top(State.EXPECTING_DICT_FIELD_VALUE)

    assert stack.peek() is State.EXPECTING_DICT_FIELD_VALUE
    assert len(stack) == 2


def test_cannot_pop_initial_state() -> None:
    """初始状态不能被弹出."""
    stack = Stack()

    with pytest.raises(BencodeStackError):
        stack.pop()
    assert stack.peek() is State.INITIAL


def test_cannot_swap_initial_state() -> None:
    """初始状态不能被替换."""
    stack = Stack()

    with pytest.raises(BencodeStackError):
        stack.swap_top(State.EXPECTING_NEXT_LIST_ITEM)


def test_display() -> None:
    """栈应以单字母简称显示."""
    stack = Stack()
    stack.push(State.EXPECTING_NEXT_LIST_ITEM)
    stack.push(State.EXPECTING_DICT_FIELD_KEY)

    assert str(stack) == "[I, M, F]"
    assert repr(stack) == "Stack([I, M, F])"
