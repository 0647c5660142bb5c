"""解析上下文栈.

记录转换器在扫描过程中所处的列表/字典嵌套层级,
以及下一个值之前需要输出的 JSON 标点.
整数和字符串没有对应的状态, 它们自身就能确定何时结束.
"""

from enum import Enum

from .exceptions import BencodeStackError


class State(Enum):
    """列表或字典内部的解析状态.

    每个状态的值是调试输出中使用的单字母简称.
    """

    INITIAL = "I"

    # 列表
    EXPECTING_FIRST_LIST_ITEM_OR_END = "L"
    EXPECTING_NEXT_LIST_ITEM = "M"

    # 字典
    EXPECTING_FIRST_DICT_FIELD_OR_END = "D"
    EXPECTING_DICT_FIELD_VALUE = "E"
    EXPECTING_DICT_FIELD_KEY = "F"

    def __str__(self) -> str:
        return self.value


class Stack:
    """状态栈. 栈底始终是 `State.INITIAL`, 且不能被弹出."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[State] = [State.INITIAL]

    def push(self, state: State) -> None:
        """压入新容器的状态."""
        self._items.append(state)

    def pop(self) -> State:
        """弹出栈顶状态.

        Raises:
            BencodeStackError: 栈顶是初始状态.
        """
        if len(self._items) == 1:
            raise BencodeStackError("cannot pop the initial state")
        return self._items.pop()

    def swap_top(self, state: State) -> None:
        """替换栈顶状态 (同层级的状态转换)."""
        if len(self._items) == 1:
            raise BencodeStackError("cannot replace the initial state")
        self._items[-1] = state

    def peek(self) -> State:
        """返回栈顶状态而不移除它."""
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"Stack({self})"
