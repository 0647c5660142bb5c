"""Bencode 到 JSON 的流式转换器.

该模块提供 `Transcoder`, 它逐个读取前导字节,
分派给整数/字符串解析器或容器边界逻辑,
并通过解析上下文栈在正确的位置写出 `,` `:` `[` `]` `{` `}`.
整个过程单遍完成, 不构建中间解析树.
"""

import logging

from .config import Config
from .exceptions import BencodeDecodeError, BencodeSyntaxError
from .integer import parse_integer
from .log import get_hexdump, logger
from .reader import ByteReader
from .stack import Stack, State
from .string import parse_string
from .writer import Writer

_INTEGER = ord("i")
_LIST = ord("l")
_DICT = ord("d")
_END = ord("e")

# 下一个值必须是字典键的状态
_EXPECTING_KEY = frozenset(
    {State.EXPECTING_FIRST_DICT_FIELD_OR_END, State.EXPECTING_DICT_FIELD_KEY}
)


class Transcoder:
    """Bencode 到 JSON 的转换器.

    每次转换创建一个实例. 实例持有栈和迭代计数器,
    读取器和写入器由调用方提供.
    """

    __slots__ = ("_config", "_reader", "_writer", "iteration", "stack")

    _reader: ByteReader
    _writer: Writer
    _config: Config
    stack: Stack
    iteration: int

    def __init__(
        self, reader: ByteReader, writer: Writer, config: Config | None = None
    ):
        """初始化Transcoder.

        Args:
            reader: 输入读取器.
            writer: 输出写入器.
            config: 转换配置, 默认使用 `Config()`.
        """
        self._reader = reader
        self._writer = writer
        self._config = config or Config()
        self.stack = Stack()
        self.iteration = 0

    @property
    def reader(self) -> ByteReader:
        return self._reader

    @property
    def writer(self) -> Writer:
        return self._writer

    def transcode(self) -> None:
        """转换整个输入流.

        在值边界处遇到输入结束时正常返回.

        Raises:
            BencodeDecodeError: 输入格式错误或在值中间截断.
            OSError: 底层读写失败.
        """
        suppress_log = self._config.suppress_log
        if not suppress_log:
            logger.debug("[Transcoder] 开始转换")

        try:
            self._run()
        except BencodeDecodeError as e:
            if e.pos is None:
                e.pos = self._reader.consumed
            if not suppress_log:
                logger.error("[Transcoder] 转换错误: %s", e)
                captured = self._reader.captured_input
                if captured is not None:
                    logger.debug(get_hexdump(captured, max(e.pos - 1, 0)))
            raise

        if not suppress_log:
            logger.debug(
                "[Transcoder] 成功转换 %d 字节, 写出 %d",
                self._reader.consumed,
                self._writer.written,
            )

    def _run(self) -> None:
        reader = self._reader
        writer = self._writer
        trace = logger.isEnabledFor(logging.DEBUG)

        while True:
            byte = reader.read_byte()
            if byte is None:
                break

            self.iteration += 1

            if 0x30 <= byte <= 0x39:
                self.begin_value()
                parse_string(
                    reader, writer, byte, max_length=self._config.max_string_length
                )
            elif byte == _INTEGER:
                self._check_not_key(byte)
                self.begin_value()
                parse_integer(reader, writer, strict=self._config.strict_integer)
            elif byte == _LIST:
                self._check_not_key(byte)
                self.begin_value()
                writer.write_byte(ord("["))
                self.stack.push(State.EXPECTING_FIRST_LIST_ITEM_OR_END)
            elif byte == _DICT:
                self._check_not_key(byte)
                self.begin_value()
                writer.write_byte(ord("{"))
                self.stack.push(State.EXPECTING_FIRST_DICT_FIELD_OR_END)
            elif byte == _END:
                self.end_container()
            else:
                raise BencodeSyntaxError(
                    f"unexpected byte {byte} ({chr(byte)!r})", pos=reader.consumed
                )

            if trace:
                logger.debug(
                    "iter: %d, pos: %d, byte: %d (%r), stack: %s",
                    self.iteration,
                    reader.consumed,
                    byte,
                    chr(byte),
                    self.stack,
                )

    def _check_not_key(self, byte: int) -> None:
        if self.stack.peek() in _EXPECTING_KEY:
            raise BencodeSyntaxError(
                f"dictionary key must be a string, got byte {byte} ({chr(byte)!r})",
                pos=self._reader.consumed,
            )

    def begin_value(self) -> None:
        """在任何值 (整数, 字符串, 列表, 字典) 开始时调用.

        根据栈顶状态写出分隔符, 并转换到下一个状态.
        """
        stack = self.stack
        state = stack.peek()

        if state is State.INITIAL:
            pass
        # 列表
        elif state is State.EXPECTING_FIRST_LIST_ITEM_OR_END:
            stack.swap_top(State.EXPECTING_NEXT_LIST_ITEM)
        elif state is State.EXPECTING_NEXT_LIST_ITEM:
            self._writer.write_byte(ord(","))
        # 字典
        elif state is State.EXPECTING_FIRST_DICT_FIELD_OR_END:
            stack.swap_top(State.EXPECTING_DICT_FIELD_VALUE)
        elif state is State.EXPECTING_DICT_FIELD_VALUE:
            self._writer.write_byte(ord(":"))
            stack.swap_top(State.EXPECTING_DICT_FIELD_KEY)
        elif state is State.EXPECTING_DICT_FIELD_KEY:
            self._writer.write_byte(ord(","))
            stack.swap_top(State.EXPECTING_DICT_FIELD_VALUE)

    def end_container(self) -> None:
        """在列表或字典的结束字节 `e` 处调用.

        整数的 `e` 由整数解析器消费, 不会到达这里.

        Raises:
            BencodeSyntaxError: 当前没有可结束的容器, 或字典键缺少对应的值.
        """
        state = self.stack.peek()

        if state in (
            State.EXPECTING_FIRST_LIST_ITEM_OR_END,
            State.EXPECTING_NEXT_LIST_ITEM,
        ):
            self._writer.write_byte(ord("]"))
            self.stack.pop()
        elif state in _EXPECTING_KEY:
            self._writer.write_byte(ord("}"))
            self.stack.pop()
        elif state is State.EXPECTING_DICT_FIELD_VALUE:
            raise BencodeSyntaxError(
                "unexpected end of dictionary, field key without value",
                pos=self._reader.consumed,
            )
        else:
            raise BencodeSyntaxError(
                "unexpected end of list or dictionary, no container is open",
                pos=self._reader.consumed,
            )
