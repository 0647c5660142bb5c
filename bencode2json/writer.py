"""JSON 输出写入器.

`Writer` 定义了转换器需要的两个操作: 写一个字节和写一个字符串.
`ByteWriter` 面向二进制流, `StringWriter` 面向文本流,
二者对转换器来说可以互换.
"""

import abc
from typing import BinaryIO, TextIO


class Writer(abc.ABC):
    """输出写入器基类.

    只会写出 JSON 标点, 整数字符和已转义的字符串字面量,
    因此输出总是合法的 UTF-8.
    """

    def __init__(self, capture: bool = False):
        self.written = 0
        self._captured: list[str] | None = [] if capture else None

    @abc.abstractmethod
    def write_byte(self, byte: int) -> None:
        """写出一个字节."""

    @abc.abstractmethod
    def write_str(self, value: str) -> None:
        """写出一个字符串."""

    def _capture(self, value: str) -> None:
        if self._captured is not None:
            self._captured.append(value)

    @property
    def captured_output(self) -> str | None:
        """已捕获的输出 (未启用捕获时为 None)."""
        if self._captured is None:
            return None
        return "".join(self._captured)


class ByteWriter(Writer):
    """写入二进制流. `written` 统计字节数."""

    def __init__(self, stream: BinaryIO, capture: bool = False):
        super().__init__(capture)
        self._stream = stream

    def write_byte(self, byte: int) -> None:
        self._stream.write(bytes((byte,)))
        self.written += 1
        self._capture(chr(byte))

    def write_str(self, value: str) -> None:
        data = value.encode("utf-8")
        self._stream.write(data)
        self.written += len(data)
        self._capture(value)


class StringWriter(Writer):
    """写入文本流 (如 `io.StringIO`, `sys.stdout`). `written` 统计字符数."""

    def __init__(self, stream: TextIO, capture: bool = False):
        super().__init__(capture)
        self._stream = stream

    def write_byte(self, byte: int) -> None:
        c = chr(byte)
        self._stream.write(c)
        self.written += 1
        self._capture(c)

    def write_str(self, value: str) -> None:
        self._stream.write(value)
        self.written += len(value)
        self._capture(value)
