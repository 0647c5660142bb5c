"""逐字节读取器.

该模块提供 `ByteReader`, 它从任意二进制输入中每次拉取一个字节.
"""

import io
from typing import BinaryIO

from .exceptions import BencodePartialDataError


class ByteReader:
    """Bencode 输入的单字节读取器.

    包装二进制流 (或字节数据), 统计已消费的字节数,
    并可选地保留读到的全部字节用于诊断.
    """

    __slots__ = ("_captured", "_stream", "consumed")

    _stream: BinaryIO
    _captured: bytearray | None
    consumed: int

    def __init__(
        self, source: BinaryIO | bytes | bytearray | memoryview, capture: bool = False
    ):
        """初始化ByteReader.

        Args:
            source: 二进制流或字节数据.
            capture: 是否保留读到的全部字节.
        """
        if isinstance(source, bytes | bytearray | memoryview):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self._captured = bytearray() if capture else None
        self.consumed = 0

    def read_byte(self) -> int | None:
        """读取一个字节.

        Returns:
            字节值 (0-255), 输入结束时返回 None.

        Raises:
            OSError: 底层流读取失败.
        """
        chunk = self._stream.read(1)
        if not chunk:
            return None

        byte = chunk[0]
        self.consumed += 1
        if self._captured is not None:
            self._captured.append(byte)
        return byte

    def expect_byte(self, what: str) -> int:
        """读取一个字节, 输入结束视为错误.

        Args:
            what: 正在解析的内容 (用于错误信息).

        Raises:
            BencodePartialDataError: 在值的中间遇到输入结束.
        """
        byte = self.read_byte()
        if byte is None:
            raise BencodePartialDataError(
                f"unexpected end of input parsing {what}", pos=self.consumed
            )
        return byte

    @property
    def captured_input(self) -> bytes | None:
        """已捕获的输入 (未启用捕获时为 None)."""
        if self._captured is None:
            return None
        return bytes(self._captured)
