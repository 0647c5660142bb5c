"""Bencode 字符串解析器.

从输入读取 `<length>:<bytes>` 并写出 JSON 字符串字面量.
非 UTF-8 内容会被替换为 `<hex>...</hex>` 占位文本.
"""

import json

from .config import MAX_STRING_LENGTH
from .exceptions import BencodeValueError
from .reader import ByteReader
from .writer import Writer

_COLON = ord(":")


class StringParser:
    """单个字符串值的累加器.

    只在解析一个字符串期间存在: 先收集长度数字, 再收集值字节.
    """

    __slots__ = (
        "_max_digits",
        "length",
        "length_bytes",
        "max_length",
        "value_bytes",
    )

    def __init__(self, first_byte: int, max_length: int = MAX_STRING_LENGTH) -> None:
        self.max_length = max_length
        # 位数超过上限的长度必然超限, 无需继续缓冲
        self._max_digits = len(str(max_length))
        self.length_bytes = bytearray((first_byte,))
        self.length = 0
        self.value_bytes = bytearray()

    def add_length_byte(self, byte: int, pos: int | None = None) -> None:
        if not 0x30 <= byte <= 0x39:
            raise BencodeValueError(
                f"invalid string length, unexpected byte {byte} ({chr(byte)!r})",
                pos=pos,
            )
        # 前导零不改变数值, 只保留一个
        if self.length_bytes == b"0":
            self.length_bytes[0] = byte
            return
        if len(self.length_bytes) >= self._max_digits:
            raise BencodeValueError(
                f"string length exceeds max limit {self.max_length}", pos=pos
            )
        self.length_bytes.append(byte)

    def end_of_length(self, pos: int | None = None) -> int:
        """在读到 `:` 时调用, 把长度数字转换为整数."""
        self.length = int(self.length_bytes.decode("ascii"))
        if self.length > self.max_length:
            raise BencodeValueError(
                f"string length {self.length} exceeds max limit {self.max_length}",
                pos=pos,
            )
        return self.length

    def add_byte(self, byte: int) -> None:
        self.value_bytes.append(byte)

    def json(self) -> str:
        """返回完整的 JSON 字符串字面量 (含引号)."""
        try:
            text = self.value_bytes.decode("utf-8")
        except UnicodeDecodeError:
            return f'"{bytes_to_hex(self.value_bytes)}"'
        return json.dumps(text, ensure_ascii=False)


def bytes_to_hex(data: bytes | bytearray) -> str:
    """把任意字节转换为 `<hex>...</hex>` 文本."""
    return f"<hex>{data.hex()}</hex>"


def parse_string(
    reader: ByteReader,
    writer: Writer,
    first_byte: int,
    max_length: int = MAX_STRING_LENGTH,
) -> None:
    """解析一个字符串值并写出 JSON 字符串.

    Args:
        reader: 输入读取器, 第一个长度数字已被消费.
        writer: 输出写入器.
        first_byte: 触发字符串解析的前导数字.
        max_length: 字符串长度上限.

    Raises:
        BencodeValueError: 长度字段包含非数字字节或超出上限.
        BencodePartialDataError: 长度或值未读完时输入结束.
    """
    parser = StringParser(first_byte, max_length)

    # 长度
    while True:
        byte = reader.expect_byte("string length")
        if byte == _COLON:
            length = parser.end_of_length(pos=reader.consumed)
            break
        parser.add_length_byte(byte, pos=reader.consumed)

    # 值
    for _ in range(length):
        parser.add_byte(reader.expect_byte("string value"))

    writer.write_str(parser.json())
