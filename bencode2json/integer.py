"""Bencode 整数解析器.

整数体的数字序列本身就是 JSON 数字字面量, 因此数字读到即写出, 不做缓冲.
"""

from enum import Enum, auto

from .exceptions import BencodeValueError
from .reader import ByteReader
from .writer import Writer

_MINUS = ord("-")
_END = ord("e")
_ZERO = ord("0")


class IntegerState(Enum):
    """整数解析的当前状态."""

    EXPECTING_DIGIT_OR_SIGN = auto()
    EXPECTING_DIGIT_AFTER_SIGN = auto()
    EXPECTING_DIGIT_OR_END = auto()


def parse_integer(reader: ByteReader, writer: Writer, strict: bool = False) -> None:
    """解析 `i` 之后的整数体, 直到结束符 `e`.

    Args:
        reader: 输入读取器, 前导字节 `i` 已被消费.
        writer: 输出写入器.
        strict: 是否拒绝前导零 (`i03e`) 和负零 (`i-0e`).

    Raises:
        BencodeValueError: 出现非法字节, 或在数字之前遇到 `e`.
        BencodePartialDataError: 在 `e` 之前输入结束.
    """
    state = IntegerState.EXPECTING_DIGIT_OR_SIGN
    negative = False
    leading_zero = False

    while True:
        byte = reader.expect_byte("integer")

        if 0x30 <= byte <= 0x39:
            if strict:
                if leading_zero:
                    raise BencodeValueError(
                        "invalid integer, leading zeros are not allowed",
                        pos=reader.consumed,
                    )
                if byte == _ZERO and state is not IntegerState.EXPECTING_DIGIT_OR_END:
                    if negative:
                        raise BencodeValueError(
                            "invalid integer, negative zero is not allowed",
                            pos=reader.consumed,
                        )
                    leading_zero = True
            state = IntegerState.EXPECTING_DIGIT_OR_END
            writer.write_byte(byte)
        elif byte == _END and state is IntegerState.EXPECTING_DIGIT_OR_END:
            return
        elif byte == _MINUS and state is IntegerState.EXPECTING_DIGIT_OR_SIGN:
            state = IntegerState.EXPECTING_DIGIT_AFTER_SIGN
            negative = True
            writer.write_byte(byte)
        else:
            raise BencodeValueError(
                f"invalid integer, unexpected byte {byte} ({chr(byte)!r})",
                pos=reader.consumed,
            )
