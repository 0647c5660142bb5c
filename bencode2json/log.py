"""Bencode2JSON 日志记录器."""

import logging

logger = logging.getLogger("bencode2json")


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def get_hexdump(
    data: bytes | bytearray | memoryview, pos: int, window: int = 16
) -> str:
    """获取指定位置周围数据的十六进制转储.

    位于 `pos` 的字节用方括号标出, 末尾附带可打印 ASCII 视图
    (Bencode 的结构字节都是 ASCII).
    """
    start = max(0, pos - window)
    end = min(len(data), pos + window)
    chunk = bytes(data[start:end])

    cells = []
    for offset, byte in enumerate(chunk, start):
        cell = f"{byte:02x}"
        cells.append(f"[{cell}]" if offset == pos else cell)
    ascii_view = "".join(_printable(byte) for byte in chunk)

    header = f"位置 {pos} 的上下文 (显示 {start}-{end}):"
    return f"{header}\n{' '.join(cells)}  |{ascii_view}|"
