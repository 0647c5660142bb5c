"""Bencode2JSON API模块.

提供高级接口 `to_json` 和 `transcode`.
"""

import codecs
import io
from typing import BinaryIO, TextIO

from .config import Config
from .options import Option
from .reader import ByteReader
from .transcoder import Transcoder
from .writer import ByteWriter, StringWriter, Writer


def _is_text_stream(output: object) -> bool:
    """判断输出对象是否为文本流."""
    if isinstance(output, io.TextIOBase | codecs.StreamWriter):
        return True
    # 其他类文件对象按打开模式判断
    mode = getattr(output, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def _make_writer(output: BinaryIO | TextIO | Writer, capture: bool) -> Writer:
    """根据输出对象的类型选择写入器."""
    if isinstance(output, Writer):
        if capture:
            raise ValueError(
                "Option.CAPTURE_OUTPUT cannot be used with a Writer instance, "
                "create the Writer with capture=True instead"
            )
        return output
    if _is_text_stream(output):
        return StringWriter(output, capture=capture)  # type: ignore[arg-type]
    return ByteWriter(output, capture=capture)  # type: ignore[arg-type]


def transcode(
    input: BinaryIO | bytes | bytearray | memoryview,
    output: BinaryIO | TextIO | Writer,
    option: Option = Option.NONE,
    max_string_length: int | None = None,
    suppress_log: bool = False,
) -> Transcoder:
    """把 Bencode 输入流转换为 JSON 并写入输出流.

    Args:
        input: 二进制流或字节数据.
        output: 二进制流, 文本流或 `Writer` 实例.
            文本流包括 `io.TextIOBase`, `codecs.StreamWriter`
            以及 `mode` 不含 "b" 的类文件对象, 其余按二进制流处理.
            传入 `Writer` 实例时由它自己决定是否捕获输出.
        option: 选项标志.
        max_string_length: 单个字符串值的长度上限.
        suppress_log: 是否抑制日志.

    Returns:
        Transcoder: 已完成的转换器 (可用于读取计数和捕获内容).

    Raises:
        BencodeDecodeError: 输入格式错误或被截断.
        ValueError: `Writer` 实例与 `Option.CAPTURE_OUTPUT` 同时使用.
        OSError: 底层读写失败.
    """
    config = Config.from_params(
        option=option,
        max_string_length=max_string_length,
        suppress_log=suppress_log,
    )
    reader = ByteReader(input, capture=config.capture_input)
    writer = _make_writer(output, capture=config.capture_output)

    transcoder = Transcoder(reader, writer, config)
    transcoder.transcode()
    return transcoder


def to_json(
    data: bytes | bytearray | memoryview,
    option: Option = Option.NONE,
    max_string_length: int | None = None,
    suppress_log: bool = False,
) -> str:
    """把 Bencode 字节转换为 JSON 文本.

    Usage:
        >>> to_json(b"d3:fooi42ee")
        '{"foo":42}'
    """
    buffer = io.StringIO()
    transcode(
        data,
        buffer,
        option=option,
        max_string_length=max_string_length,
        suppress_log=suppress_log,
    )
    return buffer.getvalue()
