"""Bencode 到 JSON 的流式转换库.

单遍读取 Bencode 字节流并写出 JSON, 不构建中间解析树.
"""

from .api import to_json, transcode
from .config import Config
from .exceptions import (
    BencodeDecodeError,
    BencodeError,
    BencodePartialDataError,
    BencodeStackError,
    BencodeSyntaxError,
    BencodeValueError,
)
from .options import Option
from .reader import ByteReader
from .stack import Stack, State
from .transcoder import Transcoder
from .writer import ByteWriter, StringWriter, Writer

__version__ = "0.1.0"

__all__ = [
    "BencodeDecodeError",
    "BencodeError",
    "BencodePartialDataError",
    "BencodeStackError",
    "BencodeSyntaxError",
    "BencodeValueError",
    "ByteReader",
    "ByteWriter",
    "Config",
    "Option",
    "Stack",
    "State",
    "StringWriter",
    "Transcoder",
    "Writer",
    "__version__",
    "to_json",
    "transcode",
]
