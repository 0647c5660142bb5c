"""测试高级 API: to_json 和 transcode."""

import codecs
import io

import pytest

from bencode2json import (
    BencodeDecodeError,
    ByteWriter,
    Option,
    StringWriter,
    to_json,
    transcode,
)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"i42e", "42"),
        (b"i-1e", "-1"),
        (b"4:spam", '"spam"'),
        (b"4:\xff\xfe\xfd\xfc", '"<hex>fffefdfc</hex>"'),
        (b"li42ei43ee", "[42,43]"),
        (b"d3:fooi42ee", '{"foo":42}'),
        (b"lli42eee", "[[42]]"),
    ],
)
def test_to_json(data: bytes, expected: str) -> None:
    assert to_json(data) == expected


def test_to_json_accepts_bytearray_and_memoryview() -> None:
    assert to_json(bytearray(b"le")) == "[]"
    assert to_json(memoryview(b"de")) == "{}"


def test_transcode_to_binary_stream() -> None:
    """输出为二进制流时使用 ByteWriter."""
    output = io.BytesIO()
    transcoder = transcode(io.BytesIO(b"l4:spami1ee"), output)

    assert output.getvalue() == b'["spam",1]'
    assert isinstance(transcoder.writer, ByteWriter)
    assert transcoder.reader.consumed == 11
    assert transcoder.writer.written == 10


def test_transcode_to_text_stream() -> None:
    """输出为文本流时使用 StringWriter."""
    output = io.StringIO()
    transcoder = transcode(b"d1:a1:be", output)

    assert output.getvalue() == '{"a":"b"}'
    assert isinstance(transcoder.writer, StringWriter)


def test_transcode_to_custom_writer() -> None:
    """可以直接传入 Writer 实例."""
    writer = StringWriter(io.StringIO(), capture=True)
    transcode(b"i7e", writer)

    assert writer.captured_output == "7"


def test_transcode_capture_options() -> None:
    transcoder = transcode(
        b"li1ee",
        io.BytesIO(),
        option=Option.CAPTURE_INPUT | Option.CAPTURE_OUTPUT,
    )

    assert transcoder.reader.captured_input == b"li1ee"
    assert transcoder.writer.captured_output == "[1]"


def test_transcode_without_capture() -> None:
    transcoder = transcode(b"li1ee", io.BytesIO())

    assert transcoder.reader.captured_input is None
    assert transcoder.writer.captured_output is None


def test_partial_output_is_not_rolled_back() -> None:
    """出错前已写出的输出保留在流中."""
    output = io.StringIO()

    with pytest.raises(BencodeDecodeError):
        transcode(b"li1ei2ex", output)

    assert output.getvalue() == "[1,2"


def test_max_string_length_parameter() -> None:
    with pytest.raises(BencodeDecodeError, match="exceeds max limit"):
        to_json(b"5:hello", max_string_length=4)

    assert to_json(b"5:hello", max_string_length=5) == '"hello"'


def test_negative_max_string_length() -> None:
    with pytest.raises(ValueError, match="cannot be negative"):
        to_json(b"le", max_string_length=-1)


def test_strict_integer_option() -> None:
    with pytest.raises(BencodeDecodeError):
        to_json(b"i-0e", option=Option.STRICT_INTEGER)


def test_capture_output_with_custom_writer_is_rejected() -> None:
    """Writer 实例与 CAPTURE_OUTPUT 同时使用时应报错, 而不是静默忽略."""
    writer = StringWriter(io.StringIO())

    with pytest.raises(ValueError, match="CAPTURE_OUTPUT"):
        transcode(b"i7e", writer, option=Option.CAPTURE_OUTPUT)


def test_transcode_to_codecs_stream_writer() -> None:
    """codecs 文本流写入器应使用 StringWriter."""
    raw = io.BytesIO()
    output = codecs.getwriter("utf-8")(raw)
    transcoder = transcode(b"l4:spame", output)

    assert isinstance(transcoder.writer, StringWriter)
    assert raw.getvalue() == b'["spam"]'


def test_transcode_to_text_mode_file_like() -> None:
    """mode 不含 "b" 的类文件对象按文本流处理."""

    class TextSink:
        mode = "w"

        def __init__(self) -> None:
            self.parts: list[str] = []

        def write(self, value: str) -> int:
            assert isinstance(value, str)
            self.parts.append(value)
            return len(value)

    sink = TextSink()
    transcoder = transcode(b"d1:ai1ee", sink)  # type: ignore[arg-type]

    assert isinstance(transcoder.writer, StringWriter)
    assert "".join(sink.parts) == '{"a":1}'
