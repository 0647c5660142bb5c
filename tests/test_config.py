"""测试配置对象和选项标志."""

import dataclasses

import pytest

from bencode2json.config import MAX_STRING_LENGTH, Config
from bencode2json.options import Option


def test_default_config() -> None:
    config = Config()

    assert config.flags == Option.NONE
    assert config.max_string_length == MAX_STRING_LENGTH
    assert not config.suppress_log
    assert not config.capture_input
    assert not config.capture_output
    assert not config.strict_integer


def test_from_params_combines_flags() -> None:
    config = Config.from_params(option=Option.CAPTURE_INPUT | Option.STRICT_INTEGER)

    assert config.capture_input
    assert config.strict_integer
    assert not config.capture_output


def test_from_params_default_length() -> None:
    assert Config.from_params(max_string_length=None).max_string_length == (
        MAX_STRING_LENGTH
    )
    assert Config.from_params(max_string_length=0).max_string_length == 0


def test_from_params_rejects_negative_length() -> None:
    with pytest.raises(ValueError, match="cannot be negative"):
        Config.from_params(max_string_length=-5)


def test_config_is_frozen() -> None:
    config = Config()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.suppress_log = True  # type: ignore[misc]
