"""转换配置对象."""

from dataclasses import dataclass

from .options import Option

# 安全限制
MAX_STRING_LENGTH = 100 * 1024 * 1024  # 100MB


@dataclass(frozen=True)
class Config:
    """转换配置 (不可变).

    在 API 入口层创建, 然后传递给 Transcoder.

    Attributes:
        flags: 选项标志 (IntFlag).
        max_string_length: 单个字符串值允许的最大字节数.
        suppress_log: 是否抑制开始/结束/错误日志.
    """

    flags: Option = Option.NONE
    max_string_length: int = MAX_STRING_LENGTH
    suppress_log: bool = False

    @classmethod
    def from_params(
        cls,
        option: Option = Option.NONE,
        max_string_length: int | None = None,
        suppress_log: bool = False,
    ) -> "Config":
        """从参数构建配置对象.

        Args:
            option: Option 枚举.
            max_string_length: 字符串长度上限, None 表示使用默认值.
            suppress_log: 是否抑制日志.

        Returns:
            Config: 配置对象.
        """
        if max_string_length is None:
            max_string_length = MAX_STRING_LENGTH
        if max_string_length < 0:
            raise ValueError(
                f"max_string_length cannot be negative: {max_string_length}"
            )

        return cls(
            flags=option,
            max_string_length=max_string_length,
            suppress_log=suppress_log,
        )

    @property
    def capture_input(self) -> bool:
        """是否捕获输入."""
        return bool(self.flags & Option.CAPTURE_INPUT)

    @property
    def capture_output(self) -> bool:
        """是否捕获输出."""
        return bool(self.flags & Option.CAPTURE_OUTPUT)

    @property
    def strict_integer(self) -> bool:
        """是否拒绝前导零整数."""
        return bool(self.flags & Option.STRICT_INTEGER)
