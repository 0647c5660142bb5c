"""Bencode2JSON 特定的异常类.

该模块为转换器定义了异常层次结构.
底层 I/O 失败保持为 `OSError`, 不会被包装.
"""


class BencodeError(Exception):
    """所有 bencode2json 异常的基类."""

    pass


class BencodeDecodeError(BencodeError):
    """输入无法转换时抛出.

    Case:
        - 输入数据被截断.
        - 出现意外的前导字节.
        - 整数或字符串长度格式错误.
    """

    def __init__(self, msg: str, pos: int | None = None) -> None:
        """初始化解码错误.

        Args:
            msg: 错误描述信息.
            pos: 出错时已消费的字节数 (未知时为 None).
        """
        super().__init__(msg)
        self.pos = pos

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.pos is not None:
            return f"{base_msg} (at byte {self.pos})"
        return base_msg


class BencodePartialDataError(BencodeDecodeError):
    """在值的中间遇到输入结束时抛出.

    在值边界处的输入结束是正常终止, 不会抛出此异常.
    """

    pass


class BencodeSyntaxError(BencodeDecodeError):
    """结构字节不合法时抛出.

    Case:
        - 无法识别的前导字节.
        - 没有打开的容器时出现 `e`, 或者字典键之后直接出现 `e`.
        - 字典键不是字符串.
    """

    pass


class BencodeValueError(BencodeDecodeError, ValueError):
    """数值编码无效时抛出 (整数体或字符串长度)."""

    pass


class BencodeStackError(BencodeError):
    """解析上下文栈的不变量被破坏时抛出 (例如弹出初始状态)."""

    pass
