"""转换过程的配置选项.

该模块定义了用于控制 `to_json` 和 `transcode` 函数行为的选项标志.
"""

from enum import IntFlag


class Option(IntFlag):
    """转换选项标志.

    可以使用位运算组合多个选项:
        option = Option.CAPTURE_OUTPUT | Option.STRICT_INTEGER
    """

    # 默认行为: 不捕获, 宽松整数
    NONE = 0x0000

    # 保留读取过的全部输入字节 (用于诊断)
    CAPTURE_INPUT = 0x0001

    # 保留写出的全部输出 (用于测试)
    CAPTURE_OUTPUT = 0x0002

    # 拒绝前导零 (i03e) 和负零 (i-0e)
    STRICT_INTEGER = 0x0004
