#!filepath: nglog/errors.py
from __future__ import annotations


class NgLogError(ValueError):
    """
    nglog 所有异常的基类。
    调用方只需 except NgLogError 即可兜住解析失败。
    """


class MalformedInput(NgLogError):
    """
    结构非法：
    - world 字节流长度为奇数
    - 事件行少于 2 个字段
    """

    def __init__(self, reason: str, line_no: int | None = None):
        self.reason = reason
        self.line_no = line_no
        if line_no is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (line {line_no})")


class EncodingError(NgLogError):
    """
    字节无法按 UTF-8 解释（解码前 / 解码后均可能）。
    原始 UnicodeDecodeError 通过 __cause__ 保留。
    """

    def __init__(self, detail: UnicodeDecodeError):
        self.detail = detail
        super().__init__(f"invalid utf-8: {detail}")
