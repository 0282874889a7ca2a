#!filepath: nglog/serializer.py
from __future__ import annotations

from nglog.model import NgEvent, NgLog


def serialize_event(event: NgEvent) -> str:
    """
    ts [\\t class] \\t id [\\t param ...]，无尾随 TAB
    """
    return event.to_line()


def serialize_log(log: NgLog) -> str:
    """
    每个事件一行，最后一行同样以 "\\n" 结尾；只输出 local 文本形式。
    """
    return log.to_text()


def serialize_log_bytes(log: NgLog) -> bytes:
    return serialize_log(log).encode("utf-8")
