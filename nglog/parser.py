#!filepath: nglog/parser.py
from __future__ import annotations

from typing import BinaryIO

from nglog.codec.world import decode_world
from nglog.errors import EncodingError, MalformedInput
from nglog.model import LINE_SEP, NgEvent, NgLog
from nglog.utils.logger import logs


# ============================
# 文本 → 行
# ============================
def split_lines(text: str) -> list[str]:
    """
    按 "\\n" 切行，去掉行尾单个 "\\r"。
    末尾换行不产生空行；空文本 → []。
    其它 unicode 换行符（\\x0b / \\x0c / \\u2028 ...）视为普通字段内容。
    """
    if not text:
        return []

    lines = text.split(LINE_SEP)
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _decode_utf8(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(e) from e


# ============================
# 单行
# ============================
def parse_event(line: str) -> NgEvent:
    return NgEvent.from_line(line)


# ============================
# 主入口
# ============================
def parse_text(text: str) -> NgLog:
    """
    文本 → NgLog（fail-fast：第一条非法行直接抛错，不返回部分结果）
    """
    events = []
    for line_no, line in enumerate(split_lines(text), start=1):
        try:
            events.append(NgEvent.from_line(line))
        except MalformedInput as e:
            raise MalformedInput(e.reason, line_no=line_no) from e

    logs.debug(f"[parse_text] {len(events)} events")
    return NgLog(tuple(events))


def parse_local(data: bytes) -> NgLog:
    """
    local 版：原始字节按 UTF-8 解释后解析
    """
    return parse_text(_decode_utf8(data))


def parse_world(data: bytes) -> NgLog:
    """
    world 版：先校验偶数长度 + XOR 反混淆，再按 UTF-8 解释
    """
    return parse_text(_decode_utf8(decode_world(data)))


# ============================
# reader 版本（调用方负责打开 / 关闭）
# ============================
def read_local(reader: BinaryIO) -> NgLog:
    return parse_local(reader.read())


def read_world(reader: BinaryIO) -> NgLog:
    return parse_world(reader.read())
