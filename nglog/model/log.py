#!filepath: nglog/model/log.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Iterator, overload

from .event import NgEvent

LINE_SEP = "\n"


@dataclass(frozen=True)
class NgLog:
    """
    一个 ngLog 文件 = 有序事件序列

    - 顺序即源文件行序，输出时保持不变
    - 构造一次、整体构造；之后只读（迭代 / 序列化）
    """
    events: tuple[NgEvent, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.events, tuple):
            object.__setattr__(self, "events", tuple(self.events))

    # ------------------------------------------------
    # 构造入口
    # ------------------------------------------------
    @classmethod
    def empty(cls) -> "NgLog":
        return cls(())

    @classmethod
    def from_events(cls, events: Iterable[NgEvent]) -> "NgLog":
        return cls(tuple(events))

    @classmethod
    def from_text(cls, text: str) -> "NgLog":
        from nglog.parser import parse_text
        return parse_text(text)

    @classmethod
    def local_from_bytes(cls, data: bytes) -> "NgLog":
        from nglog.parser import parse_local
        return parse_local(data)

    @classmethod
    def world_from_bytes(cls, data: bytes) -> "NgLog":
        from nglog.parser import parse_world
        return parse_world(data)

    @classmethod
    def local_from_reader(cls, reader: BinaryIO) -> "NgLog":
        from nglog.parser import read_local
        return read_local(reader)

    @classmethod
    def world_from_reader(cls, reader: BinaryIO) -> "NgLog":
        from nglog.parser import read_world
        return read_world(reader)

    # ------------------------------------------------
    # 查询
    # ------------------------------------------------
    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[NgEvent]:
        return iter(self.events)

    @overload
    def __getitem__(self, idx: int) -> NgEvent: ...

    @overload
    def __getitem__(self, idx: slice) -> "NgLog": ...

    def __getitem__(self, idx: int | slice) -> NgEvent | NgLog:
        # 切片仍是 NgLog
        if isinstance(idx, slice):
            return NgLog(self.events[idx])
        return self.events[idx]

    # ------------------------------------------------
    # 序列化（每行都带换行，包括最后一行）
    # ------------------------------------------------
    def to_text(self) -> str:
        return "".join(ev.to_line() + LINE_SEP for ev in self.events)

    def __str__(self) -> str:
        return self.to_text()
