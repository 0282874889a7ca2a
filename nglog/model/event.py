#!filepath: nglog/model/event.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from nglog.errors import MalformedInput

FIELD_SEP = "\t"


@dataclass(frozen=True, slots=True)
class NgEvent:
    """
    ngLog 单条事件（值对象，构造后不可变）

    timestamp    : 原样保留的文本（不做数值校验）
    event_class  : 可选分类；源行恰好 2 个字段时为 None
    event_id     : 事件类型
    event_params : 有序参数，可为空
    """
    timestamp: str
    event_class: str | None
    event_id: str
    event_params: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # 任意可迭代 → tuple（拷贝语义，不与调用方共享）
        # 单个 str 会被拆成字符，直接拒绝
        if isinstance(self.event_params, (str, bytes)):
            raise TypeError(
                f"event_params must be an iterable of str, not {type(self.event_params).__name__}"
            )
        if not isinstance(self.event_params, tuple):
            object.__setattr__(self, "event_params", tuple(self.event_params))

    @classmethod
    def create(
            cls,
            timestamp: str,
            event_id: str,
            *,
            event_class: str | None = None,
            params: Iterable[str] = (),
    ) -> "NgEvent":
        return cls(
            timestamp=timestamp,
            event_class=event_class,
            event_id=event_id,
            event_params=params,
        )

    # ============================
    # 行 → 事件
    # ============================
    @classmethod
    def from_line(cls, line: str) -> "NgEvent":
        """
        字段规则（按 TAB 切分，保留空字段）：
          < 2 字段 → MalformedInput
          = 2 字段 → ts, id
          ≥ 3 字段 → ts, class, id, params...
        """
        columns = line.split(FIELD_SEP)

        if len(columns) < 2:
            raise MalformedInput("bad event string")

        if len(columns) == 2:
            return cls(columns[0], None, columns[1], ())

        return cls(columns[0], columns[1], columns[2], tuple(columns[3:]))

    # ============================
    # 事件 → 行
    # ============================
    def fields(self) -> list[str]:
        out = [self.timestamp]
        if self.event_class is not None:
            out.append(self.event_class)
        out.append(self.event_id)
        out.extend(self.event_params)
        return out

    def to_line(self) -> str:
        return FIELD_SEP.join(self.fields())

    def __str__(self) -> str:
        return self.to_line()

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "event_class": self.event_class,
            "event_id": self.event_id,
            "event_params": list(self.event_params),
        }
