#!filepath: nglog/codec/world.py
from __future__ import annotations

import numpy as np

from nglog.errors import MalformedInput
from nglog.utils.logger import logs


def decode_world(data: bytes | bytearray | memoryview) -> bytes:
    """
    world 版 ngLog 反混淆：

        file:  b0 b1 | b2 b3 | ...
        text:  b0^b1 | b2^b3 | ...

    - 输入长度必须为偶数，否则 MalformedInput("non-even length")
    - 输出长度 = 输入长度 / 2
    - 纯函数，无副作用

    目前只确认 UT99 使用该方案，不做其它变体推断。
    """
    if len(data) % 2 != 0:
        raise MalformedInput("non-even length")

    # 向量化：偶数位 ^ 奇数位
    buf = np.frombuffer(data, dtype=np.uint8)
    out = np.bitwise_xor(buf[0::2], buf[1::2]).tobytes()

    logs.debug(f"[decode_world] {len(data)} bytes -> {len(out)} bytes")
    return out
