# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    # CLI 回调会 enable，测试之间恢复库默认的静默状态
    logger.disable("nglog")


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture(scope="session")
def example_log_path(data_dir: Path) -> Path:
    return data_dir / "ngLog_Example_Log_File.log.txt"


@pytest.fixture
def encode_world():
    """
    测试专用：把明文字节扩展为 world 格式
        b -> (b ^ K, K)
    库本身不提供 encode。
    """

    def _encode(data: bytes, key: int = 0x2A) -> bytes:
        out = bytearray()
        for b in data:
            out.append(b ^ key)
            out.append(key)
        return bytes(out)

    return _encode
