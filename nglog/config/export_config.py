#!filepath: nglog/config/export_config.py
from typing import Literal

from pydantic import BaseModel


class ExportConfig(BaseModel):
    compression: Literal["none", "snappy", "gzip", "zstd", "brotli", "lz4"] = "zstd"
