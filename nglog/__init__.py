#!filepath: nglog/__init__.py
from loguru import logger

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .errors import NgLogError, MalformedInput, EncodingError
from .codec import decode_world
from .model import NgEvent, NgLog
from .parser import (
    parse_event,
    parse_text,
    parse_local,
    parse_world,
    read_local,
    read_world,
)
from .serializer import serialize_event, serialize_log

__version__ = "0.1.0"

# 库默认静默；宿主程序需要时 logger.enable("nglog")
logger.disable("nglog")

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "NgLogError", "MalformedInput", "EncodingError",
    "decode_world",
    "NgEvent", "NgLog",
    "parse_event", "parse_text", "parse_local", "parse_world",
    "read_local", "read_world",
    "serialize_event", "serialize_log",
]
