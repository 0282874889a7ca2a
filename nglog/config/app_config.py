#!filepath: nglog/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .export_config import ExportConfig


def default_config_path() -> str:
    """
    nglog/config/base.yml（随包安装，不依赖当前工作目录）
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    export: ExportConfig = ExportConfig()

    @classmethod
    def load(cls, path: str | None = None, env_file: str | None = ".env") -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 base.yml
        - NGLOG_LOG_LEVEL / NGLOG_LOG_DIR 覆盖 log 配置
        """
        # 1) 先加载 .env（不存在则忽略）
        if env_file is not None:
            load_dotenv(env_file)

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        log_raw = dict(raw.get("log") or {})
        if os.getenv("NGLOG_LOG_LEVEL"):
            log_raw["level"] = os.getenv("NGLOG_LOG_LEVEL")
        if os.getenv("NGLOG_LOG_DIR"):
            log_raw["dir"] = os.getenv("NGLOG_LOG_DIR")
        raw["log"] = log_raw

        return cls(**raw)
