#!filepath: nglog/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - import 时不触碰任何 sink（nglog 作为库被宿主程序导入）
    - setup_stderr() 由 CLI 调用，替换为单一 stderr sink
    - configure_file() 按配置追加文件 sink，支持切割 / 保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(self, log_level: str = "WARNING"):
        self.level = log_level
        self._file_sink_id: int | None = None

    def setup_stderr(self) -> None:
        """
        应用入口专用：清空已有 sink，只保留 stderr，并启用 nglog 日志
        """
        logger.remove()
        self._file_sink_id = None
        logger.enable("nglog")
        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        )

    def configure_file(self, config) -> str:
        """
        按 LogConfig 追加文件日志，重复调用只保留最后一个文件 sink。
        返回日志文件路径模板。
        """
        if self._file_sink_id is not None:
            logger.remove(self._file_sink_id)

        os.makedirs(config.dir, exist_ok=True)
        sink = f"{config.dir}/{{time:YYYY-MM-DD}}.log"
        self._file_sink_id = logger.add(
            sink=sink,
            rotation=config.rotation,
            retention=config.retention,
            level=config.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )
        logger.debug(f"[Logging] file sink -> {sink}")
        return sink

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.debug(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs
logs = Logging()
