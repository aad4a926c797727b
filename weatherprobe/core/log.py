# weatherprobe/core/log.py
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    给包的根 logger 挂一个 stderr 输出，重复调用只调整级别。
    """
    logger = logging.getLogger("weatherprobe")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    # 如果没有 handler，添加一个控制台输出
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
