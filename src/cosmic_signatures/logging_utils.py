"""日志入口。"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import TrackerConfig

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "cosmic_signatures") -> logging.Logger:
    """获取模块日志器；处理器只挂在包根日志器上。"""

    return logging.getLogger(name)


def setup_logging(config: TrackerConfig) -> logging.Logger:
    """把包根日志器接到日志文件上。

    交互外壳占用标准输出，因此日志只写文件（默认 app.log）。
    环境变量 LOG_LEVEL 优先于配置中的级别。
    """

    logger = logging.getLogger("cosmic_signatures")
    if logger.handlers:
        return logger

    level_name = os.getenv("LOG_LEVEL", config.log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    log_path = Path(config.log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger
