"""
中央日志配置

提供统一的 logger 配置。
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """配置 logger：stderr 输出指定级别，可选写入滚动日志文件"""
    logger.enable("xiangqi_core")
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


__all__ = ["logger", "configure_logging"]
