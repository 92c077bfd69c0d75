"""
日志配置

控制台彩色输出；LOG_DIR 下按日期写两份文件：
    app_YYYY-MM-DD.log     INFO 及以上
    error_YYYY-MM-DD.log   ERROR 及以上（持久化失败的堆栈都在这里）
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from bizform.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 第三方库只保留警告以上
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite", "urllib3")


class ColoredFormatter(logging.Formatter):
    """按级别给 levelname 上色，只用于控制台"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(colored.levelname)
        if color:
            colored.levelname = f"{color}{colored.levelname}{self.RESET}"
        return super().format(colored)


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(log_level: Optional[str] = None, log_dir: Optional[str] = None) -> None:
    """
    初始化根日志器，重复调用会替换已有处理器

    Args:
        log_level: 根日志级别，默认取配置 LOG_LEVEL
        log_dir: 日志目录，默认取配置 LOG_DIR
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    log_path = Path(log_dir or settings.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)
    stamp = date.today().isoformat()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(ColoredFormatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers.clear()
    root.addHandler(console)
    root.addHandler(_file_handler(log_path / f"app_{stamp}.log", logging.INFO))
    root.addHandler(_file_handler(log_path / f"error_{stamp}.log", logging.ERROR))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"📋 日志已初始化: 级别 {level_name}，目录 {log_path}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
