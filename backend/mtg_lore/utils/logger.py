# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  集中式日志系统 - 提供统一的日志配置和管理
  Centralized Logging Module - Unified logging configuration and management

使用示例 / Usage:
    from mtg_lore.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("应用启动 / Application started")
    logger.error("错误发生 / Error occurred", exc_info=True)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from mtg_lore.config import Settings

ROOT_LOGGER_NAME = "mtg_lore"

# Define log format
# 定义日志格式
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str) -> logging.Logger:
    """
    获取指定名称的logger

    Get a logger under the package root, so that the handlers installed by
    :func:`configure_logging` apply to it.

    Args:
        name: Logger名称，通常为 __name__ / Logger name (typically __name__)

    Returns:
        logger实例 / Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(settings: Settings) -> logging.Logger:
    """
    配置包级 logger

    Configure the package root logger with a console handler and, when
    ``log_dir`` is set, a rotating file handler (10MB max, 5 backups).

    Calling it again replaces the previously installed handlers.

    Args:
        settings: 应用配置 / Application settings

    Returns:
        配置好的根logger / The configured package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if settings.debug else logging.INFO
    logger.setLevel(level)

    # Avoid stacking handlers on repeated app creation
    # 避免重复创建应用时叠加处理器
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console Handler (always enabled)
    # 控制台处理器（总是启用）
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    if settings.log_dir:
        # File Handler (rotating, max 10MB, keep 5 backups)
        # 文件处理器（轮转，最大10MB，保留5个备份）
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "mtg_lore.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
