#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
诊断日志：
- 模块级 logger "grammar_stats"，各阶段用 debug 级别记录
- 可开启文件日志，便于追踪 token 流与规则集定义
"""

import logging
import os

DEFAULT_LOG_DIR = "__logs__"
DEFAULT_LOG_PATH = os.path.join(DEFAULT_LOG_DIR, "grammar_stats.log")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

logger = logging.getLogger("grammar_stats")
# 未开启文件日志时不向 stderr 输出
logger.addHandler(logging.NullHandler())


class _Diag:
    """文件日志开关（仅初始化一次）"""
    _log_handler: logging.Handler | None = None

    @classmethod
    def enable_log(cls, path: str | None = None, level: int = logging.INFO) -> None:
        if cls._log_handler:
            logger.setLevel(level)
            return
        if path is None:
            path = DEFAULT_LOG_PATH
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
        cls._log_handler = handler

    @classmethod
    def disable_log(cls) -> None:
        """关闭文件日志（移除并关闭 handler）"""
        if cls._log_handler:
            logger.removeHandler(cls._log_handler)
            cls._log_handler.close()
        cls._log_handler = None


enable_log = _Diag.enable_log
disable_log = _Diag.disable_log
