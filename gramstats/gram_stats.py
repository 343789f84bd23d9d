#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文法统计薄封装：对外导出与命令行入口
"""

import sys

from .grammar_engine import AnalysisResult, GrammarChecker, main  # noqa: F401
from .grammar_semantic import GrammarStats  # noqa: F401

__all__ = [
    'AnalysisResult',
    'GrammarChecker',
    'GrammarStats',
    'main',
]


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
