#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析引擎：词法 -> 语法识别 -> 语义检查 -> 统计结果
"""

import argparse
import json
import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .diag import DEFAULT_LOG_PATH, enable_log, logger
from .grammar_errors import (
    GrammarParseError,
    GrammarSyntaxError,
    UndefinedSymbolsError,
    UnusedSymbolsError,
)
from .grammar_lex import LexicalAnalyzer, TokenKind
from .grammar_parser import SyntaxAnalyzer
from .grammar_semantic import GrammarStats, SemanticAnalyzer

USAGE_PROG = "grammar-stats"


@dataclass(frozen=True)
class AnalysisResult:
    """要么有 stats，要么有 error，二者恰有其一"""
    source_text: str
    stats: Optional[GrammarStats] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if (self.stats is None) == (self.error is None):
            raise ValueError("exactly one of stats and error must be set")

    @property
    def success(self) -> bool:
        return self.stats is not None

    @property
    def message(self) -> str:
        if self.error is None:
            return ''
        if isinstance(self.error, GrammarParseError):
            return self.error.message
        return str(self.error)

    @property
    def error_type(self) -> Optional[str]:
        if self.error is None:
            return None
        if isinstance(self.error, GrammarParseError):
            return self.error.error_type
        return 'INTERNAL_ERROR'

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {'stats': self.stats.to_dict(), 'success': True}
        result: Dict[str, Any] = {
            'error_type': self.error_type,
            'message': self.message,
            'success': False,
        }
        if isinstance(self.error, GrammarSyntaxError):
            line, col = self.error.coords.line, self.error.coords.column
            src_lines = self.source_text.split('\n') if self.source_text else []
            result['line'] = line
            result['column'] = col
            result['line_text'] = src_lines[line - 1] if 1 <= line <= len(src_lines) else ''
            result['pointer'] = (' ' * (col - 1)) + '^'
        elif isinstance(self.error, (UndefinedSymbolsError, UnusedSymbolsError)):
            result['names'] = sorted(self.error.names)
        return result


class GrammarChecker:
    """对一个文法文件做一次完整分析；compute_stats 的结果会被缓存"""

    def __init__(self, path: Optional[str] = None, text: Optional[str] = None,
                 trace_tokens: bool = False):
        if text is None:
            if path is None:
                raise ValueError("either path or text is required")
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        self.path = path
        self.text = text
        self.trace_tokens = trace_tokens
        self.semantic_analyzer = SemanticAnalyzer()
        self._result: Optional[AnalysisResult] = None

    @classmethod
    def from_text(cls, text: str, trace_tokens: bool = False) -> "GrammarChecker":
        return cls(text=text, trace_tokens=trace_tokens)

    def compute_stats(self) -> AnalysisResult:
        if self._result is None:
            self._result = self._analyze()
        return self._result

    def _analyze(self) -> AnalysisResult:
        #流程总控
        try:
            parser = SyntaxAnalyzer(LexicalAnalyzer(self.text), self.trace_tokens)
            parser.parse()
            stats = self.semantic_analyzer.analyze(
                parser.nonterminal_defs, parser.nonterminal_uses,
                parser.n_nonterminals, parser.n_terminals)
        except GrammarParseError as e:
            logger.info("%s: %s", self.path or '<text>', e.message)
            return AnalysisResult(self.text, error=e)
        except Exception as e:
            logger.exception("internal error while analyzing %s", self.path or '<text>')
            return AnalysisResult(self.text, error=e)
        logger.info("%s: %s", self.path or '<text>', stats)
        return AnalysisResult(self.text, stats=stats)

    def token_dump(self) -> List[Dict[str, Any]]:
        return [{'kind': t.kind.value, 'lexeme': t.lexeme,
                 'line': t.coords.line, 'column': t.coords.column}
                for t in LexicalAnalyzer(self.text).tokens() if t.kind != TokenKind.EOF]


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog=USAGE_PROG,
                                 description="check a grammar specification and print its statistics")
    ap.add_argument("grammar_file", metavar="GRAMMAR_FILE", help="grammar specification file")
    ap.add_argument("--json", action="store_true", help="print the analysis result as JSON")
    ap.add_argument("--tokens", action="store_true", help="print the token stream as JSON first")
    ap.add_argument("--trace-tokens", action="store_true", help="log every token read by the parser")
    ap.add_argument("--log", nargs="?", const=DEFAULT_LOG_PATH, default=None, metavar="PATH",
                    help=f"write a log file (default {DEFAULT_LOG_PATH})")
    ap.add_argument("--debug", action="store_true", help="show tracebacks for internal errors")
    args = ap.parse_args(argv)

    if args.log:
        level = logging.DEBUG if (args.trace_tokens or args.debug) else logging.INFO
        try:
            enable_log(args.log, level)
        except OSError as e:
            print(f"{args.log}: {e}", file=sys.stderr)
            return 1

    try:
        checker = GrammarChecker(args.grammar_file, trace_tokens=args.trace_tokens)
    except (OSError, UnicodeDecodeError) as e:
        print(f"{args.grammar_file}: {e}", file=sys.stderr)
        return 1

    if args.tokens:
        print(json.dumps(checker.token_dump(), ensure_ascii=False))

    result = checker.compute_stats()
    if args.json:
        out = sys.stdout if result.success else sys.stderr
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), file=out)
    elif result.success:
        print(result.stats)
    else:
        print(result.message, file=sys.stderr)
        if args.debug and result.error_type == 'INTERNAL_ERROR':
            traceback.print_exception(type(result.error), result.error, result.error.__traceback__)
    return 0 if result.success else 1
