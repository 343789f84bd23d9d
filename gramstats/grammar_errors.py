#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文法分析错误：第一个错误即终止整个分析，不做恢复
"""

from typing import Iterable

from .grammar_lex import Coords


def format_names(names: Iterable[str]) -> str:
    #排序后输出，保证信息稳定
    return "{" + ", ".join(sorted(names)) + "}"


class GrammarParseError(Exception):
    error_type = "GRAMMAR_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GrammarSyntaxError(GrammarParseError):
    """词法或语法不匹配，携带出错 token 的位置和词素"""
    error_type = "SYNTAX_ERROR"

    def __init__(self, coords: Coords, lexeme: str):
        super().__init__(f"{coords}: syntax error at '{lexeme}'")
        self.coords = coords
        self.lexeme = lexeme


class DuplicateDefinitionError(GrammarParseError):
    error_type = "DUPLICATE_DEFINITION"

    def __init__(self, name: str, coords: Coords, first_coords: Coords):
        super().__init__(f"{coords}: multiple rule-sets for {name}; "
                         f"first defined at {first_coords}")
        self.name = name
        self.coords = coords
        self.first_coords = first_coords


class EmptyGrammarError(GrammarParseError):
    error_type = "EMPTY_GRAMMAR"

    def __init__(self):
        super().__init__("no rule-sets found")


class UndefinedSymbolsError(GrammarParseError):
    """使用了但没有规则集的非终结符"""
    error_type = "UNDEFINED_SYMBOLS"

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(names)
        super().__init__(f"no rules for {format_names(self.names)}")


class UnusedSymbolsError(GrammarParseError):
    """定义了但从未被引用的非终结符"""
    error_type = "UNUSED_SYMBOLS"

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(names)
        super().__init__(f"no uses of rules for {format_names(self.names)}")
