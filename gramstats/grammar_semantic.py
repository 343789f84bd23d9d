#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
语义检查：定义集合与使用集合的闭包检查，通过后汇总统计
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Set

from .grammar_errors import EmptyGrammarError, UndefinedSymbolsError, UnusedSymbolsError
from .grammar_lex import Coords


@dataclass(frozen=True)
class GrammarStats:
    n_rule_sets: int
    n_nonterminals: int
    n_terminals: int

    def __str__(self) -> str:
        return f"{self.n_rule_sets} {self.n_nonterminals} {self.n_terminals}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rule_sets': self.n_rule_sets,
            'nonterminals': self.n_nonterminals,
            'terminals': self.n_terminals,
        }


class SemanticAnalyzer:
    """按顺序检查，遇到第一个错误即抛出"""

    def analyze(self, defs: Mapping[str, Coords], uses: Set[str],
                n_nonterminals: int, n_terminals: int) -> GrammarStats:
        if not defs:
            raise EmptyGrammarError()
        undefined = uses - set(defs)
        if undefined:
            raise UndefinedSymbolsError(undefined)
        unused = set(defs) - uses
        if unused:
            raise UnusedSymbolsError(unused)
        return GrammarStats(len(defs), n_nonterminals, n_terminals)
