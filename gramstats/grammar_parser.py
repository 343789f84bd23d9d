#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
语法分析器：识别如下元文法，只做识别与统计，不构造语法树

  grammar
    : EOF
    | ruleSet grammar
    ;

  ruleSet
    : NON_TERMINAL ':' rightHandSide restRightHandSides
    ;

  restRightHandSides
    : ';'
    | '|' rightHandSide restRightHandSides
    ;

  rightHandSide
    : TERMINAL rightHandSide
    | NON_TERMINAL rightHandSide
    | //empty
    ;

每个分支仅由当前 lookahead 的种类决定（LL(1)）。
尾部递归的产生式改写为循环，避免长输入导致调用栈过深。
"""

from typing import Dict, Set

from .diag import logger
from .grammar_errors import DuplicateDefinitionError, GrammarSyntaxError
from .grammar_lex import Coords, LexicalAnalyzer, Token, TokenKind


class SyntaxAnalyzer:
    """递归下降识别器"""

    def __init__(self, scanner: LexicalAnalyzer, trace_tokens: bool = False):
        self.scanner = scanner
        self.trace_tokens = trace_tokens
        self.nonterminal_defs: Dict[str, Coords] = {}
        self.nonterminal_uses: Set[str] = set()
        self.n_nonterminals = 0
        self.n_terminals = 0
        self.lookahead: Token = self.next_token()
        # 开始符号隐式视为已使用
        self.nonterminal_uses.add(self.lookahead.lexeme)

    def parse(self) -> None:
        self.grammar()

    def next_token(self) -> Token:
        token = self.scanner.next_token()
        if self.trace_tokens:
            logger.debug("token: %s '%s' at %s", token.kind.value, token.lexeme, token.coords)
        self.lookahead = token
        return token

    def match(self, kind: TokenKind) -> Token:
        token = self.lookahead
        if token.kind != kind:
            self.syntax_error()
        # EOF 之后没有可读的 token
        if kind != TokenKind.EOF:
            self.next_token()
        return token

    def syntax_error(self) -> None:
        raise GrammarSyntaxError(self.lookahead.coords, self.lookahead.lexeme)

    def grammar(self) -> None:
        while self.lookahead.kind != TokenKind.EOF:
            self.rule_set()
        self.match(TokenKind.EOF)

    def rule_set(self) -> None:
        token = self.lookahead
        first_def = self.nonterminal_defs.get(token.lexeme)
        if first_def is not None:
            raise DuplicateDefinitionError(token.lexeme, token.coords, first_def)
        self.match(TokenKind.NON_TERMINAL)
        self.nonterminal_defs[token.lexeme] = token.coords
        logger.debug("rule-set %s defined at %s", token.lexeme, token.coords)
        self.n_nonterminals += 1
        self.match(TokenKind.COLON)
        self.right_hand_side()
        self.rest_right_hand_sides()

    def rest_right_hand_sides(self) -> None:
        while self.lookahead.kind == TokenKind.PIPE:
            self.match(TokenKind.PIPE)
            self.right_hand_side()
        if self.lookahead.kind != TokenKind.SEMI:
            self.syntax_error()
        self.match(TokenKind.SEMI)

    def right_hand_side(self) -> None:
        while True:
            token = self.lookahead
            if token.kind == TokenKind.TERMINAL:
                self.n_terminals += 1
                self.match(TokenKind.TERMINAL)
            elif token.kind == TokenKind.NON_TERMINAL:
                self.n_nonterminals += 1
                self.nonterminal_uses.add(token.lexeme)
                self.match(TokenKind.NON_TERMINAL)
            else:
                #空产生式
                return
