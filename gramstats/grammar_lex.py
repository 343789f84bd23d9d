#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
词法与Token定义（文法描述文件）
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Pattern, Tuple


class TokenKind(Enum):
    #结束标记
    EOF = "EOF"
    COLON = "COLON"
    PIPE = "PIPE"
    SEMI = "SEMI"
    #小写开头的标识符
    NON_TERMINAL = "NON_TERMINAL"
    #大写开头的标识符
    TERMINAL = "TERMINAL"
    #未识别字符，交给语法分析报错
    ERROR = "ERROR"


@dataclass(frozen=True)
class Coords:
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


#定义token数据结构
@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    coords: Coords


EOF_LEXEME = "<EOF>"

#优先级匹配模式：按顺序尝试，先匹配者胜；None 表示丢弃
PATTERNS: List[Tuple[str, Optional[TokenKind]]] = [
    (r'\Z', TokenKind.EOF),
    (r'\s+', None),
    (r'//.*', None),
    (r':', TokenKind.COLON),
    (r'\|', TokenKind.PIPE),
    (r';', TokenKind.SEMI),
    (r'[a-z]\w*', TokenKind.NON_TERMINAL),
    (r'[A-Z]\w*', TokenKind.TERMINAL),
    (r'.', TokenKind.ERROR),
]

#编译正则表达式，只做一次
COMPILED_PATTERNS: List[Tuple[Pattern[str], Optional[TokenKind]]] = [
    (re.compile(pattern, re.ASCII), kind) for pattern, kind in PATTERNS
]


class LexicalAnalyzer:
    """词法分析器：每次调用 next_token 产生一个 token"""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def next_token(self) -> Token:
        while True:
            for pattern, kind in COMPILED_PATTERNS:
                match = pattern.match(self.text, self.pos)
                if match is None:
                    continue
                coords = Coords(self.line, self.column)
                lexeme = match.group(0)
                self._advance(lexeme)
                if kind is None:
                    break
                if kind == TokenKind.EOF:
                    lexeme = EOF_LEXEME
                return Token(kind, lexeme, coords)
            # 末尾的 '.' 规则兜底，这里总能匹配到某条规则

    def tokens(self) -> Iterator[Token]:
        """产生全部 token，包括最后的 EOF"""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def _advance(self, lexeme: str) -> None:
        self.pos += len(lexeme)
        newlines = lexeme.count('\n')
        if newlines:
            self.line += newlines
            self.column = len(lexeme) - lexeme.rfind('\n')
        else:
            self.column += len(lexeme)
