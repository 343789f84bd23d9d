# !/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文法描述词法分析测试
"""

from gramstats.grammar_lex import EOF_LEXEME, Coords, LexicalAnalyzer, TokenKind


def kinds_and_positions(text):
    return [(t.kind, t.lexeme, t.coords.line, t.coords.column)
            for t in LexicalAnalyzer(text).tokens()]


def test_token_kinds_and_positions():
    text = "s : Ab_1 | ;\n// comment ; |\n  nt2:X;"
    assert kinds_and_positions(text) == [
        (TokenKind.NON_TERMINAL, 's', 1, 1),
        (TokenKind.COLON, ':', 1, 3),
        (TokenKind.TERMINAL, 'Ab_1', 1, 5),
        (TokenKind.PIPE, '|', 1, 10),
        (TokenKind.SEMI, ';', 1, 12),
        (TokenKind.NON_TERMINAL, 'nt2', 3, 3),
        (TokenKind.COLON, ':', 3, 6),
        (TokenKind.TERMINAL, 'X', 3, 7),
        (TokenKind.SEMI, ';', 3, 8),
        (TokenKind.EOF, EOF_LEXEME, 3, 9),
    ]


def test_coords_point_at_lexeme_start():
    text = "expr : term\n\trest ;\n"
    lines = text.split('\n')
    for token in LexicalAnalyzer(text).tokens():
        if token.kind == TokenKind.EOF:
            continue
        line = lines[token.coords.line - 1]
        start = token.coords.column - 1
        assert line[start:start + len(token.lexeme)] == token.lexeme


def test_eof_is_idempotent():
    scanner = LexicalAnalyzer("s")
    assert scanner.next_token().kind == TokenKind.NON_TERMINAL
    eofs = [scanner.next_token() for _ in range(3)]
    assert all(t.kind == TokenKind.EOF for t in eofs)
    assert all(t.coords == Coords(1, 2) for t in eofs)


def test_empty_and_comment_only_input():
    assert kinds_and_positions("") == [(TokenKind.EOF, EOF_LEXEME, 1, 1)]
    assert kinds_and_positions("// nothing here") == [(TokenKind.EOF, EOF_LEXEME, 1, 16)]


def test_unknown_characters_become_error_tokens():
    tokens = list(LexicalAnalyzer("s : A # ;").tokens())
    error = tokens[3]
    assert error.kind == TokenKind.ERROR
    assert error.lexeme == '#'
    assert str(error.coords) == "1:7"
    # 非 ASCII 字母不属于标识符
    tokens = list(LexicalAnalyzer("sé").tokens())
    assert [t.kind for t in tokens] == [TokenKind.NON_TERMINAL, TokenKind.ERROR, TokenKind.EOF]
    assert tokens[0].lexeme == 's'


def test_single_slash_is_an_error():
    tokens = list(LexicalAnalyzer("/ s").tokens())
    assert tokens[0].kind == TokenKind.ERROR
    assert tokens[1].kind == TokenKind.NON_TERMINAL
