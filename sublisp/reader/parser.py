"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing: the lexer is a generator, so a bad character after
  the first complete expression is only reported if that text is read.
- Emits sublisp Tokens:

    - lists        -> List
    - numbers      -> Num (source text kept, e.g. "-1.50")
    - strings      -> Str (quotes kept)
    - symbols      -> Sym, including #t / #f / #nil
    - + - * / % < > -> Sym (one-character special symbols)
    - 'expr        -> Quote holding the rendered text of expr
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from sublisp.errors import SublispEndOfInput, SublispUnexpectedChar
from sublisp.types.token import Token, List, Num, Str, Sym, Quote


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # 'expr
    r'|(?P<string>"[^"]*")'  # double-quoted strings, no escapes
    r"|(?P<number>-?\d+(?:\.\d*)?)"  # digits with at most one decimal point
    r"|(?P<symbol>(?:[^\W\d_]|#)(?:[^\W_]|[#-])*)"  # letter or '#', then alnum, '-', '#'
    r"|(?P<special>[+\-*/%<>])"  # one-character special symbols
)

# Atoms that must be followed by a delimiter or the end of input
ATOM_KINDS = ("number", "symbol", "special")


def is_delimiter(ch: str) -> bool:
    return ch.isspace() or ch in "()"


Lexeme = tuple[str, str, int]


def lex(source: str) -> Iterator[Lexeme]:
    """Token generator: yields (token_type, token_value, column) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        ch = source[pos]
        if ch.isspace():
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            if ch == '"':
                raise SublispEndOfInput("unterminated string.")
            raise SublispUnexpectedChar(ch, pos)

        kind = m.lastgroup
        end = m.end()
        if kind in ATOM_KINDS and end < n and not is_delimiter(source[end]):
            raise SublispUnexpectedChar(source[end], end)

        yield kind, m.group(kind), pos
        pos = end


class TokenStream:
    def __init__(self, token_iter: Iterator[Lexeme]):
        self.tokens = iter(token_iter)
        self.buffer: list[Lexeme] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def skip_stray_rparens(self) -> None:
        # A ')' outside any list is a delimiter like whitespace
        while self.peek()[0] == "rparen":
            self.advance()

    def parse_expr(self) -> Token:
        self.skip_stray_rparens()
        tok_type, tok_val, _ = self.advance()

        if tok_type is None:
            raise SublispEndOfInput()

        if tok_type == "lparen":
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type is None:
                    raise SublispEndOfInput("expected closing ')'.")
                if next_type == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return List(items)

        if tok_type == "quote":
            expr = self.parse_expr()
            return Quote(str(expr))

        if tok_type == "number":
            return Num(tok_val)

        if tok_type == "string":
            return Str(tok_val)

        # symbol / special
        return Sym(tok_val)

    def parse_all(self) -> Iterator[Token]:
        while True:
            self.skip_stray_rparens()
            if self.peek()[0] is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Token:
    """Read the first expression in `source`."""
    return TokenStream(lex(source)).parse_expr()


def parse_all(source: str) -> Iterator[Token]:
    """Read every expression in `source`, lazily."""
    return TokenStream(lex(source)).parse_all()
