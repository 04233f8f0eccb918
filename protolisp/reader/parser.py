"""
  Reader: lexer and parser

- Streaming, lazy parsing of S-expressions into the four AST node kinds:

    - numbers       -> Number(Decimal), written scale preserved
    - :name         -> Atom("name")
    - other words   -> Variable(name)
    - (head args..) -> Function(head, args)
    - ((..) args..) -> Function("", [(..), args..])   (method declarations)

- `;` starts a comment running to the end of the line.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterator, Optional

from protolisp.errors import ParseError
from protolisp.reader.ast import Ast, Atom, Function, Number, Variable


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<word>[^\s();]+)"  # numbers, atoms and names
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def classify_word(word: str) -> str:
    if NUMBER_RE.fullmatch(word):
        return "number"
    if word.startswith(":") and len(word) > 1:
        return "atom"
    return "name"


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("comment"):
            continue
        if m.group("lparen"):
            yield "lparen", "("
        elif m.group("rparen"):
            yield "rparen", ")"
        else:
            word = m.group("word")
            yield classify_word(word), word


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Ast]:
        """Read one expression; None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None
        if tok_type == "number":
            return Number(Decimal(tok_val))
        if tok_type == "atom":
            return Atom(tok_val[1:])
        if tok_type == "name":
            return Variable(tok_val)
        if tok_type == "rparen":
            raise ParseError("Unexpected ')'")
        return self._parse_list()

    def _parse_list(self) -> Function:
        items: list[Ast] = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise ParseError("Unmatched '('")
            if tok_type == "rparen":
                self.advance()
                break
            items.append(self.parse_expr())

        if not items:
            raise ParseError("Empty form '()' has no name")
        head, *arguments = items
        if isinstance(head, Variable):
            return Function(head.name, arguments)
        if isinstance(head, Function):
            return Function("", [head, *arguments])
        raise ParseError(f"Invalid form head {head}, expected a name or a form")

    def parse_all(self) -> Iterator[Ast]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Ast:
    """Parse exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise ParseError("Expected an expression, found end of input")
    if stream.peek()[0] is not None:
        raise ParseError("Unexpected input after expression")
    return expr


def parse_all(source: str) -> list[Ast]:
    return list(TokenStream(lex(source)).parse_all())
