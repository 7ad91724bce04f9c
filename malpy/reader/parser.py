"""
  Reader: lexer and recursive-descent parser

- Lazy lexing, eager parsing: `read` returns every top-level form or raises
- Emits Python primitives plus a few tagged types:

    - nil -> Nil
    - true / false -> True / False
    - integers -> int (signed 64-bit range)
    - strings -> str
    - symbols -> Symbol
    - (...) -> Python list
    - [...] -> Vector
    - {...} -> HashMap (alternating key/value items, unvalidated)

  Quote markers (' ` ~ ~@) are lexed but have no reader rule.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from malpy import SExpression
from malpy.errors import (
    NewlineInString,
    UnexpectedToken,
    UnknownEscapeSequence,
    UnterminatedInput,
    UnterminatedString,
)
from malpy.types.nil import Nil
from malpy.types.sequences import HashMap, Vector
from malpy.types.symbol import Symbol


Token = tuple[str, str]

TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<quote>~@|['`~])"  # quote markers
    r"|(?P<string>\")"  # string start, scanned by hand
    r"|(?P<literal>[^\s,()\[\]{}\"'`~;]+)"  # fallback: bare literals
    r")"
)

INTEGER_RE = re.compile(r"-?[0-9]+\Z")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

STRING_ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "\\": "\\",
}

# open token -> (close token, constructor)
SEQUENCES = {
    "lparen": ("rparen", list),
    "lbracket": ("rbracket", Vector),
    "lbrace": ("rbrace", HashMap),
}


def _scan_string(source: str, pos: int) -> tuple[str, int]:
    """Scan a string body starting just after the opening quote.

    Returns the unescaped text and the position after the closing quote.
    """
    n = len(source)
    chunks: list[str] = []
    while pos < n:
        c = source[pos]
        if c == '"':
            return "".join(chunks), pos + 1
        if c == "\n":
            raise NewlineInString()
        if c == "\\":
            if pos + 1 >= n:
                raise UnterminatedString()
            esc = source[pos + 1]
            if esc not in STRING_ESCAPES:
                raise UnknownEscapeSequence(esc)
            chunks.append(STRING_ESCAPES[esc])
            pos += 2
            continue
        chunks.append(c)
        pos += 1
    raise UnterminatedString()


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples.

    String tokens carry their unescaped text. Comments are discarded.
    """
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only separators remain
            break
        kind = m.lastgroup
        if kind == "comment":
            pos = m.end()
            continue
        if kind == "string":
            text, pos = _scan_string(source, m.end())
            yield "string", text
            continue
        yield kind, m.group(kind)
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

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

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise UnterminatedInput()

        if tok_type in SEQUENCES:
            self.advance()
            close, build = SEQUENCES[tok_type]
            return build(self.parse_seq(close))

        return self.parse_atom()

    def parse_seq(self, close: str) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise UnterminatedInput()
            if tok_type == close:
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_atom(self) -> SExpression:
        tok_type, tok_val = self.advance()

        if tok_type == "string":
            return tok_val

        if tok_type == "literal":
            if tok_val == "nil":
                return Nil
            if tok_val == "true":
                return True
            if tok_val == "false":
                return False
            if INTEGER_RE.match(tok_val):
                value = int(tok_val)
                if not INT64_MIN <= value <= INT64_MAX:
                    raise UnexpectedToken(
                        tok_val, f"integer literal {tok_val} out of 64-bit range"
                    )
                return value
            return Symbol(tok_val)

        if tok_type == "quote":
            raise UnexpectedToken(tok_val, f"quote marker {tok_val!r} is not supported")

        # a closing delimiter with no matching opener
        raise UnexpectedToken(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`.

    Raises a ParseError subclass on the first problem; no partial result is
    returned. UnterminatedInput signals that more input could complete the text.
    """
    return list(TokenStream(lex(source)).parse_all())
