"""
  Ember tokenizer

Turns source text into a list of positioned tokens:

    - (  -> ("lparen", "(")
    - )  -> ("rparen", ")")
    - 'text with (parens) and spaces'  -> ("string", "text with (parens) and spaces")
    - 42, -7, +3  -> ("integer", 42)
    - anything else  -> ("symbol", "...")

The quote character is a plain toggle: there are no escape sequences, and an
unterminated quote runs to the end of the input, where the text read so far is
classified like any bare token. Positions are UTF-8 byte offsets of the first
character of each token; a string is positioned at the first character after
its opening quote. The tokenizer never raises;
malformed numbers simply become symbols.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from ember import INT_MIN, INT_MAX

LPAREN = "lparen"
RPAREN = "rparen"
SYMBOL = "symbol"
INTEGER = "integer"
STRING = "string"

QUOTE_CHAR = "'"

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")


class Token(NamedTuple):
    kind: str
    value: str | int

    def __str__(self) -> str:
        if self.kind == STRING:
            return f"{QUOTE_CHAR}{self.value}{QUOTE_CHAR}"
        return str(self.value)


PositionalToken = tuple[int, Token]


def classify(text: str) -> Token:
    """Return an integer token if `text` is a 64-bit decimal literal, else a symbol."""
    if INTEGER_RE.match(text):
        n = int(text)
        if INT_MIN <= n <= INT_MAX:
            return Token(INTEGER, n)
    return Token(SYMBOL, text)


class _TokenizerState:
    __slots__ = ("tokens", "buffer", "buffer_bytes", "quoting")

    def __init__(self):
        self.tokens: list[PositionalToken] = []
        self.buffer: list[str] = []
        self.buffer_bytes = 0
        self.quoting = False

    def push_char(self, c: str, width: int) -> None:
        self.buffer.append(c)
        self.buffer_bytes += width

    def flush(self, offset: int, as_string: bool) -> None:
        # Strings are flushed even when empty so that '' reads as an empty string
        if self.buffer or as_string:
            text = "".join(self.buffer)
            token = Token(STRING, text) if as_string else classify(text)
            self.tokens.append((offset - self.buffer_bytes, token))
            self.buffer.clear()
            self.buffer_bytes = 0


def tokenize(source: str) -> list[PositionalToken]:
    """Split `source` into (byte offset, Token) pairs."""
    state = _TokenizerState()
    offset = 0

    for c in source:
        width = len(c.encode("utf-8", "surrogatepass"))
        if c == QUOTE_CHAR:
            state.flush(offset, state.quoting)
            state.quoting = not state.quoting
        elif state.quoting:
            state.push_char(c, width)
        elif c == "(":
            state.flush(offset, False)
            state.tokens.append((offset, Token(LPAREN, c)))
        elif c == ")":
            state.flush(offset, False)
            state.tokens.append((offset, Token(RPAREN, c)))
        elif c.isspace():
            state.flush(offset, False)
        else:
            state.push_char(c, width)
        offset += width

    # an unterminated quote leaves plain text: classify it as a symbol or integer
    state.flush(offset, False)
    return state.tokens
