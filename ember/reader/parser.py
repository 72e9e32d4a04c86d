"""
  Ember reader: recursive-descent parser over the positioned token stream.

Emits Python primitives instead of dedicated AST nodes:

    - lists -> Python list
    - integers -> int
    - strings -> str
    - true / false -> True / False
    - nil -> Nil
    - other symbols -> Symbol

One token of lookahead is enough for the whole grammar:

    any  := list | atom
    list := "(" any* ")"
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ember import SExpression
from ember.errors import EmberUnexpectedEOF, EmberUnexpectedToken
from ember.reader.lexer import (
    LPAREN,
    RPAREN,
    SYMBOL,
    INTEGER,
    STRING,
    PositionalToken,
    Token,
    tokenize,
)
from ember.types.nil import Nil
from ember.types.symbol import Symbol

# Names the reader translates into literal values
LITERAL_SYMBOLS: dict[str, SExpression] = {
    "true": True,
    "false": False,
    "nil": Nil,
}

TOKEN_TEXT = {LPAREN: "(", RPAREN: ")"}


class TokenStream:
    def __init__(self, tokens: Iterable[PositionalToken]):
        self.tokens: list[PositionalToken] = list(tokens)
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Token:
        if self.at_end():
            raise EmberUnexpectedEOF()
        return self.tokens[self.pos][1]

    def advance(self) -> Token:
        token = self.peek()
        self.pos += 1
        return token

    def expect(self, kind: str) -> None:
        """Consume the next token, which must be of `kind`."""
        if self.at_end():
            raise EmberUnexpectedEOF(TOKEN_TEXT.get(kind, kind))
        offset, token = self.tokens[self.pos]
        if token.kind != kind:
            raise EmberUnexpectedToken(offset, TOKEN_TEXT.get(kind, kind), str(token))
        self.pos += 1

    def parse_any(self) -> SExpression:
        if self.peek().kind == LPAREN:
            return self.parse_list()
        return self.parse_atom()

    def parse_list(self) -> list[SExpression]:
        self.expect(LPAREN)
        items: list[SExpression] = []
        while self.peek().kind != RPAREN:
            items.append(self.parse_any())
        self.expect(RPAREN)
        return items

    def parse_atom(self) -> SExpression:
        token = self.advance()
        if token.kind == SYMBOL:
            return translate_symbol(token.value)
        if token.kind in (INTEGER, STRING):
            return token.value
        # a paren where an atom was expected
        raise EmberUnexpectedToken(self.tokens[self.pos - 1][0], "atom", str(token))

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_any()


def translate_symbol(name: str) -> SExpression:
    literal: Optional[SExpression] = LITERAL_SYMBOLS.get(name)
    if literal is not None:
        return literal
    return Symbol(name)


def parse(text: str) -> SExpression:
    """Parse exactly one top-level form from `text`; trailing tokens are ignored."""
    return TokenStream(tokenize(text.strip())).parse_any()


def parse_all(text: str) -> list[SExpression]:
    """Parse every top-level form in `text`, in order."""
    return list(TokenStream(tokenize(text)).parse_all())
