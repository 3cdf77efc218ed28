"""
  mal Reader, Lexer and Parser

- A single regular expression splits source text into tokens
- Recursive descent over the token stream with one read cursor
- Emits Python primitives:

    - numbers -> int
    - strings -> str
    - true / false -> bool
    - nil -> Nil
    - lists -> Python list ([...] also reads as a list)
    - everything else -> Symbol
    - 'x, `x, ~x, ~@x, @x -> [Symbol(<form name>), x]
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from mal import Expression
from mal.errors import MalEmptyInput, MalSyntaxError
from mal.reader.reader_macros import (
    CLOSING_DELIMITERS,
    LIST_DELIMITERS,
    QUOTE_FORMS,
    UNSUPPORTED_TOKENS,
)
from mal.types.nil import Nil
from mal.types.number import INT_MAX, in_range
from mal.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # single-character specials
    r'|"(?:\\.|[^\\"])*"?'  # strings, possibly unterminated
    r"|;.*"  # line comment
    r"|[^\s\[\]{}('\"`,;)]*"  # symbols, numbers, booleans, nil
    r")"
)

STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"')
NUMBER_START_RE = re.compile(r"-?[0-9]")
NUMBER_RE = re.compile(r"-?[0-9]+")
MAX_DIGITS = len(str(INT_MAX))
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ESCAPES: dict[str, str] = {
    "n": "\n",
}

LITERALS: dict[str, Expression] = {
    "true": True,
    "false": False,
    "nil": Nil,
}


def lex(source: str) -> Iterator[str]:
    """Token generator: yields token texts, skipping separators and comments."""
    for match in TOKEN_RE.finditer(source):
        token = match.group(1)
        if not token or token.startswith(";"):
            continue
        yield token


def read_atom(token: str) -> Expression:
    if NUMBER_START_RE.match(token):
        if not NUMBER_RE.fullmatch(token):
            raise MalSyntaxError(f"Malformed number: {token}")
        if len(token.lstrip("-").lstrip("0")) > MAX_DIGITS:
            raise MalSyntaxError(f"Number out of range: {token[:20]}...")
        value = int(token)
        if not in_range(value):
            raise MalSyntaxError(f"Number out of range: {token}")
        return value

    if token.startswith('"'):
        if not STRING_RE.fullmatch(token):
            raise MalSyntaxError("Expected '\"', got EOF")
        return ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(1)), token[1:-1])

    if token in LITERALS:
        return LITERALS[token]
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.position = 0

    def peek(self) -> Optional[str]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Optional[str]:
        token = self.peek()
        if token is not None:
            self.position += 1
        return token

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def read_form(self) -> Expression:
        token = self.peek()
        if token is None:
            raise MalSyntaxError("Unexpected end of input")

        # Prefix sugar wraps the following form
        if token in QUOTE_FORMS:
            self.advance()
            return [QUOTE_FORMS[token], self.read_form()]

        if token in LIST_DELIMITERS:
            return self.read_list(LIST_DELIMITERS[token])

        if token in CLOSING_DELIMITERS:
            raise MalSyntaxError(f"Unexpected '{token}'")

        if token in UNSUPPORTED_TOKENS:
            raise MalSyntaxError(f"Unsupported syntax '{token}'")

        self.advance()
        return read_atom(token)

    def read_list(self, closer: str) -> list[Expression]:
        self.advance()  # consume the opening delimiter
        items: list[Expression] = []
        while True:
            token = self.peek()
            if token is None:
                raise MalSyntaxError(f"Expected '{closer}', got EOF")
            if token == closer:
                self.advance()
                return items
            items.append(self.read_form())

    def read_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.read_form()


def parse(text: str) -> Expression:
    """Read the first form in `text`; trailing input is ignored."""
    stream = TokenStream(lex(text))
    if stream.at_end():
        raise MalEmptyInput("Empty input")
    return stream.read_form()


def read_all(text: str) -> Iterator[Expression]:
    """Read every top-level form in `text`."""
    return TokenStream(lex(text)).read_all()
