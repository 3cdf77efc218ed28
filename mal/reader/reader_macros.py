"""Prefix-character reader sugar.

Each entry maps a single token to the symbol it wraps around the next
form: 'x reads as (quote x), @a reads as (deref a), and so on.
"""

from __future__ import annotations

from mal.types.symbol import Symbol

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

# Opening token -> the token that must close it
LIST_DELIMITERS: dict[str, str] = {
    "(": ")",
    "[": "]",
}

CLOSING_DELIMITERS = frozenset(LIST_DELIMITERS.values()) | {"}"}

# Tokenized so they produce a clear error instead of reading as symbols
UNSUPPORTED_TOKENS = frozenset({"{", "^"})
