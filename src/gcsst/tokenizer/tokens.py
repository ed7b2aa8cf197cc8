"""Token model produced by the CSS lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed set of token kinds the engine can observe."""

    IDENT = "ident"
    FUNCTION = "function"
    AT_KEYWORD = "at-keyword"
    HASH = "hash"
    STRING = "string"
    NUMBER = "number"
    DELIM = "delim"
    COLON = "colon"
    SEMICOLON = "semicolon"
    COMMA = "comma"
    CURLY_BLOCK = "{"
    SQUARE_BLOCK = "["
    PAREN_BLOCK = "("
    CLOSE_CURLY = "}"
    CLOSE_SQUARE = "]"
    CLOSE_PAREN = ")"
    CDO = "<!--"
    CDC = "-->"


# Lark terminal name -> token kind.
TERMINAL_KINDS: dict[str, TokenKind] = {
    "IDENT": TokenKind.IDENT,
    "FUNCTION": TokenKind.FUNCTION,
    "AT_KEYWORD": TokenKind.AT_KEYWORD,
    "HASH": TokenKind.HASH,
    "STRING": TokenKind.STRING,
    "NUMBER": TokenKind.NUMBER,
    "DELIM": TokenKind.DELIM,
    "COLON": TokenKind.COLON,
    "SEMICOLON": TokenKind.SEMICOLON,
    "COMMA": TokenKind.COMMA,
    "LBRACE": TokenKind.CURLY_BLOCK,
    "LSQB": TokenKind.SQUARE_BLOCK,
    "LPAR": TokenKind.PAREN_BLOCK,
    "RBRACE": TokenKind.CLOSE_CURLY,
    "RSQB": TokenKind.CLOSE_SQUARE,
    "RPAR": TokenKind.CLOSE_PAREN,
    "CDO": TokenKind.CDO,
    "CDC": TokenKind.CDC,
}

# Block openers and the closer that ends each of them.
BLOCK_CLOSERS: dict[TokenKind, TokenKind] = {
    TokenKind.CURLY_BLOCK: TokenKind.CLOSE_CURLY,
    TokenKind.SQUARE_BLOCK: TokenKind.CLOSE_SQUARE,
    TokenKind.PAREN_BLOCK: TokenKind.CLOSE_PAREN,
    TokenKind.FUNCTION: TokenKind.CLOSE_PAREN,
}


@dataclass(frozen=True)
class Token:
    """A single lexed token.

    ``value`` is the unescaped name for identifiers, functions (without the
    ``(``), at-keywords (without the ``@``) and hashes (without the ``#``);
    for everything else it is the raw source text. ``start`` and ``end`` are
    offsets into the source the token was lexed from.
    """

    kind: TokenKind
    value: str
    start: int
    end: int
    line: int = 1
    column: int = 1

    @property
    def opens_block(self) -> bool:
        return self.kind in BLOCK_CLOSERS
