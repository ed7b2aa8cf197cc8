"""CSS lexer built on Lark's basic lexer.

The grammar in ``css.lark`` only declares terminals; parsing is left to the
engine, which needs raw source positions and lenient block handling rather
than a parse tree.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark
from lark.exceptions import LarkError

from gcsst.tokenizer.errors import ParseError
from gcsst.tokenizer.stream import TokenStream
from gcsst.tokenizer.tokens import TERMINAL_KINDS, Token, TokenKind

__all__ = ["lex", "tokenize", "unescape"]

GRAMMAR_PATH = Path(__file__).parent / "css.lark"

REPLACEMENT_CHAR = "\uFFFD"
_RETURNS = re.compile("\r\n|\f|\r")
_ESCAPE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n]?|(.))", re.DOTALL)

# Leading/trailing markers dropped from the token value.
_PREFIXES = {TokenKind.AT_KEYWORD: "@", TokenKind.HASH: "#"}
_NAMED = (TokenKind.IDENT, TokenKind.FUNCTION, TokenKind.AT_KEYWORD, TokenKind.HASH)


@lru_cache(maxsize=1)
def _lexer() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="basic",
        start="start",
    )


def unescape(raw: str) -> str:
    """Decode CSS escapes in an identifier (``\\=`` -> ``=``, ``\\31 `` -> ``1``)."""

    def replace(match: re.Match[str]) -> str:
        if match.group(1):
            code = int(match.group(1), 16)
            if code == 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                return REPLACEMENT_CHAR
            return chr(code)
        return match.group(2)

    return _ESCAPE.sub(replace, raw)


def _value(kind: TokenKind, raw: str) -> str:
    if kind not in _NAMED:
        return raw
    if kind is TokenKind.FUNCTION:
        raw = raw[:-1]
    elif kind in _PREFIXES:
        raw = raw[len(_PREFIXES[kind]) :]
    return unescape(raw)


def normalize(source: str) -> str:
    """Normalize newlines and NUL code points before lexing."""
    return _RETURNS.sub("\n", source).replace("\u0000", REPLACEMENT_CHAR)


def lex(source: str) -> list[Token]:
    """Lex already-normalized CSS text into a flat token list."""
    tokens: list[Token] = []
    try:
        for raw in _lexer().lex(source):
            kind = TERMINAL_KINDS[raw.type]
            tokens.append(
                Token(
                    kind=kind,
                    value=_value(kind, str(raw)),
                    start=raw.start_pos,
                    end=raw.end_pos,
                    line=raw.line,
                    column=raw.column,
                )
            )
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return tokens


def tokenize(source: str) -> TokenStream:
    """Tokenize CSS text into a stream whose positions index the normalized text."""
    text = normalize(source)
    return TokenStream(text, lex(text))
