from gcsst.tokenizer.errors import ParseError
from gcsst.tokenizer.lexer import lex, tokenize, unescape
from gcsst.tokenizer.stream import TokenStream
from gcsst.tokenizer.tokens import Token, TokenKind

__all__ = [
    "ParseError",
    "Token",
    "TokenKind",
    "TokenStream",
    "lex",
    "tokenize",
    "unescape",
]
