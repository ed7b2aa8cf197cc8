"""Extraction of ``property: value;`` pairs from a rule body."""

from __future__ import annotations

from gcsst.tokenizer import TokenKind, TokenStream

__all__ = ["extract_declarations", "remove_last_char"]


def remove_last_char(text: str) -> str:
    return text[:-1]


def extract_declarations(block: TokenStream) -> set[str]:
    """Return canonical ``component=target`` strings for every terminated declaration.

    Slices run from the declaration start through the ``:`` and from the
    ``:`` through the ``;``; the delimiter at the end of each slice is
    dropped before trimming. A declaration without a ``;`` is ignored.
    """
    declarations: set[str] = set()
    start = block.position()
    colon: int | None = None

    for token in block:
        if token.kind is TokenKind.COLON:
            colon = block.position()
        elif token.kind is TokenKind.SEMICOLON:
            if colon is not None:
                component = remove_last_char(block.slice(start, colon)).strip()
                target = remove_last_char(block.slice_from(colon)).strip()
                declarations.add(f"{component}={target}".replace(" ", "_"))
            start = block.position()
            colon = None

    return declarations
