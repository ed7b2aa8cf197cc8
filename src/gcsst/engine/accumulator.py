"""Selector accumulation: per-token state transitions before a rule body.

Each handler reacts to one token kind and updates the ScanState so that,
when the rule body arrives, ``raw_prefixes`` holds one prefix per
comma-separated selector alternative.
"""

from __future__ import annotations

from typing import Callable

from gcsst.engine.state import ScanState
from gcsst.tokenizer import Token, TokenKind, TokenStream

__all__ = ["accumulate"]

COMBINATORS = frozenset({">", "+", "~"})


def _on_ident(state: ScanState, token: Token, stream: TokenStream) -> None:
    ident = token.value
    if state.class_start_seen and not state.class_name:
        state.class_name = ident
        state.class_start_seen = False
    elif state.pending_combinator:
        sep = "_" if state.focus else ""
        state.focus.append(f"{sep}{state.pending_combinator}_{ident}")
        state.pending_combinator = ""
    elif state.pseudo_pending:
        fragment = f"{state.colons}{ident}"
        state.focus.append(fragment)
        state.effects.append(ident)
        state.pseudo_pending = False
        state.colon_run = 0
        # Tag-selector fallback keeps the colons in the name (":hover").
        if not state.class_name:
            state.class_name = fragment
    elif state.class_name:
        state.focus.append(f"_{ident}")
    else:
        state.class_name = ident


def _on_delim(state: ScanState, token: Token, stream: TokenStream) -> None:
    delim = token.value
    if delim == ".":
        if state.class_name and not state.pending_combinator:
            state.flush_alternative()
            state.focus.clear()
            state.effects.clear()
            state.class_name = ""
        state.class_start_seen = True
    elif delim in COMBINATORS:
        state.pending_combinator = delim
    elif delim == "*":
        if state.focus:
            state.pending_combinator = delim
        else:
            state.focus.append(delim)
            if not state.class_name:
                state.class_name = delim


def _on_colon(state: ScanState, token: Token, stream: TokenStream) -> None:
    state.pseudo_pending = True
    state.colon_run += 1


def _on_comma(state: ScanState, token: Token, stream: TokenStream) -> None:
    state.flush_alternative()
    state.reset_alternative()


def _on_square_block(state: ScanState, token: Token, stream: TokenStream) -> None:
    start = stream.position()
    stream.consume_block()
    state.focus.append(f"[{stream.slice_from(start)}")


def _on_at_keyword(state: ScanState, token: Token, stream: TokenStream) -> None:
    if token.value == "media":
        state.media_prelude_start = stream.position()


def _on_function(state: ScanState, token: Token, stream: TokenStream) -> None:
    if not state.pseudo_pending:
        return
    colons = state.colons
    start = stream.position()
    stream.consume_block()
    state.focus.append(f"{colons}{token.value}({stream.slice_from(start)}")
    state.effects.append(token.value)
    state.pseudo_pending = False
    state.colon_run = 0


_HANDLERS: dict[TokenKind, Callable[[ScanState, Token, TokenStream], None]] = {
    TokenKind.IDENT: _on_ident,
    TokenKind.DELIM: _on_delim,
    TokenKind.COLON: _on_colon,
    TokenKind.COMMA: _on_comma,
    TokenKind.SQUARE_BLOCK: _on_square_block,
    TokenKind.AT_KEYWORD: _on_at_keyword,
    TokenKind.FUNCTION: _on_function,
}


def accumulate(state: ScanState, token: Token, stream: TokenStream) -> None:
    """Apply *token* to the selector state; unknown kinds are ignored."""
    handler = _HANDLERS.get(token.kind)
    if handler is not None:
        handler(state, token, stream)
