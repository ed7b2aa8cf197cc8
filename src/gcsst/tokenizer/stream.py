"""Position-addressable token stream with nested-block navigation."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gcsst.tokenizer.errors import ParseError
from gcsst.tokenizer.tokens import BLOCK_CLOSERS, Token, TokenKind

__all__ = ["TokenStream", "match_blocks"]


def match_blocks(tokens: Sequence[Token]) -> dict[int, int]:
    """Map the index of every block opener to the index of its closer.

    A closer that does not match the innermost open block is left as a plain
    token. An opener that is never closed raises ParseError.
    """
    closers: dict[int, int] = {}
    stack: list[int] = []
    for index, token in enumerate(tokens):
        if token.opens_block:
            stack.append(index)
        elif stack and BLOCK_CLOSERS[tokens[stack[-1]].kind] is token.kind:
            closers[stack.pop()] = index
    if stack:
        opener = tokens[stack[-1]]
        raise ParseError(
            f"Unterminated {opener.kind.value!r} block",
            line=opener.line,
            column=opener.column,
        )
    return closers


class TokenStream:
    """Sequential view over a slice of lexed tokens.

    Whitespace and comments never appear in the stream. When ``next()``
    returns a block opener (``{``, ``[``, ``(`` or a function), the caller can
    descend into it with ``nested_block()``; if it does not, the whole block
    is skipped by the following ``next()``.
    """

    def __init__(
        self,
        source: str,
        tokens: Sequence[Token],
        closers: dict[int, int] | None = None,
        *,
        begin: int = 0,
        end: int | None = None,
        position: int = 0,
        stop: int | None = None,
    ) -> None:
        self.source = source
        self._tokens = tokens
        self._closers = match_blocks(tokens) if closers is None else closers
        self._index = begin
        self._end = len(tokens) if end is None else end
        self._position = position
        self._open_block: int | None = None
        self._span = (position, len(source) if stop is None else stop)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()) is not None:
            yield token

    def next(self) -> Token | None:
        """Return the next token at this nesting level, or None when exhausted."""
        if self._open_block is not None:
            self._leave_block()
        if self._index >= self._end:
            return None
        token = self._tokens[self._index]
        if token.opens_block:
            self._open_block = self._index
        self._index += 1
        self._position = token.end
        return token

    def position(self) -> int:
        """Source offset just after the last token returned by ``next()``."""
        return self._position

    def slice(self, start: int, end: int) -> str:
        return self.source[start:end]

    def slice_from(self, start: int) -> str:
        return self.source[start : self._position]

    @property
    def text(self) -> str:
        """Raw source covered by this stream (a block's inner text for nested streams)."""
        return self.source[self._span[0] : self._span[1]]

    def nested_block(self) -> TokenStream:
        """Return a stream over the inner tokens of the block just opened.

        The parent stream moves past the block's closer, so its position
        afterwards covers the closing bracket.
        """
        if self._open_block is None:
            raise ParseError("No block to descend into")
        opener = self._open_block
        nested = TokenStream(
            self.source,
            self._tokens,
            self._closers,
            begin=opener + 1,
            end=self._closers[opener],
            position=self._tokens[opener].end,
            stop=self._tokens[self._closers[opener]].start,
        )
        self._leave_block()
        return nested

    def consume_block(self) -> None:
        """Skip the block just opened, leaving the position after its closer."""
        if self._open_block is not None:
            self._leave_block()

    def _leave_block(self) -> None:
        close = self._closers[self._open_block]  # type: ignore[index]
        self._index = close + 1
        self._position = self._tokens[close].end
        self._open_block = None
