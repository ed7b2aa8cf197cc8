"""Transmutation engine: token loop, rule bodies and ``@media`` recursion."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from gcsst.engine.accumulator import accumulate
from gcsst.engine.declarations import extract_declarations, remove_last_char
from gcsst.engine.spells import generate_spells, merge_maps
from gcsst.engine.state import ResultMap, ScanState
from gcsst.errors import InvalidInput
from gcsst.oracle import SpellOracle, is_recognized_spell
from gcsst.tokenizer import TokenKind, TokenStream, tokenize

__all__ = ["Transmutation", "process_css", "transmute"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transmutation:
    """Result of transmuting one CSS buffer."""

    classes: ResultMap
    duration: float  # seconds


def _media_area(state: ScanState, stream: TokenStream) -> str:
    """Area label from the ``@media`` prelude, sliced through the opening ``{``."""
    prelude = stream.slice_from(state.media_prelude_start)  # type: ignore[arg-type]
    return remove_last_char(prelude).strip().replace(" ", "_")


def _process_media(
    state: ScanState, stream: TokenStream, oracle: SpellOracle
) -> ResultMap:
    area = _media_area(state, stream)
    state.media_prelude_start = None
    block = stream.nested_block()
    # Prelude words such as "screen and" were accumulated as a selector.
    state.reset_rule()
    log.debug("Entering media area %r", area)
    nested = process_css(block.text, ScanState(area=area), oracle=oracle)
    # Rules after the media block at this level no longer carry an area.
    state.area = None
    return nested


def _process_rule(
    state: ScanState, stream: TokenStream, oracle: SpellOracle
) -> ResultMap:
    block = stream.nested_block()
    spells: ResultMap = {}
    if oracle(state.class_name):
        log.info("This class is already a spell: %r", state.class_name)
    else:
        state.flush_alternative()
        state.declarations |= extract_declarations(block)
        spells = generate_spells(state.raw_prefixes, state.declarations)
    state.reset_rule()
    return spells


def process_css(
    css: str,
    state: ScanState | None = None,
    *,
    oracle: SpellOracle = is_recognized_spell,
) -> ResultMap:
    """Run the engine over *css* and return selector name -> spell set.

    Nested ``@media`` bodies are re-tokenized and processed recursively with
    a fresh state carrying the media area; their results are merged in.
    """
    if state is None:
        state = ScanState()
    result: ResultMap = {}
    stream = tokenize(css)

    for token in stream:
        if token.kind is not TokenKind.CURLY_BLOCK:
            accumulate(state, token, stream)
        elif state.media_prelude_start is not None:
            merge_maps(result, _process_media(state, stream, oracle))
        else:
            merge_maps(result, _process_rule(state, stream, oracle))

    return result


def transmute(css: str, *, oracle: SpellOracle = is_recognized_spell) -> Transmutation:
    """Transmute a CSS buffer, timing the run.

    Raises:
        InvalidInput: no selector produced any spell.
        ParseError: the CSS contains an unterminated block.
    """
    start = time.monotonic()
    classes = process_css(css, oracle=oracle)
    if not classes:
        raise InvalidInput("There is nothing to transmute.")
    duration = time.monotonic() - start
    log.debug("Transmuted %d selector(s) in %.4fs", len(classes), duration)
    return Transmutation(classes=classes, duration=duration)
