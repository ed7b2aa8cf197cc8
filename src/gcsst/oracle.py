"""Recognition of selectors that are already written as spells.

A stylesheet that is partly migrated contains classes such as
``.color\\=red`` or ``.hover\\:color\\=blue``; once unescaped by the
tokenizer their names are spells themselves and must not be expanded again.
"""

from __future__ import annotations

import re
from typing import Callable

__all__ = ["SpellOracle", "is_recognized_spell"]

SpellOracle = Callable[[str], bool]

# [area__][{focus}][effect:...]component=target
_SPELL_RE = re.compile(
    r"""
    ^
    (?:(?P<area>[^=]+?)__)?                      # media area label
    (?:\{(?P<focus>[^{}]*)\})?                   # selector focus
    (?P<effects>(?:[a-zA-Z][a-zA-Z0-9-]*:{1,2})*) # pseudo effects
    (?P<component>-{0,2}[a-zA-Z][a-zA-Z0-9-]*)   # property name
    =
    (?P<target>\S+)                              # value
    $
    """,
    re.VERBOSE,
)


def is_recognized_spell(name: str) -> bool:
    """Return True if *name* already has the shape of a spell."""
    return bool(name) and _SPELL_RE.match(name) is not None
