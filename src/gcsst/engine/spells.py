"""Spell generation and result-map merging."""

from __future__ import annotations

from gcsst.engine.state import ResultMap

__all__ = ["generate_spells", "merge_maps", "merged"]


def generate_spells(
    raw_prefixes: dict[str, list[str]], declarations: set[str]
) -> ResultMap:
    """Cross every raw prefix of each selector with every declaration.

    Selectors with an empty name or no resulting spells are left out.
    """
    spells_map: ResultMap = {}
    for name, prefixes in raw_prefixes.items():
        if not name:
            continue
        spells = {prefix + declaration for prefix in prefixes for declaration in declarations}
        if spells:
            spells_map[name] = spells
    return spells_map


def merge_maps(target: ResultMap, other: ResultMap) -> None:
    """Union *other* into *target* in place."""
    for name, spells in other.items():
        if name in target:
            target[name] |= spells
        else:
            target[name] = set(spells)


def merged(*maps: ResultMap) -> ResultMap:
    """Return the union of *maps* without modifying any of them."""
    result: ResultMap = {}
    for spells_map in maps:
        merge_maps(result, spells_map)
    return result
