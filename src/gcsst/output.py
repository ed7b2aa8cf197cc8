"""Output assembly and the two public entry points (paths and content mode)."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from gcsst.engine import ResultMap, transmute
from gcsst.errors import InvalidInput, InvalidPath
from gcsst.oracle import SpellOracle, is_recognized_spell
from gcsst.sources import expand_file_paths, read_and_clean_files

__all__ = [
    "build_scrolls",
    "render_json",
    "run_transmutation",
    "transmute_from_content",
]

log = logging.getLogger(__name__)


def build_scrolls(classes: ResultMap, include_oneliner: bool = False) -> list[dict[str, Any]]:
    """Turn a result map into scroll entries, dropping unnamed selectors."""
    scrolls: list[dict[str, Any]] = []
    for name in sorted(classes):
        if not name:
            continue
        spells = sorted(classes[name])
        scroll: dict[str, Any] = {"name": name, "spells": spells}
        if include_oneliner:
            scroll["oneliner"] = " ".join(spells)
        scrolls.append(scroll)
    return scrolls


def render_json(classes: ResultMap, include_oneliner: bool = False) -> str:
    return json.dumps(
        {"scrolls": build_scrolls(classes, include_oneliner)},
        indent=2,
        ensure_ascii=False,
    )


def run_transmutation(
    patterns: Sequence[str],
    include_oneliner: bool = False,
    *,
    cwd: Path | None = None,
    oracle: SpellOracle = is_recognized_spell,
) -> tuple[float, str]:
    """Transmute every CSS file matched by *patterns*.

    Returns the elapsed seconds (reading, transmuting and rendering) and the
    rendered JSON.
    """
    if not patterns:
        raise InvalidInput("No CSS file patterns provided.")

    paths = expand_file_paths(cwd or Path.cwd(), patterns)
    if not paths:
        raise InvalidPath("No files found matching the provided patterns.")

    start = time.monotonic()
    css = read_and_clean_files(paths)
    result = transmute(css, oracle=oracle)
    json_data = render_json(result.classes, include_oneliner)
    duration = time.monotonic() - start
    log.info("Transmuted %d file(s) in %.4fs", len(paths), duration)
    return duration, json_data


def transmute_from_content(
    css: str,
    include_oneliner: bool = False,
    *,
    oracle: SpellOracle = is_recognized_spell,
) -> tuple[float, str]:
    """Transmute a CSS string; returns elapsed seconds and the rendered JSON."""
    start = time.monotonic()
    result = transmute(css, oracle=oracle)
    json_data = render_json(result.classes, include_oneliner)
    return time.monotonic() - start, json_data
