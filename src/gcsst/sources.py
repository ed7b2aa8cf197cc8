"""Discovery and cleaning of CSS source files (paths mode)."""

from __future__ import annotations

import glob
import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from gcsst.errors import InvalidPath

__all__ = ["clean_css", "expand_file_paths", "read_and_clean_files"]

log = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


def expand_file_paths(cwd: Path, patterns: Sequence[str]) -> list[Path]:
    """Expand glob patterns into the files they match.

    Relative patterns are resolved against *cwd*; ``**`` matches across
    directories. Directories are skipped.
    """
    paths: list[Path] = []
    for pattern in patterns:
        absolute = pattern if Path(pattern).is_absolute() else str(cwd / pattern)
        try:
            matches = sorted(glob.glob(absolute, recursive=True))
        except ValueError as exc:
            raise InvalidPath(f"Invalid glob pattern {pattern!r}: {exc}") from exc
        paths.extend(Path(match) for match in matches if Path(match).is_file())
    log.debug("Expanded %d pattern(s) into %d file(s)", len(patterns), len(paths))
    return paths


def clean_css(content: str) -> str:
    """Strip ``/* */`` comments and normalize double quotes to single quotes."""
    return _COMMENT_RE.sub("", content).replace('"', "'")


def read_and_clean_files(paths: Iterable[Path]) -> str:
    """Read every file and concatenate the cleaned contents."""
    parts: list[str] = []
    for path in paths:
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise InvalidPath(f"Failed to read '{path}': {exc}") from exc
        parts.append(clean_css(content))
    return "".join(parts)
