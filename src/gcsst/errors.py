"""Error types raised by the transmutation pipeline."""

from __future__ import annotations


class GcsstError(Exception):
    """Base class for transmutation failures reported to the user."""


class InvalidInput(GcsstError):
    """Nothing to transmute, or caller-supplied options are malformed."""


class InvalidPath(GcsstError):
    """A glob pattern is invalid, matches nothing, or a file cannot be read."""
