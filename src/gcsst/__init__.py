"""Transmute plain CSS stylesheets into Grimoire CSS spells."""

__version__ = "0.9.0"

from gcsst.engine import Transmutation, process_css, transmute  # noqa: E402
from gcsst.errors import GcsstError, InvalidInput, InvalidPath  # noqa: E402
from gcsst.oracle import is_recognized_spell  # noqa: E402
from gcsst.output import run_transmutation, transmute_from_content  # noqa: E402
from gcsst.tokenizer import ParseError  # noqa: E402

__all__ = [
    "GcsstError",
    "InvalidInput",
    "InvalidPath",
    "ParseError",
    "Transmutation",
    "__version__",
    "is_recognized_spell",
    "process_css",
    "run_transmutation",
    "transmute",
    "transmute_from_content",
]
