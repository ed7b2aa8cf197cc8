from gcsst.engine.declarations import extract_declarations
from gcsst.engine.spells import generate_spells, merge_maps, merged
from gcsst.engine.state import ResultMap, ScanState
from gcsst.engine.transmuter import Transmutation, process_css, transmute

__all__ = [
    "ResultMap",
    "ScanState",
    "Transmutation",
    "extract_declarations",
    "generate_spells",
    "merge_maps",
    "merged",
    "process_css",
    "transmute",
]
