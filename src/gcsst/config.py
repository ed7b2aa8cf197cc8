from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GcsstConfig:
    output_path: str = "grimoire/transmuted.json"
    include_oneliner: bool = False
    host: str = "127.0.0.1"
    port: int = 5000
