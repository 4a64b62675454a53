from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None keeps the compact form
    json_sort_keys: bool = False
