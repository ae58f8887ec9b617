from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path


@dataclass(frozen=True)
class CacheEntry:
    path: Path

    def exists(self) -> bool:
        return self.path.exists()

    def modified_date(self) -> date:
        return date.fromtimestamp(self.path.stat().st_mtime)

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write_text(self, content: str) -> None:
        self.path.write_text(content, encoding="utf-8")


class FileCache:
    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir

    def ensure_dir(self, mode: int = 0o750) -> None:
        self.base_dir.mkdir(mode=mode, parents=True, exist_ok=True)

    def entry(self, *parts: str) -> CacheEntry:
        return CacheEntry(self.base_dir.joinpath(*parts))
