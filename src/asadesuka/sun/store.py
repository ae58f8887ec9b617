from __future__ import annotations

from datetime import date
import json
from pathlib import Path

from platformdirs import user_cache_dir

from asadesuka.config import CacheConfig
from asadesuka.sun.models import ApiResponse
from asadesuka.util.cache import CacheEntry, FileCache
from asadesuka.util.logging import get_logger

LOG = get_logger(__name__)

CACHE_DIR_MODE = 0o750


def resolve_cache_dir(config: CacheConfig) -> Path:
    base = Path(config.base_dir).expanduser() if config.base_dir else Path(user_cache_dir())
    return base / config.app_dir


class SunCache:
    """Single-record store for the last sun data response."""

    def __init__(self, config: CacheConfig | None = None) -> None:
        self.config = config or CacheConfig()
        self.cache = FileCache(resolve_cache_dir(self.config))

    @property
    def entry(self) -> CacheEntry:
        return self.cache.entry(self.config.filename)

    @property
    def path(self) -> Path:
        return self.entry.path

    def is_fresh(self, today: date | None = None) -> bool:
        entry = self.entry
        if not entry.exists():
            self.cache.ensure_dir(CACHE_DIR_MODE)
            LOG.info("No cached sun data at %s", entry.path)
            return False
        # Fresh means written on the same local calendar day, not within 24h.
        modified = entry.modified_date()
        fresh = modified == (today or date.today())
        LOG.info("Cached sun data from %s (fresh=%s)", modified, fresh)
        return fresh

    def load(self) -> ApiResponse:
        LOG.info("Cache hit: %s", self.path)
        return ApiResponse.from_dict(json.loads(self.entry.read_text()))

    def save(self, record: ApiResponse) -> None:
        self.entry.write_text(json.dumps(record.to_dict()) + "\n")
