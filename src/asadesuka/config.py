from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os

DEFAULT_ENDPOINT = "https://api.sunrise-sunset.org/json"
DEFAULT_TZID = "UTC"


@dataclass(frozen=True)
class LocationConfig:
    lat: str
    lng: str
    tzid: str = DEFAULT_TZID


@dataclass(frozen=True)
class ApiConfig:
    endpoint: str = DEFAULT_ENDPOINT
    user_agent: str = "asadesuka/0.1"


@dataclass(frozen=True)
class CacheConfig:
    app_dir: str = "asadesuka"
    filename: str = "data.json"
    base_dir: str | None = None


@dataclass(frozen=True)
class Config:
    location: LocationConfig
    api: ApiConfig = field(default_factory=ApiConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    log_level: str = "WARNING"


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    env = os.environ if environ is None else environ

    # Supported tzid values: https://www.php.net/manual/en/timezones.php
    location = LocationConfig(
        lat=env.get("ASA_LAT", ""),
        lng=env.get("ASA_LNG", ""),
        tzid=env.get("ASA_TZID") or DEFAULT_TZID,
    )

    return Config(
        location=location,
        cache=CacheConfig(base_dir=env.get("ASA_CACHE_DIR") or None),
        log_level=(env.get("ASA_LOG_LEVEL") or "WARNING").upper(),
    )
