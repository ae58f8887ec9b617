from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SunWindow:
    # RFC3339 strings, e.g. "2024-01-01T07:00:00+00:00"
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class ApiResponse:
    """A sunrise-sunset.org response; the cache file stores the same shape."""

    window: SunWindow
    status: str
    timezone_id: str

    @property
    def is_ok(self) -> bool:
        return self.status.lower() == "ok"

    @classmethod
    def from_dict(cls, data: Any) -> ApiResponse:
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        results = data.get("results")
        if not isinstance(results, dict):
            results = {}
        return cls(
            window=SunWindow(
                sunrise=str(results.get("sunrise") or ""),
                sunset=str(results.get("sunset") or ""),
            ),
            status=str(data.get("status") or ""),
            timezone_id=str(data.get("tzid") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": {
                "sunrise": self.window.sunrise,
                "sunset": self.window.sunset,
            },
            "status": self.status,
            "tzid": self.timezone_id,
        }
