from __future__ import annotations

from datetime import datetime
import re

from asadesuka.sun.models import SunWindow

RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d{1,6})?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC3339 timestamp.

    The extended form with a UTC offset is required; other ISO-8601 forms
    that ``datetime.fromisoformat`` accepts (``20240101T070000+0000``,
    naive local times) are rejected.
    """
    if not RFC3339_RE.match(value):
        raise ValueError(f"not an RFC3339 timestamp: {value!r}")
    return datetime.fromisoformat(value[:-1] + "+00:00" if value[-1] in "Zz" else value)


def is_daytime(window: SunWindow, now: datetime) -> bool:
    sunrise = parse_timestamp(window.sunrise)
    sunset = parse_timestamp(window.sunset)
    return sunrise < now < sunset
