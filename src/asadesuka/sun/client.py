from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode

import requests

from asadesuka.config import DEFAULT_ENDPOINT, ApiConfig
from asadesuka.sun.models import ApiResponse
from asadesuka.sun.store import SunCache
from asadesuka.util.logging import get_logger

LOG = get_logger(__name__)


class SunDataError(RuntimeError):
    """The service answered, but its status field reports a failure."""


@dataclass(frozen=True)
class FetchResult:
    url: str
    response: ApiResponse
    save_error: Exception | None = None

    @property
    def is_persisted(self) -> bool:
        return self.save_error is None


def build_query(lat: str, lng: str, tzid: str, endpoint: str = DEFAULT_ENDPOINT) -> str:
    # formatted=0 makes the service return ISO-8601 timestamps
    params = {"lat": lat, "lng": lng, "tzid": tzid, "formatted": "0"}
    return f"{endpoint}?{urlencode(params)}"


class SunClient:
    def __init__(
        self,
        api_config: ApiConfig,
        store: SunCache,
        session: requests.Session | None = None,
    ) -> None:
        self.api = api_config
        self.store = store
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": api_config.user_agent})

    def fetch(self, url: str) -> FetchResult:
        LOG.info("Fetching: %s", url)
        # Failures are reported in the body's status field, so the HTTP
        # status code is not checked here.
        resp = self.session.get(url)
        response = ApiResponse.from_dict(resp.json())

        if not response.is_ok:
            raise SunDataError(f"failed to fetch new sun data (status={response.status!r})")

        try:
            self.store.save(response)
        except OSError as exc:
            LOG.warning("Error saving sun data: %s", exc)
            return FetchResult(url=url, response=response, save_error=exc)
        return FetchResult(url=url, response=response)
