from asadesuka.config import DEFAULT_ENDPOINT, load_config
from asadesuka.sun.client import build_query


def test_load_config_defaults_tzid_to_utc() -> None:
    cfg = load_config({"ASA_LAT": "35.68", "ASA_LNG": "139.69"})
    assert cfg.location.lat == "35.68"
    assert cfg.location.lng == "139.69"
    assert cfg.location.tzid == "UTC"
    assert cfg.api.endpoint == DEFAULT_ENDPOINT
    assert cfg.cache.base_dir is None
    assert cfg.log_level == "WARNING"


def test_load_config_empty_tzid_falls_back() -> None:
    cfg = load_config({"ASA_TZID": ""})
    assert cfg.location.tzid == "UTC"
    assert cfg.location.lat == ""
    assert cfg.location.lng == ""


def test_load_config_overrides() -> None:
    cfg = load_config(
        {
            "ASA_TZID": "Asia/Tokyo",
            "ASA_CACHE_DIR": "/tmp/asa",
            "ASA_LOG_LEVEL": "info",
        }
    )
    assert cfg.location.tzid == "Asia/Tokyo"
    assert cfg.cache.base_dir == "/tmp/asa"
    assert cfg.log_level == "INFO"


def test_build_query_without_tzid_uses_utc() -> None:
    cfg = load_config({"ASA_LAT": "1.5", "ASA_LNG": "-2.25"})
    loc = cfg.location
    url = build_query(loc.lat, loc.lng, loc.tzid)
    assert url == f"{DEFAULT_ENDPOINT}?lat=1.5&lng=-2.25&tzid=UTC&formatted=0"


def test_build_query_escapes_values() -> None:
    url = build_query("", "", "America/Argentina/Buenos_Aires", endpoint="http://x/json")
    assert url == "http://x/json?lat=&lng=&tzid=America%2FArgentina%2FBuenos_Aires&formatted=0"
