from __future__ import annotations

from datetime import date, datetime, timezone

import requests
import typer
from rich.console import Console
from rich.markup import escape

from asadesuka.config import Config, load_config
from asadesuka.sun.client import SunClient, build_query
from asadesuka.sun.models import ApiResponse
from asadesuka.sun.store import SunCache
from asadesuka.sun.window import is_daytime
from asadesuka.util.logging import configure_logging, get_logger

LOG = get_logger(__name__)

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _load_record(
    cfg: Config,
    url: str,
    today: date | None = None,
    session: requests.Session | None = None,
) -> ApiResponse:
    store = SunCache(cfg.cache)
    if store.is_fresh(today):
        return store.load()
    client = SunClient(cfg.api, store, session=session)
    result = client.fetch(url)
    if not result.is_persisted:
        LOG.info("Continuing with unsaved sun data for %s", result.url)
    return result.response


def check_daytime(
    cfg: Config,
    now: datetime | None = None,
    today: date | None = None,
    session: requests.Session | None = None,
) -> bool:
    """Return whether ``now`` falls between today's sunrise and sunset."""
    loc = cfg.location
    url = build_query(loc.lat, loc.lng, loc.tzid, endpoint=cfg.api.endpoint)
    record = _load_record(cfg, url, today=today, session=session)
    return is_daytime(record.window, now or _now())


@app.command()
def main() -> None:
    """Print "true" if it is currently daytime at ASA_LAT/ASA_LNG, else "false"."""
    try:
        cfg = load_config()
        configure_logging(cfg.log_level)
        daytime = check_daytime(cfg, now=_now())
    except Exception as exc:  # noqa: BLE001
        err_console.print(f"[red]error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    typer.echo("true" if daytime else "false")


def run() -> None:
    app()
