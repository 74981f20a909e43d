from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from ..config import AppSettings
from ..logging import init_logging
from ..services.render_service import format_kpis, render_text
from .loader import BackendClient, HistoryLoader, LoadState


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="wu-history", description="Weather Underground station history viewer")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("serve", help="Run the proxy and HTML viewer")

    load = sub.add_parser("load", help="Load one day of observations through a running proxy")
    load.add_argument("--station", required=True, help="PWS station id, e.g. IMADRI123")
    load.add_argument("--date", required=True, help="Day as YYYY-MM-DD")
    load.add_argument("--backend", default="", help="Proxy base URL (default: APP_BACKEND_URL)")
    load.add_argument("--json", action="store_true", help="Print normalized observations as JSON")
    return p.parse_args(argv)


def _load(args: argparse.Namespace, settings: AppSettings) -> int:
    loader = HistoryLoader(BackendClient(base_url=args.backend or settings.backend_url), settings.display_timezone)
    state = loader.load(args.station, args.date)
    if state is not LoadState.DONE:
        print(loader.status, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([r.model_dump(by_alias=True, mode="json") for r in loader.rows], ensure_ascii=False, indent=2))
        return 0

    kpis = format_kpis(loader.kpis)
    print(render_text(loader.rows))
    print()
    print(f"Records: {kpis['count']}  Min temp: {kpis['min']}  Max temp: {kpis['max']}")
    print(loader.status)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = AppSettings()
    if args.command == "serve":
        from ..api.main import run

        run(settings)
        return 0
    init_logging(settings.log_level, stream=sys.stderr)
    return _load(args, settings)


if __name__ == "__main__":
    sys.exit(main())
