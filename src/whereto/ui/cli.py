"""CLI entry point for whereto flight searches."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from whereto.adapters.io.exports import serialize_codes, serialize_schedules
from whereto.api.schemas import validate_find_flights
from whereto.core.config import load_settings
from whereto.core.errors import WheretoError
from whereto.pipeline.search import FlightSearch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Whereto flight schedule ranking")
    parser.add_argument("--data", type=str, default=None, help="Schedule dataset JSON (default: bundled flights.json)")
    parser.add_argument("--coordinates", type=str, default=None, help="Airport coordinates JSON; enables great-circle distances")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    find = sub.add_parser("find", help="Rank schedules for a route")
    find.add_argument("--origin", type=str, required=True, help="Origin airport code")
    find.add_argument("--destination", type=str, required=True, help="Destination airport code")
    find.add_argument("--carrier", type=str, required=True, help="Preferred carrier code")
    find.add_argument("--max-hours", type=str, default=None, help="Drop flights longer than this")
    find.add_argument("--output", type=str, default=None, help="Write JSON here instead of stdout")

    sub.add_parser("airports", help="List airport codes in the dataset")
    sub.add_parser("carriers", help="List carrier codes in the dataset")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def _emit(payload: Any, output: Optional[str] = None) -> None:
    text = json.dumps(payload, ensure_ascii=True, indent=2)
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def _find(search: FlightSearch, args: argparse.Namespace) -> List[Dict[str, Any]]:
    params = {
        "origin": args.origin,
        "destination": args.destination,
        "carrier": args.carrier,
        "max_hours": args.max_hours,
    }
    validation = validate_find_flights({key: value for key, value in params.items() if value is not None})
    if not validation.ok:
        raise validation.as_error()
    outcome = search.find_flights(validation.query)
    if not outcome.ok:
        raise outcome.as_error()
    return serialize_schedules(outcome.schedules)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "serve":
        import uvicorn

        if args.data:
            os.environ["WHERETO_DATA_FILE"] = args.data
        if args.coordinates:
            os.environ["WHERETO_COORDINATES_FILE"] = args.coordinates
        uvicorn.run("whereto.api.app:app", host=args.host, port=args.port)
        return 0

    try:
        settings = load_settings(
            Path(args.data) if args.data else None,
            Path(args.coordinates) if args.coordinates else None,
        )
        search = FlightSearch.from_settings(settings)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        if args.command == "find":
            _emit(_find(search, args), args.output)
        elif args.command == "airports":
            _emit(serialize_codes(search.list_airports()))
        else:
            _emit(serialize_codes(search.list_carriers()))
    except WheretoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
