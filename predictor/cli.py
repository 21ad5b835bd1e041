from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from typing import Any, List, Optional

from dotenv import load_dotenv

from .config import TEMPERATURE_BOUNDS, config_from_env
from .records import Result, now_utc, records_to_json
from .render import render_prediction, render_records, render_series
from .series import opponent_names
from .state import (
    AppState,
    add_record,
    performance_series,
    run_predict,
    select_opponent,
    set_temperature,
)
from .store import JsonRecordStore

logger = logging.getLogger(__name__)


def _temperature(value: str) -> float:
    try:
        t = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value}")
    low, high = TEMPERATURE_BOUNDS
    if not low <= t <= high:
        raise argparse.ArgumentTypeError(f"temperature must be within [{low:g}, {high:g}]")
    return t


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Predict the next opponent from your match log")
    parser.add_argument("--store", default=None, help="Path to the record log JSON")
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Record a match against an opponent")
    add.add_argument("name", help="Opponent name")
    add.add_argument(
        "--result", choices=[r.value for r in Result], default=Result.WIN.value, help="Match result"
    )
    add.add_argument("--note", default="", help="Optional note")

    pred = sub.add_parser("predict", help="Rank likely next opponents")
    pred.add_argument(
        "--temperature", type=_temperature, default=0.0, help="Temperature control (-5..5)"
    )
    pred.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    series = sub.add_parser("series", help="Cumulative performance against one opponent")
    series.add_argument("name", help="Opponent name")
    series.add_argument("--points", type=int, default=None, help="Number of points to keep")
    series.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    chart = sub.add_parser("chart", help="Save a performance chart as PNG")
    chart.add_argument("name", help="Opponent name")
    chart.add_argument("--output", required=True, help="PNG output path")
    chart.add_argument("--points", type=int, default=None, help="Number of points to keep")

    log = sub.add_parser("list", help="Show the record log")
    log.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    clear = sub.add_parser("clear", help="Delete every record")
    clear.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    return parser


def _emit(obj: Any) -> None:
    print(json.dumps(obj, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = config_from_env()
    store = JsonRecordStore(args.store or config.store_path)
    state = AppState(records=tuple(store.load()))
    logger.debug(f"Loaded {len(state.records)} records from {store.path}")

    if args.command == "add":
        updated = add_record(state, args.name, args.result, args.note, now=now_utc())
        if updated is state:
            print("Blank opponent name; nothing recorded.")
            return
        store.save(updated.record_list)
        print(f"Added {updated.records[0].opponent_name} ({updated.records[0].result.value}).")

    elif args.command == "predict":
        state = set_temperature(state, args.temperature)
        state = run_predict(state, now_utc(), config.decay_factor)
        if args.format == "json":
            _emit(
                {
                    "temperature_control": state.temperature_control,
                    "predictions": [asdict(p) for p in state.prediction.predictions]
                    if state.prediction
                    else None,
                }
            )
        else:
            print(render_prediction(state.prediction))

    elif args.command in ("series", "chart"):
        if args.name not in opponent_names(state.records):
            raise SystemExit(f"No records for opponent '{args.name}'.")
        state = select_opponent(state, args.name)
        points = args.points if args.points is not None else config.series_points
        series = performance_series(state, points)
        if args.command == "chart":
            from .chart import plot_series

            print(plot_series(args.name, series, args.output))
        elif args.format == "json":
            _emit([asdict(pt) for pt in series])
        else:
            print(render_series(args.name, series))

    elif args.command == "list":
        if args.format == "json":
            _emit(records_to_json(state.record_list))
        else:
            print(render_records(state.record_list))

    elif args.command == "clear":
        if not args.yes:
            answer = input(f"Delete all {len(state.records)} records? [y/N] ")
            if answer.strip().lower() not in {"y", "yes"}:
                raise SystemExit("Aborted.")
        store.clear()
        print("Record log cleared.")


if __name__ == "__main__":
    main()
