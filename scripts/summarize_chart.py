"""Summarise a DRF text chart file: races, finishers, scratches and warnings.

Usage:
    python scripts/summarize_chart.py data/SAR20060727.chart.txt
    python scripts/summarize_chart.py data/SAR20060727.chart.txt --json
    python scripts/summarize_chart.py data/SAR20060727.chart.txt --race 3 --top 4
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from drfchart.charts import (  # noqa: E402
    get_active_starters,
    get_chart_race,
    get_race_payoffs,
    get_top_finishers,
    parse_chart_file,
)
from drfchart.config import get_settings  # noqa: E402

logger = logging.getLogger(__name__)


def _print_race(race, top: int) -> None:
    furlongs = race.distance_furlongs
    dist = f"{furlongs:g}f" if furlongs else str(race.distance)
    active = get_active_starters(race)
    scratched = len(race.starters) - len(active)
    print(
        f"Race {race.race_number}: {race.race_type} {race.breed_code} {dist} "
        f"{race.surface.value} ({race.track_condition or '?'}) - "
        f"{len(active)} ran, {scratched} scratched"
    )
    for starter in get_top_finishers(race, top):
        if starter.is_scratched:
            continue
        print(
            f"  {starter.finish_position:>2}. {starter.horse_name:<24} "
            f"{starter.jockey_name:<20} {starter.trainer_name}"
        )
    payoffs = get_race_payoffs(race)
    if any(v is not None for v in payoffs.values()):
        parts = [f"{k} ${v:.2f}" for k, v in payoffs.items() if v is not None]
        print(f"  Payoffs: {', '.join(parts)}")


def main():
    parser = argparse.ArgumentParser(description="Summarise a DRF text chart file")
    parser.add_argument("path", help="Path to a .chart.txt file")
    parser.add_argument("--json", action="store_true", help="Dump the parsed chart as JSON")
    parser.add_argument("--race", type=int, default=None, help="Only show this race number")
    parser.add_argument("--top", type=int, default=3, help="Finishers to list per race")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    path = Path(args.path)
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        sys.exit(1)

    chart = parse_chart_file(content, path.name)

    if args.json:
        print(json.dumps(chart.to_dict(), indent=2))
        return

    header = chart.header
    print(f"{header.track_name or header.track_code} ({header.track_code}) {header.race_date} - "
          f"{len(chart.races)} races parsed, {header.number_of_races} in header")

    races = chart.races
    if args.race is not None:
        race = get_chart_race(chart, args.race)
        if race is None:
            print(f"Race {args.race} not found")
            sys.exit(1)
        races = [race]

    for race in races:
        _print_race(race, args.top)

    if chart.warnings:
        print(f"\n{len(chart.warnings)} warnings:")
        for w in chart.warnings:
            where = f"line {w.line_number}: " if w.line_number else ""
            print(f"  [{w.kind.value}] {where}{w.message}")


if __name__ == "__main__":
    main()
