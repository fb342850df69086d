"""
Offline analytics for local-only accounts.

Reads workouts from the on-device JSON store and prints the same report
JSON the service returns from /analytics.

Usage examples:
  - gymtracker stats --range 90d
  - gymtracker history "Bench Press" --range all
  - gymtracker streak --goal 4
  - gymtracker add finished_workout.json
  - gymtracker --store /tmp/workouts.json stats
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from gymtracker.analytics.reports import InvalidWeeklyGoal
from gymtracker.analytics.service import AnalyticsService
from gymtracker.core.config import settings
from gymtracker.core.time_utils import resolve_timezone
from gymtracker.schemas.workout import WorkoutCreate
from gymtracker.storage.local import LocalWorkoutStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gymtracker", description="Workout analytics from the local store")
    ap.add_argument("--store", default=settings.local_store_path, help="Path of the workouts JSON file")
    ap.add_argument(
        "--timezone",
        default=settings.timezone,
        help="Timezone for day/week keys ('local' or an IANA name like Europe/Berlin)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    stats = sub.add_parser("stats", help="Totals and per-exercise stats")
    stats.add_argument("--range", dest="time_range", default=settings.default_time_range, help="7d, 30d, 90d or all")

    history = sub.add_parser("history", help="Session history and PR for one exercise")
    history.add_argument("exercise", help="Exercise name (exact, case-sensitive)")
    history.add_argument("--range", dest="time_range", default=settings.default_time_range, help="7d, 30d, 90d or all")

    streak = sub.add_parser("streak", help="Weekly goal streaks and calendar")
    streak.add_argument("--goal", default=str(settings.default_weekly_goal), help="Workouts per week (1-7)")

    add = sub.add_parser("add", help="Save a workout from a JSON file ('-' for stdin)")
    add.add_argument("file")
    return ap


def _read_payload(path: str) -> WorkoutCreate:
    if path == "-":
        return WorkoutCreate.model_validate(json.load(sys.stdin))
    with open(path, "r", encoding="utf-8") as f:
        return WorkoutCreate.model_validate(json.load(f))


def run(argv: list[str] | None = None, out=None) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    store = LocalWorkoutStore(args.store)

    if args.command == "add":
        workout = store.save_workout(_read_payload(args.file))
        result = workout
    else:
        service = AnalyticsService(store, tz=resolve_timezone(args.timezone))
        if args.command == "stats":
            result = service.stats(args.time_range)
        elif args.command == "history":
            result = service.exercise_history(args.exercise, args.time_range)
        else:
            try:
                result = service.streak(args.goal)
            except InvalidWeeklyGoal as e:
                logger.warning("rejected weekly goal %r", e.value)
                print(str(e), file=sys.stderr)
                return 2

    json.dump(result.model_dump(mode="json", by_alias=True), out, indent=2)
    out.write("\n")
    return 0


def main() -> None:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(run())


if __name__ == "__main__":
    main()
