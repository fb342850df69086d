#!/usr/bin/env python3
"""
Seed weeks of strength training into the Gym Tracker API.

Pattern per week (Mon–Sun):
  - Mon: Push (bench press, overhead press)
  - Wed: Pull (deadlift, barbell row)
  - Fri: Legs (squat, romanian deadlift)
  - Sat: optional extra push day on "hard" weeks

Top-set weights climb a little every week so the progress charts and PRs
have something to show; every fourth week is a deload.

Usage examples:
  - Against a local backend:
      python scripts/seed_workouts.py --base-url http://localhost:8000
  - Eight weeks, skipping the current one:
      python scripts/seed_workouts.py --base-url http://localhost:8000 --weeks 8 --skip-current-week
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys
from typing import Dict, List, Tuple

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


# name -> (starting top-set weight, weekly increment)
LIFTS: Dict[str, Tuple[float, float]] = {
    "Bench Press": (60.0, 2.5),
    "Overhead Press": (35.0, 1.25),
    "Deadlift": (100.0, 5.0),
    "Barbell Row": (50.0, 2.5),
    "Squat": (80.0, 5.0),
    "Romanian Deadlift": (70.0, 2.5),
}

DAYS: Dict[int, Tuple[str, List[str]]] = {
    0: ("Push", ["Bench Press", "Overhead Press"]),
    2: ("Pull", ["Deadlift", "Barbell Row"]),
    4: ("Legs", ["Squat", "Romanian Deadlift"]),
}
EXTRA_DAY = (5, ("Push B", ["Bench Press", "Overhead Press"]))


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def round_plate(x: float) -> float:
    # nearest 1.25 (smallest plate pair)
    return round(x / 1.25) * 1.25


def top_weight(lift: str, week_idx: int) -> float:
    start, step = LIFTS[lift]
    weight = start + step * week_idx
    if week_idx % 4 == 3:  # deload
        weight *= 0.8
    return round_plate(weight)


def build_sets(lift: str, week_idx: int) -> List[dict]:
    top = top_weight(lift, week_idx)
    ramp = [0.6, 0.8, 1.0, 1.0]
    reps = [8, 5, 5, 5]
    return [
        {"weight": round_plate(top * pct), "reps": r, "rir": 2 if pct == 1.0 else 4, "completed": True}
        for pct, r in zip(ramp, reps)
    ]


def build_workout(day: dt.date, title: str, lifts: List[str], week_idx: int) -> dict:
    started = dt.datetime.combine(day, dt.time(18, 0), tzinfo=dt.timezone.utc)
    ended = started + dt.timedelta(minutes=50 + 5 * len(lifts))
    return {
        "name": title,
        "startedAt": started.isoformat(),
        "endedAt": ended.isoformat(),
        "exercises": [
            {"name": lift, "order": i, "sets": build_sets(lift, week_idx)}
            for i, lift in enumerate(lifts)
        ],
    }


def post_json(base_url: str, path: str, payload: dict) -> None:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.post(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")


def seed_week(base_url: str, week_start: dt.date, week_idx: int, today: dt.date) -> int:
    days = dict(DAYS)
    if week_idx % 2 == 0:
        days[EXTRA_DAY[0]] = EXTRA_DAY[1]

    created = 0
    for dow, (title, lifts) in sorted(days.items()):
        day = week_start + dt.timedelta(days=dow)
        if day > today:
            continue
        post_json(base_url, "workouts/", build_workout(day, title, lifts, week_idx))
        created += 1
    return created


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed weeks of workouts")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--weeks", type=int, default=12, help="Number of weeks to create (default 12)")
    ap.add_argument("--skip-current-week", action="store_true", help="Stop at last week instead of this week")
    args = ap.parse_args()

    today = dt.date.today()
    last_monday = monday_of_week(today)
    if args.skip_current_week:
        last_monday -= dt.timedelta(weeks=1)

    week_starts = [last_monday - dt.timedelta(weeks=args.weeks - 1 - i) for i in range(args.weeks)]

    total = 0
    for idx, ws in enumerate(week_starts):
        total += seed_week(args.base_url, ws, idx, today)

    print(f"Seed complete: {total} workouts over {args.weeks} weeks.")


if __name__ == "__main__":
    main()
