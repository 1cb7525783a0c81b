"""
Print one month of a user's training calendar.

Reads the month through the REST API (``BACKEND_API_URL``), exactly as a
remote calendar client would.

Usage:
    python scripts/show_month.py USER_ID [YEAR MONTH]
"""

import argparse
import asyncio
import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.logger import setup_logger
from app.schedule.aggregator import CalendarAggregator, MonthView
from app.schedule.classifier import activity_icon, format_distance, format_duration
from app.schedule.errors import ScheduleError
from app.schedule.sources import HttpActivitySource, HttpAssignmentSource, create_http_client


def print_month(view: MonthView) -> None:
    start, end = view.month_range.as_strings()
    print("=" * 60)
    print(f"User {view.user_id}: {start} .. {end}")
    print("=" * 60)

    for day, bucket in view.buckets.items():
        print(f"\n{day}")
        for activity in bucket.activities:
            print(f"  {activity_icon(activity.activity_type)} {activity.name:<30} "
                  f"{format_duration(activity.moving_time or activity.elapsed_time):>8} "
                  f"{format_distance(activity.distance):>9}")
        for workout in bucket.workouts:
            print(f"  [{workout.status:<11}] {workout.name:<30} {workout.duration:>4} min  ({workout.priority})")

    summary = view.summary
    print()
    print("-" * 60)
    print(f"Activities: {len(view.activities)}   Workouts: {summary.total_assigned}   "
          f"Completed: {summary.completed} ({summary.completion_rate}%)")


async def main(user_id: int, year: int, month: int) -> int:
    async with create_http_client() as client:
        aggregator = CalendarAggregator(HttpActivitySource(client), HttpAssignmentSource(client))
        try:
            view = await aggregator.load_month(user_id, year, month)
        except ScheduleError as e:
            print(f"ERROR: {e}")
            return 1
    print_month(view)
    return 0


if __name__ == "__main__":
    today = datetime.date.today()
    parser = argparse.ArgumentParser(description="Print a month of the training calendar.")
    parser.add_argument("user_id", type=int)
    parser.add_argument("year", type=int, nargs="?", default=today.year)
    parser.add_argument("month", type=int, nargs="?", default=today.month)
    args = parser.parse_args()

    setup_logger()
    sys.exit(asyncio.run(main(args.user_id, args.year, args.month)))
