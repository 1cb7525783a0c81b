"""
Calendar endpoints.

The month view ships every day of the month with its activities and
workouts already classified for display.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_calendar_aggregator
from app.schedule.aggregator import CalendarAggregator
from app.schedule.classifier import (activity_color, activity_icon, format_distance, format_duration, priority_color,
                                     status_color, workout_type_color, )
from app.schedule.month_range import format_local_date, month_days
from app.schemas.activity import ActivityResponse
from app.schemas.calendar import (CalendarDay, CalendarWorkout, MonthlyCalendarResponse, MonthlyPlan, StyledActivity,
                                  StyledWorkout, )

router = APIRouter()


def _style_activity(activity: ActivityResponse) -> StyledActivity:
    return StyledActivity(activity=activity, icon=activity_icon(activity.activity_type),
                          color=activity_color(activity.activity_type),
                          duration_label=format_duration(activity.moving_time or activity.elapsed_time),
                          distance_label=format_distance(activity.distance), )


def _style_workout(workout: CalendarWorkout) -> StyledWorkout:
    return StyledWorkout(workout=workout, status_color=status_color(workout.status),
                         priority_color=priority_color(workout.priority), type_color=workout_type_color(workout.type), )


@router.get("/{user_id}/{year}/{month}", summary="Month view with day buckets.",
            response_model=MonthlyCalendarResponse, )
async def get_month(user_id: int, year: int, month: int,
                    aggregator: CalendarAggregator = Depends(get_calendar_aggregator), ):
    view = await aggregator.load_month(user_id, year, month)

    days = []
    for day in month_days(year, month):
        bucket = view.buckets.get(format_local_date(day))
        days.append(CalendarDay(date=day,
                                activities=[_style_activity(a) for a in bucket.activities] if bucket else [],
                                workouts=[_style_workout(w) for w in bucket.workouts] if bucket else [], ))

    start, end = view.month_range.as_strings()
    return MonthlyCalendarResponse(user_id=user_id, year=year, month=month, start_date=start, end_date=end,
                                   days=days, activity_count=len(view.activities),
                                   workout_count=len(view.plan.workouts), summary=view.summary, )


@router.get("/{user_id}/{year}/{month}/plan", summary="Workouts assigned in a month.", response_model=MonthlyPlan, )
async def get_month_plan(user_id: int, year: int, month: int,
                         aggregator: CalendarAggregator = Depends(get_calendar_aggregator), ):
    return await aggregator.get_monthly_plan(user_id, year, month)
