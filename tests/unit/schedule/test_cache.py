"""Tests for the monthly plan cache."""

from app.schedule.cache import MonthlyPlanCache
from app.schemas.calendar import CalendarWorkout, MonthlyPlan


def _make_plan(year: int = 2025, month: int = 7, workouts: int = 1) -> MonthlyPlan:
    return MonthlyPlan(
        year=year,
        month=month,
        workouts=[
            CalendarWorkout(id=1, assignment_id=i, date=f"{year:04d}-{month:02d}-01", name="Endurance", type="endurance",
                            duration=90, difficulty=3, status="assigned", priority="normal")
            for i in range(workouts)
        ],
    )


class TestMonthlyPlanCache:
    def test_miss(self):
        assert MonthlyPlanCache().get(1, 2025, 7) is None

    def test_put_then_get(self):
        cache = MonthlyPlanCache()
        cache.put(1, _make_plan(workouts=2))
        plan = cache.get(1, 2025, 7)
        assert plan is not None
        assert len(plan.workouts) == 2
        assert (1, 2025, 7) in cache
        assert len(cache) == 1

    def test_keyed_by_user(self):
        cache = MonthlyPlanCache()
        cache.put(1, _make_plan())
        assert cache.get(2, 2025, 7) is None

    def test_returned_plan_is_a_copy(self):
        cache = MonthlyPlanCache()
        cache.put(1, _make_plan())
        cache.get(1, 2025, 7).workouts.clear()
        assert len(cache.get(1, 2025, 7).workouts) == 1

    def test_invalidate(self):
        cache = MonthlyPlanCache()
        cache.put(1, _make_plan(month=7))
        cache.put(1, _make_plan(month=8))
        assert cache.invalidate(1, 2025, 7) is True
        assert cache.invalidate(1, 2025, 7) is False
        assert cache.get(1, 2025, 7) is None
        assert cache.get(1, 2025, 8) is not None

    def test_invalidate_user(self):
        cache = MonthlyPlanCache()
        cache.put(1, _make_plan(month=7))
        cache.put(1, _make_plan(month=8))
        cache.put(2, _make_plan(month=7))
        assert cache.invalidate_user(1) == 2
        assert len(cache) == 1
        assert cache.get(2, 2025, 7) is not None

    def test_clear(self):
        cache = MonthlyPlanCache()
        cache.put(1, _make_plan())
        cache.clear()
        assert len(cache) == 0


class TestGenerations:
    def test_put_with_current_generation(self):
        cache = MonthlyPlanCache()
        generation = cache.generation(1, 2025, 7)
        assert cache.put(1, _make_plan(), generation=generation) is True
        assert (1, 2025, 7) in cache

    def test_put_after_invalidate_is_ignored(self):
        cache = MonthlyPlanCache()
        generation = cache.generation(1, 2025, 7)
        cache.invalidate(1, 2025, 7)
        assert cache.put(1, _make_plan(), generation=generation) is False
        assert cache.get(1, 2025, 7) is None

    def test_other_months_keep_their_generation(self):
        cache = MonthlyPlanCache()
        generation = cache.generation(1, 2025, 8)
        cache.invalidate(1, 2025, 7)
        cache.invalidate(2, 2025, 8)
        assert cache.put(1, _make_plan(month=8), generation=generation) is True

    def test_invalidate_user_and_clear_move_generation(self):
        cache = MonthlyPlanCache()
        before_user = cache.generation(1, 2025, 7)
        cache.invalidate_user(1)
        before_clear = cache.generation(1, 2025, 7)
        cache.clear()
        assert cache.put(1, _make_plan(), generation=before_user) is False
        assert cache.put(1, _make_plan(), generation=before_clear) is False
        assert len(cache) == 0
