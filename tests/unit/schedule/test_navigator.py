"""Tests for month navigation and the latest-request guard."""

import asyncio
import datetime

import pytest

from app.schedule.aggregator import MonthView
from app.schedule.cache import MonthlyPlanCache
from app.schedule.errors import ScheduleLoadError, UpstreamFetchError, ValidationError
from app.schedule.month_range import resolve_month_range
from app.schedule.navigator import MonthNavigator
from app.schemas.calendar import MonthlyPlan


class GatedAggregator:
    """Aggregator stand-in whose loads finish only when released."""

    def __init__(self):
        self.cache = MonthlyPlanCache()
        self.gates: dict[tuple[int, int], asyncio.Event] = {}
        self.failures: dict[tuple[int, int], Exception] = {}
        self.loaded: list[tuple[int, int]] = []

    def gate(self, year, month) -> asyncio.Event:
        return self.gates.setdefault((year, month), asyncio.Event())

    async def load_month(self, user_id, year, month):
        await self.gate(year, month).wait()
        self.loaded.append((year, month))
        if (year, month) in self.failures:
            raise self.failures[(year, month)]
        return MonthView(user_id=user_id, year=year, month=month, month_range=resolve_month_range(year, month),
                         plan=MonthlyPlan(year=year, month=month, workouts=[]), activities=[], buckets={})


def _open(aggregator: GatedAggregator, *months):
    for year, month in months:
        aggregator.gate(year, month).set()


class TestMonthNavigator:
    def test_show_applies_view(self):
        async def scenario():
            aggregator = GatedAggregator()
            _open(aggregator, (2025, 7))
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=6)
            view = await navigator.show(2025, 7)
            return navigator, view

        navigator, view = asyncio.run(scenario())
        assert view is navigator.view
        assert (navigator.year, navigator.month) == (2025, 7)
        assert navigator.loading is False
        assert navigator.error is None

    def test_stale_response_is_discarded(self):
        async def scenario():
            aggregator = GatedAggregator()
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=7)
            slow = asyncio.create_task(navigator.show(2025, 8))
            fast = asyncio.create_task(navigator.show(2025, 9))
            await asyncio.sleep(0)
            _open(aggregator, (2025, 9))
            fast_view = await fast
            _open(aggregator, (2025, 8))
            slow_view = await slow
            return navigator, fast_view, slow_view

        navigator, fast_view, slow_view = asyncio.run(scenario())
        assert slow_view is None
        assert fast_view is not None
        assert navigator.view.month == 9

    def test_failure_sets_error_and_clears_view(self):
        async def scenario():
            aggregator = GatedAggregator()
            aggregator.failures[(2025, 8)] = ScheduleLoadError(1, 2025, 8, UpstreamFetchError("activities", "down"))
            _open(aggregator, (2025, 7), (2025, 8))
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=7)
            await navigator.show(2025, 7)
            result = await navigator.show(2025, 8)
            return navigator, result

        navigator, result = asyncio.run(scenario())
        assert result is None
        assert navigator.view is None
        assert "2025-08" in navigator.error
        assert navigator.loading is False

    def test_stale_failure_is_discarded(self):
        async def scenario():
            aggregator = GatedAggregator()
            aggregator.failures[(2025, 8)] = ScheduleLoadError(1, 2025, 8, UpstreamFetchError("activities", "down"))
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=7)
            failing = asyncio.create_task(navigator.show(2025, 8))
            latest = asyncio.create_task(navigator.show(2025, 9))
            await asyncio.sleep(0)
            _open(aggregator, (2025, 9))
            await latest
            _open(aggregator, (2025, 8))
            await failing
            return navigator

        navigator = asyncio.run(scenario())
        assert navigator.error is None
        assert navigator.view.month == 9

    def test_next_and_previous_roll_over_years(self):
        async def scenario():
            aggregator = GatedAggregator()
            _open(aggregator, (2026, 1), (2025, 12), (2025, 11))
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=12)
            await navigator.next()
            forward = (navigator.year, navigator.month)
            await navigator.previous()
            await navigator.previous()
            return forward, (navigator.year, navigator.month)

        forward, back = asyncio.run(scenario())
        assert forward == (2026, 1)
        assert back == (2025, 11)

    def test_refresh_invalidates_cached_plan(self):
        async def scenario():
            aggregator = GatedAggregator()
            aggregator.cache.put(1, MonthlyPlan(year=2025, month=7, workouts=[]))
            _open(aggregator, (2025, 7))
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=7)
            await navigator.refresh()
            return aggregator

        aggregator = asyncio.run(scenario())
        assert (1, 2025, 7) not in aggregator.cache
        assert aggregator.loaded == [(2025, 7)]

    def test_defaults_to_current_month(self):
        navigator = MonthNavigator(GatedAggregator(), user_id=1)
        today = datetime.date.today()
        assert (navigator.year, navigator.month) == (today.year, today.month)

    def test_rejects_bad_start_month(self):
        with pytest.raises(ValidationError):
            MonthNavigator(GatedAggregator(), user_id=1, year=2025, month=13)

    def test_invalid_month_leaves_navigator_in_place(self):
        async def scenario():
            aggregator = GatedAggregator()
            _open(aggregator, (2025, 7), (2025, 8))
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=7)
            await navigator.show(2025, 7)
            rejected = await navigator.show(2025, 13)
            state = (navigator.year, navigator.month, navigator.error, navigator.view)
            await navigator.next()
            return navigator, aggregator, rejected, state

        navigator, aggregator, rejected, (year, month, error, view) = asyncio.run(scenario())
        assert rejected is None
        assert (year, month) == (2025, 7)
        assert "month" in error
        assert view.month == 7
        assert aggregator.loaded == [(2025, 7), (2025, 8)]
        assert (navigator.year, navigator.month) == (2025, 8)
        assert navigator.error is None

    def test_month_changes_only_when_load_is_applied(self):
        async def scenario():
            aggregator = GatedAggregator()
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=7)
            pending = asyncio.create_task(navigator.next())
            await asyncio.sleep(0)
            during = (navigator.year, navigator.month, navigator.loading)
            _open(aggregator, (2025, 8))
            await pending
            return navigator, during

        navigator, during = asyncio.run(scenario())
        assert during == (2025, 7, True)
        assert (navigator.year, navigator.month) == (2025, 8)

    def test_quick_next_steps_from_requested_month(self):
        async def scenario():
            aggregator = GatedAggregator()
            navigator = MonthNavigator(aggregator, user_id=1, year=2025, month=11)
            first = asyncio.create_task(navigator.next())
            await asyncio.sleep(0)
            second = asyncio.create_task(navigator.next())
            await asyncio.sleep(0)
            _open(aggregator, (2025, 12), (2026, 1))
            await asyncio.gather(first, second)
            return navigator

        navigator = asyncio.run(scenario())
        assert (navigator.year, navigator.month) == (2026, 1)
        assert navigator.view.month == 1
