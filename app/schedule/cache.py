"""
Monthly plan cache.

An explicit cache object handed to the aggregator.  Entries never expire;
whoever mutates assignments must invalidate the affected month, since no
change notification exists.

A fetch that started before an invalidation must not repopulate the cache
with what it read.  Every invalidation therefore bumps a generation counter,
and :meth:`MonthlyPlanCache.put` ignores plans read under an older
generation.
"""

from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Optional

from loguru import logger

from app.schemas.calendar import MonthlyPlan

CacheKey = tuple[int, int, int]


class MonthlyPlanCache:
    """Plans keyed by ``(user_id, year, month)``."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, MonthlyPlan] = {}
        self._lock = Lock()
        # Counters only grow, so their sum changes whenever any of them does.
        self._generations: defaultdict[CacheKey, int] = defaultdict(int)
        self._user_generations: defaultdict[int, int] = defaultdict(int)
        self._epoch = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries

    def generation(self, user_id: int, year: int, month: int) -> int:
        """Token to read before fetching a plan and hand back to :meth:`put`."""
        with self._lock:
            return self._generation((user_id, year, month))

    def _generation(self, key: CacheKey) -> int:
        return self._epoch + self._user_generations.get(key[0], 0) + self._generations.get(key, 0)

    def get(self, user_id: int, year: int, month: int) -> Optional[MonthlyPlan]:
        plan = self._entries.get((user_id, year, month))
        return plan.model_copy(deep=True) if plan is not None else None

    def put(self, user_id: int, plan: MonthlyPlan, generation: Optional[int] = None) -> bool:
        """Store ``plan``.  Returns ``False`` when ``generation`` is stale and nothing was stored."""
        key = (user_id, plan.year, plan.month)
        with self._lock:
            stored = generation is None or generation == self._generation(key)
            if stored:
                self._entries[key] = plan.model_copy(deep=True)
        if not stored:
            logger.debug(f"Not caching plan for user {user_id}, {plan.year:04d}-{plan.month:02d}: "
                         f"invalidated while it was being fetched")
        return stored

    def invalidate(self, user_id: int, year: int, month: int) -> bool:
        """Drop one month.  Returns whether an entry was present."""
        key = (user_id, year, month)
        with self._lock:
            self._generations[key] += 1
            removed = self._entries.pop(key, None) is not None
        if removed:
            logger.debug(f"Invalidated cached plan for user {user_id}, {year:04d}-{month:02d}")
        return removed

    def invalidate_user(self, user_id: int) -> int:
        """Drop every month of one user.  Returns how many entries were removed."""
        with self._lock:
            self._user_generations[user_id] += 1
            keys = [key for key in self._entries if key[0] == user_id]
            for key in keys:
                del self._entries[key]
        return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._epoch += 1
            self._entries.clear()
