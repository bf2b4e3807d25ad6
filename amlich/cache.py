import asyncio
import calendar
import logging
import threading
from typing import Any

from cachetools import FIFOCache

from .config import get_settings
from .date_conversion import LunarDate, solar_to_lunar

log = logging.getLogger(__name__)

CacheKey = tuple[int, int, int, float]


class LunarDateCache:
    """Thread-safe memo of solar_to_lunar results with oldest-first eviction.

    The conversion is pure, so a cached LunarDate is always the value an
    uncached call would return for the same key. When the store is full the
    oldest evict_count entries are dropped in one batch before inserting.
    """

    def __init__(
        self,
        capacity: int | None = None,
        evict_count: int | None = None,
        time_zone: float | None = None,
    ):
        settings = get_settings()
        self.capacity = capacity if capacity is not None else settings.cache_capacity
        self.evict_count = (
            evict_count if evict_count is not None else settings.cache_evict_count
        )
        if self.capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.evict_count = max(1, min(self.evict_count, self.capacity))
        self.time_zone = time_zone if time_zone is not None else settings.time_zone
        self._entries: FIFOCache = FIFOCache(maxsize=self.capacity)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _key(self, dd: int, mm: int, yy: int, time_zone: float | None) -> CacheKey:
        tz = self.time_zone if time_zone is None else time_zone
        return yy, mm, dd, float(tz)

    def get(
        self, dd: int, mm: int, yy: int, time_zone: float | None = None
    ) -> LunarDate:
        """Return the lunar date for a solar date, converting on a miss."""
        key = self._key(dd, mm, yy, time_zone)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1
        # Convert outside the lock; a concurrent duplicate computes the same value.
        result = solar_to_lunar(dd, mm, yy, key[3])
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.capacity:
                self._evict_oldest()
            self._entries[key] = result
        return result

    def _evict_oldest(self) -> None:
        for _ in range(min(self.evict_count, len(self._entries))):
            self._entries.popitem()
        log.debug(f"{__name__}: evicted {self.evict_count} entries")

    def prefetch_month(
        self, yy: int, mm: int, time_zone: float | None = None
    ) -> int:
        """Convert every day of a Gregorian month into the cache."""
        days = calendar.monthrange(yy, mm)[1]
        for dd in range(1, days + 1):
            self.get(dd, mm, yy, time_zone)
        return days

    async def prefetch_neighbors(
        self, yy: int, mm: int, time_zone: float | None = None
    ) -> int:
        """Warm the months before and after a Gregorian month in worker threads."""
        targets = []
        for delta in (-1, 1):
            year, month = divmod(yy * 12 + (mm - 1) + delta, 12)
            targets.append((year, month + 1))
        counts = await asyncio.gather(
            *(
                asyncio.to_thread(self.prefetch_month, year, month, time_zone)
                for year, month in targets
            )
        )
        return sum(counts)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "size": len(self._entries),
                "capacity": self.capacity,
                "hits": self._hits,
                "misses": self._misses,
            }
