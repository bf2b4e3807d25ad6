import asyncio
import threading

import pytest

from amlich.cache import LunarDateCache
from amlich.config import get_settings
from amlich.date_conversion import solar_to_lunar


class TestLunarDateCache:
    def test_matches_uncached_conversion(self):
        cache = LunarDateCache(capacity=16, evict_count=4)
        assert cache.get(10, 2, 2024) == solar_to_lunar(10, 2, 2024)
        assert cache.get(10, 2, 2024, 8.0) == solar_to_lunar(10, 2, 2024, 8.0)

    def test_hits_and_misses(self):
        cache = LunarDateCache(capacity=16, evict_count=4)
        cache.get(1, 1, 2000)
        cache.get(1, 1, 2000)
        stats = cache.stats()
        assert (stats["hits"], stats["misses"], stats["size"]) == (1, 1, 1)

    def test_time_zone_is_part_of_the_key(self):
        cache = LunarDateCache(capacity=16, evict_count=4, time_zone=7.0)
        cache.get(1, 1, 2000)
        cache.get(1, 1, 2000, 8)
        assert len(cache) == 2

    def test_evicts_oldest_entries(self):
        cache = LunarDateCache(capacity=5, evict_count=2)
        for day in range(1, 7):
            cache.get(day, 3, 2024)
        assert len(cache) == 4
        cache.get(1, 3, 2024)
        assert cache.stats()["misses"] == 7
        cache.get(6, 3, 2024)
        assert cache.stats()["hits"] == 1

    def test_rejects_empty_capacity(self):
        with pytest.raises(ValueError):
            LunarDateCache(capacity=0)

    def test_prefetch_month(self):
        cache = LunarDateCache(capacity=100, evict_count=10)
        assert cache.prefetch_month(2024, 2) == 29
        assert len(cache) == 29

    def test_prefetch_neighbors(self):
        cache = LunarDateCache(capacity=100, evict_count=10)
        assert asyncio.run(cache.prefetch_neighbors(2024, 1)) == 31 + 29
        assert len(cache) == 60

    def test_concurrent_readers(self):
        cache = LunarDateCache(capacity=1000, evict_count=10)
        expected = solar_to_lunar(17, 9, 2024)
        results = []

        def worker():
            results.append(cache.get(17, 9, 2024))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert results == [expected] * 8
        assert len(cache) == 1

    def test_clear(self):
        cache = LunarDateCache(capacity=10, evict_count=2)
        cache.get(1, 1, 2024)
        cache.clear()
        assert cache.stats() == {"size": 0, "capacity": 10, "hits": 0, "misses": 0}

    def test_eviction_is_by_insertion_order(self):
        cache = LunarDateCache(capacity=3, evict_count=1)
        for day in (1, 2, 3):
            cache.get(day, 3, 2024)
        cache.get(1, 3, 2024)
        cache.get(4, 3, 2024)
        assert len(cache) == 3
        cache.get(1, 3, 2024)
        assert cache.stats()["misses"] == 5

    def test_defaults_come_from_settings(self, monkeypatch):
        monkeypatch.setenv("AMLICH_CACHE_CAPACITY", "12")
        monkeypatch.setenv("AMLICH_CACHE_EVICT_COUNT", "3")
        monkeypatch.setenv("AMLICH_TIME_ZONE", "8")
        get_settings.cache_clear()
        try:
            cache = LunarDateCache()
        finally:
            get_settings.cache_clear()
        assert (cache.capacity, cache.evict_count, cache.time_zone) == (12, 3, 8.0)
