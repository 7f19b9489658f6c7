"""Tests for the in-memory cache."""

from calorie_climb.services.cache import InMemoryCache


def test_cache_returns_stored_value() -> None:
    cache = InMemoryCache()

    cache.set("suggest:app:generic", ["apple"], ttl_seconds=300)

    assert cache.get("suggest:app:generic") == ["apple"]
    assert cache.get("missing") is None


def test_cache_expires_entries_on_read() -> None:
    now = [100.0]
    cache = InMemoryCache(clock=lambda: now[0])
    cache.set("fdc:food:1", "details", ttl_seconds=300)

    now[0] = 399.0
    assert cache.get("fdc:food:1") == "details"

    now[0] = 400.0
    assert cache.get("fdc:food:1") is None
    assert len(cache) == 0


def test_cache_clear_drops_everything() -> None:
    cache = InMemoryCache()
    cache.set("first", 1, ttl_seconds=60)
    cache.set("second", 2, ttl_seconds=60)

    cache.clear()

    assert len(cache) == 0
    assert cache.get("first") is None


def test_cache_sweeps_expired_entries_on_write() -> None:
    now = [0.0]
    cache = InMemoryCache(clock=lambda: now[0])
    cache.set("suggest:app:generic", ["apple"], ttl_seconds=300)

    now[0] = 300.0
    cache.set("suggest:ban:generic", ["banana"], ttl_seconds=300)

    assert len(cache) == 1
    assert cache.get("suggest:ban:generic") == ["banana"]


def test_cache_evicts_least_recently_written() -> None:
    cache = InMemoryCache(max_entries=2)
    cache.set("first", 1, ttl_seconds=60)
    cache.set("second", 2, ttl_seconds=60)
    cache.set("first", 1, ttl_seconds=60)

    cache.set("third", 3, ttl_seconds=60)

    assert len(cache) == 2
    assert cache.get("second") is None
    assert cache.get("first") == 1
    assert cache.get("third") == 3
