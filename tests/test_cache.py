"""Tests for the TTL cache."""

from savefarm.services.cache import InMemoryCache


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_values_expire_after_ttl() -> None:
    clock = _Clock()
    cache = InMemoryCache(clock=clock)

    cache.set("meal:1", {"idMeal": "1"}, ttl_seconds=10)
    assert cache.get("meal:1") == {"idMeal": "1"}

    clock.now += 10
    assert cache.get("meal:1") is None


def test_invalidate_drops_value() -> None:
    cache = InMemoryCache()
    cache.set("meals", [1, 2], ttl_seconds=60)

    cache.invalidate("meals")
    cache.invalidate("meals")

    assert cache.get("meals") is None
