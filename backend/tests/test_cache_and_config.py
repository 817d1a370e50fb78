"""
Tests for Redis cache helpers and settings fallbacks.
"""
import json

from quietroute.config import Settings
from quietroute.utils import cache as cache_utils


class FakeRedis:
    """Minimal Redis stub for cache helper tests."""

    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl


def test_settings_redis_url_fallback():
    settings = Settings(REDIS_URL="redis://base:6379/0")
    assert settings.cache_redis_url == "redis://base:6379/0"


def test_settings_redis_url_override():
    settings = Settings(REDIS_URL="redis://base:6379/0", CACHE_REDIS_URL="redis://cache:6379/1")
    assert settings.cache_redis_url == "redis://cache:6379/1"


def test_osrm_servers_primary_then_fallback():
    settings = Settings(
        OSRM_SERVER_URL="https://router.example/",
        OSRM_FALLBACK_SERVER_URL="http://localhost:5000",
    )
    assert settings.osrm_servers == ["https://router.example", "http://localhost:5000"]


def test_osrm_servers_without_fallback():
    settings = Settings(OSRM_SERVER_URL="https://router.example", OSRM_FALLBACK_SERVER_URL=None)
    assert settings.osrm_servers == ["https://router.example"]


def test_osrm_servers_deduplicated():
    settings = Settings(
        OSRM_SERVER_URL="https://router.example",
        OSRM_FALLBACK_SERVER_URL="https://router.example",
    )
    assert settings.osrm_servers == ["https://router.example"]


def test_route_key_rounds_coordinates():
    key = cache_utils.build_route_key(22.572612, 88.363912, 22.58, 88.37, "foot", 3)
    assert key == "osrm:route:foot:3:22.57261:88.36391:22.58:88.37"


def test_cache_set_and_get_round_trip(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(cache_utils, "get_redis_client", lambda: fake)

    assert cache_utils.cache_set("osrm:route:test", {"code": "Ok"}, ttl_seconds=900)
    assert fake.ttls["osrm:route:test"] == 900
    assert json.loads(fake.store["osrm:route:test"]) == {"code": "Ok"}
    assert cache_utils.cache_get("osrm:route:test") == {"code": "Ok"}


def test_cache_get_miss(monkeypatch):
    monkeypatch.setattr(cache_utils, "get_redis_client", lambda: FakeRedis())
    assert cache_utils.cache_get("missing") is None


def test_cache_redis_unavailable(monkeypatch):
    monkeypatch.setattr(cache_utils, "get_redis_client", lambda: None)
    assert cache_utils.cache_get("any") is None
    assert cache_utils.cache_set("any", 1) is False
