"""Tests for the insights cache and resource handler."""

import pytest

from discovery_mcp.data.cache import InsightsCache, insights_uri
from discovery_mcp.resources.insights_resource import (
    ResourceNotFoundError,
    read_insights_resource,
)

PAYLOAD = {
    "strategy_profile": {"summary": "Planning should balance growth and stability."},
    "input_summary": {"completion_percentage": 40},
    "generated_at": "2026-01-15T12:00:00+00:00",
}


class TestInsightsUri:
    """Tests for URI construction."""

    def test_scheme(self) -> None:
        """Test URIs use the insights scheme and the bare hash."""
        assert insights_uri("3f2a9c01d4e5b6a7") == "insights://3f2a9c01d4e5b6a7"


class TestInsightsCache:
    """Tests for InsightsCache."""

    def test_store_and_read(self, tmp_path) -> None:
        """Test stored payloads round-trip as canonical JSON."""
        cache = InsightsCache(cache_dir=str(tmp_path))
        uri = cache.store("abc123", PAYLOAD)
        assert uri == "insights://abc123"
        assert cache.exists(uri)
        assert cache.get_json(uri) == PAYLOAD
        assert cache.get_text(uri).startswith('{"generated_at":')

    def test_missing_entry(self, tmp_path) -> None:
        """Test unknown URIs return None."""
        cache = InsightsCache(cache_dir=str(tmp_path))
        assert cache.get_text("insights://missing") is None
        assert cache.get_json("insights://missing") is None
        assert cache.get_metadata("insights://missing") is None
        assert not cache.exists("insights://missing")

    def test_metadata(self, tmp_path) -> None:
        """Test metadata is available without the payload."""
        cache = InsightsCache(cache_dir=str(tmp_path))
        uri = cache.store("abc123", PAYLOAD)
        meta = cache.get_metadata(uri)
        assert meta["hash"] == "abc123"
        assert meta["completion_percentage"] == 40
        assert meta["size_bytes"] == len(cache.get_text(uri).encode("utf-8"))
        assert meta["compressed_bytes"] > 0
        assert "json_gz" not in meta

    def test_clear(self, tmp_path) -> None:
        """Test clear drops every entry."""
        cache = InsightsCache(cache_dir=str(tmp_path))
        uri = cache.store("abc123", PAYLOAD)
        cache.clear()
        assert not cache.exists(uri)

    def test_ttl_from_environment(self, tmp_path, monkeypatch) -> None:
        """Test the default TTL is read from CACHE_TTL."""
        monkeypatch.setenv("CACHE_TTL", "60")
        cache = InsightsCache(cache_dir=str(tmp_path))
        assert cache._default_ttl == 60


class TestInsightsResource:
    """Tests for read_insights_resource."""

    def test_serves_cached_text(self, isolated_cache) -> None:
        """Test a cached result is served as JSON."""
        uri = isolated_cache.store("abc123", PAYLOAD)
        text, mime_type = read_insights_resource(uri)
        assert mime_type == "application/json"
        assert text == isolated_cache.get_text(uri)

    def test_uncached_raises(self, isolated_cache) -> None:
        """Test an uncached URI raises rather than recomputing."""
        with pytest.raises(ResourceNotFoundError, match="Call get_discovery_insights first"):
            read_insights_resource("insights://0000000000000000")
