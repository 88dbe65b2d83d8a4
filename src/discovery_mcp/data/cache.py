"""Result caching for computed discovery insights."""

import gzip
import json
import os
from datetime import datetime, timezone
from typing import Any

import diskcache

from discovery_mcp.utils.normalize import canonical_dumps

URI_SCHEME = "insights://"


def insights_uri(snapshot_hash: str) -> str:
    """Canonical resource URI for one snapshot hash."""
    return f"{URI_SCHEME}{snapshot_hash}"


class InsightsCache:
    """
    Cache stores the exact canonical JSON of a computed result.

    Keys are content hashes of the input snapshot, so an entry can only ever
    be served for the snapshot it was computed from. Resources only serve
    cached data. Never recompute.
    """

    def __init__(self, cache_dir: str | None = None):
        if cache_dir is None:
            cache_dir = os.environ.get("CACHE_DIR", ".cache/insights")
        self.cache: diskcache.Cache = diskcache.Cache(cache_dir)
        self._default_ttl = int(os.environ.get("CACHE_TTL", "3600"))  # 1 hour

    def store(
        self,
        snapshot_hash: str,
        payload: dict[str, Any],
        ttl: int | None = None,
    ) -> str:
        """
        Store gzipped canonical JSON + metadata, return canonical URI.

        Args:
            snapshot_hash: Content hash of the snapshot the payload came from
            payload: JSON-ready insights result
            ttl: Cache TTL in seconds (default: CACHE_TTL)

        Returns:
            Canonical URI for the cached result
        """
        uri = insights_uri(snapshot_hash)

        json_bytes = canonical_dumps(payload).encode("utf-8")
        json_gz = gzip.compress(json_bytes)

        summary = payload.get("input_summary") or {}
        entry: dict[str, Any] = {
            "json_gz": json_gz,
            "encoding": "gzip",
            "size_bytes": len(json_bytes),
            "compressed_bytes": len(json_gz),
            "hash": snapshot_hash,
            "completion_percentage": summary.get("completion_percentage"),
            "stored_at": datetime.now(timezone.utc).isoformat(),
        }

        expire = ttl if ttl is not None else self._default_ttl
        self.cache.set(uri, entry, expire=expire)

        return uri

    def get(self, uri: str) -> dict[str, Any] | None:
        return self.cache.get(uri)

    def get_text(self, uri: str) -> str | None:
        """Decompressed canonical JSON text, or None if not cached."""
        entry = self.get(uri)
        if not entry:
            return None
        return gzip.decompress(entry["json_gz"]).decode("utf-8")

    def get_json(self, uri: str) -> dict[str, Any] | None:
        text = self.get_text(uri)
        return json.loads(text) if text is not None else None

    def get_metadata(self, uri: str) -> dict[str, Any] | None:
        """
        Get cache metadata without decompressing data.

        Args:
            uri: Canonical URI

        Returns:
            Metadata dict or None if not found
        """
        entry = self.get(uri)
        if not entry:
            return None
        return {
            "hash": entry["hash"],
            "size_bytes": entry["size_bytes"],
            "compressed_bytes": entry["compressed_bytes"],
            "completion_percentage": entry["completion_percentage"],
            "stored_at": entry["stored_at"],
        }

    def exists(self, uri: str) -> bool:
        """Check if URI exists in cache."""
        return uri in self.cache

    def clear(self) -> None:
        """Clear all cached data."""
        self.cache.clear()


# Global instance
insights_cache = InsightsCache()
