"""Tests for normalize module."""

import pytest

from discovery_mcp.utils.normalize import (
    SNAPSHOT_VERSION,
    canonical_dumps,
    normalize_for_diff,
    snapshot_hash,
)
from discovery_mcp.utils.validators import parse_snapshot


class TestCanonicalDumps:
    """Tests for canonical_dumps function."""

    def test_sorted_keys(self):
        """Keys should be sorted at every level."""
        obj = {"z": 1, "a": 2, "m": {"z": 3, "a": 4}}
        assert canonical_dumps(obj) == '{"a":2,"m":{"a":4,"z":3},"z":1}'

    def test_minimal_separators(self):
        """Output should use minimal separators (no spaces)."""
        assert canonical_dumps({"a": [1, 2, 3]}) == '{"a":[1,2,3]}'

    def test_unicode_preserved(self):
        """Unicode should be preserved (not escaped)."""
        assert "Épargne" in canonical_dumps({"label": "Épargne"})

    def test_rejects_nan(self):
        """Should raise ValueError for NaN (allow_nan=False)."""
        with pytest.raises(ValueError, match="Out of range float values"):
            canonical_dumps({"value": float("nan")})


class TestSnapshotHash:
    """Tests for snapshot_hash function."""

    def test_short_hex_digest(self, near_retirement_security):
        """Hash should be 16 lowercase hex characters."""
        digest = snapshot_hash(near_retirement_security)
        assert len(digest) == 16
        assert all(c in "0123456789abcdef" for c in digest)

    def test_deterministic(self, make_payload):
        """Equal payloads hash equally, whatever the key casing."""
        camel = parse_snapshot(make_payload(age=50, target_retirement_age=60))
        snake = parse_snapshot({"basic_context": {"age": 50, "target_retirement_age": 60}})
        assert snapshot_hash(camel) == snapshot_hash(snake)

    def test_content_sensitive(self, make_snapshot):
        """Different content gives a different hash."""
        assert snapshot_hash(make_snapshot(age=50)) != snapshot_hash(make_snapshot(age=51))

    def test_version_present(self):
        """Snapshot version should be semver-like."""
        assert SNAPSHOT_VERSION.count(".") == 2


class TestNormalizeForDiff:
    """Tests for normalize_for_diff function."""

    def test_removes_runtime_fields(self):
        """Should remove duration and generation timestamps."""
        raw = {
            "meta": {"duration_ms": 12.3, "tool": "get_discovery_insights"},
            "insights": {
                "generated_at": "2026-01-15T12:00:00+00:00",
                "actions": {"generated_at": "2026-01-15T12:00:00+00:00", "top_actions": []},
            },
        }
        result = normalize_for_diff(raw)
        assert result["meta"] == {"tool": "get_discovery_insights"}
        assert result["insights"] == {"actions": {"top_actions": []}}

    def test_does_not_mutate_input(self):
        """Input dict should be left untouched."""
        raw = {"meta": {"duration_ms": 1.0}}
        normalize_for_diff(raw)
        assert raw == {"meta": {"duration_ms": 1.0}}

    def test_missing_paths_ignored(self):
        """Absent or null sections should not raise."""
        assert normalize_for_diff({"insights": None}) == {"insights": None}
