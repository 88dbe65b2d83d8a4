"""Normalization utilities for diff-stable insights output.

Insights are recomputed in full on every request, so two results for the same
snapshot differ only in runtime fields (timestamps, durations). This module
strips those fields and produces canonical JSON for hashing and comparison.

The normalization contract:
1. Key ordering: sorted at every level
2. Runtime fields removed: generation timestamps and duration_ms
3. Arrays: order preserved (every list in the output is ranked or ordered)
"""

from __future__ import annotations

import copy
import hashlib
import json
from typing import Any

from discovery_mcp.models import DiscoverySnapshot

# Snapshot hash version - bump when hashed content changes shape
SNAPSHOT_VERSION = "1.0.0"

# High-churn paths removed before comparison
VOLATILE_PATHS: list[tuple[str, ...]] = [
    ("meta", "duration_ms"),
    ("generated_at",),
    ("insights", "generated_at"),
    ("insights", "actions", "generated_at"),
    ("actions", "generated_at"),
]


def canonical_dumps(obj: Any) -> str:
    """Produce canonical JSON string with sorted keys and minimal separators.

    Uses allow_nan=False to fail fast if NaN/inf values slip through.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def snapshot_hash(snapshot: DiscoverySnapshot) -> str:
    """Content hash of a discovery snapshot, used as the cache key.

    The hash covers SNAPSHOT_VERSION so a version bump invalidates old keys.
    """
    payload = {"snapshot_version": SNAPSHOT_VERSION, "snapshot": snapshot.to_dict()}
    return hashlib.sha256(canonical_dumps(payload).encode("utf-8")).hexdigest()[:16]


def normalize_for_diff(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Remove runtime fields from a tool result so equal inputs compare equal.

    Args:
        raw: Tool output dict

    Returns:
        Deep copy with volatile paths removed
    """
    data = copy.deepcopy(raw)
    for path in VOLATILE_PATHS:
        _delete_path(data, path)
    return data


def _delete_path(root: dict[str, Any], path: tuple[str, ...]) -> None:
    """Delete a nested key if it exists."""
    parent: Any = root
    for k in path[:-1]:
        if not isinstance(parent, dict) or k not in parent:
            return
        parent = parent[k]
    if isinstance(parent, dict):
        parent.pop(path[-1], None)
