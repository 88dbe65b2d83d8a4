"""Utility modules."""

from discovery_mcp.utils.normalize import canonical_dumps, normalize_for_diff, snapshot_hash
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.sanitize import sanitize_label, sanitize_text
from discovery_mcp.utils.validators import check_rule, parse_snapshot

__all__ = [
    "canonical_dumps",
    "normalize_for_diff",
    "snapshot_hash",
    "build_error_response",
    "build_meta",
    "sanitize_label",
    "sanitize_text",
    "check_rule",
    "parse_snapshot",
]
