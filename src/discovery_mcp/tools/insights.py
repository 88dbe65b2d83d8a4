"""Full discovery insights tool."""

import logging
from time import perf_counter
from typing import Any

from discovery_mcp.data.cache import insights_cache
from discovery_mcp.engine.insights import (
    build_discovery_insights,
    build_input_summary,
    missing_data_suggestions,
    status_message,
)
from discovery_mcp.models import DiscoveryInsights
from discovery_mcp.tools.actions import actions_to_dict
from discovery_mcp.tools.strategy import profile_to_dict
from discovery_mcp.utils.normalize import snapshot_hash
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.validators import parse_snapshot

logger = logging.getLogger(__name__)


def insights_to_dict(insights: DiscoveryInsights) -> dict[str, Any]:
    """Serialize insights with display labels on the profile and actions."""
    return {
        "strategy_profile": profile_to_dict(insights.strategy_profile),
        "focus_areas": insights.focus_areas.to_dict(),
        "actions": actions_to_dict(insights.actions),
        "input_summary": insights.input_summary.to_dict(),
        "generated_at": insights.generated_at,
    }


async def get_discovery_insights(snapshot: dict[str, Any]) -> dict[str, Any]:
    """
    Run the whole insights pipeline over one snapshot.

    Below 25% completion the insights are null; the status message and
    missing-data suggestions say what to fill in next. A computed result is
    cached under insights://{snapshot_hash}.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        Dict with insights (or null), completion status and meta
    """
    start_time = perf_counter()

    try:
        parsed = parse_snapshot(snapshot)
    except ValueError as e:
        return build_error_response(
            error_type="invalid_parameters",
            message=str(e),
            field="snapshot",
        )

    digest = snapshot_hash(parsed)
    insights = build_discovery_insights(parsed)
    summary = insights.input_summary if insights else build_input_summary(parsed)

    result: dict[str, Any] = {
        "snapshot_hash": digest,
        "insights": None,
        "resource_uri": None,
        "input_summary": summary.to_dict(),
        "status_message": status_message(summary.completion_percentage),
        "missing_data_suggestions": missing_data_suggestions(parsed),
    }

    if insights is not None:
        payload = insights_to_dict(insights)
        result["insights"] = payload
        result["resource_uri"] = insights_cache.store(digest, payload)
        logger.debug(f"Cached insights at {result['resource_uri']}")

    duration_ms = (perf_counter() - start_time) * 1000
    result["meta"] = build_meta("get_discovery_insights", duration_ms)
    return result
