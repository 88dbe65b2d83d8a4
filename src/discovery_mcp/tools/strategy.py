"""Strategy profile tool."""

from time import perf_counter
from typing import Any

from discovery_mcp.data.labels import profile_labels
from discovery_mcp.engine.strategy import build_strategy_profile, has_enough_data_for_profile
from discovery_mcp.models import StrategyProfile
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.validators import parse_snapshot


def profile_to_dict(profile: StrategyProfile) -> dict[str, Any]:
    """Serialize a profile with display labels for each dimension value."""
    result = profile.to_dict()
    result["labels"] = profile_labels(
        profile.income_strategy.value,
        profile.timing_sensitivity.value,
        profile.planning_flexibility.value,
        profile.complexity_tolerance.value,
        profile.guidance_level.value,
    )
    return result


async def get_strategy_profile(snapshot: dict[str, Any]) -> dict[str, Any]:
    """
    Classify planning posture along the five strategy dimensions.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        Dict with profile, readiness flag and meta
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

    profile = build_strategy_profile(parsed)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "profile": profile_to_dict(profile),
        "has_enough_data": has_enough_data_for_profile(parsed),
        "meta": build_meta("get_strategy_profile", duration_ms),
    }
