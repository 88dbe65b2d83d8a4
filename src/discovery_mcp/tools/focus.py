"""Planning focus areas tool."""

from time import perf_counter
from typing import Any

from discovery_mcp.engine.focus import build_focus_ranking, has_enough_data_for_focus_areas
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.validators import parse_snapshot


async def get_focus_areas(snapshot: dict[str, Any]) -> dict[str, Any]:
    """
    Rank all nine planning domains for a snapshot.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        Dict with ranked areas (priority 1 first), top priorities and meta
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

    ranking = build_focus_ranking(parsed)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        **ranking.to_dict(),
        "has_enough_data": has_enough_data_for_focus_areas(parsed),
        "meta": build_meta("get_focus_areas", duration_ms),
    }
