"""Action plan tool."""

from time import perf_counter
from typing import Any

from discovery_mcp.data.labels import (
    ACTION_GUIDANCE_LABELS,
    ACTION_TYPE_LABELS,
    ACTION_URGENCY_LABELS,
    PLANNING_DOMAIN_LABELS,
)
from discovery_mcp.engine.actions import (
    generate_action_recommendations,
    has_enough_data_for_actions,
)
from discovery_mcp.engine.focus import build_focus_ranking
from discovery_mcp.models import ActionRecommendation, ActionRecommendations
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.validators import parse_snapshot


def action_to_dict(action: ActionRecommendation) -> dict[str, Any]:
    """Serialize one recommendation with its display labels."""
    result = action.to_dict()
    result["label"] = ACTION_TYPE_LABELS[action.type]
    result["guidance_label"] = ACTION_GUIDANCE_LABELS[action.guidance]
    result["urgency_label"] = ACTION_URGENCY_LABELS[action.urgency]
    result["domain_label"] = PLANNING_DOMAIN_LABELS[action.domain]
    return result


def actions_to_dict(actions: ActionRecommendations) -> dict[str, Any]:
    return {
        "recommendations": [action_to_dict(a) for a in actions.recommendations],
        "top_actions": list(actions.top_actions),
        "generated_at": actions.generated_at,
    }


async def get_action_plan(snapshot: dict[str, Any]) -> dict[str, Any]:
    """
    Generate the capped, urgency-sorted action plan for a snapshot.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        Dict with at most 7 recommendations, top action ids and meta
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
    actions = generate_action_recommendations(parsed, ranking)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        **actions_to_dict(actions),
        "has_enough_data": has_enough_data_for_actions(ranking),
        "meta": build_meta("get_action_plan", duration_ms),
    }
