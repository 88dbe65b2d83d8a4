"""Discovery insights pipeline."""

from discovery_mcp.engine.actions import generate_action_recommendations
from discovery_mcp.engine.conditions import Facts, build_facts, evaluate_all, evaluate_any
from discovery_mcp.engine.focus import build_focus_ranking
from discovery_mcp.engine.insights import (
    build_discovery_insights,
    completion_percentage,
    missing_data_suggestions,
    status_message,
)
from discovery_mcp.engine.questions import generate_all_suggestions, generate_suggestions
from discovery_mcp.engine.strategy import build_strategy_profile
from discovery_mcp.engine.values import compute_derived_insights

__all__ = [
    "Facts",
    "build_discovery_insights",
    "build_facts",
    "build_focus_ranking",
    "build_strategy_profile",
    "completion_percentage",
    "compute_derived_insights",
    "evaluate_all",
    "evaluate_any",
    "generate_action_recommendations",
    "generate_all_suggestions",
    "generate_suggestions",
    "missing_data_suggestions",
    "status_message",
]
