"""Discovery insights tools."""

from discovery_mcp.tools.actions import get_action_plan
from discovery_mcp.tools.focus import get_focus_areas
from discovery_mcp.tools.insights import get_discovery_insights
from discovery_mcp.tools.questions import get_guided_questions, get_suggestions
from discovery_mcp.tools.strategy import get_strategy_profile
from discovery_mcp.tools.values import get_values_summary, list_value_cards

__all__ = [
    "get_action_plan",
    "get_discovery_insights",
    "get_focus_areas",
    "get_guided_questions",
    "get_strategy_profile",
    "get_suggestions",
    "get_values_summary",
    "list_value_cards",
]
