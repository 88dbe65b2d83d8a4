"""Discovery Insights MCP Server using FastMCP."""

import json
import logging
import os
from typing import Any

from fastmcp import FastMCP

from discovery_mcp import SCHEMA_VERSION, SERVER_VERSION, tools
from discovery_mcp.data.cache import insights_uri
from discovery_mcp.prompts.templates import get_prompt
from discovery_mcp.resources.insights_resource import (
    ResourceNotFoundError,
    read_insights_resource,
)

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Create FastMCP server instance
mcp = FastMCP(
    name="discovery-insights",
)


# ============================================================================
# TOOLS
# ============================================================================


@mcp.tool
async def get_discovery_insights(snapshot: dict[str, Any]) -> str:
    """
    Compute the full planning insights for a discovery snapshot.

    Runs the strategy profile, focus-area ranking and action plan over one
    consistent snapshot. Below 25% completion, insights is null and the
    response lists what to complete next.

    Args:
        snapshot: Discovery snapshot with basicContext, valuesDiscovery,
                  financialGoals, financialPurpose and answers sections (all optional)

    Returns:
        JSON with insights (or null), completion status, resource_uri and meta
    """
    result = await tools.get_discovery_insights(snapshot=snapshot)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_strategy_profile(snapshot: dict[str, Any]) -> str:
    """
    Classify planning posture along five strategy dimensions.

    Dimensions: income strategy, timing sensitivity, planning flexibility,
    complexity tolerance and guidance level, each with confidence and rationale.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        JSON with the profile, its summary sentence and a readiness flag
    """
    result = await tools.get_strategy_profile(snapshot=snapshot)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_focus_areas(snapshot: dict[str, Any]) -> str:
    """
    Rank all nine financial-planning domains by relevance.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        JSON with ranked focus areas (score, importance, rationale, connections)
        and up to 3 top priorities
    """
    result = await tools.get_focus_areas(snapshot=snapshot)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_action_plan(snapshot: dict[str, Any]) -> str:
    """
    Generate personalized next-step recommendations.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        JSON with at most 7 recommendations sorted by urgency and focus rank,
        plus up to 5 top action ids
    """
    result = await tools.get_action_plan(snapshot=snapshot)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_values_summary(snapshot: dict[str, Any]) -> str:
    """
    Summarize values discovery: category counts, dominant categories,
    conflict flags and tradeoff indices.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        JSON with derived insights and per-category percentages
    """
    result = await tools.get_values_summary(snapshot=snapshot)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_guided_questions(snapshot: dict[str, Any], domain: str | None = None) -> str:
    """
    Get applicable guided questions per planning topic.

    Args:
        snapshot: Discovery snapshot JSON object (answers keyed by question id)
        domain: Optional topic (INVESTMENTS, SAVINGS, ANNUITIES, INCOME_PLAN,
                TAXES, ESTATE_PLAN, INSURANCE, EMPLOYEE_BENEFITS)

    Returns:
        JSON with relevance, questions, next unanswered question and progress
    """
    result = await tools.get_guided_questions(snapshot=snapshot, domain=domain)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def get_suggestions(snapshot: dict[str, Any], domain: str | None = None) -> str:
    """
    Get suggestions triggered by guided-question answers.

    Args:
        snapshot: Discovery snapshot JSON object (answers keyed by question id)
        domain: Optional topic to restrict suggestions to

    Returns:
        JSON with suggestions grouped by topic (HIGH priority first) and counts
    """
    result = await tools.get_suggestions(snapshot=snapshot, domain=domain)
    return json.dumps(result, indent=2, default=str)


@mcp.tool
async def list_value_cards(category: str | None = None) -> str:
    """
    List the value cards used in values discovery.

    Args:
        category: Optional category (e.g., SECURITY, FAMILY, FREEDOM)

    Returns:
        JSON with cards and category display names
    """
    result = await tools.list_value_cards(category=category)
    return json.dumps(result, indent=2, default=str)


# ============================================================================
# RESOURCES
# ============================================================================


@mcp.resource("insights://{snapshot_hash}")
def get_cached_insights(snapshot_hash: str) -> str:
    """
    Get a previously computed insights result as JSON.

    Must call get_discovery_insights first to populate the cache.

    Args:
        snapshot_hash: Hash returned by get_discovery_insights

    Returns:
        Canonical JSON of the cached insights
    """
    try:
        json_text, _ = read_insights_resource(insights_uri(snapshot_hash))
        return json_text
    except ResourceNotFoundError as e:
        return str(e)


# ============================================================================
# PROMPTS
# ============================================================================


@mcp.prompt
def discovery_review(snapshot_hash: str = "") -> str:
    """Plain-language review of discovery insights."""
    result = get_prompt("discovery_review", {"snapshot_hash": snapshot_hash})
    if result:
        return result["messages"][0]["content"]
    return "Review my discovery insights using get_discovery_insights."


@mcp.prompt
def action_plan_brief(max_actions: str = "5") -> str:
    """Short advisor brief built from the action plan."""
    result = get_prompt("action_plan_brief", {"max_actions": max_actions})
    if result:
        return result["messages"][0]["content"]
    return "Summarize my action plan using get_action_plan."


# ============================================================================
# ENTRY POINT
# ============================================================================


def main() -> None:
    """Run the MCP server."""
    logger.info(
        f"Starting Discovery Insights MCP Server v{SERVER_VERSION} (schema v{SCHEMA_VERSION})"
    )
    mcp.run()


if __name__ == "__main__":
    main()
