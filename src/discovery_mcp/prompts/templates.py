"""Prompt templates for discovery review."""

from typing import Any

# Prompt definitions
PROMPTS = {
    "discovery_review": {
        "description": "Plain-language review of a client's discovery insights",
        "arguments": [{"name": "snapshot_hash", "required": False}],
    },
    "action_plan_brief": {
        "description": "Short advisor brief built from the ranked action plan",
        "arguments": [{"name": "max_actions", "required": False}],
    },
}


def list_prompts() -> list[dict[str, Any]]:
    """List available prompts."""
    return [
        {
            "name": name,
            "description": info["description"],
            "arguments": info["arguments"],
        }
        for name, info in PROMPTS.items()
    ]


def get_prompt(name: str, arguments: dict[str, str]) -> dict[str, Any] | None:
    """
    Get a prompt by name with arguments filled in.

    Returns dict with 'messages' key for MCP GetPromptResult.
    """
    if name not in PROMPTS:
        return None

    if name == "discovery_review":
        snapshot_hash = arguments.get("snapshot_hash", "")
        if snapshot_hash:
            source = f"""Read the cached result at insights://{snapshot_hash}.
If it is not cached, ask me for my discovery snapshot and call get_discovery_insights."""
        else:
            source = """Call get_discovery_insights with my discovery snapshot.
If insights is null, list the missing_data_suggestions and stop."""
        return {
            "messages": [
                {
                    "role": "user",
                    "content": f"""Review my financial discovery results.

{source}

Then provide:
1. **Planning Posture**: Restate the strategy_profile summary in your own words
2. **Dimensions**: One line per dimension with its value and confidence
3. **Where To Focus**: The top_priorities with each area's rationale
4. **Values Link**: How my top values connect to those areas
5. **Gaps**: Any low-confidence dimension and what data would firm it up

Use the labels from the result. Do not invent numbers or products.""",
                }
            ]
        }

    if name == "action_plan_brief":
        max_actions = arguments.get("max_actions", "") or "5"
        return {
            "messages": [
                {
                    "role": "user",
                    "content": f"""Prepare a brief for my next planning meeting.

Use these tools in order:
1. get_focus_areas(snapshot)
2. get_action_plan(snapshot)

Then provide, for at most {max_actions} actions in the returned order:
- **Action**: Title and urgency label
- **Why**: The personalized rationale
- **Who**: Self-guided, advisor or specialist
- **Depends On**: Any listed dependencies

Close with one sentence tying the plan to my top focus area.
Keep the order exactly as returned. Do not re-rank.""",
                }
            ]
        }

    return None
