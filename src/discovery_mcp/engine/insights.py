"""Discovery insights orchestration.

Scores data completeness, gates on it, then runs the strategy scorer, the
focus ranker and the action generator in dependency order over one
snapshot. Below the completeness gate the result is None, which is a valid
empty state rather than an error.
"""

import logging
from datetime import datetime, timezone

from discovery_mcp.engine.actions import (
    MAX_RECOMMENDATIONS,
    MAX_TOP_ACTIONS,
    generate_action_recommendations,
)
from discovery_mcp.engine.focus import build_focus_ranking
from discovery_mcp.engine.strategy import build_strategy_profile
from discovery_mcp.engine.values import compute_derived_insights
from discovery_mcp.models import (
    URGENCY_ORDER,
    DiscoveryInsights,
    DiscoverySnapshot,
    InputSummary,
    PlanningDomain,
)

logger = logging.getLogger(__name__)

MIN_COMPLETION_FOR_INSIGHTS = 25


def _goal_weight(count: int, full: int, partial: int, full_at: int) -> int:
    if count >= full_at:
        return full
    if count >= 1:
        return partial
    return 0


def completion_percentage(snapshot: DiscoverySnapshot) -> int:
    """
    Weighted completeness, 0-100.

    Context, values, goals and purpose each carry 25 points, split across
    presence checks within the section.
    """
    score = 0

    context = snapshot.basic_context
    if context.age is not None:
        score += 10
    if context.target_retirement_age is not None:
        score += 10
    if context.marital_status is not None:
        score += 5

    values = snapshot.values
    if len(values.top5) == 5:
        score += 15
    elif values.top5:
        score += 5
    if values.non_negotiables:
        score += 5
    if values.tradeoff_responses:
        score += 5

    goals = snapshot.goals.goals
    score += _goal_weight(sum(1 for g in goals if g.priority), 15, 8, full_at=3)
    score += _goal_weight(sum(1 for g in goals if g.time_horizon), 5, 2, full_at=3)
    score += _goal_weight(sum(1 for g in goals if g.flexibility), 5, 2, full_at=3)

    purpose = snapshot.purpose
    if purpose.primary_driver is not None:
        score += 10
    if purpose.tradeoff_anchors:
        score += 5
    if purpose.final_statement:
        score += 10

    return min(score, 100)


def build_input_summary(snapshot: DiscoverySnapshot) -> InputSummary:
    return InputSummary(
        has_values=len(snapshot.values.top5) > 0,
        has_goals=len(snapshot.goals.goals) > 0,
        has_purpose=bool(snapshot.purpose.final_statement),
        has_basic_context=snapshot.basic_context.age is not None,
        completion_percentage=completion_percentage(snapshot),
    )


def has_enough_data_for_insights(snapshot: DiscoverySnapshot) -> bool:
    return completion_percentage(snapshot) >= MIN_COMPLETION_FOR_INSIGHTS


def status_message(completion: int) -> str:
    if completion < 25:
        return "Complete more discovery sections to generate planning insights."
    if completion < 50:
        return "Basic insights available. Complete more sections for deeper analysis."
    if completion < 75:
        return "Good foundation for insights. Additional sections will refine recommendations."
    return "Comprehensive data available for detailed planning insights."


def missing_data_suggestions(snapshot: DiscoverySnapshot) -> list[str]:
    """Ordered hints naming the sections that would most improve the insights."""
    hints: list[str] = []

    if snapshot.basic_context.age is None:
        hints.append("Add your age and retirement target")

    top5 = snapshot.values.top5
    if not top5:
        hints.append("Complete Values Discovery to identify your core values")
    elif len(top5) < 5:
        hints.append("Select all 5 top values in Values Discovery")
    if not snapshot.values.non_negotiables:
        hints.append("Identify your non-negotiable values")

    goals = snapshot.goals.goals
    if not goals:
        hints.append("Add financial goals")
    else:
        if any(g.priority is None for g in goals):
            hints.append("Set priorities for all your goals")
        if any(g.time_horizon is None for g in goals):
            hints.append("Add time horizons to your goals")

    if not snapshot.purpose.final_statement:
        hints.append("Complete your Statement of Financial Purpose")

    return hints


def check_invariants(insights: DiscoveryInsights) -> list[str]:
    """
    Verify output invariants; each violation is logged as a WARNING.

    Returns:
        Violation descriptions (empty when the result is consistent)
    """
    violations: list[str] = []
    recommendations = insights.actions.recommendations

    if len(recommendations) > MAX_RECOMMENDATIONS:
        violations.append(f"{len(recommendations)} recommendations exceeds {MAX_RECOMMENDATIONS}")
    if len(insights.actions.top_actions) > MAX_TOP_ACTIONS:
        violations.append(
            f"{len(insights.actions.top_actions)} top actions exceeds {MAX_TOP_ACTIONS}"
        )

    domains = {area.domain for area in insights.focus_areas.areas}
    if len(insights.focus_areas.areas) != len(PlanningDomain) or domains != set(PlanningDomain):
        violations.append("focus ranking does not hold every planning domain exactly once")

    tiers = [URGENCY_ORDER[a.urgency] for a in recommendations]
    if any(later < earlier for earlier, later in zip(tiers, tiers[1:])):
        violations.append("recommendations are not ordered by urgency")

    for violation in violations:
        logger.warning(f"invariant violation: {violation}")
    return violations


def build_discovery_insights(
    snapshot: DiscoverySnapshot,
    now: datetime | None = None,
) -> DiscoveryInsights | None:
    """
    Run the whole pipeline over one consistent snapshot.

    Args:
        snapshot: Discovery snapshot
        now: Generation timestamp override; the only non-derived output field

    Returns:
        DiscoveryInsights, or None when completeness is below 25%
    """
    summary = build_input_summary(snapshot)
    if summary.completion_percentage < MIN_COMPLETION_FOR_INSIGHTS:
        logger.debug(f"insights gated at {summary.completion_percentage}% completion")
        return None

    generated = now or datetime.now(timezone.utc)
    derived = compute_derived_insights(snapshot.values)
    profile = build_strategy_profile(snapshot, derived)
    ranking = build_focus_ranking(snapshot, derived)
    actions = generate_action_recommendations(snapshot, ranking, now=generated)

    insights = DiscoveryInsights(
        strategy_profile=profile,
        focus_areas=ranking,
        actions=actions,
        input_summary=summary,
        generated_at=generated.isoformat(),
    )
    check_invariants(insights)
    return insights
