"""Action recommendation generation.

Matches the static template catalog against a snapshot and its focus
ranking, personalizes rationale text, escalates urgency for retirement-
sensitive domains and returns a sorted, capped list.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import assert_never

from discovery_mcp.data.action_templates import ACTION_TEMPLATES, ActionTemplate
from discovery_mcp.data.value_cards import get_card_by_id
from discovery_mcp.engine.conditions import Facts, build_facts, evaluate_all
from discovery_mcp.models import (
    URGENCY_ORDER,
    ActionRecommendation,
    ActionRecommendations,
    ActionUrgency,
    DiscoverySnapshot,
    GoalPriority,
    PlanningDomain,
    PlanningFocusRanking,
)

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 7
MAX_TOP_ACTIONS = 5
UNRANKED_DOMAIN = 99

DEFAULT_VALUE_NAME = "financial security"
DEFAULT_GOAL_NAME = "your financial goals"

# Domains whose actions move up one urgency tier near retirement
RETIREMENT_SENSITIVE_DOMAINS = frozenset(
    {
        PlanningDomain.RETIREMENT_INCOME,
        PlanningDomain.HEALTHCARE_LTC,
        PlanningDomain.TAX_OPTIMIZATION,
    }
)

_PLACEHOLDER = re.compile(r"\{(\w*)\}")


def primary_value_name(snapshot: DiscoverySnapshot) -> str:
    """Lowercased title of the first top-5 card."""
    if not snapshot.values.top5:
        return DEFAULT_VALUE_NAME
    card = get_card_by_id(snapshot.values.top5[0])
    return card.title.lower() if card else DEFAULT_VALUE_NAME


def primary_goal_name(snapshot: DiscoverySnapshot) -> str:
    """Label of the first HIGH-priority goal."""
    goal = next(
        (g for g in snapshot.goals.goals if g.priority is GoalPriority.HIGH),
        None,
    )
    return goal.label if goal else DEFAULT_GOAL_NAME


def fill_placeholders(template: str, substitutions: Mapping[str, str]) -> str:
    """
    Substitute ``{name}`` placeholders from a closed set.

    Placeholders outside ``substitutions`` are removed rather than left
    literally in the text.
    """

    def _sub(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in substitutions:
            logger.debug(f"Dropping unknown placeholder: {{{name}}}")
            return ""
        return substitutions[name]

    text = _PLACEHOLDER.sub(_sub, template)
    return re.sub(r" {2,}", " ", text).replace(" .", ".").strip()


def escalate(urgency: ActionUrgency) -> ActionUrgency:
    """One tier more urgent, capped at IMMEDIATE."""
    match urgency:
        case ActionUrgency.MEDIUM_TERM:
            return ActionUrgency.NEAR_TERM
        case ActionUrgency.NEAR_TERM | ActionUrgency.IMMEDIATE:
            return ActionUrgency.IMMEDIATE
        case ActionUrgency.ONGOING:
            return ActionUrgency.ONGOING
        case _ as unreachable:
            assert_never(unreachable)


def adjust_urgency(template: ActionTemplate, facts: Facts) -> ActionUrgency:
    if facts.near_retirement and template.domain in RETIREMENT_SENSITIVE_DOMAINS:
        return escalate(template.default_urgency)
    return template.default_urgency


def is_applicable(template: ActionTemplate, facts: Facts) -> bool:
    """All conditions must hold. A template without conditions never applies."""
    return evaluate_all(template.conditions, facts, when_empty=False)


def _value_connections(snapshot: DiscoverySnapshot) -> tuple[str, ...]:
    cards = (get_card_by_id(card_id) for card_id in snapshot.values.top5[:2])
    return tuple(card.title for card in cards if card)


def _goal_connections(snapshot: DiscoverySnapshot) -> tuple[str, ...]:
    high = [g.label for g in snapshot.goals.goals if g.priority is GoalPriority.HIGH]
    return tuple(high[:2])


def template_to_action(
    template: ActionTemplate,
    snapshot: DiscoverySnapshot,
    facts: Facts,
) -> ActionRecommendation:
    substitutions = {
        "value": primary_value_name(snapshot),
        "goal": primary_goal_name(snapshot),
    }
    return ActionRecommendation(
        id=template.id,
        title=template.title,
        description=template.description,
        rationale=fill_placeholders(template.rationale_template, substitutions),
        outcome=template.outcome,
        type=template.type,
        guidance=template.guidance,
        urgency=adjust_urgency(template, facts),
        domain=template.domain,
        value_connections=_value_connections(snapshot),
        goal_connections=_goal_connections(snapshot),
        dependencies=template.dependencies,
    )


def generate_action_recommendations(
    snapshot: DiscoverySnapshot,
    ranking: PlanningFocusRanking,
    *,
    templates: Sequence[ActionTemplate] = ACTION_TEMPLATES,
    now: datetime | None = None,
) -> ActionRecommendations:
    """
    Build the capped, sorted recommendation list.

    Sort key is (urgency tier, focus rank of the action's domain, catalog
    order). Domains missing from the ranking sort last.

    Args:
        snapshot: Discovery snapshot
        ranking: Focus ranking computed from the same snapshot
        templates: Template catalog (defaults to the built-in catalog)
        now: Generation timestamp override

    Returns:
        ActionRecommendations with at most 7 entries and at most 5 top actions
    """
    facts = build_facts(snapshot, ranking)

    matched = [t for t in templates if is_applicable(t, facts)]
    logger.debug(f"{len(matched)} of {len(templates)} action templates applicable")

    def sort_key(pair: tuple[ActionTemplate, ActionRecommendation]) -> tuple[int, int, int]:
        template, action = pair
        rank = ranking.rank_of(action.domain)
        return (
            URGENCY_ORDER[action.urgency],
            rank if rank is not None else UNRANKED_DOMAIN,
            template.order,
        )

    pairs = sorted(
        ((t, template_to_action(t, snapshot, facts)) for t in matched),
        key=sort_key,
    )
    recommendations = tuple(action for _, action in pairs)[:MAX_RECOMMENDATIONS]

    top_actions = tuple(
        action.id
        for action in recommendations
        if action.urgency in (ActionUrgency.IMMEDIATE, ActionUrgency.NEAR_TERM)
    )[:MAX_TOP_ACTIONS]

    generated_at = (now or datetime.now(timezone.utc)).isoformat()
    return ActionRecommendations(
        recommendations=recommendations,
        top_actions=top_actions,
        generated_at=generated_at,
    )


def has_enough_data_for_actions(ranking: PlanningFocusRanking | None) -> bool:
    """Actions need a non-empty focus ranking."""
    return ranking is not None and len(ranking.areas) > 0
