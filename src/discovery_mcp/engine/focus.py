"""Planning focus ranking.

All nine domains start at zero. Each scoring pass is a fold that takes a
score table and returns a new one; nothing is updated in place. The ranked
output always holds every domain.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import assert_never

from discovery_mcp.data.labels import PLANNING_DOMAIN_LABELS
from discovery_mcp.data.value_cards import get_card_by_id
from discovery_mcp.engine.context import (
    IMMINENT_RETIREMENT_YEARS,
    NEAR_RETIREMENT_YEARS,
    is_federal_employee,
    years_to_retirement,
)
from discovery_mcp.engine.values import compute_derived_insights
from discovery_mcp.models import (
    DOMAIN_ORDER,
    BasicContext,
    DerivedInsights,
    DiscoverySnapshot,
    FinancialGoals,
    FocusArea,
    GoalCategory,
    GoalPriority,
    Importance,
    MaritalStatus,
    PlanningDomain,
    PlanningFocusRanking,
    TimeHorizon,
    ValueCategory,
    ValuesDiscovery,
)

logger = logging.getLogger(__name__)

D = PlanningDomain

VALUE_WEIGHT = 2
GOAL_WEIGHT = 3
SHORT_GOAL_BONUS = 2
MAX_RATIONALES = 3
MAX_CONNECTIONS = 3
MAX_TOP_PRIORITIES = 3
DEFAULT_RATIONALE = "General planning area"


@dataclass(frozen=True)
class DomainScore:
    """Accumulated score and annotations for one domain during ranking."""

    domain: PlanningDomain
    score: int = 0
    rationales: tuple[str, ...] = ()
    value_connections: tuple[str, ...] = ()
    goal_connections: tuple[str, ...] = ()
    risk_factors: tuple[str, ...] = ()


ScoreTable = Mapping[PlanningDomain, DomainScore]


def domains_for_value(category: ValueCategory) -> tuple[PlanningDomain, ...]:
    match category:
        case ValueCategory.SECURITY:
            return (D.RETIREMENT_INCOME, D.INSURANCE_RISK, D.CASH_FLOW_DEBT)
        case ValueCategory.FREEDOM:
            return (D.INVESTMENT_STRATEGY, D.CASH_FLOW_DEBT, D.RETIREMENT_INCOME)
        case ValueCategory.FAMILY:
            return (D.ESTATE_LEGACY, D.INSURANCE_RISK, D.HEALTHCARE_LTC)
        case ValueCategory.GROWTH:
            return (D.INVESTMENT_STRATEGY, D.TAX_OPTIMIZATION, D.BUSINESS_CAREER)
        case ValueCategory.CONTROL:
            return (D.CASH_FLOW_DEBT, D.TAX_OPTIMIZATION, D.INVESTMENT_STRATEGY)
        case ValueCategory.HEALTH:
            return (D.HEALTHCARE_LTC, D.INSURANCE_RISK)
        case ValueCategory.CONTRIBUTION:
            return (D.ESTATE_LEGACY, D.TAX_OPTIMIZATION)
        case ValueCategory.PURPOSE:
            return (D.BUSINESS_CAREER, D.ESTATE_LEGACY)
        case ValueCategory.QUALITY_OF_LIFE:
            return (D.RETIREMENT_INCOME, D.CASH_FLOW_DEBT, D.HEALTHCARE_LTC)
        case _ as unreachable:
            assert_never(unreachable)


def domains_for_goal(category: GoalCategory) -> tuple[PlanningDomain, ...]:
    match category:
        case GoalCategory.RETIREMENT:
            return (D.RETIREMENT_INCOME, D.INVESTMENT_STRATEGY, D.TAX_OPTIMIZATION)
        case GoalCategory.FAMILY_LEGACY:
            return (D.ESTATE_LEGACY, D.INSURANCE_RISK, D.CASH_FLOW_DEBT)
        case GoalCategory.LIFESTYLE:
            return (D.CASH_FLOW_DEBT, D.INVESTMENT_STRATEGY)
        case GoalCategory.SECURITY_PROTECTION:
            return (D.INSURANCE_RISK, D.CASH_FLOW_DEBT, D.RETIREMENT_INCOME)
        case GoalCategory.GIVING:
            return (D.ESTATE_LEGACY, D.TAX_OPTIMIZATION)
        case GoalCategory.CAREER_GROWTH:
            return (D.BUSINESS_CAREER, D.BENEFITS_OPTIMIZATION)
        case GoalCategory.HEALTH:
            return (D.HEALTHCARE_LTC, D.INSURANCE_RISK)
        case GoalCategory.MAJOR_PURCHASES:
            return (D.CASH_FLOW_DEBT, D.INVESTMENT_STRATEGY)
        case _ as unreachable:
            assert_never(unreachable)


def score_to_importance(score: int) -> Importance:
    if score >= 8:
        return Importance.CRITICAL
    if score >= 5:
        return Importance.HIGH
    if score >= 2:
        return Importance.MODERATE
    return Importance.LOW


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def _bump(
    table: ScoreTable,
    domain: PlanningDomain,
    points: int,
    rationale: str,
    *,
    risk: str | None = None,
    value_connections: tuple[str, ...] = (),
    goal_connections: tuple[str, ...] = (),
) -> dict[PlanningDomain, DomainScore]:
    """Return a new table with one domain's entry advanced."""
    current = table[domain]
    updated = replace(
        current,
        score=current.score + points,
        rationales=current.rationales + (rationale,),
        value_connections=_dedupe(current.value_connections + value_connections),
        goal_connections=_dedupe(current.goal_connections + goal_connections),
        risk_factors=current.risk_factors + ((risk,) if risk else ()),
    )
    return {**table, domain: updated}


def empty_table() -> dict[PlanningDomain, DomainScore]:
    return {domain: DomainScore(domain) for domain in PlanningDomain}


# ============================================================================
# SCORING PASSES
# ============================================================================


def _top_value_titles(values: ValuesDiscovery, limit: int = 2) -> tuple[str, ...]:
    titles = []
    for card_id in values.top5:
        card = get_card_by_id(card_id)
        titles.append(card.title if card else card_id)
    return tuple(titles[:limit])


def score_from_values(
    table: ScoreTable, values: ValuesDiscovery, derived: DerivedInsights
) -> ScoreTable:
    """
    +2 per domain mapped from the dominant and secondary categories.

    Matched categories are connected first; the top value titles follow once
    per touched domain.
    """
    categories = [c for c in (derived.dominant_category, derived.secondary_category) if c]
    result: ScoreTable = table
    touched: dict[PlanningDomain, None] = {}
    for category in categories:
        for domain in domains_for_value(category):
            result = _bump(
                result,
                domain,
                VALUE_WEIGHT,
                f"{category.value} values emphasize this area",
                value_connections=(category.value,),
            )
            touched[domain] = None

    titles = _top_value_titles(values)
    for domain in touched:
        current = result[domain]
        result = {
            **result,
            domain: replace(
                current, value_connections=_dedupe(current.value_connections + titles)
            ),
        }
    return result


def score_from_goals(table: ScoreTable, goals: FinancialGoals) -> ScoreTable:
    """+3 per domain for each HIGH goal, +2 more when its horizon is SHORT."""
    result: ScoreTable = table
    for goal in goals.goals:
        if goal.priority is not GoalPriority.HIGH:
            continue
        domains = domains_for_goal(goal.category)
        for domain in domains:
            result = _bump(
                result,
                domain,
                GOAL_WEIGHT,
                f"Supports goal: {goal.label}",
                goal_connections=(goal.label,),
            )
        if goal.time_horizon is TimeHorizon.SHORT:
            for domain in domains:
                result = _bump(result, domain, SHORT_GOAL_BONUS, f"Near-term goal: {goal.label}")
    return result


def score_from_context(table: ScoreTable, context: BasicContext) -> ScoreTable:
    """Retirement proximity, federal benefits, dependents and marriage."""
    result: ScoreTable = table

    years = years_to_retirement(context)
    if years is not None and years <= IMMINENT_RETIREMENT_YEARS:
        result = _bump(
            result,
            D.RETIREMENT_INCOME,
            5,
            "Retirement within 5 years",
            risk="Critical timing - income strategy decisions are imminent",
        )
        result = _bump(
            result, D.HEALTHCARE_LTC, 3, "Healthcare planning critical before retirement"
        )
        result = _bump(
            result, D.TAX_OPTIMIZATION, 2, "Tax strategy important during retirement transition"
        )
    elif years is not None and years <= NEAR_RETIREMENT_YEARS:
        result = _bump(result, D.RETIREMENT_INCOME, 3, "Retirement within 10 years")

    if is_federal_employee(context):
        result = _bump(
            result,
            D.BENEFITS_OPTIMIZATION,
            4,
            "Federal employee with complex benefit structure",
            risk="Federal benefits require specialized optimization",
        )

    if context.dependents:
        result = _bump(
            result,
            D.INSURANCE_RISK,
            2,
            f"{len(context.dependents)} dependents to protect",
            risk="Dependents require adequate protection",
        )
        result = _bump(result, D.ESTATE_LEGACY, 2, "Estate planning important with dependents")

    if context.marital_status is MaritalStatus.MARRIED:
        result = _bump(
            result, D.ESTATE_LEGACY, 1, "Married - coordinated estate planning beneficial"
        )

    return result


# Domains that carry a foundational risk note while under-scored
LOW_SCORE_RISKS: tuple[tuple[PlanningDomain, int, str], ...] = (
    (D.INSURANCE_RISK, 3, "Underinsurance poses significant financial risk"),
    (D.ESTATE_LEGACY, 3, "Lack of estate documents can cause complications"),
    (D.CASH_FLOW_DEBT, 2, "Cash flow management is foundational to all planning"),
)


def add_risk_factors(table: ScoreTable) -> ScoreTable:
    """Annotate low-scoring foundational domains. Scores are unchanged."""
    result = dict(table)
    for domain, threshold, note in LOW_SCORE_RISKS:
        current = result[domain]
        if current.score < threshold:
            result[domain] = replace(current, risk_factors=current.risk_factors + (note,))
    return result


# ============================================================================
# RANKING
# ============================================================================


def _rationale(score: DomainScore) -> str:
    unique = _dedupe(score.rationales)[:MAX_RATIONALES]
    return "; ".join(unique) or DEFAULT_RATIONALE


def rank_domains(table: ScoreTable) -> PlanningFocusRanking:
    """
    Sort domains by score, descending.

    Equal scores fall back to DOMAIN_ORDER, the PlanningDomain declaration order.
    """
    ordered = sorted(
        table.values(),
        key=lambda s: (-s.score, DOMAIN_ORDER[s.domain]),
    )
    areas = tuple(
        FocusArea(
            domain=score.domain,
            label=PLANNING_DOMAIN_LABELS[score.domain],
            priority=index + 1,
            score=score.score,
            importance=score_to_importance(score.score),
            rationale=_rationale(score),
            value_connections=score.value_connections[:MAX_CONNECTIONS],
            goal_connections=score.goal_connections[:MAX_CONNECTIONS],
            risk_factors=score.risk_factors,
        )
        for index, score in enumerate(ordered)
    )
    top = tuple(
        area.domain
        for area in areas
        if area.importance in (Importance.CRITICAL, Importance.HIGH)
    )[:MAX_TOP_PRIORITIES]
    return PlanningFocusRanking(areas=areas, top_priorities=top)


def build_focus_ranking(
    snapshot: DiscoverySnapshot,
    derived: DerivedInsights | None = None,
) -> PlanningFocusRanking:
    """Run every scoring pass over one snapshot and rank the result."""
    if derived is None:
        derived = compute_derived_insights(snapshot.values)

    table: ScoreTable = empty_table()
    table = score_from_values(table, snapshot.values, derived)
    table = score_from_goals(table, snapshot.goals)
    table = score_from_context(table, snapshot.basic_context)
    table = add_risk_factors(table)

    ranking = rank_domains(table)
    logger.debug(
        "focus ranking: "
        + ", ".join(f"{a.domain.value}={a.score}" for a in ranking.areas)
    )
    return ranking


def has_enough_data_for_focus_areas(snapshot: DiscoverySnapshot) -> bool:
    """Three or more top values or any goal, plus an age."""
    has_values = len(snapshot.values.top5) >= 3
    has_goals = len(snapshot.goals.goals) >= 1
    return (has_values or has_goals) and snapshot.basic_context.age is not None
