"""Strategy dimension scoring.

Five independent classifiers share one shape: accumulate a signed score from
weighted factors, record a rationale fragment per factor, map the score to an
enum through fixed thresholds and derive a confidence tier. The thresholds
are behavioral contracts and are kept literal.
"""

import logging
from typing import assert_never

from discovery_mcp.engine.context import (
    IMMINENT_RETIREMENT_YEARS,
    LONG_HORIZON_YEARS,
    NEAR_RETIREMENT_YEARS,
    is_federal_employee,
    years_to_retirement,
)
from discovery_mcp.engine.values import compute_derived_insights
from discovery_mcp.models import (
    ComplexityTolerance,
    Confidence,
    DerivedInsights,
    DiscoverySnapshot,
    FinancialPurpose,
    GoalFlexibility,
    GoalPriority,
    GuidanceLevel,
    IncomeStrategy,
    PlanningFlexibility,
    StrategyDimension,
    StrategyProfile,
    TimeHorizon,
    TimingSensitivity,
    TradeoffAxis,
    TradeoffChoice,
    ValueCategory,
)

logger = logging.getLogger(__name__)

RATIONALE_SEPARATOR = "; "
MIN_TOP5_FOR_PROFILE = 3

# Security-vs-growth index cutoffs used when no purpose anchor exists
INDEX_STABILITY_LEAN = 25
INDEX_GROWTH_LEAN = 75


def _has_category(derived: DerivedInsights, category: ValueCategory) -> bool:
    return category in (derived.dominant_category, derived.secondary_category)


def _rationale(parts: list[str], fallback: str) -> str:
    return RATIONALE_SEPARATOR.join(parts) if parts else fallback


def _confidence_from_count(count: int) -> Confidence:
    if count >= 3:
        return Confidence.HIGH
    if count >= 1:
        return Confidence.MEDIUM
    return Confidence.LOW


def _anchor_lean(purpose: FinancialPurpose, axis: TradeoffAxis) -> int | None:
    """Signed lean (-2..2) of the first anchor on an axis, None if unanswered."""
    anchor = next((a for a in purpose.tradeoff_anchors if a.axis is axis), None)
    if anchor is None:
        return None
    match anchor.lean:
        case TradeoffChoice.A:
            return -2 if anchor.strength == 1 else -1
        case TradeoffChoice.B:
            return 2 if anchor.strength == 5 else 1
        case TradeoffChoice.NEUTRAL:
            return 0
        case _ as unreachable:
            assert_never(unreachable)


def security_growth_lean(snapshot: DiscoverySnapshot, derived: DerivedInsights) -> int:
    """
    Lean on the security-vs-growth axis: negative toward certainty.

    The purpose anchor wins; without one, the values tradeoff index is used.
    """
    lean = _anchor_lean(snapshot.purpose, TradeoffAxis.SECURITY_VS_GROWTH)
    if lean is not None:
        return lean
    index = derived.tradeoff_indices.get("security_vs_growth")
    if index is None:
        return 0
    if index <= INDEX_STABILITY_LEAN:
        return -1
    if index >= INDEX_GROWTH_LEAN:
        return 1
    return 0


def _count_goals(snapshot: DiscoverySnapshot, **match: object) -> int:
    return sum(
        1
        for goal in snapshot.goals.goals
        if all(getattr(goal, name) is value for name, value in match.items())
    )


# ============================================================================
# DIMENSIONS
# ============================================================================


def score_income_strategy(
    snapshot: DiscoverySnapshot, derived: DerivedInsights
) -> StrategyDimension[IncomeStrategy]:
    stability = 0
    growth = 0
    rationales: list[str] = []

    if _has_category(derived, ValueCategory.SECURITY):
        stability += 3
        rationales.append("Security is a dominant value")
    if _has_category(derived, ValueCategory.FREEDOM):
        growth += 2
        rationales.append("Freedom is a priority value")
    if _has_category(derived, ValueCategory.GROWTH):
        growth += 3
        rationales.append("Growth is a dominant value")

    years = years_to_retirement(snapshot.basic_context)
    if years is not None:
        if years <= IMMINENT_RETIREMENT_YEARS:
            stability += 3
            rationales.append("Near retirement (5 years or less)")
        elif years <= NEAR_RETIREMENT_YEARS:
            stability += 1
            rationales.append("Approaching retirement (10 years or less)")
        elif years > LONG_HORIZON_YEARS:
            growth += 2
            rationales.append("Long time horizon (20+ years)")

    lean = security_growth_lean(snapshot, derived)
    if lean <= -1:
        stability += 2
        rationales.append("Prefers certainty over upside")
    elif lean >= 1:
        growth += 2
        rationales.append("Accepts uncertainty for potential upside")

    net = growth - stability
    if net >= 3:
        value = IncomeStrategy.GROWTH_FOCUSED
    elif net <= -3:
        value = IncomeStrategy.STABILITY_FOCUSED
    else:
        value = IncomeStrategy.BALANCED

    if abs(net) >= 4:
        confidence = Confidence.HIGH
    elif abs(net) >= 2:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    logger.debug(f"income_strategy stability={stability} growth={growth} -> {value.value}")
    return StrategyDimension(value, confidence, _rationale(rationales, "Based on available data"))


def score_timing_sensitivity(
    snapshot: DiscoverySnapshot, derived: DerivedInsights
) -> StrategyDimension[TimingSensitivity]:
    score = 0
    rationales: list[str] = []

    short_term = _count_goals(snapshot, time_horizon=TimeHorizon.SHORT)
    if short_term >= 2:
        score += 2
        rationales.append(f"{short_term} short-term goals")
    elif short_term == 1:
        score += 1
        rationales.append("1 short-term goal")

    years = years_to_retirement(snapshot.basic_context)
    if years is not None:
        if years <= IMMINENT_RETIREMENT_YEARS:
            score += 3
            rationales.append("Retirement within 5 years")
        elif years <= NEAR_RETIREMENT_YEARS:
            score += 2
            rationales.append("Retirement within 10 years")

    fixed = _count_goals(snapshot, flexibility=GoalFlexibility.FIXED)
    if fixed >= 2:
        score += 2
        rationales.append(f"{fixed} fixed/non-negotiable goals")
    elif fixed == 1:
        score += 1
        rationales.append("1 fixed goal")

    if _count_goals(snapshot, flexibility=GoalFlexibility.DEFERRABLE) >= 3:
        score -= 1
        rationales.append("Multiple deferrable goals")

    if score >= 5:
        value = TimingSensitivity.HIGH
    elif score >= 2:
        value = TimingSensitivity.MEDIUM
    else:
        value = TimingSensitivity.LOW

    return StrategyDimension(
        value,
        _confidence_from_count(len(rationales)),
        _rationale(rationales, "Limited timing data available"),
    )


def score_planning_flexibility(
    snapshot: DiscoverySnapshot, derived: DerivedInsights
) -> StrategyDimension[PlanningFlexibility]:
    score = 0
    rationales: list[str] = []

    if _count_goals(snapshot, flexibility=GoalFlexibility.DEFERRABLE) >= 3:
        score += 2
        rationales.append("Multiple deferrable goals")
    if _count_goals(snapshot, flexibility=GoalFlexibility.FLEXIBLE) >= 3:
        score += 1
        rationales.append("Several flexible goals")
    if _count_goals(snapshot, flexibility=GoalFlexibility.FIXED) >= 3:
        score -= 2
        rationales.append("Multiple fixed/rigid goals")

    if _has_category(derived, ValueCategory.CONTROL):
        score -= 2
        rationales.append("Control is a priority value")
    if _has_category(derived, ValueCategory.FREEDOM):
        score += 2
        rationales.append("Freedom is a priority value")

    non_negotiables = len(snapshot.values.non_negotiables)
    if non_negotiables >= 3:
        score -= 1
        rationales.append(f"{non_negotiables} non-negotiable values")

    if score >= 2:
        value = PlanningFlexibility.HIGH
    elif score <= -2:
        value = PlanningFlexibility.LOW
    else:
        value = PlanningFlexibility.MODERATE

    if abs(score) >= 3:
        confidence = Confidence.HIGH
    elif abs(score) >= 1:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    return StrategyDimension(value, confidence, _rationale(rationales, "Based on available data"))


def score_complexity_tolerance(
    snapshot: DiscoverySnapshot, derived: DerivedInsights
) -> StrategyDimension[ComplexityTolerance]:
    score = 0
    rationales: list[str] = []

    if _has_category(derived, ValueCategory.CONTROL):
        score += 2
        rationales.append("Values having control over finances")
    # Federal retirement systems stand in for familiarity with complex benefits
    if is_federal_employee(snapshot.basic_context):
        score += 1
        rationales.append("Familiar with complex benefit systems")
    if _has_category(derived, ValueCategory.SECURITY):
        score -= 1
        rationales.append("Security-focused (simpler may be preferred)")
    if derived.top5_counts.get(ValueCategory.GROWTH, 0) >= 2:
        score += 1
        rationales.append("Growth-oriented mindset")

    if score >= 2:
        value = ComplexityTolerance.ADVANCED
    elif score <= -1:
        value = ComplexityTolerance.SIMPLE
    else:
        value = ComplexityTolerance.MODERATE

    if abs(score) >= 3:
        confidence = Confidence.HIGH
    elif len(rationales) >= 2:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    return StrategyDimension(
        value, confidence, _rationale(rationales, "Default moderate complexity")
    )


def score_guidance_level(
    snapshot: DiscoverySnapshot, derived: DerivedInsights
) -> StrategyDimension[GuidanceLevel]:
    score = 0
    rationales: list[str] = []

    if _has_category(derived, ValueCategory.CONTROL):
        score -= 2
        rationales.append("Values control and self-direction")
    if len(snapshot.values.non_negotiables) >= 2:
        score -= 1
        rationales.append("Clear non-negotiable priorities")
    if _count_goals(snapshot, priority=GoalPriority.HIGH) >= 3:
        score -= 1
        rationales.append("Clear goal priorities")
    if _has_category(derived, ValueCategory.SECURITY):
        score += 1
        rationales.append("Security-focused (may value reassurance)")
    if not snapshot.purpose.final_statement:
        score += 1
        rationales.append("Still clarifying financial purpose")

    neutral_anchors = sum(
        1 for a in snapshot.purpose.tradeoff_anchors if a.lean is TradeoffChoice.NEUTRAL
    )
    if neutral_anchors >= 2:
        score += 1
        rationales.append("Several uncertain tradeoff preferences")

    if score >= 2:
        value = GuidanceLevel.HIGH
    elif score <= -2:
        value = GuidanceLevel.LOW
    else:
        value = GuidanceLevel.MODERATE

    return StrategyDimension(
        value,
        _confidence_from_count(len(rationales)),
        _rationale(rationales, "Default moderate guidance"),
    )


# ============================================================================
# SUMMARY
# ============================================================================


def _income_phrase(value: IncomeStrategy) -> str:
    match value:
        case IncomeStrategy.STABILITY_FOCUSED:
            return "Planning should prioritize income stability over growth"
        case IncomeStrategy.GROWTH_FOCUSED:
            return "Planning can emphasize growth and optionality"
        case IncomeStrategy.BALANCED:
            return "Planning should balance income stability with growth opportunities"
        case _ as unreachable:
            assert_never(unreachable)


def _timing_phrase(value: TimingSensitivity) -> str:
    match value:
        case TimingSensitivity.HIGH:
            return "with high sensitivity to timing and market conditions"
        case TimingSensitivity.MEDIUM:
            return "with moderate sensitivity to timing"
        case TimingSensitivity.LOW:
            return "with flexibility around timing"
        case _ as unreachable:
            assert_never(unreachable)


def _flexibility_phrase(value: PlanningFlexibility) -> str:
    match value:
        case PlanningFlexibility.HIGH:
            return "The plan can be highly adaptable to changing conditions."
        case PlanningFlexibility.MODERATE:
            return "The plan should maintain some structure while allowing adjustments."
        case PlanningFlexibility.LOW:
            return "and limited flexibility for major changes."
        case _ as unreachable:
            assert_never(unreachable)


def _complexity_phrase(value: ComplexityTolerance) -> str:
    match value:
        case ComplexityTolerance.SIMPLE:
            return "Simple, predictable strategies are preferred."
        case ComplexityTolerance.MODERATE:
            return "Moderate complexity in strategies is acceptable."
        case ComplexityTolerance.ADVANCED:
            return "Advanced strategies can be considered."
        case _ as unreachable:
            assert_never(unreachable)


def _guidance_phrase(value: GuidanceLevel) -> str:
    match value:
        case GuidanceLevel.HIGH:
            return "Clear structure and ongoing guidance will be beneficial."
        case GuidanceLevel.MODERATE:
            return "Some guidance on key decisions will be helpful."
        case GuidanceLevel.LOW:
            return "Self-directed decision-making is comfortable."
        case _ as unreachable:
            assert_never(unreachable)


def join_fragments(fragments: list[str]) -> str:
    """
    Join phrase fragments into sentences.

    A fragment starting in lowercase continues the current sentence after a
    comma; any other fragment closes the current sentence with a period.
    """
    text = ""
    for fragment in fragments:
        if not text:
            text = fragment
        elif fragment[:1].islower():
            text = f"{text.rstrip('.')}, {fragment}"
        else:
            closed = text if text.endswith(".") else f"{text}."
            text = f"{closed} {fragment}"
    if text and not text.endswith("."):
        text += "."
    return text


def generate_summary(
    income: StrategyDimension[IncomeStrategy],
    timing: StrategyDimension[TimingSensitivity],
    flexibility: StrategyDimension[PlanningFlexibility],
    complexity: StrategyDimension[ComplexityTolerance],
    guidance: StrategyDimension[GuidanceLevel],
) -> str:
    """Natural-language summary in fixed dimension order."""
    return join_fragments(
        [
            _income_phrase(income.value),
            _timing_phrase(timing.value),
            _flexibility_phrase(flexibility.value),
            _complexity_phrase(complexity.value),
            _guidance_phrase(guidance.value),
        ]
    )


def build_strategy_profile(
    snapshot: DiscoverySnapshot,
    derived: DerivedInsights | None = None,
) -> StrategyProfile:
    """Score all five dimensions from one snapshot."""
    if derived is None:
        derived = compute_derived_insights(snapshot.values)

    income = score_income_strategy(snapshot, derived)
    timing = score_timing_sensitivity(snapshot, derived)
    flexibility = score_planning_flexibility(snapshot, derived)
    complexity = score_complexity_tolerance(snapshot, derived)
    guidance = score_guidance_level(snapshot, derived)

    return StrategyProfile(
        income_strategy=income,
        timing_sensitivity=timing,
        planning_flexibility=flexibility,
        complexity_tolerance=complexity,
        guidance_level=guidance,
        summary=generate_summary(income, timing, flexibility, complexity, guidance),
    )


def has_enough_data_for_profile(snapshot: DiscoverySnapshot) -> bool:
    """Three or more top values or any prioritized goal, plus an age."""
    has_values = len(snapshot.values.top5) >= MIN_TOP5_FOR_PROFILE
    has_goals = any(goal.priority is not None for goal in snapshot.goals.goals)
    return (has_values or has_goals) and snapshot.basic_context.age is not None
