"""Human-readable display labels for enum tags."""

from discovery_mcp.models import (
    ActionGuidance,
    ActionType,
    ActionUrgency,
    ComplexityTolerance,
    GuidanceLevel,
    IncomeStrategy,
    PlanningDomain,
    PlanningFlexibility,
    SuggestionDomain,
    TimingSensitivity,
)

PLANNING_DOMAIN_LABELS: dict[PlanningDomain, str] = {
    PlanningDomain.RETIREMENT_INCOME: "Retirement Income Strategy",
    PlanningDomain.INVESTMENT_STRATEGY: "Investment Strategy",
    PlanningDomain.TAX_OPTIMIZATION: "Tax Optimization",
    PlanningDomain.INSURANCE_RISK: "Insurance & Risk Management",
    PlanningDomain.ESTATE_LEGACY: "Estate & Legacy Planning",
    PlanningDomain.CASH_FLOW_DEBT: "Cash Flow & Debt Management",
    PlanningDomain.BENEFITS_OPTIMIZATION: "Benefits Optimization",
    PlanningDomain.BUSINESS_CAREER: "Business & Career Strategy",
    PlanningDomain.HEALTHCARE_LTC: "Healthcare & Long-Term Care",
}

INCOME_STRATEGY_LABELS: dict[IncomeStrategy, str] = {
    IncomeStrategy.STABILITY_FOCUSED: "Stability Focused",
    IncomeStrategy.BALANCED: "Balanced",
    IncomeStrategy.GROWTH_FOCUSED: "Growth Focused",
}

TIMING_SENSITIVITY_LABELS: dict[TimingSensitivity, str] = {
    TimingSensitivity.HIGH: "High Sensitivity",
    TimingSensitivity.MEDIUM: "Medium Sensitivity",
    TimingSensitivity.LOW: "Low Sensitivity",
}

PLANNING_FLEXIBILITY_LABELS: dict[PlanningFlexibility, str] = {
    PlanningFlexibility.HIGH: "Highly Flexible",
    PlanningFlexibility.MODERATE: "Moderately Flexible",
    PlanningFlexibility.LOW: "Low Flexibility",
}

COMPLEXITY_TOLERANCE_LABELS: dict[ComplexityTolerance, str] = {
    ComplexityTolerance.SIMPLE: "Simple Preferred",
    ComplexityTolerance.MODERATE: "Moderate Complexity",
    ComplexityTolerance.ADVANCED: "Advanced Strategies",
}

GUIDANCE_LEVEL_LABELS: dict[GuidanceLevel, str] = {
    GuidanceLevel.HIGH: "High Guidance Needed",
    GuidanceLevel.MODERATE: "Moderate Guidance",
    GuidanceLevel.LOW: "Self-Directed",
}

ACTION_TYPE_LABELS: dict[ActionType, str] = {
    ActionType.EDUCATION: "Learn & Understand",
    ActionType.DECISION_PREP: "Prepare Decision",
    ActionType.STRUCTURAL: "Build Foundation",
    ActionType.PROFESSIONAL_REVIEW: "Professional Review",
    ActionType.OPTIMIZATION: "Optimize",
}

ACTION_GUIDANCE_LABELS: dict[ActionGuidance, str] = {
    ActionGuidance.SELF_GUIDED: "Self-Guided",
    ActionGuidance.ADVISOR_GUIDED: "Advisor-Guided",
    ActionGuidance.SPECIALIST_GUIDED: "Specialist-Guided",
}

ACTION_URGENCY_LABELS: dict[ActionUrgency, str] = {
    ActionUrgency.IMMEDIATE: "Do Now",
    ActionUrgency.NEAR_TERM: "Within 3-6 Months",
    ActionUrgency.MEDIUM_TERM: "Within 1 Year",
    ActionUrgency.ONGOING: "Ongoing",
}

SUGGESTION_DOMAIN_LABELS: dict[SuggestionDomain, str] = {
    SuggestionDomain.INVESTMENTS: "Investments",
    SuggestionDomain.SAVINGS: "Savings",
    SuggestionDomain.ANNUITIES: "Annuities",
    SuggestionDomain.INCOME_PLAN: "Income Plan",
    SuggestionDomain.TAXES: "Taxes",
    SuggestionDomain.ESTATE_PLAN: "Estate Plan",
    SuggestionDomain.INSURANCE: "Insurance",
    SuggestionDomain.EMPLOYEE_BENEFITS: "Employee Benefits",
}


def profile_labels(
    income: IncomeStrategy,
    timing: TimingSensitivity,
    flexibility: PlanningFlexibility,
    complexity: ComplexityTolerance,
    guidance: GuidanceLevel,
) -> dict[str, str]:
    """Display labels for one strategy profile, keyed by dimension name."""
    return {
        "income_strategy": INCOME_STRATEGY_LABELS[income],
        "timing_sensitivity": TIMING_SENSITIVITY_LABELS[timing],
        "planning_flexibility": PLANNING_FLEXIBILITY_LABELS[flexibility],
        "complexity_tolerance": COMPLEXITY_TOLERANCE_LABELS[complexity],
        "guidance_level": GUIDANCE_LEVEL_LABELS[guidance],
    }
