"""Static catalog of action templates.

Every template declares at least a minimum focus-rank condition on its own
domain. ``order`` is the explicit catalog position used as the final sort
key when urgency and domain rank tie.
"""

from dataclasses import dataclass

from discovery_mcp.models import (
    ActionGuidance,
    ActionType,
    ActionUrgency,
    Condition,
    ConditionType,
    PlanningDomain,
    ValueCategory,
)


@dataclass(frozen=True)
class ActionTemplate:
    id: str
    order: int
    domain: PlanningDomain
    title: str
    description: str
    type: ActionType
    guidance: ActionGuidance
    default_urgency: ActionUrgency
    conditions: tuple[Condition, ...]
    outcome: str
    rationale_template: str
    dependencies: tuple[str, ...] = ()


def in_top(domain: PlanningDomain, rank: int) -> Condition:
    return Condition(ConditionType.MIN_FOCUS_RANK, value=rank, target=domain.value)


NEAR_RETIREMENT = Condition(ConditionType.NEAR_RETIREMENT)
FEDERAL_EMPLOYEE = Condition(ConditionType.FEDERAL_EMPLOYEE)
HAS_DEPENDENTS = Condition(ConditionType.HAS_DEPENDENTS)


def value_in_top5(category: ValueCategory) -> Condition:
    return Condition(ConditionType.VALUE_IN_TOP5, value=category.value)


RI = PlanningDomain.RETIREMENT_INCOME
INV = PlanningDomain.INVESTMENT_STRATEGY
TAX = PlanningDomain.TAX_OPTIMIZATION
INS = PlanningDomain.INSURANCE_RISK
EST = PlanningDomain.ESTATE_LEGACY
CF = PlanningDomain.CASH_FLOW_DEBT
BEN = PlanningDomain.BENEFITS_OPTIMIZATION
BUS = PlanningDomain.BUSINESS_CAREER
HC = PlanningDomain.HEALTHCARE_LTC

ACTION_TEMPLATES: tuple[ActionTemplate, ...] = (
    # Retirement income
    ActionTemplate(
        id="retirement-income-sources",
        order=1,
        domain=RI,
        title="Review retirement income sources and timing",
        description=(
            "Understand all potential income sources (pensions, Social Security, "
            "investments) and when you can access them."
        ),
        type=ActionType.EDUCATION,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(RI, 5),),
        outcome="Clear picture of retirement income options and optimal claiming strategies",
        rationale_template=(
            "This supports your priority of {value} and helps protect your goal of {goal}."
        ),
    ),
    ActionTemplate(
        id="retirement-income-strategy",
        order=2,
        domain=RI,
        title="Compare retirement income strategies",
        description=(
            "Evaluate different approaches: guaranteed income vs. flexible withdrawals, "
            "timing of Social Security, pension options."
        ),
        type=ActionType.DECISION_PREP,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(RI, 3), NEAR_RETIREMENT),
        outcome="Informed decision on income strategy that matches your priorities",
        rationale_template=(
            "With retirement approaching, understanding income options now prevents "
            "costly decisions later."
        ),
        dependencies=("retirement-income-sources",),
    ),
    ActionTemplate(
        id="federal-retirement-analysis",
        order=3,
        domain=RI,
        title="Analyze federal retirement benefit options",
        description=(
            "Review FERS/CSRS benefits, TSP strategies, and timing considerations "
            "specific to federal employees."
        ),
        type=ActionType.EDUCATION,
        guidance=ActionGuidance.SPECIALIST_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(RI, 5), FEDERAL_EMPLOYEE),
        outcome="Understanding of federal benefit optimization opportunities",
        rationale_template=(
            "Federal benefits have unique rules that require specialized analysis to maximize."
        ),
    ),
    # Investment strategy
    ActionTemplate(
        id="investment-risk-review",
        order=4,
        domain=INV,
        title="Review investment allocation and risk level",
        description=(
            "Ensure your investment mix aligns with your time horizon, goals, and "
            "comfort with market fluctuations."
        ),
        type=ActionType.PROFESSIONAL_REVIEW,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(INV, 5),),
        outcome="Investment strategy aligned with your values and timeline",
        rationale_template="Your {value} orientation suggests this review can ensure alignment.",
    ),
    ActionTemplate(
        id="investment-growth-focus",
        order=5,
        domain=INV,
        title="Evaluate growth opportunities in portfolio",
        description=(
            "Consider whether current allocation provides enough growth potential "
            "for your long-term goals."
        ),
        type=ActionType.OPTIMIZATION,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.MEDIUM_TERM,
        conditions=(in_top(INV, 4), value_in_top5(ValueCategory.GROWTH)),
        outcome="Portfolio positioned for long-term growth while managing risk",
        rationale_template=(
            "Growth is a core value, so ensuring your portfolio supports this is important."
        ),
    ),
    # Tax optimization
    ActionTemplate(
        id="tax-strategy-review",
        order=6,
        domain=TAX,
        title="Review tax-efficient strategies",
        description=(
            "Identify opportunities like Roth conversions, tax-loss harvesting, or "
            "charitable giving strategies."
        ),
        type=ActionType.OPTIMIZATION,
        guidance=ActionGuidance.SPECIALIST_GUIDED,
        default_urgency=ActionUrgency.MEDIUM_TERM,
        conditions=(in_top(TAX, 5),),
        outcome="Reduced lifetime tax burden while supporting your goals",
        rationale_template=(
            "Tax optimization can significantly impact long-term wealth and support {goal}."
        ),
    ),
    ActionTemplate(
        id="roth-conversion-analysis",
        order=7,
        domain=TAX,
        title="Evaluate Roth conversion opportunities",
        description=(
            "Determine if converting pre-tax retirement funds to Roth makes sense in "
            "current or future low-income years."
        ),
        type=ActionType.DECISION_PREP,
        guidance=ActionGuidance.SPECIALIST_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(TAX, 4), NEAR_RETIREMENT),
        outcome="Strategic tax positioning for retirement years",
        rationale_template=(
            "Pre-retirement years often offer conversion opportunities that disappear later."
        ),
    ),
    # Insurance and risk
    ActionTemplate(
        id="insurance-coverage-review",
        order=8,
        domain=INS,
        title="Review insurance coverage adequacy",
        description=(
            "Ensure life, disability, and property insurance appropriately protects "
            "your family and assets."
        ),
        type=ActionType.PROFESSIONAL_REVIEW,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(INS, 5),),
        outcome="Confidence that major risks are appropriately covered",
        rationale_template="Protecting {goal} requires adequate insurance coverage.",
    ),
    ActionTemplate(
        id="life-insurance-needs",
        order=9,
        domain=INS,
        title="Calculate life insurance needs",
        description=(
            "Determine appropriate coverage amount based on dependents, debts, and "
            "income replacement needs."
        ),
        type=ActionType.DECISION_PREP,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.IMMEDIATE,
        conditions=(in_top(INS, 4), HAS_DEPENDENTS),
        outcome="Right-sized life insurance to protect family",
        rationale_template=(
            "With dependents relying on you, adequate life insurance is essential."
        ),
    ),
    # Estate and legacy
    ActionTemplate(
        id="estate-documents-review",
        order=10,
        domain=EST,
        title="Review estate planning documents",
        description=(
            "Ensure will, powers of attorney, healthcare directives, and beneficiary "
            "designations are current."
        ),
        type=ActionType.PROFESSIONAL_REVIEW,
        guidance=ActionGuidance.SPECIALIST_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(EST, 5),),
        outcome="Estate documents that reflect current wishes and family situation",
        rationale_template="Your {value} values make estate planning particularly important.",
    ),
    ActionTemplate(
        id="beneficiary-audit",
        order=11,
        domain=EST,
        title="Audit all beneficiary designations",
        description=(
            "Review beneficiaries on retirement accounts, life insurance, and other "
            "assets to ensure they match intentions."
        ),
        type=ActionType.STRUCTURAL,
        guidance=ActionGuidance.SELF_GUIDED,
        default_urgency=ActionUrgency.IMMEDIATE,
        conditions=(in_top(EST, 6),),
        outcome="Assets will transfer to intended recipients",
        rationale_template=(
            "Outdated beneficiaries can override estate documents, causing unintended "
            "consequences."
        ),
    ),
    ActionTemplate(
        id="legacy-planning",
        order=12,
        domain=EST,
        title="Develop legacy and giving strategy",
        description=(
            "Consider how to incorporate charitable giving or family wealth transfer "
            "into your plan."
        ),
        type=ActionType.DECISION_PREP,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.MEDIUM_TERM,
        conditions=(in_top(EST, 4), value_in_top5(ValueCategory.CONTRIBUTION)),
        outcome="Structured approach to legacy that reflects your values",
        rationale_template=(
            "Contribution is a core value, so formalizing legacy plans supports what "
            "matters most."
        ),
    ),
    # Cash flow and debt
    ActionTemplate(
        id="emergency-fund-target",
        order=13,
        domain=CF,
        title="Establish emergency fund at target level",
        description=(
            "Build 3-6 months of expenses in accessible savings as a foundation for "
            "all other planning."
        ),
        type=ActionType.STRUCTURAL,
        guidance=ActionGuidance.SELF_GUIDED,
        default_urgency=ActionUrgency.IMMEDIATE,
        conditions=(in_top(CF, 5),),
        outcome="Financial stability to handle unexpected expenses",
        rationale_template=(
            "An emergency fund provides the {value} foundation that supports all other goals."
        ),
    ),
    ActionTemplate(
        id="debt-payoff-strategy",
        order=14,
        domain=CF,
        title="Create debt elimination strategy",
        description="Prioritize and plan payoff of high-interest debt before retirement.",
        type=ActionType.STRUCTURAL,
        guidance=ActionGuidance.SELF_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(CF, 5), NEAR_RETIREMENT),
        outcome="Reduced fixed expenses entering retirement",
        rationale_template=(
            "Eliminating debt before retirement reduces income needs and increases flexibility."
        ),
    ),
    # Benefits optimization
    ActionTemplate(
        id="federal-benefits-analysis",
        order=15,
        domain=BEN,
        title="Complete federal benefits analysis",
        description=(
            "Review FEHB, FEGLI, TSP, and pension options for optimal retirement positioning."
        ),
        type=ActionType.EDUCATION,
        guidance=ActionGuidance.SPECIALIST_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(BEN, 4), FEDERAL_EMPLOYEE),
        outcome="Maximized federal retirement benefits",
        rationale_template=(
            "Federal benefits require specialized knowledge to optimize effectively."
        ),
    ),
    ActionTemplate(
        id="employer-benefits-review",
        order=16,
        domain=BEN,
        title="Review employer benefit utilization",
        description=(
            "Ensure you are maximizing employer matches, HSA contributions, and other "
            "workplace benefits."
        ),
        type=ActionType.OPTIMIZATION,
        guidance=ActionGuidance.SELF_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(BEN, 5),),
        outcome="Full utilization of available employer benefits",
        rationale_template="Unused employer benefits represent lost compensation.",
    ),
    # Healthcare and long-term care
    ActionTemplate(
        id="healthcare-transition-plan",
        order=17,
        domain=HC,
        title="Plan healthcare coverage transition",
        description=(
            "Understand Medicare options, employer retiree coverage, or marketplace alternatives."
        ),
        type=ActionType.EDUCATION,
        guidance=ActionGuidance.SPECIALIST_GUIDED,
        default_urgency=ActionUrgency.NEAR_TERM,
        conditions=(in_top(HC, 4), NEAR_RETIREMENT),
        outcome="Seamless healthcare coverage through retirement transition",
        rationale_template=(
            "Healthcare is one of the largest retirement expenses and requires advance planning."
        ),
    ),
    ActionTemplate(
        id="ltc-insurance-evaluation",
        order=18,
        domain=HC,
        title="Evaluate long-term care planning options",
        description=(
            "Consider LTC insurance, self-insurance, or hybrid strategies for potential "
            "care needs."
        ),
        type=ActionType.DECISION_PREP,
        guidance=ActionGuidance.ADVISOR_GUIDED,
        default_urgency=ActionUrgency.MEDIUM_TERM,
        conditions=(in_top(HC, 5), value_in_top5(ValueCategory.HEALTH)),
        outcome="Plan for potential long-term care needs",
        rationale_template=(
            "Health is a priority value, and LTC planning protects both health and "
            "financial security."
        ),
    ),
    # Business and career
    ActionTemplate(
        id="career-transition-planning",
        order=19,
        domain=BUS,
        title="Develop career transition strategy",
        description=(
            "Plan for potential encore career, phased retirement, or full retirement transition."
        ),
        type=ActionType.DECISION_PREP,
        guidance=ActionGuidance.SELF_GUIDED,
        default_urgency=ActionUrgency.MEDIUM_TERM,
        conditions=(in_top(BUS, 5), value_in_top5(ValueCategory.PURPOSE)),
        outcome="Clear vision for work-life transition",
        rationale_template=(
            "Purpose is a core value, so planning how work fits into your next chapter "
            "is important."
        ),
    ),
)


def get_template_by_id(template_id: str) -> ActionTemplate | None:
    return next((t for t in ACTION_TEMPLATES if t.id == template_id), None)
