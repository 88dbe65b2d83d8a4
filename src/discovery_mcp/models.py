"""Typed records for discovery input snapshots and derived insights.

Input records are frozen dataclasses built field-by-field by the snapshot
parser. Output records are frozen as well and expose ``to_dict()`` for the
JSON surface; enum members serialize as their tag value.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Generic, TypeVar

# ============================================================================
# ENUMERATIONS
# ============================================================================


class ValueCategory(str, Enum):
    """Life-priority tag carried by every value card."""

    SECURITY = "SECURITY"
    FREEDOM = "FREEDOM"
    FAMILY = "FAMILY"
    GROWTH = "GROWTH"
    CONTRIBUTION = "CONTRIBUTION"
    PURPOSE = "PURPOSE"
    CONTROL = "CONTROL"
    HEALTH = "HEALTH"
    QUALITY_OF_LIFE = "QUALITY_OF_LIFE"


class Pile(str, Enum):
    IMPORTANT = "IMPORTANT"
    UNSURE = "UNSURE"
    NOT_IMPORTANT = "NOT_IMPORTANT"


class TradeoffChoice(str, Enum):
    A = "A"
    B = "B"
    NEUTRAL = "NEUTRAL"


class GoalCategory(str, Enum):
    RETIREMENT = "RETIREMENT"
    FAMILY_LEGACY = "FAMILY_LEGACY"
    LIFESTYLE = "LIFESTYLE"
    SECURITY_PROTECTION = "SECURITY_PROTECTION"
    GIVING = "GIVING"
    CAREER_GROWTH = "CAREER_GROWTH"
    HEALTH = "HEALTH"
    MAJOR_PURCHASES = "MAJOR_PURCHASES"


class GoalPriority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class TimeHorizon(str, Enum):
    SHORT = "SHORT"
    MEDIUM = "MEDIUM"
    LONG = "LONG"
    ONGOING = "ONGOING"


class GoalFlexibility(str, Enum):
    FIXED = "FIXED"
    FLEXIBLE = "FLEXIBLE"
    DEFERRABLE = "DEFERRABLE"


class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    DIVORCED = "divorced"
    WIDOWED = "widowed"
    DOMESTIC_PARTNERSHIP = "domestic_partnership"


class AccountType(str, Enum):
    TSP_TRADITIONAL = "tsp_traditional"
    TSP_ROTH = "tsp_roth"
    TRADITIONAL_IRA = "traditional_ira"
    ROTH_IRA = "roth_ira"
    K401 = "401k"
    BROKERAGE = "brokerage"


class PurposeDriver(str, Enum):
    PROTECT_FAMILY = "PROTECT_FAMILY"
    FREEDOM_OPTIONS = "FREEDOM_OPTIONS"
    STABILITY_PEACE = "STABILITY_PEACE"
    HEALTH_QUALITY = "HEALTH_QUALITY"
    IMPACT_GIVING = "IMPACT_GIVING"
    MEANING_PURPOSE = "MEANING_PURPOSE"
    CONTROL_CONFIDENCE = "CONTROL_CONFIDENCE"
    GROWTH_OPPORTUNITY = "GROWTH_OPPORTUNITY"


class TradeoffAxis(str, Enum):
    SECURITY_VS_GROWTH = "SECURITY_VS_GROWTH"
    FREEDOM_SOONER_VS_CERTAINTY_LATER = "FREEDOM_SOONER_VS_CERTAINTY_LATER"
    LIFESTYLE_NOW_VS_BUFFER_FIRST = "LIFESTYLE_NOW_VS_BUFFER_FIRST"
    CONTROL_STRUCTURE_VS_FLEXIBILITY = "CONTROL_STRUCTURE_VS_FLEXIBILITY"


class Confidence(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class IncomeStrategy(str, Enum):
    STABILITY_FOCUSED = "STABILITY_FOCUSED"
    BALANCED = "BALANCED"
    GROWTH_FOCUSED = "GROWTH_FOCUSED"


class TimingSensitivity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class PlanningFlexibility(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


class ComplexityTolerance(str, Enum):
    SIMPLE = "SIMPLE"
    MODERATE = "MODERATE"
    ADVANCED = "ADVANCED"


class GuidanceLevel(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


class PlanningDomain(str, Enum):
    """Financial-planning subject areas. Declaration order is the ranking tie-break."""

    RETIREMENT_INCOME = "RETIREMENT_INCOME"
    INVESTMENT_STRATEGY = "INVESTMENT_STRATEGY"
    TAX_OPTIMIZATION = "TAX_OPTIMIZATION"
    INSURANCE_RISK = "INSURANCE_RISK"
    ESTATE_LEGACY = "ESTATE_LEGACY"
    CASH_FLOW_DEBT = "CASH_FLOW_DEBT"
    BENEFITS_OPTIMIZATION = "BENEFITS_OPTIMIZATION"
    BUSINESS_CAREER = "BUSINESS_CAREER"
    HEALTHCARE_LTC = "HEALTHCARE_LTC"


class Importance(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MODERATE = "MODERATE"
    LOW = "LOW"


class ActionType(str, Enum):
    EDUCATION = "EDUCATION"
    DECISION_PREP = "DECISION_PREP"
    STRUCTURAL = "STRUCTURAL"
    PROFESSIONAL_REVIEW = "PROFESSIONAL_REVIEW"
    OPTIMIZATION = "OPTIMIZATION"


class ActionGuidance(str, Enum):
    SELF_GUIDED = "SELF_GUIDED"
    ADVISOR_GUIDED = "ADVISOR_GUIDED"
    SPECIALIST_GUIDED = "SPECIALIST_GUIDED"


class ActionUrgency(str, Enum):
    """Urgency tiers, most urgent first. Declaration order is the sort order."""

    IMMEDIATE = "IMMEDIATE"
    NEAR_TERM = "NEAR_TERM"
    MEDIUM_TERM = "MEDIUM_TERM"
    ONGOING = "ONGOING"


class SuggestionDomain(str, Enum):
    INVESTMENTS = "INVESTMENTS"
    SAVINGS = "SAVINGS"
    ANNUITIES = "ANNUITIES"
    INCOME_PLAN = "INCOME_PLAN"
    TAXES = "TAXES"
    ESTATE_PLAN = "ESTATE_PLAN"
    INSURANCE = "INSURANCE"
    EMPLOYEE_BENEFITS = "EMPLOYEE_BENEFITS"


class SuggestionPriority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class SuggestionActionType(str, Enum):
    INVESTIGATE = "INVESTIGATE"
    IMPLEMENT = "IMPLEMENT"
    CONSULT_PROFESSIONAL = "CONSULT_PROFESSIONAL"
    REVIEW = "REVIEW"


class ConditionType(str, Enum):
    ALWAYS = "always"
    FEDERAL_EMPLOYEE = "federal_employee"
    HAS_SPOUSE = "has_spouse"
    MARRIED = "married"
    HAS_DEPENDENTS = "has_dependents"
    NEAR_RETIREMENT = "near_retirement"
    HAS_PENSION = "has_pension"
    HAS_TSP = "has_tsp"
    HAS_IRA = "has_ira"
    HAS_401K = "has_401k"
    AGE_OVER = "age_over"
    AGE_UNDER = "age_under"
    ANSWER_EQUALS = "answer_equals"
    FACT = "fact"
    MIN_FOCUS_RANK = "min_focus_rank"
    VALUE_IN_TOP5 = "value_in_top5"
    HIGH_PRIORITY_GOAL = "high_priority_goal"


class Operator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


URGENCY_ORDER: dict[ActionUrgency, int] = {u: i for i, u in enumerate(ActionUrgency)}
SUGGESTION_PRIORITY_ORDER: dict[SuggestionPriority, int] = {
    p: i for i, p in enumerate(SuggestionPriority)
}
DOMAIN_ORDER: dict[PlanningDomain, int] = {d: i for i, d in enumerate(PlanningDomain)}

AnswerValue = str | int | float | bool | tuple[str, ...]


def to_plain(value: Any) -> Any:
    """Convert enums, tuples, mappings and records into JSON-ready values."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {to_plain(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, frozenset, set)):
        items = [to_plain(v) for v in value]
        if isinstance(value, (frozenset, set)):
            return sorted(items)
        return items
    return value


class _Record:
    """Mixin that serializes dataclass fields in declaration order."""

    def to_dict(self) -> dict[str, Any]:
        return {f.name: to_plain(getattr(self, f.name)) for f in fields(self)}


# ============================================================================
# CONDITION RECORDS
# ============================================================================


@dataclass(frozen=True)
class Condition(_Record):
    """One predicate. ``target`` names a question id, fact name or planning domain."""

    type: ConditionType
    value: Any = None
    target: str | None = None
    operator: Operator | str | None = None
    negate: bool = False


@dataclass(frozen=True)
class Trigger(_Record):
    """Answer comparison that fires a suggestion template."""

    question_id: str
    operator: Operator | str
    value: AnswerValue


@dataclass(frozen=True)
class QuestionOption(_Record):
    value: str
    label: str


@dataclass(frozen=True)
class GuidedQuestion(_Record):
    """A domain question shown when all of its conditions hold."""

    id: str
    domain: SuggestionDomain
    question: str
    explanation: str
    options: tuple[QuestionOption, ...]
    conditions: tuple[Condition, ...] = ()
    order: int = 0


@dataclass(frozen=True)
class DomainInfo(_Record):
    """Suggestion domain metadata. Relevance is any-of over its conditions."""

    id: SuggestionDomain
    name: str
    description: str
    relevance_conditions: tuple[Condition, ...]
    order: int


@dataclass(frozen=True)
class SuggestionTemplate(_Record):
    id: str
    domain: SuggestionDomain
    title: str
    description: str
    rationale: str
    priority: SuggestionPriority
    action_type: SuggestionActionType
    triggers: tuple[Trigger, ...]
    profile_conditions: tuple[Condition, ...] = ()


@dataclass(frozen=True)
class Suggestion(_Record):
    template_id: str
    domain: SuggestionDomain
    title: str
    description: str
    rationale: str
    priority: SuggestionPriority
    action_type: SuggestionActionType
    source_answer_ids: tuple[str, ...]


# ============================================================================
# INPUT RECORDS
# ============================================================================


@dataclass(frozen=True)
class ValueCard(_Record):
    id: str
    title: str
    description: str
    category: ValueCategory


@dataclass(frozen=True)
class FederalEmployment(_Record):
    retirement_system: str | None = None
    agency: str | None = None
    years_of_service: int | None = None


@dataclass(frozen=True)
class Dependent(_Record):
    relationship: str | None = None
    financially_dependent: bool = True


@dataclass(frozen=True)
class BasicContext(_Record):
    """Life context. Years to retirement is derived, never stored."""

    age: int | None = None
    target_retirement_age: int | None = None
    marital_status: MaritalStatus | None = None
    dependents: tuple[Dependent, ...] = ()
    federal_employment: FederalEmployment | None = None
    spouse_has_pension: bool = False
    pension_income: bool = False
    account_types: tuple[AccountType, ...] = ()


@dataclass(frozen=True)
class TradeoffResponse(_Record):
    category_a: ValueCategory
    category_b: ValueCategory
    choice: TradeoffChoice
    strength: int = 3


@dataclass(frozen=True)
class ValuesDiscovery(_Record):
    """Card piles and the narrowing stages important -> top10 -> top5 -> non-negotiables."""

    piles: Mapping[str, Pile] = field(default_factory=dict)
    top10: tuple[str, ...] = ()
    top5: tuple[str, ...] = ()
    non_negotiables: tuple[str, ...] = ()
    tradeoff_responses: tuple[TradeoffResponse, ...] = ()

    @property
    def important(self) -> tuple[str, ...]:
        return tuple(card_id for card_id, pile in self.piles.items() if pile is Pile.IMPORTANT)


@dataclass(frozen=True)
class FinancialGoal(_Record):
    id: str
    label: str
    category: GoalCategory
    priority: GoalPriority | None = None
    time_horizon: TimeHorizon | None = None
    flexibility: GoalFlexibility | None = None


@dataclass(frozen=True)
class FinancialGoals(_Record):
    goals: tuple[FinancialGoal, ...] = ()


@dataclass(frozen=True)
class TradeoffAnchor(_Record):
    axis: TradeoffAxis
    lean: TradeoffChoice
    strength: int = 3


@dataclass(frozen=True)
class FinancialPurpose(_Record):
    primary_driver: PurposeDriver | None = None
    tradeoff_anchors: tuple[TradeoffAnchor, ...] = ()
    final_statement: str | None = None


@dataclass(frozen=True)
class DiscoverySnapshot(_Record):
    """One consistent point-in-time view of every discovery section."""

    basic_context: BasicContext = field(default_factory=BasicContext)
    values: ValuesDiscovery = field(default_factory=ValuesDiscovery)
    goals: FinancialGoals = field(default_factory=FinancialGoals)
    purpose: FinancialPurpose = field(default_factory=FinancialPurpose)
    answers: Mapping[str, AnswerValue] = field(default_factory=dict)


# ============================================================================
# DERIVED RECORDS
# ============================================================================

CategoryCount = dict[ValueCategory, int]

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class DerivedInsights(_Record):
    important_counts: CategoryCount
    top10_counts: CategoryCount
    top5_counts: CategoryCount
    non_negotiable_counts: CategoryCount
    dominant_category: ValueCategory | None
    secondary_category: ValueCategory | None
    conflict_flags: tuple[str, ...]
    tradeoff_indices: dict[str, int | None]


@dataclass(frozen=True)
class StrategyDimension(_Record, Generic[E]):
    value: E
    confidence: Confidence
    rationale: str


@dataclass(frozen=True)
class StrategyProfile(_Record):
    income_strategy: StrategyDimension[IncomeStrategy]
    timing_sensitivity: StrategyDimension[TimingSensitivity]
    planning_flexibility: StrategyDimension[PlanningFlexibility]
    complexity_tolerance: StrategyDimension[ComplexityTolerance]
    guidance_level: StrategyDimension[GuidanceLevel]
    summary: str


@dataclass(frozen=True)
class FocusArea(_Record):
    domain: PlanningDomain
    label: str
    priority: int
    score: int
    importance: Importance
    rationale: str
    value_connections: tuple[str, ...]
    goal_connections: tuple[str, ...]
    risk_factors: tuple[str, ...] = ()


@dataclass(frozen=True)
class PlanningFocusRanking(_Record):
    areas: tuple[FocusArea, ...]
    top_priorities: tuple[PlanningDomain, ...]

    def rank_of(self, domain: PlanningDomain) -> int | None:
        for area in self.areas:
            if area.domain is domain:
                return area.priority
        return None


@dataclass(frozen=True)
class ActionRecommendation(_Record):
    id: str
    title: str
    description: str
    rationale: str
    outcome: str
    type: ActionType
    guidance: ActionGuidance
    urgency: ActionUrgency
    domain: PlanningDomain
    value_connections: tuple[str, ...]
    goal_connections: tuple[str, ...]
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class ActionRecommendations(_Record):
    recommendations: tuple[ActionRecommendation, ...]
    top_actions: tuple[str, ...]
    generated_at: str


@dataclass(frozen=True)
class InputSummary(_Record):
    has_values: bool
    has_goals: bool
    has_purpose: bool
    has_basic_context: bool
    completion_percentage: int


@dataclass(frozen=True)
class DiscoveryInsights(_Record):
    strategy_profile: StrategyProfile
    focus_areas: PlanningFocusRanking
    actions: ActionRecommendations
    input_summary: InputSummary
    generated_at: str
