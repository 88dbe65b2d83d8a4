"""Condition evaluator for applicability, relevance and trigger predicates.

Every predicate is total: a missing fact, an unknown operator or a malformed
comparison value evaluates to False and never raises. ``negate`` inverts the
result after evaluation.

Composition defaults are chosen by the caller, not here:
    - questions (all-of): empty list -> applicable
    - actions (all-of): empty list -> never applicable
    - domain relevance (any-of): empty list -> relevant
    - suggestion triggers: empty list -> never fires
"""

import logging
import operator
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from discovery_mcp.data.value_cards import get_card_by_id
from discovery_mcp.engine.context import (
    NEAR_RETIREMENT_YEARS,
    has_spouse,
    is_federal_employee,
    years_to_retirement,
)
from discovery_mcp.models import (
    AccountType,
    AnswerValue,
    Condition,
    ConditionType,
    DiscoverySnapshot,
    GoalCategory,
    GoalPriority,
    MaritalStatus,
    Operator,
    PlanningDomain,
    PlanningFocusRanking,
    Trigger,
    ValueCategory,
)
from discovery_mcp.utils.validators import check_rule, check_rule_expr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Facts:
    """Flattened, read-only fact snapshot that conditions are evaluated against."""

    age: int | None = None
    years_to_retirement: int | None = None
    marital_status: MaritalStatus | None = None
    dependents: int = 0
    federal_employee: bool = False
    has_spouse: bool = False
    has_pension: bool = False
    account_types: frozenset[AccountType] = frozenset()
    top5_categories: frozenset[ValueCategory] = frozenset()
    high_priority_goal_categories: frozenset[GoalCategory] = frozenset()
    focus_ranks: Mapping[PlanningDomain, int] = field(default_factory=dict)
    answers: Mapping[str, AnswerValue] = field(default_factory=dict)

    @property
    def near_retirement(self) -> bool:
        return self.years_to_retirement is not None and (
            self.years_to_retirement <= NEAR_RETIREMENT_YEARS
        )

    def lookup(self, name: str) -> Any:
        """Resolve a fact by name. Unknown names resolve to None."""
        if name.startswith("_"):
            return None
        value = getattr(self, name, None)
        return None if callable(value) else value


def build_facts(
    snapshot: DiscoverySnapshot,
    ranking: PlanningFocusRanking | None = None,
) -> Facts:
    """Derive the fact snapshot from one consistent discovery snapshot."""
    context = snapshot.basic_context
    top5_categories = frozenset(
        card.category
        for card_id in snapshot.values.top5
        if (card := get_card_by_id(card_id)) is not None
    )
    high_goal_categories = frozenset(
        goal.category for goal in snapshot.goals.goals if goal.priority is GoalPriority.HIGH
    )
    federal = is_federal_employee(context)
    focus_ranks = {area.domain: area.priority for area in ranking.areas} if ranking else {}

    return Facts(
        age=context.age,
        years_to_retirement=years_to_retirement(context),
        marital_status=context.marital_status,
        dependents=len(context.dependents),
        federal_employee=federal,
        has_spouse=has_spouse(context),
        has_pension=federal or context.spouse_has_pension or context.pension_income,
        account_types=frozenset(context.account_types),
        top5_categories=top5_categories,
        high_priority_goal_categories=high_goal_categories,
        focus_ranks=focus_ranks,
        answers=dict(snapshot.answers),
    )


# ============================================================================
# COMPARISON
# ============================================================================


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _parse_operator(raw: Operator | str | None) -> Operator | None:
    if isinstance(raw, Operator):
        return raw
    try:
        return Operator(raw)
    except ValueError:
        logger.debug(f"Unknown comparison operator: {raw!r}")
        return None


def _strict_equals(actual: Any, expected: Any) -> bool:
    """Equality that never treats a bool as equal to a number."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    return actual == expected


def compare(op: Operator | str | None, actual: Any, expected: Any) -> bool:
    """Compare an observed value against an expected one. Unknown operators are False."""
    parsed = _parse_operator(op)
    match parsed:
        case Operator.EQUALS:
            return _strict_equals(actual, expected)
        case Operator.NOT_EQUALS:
            return not _strict_equals(actual, expected)
        case Operator.CONTAINS:
            if isinstance(actual, (list, tuple, frozenset, set)):
                return str(expected) in actual
            if isinstance(actual, str):
                return str(expected) in actual
            return False
        case Operator.GREATER_THAN:
            return check_rule_expr(_as_number(actual), _as_number(expected), operator.gt) is True
        case Operator.LESS_THAN:
            return check_rule_expr(_as_number(actual), _as_number(expected), operator.lt) is True
        case _:
            return False


# ============================================================================
# CONDITIONS
# ============================================================================


def _age_rule(age: int | None, raw: Any, comparator: Callable[[float, float], bool]) -> bool:
    threshold = _as_number(raw)
    if threshold is None:
        return False
    return check_rule(age, threshold, comparator) is True


def _min_focus_rank(condition: Condition, facts: Facts) -> bool:
    """True when the target domain ranks at or above the given position."""
    threshold = _as_number(condition.value)
    try:
        domain = PlanningDomain(condition.target)
    except ValueError:
        return False
    if threshold is None:
        return False
    return check_rule(facts.focus_ranks.get(domain), threshold, operator.le) is True


def _in_enum_set(members: frozenset[Any], enum_type: type[Enum], raw: Any) -> bool:
    try:
        return enum_type(raw) in members
    except ValueError:
        return False


def _evaluate(condition: Condition, facts: Facts) -> bool:
    match condition.type:
        case ConditionType.ALWAYS:
            return True
        case ConditionType.FEDERAL_EMPLOYEE:
            return facts.federal_employee
        case ConditionType.HAS_SPOUSE:
            return facts.has_spouse
        case ConditionType.MARRIED:
            return facts.marital_status is MaritalStatus.MARRIED
        case ConditionType.HAS_DEPENDENTS:
            return facts.dependents > 0
        case ConditionType.NEAR_RETIREMENT:
            return facts.near_retirement
        case ConditionType.HAS_PENSION:
            return facts.has_pension
        case ConditionType.HAS_TSP:
            return bool(
                facts.account_types & {AccountType.TSP_TRADITIONAL, AccountType.TSP_ROTH}
            )
        case ConditionType.HAS_IRA:
            return bool(
                facts.account_types & {AccountType.TRADITIONAL_IRA, AccountType.ROTH_IRA}
            )
        case ConditionType.HAS_401K:
            return AccountType.K401 in facts.account_types
        case ConditionType.AGE_OVER:
            return _age_rule(facts.age, condition.value, operator.gt)
        case ConditionType.AGE_UNDER:
            return _age_rule(facts.age, condition.value, operator.lt)
        case ConditionType.ANSWER_EQUALS:
            if condition.target is None or condition.target not in facts.answers:
                return False
            return facts.answers[condition.target] == condition.value
        case ConditionType.FACT:
            if condition.target is None:
                return False
            actual = facts.lookup(condition.target)
            if actual is None:
                return False
            return compare(condition.operator or Operator.EQUALS, actual, condition.value)
        case ConditionType.MIN_FOCUS_RANK:
            return _min_focus_rank(condition, facts)
        case ConditionType.VALUE_IN_TOP5:
            return _in_enum_set(facts.top5_categories, ValueCategory, condition.value)
        case ConditionType.HIGH_PRIORITY_GOAL:
            return _in_enum_set(facts.high_priority_goal_categories, GoalCategory, condition.value)
        case _:
            return False


def evaluate_condition(condition: Condition, facts: Facts) -> bool:
    """Evaluate one condition, applying ``negate`` after evaluation."""
    result = _evaluate(condition, facts)
    return not result if condition.negate else result


def evaluate_all(conditions: Sequence[Condition], facts: Facts, *, when_empty: bool) -> bool:
    """All-of composition. ``when_empty`` is the caller's default for an empty list."""
    if not conditions:
        return when_empty
    return all(evaluate_condition(c, facts) for c in conditions)


def evaluate_any(
    conditions: Sequence[Condition], facts: Facts, *, when_empty: bool = True
) -> bool:
    """Any-of composition, used for domain relevance."""
    if not conditions:
        return when_empty
    return any(evaluate_condition(c, facts) for c in conditions)


# ============================================================================
# TRIGGERS
# ============================================================================


def evaluate_trigger(trigger: Trigger, answers: Mapping[str, AnswerValue]) -> bool:
    """A trigger against an unanswered question is False."""
    if trigger.question_id not in answers:
        return False
    return compare(trigger.operator, answers[trigger.question_id], trigger.value)


def triggers_match(triggers: Sequence[Trigger], answers: Mapping[str, AnswerValue]) -> bool:
    """All triggers must match. An empty trigger list never fires."""
    if not triggers:
        return False
    return all(evaluate_trigger(t, answers) for t in triggers)
