"""Validation utilities and snapshot parsing.

``parse_snapshot`` turns an untrusted JSON object into typed, frozen records,
field by field. Unknown enum tags and out-of-range numbers are dropped with a
DEBUG log rather than rejected; only a structurally wrong payload (not an
object, or a section that is not an object) raises ValueError.
"""

import logging
import math
import operator
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from discovery_mcp.models import (
    AccountType,
    AnswerValue,
    BasicContext,
    Dependent,
    DiscoverySnapshot,
    FederalEmployment,
    FinancialGoal,
    FinancialGoals,
    FinancialPurpose,
    GoalCategory,
    GoalFlexibility,
    GoalPriority,
    MaritalStatus,
    Pile,
    PurposeDriver,
    TimeHorizon,
    TradeoffAnchor,
    TradeoffAxis,
    TradeoffChoice,
    TradeoffResponse,
    ValueCategory,
    ValuesDiscovery,
)
from discovery_mcp.utils.sanitize import STATEMENT_MAX_LENGTH, sanitize_label, sanitize_text

logger = logging.getLogger(__name__)

# Plausible ranges; values outside are treated as absent
AGE_RANGE = (0, 120)
STRENGTH_RANGE = (1, 5)
DEFAULT_STRENGTH = 3

SECTION_KEYS: dict[str, tuple[str, ...]] = {
    "basic_context": ("basicContext", "basic_context", "context"),
    "values": ("valuesDiscovery", "values_discovery", "values"),
    "goals": ("financialGoals", "financial_goals", "goals"),
    "purpose": ("financialPurpose", "financial_purpose", "purpose"),
    "answers": ("answers",),
}

EnumT = TypeVar("EnumT", bound=Enum)


def check_rule(
    value: float | None,
    threshold: float,
    comparator: Callable[[float, float], bool] = operator.gt,
) -> bool | None:
    """
    Check a rule with nullable boolean semantics.

    If value is None, returns None (not False).

    Args:
        value: The value to check (may be None)
        threshold: The threshold to compare against
        comparator: Comparison function (default: operator.gt)

    Returns:
        True/False if value is not None, None otherwise
    """
    if value is None:
        return None
    return comparator(value, threshold)


def check_rule_expr(
    value1: float | None,
    value2: float | None,
    comparator: Callable[[float, float], bool] = operator.gt,
) -> bool | None:
    """
    Check a rule comparing two values with nullable boolean semantics.

    If either value is None, returns None (not False).
    """
    if value1 is None or value2 is None:
        return None
    return comparator(value1, value2)


# ============================================================================
# FIELD HELPERS
# ============================================================================


def _pick(obj: dict[str, Any], *keys: str) -> Any:
    """Return the first present key's value (camelCase or snake_case)."""
    for key in keys:
        if key in obj:
            return obj[key]
    return None


def _section(payload: dict[str, Any], name: str) -> dict[str, Any] | None:
    raw = _pick(payload, *SECTION_KEYS[name])
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Section '{name}' must be an object, got {type(raw).__name__}")
    return raw


def _enum(enum_type: type[EnumT], raw: Any) -> EnumT | None:
    if raw is None:
        return None
    try:
        return enum_type(raw)
    except ValueError:
        logger.debug(f"Dropping unknown {enum_type.__name__} value: {raw!r}")
        return None


def _int_in_range(raw: Any, bounds: tuple[int, int]) -> int | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    if isinstance(raw, float) and not raw.is_integer():
        return None
    value = int(raw)
    low, high = bounds
    if not low <= value <= high:
        logger.debug(f"Dropping out-of-range value {value} (expected {low}..{high})")
        return None
    return value


def _id_list(raw: Any) -> tuple[str, ...]:
    """Card-id list. Non-string entries are dropped; unknown ids are kept."""
    if not isinstance(raw, list):
        return ()
    return tuple(item for item in raw if isinstance(item, str))


def _dicts(raw: Any) -> list[dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


def _strength(raw: Any) -> int | None:
    if raw is None:
        return DEFAULT_STRENGTH
    return _int_in_range(raw, STRENGTH_RANGE)


# ============================================================================
# SECTION PARSERS
# ============================================================================


def parse_basic_context(raw: dict[str, Any] | None) -> BasicContext:
    if not raw:
        return BasicContext()

    federal: FederalEmployment | None = None
    federal_raw = _pick(raw, "federalEmployment", "federal_employment", "federalEmployee")
    if isinstance(federal_raw, dict):
        federal = FederalEmployment(
            retirement_system=sanitize_label(
                _pick(federal_raw, "retirementSystem", "retirement_system")
            ),
            agency=sanitize_label(federal_raw.get("agency")),
            years_of_service=_int_in_range(
                _pick(federal_raw, "yearsOfService", "years_of_service"), (0, 60)
            ),
        )

    dependents_raw = raw.get("dependents")
    dependents: list[Dependent] = []
    if isinstance(dependents_raw, list):
        for item in dependents_raw:
            if isinstance(item, dict):
                flag = _pick(item, "financiallyDependent", "financially_dependent")
                dependents.append(
                    Dependent(
                        relationship=sanitize_label(item.get("relationship")),
                        financially_dependent=flag is not False,
                    )
                )
            else:
                dependents.append(Dependent())

    accounts_raw = _pick(raw, "accountTypes", "account_types")
    accounts = tuple(
        account
        for item in (accounts_raw if isinstance(accounts_raw, list) else [])
        if (account := _enum(AccountType, item)) is not None
    )

    return BasicContext(
        age=_int_in_range(raw.get("age"), AGE_RANGE),
        target_retirement_age=_int_in_range(
            _pick(raw, "targetRetirementAge", "target_retirement_age"), AGE_RANGE
        ),
        marital_status=_enum(MaritalStatus, _pick(raw, "maritalStatus", "marital_status")),
        dependents=tuple(dependents),
        federal_employment=federal,
        spouse_has_pension=_pick(raw, "spouseHasPension", "spouse_has_pension") is True,
        pension_income=_pick(raw, "pensionIncome", "pension_income") is True,
        account_types=accounts,
    )


def parse_values(raw: dict[str, Any] | None) -> ValuesDiscovery:
    if not raw:
        return ValuesDiscovery()

    piles: dict[str, Pile] = {}
    piles_raw = raw.get("piles")
    if isinstance(piles_raw, dict):
        for card_id, pile_raw in piles_raw.items():
            pile = _enum(Pile, pile_raw)
            if isinstance(card_id, str) and pile is not None:
                piles[card_id] = pile

    responses: list[TradeoffResponse] = []
    for item in _dicts(_pick(raw, "tradeoffResponses", "tradeoff_responses")):
        category_a = _enum(ValueCategory, _pick(item, "categoryA", "category_a"))
        category_b = _enum(ValueCategory, _pick(item, "categoryB", "category_b"))
        choice = _enum(TradeoffChoice, item.get("choice"))
        strength = _strength(item.get("strength"))
        if category_a is None or category_b is None or choice is None or strength is None:
            continue
        responses.append(TradeoffResponse(category_a, category_b, choice, strength))

    return ValuesDiscovery(
        piles=piles,
        top10=_id_list(raw.get("top10")),
        top5=_id_list(raw.get("top5")),
        non_negotiables=_id_list(_pick(raw, "nonNegotiables", "non_negotiables")),
        tradeoff_responses=tuple(responses),
    )


def parse_goals(raw: dict[str, Any] | None) -> FinancialGoals:
    if not raw:
        return FinancialGoals()

    goals: list[FinancialGoal] = []
    for index, item in enumerate(_dicts(_pick(raw, "goals", "allGoals", "all_goals"))):
        category = _enum(GoalCategory, item.get("category"))
        if category is None:
            continue
        goal_id = sanitize_label(item.get("id")) or f"goal-{index + 1}"
        goals.append(
            FinancialGoal(
                id=goal_id,
                label=sanitize_label(item.get("label")) or goal_id,
                category=category,
                priority=_enum(GoalPriority, item.get("priority")),
                time_horizon=_enum(TimeHorizon, _pick(item, "timeHorizon", "time_horizon")),
                flexibility=_enum(GoalFlexibility, item.get("flexibility")),
            )
        )
    return FinancialGoals(goals=tuple(goals))


def parse_purpose(raw: dict[str, Any] | None) -> FinancialPurpose:
    if not raw:
        return FinancialPurpose()

    anchors: list[TradeoffAnchor] = []
    for item in _dicts(_pick(raw, "tradeoffAnchors", "tradeoff_anchors")):
        axis = _enum(TradeoffAxis, item.get("axis"))
        lean = _enum(TradeoffChoice, _pick(item, "lean", "choice"))
        strength = _strength(item.get("strength"))
        if axis is None or lean is None or strength is None:
            continue
        anchors.append(TradeoffAnchor(axis, lean, strength))

    statement_raw = _pick(raw, "finalStatement", "final_statement", "finalText")
    statement = None
    if isinstance(statement_raw, str):
        statement = sanitize_text(statement_raw, max_length=STATEMENT_MAX_LENGTH)

    return FinancialPurpose(
        primary_driver=_enum(PurposeDriver, _pick(raw, "primaryDriver", "primary_driver")),
        tradeoff_anchors=tuple(anchors),
        final_statement=statement or None,
    )


def parse_answers(raw: dict[str, Any] | None) -> dict[str, AnswerValue]:
    if not raw:
        return {}

    answers: dict[str, AnswerValue] = {}
    for question_id, value in raw.items():
        if not isinstance(question_id, str):
            continue
        if isinstance(value, str):
            answers[question_id] = sanitize_text(value) or ""
        elif isinstance(value, float) and not math.isfinite(value):
            logger.debug(f"Dropping non-finite answer for {question_id}: {value!r}")
        elif isinstance(value, (bool, int, float)):
            answers[question_id] = value
        elif isinstance(value, list):
            answers[question_id] = tuple(
                sanitize_text(v) or "" for v in value if isinstance(v, str)
            )
        else:
            logger.debug(f"Dropping answer with unsupported type for {question_id}")
    return answers


def parse_snapshot(payload: Any) -> DiscoverySnapshot:
    """
    Build a DiscoverySnapshot from an untrusted JSON object.

    Args:
        payload: Decoded JSON object with optional basicContext, valuesDiscovery,
            financialGoals, financialPurpose and answers sections

    Returns:
        Frozen DiscoverySnapshot

    Raises:
        ValueError: If payload or one of its sections is not an object
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Snapshot must be a JSON object, got {type(payload).__name__}")

    return DiscoverySnapshot(
        basic_context=parse_basic_context(_section(payload, "basic_context")),
        values=parse_values(_section(payload, "values")),
        goals=parse_goals(_section(payload, "goals")),
        purpose=parse_purpose(_section(payload, "purpose")),
        answers=parse_answers(_section(payload, "answers")),
    )
