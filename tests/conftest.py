"""Pytest configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from discovery_mcp.data.cache import InsightsCache
from discovery_mcp.models import DiscoverySnapshot
from discovery_mcp.utils.validators import parse_snapshot

SECURITY_TOP5 = [
    "security_financial_security",
    "security_emergency_preparedness",
    "security_stable_income",
    "security_predictable_expenses",
    "security_insurance_protection",
]

CONTROL_TOP5 = [
    "control_budgeting_confidence",
    "control_clear_plan",
    "control_understanding_investments",
    "control_knowing_money_goes",
    "control_tax_management",
]

GROWTH_TOP5 = [
    "growth_career_advancement",
    "growth_business_ownership",
    "growth_skill_development",
    "growth_education_training",
    "growth_building_wealth",
]

# One card each from FAMILY, FREEDOM, GROWTH, HEALTH and SECURITY
MIXED_TOP5 = [
    "security_stable_income",
    "freedom_flexible_schedule",
    "growth_building_wealth",
    "health_preventive_care",
    "family_vacations",
]


def build_payload(
    age: int | None = None,
    target_retirement_age: int | None = None,
    marital_status: str | None = None,
    dependents: int = 0,
    federal: bool = False,
    account_types: list[str] | None = None,
    top5: list[str] | None = None,
    top10: list[str] | None = None,
    non_negotiables: list[str] | None = None,
    piles: dict[str, str] | None = None,
    tradeoff_responses: list[dict[str, Any]] | None = None,
    goals: list[dict[str, Any]] | None = None,
    primary_driver: str | None = None,
    tradeoff_anchors: list[dict[str, Any]] | None = None,
    final_statement: str | None = None,
    answers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a camelCase snapshot payload the way a client would send it."""
    context: dict[str, Any] = {}
    if age is not None:
        context["age"] = age
    if target_retirement_age is not None:
        context["targetRetirementAge"] = target_retirement_age
    if marital_status is not None:
        context["maritalStatus"] = marital_status
    if dependents:
        context["dependents"] = [{"relationship": "child"} for _ in range(dependents)]
    if federal:
        context["federalEmployment"] = {"retirementSystem": "FERS", "agency": "VA"}
    if account_types:
        context["accountTypes"] = account_types

    purpose: dict[str, Any] = {}
    if primary_driver is not None:
        purpose["primaryDriver"] = primary_driver
    if tradeoff_anchors:
        purpose["tradeoffAnchors"] = tradeoff_anchors
    if final_statement is not None:
        purpose["finalStatement"] = final_statement

    return {
        "basicContext": context,
        "valuesDiscovery": {
            "piles": piles or {},
            "top10": top10 or [],
            "top5": top5 or [],
            "nonNegotiables": non_negotiables or [],
            "tradeoffResponses": tradeoff_responses or [],
        },
        "financialGoals": {"goals": goals or []},
        "financialPurpose": purpose,
        "answers": answers or {},
    }


def goal(
    label: str,
    category: str,
    priority: str | None = "HIGH",
    time_horizon: str | None = None,
    flexibility: str | None = None,
) -> dict[str, Any]:
    """Goal payload entry."""
    entry: dict[str, Any] = {"id": label.lower().replace(" ", "-"), "label": label}
    entry["category"] = category
    if priority is not None:
        entry["priority"] = priority
    if time_horizon is not None:
        entry["timeHorizon"] = time_horizon
    if flexibility is not None:
        entry["flexibility"] = flexibility
    return entry


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory for raw snapshot payloads."""
    return build_payload


@pytest.fixture
def make_snapshot() -> Callable[..., DiscoverySnapshot]:
    """Factory for parsed snapshots."""

    def _make(**kwargs: Any) -> DiscoverySnapshot:
        return parse_snapshot(build_payload(**kwargs))

    return _make


@pytest.fixture
def make_goal() -> Callable[..., dict[str, Any]]:
    """Factory for goal payload entries."""
    return goal


@pytest.fixture
def near_retirement_security() -> DiscoverySnapshot:
    """Five SECURITY values, one non-negotiable, five years from retirement."""
    return parse_snapshot(
        build_payload(
            age=60,
            target_retirement_age=65,
            top5=SECURITY_TOP5,
            non_negotiables=SECURITY_TOP5[:1],
        )
    )


@pytest.fixture
def federal_control() -> DiscoverySnapshot:
    """Federal employee with five CONTROL values and a long horizon."""
    return parse_snapshot(
        build_payload(
            age=40,
            target_retirement_age=62,
            federal=True,
            top5=CONTROL_TOP5,
        )
    )


@pytest.fixture
def complete_payload() -> dict[str, Any]:
    """Payload with every section filled in."""
    return build_payload(
        age=58,
        target_retirement_age=62,
        marital_status="married",
        dependents=2,
        federal=True,
        account_types=["tsp_traditional", "roth_ira"],
        top5=SECURITY_TOP5[:3] + ["family_providing_for_children", "health_preventive_care"],
        top10=SECURITY_TOP5 + ["family_providing_for_children", "health_preventive_care"],
        non_negotiables=["security_stable_income", "family_providing_for_children"],
        tradeoff_responses=[
            {"categoryA": "SECURITY", "categoryB": "GROWTH", "choice": "A", "strength": 2},
        ],
        goals=[
            goal("Retire at 62", "RETIREMENT", "HIGH", "MEDIUM", "FIXED"),
            goal("College for kids", "FAMILY_LEGACY", "HIGH", "LONG", "FIXED"),
            goal("Kitchen remodel", "MAJOR_PURCHASES", "LOW", "SHORT", "DEFERRABLE"),
        ],
        primary_driver="PROTECT_FAMILY",
        tradeoff_anchors=[{"axis": "SECURITY_VS_GROWTH", "lean": "A", "strength": 2}],
        final_statement="My money exists to keep my family secure and my retirement calm.",
        answers={"est_will": "none", "ben_fegli": "not_compared"},
    )


@pytest.fixture
def isolated_cache(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> InsightsCache:
    """Fresh on-disk cache swapped in for the global instance."""
    cache = InsightsCache(cache_dir=str(tmp_path / "insights"))
    monkeypatch.setattr("discovery_mcp.tools.insights.insights_cache", cache)
    monkeypatch.setattr("discovery_mcp.resources.insights_resource.insights_cache", cache)
    return cache
