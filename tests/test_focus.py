"""Tests for planning focus ranking."""

from conftest import SECURITY_TOP5

from discovery_mcp.engine.focus import (
    DomainScore,
    build_focus_ranking,
    domains_for_goal,
    domains_for_value,
    empty_table,
    has_enough_data_for_focus_areas,
    rank_domains,
    score_from_goals,
    score_to_importance,
)
from discovery_mcp.models import (
    DOMAIN_ORDER,
    FinancialGoal,
    FinancialGoals,
    GoalCategory,
    GoalPriority,
    Importance,
    PlanningDomain,
    TimeHorizon,
    ValueCategory,
)

D = PlanningDomain


def area_for(ranking, domain):
    return next(area for area in ranking.areas if area.domain is domain)


class TestMappings:
    """Tests for category to domain mappings."""

    def test_every_value_category_maps(self) -> None:
        """Test every value category reaches at least two domains."""
        for category in ValueCategory:
            assert len(domains_for_value(category)) >= 2

    def test_every_goal_category_maps(self) -> None:
        """Test every goal category reaches at least two domains."""
        for category in GoalCategory:
            assert len(domains_for_goal(category)) >= 2


class TestImportanceTiers:
    """Tests for score_to_importance."""

    def test_thresholds(self) -> None:
        """Test tier boundaries at 8, 5 and 2."""
        assert score_to_importance(8) is Importance.CRITICAL
        assert score_to_importance(7) is Importance.HIGH
        assert score_to_importance(5) is Importance.HIGH
        assert score_to_importance(4) is Importance.MODERATE
        assert score_to_importance(2) is Importance.MODERATE
        assert score_to_importance(1) is Importance.LOW
        assert score_to_importance(0) is Importance.LOW


class TestRanking:
    """Tests for build_focus_ranking."""

    def test_empty_snapshot_keeps_all_domains(self, make_snapshot) -> None:
        """Test every domain is ranked even without data."""
        ranking = build_focus_ranking(make_snapshot())
        assert [a.domain for a in ranking.areas] == list(PlanningDomain)
        assert [a.priority for a in ranking.areas] == list(range(1, 10))
        assert all(a.importance is Importance.LOW for a in ranking.areas)
        assert all(a.rationale == "General planning area" for a in ranking.areas)
        assert ranking.top_priorities == ()

    def test_ties_break_on_domain_order(self) -> None:
        """Test equal scores rank by domain order, whatever the table order."""
        table = {domain: DomainScore(domain, score=2) for domain in reversed(PlanningDomain)}
        table[D.HEALTHCARE_LTC] = DomainScore(D.HEALTHCARE_LTC, score=5)
        ranking = rank_domains(table)
        in_order = sorted(PlanningDomain, key=DOMAIN_ORDER.get)
        rest = [d for d in in_order if d is not D.HEALTHCARE_LTC]
        assert [a.domain for a in ranking.areas] == [D.HEALTHCARE_LTC, *rest]

    def test_foundational_risk_notes(self, make_snapshot) -> None:
        """Test under-scored foundational domains carry risk notes."""
        ranking = build_focus_ranking(make_snapshot())
        assert area_for(ranking, D.INSURANCE_RISK).risk_factors == (
            "Underinsurance poses significant financial risk",
        )
        assert area_for(ranking, D.CASH_FLOW_DEBT).risk_factors == (
            "Cash flow management is foundational to all planning",
        )
        assert area_for(ranking, D.TAX_OPTIMIZATION).risk_factors == ()

    def test_security_near_retirement(self, near_retirement_security) -> None:
        """Test retirement income leads for security values near retirement."""
        ranking = build_focus_ranking(near_retirement_security)
        first = ranking.areas[0]
        assert first.domain is D.RETIREMENT_INCOME
        assert first.score == 7
        assert first.importance is Importance.HIGH
        assert "Retirement within 5 years" in first.rationale
        assert ranking.top_priorities == (D.RETIREMENT_INCOME,)
        assert [a.domain for a in ranking.areas[:5]] == [
            D.RETIREMENT_INCOME,
            D.HEALTHCARE_LTC,
            D.TAX_OPTIMIZATION,
            D.INSURANCE_RISK,
            D.CASH_FLOW_DEBT,
        ]

    def test_high_retirement_goal_reaches_critical(self, make_snapshot, make_goal) -> None:
        """Test a HIGH retirement goal pushes retirement income to CRITICAL."""
        snapshot = make_snapshot(
            age=60,
            target_retirement_age=65,
            top5=SECURITY_TOP5,
            non_negotiables=SECURITY_TOP5[:1],
            goals=[make_goal("Retire on time", "RETIREMENT", "HIGH", "MEDIUM")],
        )
        first = build_focus_ranking(snapshot).areas[0]
        assert first.domain is D.RETIREMENT_INCOME
        assert first.score == 10
        assert first.importance is Importance.CRITICAL
        assert first.goal_connections == ("Retire on time",)

    def test_short_goal_bonus(self, make_snapshot, make_goal) -> None:
        """Test HIGH short-horizon goals add the near-term bonus."""
        snapshot = make_snapshot(goals=[make_goal("Car", "MAJOR_PURCHASES", "HIGH", "SHORT")])
        ranking = build_focus_ranking(snapshot)
        assert area_for(ranking, D.CASH_FLOW_DEBT).score == 5
        assert area_for(ranking, D.INVESTMENT_STRATEGY).score == 5
        assert "Near-term goal: Car" in area_for(ranking, D.CASH_FLOW_DEBT).rationale

    def test_non_high_goals_ignored(self, make_snapshot, make_goal) -> None:
        """Test MEDIUM and LOW goals do not score."""
        snapshot = make_snapshot(goals=[make_goal("Car", "MAJOR_PURCHASES", "MEDIUM", "SHORT")])
        ranking = build_focus_ranking(snapshot)
        assert all(a.score == 0 for a in ranking.areas)

    def test_federal_benefits(self, federal_control) -> None:
        """Test federal employees score benefits optimization."""
        ranking = build_focus_ranking(federal_control)
        first = ranking.areas[0]
        assert first.domain is D.BENEFITS_OPTIMIZATION
        assert first.score == 4
        assert "Federal benefits require specialized optimization" in first.risk_factors

    def test_dependents_and_marriage(self, make_snapshot) -> None:
        """Test dependents and marriage score protection and estate."""
        ranking = build_focus_ranking(make_snapshot(dependents=2, marital_status="married"))
        estate = area_for(ranking, D.ESTATE_LEGACY)
        assert estate.score == 3
        assert estate.risk_factors == ()
        insurance = area_for(ranking, D.INSURANCE_RISK)
        assert insurance.score == 2
        assert "2 dependents to protect" in insurance.rationale
        assert insurance.risk_factors == (
            "Dependents require adequate protection",
            "Underinsurance poses significant financial risk",
        )

    def test_connections_capped(self, make_snapshot, make_goal) -> None:
        """Test goal connections are capped at three."""
        goals = [make_goal(f"Retire plan {i}", "RETIREMENT") for i in range(5)]
        ranking = build_focus_ranking(make_snapshot(goals=goals))
        assert len(area_for(ranking, D.RETIREMENT_INCOME).goal_connections) == 3

    def test_value_categories_before_titles(self, make_snapshot) -> None:
        """Test both matched categories come before the top value titles."""
        top5 = [
            "security_stable_income",
            "security_financial_security",
            "security_emergency_preparedness",
            "freedom_flexible_schedule",
            "freedom_work_optional",
        ]
        ranking = build_focus_ranking(make_snapshot(age=40, top5=top5))
        for domain in (D.RETIREMENT_INCOME, D.CASH_FLOW_DEBT):
            assert area_for(ranking, domain).value_connections == (
                "SECURITY",
                "FREEDOM",
                "Stable income",
            )
        assert area_for(ranking, D.INSURANCE_RISK).value_connections == (
            "SECURITY",
            "Stable income",
            "Financial security",
        )

    def test_top_priorities_capped(self, make_snapshot, make_goal) -> None:
        """Test top priorities hold at most three CRITICAL or HIGH domains."""
        goals = [
            make_goal("Retire", "RETIREMENT"),
            make_goal("Protect", "SECURITY_PROTECTION"),
            make_goal("Legacy", "FAMILY_LEGACY"),
        ]
        ranking = build_focus_ranking(make_snapshot(goals=goals))
        assert len(ranking.top_priorities) == 3
        for domain in ranking.top_priorities:
            assert area_for(ranking, domain).importance in (Importance.CRITICAL, Importance.HIGH)


class TestImmutableFold:
    """Tests for the scoring passes."""

    def test_pass_returns_new_table(self) -> None:
        """Test a scoring pass leaves its input table unchanged."""
        table = empty_table()
        goals = FinancialGoals(
            goals=(
                FinancialGoal(
                    id="g1",
                    label="Retire",
                    category=GoalCategory.RETIREMENT,
                    priority=GoalPriority.HIGH,
                    time_horizon=TimeHorizon.LONG,
                ),
            )
        )
        result = score_from_goals(table, goals)
        assert table[D.RETIREMENT_INCOME].score == 0
        assert result[D.RETIREMENT_INCOME].score == 3


class TestFocusReadiness:
    """Tests for has_enough_data_for_focus_areas."""

    def test_requires_age(self, make_snapshot, make_goal) -> None:
        """Test goals or values are only enough with an age."""
        goals = [make_goal("Retire", "RETIREMENT")]
        assert not has_enough_data_for_focus_areas(make_snapshot(goals=goals))
        assert has_enough_data_for_focus_areas(make_snapshot(age=45, goals=goals))
        assert not has_enough_data_for_focus_areas(make_snapshot(age=45, top5=SECURITY_TOP5[:2]))
