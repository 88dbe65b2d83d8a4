"""Tests for the shared condition evaluator."""

from discovery_mcp.engine.conditions import (
    Facts,
    build_facts,
    compare,
    evaluate_all,
    evaluate_any,
    evaluate_condition,
    evaluate_trigger,
    triggers_match,
)
from discovery_mcp.engine.focus import build_focus_ranking
from discovery_mcp.models import (
    AccountType,
    Condition,
    ConditionType,
    GoalCategory,
    MaritalStatus,
    Operator,
    PlanningDomain,
    Trigger,
    ValueCategory,
)

T = ConditionType


class TestComposition:
    """Tests for empty-list defaults and negation."""

    def test_all_of_empty_uses_caller_default(self) -> None:
        """Test an empty all-of list returns the caller's default."""
        assert evaluate_all((), Facts(), when_empty=True) is True
        assert evaluate_all((), Facts(), when_empty=False) is False

    def test_any_of_empty_is_relevant(self) -> None:
        """Test an empty any-of list defaults to True."""
        assert evaluate_any((), Facts()) is True

    def test_all_of_requires_every_condition(self) -> None:
        """Test one failing condition fails all-of."""
        conditions = (Condition(T.ALWAYS), Condition(T.FEDERAL_EMPLOYEE))
        assert not evaluate_all(conditions, Facts(), when_empty=True)
        assert evaluate_all(conditions, Facts(federal_employee=True), when_empty=True)

    def test_any_of_needs_one(self) -> None:
        """Test one passing condition satisfies any-of."""
        conditions = (Condition(T.FEDERAL_EMPLOYEE), Condition(T.ALWAYS))
        assert evaluate_any(conditions, Facts())

    def test_negate(self) -> None:
        """Test negate inverts the result."""
        condition = Condition(T.HAS_DEPENDENTS, negate=True)
        assert evaluate_condition(condition, Facts(dependents=0))
        assert not evaluate_condition(condition, Facts(dependents=2))


class TestContextConditions:
    """Tests for context-derived condition types."""

    def test_spouse_includes_domestic_partnership(self) -> None:
        """Test has_spouse covers married and domestic partnership."""
        assert evaluate_condition(Condition(T.HAS_SPOUSE), Facts(has_spouse=True))
        assert not evaluate_condition(
            Condition(T.MARRIED),
            Facts(has_spouse=True, marital_status=MaritalStatus.DOMESTIC_PARTNERSHIP),
        )

    def test_account_types(self) -> None:
        """Test account-type conditions match either account of a family."""
        facts = Facts(account_types=frozenset({AccountType.TSP_ROTH, AccountType.K401}))
        assert evaluate_condition(Condition(T.HAS_TSP), facts)
        assert evaluate_condition(Condition(T.HAS_401K), facts)
        assert not evaluate_condition(Condition(T.HAS_IRA), facts)

    def test_age_rules(self) -> None:
        """Test age_over and age_under are strict comparisons."""
        facts = Facts(age=50)
        assert evaluate_condition(Condition(T.AGE_OVER, value=45), facts)
        assert not evaluate_condition(Condition(T.AGE_OVER, value=50), facts)
        assert evaluate_condition(Condition(T.AGE_UNDER, value=60), facts)

    def test_age_rules_without_age(self) -> None:
        """Test a missing age never satisfies an age rule."""
        assert not evaluate_condition(Condition(T.AGE_OVER, value=45), Facts())
        assert not evaluate_condition(Condition(T.AGE_UNDER, value=45), Facts())
        assert evaluate_condition(Condition(T.AGE_OVER, value=45, negate=True), Facts())

    def test_near_retirement_window(self) -> None:
        """Test near retirement means ten years or less."""
        assert Facts(years_to_retirement=10).near_retirement
        assert not Facts(years_to_retirement=11).near_retirement
        assert not Facts().near_retirement


class TestRankAndProfileConditions:
    """Tests for focus-rank and profile conditions."""

    def test_min_focus_rank(self) -> None:
        """Test domain must rank at or above the threshold."""
        facts = Facts(focus_ranks={PlanningDomain.TAX_OPTIMIZATION: 3})
        assert evaluate_condition(
            Condition(T.MIN_FOCUS_RANK, value=3, target="TAX_OPTIMIZATION"), facts
        )
        assert not evaluate_condition(
            Condition(T.MIN_FOCUS_RANK, value=2, target="TAX_OPTIMIZATION"), facts
        )

    def test_min_focus_rank_unranked(self) -> None:
        """Test an unranked or unknown domain fails."""
        facts = Facts(focus_ranks={})
        assert not evaluate_condition(
            Condition(T.MIN_FOCUS_RANK, value=9, target="TAX_OPTIMIZATION"), facts
        )
        assert not evaluate_condition(Condition(T.MIN_FOCUS_RANK, value=9, target="NOPE"), facts)

    def test_value_in_top5(self) -> None:
        """Test top-5 category membership."""
        facts = Facts(top5_categories=frozenset({ValueCategory.HEALTH}))
        assert evaluate_condition(Condition(T.VALUE_IN_TOP5, value="HEALTH"), facts)
        assert not evaluate_condition(Condition(T.VALUE_IN_TOP5, value="GROWTH"), facts)
        assert not evaluate_condition(Condition(T.VALUE_IN_TOP5, value="UNKNOWN"), facts)

    def test_high_priority_goal(self) -> None:
        """Test HIGH-priority goal category membership."""
        facts = Facts(high_priority_goal_categories=frozenset({GoalCategory.GIVING}))
        assert evaluate_condition(Condition(T.HIGH_PRIORITY_GOAL, value="GIVING"), facts)


class TestFactAndAnswerConditions:
    """Tests for fact comparison and answer conditions."""

    def test_answer_equals(self) -> None:
        """Test answer_equals compares the saved answer."""
        facts = Facts(answers={"est_will": "none"})
        assert evaluate_condition(
            Condition(T.ANSWER_EQUALS, value="none", target="est_will"), facts
        )
        assert not evaluate_condition(
            Condition(T.ANSWER_EQUALS, value="none", target="est_trust"), facts
        )

    def test_fact_comparison(self) -> None:
        """Test fact comparison with an explicit operator."""
        facts = Facts(age=52)
        condition = Condition(T.FACT, value=50, target="age", operator=Operator.GREATER_THAN)
        assert evaluate_condition(condition, facts)

    def test_fact_defaults_to_equals(self) -> None:
        """Test fact comparison without operator means equals."""
        condition = Condition(T.FACT, value=2, target="dependents")
        assert evaluate_condition(condition, Facts(dependents=2))

    def test_unknown_fact(self) -> None:
        """Test unknown or private fact names resolve to False."""
        assert not evaluate_condition(Condition(T.FACT, value=1, target="salary"), Facts())
        assert Facts().lookup("_private") is None
        assert Facts().lookup("lookup") is None


class TestCompare:
    """Tests for operator comparison."""

    def test_contains(self) -> None:
        """Test contains handles lists and substrings."""
        assert compare(Operator.CONTAINS, ("a", "b"), "b")
        assert compare("contains", "not_reviewed", "review")
        assert not compare(Operator.CONTAINS, 5, "5")

    def test_numeric_only(self) -> None:
        """Test greater_than and less_than ignore non-numbers."""
        assert compare(Operator.GREATER_THAN, 5, 3)
        assert compare(Operator.LESS_THAN, 2.5, 3)
        assert not compare(Operator.GREATER_THAN, "5", 3)
        assert not compare(Operator.GREATER_THAN, True, 0)

    def test_equals_keeps_bools_and_numbers_apart(self) -> None:
        """Test a boolean answer never equals a numeric trigger value."""
        assert not compare(Operator.EQUALS, True, 1)
        assert not compare(Operator.EQUALS, 0, False)
        assert compare(Operator.NOT_EQUALS, True, 1)
        assert compare(Operator.EQUALS, True, True)
        assert compare(Operator.EQUALS, 3, 3.0)
        assert not compare(Operator.NOT_EQUALS, False, False)

    def test_unknown_operator(self) -> None:
        """Test an unknown operator is False."""
        assert not compare("matches", "a", "a")
        assert not compare(None, "a", "a")


class TestTriggers:
    """Tests for suggestion trigger matching."""

    def test_unanswered_is_false(self) -> None:
        """Test a trigger on an unanswered question fails."""
        trigger = Trigger("est_will", Operator.EQUALS, "none")
        assert not evaluate_trigger(trigger, {})

    def test_empty_never_fires(self) -> None:
        """Test an empty trigger list never fires."""
        assert not triggers_match((), {"est_will": "none"})

    def test_all_must_match(self) -> None:
        """Test every trigger must match."""
        triggers = (
            Trigger("est_will", Operator.EQUALS, "none"),
            Trigger("est_trust", Operator.NOT_EQUALS, "have_trust"),
        )
        assert triggers_match(triggers, {"est_will": "none", "est_trust": "need_evaluation"})
        assert not triggers_match(triggers, {"est_will": "none", "est_trust": "have_trust"})


class TestBuildFacts:
    """Tests for build_facts."""

    def test_derived_context(self, make_snapshot) -> None:
        """Test facts derive retirement window and flags from context."""
        snapshot = make_snapshot(
            age=57,
            target_retirement_age=60,
            marital_status="married",
            dependents=1,
            federal=True,
            account_types=["tsp_traditional"],
        )
        facts = build_facts(snapshot)
        assert facts.years_to_retirement == 3
        assert facts.near_retirement
        assert facts.federal_employee
        assert facts.has_spouse
        assert facts.has_pension
        assert facts.dependents == 1
        assert facts.focus_ranks == {}

    def test_default_target_age(self, make_snapshot) -> None:
        """Test missing target age falls back to 65."""
        facts = build_facts(make_snapshot(age=50))
        assert facts.years_to_retirement == 15

    def test_past_target_floors_at_zero(self, make_snapshot) -> None:
        """Test years to retirement never goes negative."""
        facts = build_facts(make_snapshot(age=70, target_retirement_age=65))
        assert facts.years_to_retirement == 0

    def test_focus_ranks_from_ranking(self, near_retirement_security) -> None:
        """Test focus ranks come from the supplied ranking."""
        ranking = build_focus_ranking(near_retirement_security)
        facts = build_facts(near_retirement_security, ranking)
        assert facts.focus_ranks[PlanningDomain.RETIREMENT_INCOME] == 1
        assert len(facts.focus_ranks) == 9
