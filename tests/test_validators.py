"""Tests for snapshot parsing and rule helpers."""

import operator

import pytest

from discovery_mcp.models import (
    AccountType,
    GoalCategory,
    MaritalStatus,
    Pile,
    PurposeDriver,
    TradeoffAxis,
    TradeoffChoice,
)
from discovery_mcp.utils.validators import (
    DEFAULT_STRENGTH,
    check_rule,
    check_rule_expr,
    parse_snapshot,
)


class TestParseSnapshotStructure:
    """Tests for structural validation."""

    def test_non_object_raises(self) -> None:
        """Test a non-object payload raises ValueError."""
        with pytest.raises(ValueError, match="must be a JSON object"):
            parse_snapshot(["not", "an", "object"])

    def test_section_not_object_raises(self) -> None:
        """Test a section that is not an object raises ValueError."""
        with pytest.raises(ValueError, match="Section 'values' must be an object"):
            parse_snapshot({"valuesDiscovery": "SECURITY"})

    def test_empty_payload(self) -> None:
        """Test an empty object parses to an empty snapshot."""
        snapshot = parse_snapshot({})
        assert snapshot.basic_context.age is None
        assert snapshot.values.top5 == ()
        assert snapshot.goals.goals == ()
        assert snapshot.purpose.final_statement is None
        assert snapshot.answers == {}

    def test_snake_case_sections(self) -> None:
        """Test snake_case keys are accepted alongside camelCase."""
        snapshot = parse_snapshot(
            {
                "basic_context": {"age": 50, "target_retirement_age": 60},
                "values_discovery": {"non_negotiables": ["security_stable_income"]},
            }
        )
        assert snapshot.basic_context.target_retirement_age == 60
        assert snapshot.values.non_negotiables == ("security_stable_income",)


class TestBasicContext:
    """Tests for basic context parsing."""

    def test_full_context(self, make_payload) -> None:
        """Test every context field is parsed."""
        payload = make_payload(
            age=55,
            target_retirement_age=60,
            marital_status="married",
            dependents=2,
            federal=True,
            account_types=["tsp_roth", "401k"],
        )
        context = parse_snapshot(payload).basic_context
        assert context.age == 55
        assert context.marital_status is MaritalStatus.MARRIED
        assert len(context.dependents) == 2
        assert context.dependents[0].financially_dependent
        assert context.federal_employment.retirement_system == "FERS"
        assert context.account_types == (AccountType.TSP_ROTH, AccountType.K401)

    def test_out_of_range_age_dropped(self) -> None:
        """Test implausible ages are treated as absent."""
        snapshot = parse_snapshot({"basicContext": {"age": 430, "targetRetirementAge": -1}})
        assert snapshot.basic_context.age is None
        assert snapshot.basic_context.target_retirement_age is None

    def test_non_integer_age_dropped(self) -> None:
        """Test strings, booleans and fractional ages are dropped."""
        for raw in ("45", True, 45.5):
            assert parse_snapshot({"basicContext": {"age": raw}}).basic_context.age is None
        assert parse_snapshot({"basicContext": {"age": 45.0}}).basic_context.age == 45

    def test_unknown_enums_dropped(self) -> None:
        """Test unknown marital status and account types are dropped."""
        snapshot = parse_snapshot(
            {"basicContext": {"maritalStatus": "complicated", "accountTypes": ["hsa", "roth_ira"]}}
        )
        assert snapshot.basic_context.marital_status is None
        assert snapshot.basic_context.account_types == (AccountType.ROTH_IRA,)

    def test_dependent_flag(self) -> None:
        """Test an explicit non-dependent flag is kept."""
        snapshot = parse_snapshot(
            {"basicContext": {"dependents": [{"financiallyDependent": False}, "child"]}}
        )
        dependents = snapshot.basic_context.dependents
        assert not dependents[0].financially_dependent
        assert dependents[1].financially_dependent


class TestValues:
    """Tests for values discovery parsing."""

    def test_card_ids_kept_in_order(self) -> None:
        """Test unknown card ids are kept and non-strings dropped."""
        snapshot = parse_snapshot(
            {"valuesDiscovery": {"top5": ["security_stable_income", 7, "made_up_card"]}}
        )
        assert snapshot.values.top5 == ("security_stable_income", "made_up_card")

    def test_piles(self) -> None:
        """Test pile tags are parsed and unknown tags dropped."""
        piles = {"qol_hobbies": "IMPORTANT", "family_vacations": "MAYBE"}
        snapshot = parse_snapshot({"valuesDiscovery": {"piles": piles}})
        assert snapshot.values.piles == {"qol_hobbies": Pile.IMPORTANT}

    def test_tradeoff_strength(self) -> None:
        """Test missing strength defaults and out-of-range strength drops the response."""
        snapshot = parse_snapshot(
            {
                "valuesDiscovery": {
                    "tradeoffResponses": [
                        {"categoryA": "SECURITY", "categoryB": "GROWTH", "choice": "A"},
                        {
                            "categoryA": "SECURITY",
                            "categoryB": "GROWTH",
                            "choice": "B",
                            "strength": 9,
                        },
                        {"categoryA": "SECURITY", "categoryB": "WEALTH", "choice": "A"},
                    ]
                }
            }
        )
        responses = snapshot.values.tradeoff_responses
        assert len(responses) == 1
        assert responses[0].choice is TradeoffChoice.A
        assert responses[0].strength == DEFAULT_STRENGTH


class TestGoals:
    """Tests for goal parsing."""

    def test_goal_defaults(self) -> None:
        """Test missing ids and labels get defaults and optional tags stay None."""
        snapshot = parse_snapshot({"financialGoals": {"goals": [{"category": "GIVING"}]}})
        goal = snapshot.goals.goals[0]
        assert goal.id == "goal-1"
        assert goal.label == "goal-1"
        assert goal.category is GoalCategory.GIVING
        assert goal.priority is None
        assert goal.time_horizon is None

    def test_unknown_category_dropped(self, make_goal) -> None:
        """Test goals with unknown categories are skipped."""
        snapshot = parse_snapshot(
            {"financialGoals": {"goals": [make_goal("Yacht", "TOYS"), make_goal("Gift", "GIVING")]}}
        )
        assert [g.label for g in snapshot.goals.goals] == ["Gift"]

    def test_label_sanitized(self) -> None:
        """Test goal labels are cleaned of control characters."""
        snapshot = parse_snapshot(
            {"financialGoals": {"goals": [{"label": " Retire\x00 ", "category": "RETIREMENT"}]}}
        )
        assert snapshot.goals.goals[0].label == "Retire"


class TestPurpose:
    """Tests for financial purpose parsing."""

    def test_purpose_fields(self, make_payload) -> None:
        """Test driver, anchors and statement are parsed."""
        payload = make_payload(
            primary_driver="PROTECT_FAMILY",
            tradeoff_anchors=[
                {"axis": "SECURITY_VS_GROWTH", "lean": "A", "strength": 1},
                {"axis": "UNKNOWN_AXIS", "lean": "A"},
            ],
            final_statement="  Keep my family safe.\n",
        )
        purpose = parse_snapshot(payload).purpose
        assert purpose.primary_driver is PurposeDriver.PROTECT_FAMILY
        assert len(purpose.tradeoff_anchors) == 1
        assert purpose.tradeoff_anchors[0].axis is TradeoffAxis.SECURITY_VS_GROWTH
        assert purpose.final_statement == "Keep my family safe."

    def test_blank_statement_is_none(self) -> None:
        """Test a whitespace-only statement is absent."""
        snapshot = parse_snapshot({"financialPurpose": {"finalStatement": "   "}})
        assert snapshot.purpose.final_statement is None


class TestAnswers:
    """Tests for guided question answers."""

    def test_answer_types(self) -> None:
        """Test strings, numbers, booleans and string lists are kept."""
        snapshot = parse_snapshot(
            {
                "answers": {
                    "est_will": "none",
                    "sav_savings_rate": 12,
                    "ins_ltc": True,
                    "sav_account_types": ["roth", 3, "tsp"],
                    "inv_overlap": {"nested": True},
                }
            }
        )
        assert snapshot.answers == {
            "est_will": "none",
            "sav_savings_rate": 12,
            "ins_ltc": True,
            "sav_account_types": ("roth", "tsp"),
        }

    def test_non_finite_numbers_dropped(self) -> None:
        """Test NaN and infinite answers are dropped, finite floats kept."""
        snapshot = parse_snapshot(
            {
                "answers": {
                    "sav_savings_rate": float("nan"),
                    "inv_allocation": float("inf"),
                    "inv_equity_pct": float("-inf"),
                    "sav_emergency_months": 4.5,
                }
            }
        )
        assert snapshot.answers == {"sav_emergency_months": 4.5}


class TestCheckRule:
    """Tests for check_rule function."""

    def test_check_rule_true(self) -> None:
        """Test rule that triggers."""
        assert check_rule(0.5, 0.3, operator.gt) is True

    def test_check_rule_false(self) -> None:
        """Test rule that doesn't trigger."""
        assert check_rule(0.2, 0.3, operator.gt) is False

    def test_check_rule_none_value(self) -> None:
        """Test rule with None value returns None (not False)."""
        assert check_rule(None, 0.3, operator.gt) is None

    def test_check_rule_ge_operator(self) -> None:
        """Test rule with greater-or-equal operator."""
        assert check_rule(0.3, 0.3, operator.ge) is True


class TestCheckRuleExpr:
    """Tests for check_rule_expr function."""

    def test_check_rule_expr_true(self) -> None:
        """Test expression rule that triggers."""
        assert check_rule_expr(100.0, 50.0, operator.gt) is True

    def test_check_rule_expr_none(self) -> None:
        """Test expression rule with a None operand returns None."""
        assert check_rule_expr(None, 50.0, operator.gt) is None
        assert check_rule_expr(100.0, None, operator.gt) is None
