"""Tests for guided questions and answer-triggered suggestions."""

from discovery_mcp.data.guided_questions import (
    DOMAIN_INFO,
    GUIDED_QUESTIONS,
    get_question_by_id,
    get_questions_by_domain,
)
from discovery_mcp.data.suggestion_templates import SUGGESTION_TEMPLATES
from discovery_mcp.engine.conditions import Facts
from discovery_mcp.engine.questions import (
    applicable_questions,
    domain_progress,
    generate_all_suggestions,
    generate_suggestions,
    next_unanswered_question,
    relevance_map,
    suggestions_summary,
)
from discovery_mcp.models import SuggestionDomain, SuggestionPriority

S = SuggestionDomain


class TestCatalog:
    """Tests for the question and suggestion catalogs."""

    def test_domain_info_covers_every_domain(self) -> None:
        """Test each suggestion domain has metadata with a unique order."""
        assert {info.id for info in DOMAIN_INFO} == set(SuggestionDomain)
        assert len({info.order for info in DOMAIN_INFO}) == len(DOMAIN_INFO)

    def test_question_ids_unique(self) -> None:
        """Test question ids are unique and resolvable."""
        ids = [q.id for q in GUIDED_QUESTIONS]
        assert len(ids) == len(set(ids))
        assert get_question_by_id("est_will").domain is S.ESTATE_PLAN
        assert get_question_by_id("nope") is None

    def test_triggers_reference_known_questions(self) -> None:
        """Test every suggestion trigger names a real question."""
        for template in SUGGESTION_TEMPLATES:
            assert template.triggers
            for trigger in template.triggers:
                assert get_question_by_id(trigger.question_id) is not None


class TestRelevance:
    """Tests for domain relevance."""

    def test_unconditional_domains(self) -> None:
        """Test domains without relevance conditions are always relevant."""
        relevance = relevance_map(Facts())
        assert list(relevance) == [
            S.INVESTMENTS,
            S.SAVINGS,
            S.ANNUITIES,
            S.INCOME_PLAN,
            S.TAXES,
            S.ESTATE_PLAN,
            S.INSURANCE,
            S.EMPLOYEE_BENEFITS,
        ]
        assert relevance[S.INVESTMENTS]
        assert not relevance[S.ANNUITIES]
        assert not relevance[S.INCOME_PLAN]
        assert not relevance[S.EMPLOYEE_BENEFITS]

    def test_context_makes_domains_relevant(self) -> None:
        """Test age, retirement window and federal status open domains."""
        facts = Facts(age=58, years_to_retirement=4, federal_employee=True)
        relevance = relevance_map(facts)
        assert relevance[S.ANNUITIES]
        assert relevance[S.INCOME_PLAN]
        assert relevance[S.EMPLOYEE_BENEFITS]


class TestApplicableQuestions:
    """Tests for question applicability."""

    def test_unconditional_questions(self) -> None:
        """Test questions without conditions always apply."""
        questions = applicable_questions(S.INVESTMENTS, Facts())
        assert len(questions) == 6
        assert questions[0].id == "inv_risk_alignment"

    def test_age_gated_questions(self) -> None:
        """Test annuity questions open by age."""
        ids = [q.id for q in applicable_questions(S.ANNUITIES, Facts(age=48))]
        assert ids == ["ann_myga_evaluation"]
        ids = [q.id for q in applicable_questions(S.ANNUITIES, Facts(age=52))]
        assert ids == ["ann_myga_evaluation", "ann_fia_evaluation", "ann_rila_evaluation"]

    def test_all_conditions_required(self) -> None:
        """Test a multi-condition question needs every condition."""
        ids = {q.id for q in applicable_questions(S.EMPLOYEE_BENEFITS, Facts())}
        assert "ben_401k_match" in ids
        assert "ben_fegli" not in ids
        facts = Facts(federal_employee=True, years_to_retirement=3)
        ids = {q.id for q in applicable_questions(S.EMPLOYEE_BENEFITS, facts)}
        assert {"ben_fegli", "ben_fegli_portability"} <= ids
        assert "ben_survivor_benefits" not in ids

    def test_empty_when_nothing_applies(self) -> None:
        """Test an irrelevant domain can have no applicable questions."""
        assert applicable_questions(S.INCOME_PLAN, Facts(age=30)) == ()

    def test_catalog_order(self) -> None:
        """Test questions keep their catalog order."""
        orders = [q.order for q in get_questions_by_domain(S.ESTATE_PLAN)]
        assert orders == sorted(orders)


class TestProgress:
    """Tests for next question and domain progress."""

    def test_next_unanswered(self) -> None:
        """Test the first unanswered applicable question is returned."""
        facts = Facts(answers={"inv_risk_alignment": "aligned"})
        assert next_unanswered_question(S.INVESTMENTS, facts).id == "inv_diversification"

    def test_all_answered(self) -> None:
        """Test None once every applicable question is answered."""
        answers = {q.id: "x" for q in applicable_questions(S.INVESTMENTS, Facts())}
        assert next_unanswered_question(S.INVESTMENTS, Facts(answers=answers)) is None

    def test_progress_rounding(self) -> None:
        """Test one of six answered rounds to 17%."""
        facts = Facts(answers={"inv_risk_alignment": "aligned"})
        assert domain_progress(S.INVESTMENTS, facts) == {
            "answered": 1,
            "total": 6,
            "percentage": 17,
        }

    def test_progress_without_questions(self) -> None:
        """Test a domain with no applicable questions reports 0%."""
        assert domain_progress(S.INCOME_PLAN, Facts(age=30)) == {
            "answered": 0,
            "total": 0,
            "percentage": 0,
        }

    def test_inapplicable_answers_ignored(self) -> None:
        """Test answers to gated-out questions do not count."""
        facts = Facts(age=30, answers={"ann_fia_evaluation": "yes"})
        assert domain_progress(S.ANNUITIES, facts)["answered"] == 0


class TestSuggestions:
    """Tests for suggestion generation."""

    def test_single_trigger(self) -> None:
        """Test a matching answer fires its template."""
        facts = Facts(answers={"est_will": "none"})
        fired = generate_suggestions(S.ESTATE_PLAN, facts)
        assert [s.template_id for s in fired] == ["sugg_est_create_will"]
        assert fired[0].priority is SuggestionPriority.HIGH
        assert fired[0].source_answer_ids == ("est_will",)

    def test_no_answers_no_suggestions(self) -> None:
        """Test nothing fires without answers."""
        assert all(not s for s in generate_all_suggestions(Facts()).values())

    def test_priority_order(self) -> None:
        """Test HIGH suggestions sort ahead of MEDIUM ones."""
        facts = Facts(
            answers={
                "inv_excess_cash": "too_much",
                "inv_overlap": "significant_overlap",
                "inv_risk_alignment": "too_aggressive",
            }
        )
        fired = generate_suggestions(S.INVESTMENTS, facts)
        assert [s.template_id for s in fired] == [
            "sugg_inv_rebalance_risk",
            "sugg_inv_reduce_overlap",
            "sugg_inv_deploy_cash",
        ]

    def test_other_domains_untouched(self) -> None:
        """Test answers only fire templates in their own domain."""
        suggestions = generate_all_suggestions(Facts(answers={"ben_fegli": "not_compared"}))
        assert [s.template_id for s in suggestions[S.EMPLOYEE_BENEFITS]] == [
            "sugg_ben_compare_fegli"
        ]
        assert suggestions[S.INVESTMENTS] == ()

    def test_summary(self) -> None:
        """Test summary counts by priority and action type."""
        facts = Facts(
            answers={
                "est_will": "none",
                "ben_fegli": "not_compared",
                "inv_excess_cash": "too_much",
            }
        )
        fired = tuple(s for group in generate_all_suggestions(facts).values() for s in group)
        summary = suggestions_summary(fired)
        assert summary["total"] == 3
        assert summary["by_priority"] == {"HIGH": 1, "MEDIUM": 2, "LOW": 0}
        assert summary["by_action_type"] == {
            "IMPLEMENT": 1,
            "CONSULT_PROFESSIONAL": 1,
            "INVESTIGATE": 1,
        }
