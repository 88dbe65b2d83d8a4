"""Guided questions and answer-triggered suggestions.

Both consume the shared condition evaluator: questions gate on all-of
applicability (empty means applicable), domains on any-of relevance (empty
means relevant), and suggestion templates on their answer triggers.
"""

import logging
from typing import Any

from discovery_mcp.data.guided_questions import (
    DOMAIN_INFO,
    get_domain_info,
    get_questions_by_domain,
)
from discovery_mcp.data.suggestion_templates import get_templates_by_domain
from discovery_mcp.engine.conditions import (
    Facts,
    evaluate_all,
    evaluate_any,
    triggers_match,
)
from discovery_mcp.engine.values import round_half_up
from discovery_mcp.models import (
    SUGGESTION_PRIORITY_ORDER,
    GuidedQuestion,
    Suggestion,
    SuggestionDomain,
    SuggestionTemplate,
)

logger = logging.getLogger(__name__)


def is_domain_relevant(domain: SuggestionDomain, facts: Facts) -> bool:
    return evaluate_any(get_domain_info(domain).relevance_conditions, facts, when_empty=True)


def relevance_map(facts: Facts) -> dict[SuggestionDomain, bool]:
    """Relevance of every domain, in display order."""
    ordered = sorted(DOMAIN_INFO, key=lambda info: info.order)
    return {info.id: is_domain_relevant(info.id, facts) for info in ordered}


def applicable_questions(domain: SuggestionDomain, facts: Facts) -> tuple[GuidedQuestion, ...]:
    return tuple(
        q
        for q in get_questions_by_domain(domain)
        if evaluate_all(q.conditions, facts, when_empty=True)
    )


def next_unanswered_question(domain: SuggestionDomain, facts: Facts) -> GuidedQuestion | None:
    return next(
        (q for q in applicable_questions(domain, facts) if q.id not in facts.answers),
        None,
    )


def domain_progress(domain: SuggestionDomain, facts: Facts) -> dict[str, int]:
    """Answered vs applicable question counts for one domain."""
    questions = applicable_questions(domain, facts)
    answered = sum(1 for q in questions if q.id in facts.answers)
    total = len(questions)
    percentage = round_half_up(answered / total * 100) if total else 0
    return {"answered": answered, "total": total, "percentage": percentage}


def _fires(template: SuggestionTemplate, facts: Facts) -> bool:
    if not triggers_match(template.triggers, facts.answers):
        return False
    return evaluate_all(template.profile_conditions, facts, when_empty=True)


def _to_suggestion(template: SuggestionTemplate, facts: Facts) -> Suggestion:
    trigger_ids = {t.question_id for t in template.triggers}
    return Suggestion(
        template_id=template.id,
        domain=template.domain,
        title=template.title,
        description=template.description,
        rationale=template.rationale,
        priority=template.priority,
        action_type=template.action_type,
        source_answer_ids=tuple(qid for qid in facts.answers if qid in trigger_ids),
    )


def generate_suggestions(domain: SuggestionDomain, facts: Facts) -> tuple[Suggestion, ...]:
    """Fired suggestions for one domain, HIGH first. Ties keep catalog order."""
    fired = [_to_suggestion(t, facts) for t in get_templates_by_domain(domain) if _fires(t, facts)]
    fired.sort(key=lambda s: SUGGESTION_PRIORITY_ORDER[s.priority])
    logger.debug(f"{domain.value}: {len(fired)} suggestions fired")
    return tuple(fired)


def generate_all_suggestions(facts: Facts) -> dict[SuggestionDomain, tuple[Suggestion, ...]]:
    return {domain: generate_suggestions(domain, facts) for domain in SuggestionDomain}


def suggestions_summary(suggestions: tuple[Suggestion, ...]) -> dict[str, Any]:
    """Counts by priority and by action type."""
    by_priority: dict[str, int] = {p.value: 0 for p in SUGGESTION_PRIORITY_ORDER}
    by_action: dict[str, int] = {}
    for suggestion in suggestions:
        by_priority[suggestion.priority.value] += 1
        action = suggestion.action_type.value
        by_action[action] = by_action.get(action, 0) + 1
    return {"total": len(suggestions), "by_priority": by_priority, "by_action_type": by_action}
