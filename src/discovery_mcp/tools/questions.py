"""Guided questions and suggestions tools."""

from time import perf_counter
from typing import Any

from discovery_mcp.data.guided_questions import get_domain_info
from discovery_mcp.data.labels import SUGGESTION_DOMAIN_LABELS
from discovery_mcp.engine.conditions import build_facts
from discovery_mcp.engine.questions import (
    applicable_questions,
    domain_progress,
    generate_suggestions,
    next_unanswered_question,
    relevance_map,
    suggestions_summary,
)
from discovery_mcp.models import Suggestion, SuggestionDomain
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.validators import parse_snapshot


def parse_domain(domain: str | None) -> list[SuggestionDomain] | None:
    """
    Resolve an optional domain filter.

    Returns:
        The selected domain as a one-item list, every domain when no filter
        is given, or None for an unknown tag
    """
    if not domain:
        return list(SuggestionDomain)
    try:
        return [SuggestionDomain(domain.strip().upper())]
    except ValueError:
        return None


def _unknown_domain(domain: str) -> dict[str, Any]:
    return build_error_response(
        error_type="invalid_parameters",
        message=f"Unknown suggestion domain: {domain}",
        field="domain",
    )


async def get_guided_questions(
    snapshot: dict[str, Any],
    domain: str | None = None,
) -> dict[str, Any]:
    """
    Applicable guided questions per suggestion domain.

    Args:
        snapshot: Discovery snapshot JSON object (answers keyed by question id)
        domain: Optional suggestion domain tag (e.g., TAXES)

    Returns:
        Dict with per-domain relevance, questions, next question, progress and meta
    """
    start_time = perf_counter()

    try:
        parsed = parse_snapshot(snapshot)
    except ValueError as e:
        return build_error_response(
            error_type="invalid_parameters",
            message=str(e),
            field="snapshot",
        )

    selected = parse_domain(domain)
    if selected is None:
        return _unknown_domain(domain or "")

    facts = build_facts(parsed)
    relevance = relevance_map(facts)

    domains: list[dict[str, Any]] = []
    for d in (d for d in relevance if d in selected):
        next_question = next_unanswered_question(d, facts)
        domains.append(
            {
                "domain": d.value,
                "label": SUGGESTION_DOMAIN_LABELS[d],
                "description": get_domain_info(d).description,
                "relevant": relevance[d],
                "questions": [q.to_dict() for q in applicable_questions(d, facts)],
                "next_question": next_question.to_dict() if next_question else None,
                "progress": domain_progress(d, facts),
            }
        )

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "domains": domains,
        "meta": build_meta("get_guided_questions", duration_ms),
    }


async def get_suggestions(
    snapshot: dict[str, Any],
    domain: str | None = None,
) -> dict[str, Any]:
    """
    Suggestions triggered by guided-question answers.

    Args:
        snapshot: Discovery snapshot JSON object (answers keyed by question id)
        domain: Optional suggestion domain tag (e.g., TAXES)

    Returns:
        Dict with suggestions grouped by domain, overall summary and meta
    """
    start_time = perf_counter()

    try:
        parsed = parse_snapshot(snapshot)
    except ValueError as e:
        return build_error_response(
            error_type="invalid_parameters",
            message=str(e),
            field="snapshot",
        )

    selected = parse_domain(domain)
    if selected is None:
        return _unknown_domain(domain or "")

    facts = build_facts(parsed)

    by_domain: dict[str, list[dict[str, Any]]] = {}
    fired: list[Suggestion] = []
    for d in selected:
        suggestions = generate_suggestions(d, facts)
        by_domain[d.value] = [s.to_dict() for s in suggestions]
        fired.extend(suggestions)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "suggestions": by_domain,
        "summary": suggestions_summary(tuple(fired)),
        "meta": build_meta("get_suggestions", duration_ms),
    }
