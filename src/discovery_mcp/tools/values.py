"""Values summary and value card catalog tools."""

from time import perf_counter
from typing import Any

from discovery_mcp.data.value_cards import (
    CATEGORY_DISPLAY_NAMES,
    VALUE_CARDS,
    get_cards_by_category,
)
from discovery_mcp.engine.values import (
    category_summary,
    compute_derived_insights,
    has_enough_important,
    is_sort_complete,
)
from discovery_mcp.models import ValueCategory
from discovery_mcp.utils.provenance import build_error_response, build_meta
from discovery_mcp.utils.validators import parse_snapshot


async def get_values_summary(snapshot: dict[str, Any]) -> dict[str, Any]:
    """
    Summarize the values-discovery section of a snapshot.

    Args:
        snapshot: Discovery snapshot JSON object

    Returns:
        Dict with derived insights, per-category summaries, sort progress and meta
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

    derived = compute_derived_insights(parsed.values)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "derived": derived.to_dict(),
        "top5_summary": category_summary(derived.top5_counts),
        "important_summary": category_summary(derived.important_counts),
        "has_enough_important": has_enough_important(parsed.values),
        "is_sort_complete": is_sort_complete(parsed.values),
        "meta": build_meta("get_values_summary", duration_ms),
    }


async def list_value_cards(category: str | None = None) -> dict[str, Any]:
    """
    List the static value card catalog.

    Args:
        category: Optional category tag (e.g., SECURITY) to filter by

    Returns:
        Dict with cards, category display names and meta
    """
    start_time = perf_counter()

    if category:
        try:
            selected = ValueCategory(category.strip().upper())
        except ValueError:
            return build_error_response(
                error_type="invalid_parameters",
                message=f"Unknown value category: {category}",
                field="category",
            )
        cards = get_cards_by_category(selected)
    else:
        cards = list(VALUE_CARDS)

    duration_ms = (perf_counter() - start_time) * 1000
    return {
        "cards": [card.to_dict() for card in cards],
        "count": len(cards),
        "categories": [
            {"category": c.value, "display_name": CATEGORY_DISPLAY_NAMES[c]}
            for c in ValueCategory
        ],
        "meta": build_meta("list_value_cards", duration_ms),
    }
