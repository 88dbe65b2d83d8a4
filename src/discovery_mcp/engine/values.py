"""Category aggregation over the values-discovery selection stages.

Counts categories per stage, resolves the dominant and secondary category,
flags known value tensions and turns forced-choice tradeoff answers into
0-100 indices. Everything here is recomputed whole from the snapshot.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any, assert_never

from discovery_mcp.data.value_cards import CATEGORY_DISPLAY_NAMES, VALUE_CARDS, get_card_by_id
from discovery_mcp.models import (
    CategoryCount,
    DerivedInsights,
    Pile,
    TradeoffChoice,
    TradeoffResponse,
    ValueCategory,
    ValuesDiscovery,
)

logger = logging.getLogger(__name__)

# Pairs of categories that pull a plan in opposite directions
CONFLICT_PAIRS: tuple[tuple[ValueCategory, ValueCategory], ...] = (
    (ValueCategory.SECURITY, ValueCategory.FREEDOM),
    (ValueCategory.SECURITY, ValueCategory.GROWTH),
    (ValueCategory.CONTROL, ValueCategory.FREEDOM),
    (ValueCategory.FAMILY, ValueCategory.FREEDOM),
    (ValueCategory.QUALITY_OF_LIFE, ValueCategory.SECURITY),
)

# Named tradeoff axes reported in DerivedInsights
TRADEOFF_AXES: dict[str, tuple[ValueCategory, ValueCategory]] = {
    "security_vs_growth": (ValueCategory.SECURITY, ValueCategory.GROWTH),
    "control_vs_freedom": (ValueCategory.CONTROL, ValueCategory.FREEDOM),
}

NEUTRAL_POINTS = 50
MIN_IMPORTANT_CARDS = 5
SORT_COMPLETE_RATIO = 0.9


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def count_categories(card_ids: Iterable[str]) -> CategoryCount:
    """Zero-filled count over all categories. Unknown card ids are skipped."""
    counts: CategoryCount = dict.fromkeys(ValueCategory, 0)
    for card_id in card_ids:
        card = get_card_by_id(card_id)
        if card is None:
            logger.debug(f"Skipping unknown card id: {card_id}")
            continue
        counts[card.category] += 1
    return counts


def find_dominant_categories(
    top5_counts: CategoryCount,
    non_negotiable_counts: CategoryCount,
    top10_counts: CategoryCount,
) -> tuple[ValueCategory | None, ValueCategory | None]:
    """
    Resolve dominant and secondary categories from top-5 counts.

    Ties break on non-negotiable count, then top-10 count, then the
    alphabetical order of the category tag, so the ordering is total.

    Returns:
        (dominant, secondary); either is None when no category has a count
    """

    def rank_key(category: ValueCategory) -> tuple[int, int, int, str]:
        return (
            -top5_counts.get(category, 0),
            -non_negotiable_counts.get(category, 0),
            -top10_counts.get(category, 0),
            category.value,
        )

    candidates = sorted(
        (c for c in ValueCategory if top5_counts.get(c, 0) > 0),
        key=rank_key,
    )
    dominant = candidates[0] if candidates else None
    secondary = candidates[1] if len(candidates) > 1 else None
    return dominant, secondary


def _categories_of(card_ids: Iterable[str]) -> set[ValueCategory]:
    return {card.category for card_id in card_ids if (card := get_card_by_id(card_id))}


def detect_conflict_flags(
    top5_ids: Sequence[str],
    non_negotiable_ids: Sequence[str],
    dominant: ValueCategory | None,
) -> tuple[str, ...]:
    """
    Flag tensions as ``A_vs_B`` tags.

    A pair fires when both sides are in the top 5, or when the dominant
    category is one side and the other side is a non-negotiable.
    """
    top5 = _categories_of(top5_ids)
    non_negotiable = _categories_of(non_negotiable_ids)

    flags: list[str] = []
    for a, b in CONFLICT_PAIRS:
        flag = f"{a.value}_vs_{b.value}"
        both_in_top5 = a in top5 and b in top5
        dominant_clash = (dominant is a and b in non_negotiable) or (
            dominant is b and a in non_negotiable
        )
        if (both_in_top5 or dominant_clash) and flag not in flags:
            flags.append(flag)
    return tuple(flags)


def _response_points(response: TradeoffResponse) -> int:
    """Points toward B on a 0-100 scale for one response in stored order."""
    match response.choice:
        case TradeoffChoice.NEUTRAL:
            return NEUTRAL_POINTS
        case TradeoffChoice.A:
            return {1: 0, 2: 25}.get(response.strength, NEUTRAL_POINTS)
        case TradeoffChoice.B:
            return {5: 100, 4: 75}.get(response.strength, NEUTRAL_POINTS)
        case _ as unreachable:
            assert_never(unreachable)


def compute_tradeoff_index(
    responses: Sequence[TradeoffResponse],
    category_a: ValueCategory,
    category_b: ValueCategory,
) -> int | None:
    """
    Mean preference between two categories, 0 (all A) to 100 (all B).

    Responses stored as (B, A) are mirrored. Returns None when no response
    covers the pair, which is distinct from a balanced 50.
    """
    points: list[int] = []
    for response in responses:
        pair = (response.category_a, response.category_b)
        if pair == (category_a, category_b):
            points.append(_response_points(response))
        elif pair == (category_b, category_a):
            points.append(100 - _response_points(response))

    if not points:
        return None
    return round_half_up(sum(points) / len(points))


def compute_derived_insights(values: ValuesDiscovery) -> DerivedInsights:
    """Recompute every derived values field from one ValuesDiscovery."""
    top10_counts = count_categories(values.top10)
    top5_counts = count_categories(values.top5)
    non_negotiable_counts = count_categories(values.non_negotiables)

    dominant, secondary = find_dominant_categories(
        top5_counts, non_negotiable_counts, top10_counts
    )

    return DerivedInsights(
        important_counts=count_categories(values.important),
        top10_counts=top10_counts,
        top5_counts=top5_counts,
        non_negotiable_counts=non_negotiable_counts,
        dominant_category=dominant,
        secondary_category=secondary,
        conflict_flags=detect_conflict_flags(values.top5, values.non_negotiables, dominant),
        tradeoff_indices={
            axis: compute_tradeoff_index(values.tradeoff_responses, a, b)
            for axis, (a, b) in TRADEOFF_AXES.items()
        },
    )


def has_enough_important(values: ValuesDiscovery) -> bool:
    """At least five cards sorted into the IMPORTANT pile."""
    important = sum(1 for pile in values.piles.values() if pile is Pile.IMPORTANT)
    return important >= MIN_IMPORTANT_CARDS


def is_sort_complete(values: ValuesDiscovery) -> bool:
    """At least 90% of the catalog has been placed in a pile."""
    sorted_known = sum(1 for card_id in values.piles if get_card_by_id(card_id) is not None)
    return sorted_known >= len(VALUE_CARDS) * SORT_COMPLETE_RATIO


def category_summary(counts: CategoryCount) -> list[dict[str, Any]]:
    """Per-category count and share, largest first (ties keep category order)."""
    total = sum(counts.values())
    rows = [
        {
            "category": category.value,
            "display_name": CATEGORY_DISPLAY_NAMES[category],
            "count": counts.get(category, 0),
            "percentage": round_half_up(counts.get(category, 0) / total * 100) if total else 0,
        }
        for category in ValueCategory
    ]
    return sorted(rows, key=lambda row: -row["count"])
