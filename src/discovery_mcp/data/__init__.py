"""Static catalogs and result caching."""

from discovery_mcp.data.action_templates import ACTION_TEMPLATES, ActionTemplate, get_template_by_id
from discovery_mcp.data.cache import InsightsCache, insights_cache, insights_uri
from discovery_mcp.data.guided_questions import (
    DOMAIN_INFO,
    GUIDED_QUESTIONS,
    get_domain_info,
    get_question_by_id,
    get_questions_by_domain,
)
from discovery_mcp.data.suggestion_templates import SUGGESTION_TEMPLATES, get_templates_by_domain
from discovery_mcp.data.value_cards import (
    CATEGORY_DISPLAY_NAMES,
    VALUE_CARDS,
    get_card_by_id,
    get_cards_by_category,
    get_cards_by_ids,
)

__all__ = [
    # Cache
    "InsightsCache",
    "insights_cache",
    "insights_uri",
    # Value cards
    "CATEGORY_DISPLAY_NAMES",
    "VALUE_CARDS",
    "get_card_by_id",
    "get_cards_by_category",
    "get_cards_by_ids",
    # Action templates
    "ACTION_TEMPLATES",
    "ActionTemplate",
    "get_template_by_id",
    # Guided questions
    "DOMAIN_INFO",
    "GUIDED_QUESTIONS",
    "SUGGESTION_TEMPLATES",
    "get_domain_info",
    "get_question_by_id",
    "get_questions_by_domain",
    "get_templates_by_domain",
]
