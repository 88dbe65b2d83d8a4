"""Static value-card catalog used by values discovery.

Categories are internal tags: they drive aggregation and are never shown to
the user as card labels.
"""

from discovery_mcp.models import ValueCard, ValueCategory

VALUE_CARDS: tuple[ValueCard, ...] = (
    ValueCard(
        "security_financial_security",
        "Financial security",
        "Having enough resources to handle life without financial stress.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_emergency_preparedness",
        "Emergency preparedness",
        "Having reserves and plans to handle unexpected expenses without panic.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_stable_income",
        "Stable income",
        "Having predictable, reliable income you can count on.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_predictable_expenses",
        "Predictable expenses",
        "Knowing what your costs will be month to month.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_insurance_protection",
        "Insurance protection",
        "Having proper coverage to protect against major financial setbacks.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_risk_management",
        "Risk management",
        "Having strategies to minimize financial risks and protect what you have.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_debt_reduction",
        "Debt reduction",
        "Eliminating debts to reduce financial obligations and stress.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_guaranteed_retirement_income",
        "Guaranteed income in retirement",
        "Having income you cannot outlive, no matter how long you live.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_safe_investments",
        "Safe investments",
        "Keeping money in lower-risk options that protect principal.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_protection_for_dependents",
        "Protection for dependents",
        "Ensuring those who depend on you are financially protected.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_housing_stability",
        "Housing stability",
        "Having a secure, stable place to live without financial strain.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "security_long_term_care_readiness",
        "Long-term care readiness",
        "Being prepared for potential long-term care needs later in life.",
        ValueCategory.SECURITY,
    ),
    ValueCard(
        "freedom_financial_independence",
        "Financial independence",
        "Having enough resources that work is optional, not required.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_work_optional",
        "Work-optional lifestyle",
        "Having the choice to work because you want to, not because you have to.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_flexible_schedule",
        "Flexible schedule",
        "Having control over when and how you spend your time.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_ability_to_travel",
        "Ability to travel",
        "Having the resources and flexibility to travel when you want.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_location_independence",
        "Location independence",
        "Having the freedom to live or work from anywhere.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_early_retirement_option",
        "Early retirement option",
        "Having the ability to retire before traditional retirement age.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_career_change_choice",
        "Choice in career changes",
        "Having the financial flexibility to change careers or pursue new paths.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_saying_no",
        "Saying no to unwanted work",
        "Having the ability to decline work that does not align with your values.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_time_autonomy",
        "Time autonomy",
        "Having complete control over how you allocate your time.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "freedom_lifestyle_flexibility",
        "Lifestyle flexibility",
        "Having options to adjust your lifestyle based on changing preferences.",
        ValueCategory.FREEDOM,
    ),
    ValueCard(
        "family_providing_for_children",
        "Providing for children",
        "Ensuring your children have what they need to thrive.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_supporting_spouse",
        "Supporting spouse or partner",
        "Ensuring your spouse or partner is financially secure.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_college_funding",
        "College funding",
        "Helping children or grandchildren with education costs.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_caring_for_parents",
        "Caring for aging parents",
        "Being able to support aging parents financially or with time.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_traditions_experiences",
        "Family traditions and experiences",
        "Creating and maintaining meaningful family experiences together.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_inheritance_planning",
        "Inheritance planning",
        "Leaving assets or wealth to the next generation.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_generational_stability",
        "Generational stability",
        "Breaking cycles and building lasting family financial health.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_vacations",
        "Family vacations",
        "Having resources for meaningful family travel and time together.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_keeping_home",
        "Keeping the family home",
        "Maintaining a family residence that holds meaning and memories.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "family_present_for_milestones",
        "Being present for milestones",
        "Having time and resources to be there for important family moments.",
        ValueCategory.FAMILY,
    ),
    ValueCard(
        "growth_career_advancement",
        "Career advancement",
        "Continuing to grow and progress in your professional life.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_business_ownership",
        "Business ownership",
        "Owning or building a business of your own.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_skill_development",
        "Skill development",
        "Continuously learning new skills and capabilities.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_education_training",
        "Education and training",
        "Pursuing formal education or professional development.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_personal_development",
        "Personal development",
        "Investing in becoming a better version of yourself.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_new_ventures",
        "Trying new ventures",
        "Having resources to pursue new opportunities and ideas.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_building_wealth",
        "Building wealth",
        "Growing your net worth and financial resources over time.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_expanding_opportunities",
        "Expanding opportunities",
        "Creating more options and possibilities for yourself.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_reinvention",
        "Reinvention later in life",
        "Having the ability to reinvent yourself in later years.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "growth_lifelong_learning",
        "Lifelong learning",
        "Continuing to learn and grow throughout your entire life.",
        ValueCategory.GROWTH,
    ),
    ValueCard(
        "contribution_charitable_giving",
        "Charitable giving",
        "Supporting causes and organizations you care about.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_local_community",
        "Supporting local community",
        "Investing time or resources in your local community.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_faith_based_giving",
        "Faith-based giving",
        "Supporting your faith community through financial contributions.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_volunteering",
        "Volunteering",
        "Having time and resources to volunteer for causes you believe in.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_funding_causes",
        "Funding causes they care about",
        "Financially supporting causes and movements that matter to you.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_helping_family",
        "Helping family financially",
        "Being able to help extended family members when needed.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_mentoring",
        "Mentoring others",
        "Investing time in helping others grow and develop.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_disaster_support",
        "Disaster or crisis support",
        "Being able to help during emergencies and crises.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "contribution_community_leadership",
        "Community leadership",
        "Taking leadership roles in community organizations.",
        ValueCategory.CONTRIBUTION,
    ),
    ValueCard(
        "purpose_meaningful_work",
        "Meaningful work",
        "Having work that provides purpose and fulfillment.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_legacy_building",
        "Legacy building",
        "Creating something that outlasts you and impacts others.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_positive_impact",
        "Leaving a positive impact",
        "Making the world better through your actions and resources.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_teaching_values",
        "Teaching values to children",
        "Passing on important values and lessons to the next generation.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_living_beliefs",
        "Living according to beliefs",
        "Aligning your financial life with your core beliefs and values.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_stewardship",
        "Stewardship of resources",
        "Managing resources responsibly as a caretaker, not just an owner.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_faith_driven",
        "Faith-driven decisions",
        "Making financial decisions guided by faith and spiritual principles.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_role_model",
        "Being a good role model",
        "Setting an example for others through your actions and choices.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "purpose_mission_vision",
        "Long-term mission or vision",
        "Working toward a larger purpose or life mission.",
        ValueCategory.PURPOSE,
    ),
    ValueCard(
        "control_budgeting_confidence",
        "Budgeting confidence",
        "Feeling confident in your ability to manage a budget.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_clear_plan",
        "Clear financial plan",
        "Having a documented, clear plan for your financial future.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_understanding_investments",
        "Understanding investments",
        "Knowing and understanding where your money is invested.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_knowing_money_goes",
        "Knowing where money goes",
        "Having visibility into your spending and cash flow.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_tax_management",
        "Managing tax exposure",
        "Being proactive about tax planning and optimization.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_avoiding_surprises",
        "Avoiding surprises",
        "Minimizing unexpected financial events and outcomes.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_organized_finances",
        "Organized finances",
        "Having all financial accounts and documents well-organized.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_decision_confidence",
        "Decision-making confidence",
        "Feeling confident when making financial decisions.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_adapting_plans",
        "Ability to adapt plans",
        "Having plans that can flex when circumstances change.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "control_contingency_planning",
        "Planning for contingencies",
        "Having backup plans for various scenarios.",
        ValueCategory.CONTROL,
    ),
    ValueCard(
        "health_access_healthcare",
        "Access to healthcare",
        "Having reliable access to quality medical care.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_expense_protection",
        "Medical expense protection",
        "Being protected against major medical costs.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_preventive_care",
        "Preventive care",
        "Having resources for wellness and prevention, not just treatment.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_mental_wellbeing",
        "Mental well-being",
        "Supporting mental health and emotional wellness.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_stress_reduction",
        "Stress reduction",
        "Structuring finances to reduce stress and anxiety.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_lifestyle_support",
        "Healthy lifestyle support",
        "Having resources to support a healthy lifestyle (gym, nutrition, etc.).",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_rest_recovery",
        "Ability to rest and recover",
        "Having time and resources to rest when needed.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_major_illness_coverage",
        "Coverage for major illness",
        "Being financially protected if a serious illness occurs.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "health_long_term_wellness",
        "Long-term wellness planning",
        "Planning for health and wellness throughout life.",
        ValueCategory.HEALTH,
    ),
    ValueCard(
        "qol_comfortable_lifestyle",
        "Comfortable lifestyle",
        "Living comfortably without constant financial worry.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_hobbies",
        "Enjoyment of hobbies",
        "Having resources for hobbies and personal interests.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_travel_experiences",
        "Travel experiences",
        "Having meaningful travel experiences throughout life.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_time_with_loved_ones",
        "Time with loved ones",
        "Having time to spend with people who matter most.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_work_life_balance",
        "Work-life balance",
        "Maintaining balance between work and personal life.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_comfortable_housing",
        "Comfortable housing",
        "Living in a comfortable, pleasant home environment.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_dining_entertainment",
        "Dining and entertainment",
        "Enjoying restaurants, shows, and entertainment experiences.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_leisure_activities",
        "Leisure activities",
        "Having time and resources for relaxation and leisure.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_peaceful_retirement",
        "Peaceful retirement",
        "Having a calm, low-stress retirement experience.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
    ValueCard(
        "qol_daily_enjoyment",
        "Daily enjoyment",
        "Finding joy and satisfaction in everyday life.",
        ValueCategory.QUALITY_OF_LIFE,
    ),
)

_CARDS_BY_ID: dict[str, ValueCard] = {card.id: card for card in VALUE_CARDS}

CATEGORY_DISPLAY_NAMES: dict[ValueCategory, str] = {
    ValueCategory.SECURITY: "Security",
    ValueCategory.FREEDOM: "Freedom",
    ValueCategory.FAMILY: "Family",
    ValueCategory.GROWTH: "Growth",
    ValueCategory.CONTRIBUTION: "Contribution",
    ValueCategory.PURPOSE: "Purpose",
    ValueCategory.CONTROL: "Control",
    ValueCategory.HEALTH: "Health",
    ValueCategory.QUALITY_OF_LIFE: "Quality of Life",
}


def get_card_by_id(card_id: str) -> ValueCard | None:
    """Look up a card, returning None for unknown ids."""
    return _CARDS_BY_ID.get(card_id)


def get_cards_by_category(category: ValueCategory) -> list[ValueCard]:
    return [card for card in VALUE_CARDS if card.category is category]


def get_cards_by_ids(card_ids: list[str] | tuple[str, ...]) -> list[ValueCard]:
    """Resolve ids in order, skipping unknown ones."""
    return [card for card_id in card_ids if (card := _CARDS_BY_ID.get(card_id)) is not None]
