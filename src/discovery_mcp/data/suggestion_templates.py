"""Answer-triggered suggestion templates.

A template fires when every trigger matches the saved answers and any
profile conditions hold. A template without triggers never fires.
"""

from discovery_mcp.models import (
    Operator,
    SuggestionActionType,
    SuggestionDomain,
    SuggestionPriority,
    SuggestionTemplate,
    Trigger,
)


def answer_is(question_id: str, value: str) -> Trigger:
    return Trigger(question_id, Operator.EQUALS, value)


SUGGESTION_TEMPLATES: tuple[SuggestionTemplate, ...] = (
    SuggestionTemplate(
        id="sugg_inv_rebalance_risk",
        domain=SuggestionDomain.INVESTMENTS,
        title="Review portfolio risk alignment",
        description=(
            "Your portfolio may not be aligned with your stated risk tolerance. Consider "
            "reviewing your asset allocation to ensure it matches your comfort level with "
            "market volatility."
        ),
        rationale=(
            "Based on your analysis, your current allocation doesn't match your risk "
            "tolerance. This could expose you to more volatility than you're comfortable "
            "with, or limit your growth potential."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("inv_risk_alignment", "too_aggressive"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_too_conservative",
        domain=SuggestionDomain.INVESTMENTS,
        title="Evaluate if portfolio is too conservative",
        description=(
            "Your portfolio may be more conservative than needed for your goals. Consider "
            "whether you could benefit from a more growth-oriented allocation."
        ),
        rationale=(
            "Being too conservative can limit long-term growth and may not keep pace with "
            "inflation, potentially impacting your retirement lifestyle."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("inv_risk_alignment", "too_conservative"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_diversify",
        domain=SuggestionDomain.INVESTMENTS,
        title="Improve portfolio diversification",
        description=(
            "Consider broadening your portfolio across more asset classes to reduce "
            "concentration risk and improve risk-adjusted returns."
        ),
        rationale=(
            "Concentrated portfolios are more vulnerable to sector-specific downturns. "
            "Diversification can reduce volatility while maintaining growth potential."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("inv_diversification", "concentrated"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_reduce_overlap",
        domain=SuggestionDomain.INVESTMENTS,
        title="Consolidate overlapping funds",
        description=(
            "Consider consolidating funds that hold similar underlying investments to "
            "reduce unintended concentration and simplify your portfolio."
        ),
        rationale=(
            "Fund overlap can create hidden concentration risk. Consolidating similar "
            "funds reduces complexity and may lower costs."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("inv_overlap", "significant_overlap"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_improve_funds",
        domain=SuggestionDomain.INVESTMENTS,
        title="Evaluate fund replacements",
        description=(
            "Some of your funds may have better alternatives. Research low-cost index "
            "funds or ETFs that could improve your portfolio efficiency."
        ),
        rationale=(
            "Suboptimal funds can drag on returns over time. Replacing them with better "
            "options can improve long-term outcomes."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("inv_fund_quality", "suboptimal"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_reduce_costs",
        domain=SuggestionDomain.INVESTMENTS,
        title="Reduce investment costs",
        description=(
            "Your investment expenses are higher than necessary. Consider switching to "
            "low-cost index funds which can save thousands over time."
        ),
        rationale=(
            "High expense ratios compound against you. Even a 0.5% reduction in fees can "
            "mean tens of thousands more in retirement."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("inv_cost_efficiency", "high"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_deploy_cash",
        domain=SuggestionDomain.INVESTMENTS,
        title="Deploy excess cash",
        description=(
            "You may have more cash than needed sitting idle. Consider investing excess "
            "funds beyond your emergency reserve to maintain purchasing power."
        ),
        rationale=(
            "Cash above emergency fund levels loses purchasing power to inflation. "
            "Investing excess cash helps your money work for you."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("inv_excess_cash", "too_much"),),
    ),
    SuggestionTemplate(
        id="sugg_inv_build_emergency",
        domain=SuggestionDomain.INVESTMENTS,
        title="Build emergency fund",
        description=(
            "Your cash reserves may be insufficient for emergencies. Prioritize building "
            "a 3-6 month expense buffer before investing additional funds."
        ),
        rationale=(
            "Without adequate emergency reserves, you may be forced to sell investments "
            "at inopportune times or take on debt during financial stress."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("inv_excess_cash", "too_little"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_calculate_target",
        domain=SuggestionDomain.SAVINGS,
        title="Calculate your retirement savings target",
        description=(
            "Determine a specific savings goal based on your expected expenses, income "
            "sources, and retirement timeline. This number will guide your savings "
            "decisions."
        ),
        rationale=(
            "Without a clear target, it's difficult to know if you're saving enough. A "
            "specific goal helps you track progress and make adjustments."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("sav_retirement_target", "no_target"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_estimate_expenses",
        domain=SuggestionDomain.SAVINGS,
        title="Create a retirement expense budget",
        description=(
            "Develop a detailed estimate of your retirement expenses. This is "
            "foundational to all other retirement planning decisions."
        ),
        rationale=(
            "Retirement expense estimates drive savings targets, withdrawal strategies, "
            "and income planning. Without this, other planning is guesswork."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("sav_expense_estimate", "unknown"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_increase_guaranteed",
        domain=SuggestionDomain.SAVINGS,
        title="Evaluate increasing guaranteed income",
        description=(
            "Your essential expenses may not be fully covered by guaranteed income. "
            "Consider strategies to increase guaranteed income sources."
        ),
        rationale=(
            "Covering essential expenses with guaranteed income (Social Security, "
            "pensions, annuities) provides security regardless of market conditions."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("sav_guaranteed_coverage", "minimal_coverage"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_catch_up",
        domain=SuggestionDomain.SAVINGS,
        title="Develop a catch-up savings plan",
        description=(
            "You're behind on retirement savings. Create a plan to increase savings rate, "
            "maximize catch-up contributions, or adjust retirement timeline."
        ),
        rationale=(
            "Being behind on savings requires action now. Options include saving more, "
            "working longer, or adjusting retirement expectations."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("sav_current_savings", "significantly_behind"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_increase_rate",
        domain=SuggestionDomain.SAVINGS,
        title="Increase your savings rate",
        description=(
            "Your current savings rate is below the recommended 15-20% of income. Look "
            "for ways to increase contributions to retirement accounts."
        ),
        rationale=(
            "Saving less than 15% may leave you short in retirement. Even small increases "
            "now compound significantly over time."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("sav_savings_rate", "minimal"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_tax_diversify",
        domain=SuggestionDomain.SAVINGS,
        title="Diversify account types for tax flexibility",
        description=(
            "Consider adding Roth or taxable accounts to give yourself more tax "
            "flexibility in retirement."
        ),
        rationale=(
            "Having money in tax-deferred, tax-free, and taxable accounts provides "
            "options to manage taxes efficiently in retirement."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("sav_account_types", "mostly_deferred"),),
    ),
    SuggestionTemplate(
        id="sugg_sav_build_emergency",
        domain=SuggestionDomain.SAVINGS,
        title="Prioritize building emergency fund",
        description=(
            "Your emergency fund is insufficient. Focus on building 3-6 months of "
            "expenses before maximizing retirement contributions."
        ),
        rationale=(
            "Without adequate emergency savings, unexpected expenses can derail your "
            "financial plan and force poor decisions."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("sav_emergency_fund", "insufficient"),),
    ),
    SuggestionTemplate(
        id="sugg_ann_research_myga",
        domain=SuggestionDomain.ANNUITIES,
        title="Research MYGA opportunities",
        description=(
            "Multi-Year Guaranteed Annuities may offer attractive rates for your safe "
            "money. Compare current MYGA rates to CDs and Treasury yields."
        ),
        rationale=(
            "MYGAs can offer higher rates than bank CDs with tax-deferred growth. They're "
            "worth considering for money you won't need for 3-10 years."
        ),
        priority=SuggestionPriority.LOW,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ann_myga_evaluation", "need_research"),),
    ),
    SuggestionTemplate(
        id="sugg_ann_evaluate_fia",
        domain=SuggestionDomain.ANNUITIES,
        title="Get professional FIA evaluation",
        description=(
            "Fixed Indexed Annuities are complex products. Consult with a fee-only "
            "advisor to determine if an FIA fits your situation."
        ),
        rationale=(
            "FIAs have many moving parts (caps, participation rates, surrender periods). "
            "Professional guidance helps ensure you understand what you're buying."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("ann_fia_evaluation", "need_research"),),
    ),
    SuggestionTemplate(
        id="sugg_ann_analyze_income_gap",
        domain=SuggestionDomain.ANNUITIES,
        title="Analyze your income gap",
        description=(
            "Calculate the gap between your guaranteed income and essential expenses. "
            "This will help determine if an income annuity makes sense."
        ),
        rationale=(
            "Understanding your income gap is the first step in deciding whether "
            "additional guaranteed income would benefit your retirement security."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ann_income_annuity", "need_analysis"),),
    ),
    SuggestionTemplate(
        id="sugg_ann_consider_income",
        domain=SuggestionDomain.ANNUITIES,
        title="Evaluate income annuity options",
        description=(
            "An income annuity could help cover your essential expenses with guaranteed "
            "lifetime income. Get quotes and compare options."
        ),
        rationale=(
            "Converting some savings to guaranteed income can provide peace of mind and "
            "reduce sequence-of-returns risk in retirement."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("ann_income_annuity", "would_help"),),
    ),
    SuggestionTemplate(
        id="sugg_inc_learn_buckets",
        domain=SuggestionDomain.INCOME_PLAN,
        title="Learn about bucket strategy",
        description=(
            "Research how a bucket strategy could help you manage retirement income while "
            "staying calm during market volatility."
        ),
        rationale=(
            "A bucket approach separates short-term income needs from long-term growth, "
            "providing peace of mind during market downturns."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("inc_bucket_strategy", "need_learn"),),
    ),
    SuggestionTemplate(
        id="sugg_inc_implement_buckets",
        domain=SuggestionDomain.INCOME_PLAN,
        title="Implement a bucket strategy",
        description=(
            "Set up your portfolio with time-segmented buckets: cash for 1-2 years, bonds "
            "for 3-7 years, and stocks for 8+ years."
        ),
        rationale=(
            "Having 1-2 years of expenses in cash means you never have to sell stocks "
            "during a downturn to meet living expenses."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("inc_bucket_strategy", "interested"),),
    ),
    SuggestionTemplate(
        id="sugg_inc_create_withdrawal_plan",
        domain=SuggestionDomain.INCOME_PLAN,
        title="Create a written withdrawal strategy",
        description=(
            "Document your income strategy: which accounts to draw from, in what order, "
            "and how to adjust for market conditions."
        ),
        rationale=(
            "A written plan reduces emotional decision-making and provides a roadmap for "
            "consistent income management."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("inc_withdrawal_strategy", "no_plan"),),
    ),
    SuggestionTemplate(
        id="sugg_inc_analyze_ss",
        domain=SuggestionDomain.INCOME_PLAN,
        title="Analyze Social Security timing",
        description=(
            "Run the numbers on different Social Security claiming ages. This is often "
            "the highest-impact retirement income decision."
        ),
        rationale=(
            "Delaying Social Security increases benefits 8% per year from 62 to 70. For "
            "many, this is the best \"investment\" available."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("inc_social_security_timing", "not_analyzed"),),
    ),
    SuggestionTemplate(
        id="sugg_tax_analyze_roth",
        domain=SuggestionDomain.TAXES,
        title="Analyze Roth conversion opportunities",
        description=(
            "Evaluate whether Roth conversions make sense for your situation. Consider "
            "your current vs. future tax brackets and RMD impact."
        ),
        rationale=(
            "Roth conversions can reduce future taxes, lower RMDs, and provide tax-free "
            "income in retirement. The analysis requires careful modeling."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("tax_roth_conversion", "need_analysis"),),
    ),
    SuggestionTemplate(
        id="sugg_tax_implement_conversions",
        domain=SuggestionDomain.TAXES,
        title="Implement Roth conversion strategy",
        description=(
            "You've identified Roth conversions as beneficial. Work with a tax "
            "professional to implement an annual conversion strategy."
        ),
        rationale=(
            "Converting in lower-bracket years, especially between retirement and age 73, "
            "can significantly reduce lifetime taxes."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("tax_roth_conversion", "makes_sense"),),
    ),
    SuggestionTemplate(
        id="sugg_tax_get_review",
        domain=SuggestionDomain.TAXES,
        title="Get a proactive tax review",
        description=(
            "Have a tax professional review your situation for opportunities to reduce "
            "taxes through timing, deductions, and account strategies."
        ),
        rationale=(
            "Many people overpay taxes due to missed opportunities. A proactive review "
            "can identify savings you didn't know existed."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("tax_overpaying", "likely_overpaying"),),
    ),
    SuggestionTemplate(
        id="sugg_tax_capital_gains_strategy",
        domain=SuggestionDomain.TAXES,
        title="Develop capital gains management strategy",
        description=(
            "Create a plan for managing your appreciated assets: tax-loss harvesting, "
            "charitable giving, and timing of sales."
        ),
        rationale=(
            "Strategic management of capital gains can significantly reduce taxes. In "
            "retirement, you may access the 0% capital gains bracket."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("tax_capital_gains", "significant_gains"),),
    ),
    SuggestionTemplate(
        id="sugg_tax_inheritance_planning",
        domain=SuggestionDomain.TAXES,
        title="Plan for tax-efficient inheritance",
        description=(
            "Structure your accounts and drawdown strategy to minimize the tax burden on "
            "your heirs."
        ),
        rationale=(
            "Different account types have vastly different tax implications for heirs. "
            "Planning now can save your beneficiaries significant taxes."
        ),
        priority=SuggestionPriority.LOW,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("tax_estate_planning", "not_considered"),),
    ),
    SuggestionTemplate(
        id="sugg_est_create_will",
        domain=SuggestionDomain.ESTATE_PLAN,
        title="Create or update your will",
        description=(
            "Establish a valid will that specifies how your assets should be distributed "
            "and names guardians for minor children if applicable."
        ),
        rationale=(
            "Without a will, state law determines asset distribution. A will ensures your "
            "wishes are followed and makes things easier for your family."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("est_will", "none"),),
    ),
    SuggestionTemplate(
        id="sugg_est_update_will",
        domain=SuggestionDomain.ESTATE_PLAN,
        title="Update your outdated will",
        description=(
            "Review and update your will to reflect current circumstances, relationships, "
            "and wishes."
        ),
        rationale=(
            "Outdated wills can cause unintended consequences. Life changes should "
            "trigger a review of estate documents."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("est_will", "outdated"),),
    ),
    SuggestionTemplate(
        id="sugg_est_evaluate_trust",
        domain=SuggestionDomain.ESTATE_PLAN,
        title="Evaluate trust options",
        description=(
            "Consult with an estate attorney to determine if a trust would benefit your "
            "situation for probate avoidance, asset protection, or control."
        ),
        rationale=(
            "Trusts can avoid probate, protect assets, and control how heirs receive "
            "money. An attorney can advise if one is right for you."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("est_trust", "need_evaluation"),),
    ),
    SuggestionTemplate(
        id="sugg_est_healthcare_directives",
        domain=SuggestionDomain.ESTATE_PLAN,
        title="Complete healthcare directives",
        description=(
            "Create a healthcare power of attorney and living will to ensure your medical "
            "wishes are followed if you cannot communicate them."
        ),
        rationale=(
            "Without these documents, family members may face difficult decisions or "
            "court proceedings during an already stressful time."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("est_poa_healthcare", "none"),),
    ),
    SuggestionTemplate(
        id="sugg_est_financial_poa",
        domain=SuggestionDomain.ESTATE_PLAN,
        title="Establish durable financial power of attorney",
        description=(
            "Create a durable financial POA so someone you trust can manage your finances "
            "if you become incapacitated."
        ),
        rationale=(
            "Without a financial POA, a court must appoint a guardian to handle your "
            "finances, which is costly and time-consuming."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("est_financial_poa", "none"),),
    ),
    SuggestionTemplate(
        id="sugg_est_review_beneficiaries",
        domain=SuggestionDomain.ESTATE_PLAN,
        title="Review all beneficiary designations",
        description=(
            "Check and update beneficiaries on all retirement accounts, life insurance, "
            "and transfer-on-death accounts."
        ),
        rationale=(
            "Beneficiary designations override your will. Outdated beneficiaries (like "
            "ex-spouses) can cause assets to go to unintended people."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("est_beneficiaries", "not_reviewed"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_review_health",
        domain=SuggestionDomain.INSURANCE,
        title="Review health insurance options",
        description=(
            "Evaluate your health insurance coverage and costs. Look for opportunities to "
            "optimize your plan choice."
        ),
        rationale=(
            "Health insurance is a major expense. Ensuring you have the right coverage at "
            "a good price is important for financial security."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ins_health_coverage", "need_review"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_pre_medicare_plan",
        domain=SuggestionDomain.INSURANCE,
        title="Plan for pre-Medicare health coverage",
        description=(
            "If retiring before 65, research options for bridging the gap to Medicare: "
            "COBRA, ACA marketplace, spouse coverage, or private insurance."
        ),
        rationale=(
            "Health insurance before Medicare eligibility can be expensive. Planning "
            "ahead helps you budget and find the best option."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ins_health_coverage", "gap_before_medicare"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_evaluate_life",
        domain=SuggestionDomain.INSURANCE,
        title="Evaluate life insurance needs",
        description=(
            "Calculate your life insurance need based on income replacement, debts, and "
            "dependent support. Compare to current coverage."
        ),
        rationale=(
            "Life insurance needs change over time. Regular evaluation ensures you're not "
            "underinsured or overpaying for unnecessary coverage."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ins_life_insurance", "need_analysis"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_increase_life",
        domain=SuggestionDomain.INSURANCE,
        title="Consider additional life insurance",
        description=(
            "Your current life insurance may be insufficient to protect your family. Get "
            "quotes for term insurance to fill the gap."
        ),
        rationale=(
            "Adequate life insurance ensures your family can maintain their lifestyle and "
            "meet financial obligations if something happens to you."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("ins_life_insurance", "underinsured"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_review_disability",
        domain=SuggestionDomain.INSURANCE,
        title="Review disability insurance coverage",
        description=(
            "Evaluate if your disability coverage is adequate. Consider supplemental "
            "coverage if employer benefits are limited."
        ),
        rationale=(
            "Disability is more common than death during working years. Adequate coverage "
            "protects your income and financial plan."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ins_disability", "employer_only"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_ltc_planning",
        domain=SuggestionDomain.INSURANCE,
        title="Develop long-term care plan",
        description=(
            "Evaluate options for paying for potential long-term care: traditional LTC "
            "insurance, hybrid policies, or self-insurance with dedicated assets."
        ),
        rationale=(
            "Long-term care costs can devastate retirement savings. Having a plan "
            "provides peace of mind and protects your spouse."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("ins_ltc", "need_coverage"),),
    ),
    SuggestionTemplate(
        id="sugg_ins_pension_max",
        domain=SuggestionDomain.INSURANCE,
        title="Analyze pension maximization strategy",
        description=(
            "Compare taking a higher single-life pension with life insurance versus the "
            "reduced joint-and-survivor pension option."
        ),
        rationale=(
            "If you're healthy and insurable, pension max may provide more total income "
            "while still protecting your spouse."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("ins_pension_max", "not_evaluated"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_get_full_match",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Increase contributions to get full match",
        description=(
            "You're leaving free money on the table. Increase your 401k/TSP contribution "
            "to capture the full employer match."
        ),
        rationale=(
            "The employer match is an immediate 50-100% return on your contribution. Not "
            "getting it is like declining a raise."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("ben_401k_match", "not_full"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_compare_fegli",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Compare FEGLI to private insurance",
        description=(
            "Get quotes for private term insurance and compare to your FEGLI costs, "
            "especially Option B which increases with age."
        ),
        rationale=(
            "FEGLI Option B becomes expensive as you age. Private term insurance is often "
            "much cheaper, especially if you're healthy."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ben_fegli", "not_compared"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_fegli_retirement_plan",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Plan FEGLI transition for retirement",
        description=(
            "Understand what happens to your FEGLI coverage at retirement. Consider "
            "locking in private coverage before you retire."
        ),
        rationale=(
            "FEGLI Option B reduces at 65 unless you pay expensive premiums. Planning "
            "ahead ensures continuous coverage."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ben_fegli_portability", "not_clear"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_survivor_analysis",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Analyze FERS survivor benefit options",
        description=(
            "Run the numbers on full, partial, and no survivor annuity options. Compare "
            "to life insurance alternatives."
        ),
        rationale=(
            "The survivor benefit decision is irrevocable and affects your pension for "
            "life. Careful analysis is essential."
        ),
        priority=SuggestionPriority.HIGH,
        action_type=SuggestionActionType.CONSULT_PROFESSIONAL,
        triggers=(answer_is("ben_survivor_benefits", "not_evaluated"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_retirement_timing",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Optimize your retirement date",
        description=(
            "Use a federal retirement calculator to analyze optimal retirement timing "
            "considering pension, FERS supplement, and leave payout."
        ),
        rationale=(
            "Small timing differences can have big financial impacts. Retiring at the "
            "right time can maximize your benefits."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.INVESTIGATE,
        triggers=(answer_is("ben_pension_timing", "not_analyzed"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_review_tsp",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Review and update TSP allocation",
        description=(
            "Evaluate your TSP allocation to ensure it matches your investment strategy. "
            "Consider whether it's too conservative."
        ),
        rationale=(
            "Many federal employees are over-allocated to the G fund. Ensuring your TSP "
            "matches your goals is important."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("ben_tsp_allocation", "not_reviewed"),),
    ),
    SuggestionTemplate(
        id="sugg_ben_tsp_too_conservative",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        title="Consider more aggressive TSP allocation",
        description=(
            "Your TSP may be too conservatively allocated. Review whether you should "
            "shift toward more growth-oriented funds."
        ),
        rationale=(
            "Being too conservative in TSP limits long-term growth. If you have time "
            "until retirement, consider more equity exposure."
        ),
        priority=SuggestionPriority.MEDIUM,
        action_type=SuggestionActionType.IMPLEMENT,
        triggers=(answer_is("ben_tsp_allocation", "too_conservative"),),
    ),
)


def get_templates_by_domain(domain: SuggestionDomain) -> tuple[SuggestionTemplate, ...]:
    return tuple(t for t in SUGGESTION_TEMPLATES if t.domain is domain)
