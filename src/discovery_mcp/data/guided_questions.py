"""Guided questions per suggestion domain, plus domain metadata.

A question is applicable when all of its conditions hold; an empty list
means always applicable. A domain is relevant when any of its relevance
conditions holds; an empty list means always relevant.
"""

from discovery_mcp.models import (
    Condition,
    ConditionType,
    DomainInfo,
    GuidedQuestion,
    QuestionOption,
    SuggestionDomain,
)


def age_over(years: int) -> Condition:
    return Condition(ConditionType.AGE_OVER, value=years)


def age_under(years: int) -> Condition:
    return Condition(ConditionType.AGE_UNDER, value=years)


NEAR_RETIREMENT = Condition(ConditionType.NEAR_RETIREMENT)
FEDERAL_EMPLOYEE = Condition(ConditionType.FEDERAL_EMPLOYEE)
HAS_SPOUSE = Condition(ConditionType.HAS_SPOUSE)
HAS_PENSION = Condition(ConditionType.HAS_PENSION)
HAS_TSP = Condition(ConditionType.HAS_TSP)

DOMAIN_INFO: tuple[DomainInfo, ...] = (
    DomainInfo(
        id=SuggestionDomain.INVESTMENTS,
        name="Investments",
        description="Portfolio alignment, diversification, costs, and fund selection",
        relevance_conditions=(),
        order=1,
    ),
    DomainInfo(
        id=SuggestionDomain.SAVINGS,
        name="Savings",
        description="Retirement savings targets, account types, and emergency funds",
        relevance_conditions=(),
        order=2,
    ),
    DomainInfo(
        id=SuggestionDomain.ANNUITIES,
        name="Annuities",
        description="Guaranteed income products: MYGAs, FIAs, RILAs, and income annuities",
        relevance_conditions=(age_over(45),),
        order=3,
    ),
    DomainInfo(
        id=SuggestionDomain.INCOME_PLAN,
        name="Income Plan",
        description="Retirement income strategy, bucket approach, and withdrawal planning",
        relevance_conditions=(NEAR_RETIREMENT,),
        order=4,
    ),
    DomainInfo(
        id=SuggestionDomain.TAXES,
        name="Taxes",
        description="Roth conversions, tax efficiency, and capital gains management",
        relevance_conditions=(),
        order=5,
    ),
    DomainInfo(
        id=SuggestionDomain.ESTATE_PLAN,
        name="Estate Plan",
        description="Wills, trusts, powers of attorney, and beneficiary designations",
        relevance_conditions=(),
        order=6,
    ),
    DomainInfo(
        id=SuggestionDomain.INSURANCE,
        name="Insurance",
        description="Life, health, disability, and long-term care coverage",
        relevance_conditions=(),
        order=7,
    ),
    DomainInfo(
        id=SuggestionDomain.EMPLOYEE_BENEFITS,
        name="Employee Benefits",
        description="Employer benefits, FEGLI, TSP match, and pension optimization",
        relevance_conditions=(FEDERAL_EMPLOYEE,),
        order=8,
    ),
)

GUIDED_QUESTIONS: tuple[GuidedQuestion, ...] = (
    GuidedQuestion(
        id="inv_risk_alignment",
        domain=SuggestionDomain.INVESTMENTS,
        question="Is your portfolio aligned with your risk tolerance?",
        explanation=(
            "Your portfolio allocation should match your stated risk tolerance. A "
            "mismatch could mean taking too much risk (causing anxiety during downturns) "
            "or too little risk (potentially limiting growth)."
        ),
        options=(
            QuestionOption("aligned", "Yes, well aligned"),
            QuestionOption("too_aggressive", "No, too aggressive for my comfort"),
            QuestionOption("too_conservative", "No, too conservative for my goals"),
            QuestionOption("unsure", "Not sure - need to analyze"),
        ),
        order=1,
    ),
    GuidedQuestion(
        id="inv_diversification",
        domain=SuggestionDomain.INVESTMENTS,
        question="Is your portfolio diversified across different asset classes?",
        explanation=(
            "Diversification reduces risk by spreading investments across different asset "
            "types (stocks, bonds, international, real estate, etc.). Over-concentration "
            "in one area increases vulnerability."
        ),
        options=(
            QuestionOption("well_diversified", "Well diversified across asset classes"),
            QuestionOption("somewhat", "Some diversification but gaps exist"),
            QuestionOption("concentrated", "Concentrated in few holdings or sectors"),
            QuestionOption("unsure", "Not sure - need to analyze"),
        ),
        order=2,
    ),
    GuidedQuestion(
        id="inv_overlap",
        domain=SuggestionDomain.INVESTMENTS,
        question="Do your investment funds have significant overlap?",
        explanation=(
            "Multiple funds may hold the same underlying stocks, creating unintended "
            "concentration. For example, owning a total market fund and an S&P 500 fund "
            "creates significant overlap."
        ),
        options=(
            QuestionOption("no_overlap", "No significant overlap"),
            QuestionOption("some_overlap", "Some overlap but manageable"),
            QuestionOption("significant_overlap", "Yes, significant overlap exists"),
            QuestionOption("unsure", "Not sure - need to check"),
        ),
        order=3,
    ),
    GuidedQuestion(
        id="inv_fund_quality",
        domain=SuggestionDomain.INVESTMENTS,
        question="Are your funds the best options in their category?",
        explanation=(
            "Within each asset class, some funds perform better or have lower costs than "
            "others. Regularly evaluating fund quality ensures you're getting good value."
        ),
        options=(
            QuestionOption("optimal", "Yes, using best-in-class funds"),
            QuestionOption("adequate", "Adequate but could be better"),
            QuestionOption("suboptimal", "Some funds should be replaced"),
            QuestionOption("unsure", "Not sure - need to research"),
        ),
        order=4,
    ),
    GuidedQuestion(
        id="inv_cost_efficiency",
        domain=SuggestionDomain.INVESTMENTS,
        question="Are your investment costs (expense ratios) competitive?",
        explanation=(
            "High fees reduce returns over time. Even a 0.5% difference in expense ratios "
            "can cost tens of thousands over a career. Index funds typically charge "
            "0.03-0.20%, while actively managed funds often charge 0.50-1.50%."
        ),
        options=(
            QuestionOption("very_low", "Very low costs (under 0.20% average)"),
            QuestionOption("reasonable", "Reasonable costs (0.20-0.50% average)"),
            QuestionOption("high", "High costs (over 0.50% average)"),
            QuestionOption("unsure", "Not sure - need to calculate"),
        ),
        order=5,
    ),
    GuidedQuestion(
        id="inv_excess_cash",
        domain=SuggestionDomain.INVESTMENTS,
        question="Do you have excess cash sitting uninvested?",
        explanation=(
            "Beyond your emergency fund (typically 3-6 months of expenses), excess cash "
            "may be losing purchasing power to inflation. However, some cash may be "
            "appropriate if you have near-term needs."
        ),
        options=(
            QuestionOption("appropriate", "Cash levels are appropriate"),
            QuestionOption("too_much", "More cash than needed"),
            QuestionOption("too_little", "Less cash than needed for emergencies"),
            QuestionOption("unsure", "Not sure"),
        ),
        order=6,
    ),
    GuidedQuestion(
        id="sav_retirement_target",
        domain=SuggestionDomain.SAVINGS,
        question="Do you know how much you need saved to retire comfortably?",
        explanation=(
            "A retirement savings target helps you track progress and adjust your savings "
            "rate. This number depends on your expected expenses, other income sources, "
            "and how long you expect to be retired."
        ),
        options=(
            QuestionOption("know_target", "Yes, I have a specific target number"),
            QuestionOption("rough_idea", "I have a rough idea"),
            QuestionOption("no_target", "No, I haven't calculated this"),
        ),
        order=1,
    ),
    GuidedQuestion(
        id="sav_expense_estimate",
        domain=SuggestionDomain.SAVINGS,
        question="Do you know your expected annual expenses in retirement?",
        explanation=(
            "Understanding your retirement expenses is foundational to planning. Many "
            "people spend 70-80% of pre-retirement income, but this varies based on "
            "lifestyle, healthcare needs, and debt status."
        ),
        options=(
            QuestionOption("detailed", "Yes, I have a detailed budget"),
            QuestionOption("estimate", "I have a rough estimate"),
            QuestionOption("unknown", "I haven't figured this out yet"),
        ),
        order=2,
    ),
    GuidedQuestion(
        id="sav_guaranteed_coverage",
        domain=SuggestionDomain.SAVINGS,
        question=(
            "What percentage of your retirement expenses will be covered by guaranteed "
            "income?"
        ),
        explanation=(
            "Guaranteed income (Social Security, pensions, annuities) that covers "
            "essential expenses provides security. The \"gap\" between guaranteed income "
            "and total expenses is what your savings must cover."
        ),
        options=(
            QuestionOption("fully_covered", "All essential expenses covered (100%+)"),
            QuestionOption("mostly_covered", "Most essentials covered (75-99%)"),
            QuestionOption("partially_covered", "Some covered (50-74%)"),
            QuestionOption("minimal_coverage", "Minimal coverage (under 50%)"),
            QuestionOption("unsure", "Not sure - need to calculate"),
        ),
        order=3,
    ),
    GuidedQuestion(
        id="sav_current_savings",
        domain=SuggestionDomain.SAVINGS,
        question="Are you on track to meet your retirement savings goal?",
        explanation=(
            "Comparing your current savings to where you \"should be\" at your age helps "
            "identify if you need to adjust your savings rate or retirement timeline."
        ),
        options=(
            QuestionOption("ahead", "Ahead of schedule"),
            QuestionOption("on_track", "On track"),
            QuestionOption("behind", "Behind but catchable"),
            QuestionOption("significantly_behind", "Significantly behind"),
            QuestionOption("unsure", "Not sure"),
        ),
        order=4,
    ),
    GuidedQuestion(
        id="sav_savings_rate",
        domain=SuggestionDomain.SAVINGS,
        question="Are you saving enough each year toward retirement?",
        explanation=(
            "Most experts recommend saving 15-20% of income for retirement (including "
            "employer match). If you started late or are behind, you may need to save "
            "more."
        ),
        options=(
            QuestionOption("exceeds_target", "Saving more than 20% of income"),
            QuestionOption("meets_target", "Saving 15-20% of income"),
            QuestionOption("below_target", "Saving 10-15% of income"),
            QuestionOption("minimal", "Saving less than 10% of income"),
            QuestionOption("unsure", "Not sure"),
        ),
        order=5,
    ),
    GuidedQuestion(
        id="sav_account_types",
        domain=SuggestionDomain.SAVINGS,
        question="Are you saving in the right types of accounts?",
        explanation=(
            "The mix of Roth (tax-free), Traditional (tax-deferred), and taxable accounts "
            "affects your tax flexibility in retirement. Having money in all three "
            "\"buckets\" provides options."
        ),
        options=(
            QuestionOption("balanced", "Good mix across account types"),
            QuestionOption("mostly_deferred", "Mostly tax-deferred accounts"),
            QuestionOption("mostly_roth", "Mostly Roth accounts"),
            QuestionOption("need_diversify", "Need more tax diversification"),
            QuestionOption("unsure", "Not sure which is best for me"),
        ),
        order=6,
    ),
    GuidedQuestion(
        id="sav_emergency_fund",
        domain=SuggestionDomain.SAVINGS,
        question="Do you have an adequate emergency fund?",
        explanation=(
            "An emergency fund (typically 3-6 months of expenses in a savings account) "
            "protects you from needing to sell investments or take on debt during "
            "unexpected events."
        ),
        options=(
            QuestionOption("exceeds", "6+ months of expenses saved"),
            QuestionOption("adequate", "3-6 months of expenses saved"),
            QuestionOption("building", "Less than 3 months, but building it"),
            QuestionOption("insufficient", "Insufficient emergency fund"),
        ),
        order=7,
    ),
    GuidedQuestion(
        id="ann_myga_evaluation",
        domain=SuggestionDomain.ANNUITIES,
        question=(
            "Have you evaluated whether a MYGA (Multi-Year Guaranteed Annuity) makes "
            "sense for you?"
        ),
        explanation=(
            "MYGAs are like CDs from insurance companies, offering guaranteed fixed rates "
            "for 3-10 years. They can offer higher rates than bank CDs and have "
            "tax-deferred growth. Best for money you won't need for several years."
        ),
        options=(
            QuestionOption("good_fit", "Yes, MYGA seems like a good fit"),
            QuestionOption("not_right_now", "Not right now, but maybe later"),
            QuestionOption("not_applicable", "Doesn't fit my situation"),
            QuestionOption("need_research", "Need to research this more"),
            QuestionOption("not_familiar", "Not familiar with MYGAs"),
        ),
        conditions=(age_over(45),),
        order=1,
    ),
    GuidedQuestion(
        id="ann_fia_evaluation",
        domain=SuggestionDomain.ANNUITIES,
        question="Have you evaluated whether a Fixed Indexed Annuity (FIA) makes sense for you?",
        explanation=(
            "FIAs offer potential for higher returns than fixed annuities by linking "
            "growth to a market index, while protecting principal from market losses. "
            "They have caps and participation rates that limit upside."
        ),
        options=(
            QuestionOption("good_fit", "Yes, FIA seems like a good fit"),
            QuestionOption("not_right_now", "Not right now, but maybe later"),
            QuestionOption("not_applicable", "Doesn't fit my situation"),
            QuestionOption("need_research", "Need to research this more"),
            QuestionOption("not_familiar", "Not familiar with FIAs"),
        ),
        conditions=(age_over(50),),
        order=2,
    ),
    GuidedQuestion(
        id="ann_rila_evaluation",
        domain=SuggestionDomain.ANNUITIES,
        question="Have you evaluated whether a RILA (buffer annuity) makes sense for you?",
        explanation=(
            "RILAs (also called buffer annuities) offer market-linked returns with a "
            "\"buffer\" protecting against the first 10-20% of losses. Unlike FIAs, you "
            "can lose money, but you get higher upside potential."
        ),
        options=(
            QuestionOption("good_fit", "Yes, RILA seems like a good fit"),
            QuestionOption("not_right_now", "Not right now, but maybe later"),
            QuestionOption("not_applicable", "Doesn't fit my situation"),
            QuestionOption("need_research", "Need to research this more"),
            QuestionOption("not_familiar", "Not familiar with RILAs"),
        ),
        conditions=(age_over(50),),
        order=3,
    ),
    GuidedQuestion(
        id="ann_income_annuity",
        domain=SuggestionDomain.ANNUITIES,
        question="Would guaranteed lifetime income from an income annuity benefit your plan?",
        explanation=(
            "Income annuities (SPIAs, DIAs) convert a lump sum into guaranteed monthly "
            "income for life, like creating your own pension. They protect against "
            "outliving your money but reduce flexibility and inheritance."
        ),
        options=(
            QuestionOption("would_help", "Yes, more guaranteed income would help"),
            QuestionOption("already_covered", "No, essential expenses already covered"),
            QuestionOption("prefer_flexibility", "Prefer flexibility over guarantees"),
            QuestionOption("too_early", "Too early to decide - I'm not near retirement"),
            QuestionOption("need_analysis", "Need to analyze my income gap"),
        ),
        conditions=(NEAR_RETIREMENT,),
        order=4,
    ),
    GuidedQuestion(
        id="inc_bucket_strategy",
        domain=SuggestionDomain.INCOME_PLAN,
        question="Have you considered using a bucket strategy for retirement income?",
        explanation=(
            "A bucket strategy divides retirement assets into time-based segments: Bucket "
            "1 (1-2 years in cash/short-term), Bucket 2 (3-7 years in bonds), Bucket 3 "
            "(8+ years in stocks). This provides peace of mind during market downturns "
            "while maintaining growth potential."
        ),
        options=(
            QuestionOption("using", "Already using a bucket approach"),
            QuestionOption("interested", "Interested - this sounds helpful"),
            QuestionOption("not_needed", "Prefer a different approach"),
            QuestionOption("too_early", "Not in retirement yet - will consider later"),
            QuestionOption("need_learn", "Need to learn more about this"),
        ),
        conditions=(NEAR_RETIREMENT,),
        order=1,
    ),
    GuidedQuestion(
        id="inc_withdrawal_strategy",
        domain=SuggestionDomain.INCOME_PLAN,
        question="Do you have a written plan for how you'll draw income in retirement?",
        explanation=(
            "An Income Policy Statement (IPS) documents your withdrawal strategy: which "
            "accounts to draw from, in what order, and how to adjust for market "
            "conditions. It provides a roadmap and reduces emotional decision-making."
        ),
        options=(
            QuestionOption("documented", "Yes, I have a written plan"),
            QuestionOption("informal", "I have a general idea but nothing written"),
            QuestionOption("no_plan", "No, I haven't created a withdrawal strategy"),
            QuestionOption("too_early", "Not in retirement yet"),
        ),
        conditions=(NEAR_RETIREMENT,),
        order=2,
    ),
    GuidedQuestion(
        id="inc_social_security_timing",
        domain=SuggestionDomain.INCOME_PLAN,
        question="Have you analyzed when to claim Social Security benefits?",
        explanation=(
            "Social Security benefits increase about 8% per year for each year you delay "
            "from 62 to 70. For many, delaying is optimal, but it depends on health, "
            "other income, and spousal benefits. This is often the most valuable income "
            "decision."
        ),
        options=(
            QuestionOption("optimized", "Yes, I've analyzed and have a plan"),
            QuestionOption(
                "basic_understanding", "I understand the basics but haven't analyzed deeply"
            ),
            QuestionOption("not_analyzed", "No, I haven't analyzed this yet"),
            QuestionOption("already_claiming", "Already claiming benefits"),
            QuestionOption("too_early", "Too far from eligibility to decide"),
        ),
        conditions=(age_over(55),),
        order=3,
    ),
    GuidedQuestion(
        id="tax_roth_conversion",
        domain=SuggestionDomain.TAXES,
        question="Have you evaluated whether Roth conversions make sense for you?",
        explanation=(
            "Roth conversions move money from Traditional (tax-deferred) accounts to Roth "
            "(tax-free) accounts. You pay taxes now to avoid them later. This can be "
            "valuable if you expect higher tax rates in retirement or want to reduce "
            "Required Minimum Distributions."
        ),
        options=(
            QuestionOption("doing_conversions", "Already doing Roth conversions"),
            QuestionOption("makes_sense", "Yes, conversions would likely benefit me"),
            QuestionOption("not_beneficial", "No, not beneficial in my situation"),
            QuestionOption("need_analysis", "Need professional analysis"),
            QuestionOption("not_sure", "Not familiar with Roth conversions"),
        ),
        order=1,
    ),
    GuidedQuestion(
        id="tax_overpaying",
        domain=SuggestionDomain.TAXES,
        question="Are you potentially overpaying on taxes?",
        explanation=(
            "Many people overpay taxes due to: not maximizing deductions, poor timing of "
            "income/deductions, not using tax-advantaged accounts, or not having a tax "
            "plan. A proactive approach can save thousands annually."
        ),
        options=(
            QuestionOption("optimized", "My tax situation is well-optimized"),
            QuestionOption("likely_overpaying", "I think I may be overpaying"),
            QuestionOption("underpaying", "I may be underpaying (penalties possible)"),
            QuestionOption("need_review", "Need a professional review"),
            QuestionOption("not_sure", "Not sure"),
        ),
        order=2,
    ),
    GuidedQuestion(
        id="tax_capital_gains",
        domain=SuggestionDomain.TAXES,
        question="Do you have significant unrealized capital gains to manage?",
        explanation=(
            "Large unrealized gains create future tax liability. Strategies include: "
            "tax-loss harvesting, donating appreciated shares, timing sales across years, "
            "or using the 0% capital gains bracket in lower-income years."
        ),
        options=(
            QuestionOption("well_managed", "I actively manage capital gains"),
            QuestionOption("significant_gains", "Yes, significant gains to address"),
            QuestionOption("minimal_gains", "Minimal taxable gains"),
            QuestionOption("need_strategy", "Need to develop a strategy"),
            QuestionOption("not_applicable", "No taxable investment accounts"),
        ),
        order=3,
    ),
    GuidedQuestion(
        id="tax_estate_planning",
        domain=SuggestionDomain.TAXES,
        question="Have you considered the tax implications for your heirs?",
        explanation=(
            "How you structure accounts and pass assets affects the taxes your heirs pay. "
            "Roth accounts pass tax-free, Traditional accounts are taxable to heirs over "
            "10 years, and taxable accounts get a step-up in basis at death."
        ),
        options=(
            QuestionOption("planned", "Yes, I've planned for tax-efficient inheritance"),
            QuestionOption("aware", "I'm aware but haven't optimized"),
            QuestionOption("not_considered", "Haven't considered this yet"),
            QuestionOption("no_heirs", "Not a concern for my situation"),
        ),
        order=4,
    ),
    GuidedQuestion(
        id="est_will",
        domain=SuggestionDomain.ESTATE_PLAN,
        question="Do you have a current will?",
        explanation=(
            "A will specifies how your assets are distributed, names guardians for minor "
            "children, and appoints an executor. Without one, state law determines "
            "distribution, which may not match your wishes."
        ),
        options=(
            QuestionOption("current", "Yes, current and reviewed recently"),
            QuestionOption("outdated", "Yes, but needs updating"),
            QuestionOption("none", "No will in place"),
        ),
        order=1,
    ),
    GuidedQuestion(
        id="est_trust",
        domain=SuggestionDomain.ESTATE_PLAN,
        question="Have you evaluated whether you need a trust?",
        explanation=(
            "Trusts can avoid probate, provide for minor children, protect assets from "
            "creditors, and manage distributions. Revocable living trusts are common; "
            "irrevocable trusts offer additional protection and tax benefits."
        ),
        options=(
            QuestionOption("have_trust", "Yes, I have an appropriate trust"),
            QuestionOption("need_trust", "I likely need a trust"),
            QuestionOption("not_needed", "Trust not needed for my situation"),
            QuestionOption("need_evaluation", "Need professional evaluation"),
            QuestionOption("not_sure", "Not sure what trusts are for"),
        ),
        order=2,
    ),
    GuidedQuestion(
        id="est_poa_healthcare",
        domain=SuggestionDomain.ESTATE_PLAN,
        question="Do you have a healthcare power of attorney and living will/advance directive?",
        explanation=(
            "A healthcare POA designates someone to make medical decisions if you cannot. "
            "A living will specifies your wishes for end-of-life care. Without these, "
            "family may face difficult decisions or court proceedings."
        ),
        options=(
            QuestionOption("complete", "Yes, both in place and communicated"),
            QuestionOption("partial", "Have some documents but incomplete"),
            QuestionOption("none", "No healthcare directives in place"),
        ),
        order=3,
    ),
    GuidedQuestion(
        id="est_financial_poa",
        domain=SuggestionDomain.ESTATE_PLAN,
        question="Do you have a durable financial power of attorney?",
        explanation=(
            "A durable financial POA allows someone to manage your finances if you become "
            "incapacitated. \"Durable\" means it remains in effect if you become mentally "
            "incompetent. Without one, a court must appoint a guardian."
        ),
        options=(
            QuestionOption("in_place", "Yes, durable financial POA in place"),
            QuestionOption("needs_update", "Have one but may need updating"),
            QuestionOption("none", "No financial POA in place"),
        ),
        order=4,
    ),
    GuidedQuestion(
        id="est_beneficiaries",
        domain=SuggestionDomain.ESTATE_PLAN,
        question="Are your beneficiary designations up to date on all accounts?",
        explanation=(
            "Beneficiary designations on retirement accounts, life insurance, and "
            "transfer-on-death accounts override your will. Outdated beneficiaries "
            "(ex-spouses, deceased relatives) can cause assets to go to unintended "
            "people."
        ),
        options=(
            QuestionOption("current", "Yes, reviewed and current"),
            QuestionOption("probably_outdated", "Probably need to review"),
            QuestionOption("not_reviewed", "Haven't reviewed in years"),
            QuestionOption("not_sure", "Not sure what's on file"),
        ),
        order=5,
    ),
    GuidedQuestion(
        id="ins_health_coverage",
        domain=SuggestionDomain.INSURANCE,
        question="Is your health insurance coverage adequate and affordable?",
        explanation=(
            "Health insurance is critical for protecting against catastrophic medical "
            "costs. Coverage should balance premiums with out-of-pocket maximums. Those "
            "approaching 65 need to plan for Medicare."
        ),
        options=(
            QuestionOption("adequate_affordable", "Adequate coverage at good value"),
            QuestionOption("adequate_expensive", "Adequate but overpaying"),
            QuestionOption("inadequate", "Coverage may be insufficient"),
            QuestionOption("need_review", "Need to review coverage"),
            QuestionOption("gap_before_medicare", "Concerned about pre-Medicare gap"),
        ),
        order=1,
    ),
    GuidedQuestion(
        id="ins_life_insurance",
        domain=SuggestionDomain.INSURANCE,
        question="Do you have the right amount of life insurance?",
        explanation=(
            "Life insurance protects dependents from financial hardship if you die. Need "
            "typically decreases as you build wealth and dependents become independent. "
            "Term insurance is usually most cost-effective."
        ),
        options=(
            QuestionOption("adequate", "Have appropriate coverage"),
            QuestionOption("underinsured", "May need more coverage"),
            QuestionOption("overinsured", "Probably have too much"),
            QuestionOption("no_need", "No dependents, don't need coverage"),
            QuestionOption("need_analysis", "Need to analyze my needs"),
        ),
        order=2,
    ),
    GuidedQuestion(
        id="ins_disability",
        domain=SuggestionDomain.INSURANCE,
        question="Do you have disability insurance that would replace your income?",
        explanation=(
            "Disability insurance replaces income if you can't work due to illness or "
            "injury. During working years, the risk of disability is higher than death. "
            "Many people are underinsured or rely only on limited employer coverage."
        ),
        options=(
            QuestionOption("adequate", "Have adequate disability coverage"),
            QuestionOption("employer_only", "Only have employer coverage (may be limited)"),
            QuestionOption("none", "No disability coverage"),
            QuestionOption("near_retirement", "Near retirement, less concerned"),
            QuestionOption("need_review", "Need to review my coverage"),
        ),
        conditions=(age_under(60),),
        order=3,
    ),
    GuidedQuestion(
        id="ins_ltc",
        domain=SuggestionDomain.INSURANCE,
        question="Have you considered how you would pay for long-term care if needed?",
        explanation=(
            "Long-term care (nursing home, assisted living, home care) costs "
            "$50,000-$100,000+ annually and isn't covered by Medicare. Options include: "
            "traditional LTC insurance, hybrid life/LTC policies, self-insuring, or "
            "Medicaid planning."
        ),
        options=(
            QuestionOption("have_ltc", "Have LTC or hybrid policy"),
            QuestionOption("self_insure", "Plan to self-insure with savings"),
            QuestionOption("need_coverage", "Should evaluate LTC coverage"),
            QuestionOption("too_young", "Not thinking about this yet"),
            QuestionOption("not_sure", "Haven't considered this"),
        ),
        conditions=(age_over(45),),
        order=4,
    ),
    GuidedQuestion(
        id="ins_pension_max",
        domain=SuggestionDomain.INSURANCE,
        question=(
            "If you have a pension, have you evaluated \"pension max\" vs. survivor "
            "benefits?"
        ),
        explanation=(
            "Pension max strategy: Take the higher single-life pension and buy life "
            "insurance to protect your spouse, instead of the reduced joint-and-survivor "
            "option. This can provide more income if you're healthy and insurable."
        ),
        options=(
            QuestionOption("evaluated", "Yes, I've evaluated this"),
            QuestionOption("not_evaluated", "No, haven't considered this"),
            QuestionOption("no_pension", "Don't have a pension"),
            QuestionOption("not_applicable", "Not applicable (single, no survivor needs)"),
        ),
        conditions=(HAS_PENSION, HAS_SPOUSE),
        order=5,
    ),
    GuidedQuestion(
        id="ben_401k_match",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        question="Are you contributing enough to get the full employer match?",
        explanation=(
            "Employer matching is free money. Not getting the full match is leaving "
            "compensation on the table. Federal employees get an automatic 1% plus up to "
            "4% matching in TSP. Private sector matches vary."
        ),
        options=(
            QuestionOption("getting_full", "Yes, getting full match"),
            QuestionOption("not_full", "No, not getting full match"),
            QuestionOption("no_match", "Employer doesn't offer a match"),
            QuestionOption("not_sure", "Not sure what the match is"),
        ),
        order=1,
    ),
    GuidedQuestion(
        id="ben_fegli",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        question="Have you compared your FEGLI coverage to private life insurance options?",
        explanation=(
            "FEGLI (Federal Employees Group Life Insurance) is convenient but becomes "
            "expensive as you age, especially Option B. Private term insurance is often "
            "much cheaper, especially if you're healthy. FEGLI may not be portable."
        ),
        options=(
            QuestionOption("compared", "Yes, I've compared options"),
            QuestionOption("fegli_optimal", "Evaluated - FEGLI is best for me"),
            QuestionOption("private_better", "Evaluated - private is better"),
            QuestionOption("not_compared", "Haven't compared to private options"),
            QuestionOption("no_fegli", "Don't have FEGLI"),
        ),
        conditions=(FEDERAL_EMPLOYEE,),
        order=2,
    ),
    GuidedQuestion(
        id="ben_fegli_portability",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        question="Do you know what happens to your FEGLI coverage when you retire or leave?",
        explanation=(
            "FEGLI Basic can continue into retirement but Option B coverage reduces at "
            "age 65 unless you pay the full premium (which is very expensive). Planning "
            "before retirement is essential if you need life insurance coverage."
        ),
        options=(
            QuestionOption("understand", "Yes, I understand the options"),
            QuestionOption("not_clear", "Not completely clear on this"),
            QuestionOption("not_applicable", "Not planning to keep coverage"),
        ),
        conditions=(FEDERAL_EMPLOYEE, NEAR_RETIREMENT),
        order=3,
    ),
    GuidedQuestion(
        id="ben_survivor_benefits",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        question="Have you decided on your FERS survivor benefit election?",
        explanation=(
            "FERS offers survivor annuity options: Full survivor (50% of your annuity "
            "continues to spouse, costs 10% of annuity), partial (25%, costs 5%), or "
            "none. This decision is made at retirement and is generally irrevocable."
        ),
        options=(
            QuestionOption("decided", "Yes, I've made this decision"),
            QuestionOption("leaning", "Leaning toward an option but not final"),
            QuestionOption("not_evaluated", "Haven't evaluated this yet"),
            QuestionOption("not_applicable", "Not applicable (single or not FERS)"),
        ),
        conditions=(FEDERAL_EMPLOYEE, HAS_SPOUSE, NEAR_RETIREMENT),
        order=4,
    ),
    GuidedQuestion(
        id="ben_pension_timing",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        question="Have you analyzed the optimal timing for your retirement date?",
        explanation=(
            "For federal employees, retirement timing affects: FERS pension amount, "
            "Social Security coordination, FEHB continuation, and the FERS supplement (if "
            "retiring before 62). Small timing differences can have significant impacts."
        ),
        options=(
            QuestionOption("analyzed", "Yes, I've run the numbers"),
            QuestionOption("general_idea", "I have a general timeline"),
            QuestionOption("not_analyzed", "Haven't done detailed analysis"),
            QuestionOption("too_far", "Retirement is too far away to analyze"),
        ),
        conditions=(FEDERAL_EMPLOYEE,),
        order=5,
    ),
    GuidedQuestion(
        id="ben_tsp_allocation",
        domain=SuggestionDomain.EMPLOYEE_BENEFITS,
        question="Is your TSP allocation aligned with your investment strategy?",
        explanation=(
            "TSP offers excellent low-cost funds (C, S, I, F, G, and Lifecycle funds). "
            "Your allocation should match your overall investment strategy and risk "
            "tolerance. Many people are too conservative in TSP (heavy G fund)."
        ),
        options=(
            QuestionOption("intentional", "Yes, intentionally allocated"),
            QuestionOption("too_conservative", "May be too conservative"),
            QuestionOption("too_aggressive", "May be too aggressive"),
            QuestionOption("not_reviewed", "Haven't reviewed in a while"),
            QuestionOption("no_tsp", "Don't have TSP"),
        ),
        conditions=(HAS_TSP,),
        order=6,
    ),
)


def get_domain_info(domain: SuggestionDomain) -> DomainInfo:
    return next(info for info in DOMAIN_INFO if info.id is domain)


def get_questions_by_domain(domain: SuggestionDomain) -> tuple[GuidedQuestion, ...]:
    """Questions for one domain in display order."""
    return tuple(
        sorted((q for q in GUIDED_QUESTIONS if q.domain is domain), key=lambda q: q.order)
    )


def get_question_by_id(question_id: str) -> GuidedQuestion | None:
    return next((q for q in GUIDED_QUESTIONS if q.id == question_id), None)
