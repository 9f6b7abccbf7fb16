"""
Policy Impact Classifier

Maps a PolicyInput to a qualitative impact narrative. Each policy category
has one rule function that picks between a few pre-written branches using
elasticity thresholds, market tags and a category-specific rate threshold.

The rules encode textbook partial-incidence reasoning (who bears a tax
given elasticities) as a lookup table rather than a solved model, so every
displayed sentence traces back to one boolean.
"""

import logging
from typing import Callable, Optional

from .impacts import ImpactLevel, ImpactSection, PolicyImpactResult, items
from .policies import (
    POLICY_NAMES,
    PolicyCategory,
    PolicyInput,
    is_essential_good,
    is_high_elasticity_good,
)

logger = logging.getLogger(__name__)

STRONG_NEG = ImpactLevel.STRONG_NEGATIVE
NEG = ImpactLevel.NEGATIVE
NEUTRAL = ImpactLevel.NEUTRAL
POS = ImpactLevel.POSITIVE
STRONG_POS = ImpactLevel.STRONG_POSITIVE

CONSUMER_TITLE = "Consumer Impact"
PRODUCER_TITLE = "Producer Impact"
WORKER_TITLE = "Worker Impact"
MACRO_TITLE = "Macro Indicators"

# "High rate" thresholds, one per category.
INDIRECT_TAX_HIGH_RATE = 15
INCOME_TAX_HIGH_RATE = 25
CORPORATE_TAX_HIGH_RATE = 20
TARIFF_HIGH_RATE = 20
CONSUMER_SUBSIDY_HIGH_RATE = 20
PRODUCER_SUBSIDY_HIGH_RATE = 20
MINIMUM_WAGE_HIGH_RATE = 30
EXPORT_SUBSIDY_HIGH_RATE = 15


def is_low_elasticity(elasticity: Optional[float]) -> bool:
    """True when the elasticity is known and below 1."""
    return elasticity is not None and elasticity < 1


def is_high_elasticity(elasticity: Optional[float]) -> bool:
    """True when the elasticity is known and at least 1."""
    return elasticity is not None and elasticity >= 1


def _result(category: PolicyCategory, consumer: ImpactSection, producer: ImpactSection,
            worker: ImpactSection, macro: ImpactSection) -> PolicyImpactResult:
    return PolicyImpactResult(
        policy_category=category,
        policy_name=POLICY_NAMES[category],
        consumer=consumer,
        producer=producer,
        worker=worker,
        macro=macro,
    )


# =============================================================================
# TAX POLICIES
# =============================================================================

def evaluate_indirect_tax(inputs: PolicyInput) -> PolicyImpactResult:
    """GST / excise / carbon tax: incidence depends on both elasticities."""
    low_ed = is_low_elasticity(inputs.demand_elasticity) or is_essential_good(inputs.market_type)
    high_ed = is_high_elasticity(inputs.demand_elasticity) or is_high_elasticity_good(inputs.market_type)
    low_es = is_low_elasticity(inputs.supply_elasticity)
    high_rate = inputs.policy_rate > INDIRECT_TAX_HIGH_RATE

    if low_ed:
        consumer = ImpactSection(
            CONSUMER_TITLE,
            items(
                ("Prices increase significantly", STRONG_NEG),
                ("Consumption decreases slightly", NEG),
                ("Welfare decreases significantly", STRONG_NEG),
            ),
            "Essential goods are less elastic; prices rise. "
            "Budget-conscious consumers may need to adjust spending.",
        )
    else:
        consumer = ImpactSection(
            CONSUMER_TITLE,
            items(
                ("Consumption decreases significantly", STRONG_NEG),
                ("Substitution to alternatives increases", POS),
                ("Price sensitivity leads to demand reduction", NEG),
            ),
            "High elasticity means consumers respond strongly; consider substitutes or delaying purchases.",
        )

    if low_es:
        producer = ImpactSection(
            PRODUCER_TITLE,
            items(
                ("Profit margins decrease slightly", NEG),
                ("Output decreases slightly", NEG),
            ),
            "Low supply elasticity means producers absorb some tax burden; margins compressed.",
        )
    else:
        producer = ImpactSection(
            PRODUCER_TITLE,
            items(
                ("Output decreases more significantly", STRONG_NEG),
                ("Production cuts likely", NEG),
            ),
            "High supply elasticity leads to production adjustments; expect supply reductions.",
        )

    if high_ed or high_rate:
        job_losses = ("Stronger job losses in affected sectors", STRONG_NEG)
    else:
        job_losses = ("Moderate employment effects", NEG)

    worker = ImpactSection(
        WORKER_TITLE,
        items(("Employment decreases", NEG), job_losses),
        "Workers in taxed sectors may face reduced hours or layoffs as producers adjust costs.",
    )

    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Government revenue increases", POS),
            ("Inflation increases", NEG),
            ("GDP decreases slightly", NEG),
            ("Employment decreases", NEG),
        ),
        "Tax revenue gains offset by reduced economic activity and higher price levels.",
    )

    return _result(PolicyCategory.TAX_INDIRECT, consumer, producer, worker, macro)


def evaluate_income_tax(inputs: PolicyInput) -> PolicyImpactResult:
    """Income tax: lower disposable income, weaker consumption."""
    high_rate = inputs.policy_rate > INCOME_TAX_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Disposable income decreases", STRONG_NEG if high_rate else NEG),
            ("Consumption spending decreases", NEG),
            ("Savings may decrease", NEG),
        ),
        "Reduced take-home pay limits consumer spending power; prioritize essential expenditures.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Sales decline as consumer spending falls", NEG),
            ("SMEs affected more significantly", STRONG_NEG),
            ("Demand-driven revenue reduction", NEG),
        ),
        "Lower consumer demand impacts sales; businesses may need to adjust pricing or inventory.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Hiring slows", NEG),
            ("Wage growth decelerates", NEG),
            ("Work incentives may decrease", NEG),
        ),
        "Higher income taxes can reduce labor supply incentives and slow wage negotiations.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Government revenue increases", POS),
            ("GDP decreases", NEG),
            ("Inflation neutral or decreases", NEUTRAL),
        ),
        "Fiscal revenue improves but consumption-driven growth slows.",
    )

    return _result(PolicyCategory.TAX_INCOME, consumer, producer, worker, macro)


def evaluate_corporate_tax(inputs: PolicyInput) -> PolicyImpactResult:
    """Corporate tax: lower retained earnings, investment and hiring."""
    high_rate = inputs.policy_rate > CORPORATE_TAX_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Prices increase slightly as costs pass through", NEG),
            ("Product availability may decrease", NEG),
        ),
        "Some corporate tax burden may be passed to consumers through higher prices.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Post-tax profits decrease", STRONG_NEG if high_rate else NEG),
            ("Investment decreases", NEG),
            ("R&D spending decreases", NEG),
            ("Expansion plans may be delayed", NEG),
        ),
        "Higher corporate taxes reduce retained earnings for reinvestment and growth.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Hiring slows", NEG),
            ("Job security decreases", NEG),
            ("Bonus and benefit cuts possible", NEG),
        ),
        "Reduced profitability may lead to workforce adjustments and slower hiring.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Government revenue increases", POS),
            ("GDP decreases", NEG),
            ("Inflation neutral or slightly increases", NEUTRAL),
            ("Business investment declines", NEG),
        ),
        "Revenue gains balanced against reduced business investment and slower growth.",
    )

    return _result(PolicyCategory.TAX_CORPORATE, consumer, producer, worker, macro)


def evaluate_tariff(inputs: PolicyInput) -> PolicyImpactResult:
    """Import duties: protection for domestic firms, higher prices at home."""
    high_rate = inputs.policy_rate > TARIFF_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Imported goods prices increase", STRONG_NEG if high_rate else NEG),
            ("Product choices decrease", NEG),
            ("Quality alternatives may be limited", NEG),
        ),
        "Higher import costs reduce purchasing power for foreign goods; consider domestic alternatives.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Domestic firms gain protection", POS),
            ("Import-reliant firms face higher input costs", NEG),
            ("Competitive pressure decreases", POS),
        ),
        "Domestic producers benefit from reduced foreign competition but may face higher input costs.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment increases in protected sectors", POS),
            ("Jobs may shift from import-dependent to domestic industries", NEUTRAL),
        ),
        "Protected industries may expand hiring as domestic production increases.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Government revenue increases", POS),
            ("Inflation increases", NEG),
            ("Trade deficit decreases", POS),
            ("Potential for trade retaliation", NEG),
        ),
        "Tariff revenue and trade balance improve but at cost of higher domestic prices.",
    )

    return _result(PolicyCategory.TAX_TARIFF, consumer, producer, worker, macro)


# =============================================================================
# SUBSIDIES
# =============================================================================

def evaluate_consumer_subsidy(inputs: PolicyInput) -> PolicyImpactResult:
    """Consumer subsidy: lower effective prices, demand-pull pressure."""
    high_subsidy = inputs.policy_rate > CONSUMER_SUBSIDY_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Effective prices decrease", STRONG_POS if high_subsidy else POS),
            ("Welfare increases", POS),
            ("Purchasing power increases", POS),
        ),
        "Subsidies directly reduce consumer costs; take advantage of lower effective prices.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Demand increases", POS),
            ("Revenue increases", POS),
            ("Production expands to meet demand", POS),
        ),
        "Higher demand from subsidized consumers drives sales growth and expansion.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment increases", POS),
            ("Job opportunities expand", POS),
        ),
        "Growing production creates new employment opportunities.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Government expenditure increases", NEG),
            ("GDP increases", POS),
            ("Inflation may increase (demand-pull)", NEG),
        ),
        "Stimulus effect on growth offset by fiscal costs and potential inflationary pressure.",
    )

    return _result(PolicyCategory.SUBSIDY_CONSUMER, consumer, producer, worker, macro)


def evaluate_producer_subsidy(inputs: PolicyInput) -> PolicyImpactResult:
    """Producer subsidy: supply-side stimulus, output scales with Es."""
    high_es = is_high_elasticity(inputs.supply_elasticity)
    high_subsidy = inputs.policy_rate > PRODUCER_SUBSIDY_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Prices decrease", STRONG_POS if high_subsidy else POS),
            ("Product availability increases", POS),
        ),
        "Lower production costs translate to reduced consumer prices.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Profits increase", POS),
            ("Output increases", STRONG_POS if high_es else POS),
            ("Investment capacity increases", POS),
        ),
        "Subsidies improve margins and enable capacity expansion.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment increases", POS),
            ("Job security improves", POS),
        ),
        "Expanded production creates stable employment opportunities.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("GDP increases", POS),
            ("Inflation neutral or decreases", POS),
            ("Government expenditure increases", NEG),
        ),
        "Supply-side stimulus grows economy with minimal inflationary pressure.",
    )

    return _result(PolicyCategory.SUBSIDY_PRODUCER, consumer, producer, worker, macro)


# =============================================================================
# PRICE CONTROLS
# =============================================================================

def evaluate_price_ceiling(inputs: PolicyInput) -> PolicyImpactResult:
    """Binding price cap: shortages, output cut deepens with elastic supply."""
    high_es = is_high_elasticity(inputs.supply_elasticity)

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Prices decrease (capped)", POS),
            ("Shortages increase", STRONG_NEG),
            ("Black markets may emerge", NEG),
            ("Quality may decline", NEG),
        ),
        "Lower prices come with supply shortages; expect queues and rationing.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Output decreases", STRONG_NEG if high_es else NEG),
            ("Profit margins squeezed", NEG),
            ("Investment in sector decreases", NEG),
        ),
        "Price caps reduce incentive to produce; supply constraints worsen over time.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment decreases", NEG),
            ("Sector layoffs possible", NEG),
        ),
        "Reduced production leads to workforce reductions in affected sectors.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("GDP decreases", NEG),
            ("Economic inefficiency increases", NEG),
            ("Resource misallocation increases", NEG),
        ),
        "Market distortions create deadweight losses and economic inefficiency.",
    )

    return _result(PolicyCategory.PRICE_CEILING, consumer, producer, worker, macro)


def evaluate_price_floor(inputs: PolicyInput) -> PolicyImpactResult:
    """Price floor / MSP: guaranteed producer revenue, surplus to manage."""
    high_es = is_high_elasticity(inputs.supply_elasticity)

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Prices increase (minimum set)", NEG),
            ("Demand decreases", NEG),
            ("Consumption falls", NEG),
        ),
        "Higher mandated prices reduce consumer purchasing; budget adjustments needed.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Revenue guaranteed at minimum level", POS),
            ("Surplus increases", STRONG_POS if high_es else POS),
            ("May overproduce expecting floor price", NEG),
        ),
        "Price floors provide revenue stability but may lead to overproduction.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment increases if procurement exists", POS),
            ("Rural employment may benefit", POS),
        ),
        "Government procurement programs support employment in supported sectors.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Inflation increases", NEG),
            ("Fiscal burden increases (procurement costs)", NEG),
            ("Surplus management costs increase", NEG),
        ),
        "Price floors create fiscal obligations and inflationary pressure.",
    )

    return _result(PolicyCategory.PRICE_FLOOR, consumer, producer, worker, macro)


def evaluate_minimum_wage(inputs: PolicyInput) -> PolicyImpactResult:
    """Minimum wage: hiring response driven by labor demand elasticity."""
    elastic_demand = is_high_elasticity(inputs.labor_demand_elasticity)
    high_rate = inputs.policy_rate > MINIMUM_WAGE_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Low-income consumption increases", POS),
            ("Purchasing power of workers rises", POS),
            ("Prices of labor-intensive goods may increase", NEG),
        ),
        "Higher wages boost spending power for low-income workers.",
    )

    if elastic_demand:
        producer_recommendation = (
            "Elastic labor demand means significant hiring reductions; expect automation shifts."
        )
    else:
        producer_recommendation = "Labor costs rise but hiring impacts are moderate in inelastic markets."

    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Labor costs increase", NEG),
            ("Hiring decreases", STRONG_NEG if elastic_demand else NEG),
            ("Automation incentives increase", NEUTRAL),
        ),
        producer_recommendation,
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Wages increase for employed workers", POS),
            ("Unemployment may increase", STRONG_NEG if elastic_demand or high_rate else NEG),
            ("Entry-level opportunities may decrease", NEG),
        ),
        "Higher wages benefit employed workers; some may face job losses or reduced hours.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("Income inequality decreases", POS),
            ("Inflation increases slightly", NEG),
            ("Consumer spending increases", POS),
        ),
        "Minimum wage reduces inequality but may cause moderate inflation.",
    )

    return _result(PolicyCategory.PRICE_MINIMUM_WAGE, consumer, producer, worker, macro)


# =============================================================================
# TRADE MEASURES
# =============================================================================

def evaluate_export_subsidy(inputs: PolicyInput) -> PolicyImpactResult:
    """Export subsidy: exporters gain abroad, domestic supply tightens."""
    high_subsidy = inputs.policy_rate > EXPORT_SUBSIDY_HIGH_RATE

    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Domestic prices may increase as goods exported", NEG),
            ("Domestic availability may decrease", NEG),
        ),
        "Export focus may reduce domestic supply; prices could rise locally.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Export profits increase", STRONG_POS if high_subsidy else POS),
            ("Output increases", POS),
            ("International competitiveness increases", POS),
        ),
        "Subsidies make exports more competitive; producers gain market share abroad.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment in export sectors increases", POS),
            ("Job creation in manufacturing", POS),
        ),
        "Export growth creates employment in production and logistics.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("GDP increases", POS),
            ("Fiscal burden increases", NEG),
            ("Trade surplus increases", POS),
            ("Risk of trade disputes", NEG),
        ),
        "Export subsidies boost growth but create fiscal costs and trade tensions.",
    )

    return _result(PolicyCategory.TRADE_EXPORT_SUBSIDY, consumer, producer, worker, macro)


def evaluate_export_restriction(inputs: PolicyInput) -> PolicyImpactResult:
    """Export restriction / quota: fixed narrative, quota_amount is not read."""
    consumer = ImpactSection(
        CONSUMER_TITLE,
        items(
            ("Domestic availability increases", POS),
            ("Domestic prices decrease", POS),
            ("Supply stability improves", POS),
        ),
        "Export limits increase domestic supply; consumers benefit from lower prices.",
    )
    producer = ImpactSection(
        PRODUCER_TITLE,
        items(
            ("Export revenue decreases", NEG),
            ("International market access limited", NEG),
            ("Domestic prices may not cover costs", NEG),
        ),
        "Producers lose lucrative export markets; domestic focus reduces profitability.",
    )
    worker = ImpactSection(
        WORKER_TITLE,
        items(
            ("Employment in export sectors decreases", NEG),
            ("Job losses in trade-dependent industries", NEG),
        ),
        "Reduced exports lead to workforce reductions in affected sectors.",
    )
    macro = ImpactSection(
        MACRO_TITLE,
        items(
            ("GDP neutral or decreases", NEUTRAL),
            ("Trade surplus decreases", NEG),
            ("Domestic food/commodity security improves", POS),
        ),
        "Domestic availability improves at cost of export earnings.",
    )

    return _result(PolicyCategory.TRADE_EXPORT_RESTRICTION, consumer, producer, worker, macro)


# =============================================================================
# DISPATCH
# =============================================================================

RULES: dict[PolicyCategory, Callable[[PolicyInput], PolicyImpactResult]] = {
    PolicyCategory.TAX_INDIRECT: evaluate_indirect_tax,
    PolicyCategory.TAX_INCOME: evaluate_income_tax,
    PolicyCategory.TAX_CORPORATE: evaluate_corporate_tax,
    PolicyCategory.TAX_TARIFF: evaluate_tariff,
    PolicyCategory.SUBSIDY_CONSUMER: evaluate_consumer_subsidy,
    PolicyCategory.SUBSIDY_PRODUCER: evaluate_producer_subsidy,
    PolicyCategory.PRICE_CEILING: evaluate_price_ceiling,
    PolicyCategory.PRICE_FLOOR: evaluate_price_floor,
    PolicyCategory.PRICE_MINIMUM_WAGE: evaluate_minimum_wage,
    PolicyCategory.TRADE_EXPORT_SUBSIDY: evaluate_export_subsidy,
    PolicyCategory.TRADE_EXPORT_RESTRICTION: evaluate_export_restriction,
}

DEFAULT_RULE = evaluate_indirect_tax


def resolve_category(value) -> Optional[PolicyCategory]:
    """Return the PolicyCategory for an enum member or its string value, else None."""
    if isinstance(value, PolicyCategory):
        return value
    try:
        return PolicyCategory(value)
    except ValueError:
        return None


def classify(inputs: PolicyInput) -> PolicyImpactResult:
    """
    Classify the qualitative impact of a policy.

    Total over the category domain: a category that is not recognized is
    evaluated with the indirect tax rules, so this never raises for an
    enumerated-value problem.

    Args:
        inputs: The policy configuration

    Returns:
        Impact narrative with consumer, producer, worker and macro sections
    """
    category = resolve_category(inputs.policy_category)
    rule = RULES.get(category) if category is not None else None

    if rule is None:
        logger.warning(
            f"Unrecognized policy category {inputs.policy_category!r}; "
            "falling back to indirect tax rules"
        )
        rule = DEFAULT_RULE

    return rule(inputs)
