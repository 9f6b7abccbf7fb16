"""
Policy Input Definitions

Defines the structured configuration for one simulation request: the
market being regulated, the policy instrument, its rate, and the optional
elasticities that steer the qualitative rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MarketType(Enum):
    """Markets a policy can be applied to."""
    FUEL = "fuel"
    FOOD = "food"
    ELECTRONICS = "electronics"
    AGRICULTURE = "agriculture"


class PolicyType(Enum):
    """Policy families shown as tabs in the sidebar."""
    TAX = "tax"
    SUBSIDY = "subsidy"
    PRICE_CONTROL = "price_control"
    TRADE = "trade"


class PolicyCategory(Enum):
    """Atomic policy instruments. Each one selects exactly one rule function."""
    # Tax policies
    TAX_INDIRECT = "tax_indirect"
    TAX_INCOME = "tax_income"
    TAX_CORPORATE = "tax_corporate"
    TAX_TARIFF = "tax_tariff"

    # Subsidies
    SUBSIDY_CONSUMER = "subsidy_consumer"
    SUBSIDY_PRODUCER = "subsidy_producer"

    # Price controls
    PRICE_CEILING = "price_ceiling"
    PRICE_FLOOR = "price_floor"
    PRICE_MINIMUM_WAGE = "price_minimum_wage"

    # Trade measures
    TRADE_EXPORT_SUBSIDY = "trade_export_subsidy"
    TRADE_EXPORT_RESTRICTION = "trade_export_restriction"

    @property
    def policy_type(self) -> PolicyType:
        """Family the category belongs to."""
        return CATEGORY_FAMILIES[self]


CATEGORY_FAMILIES = {
    PolicyCategory.TAX_INDIRECT: PolicyType.TAX,
    PolicyCategory.TAX_INCOME: PolicyType.TAX,
    PolicyCategory.TAX_CORPORATE: PolicyType.TAX,
    PolicyCategory.TAX_TARIFF: PolicyType.TAX,
    PolicyCategory.SUBSIDY_CONSUMER: PolicyType.SUBSIDY,
    PolicyCategory.SUBSIDY_PRODUCER: PolicyType.SUBSIDY,
    PolicyCategory.PRICE_CEILING: PolicyType.PRICE_CONTROL,
    PolicyCategory.PRICE_FLOOR: PolicyType.PRICE_CONTROL,
    PolicyCategory.PRICE_MINIMUM_WAGE: PolicyType.PRICE_CONTROL,
    PolicyCategory.TRADE_EXPORT_SUBSIDY: PolicyType.TRADE,
    PolicyCategory.TRADE_EXPORT_RESTRICTION: PolicyType.TRADE,
}

POLICY_NAMES = {
    PolicyCategory.TAX_INDIRECT: "Indirect Tax (GST / Excise / Carbon Tax)",
    PolicyCategory.TAX_INCOME: "Income Tax",
    PolicyCategory.TAX_CORPORATE: "Corporate Tax",
    PolicyCategory.TAX_TARIFF: "Import Duties / Tariffs",
    PolicyCategory.SUBSIDY_CONSUMER: "Consumer Subsidy",
    PolicyCategory.SUBSIDY_PRODUCER: "Producer Subsidy",
    PolicyCategory.PRICE_CEILING: "Price Ceiling",
    PolicyCategory.PRICE_FLOOR: "Price Floor / MSP",
    PolicyCategory.PRICE_MINIMUM_WAGE: "Minimum Wage",
    PolicyCategory.TRADE_EXPORT_SUBSIDY: "Export Subsidy",
    PolicyCategory.TRADE_EXPORT_RESTRICTION: "Export Restrictions / Quotas",
}

ESSENTIAL_MARKETS = frozenset({MarketType.FUEL, MarketType.FOOD})
HIGH_ELASTICITY_MARKETS = frozenset({MarketType.ELECTRONICS})


@dataclass(frozen=True)
class PolicyInput:
    """
    One simulation request.

    Optional elasticities use ``None`` for "unknown". That is not the same
    as an elasticity of zero: both elasticity predicates are false for
    ``None``, while ``0.0`` counts as low.

    Attributes:
        market_type: Market the policy applies to
        policy_category: Policy instrument being simulated
        policy_rate: Percent-like magnitude (not range-checked)
        demand_elasticity: Price elasticity of demand (Ed)
        supply_elasticity: Price elasticity of supply (Es)
        labor_demand_elasticity: Used by the minimum wage rules only
        labor_supply_elasticity: Used by the minimum wage rules only
        quota_amount: Export quota; carried for schema compatibility, no rule reads it
        initial_price: Starting price (P0), informational
        initial_quantity: Starting quantity (Q0), informational
    """
    market_type: MarketType
    policy_category: PolicyCategory
    policy_rate: float
    demand_elasticity: Optional[float] = None
    supply_elasticity: Optional[float] = None
    labor_demand_elasticity: Optional[float] = None
    labor_supply_elasticity: Optional[float] = None
    quota_amount: Optional[float] = None
    initial_price: Optional[float] = None
    initial_quantity: Optional[float] = None

    @property
    def policy_type(self) -> Optional[PolicyType]:
        """Family of the policy category, or None for an unrecognized category."""
        return CATEGORY_FAMILIES.get(self.policy_category)

    @property
    def policy_name(self) -> str:
        """Display name of the policy category."""
        return POLICY_NAMES.get(self.policy_category, POLICY_NAMES[PolicyCategory.TAX_INDIRECT])

    def to_dict(self) -> dict:
        """Serialize using the field names of the browser schema."""
        category = self.policy_category
        return {
            "marketType": self.market_type.value,
            "policyCategory": category.value if isinstance(category, PolicyCategory) else str(category),
            "policyRate": self.policy_rate,
            "Ed": self.demand_elasticity,
            "Es": self.supply_elasticity,
            "P0": self.initial_price,
            "Q0": self.initial_quantity,
            "laborDemandElasticity": self.labor_demand_elasticity,
            "laborSupplyElasticity": self.labor_supply_elasticity,
            "quotaAmount": self.quota_amount,
        }


def is_essential_good(market: MarketType) -> bool:
    """Fuel and food are treated as essential, low-elasticity goods."""
    return market in ESSENTIAL_MARKETS


def is_high_elasticity_good(market: MarketType) -> bool:
    """Electronics are treated as high-elasticity goods."""
    return market in HIGH_ELASTICITY_MARKETS
