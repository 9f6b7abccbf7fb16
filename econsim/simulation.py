"""
Simulation Orchestrator

Turns raw sidebar parameters into a PolicyInput and runs the engine:
classify -> project -> synthesize, returning one immutable SimulationResult.
Also defines the policy form catalogue the sidebar is generated from.
"""

import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal, Mapping, Optional, Union

from .classifier import classify
from .impacts import PolicyImpactResult
from .policies import MarketType, PolicyCategory, PolicyInput, PolicyType
from .projection import ProjectedDeltas, project
from .series import DataPoint, TimeSeriesPoint, synthesize

logger = logging.getLogger(__name__)

DEFAULT_MARKET = MarketType.FUEL
DEFAULT_RATE = 15.0

# Raw parameter keys -> optional PolicyInput fields
OPTIONAL_NUMERIC_PARAMETERS = {
    "Ed": "demand_elasticity",
    "Es": "supply_elasticity",
    "P0": "initial_price",
    "Q0": "initial_quantity",
    "laborDemandElasticity": "labor_demand_elasticity",
    "laborSupplyElasticity": "labor_supply_elasticity",
    "quota": "quota_amount",
}


# =============================================================================
# FORM CATALOGUE
# =============================================================================

@dataclass(frozen=True)
class PolicyParameter:
    """
    One sidebar control.

    Attributes:
        id: Raw parameter key passed to ``run``
        name: Label shown to the user
        kind: "range" (slider), "select" or "number"
        value: Default value
        min, max, step: Numeric bounds for range/number controls
        options: (value, label) pairs for select controls
        unit: Unit suffix shown next to the value
    """
    id: str
    name: str
    kind: Literal["number", "select", "range"]
    value: Union[float, str]
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    options: tuple[tuple[str, str], ...] = ()
    unit: str = ""


@dataclass(frozen=True)
class PolicyConfig:
    """Sidebar form for one policy family."""
    type: PolicyType
    name: str
    description: str
    parameters: tuple[PolicyParameter, ...] = field(default_factory=tuple)


MARKET_OPTIONS = (
    ("fuel", "Fuel"),
    ("food", "Food"),
    ("electronics", "Electronics"),
    ("agriculture", "Agriculture"),
)

POLICY_CONFIGS: tuple[PolicyConfig, ...] = (
    PolicyConfig(
        type=PolicyType.TAX,
        name="Tax Policy",
        description="Analyze effects of taxation on economic indicators",
        parameters=(
            PolicyParameter("taxType", "Tax Type", "select", "indirect", options=(
                ("indirect", "Indirect Tax (GST/Excise)"),
                ("income", "Income Tax"),
                ("corporate", "Corporate Tax"),
                ("tariff", "Import Duties/Tariffs"),
            )),
            PolicyParameter("rate", "Tax Rate", "range", 15, min=0, max=50, step=1, unit="%"),
            PolicyParameter("market", "Market Type", "select", "fuel", options=(
                ("fuel", "Fuel (Low Elasticity)"),
                ("food", "Food (Low Elasticity)"),
                ("electronics", "Electronics (High Elasticity)"),
                ("agriculture", "Agriculture"),
            )),
            PolicyParameter("Ed", "Demand Elasticity (Ed)", "range", 0.5, min=0.1, max=2, step=0.1),
            PolicyParameter("Es", "Supply Elasticity (Es)", "range", 0.8, min=0.1, max=2, step=0.1),
        ),
    ),
    PolicyConfig(
        type=PolicyType.SUBSIDY,
        name="Subsidy Policy",
        description="Model government subsidy programs",
        parameters=(
            PolicyParameter("subsidyType", "Subsidy Type", "select", "consumer", options=(
                ("consumer", "Consumer Subsidy"),
                ("producer", "Producer Subsidy"),
            )),
            PolicyParameter("rate", "Subsidy Rate", "range", 20, min=0, max=50, step=1, unit="%"),
            PolicyParameter("market", "Market Type", "select", "food", options=MARKET_OPTIONS),
            PolicyParameter("Es", "Supply Elasticity (Es)", "range", 1.2, min=0.1, max=2, step=0.1),
        ),
    ),
    PolicyConfig(
        type=PolicyType.PRICE_CONTROL,
        name="Price Control",
        description="Evaluate price floors and ceilings",
        parameters=(
            PolicyParameter("controlType", "Control Type", "select", "ceiling", options=(
                ("ceiling", "Price Ceiling"),
                ("floor", "Price Floor / MSP"),
                ("minimum_wage", "Minimum Wage"),
            )),
            PolicyParameter("rate", "Rate/Amount", "range", 20, min=0, max=50, step=1, unit="%"),
            PolicyParameter("market", "Market Type", "select", "food", options=MARKET_OPTIONS),
            PolicyParameter("Ed", "Demand Elasticity (Ed)", "range", 0.6, min=0.1, max=2, step=0.1),
            PolicyParameter("Es", "Supply Elasticity (Es)", "range", 1.0, min=0.1, max=2, step=0.1),
            PolicyParameter(
                "laborDemandElasticity", "Labor Demand Elasticity", "range", 0.7, min=0.1, max=2, step=0.1
            ),
        ),
    ),
    PolicyConfig(
        type=PolicyType.TRADE,
        name="Trade Policy",
        description="Simulate export subsidies and restrictions",
        parameters=(
            PolicyParameter("tradeType", "Trade Type", "select", "export_subsidy", options=(
                ("export_subsidy", "Export Subsidy"),
                ("export_restriction", "Export Restriction / Quota"),
            )),
            PolicyParameter("rate", "Rate", "range", 15, min=0, max=50, step=1, unit="%"),
            PolicyParameter("quota", "Quota Amount", "number", 1000, min=0, max=10000, unit="units"),
            PolicyParameter("market", "Market Type", "select", "agriculture", options=MARKET_OPTIONS),
        ),
    ),
)


def get_policy_config(policy_type: Union[PolicyType, str]) -> PolicyConfig:
    """Return the form definition for a policy family (tax form for unknown families)."""
    resolved = resolve_policy_type(policy_type)
    for config in POLICY_CONFIGS:
        if config.type == resolved:
            return config
    return POLICY_CONFIGS[0]


def default_parameters(policy_type: Union[PolicyType, str]) -> dict[str, Union[float, str]]:
    """Default raw parameters for a policy family, keyed by parameter id."""
    return {param.id: param.value for param in get_policy_config(policy_type).parameters}


# =============================================================================
# PARAMETER COERCION
# =============================================================================

def resolve_policy_type(value: Union[PolicyType, str, None]) -> Optional[PolicyType]:
    """Return the PolicyType for an enum member or its string value, else None."""
    if isinstance(value, PolicyType):
        return value
    try:
        return PolicyType(value)
    except ValueError:
        return None


def resolve_category(policy_type: Union[PolicyType, str], params: Mapping[str, Any]) -> PolicyCategory:
    """
    Resolve the policy category from a family plus its subtype parameter.

    Unknown subtypes fall back to the family's first category; an unknown
    family falls back to indirect tax.
    """
    resolved = resolve_policy_type(policy_type)

    if resolved is PolicyType.TAX:
        tax_type = params.get("taxType")
        if tax_type == "income":
            return PolicyCategory.TAX_INCOME
        if tax_type == "corporate":
            return PolicyCategory.TAX_CORPORATE
        if tax_type == "tariff":
            return PolicyCategory.TAX_TARIFF
        return PolicyCategory.TAX_INDIRECT

    if resolved is PolicyType.SUBSIDY:
        if params.get("subsidyType") == "producer":
            return PolicyCategory.SUBSIDY_PRODUCER
        return PolicyCategory.SUBSIDY_CONSUMER

    if resolved is PolicyType.PRICE_CONTROL:
        control_type = params.get("controlType")
        if control_type == "floor":
            return PolicyCategory.PRICE_FLOOR
        if control_type == "minimum_wage":
            return PolicyCategory.PRICE_MINIMUM_WAGE
        return PolicyCategory.PRICE_CEILING

    if resolved is PolicyType.TRADE:
        if params.get("tradeType") == "export_restriction":
            return PolicyCategory.TRADE_EXPORT_RESTRICTION
        return PolicyCategory.TRADE_EXPORT_SUBSIDY

    logger.warning(f"Unrecognized policy type {policy_type!r}; using indirect tax")
    return PolicyCategory.TAX_INDIRECT


def resolve_market(value: Any) -> MarketType:
    """Return the MarketType for a raw value, falling back to fuel."""
    if isinstance(value, MarketType):
        return value
    if value in (None, ""):
        return DEFAULT_MARKET
    try:
        return MarketType(value)
    except ValueError:
        logger.warning(f"Unrecognized market type {value!r}; using {DEFAULT_MARKET.value}")
        return DEFAULT_MARKET


def _optional_float(value: Any) -> Optional[float]:
    """Coerce a raw numeric parameter; missing or blank values stay None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return float(value)


def map_to_policy_input(policy_type: Union[PolicyType, str], params: Mapping[str, Any]) -> PolicyInput:
    """
    Build a PolicyInput from raw sidebar parameters.

    Args:
        policy_type: Policy family (enum or its string value)
        params: Raw parameters keyed by the ids in POLICY_CONFIGS

    Returns:
        Validated, immutable PolicyInput
    """
    rate = _optional_float(params.get("rate"))
    optional_fields = {
        field_name: _optional_float(params.get(key))
        for key, field_name in OPTIONAL_NUMERIC_PARAMETERS.items()
    }

    return PolicyInput(
        market_type=resolve_market(params.get("market")),
        policy_category=resolve_category(policy_type, params),
        policy_rate=DEFAULT_RATE if rate is None else rate,
        **optional_fields,
    )


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class SimulationOutput:
    """Numeric outputs of one run."""
    gdp_change: float
    employment_change: float
    inflation_change: float
    revenue_change: float
    welfare_change: float
    price_level: tuple[float, ...]
    demand_curve: tuple[DataPoint, ...]
    supply_curve: tuple[DataPoint, ...]
    time_series: tuple[TimeSeriesPoint, ...]

    @property
    def deltas(self) -> ProjectedDeltas:
        return ProjectedDeltas(
            gdp=self.gdp_change,
            employment=self.employment_change,
            inflation=self.inflation_change,
            revenue=self.revenue_change,
            welfare=self.welfare_change,
        )

    def to_dict(self) -> dict:
        return {
            **self.deltas.to_dict(),
            "priceLevel": list(self.price_level),
            "demandCurve": [point.to_dict() for point in self.demand_curve],
            "supplyCurve": [point.to_dict() for point in self.supply_curve],
            "timeSeriesData": [point.to_dict() for point in self.time_series],
        }


@dataclass(frozen=True)
class SimulationResult:
    """
    Complete, immutable record of one simulation run.

    Only ``id`` and ``timestamp`` differ between two runs with the same inputs.
    """
    id: str
    policy_type: PolicyType
    policy_category: PolicyCategory
    timestamp: datetime
    inputs: PolicyInput
    impacts: PolicyImpactResult
    outputs: SimulationOutput

    @property
    def short_id(self) -> str:
        return self.id[:8]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "policyType": self.policy_type.value,
            "policyCategory": self.policy_category.value,
            "timestamp": self.timestamp.isoformat(),
            "inputs": self.inputs.to_dict(),
            "impacts": self.impacts.to_dict(),
            "outputs": self.outputs.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def run(policy_type: Union[PolicyType, str], parameters: Mapping[str, Any]) -> SimulationResult:
    """
    Run one simulation.

    Args:
        policy_type: Policy family selected in the sidebar
        parameters: Raw parameter values keyed by parameter id

    Returns:
        Immutable SimulationResult stamped with a fresh id and UTC timestamp
    """
    inputs = map_to_policy_input(policy_type, parameters)
    impacts = classify(inputs)
    deltas = project(impacts, inputs)
    series = synthesize(deltas, inputs)

    result = SimulationResult(
        id=uuid.uuid4().hex,
        policy_type=inputs.policy_category.policy_type,
        policy_category=inputs.policy_category,
        timestamp=datetime.now(timezone.utc),
        inputs=inputs,
        impacts=impacts,
        outputs=SimulationOutput(
            gdp_change=deltas.gdp,
            employment_change=deltas.employment,
            inflation_change=deltas.inflation,
            revenue_change=deltas.revenue,
            welfare_change=deltas.welfare,
            price_level=series.price_level,
            demand_curve=series.demand_curve,
            supply_curve=series.supply_curve,
            time_series=series.time_series,
        ),
    )

    logger.info(
        f"Simulation {result.short_id}: {impacts.policy_name} at {inputs.policy_rate:g}% "
        f"(GDP {deltas.gdp:+.2f}, employment {deltas.employment:+.2f}, "
        f"inflation {deltas.inflation:+.2f})"
    )
    return result


run_simulation = run
