"""
Series Synthesis

Turns the projected deltas into chart-ready data: a 12-period straight-line
ramp from baseline to baseline + delta, and an illustrative supply/demand
curve pair nudged by policy category.

None of this simulates dynamics. The ramp is a visual interpolation and the
curve shifts exist so the chart visibly responds to the chosen instrument.
"""

from dataclasses import dataclass

import numpy as np

from .policies import PolicyCategory, PolicyInput
from .projection import ProjectedDeltas, round_half_up

PERIODS = 12

BASELINE_GDP = 100.0
BASELINE_EMPLOYMENT = 95.0
BASELINE_INFLATION = 2.0
BASELINE_REVENUE = 50.0
BASELINE_PRICE_LEVEL = 100.0

# Curve parameters
QUANTITIES = np.arange(10, 101, 10)
DEMAND_INTERCEPT = 150.0
SUPPLY_INTERCEPT = 20.0
DEFAULT_DEMAND_ELASTICITY = 0.5
DEFAULT_SUPPLY_ELASTICITY = 0.8

DEMAND_SHIFTS = {
    PolicyCategory.SUBSIDY_CONSUMER: 10.0,
    PolicyCategory.TAX_INDIRECT: -5.0,
    PolicyCategory.TAX_INCOME: -5.0,
    PolicyCategory.TAX_CORPORATE: -5.0,
    PolicyCategory.TAX_TARIFF: -5.0,
    PolicyCategory.PRICE_FLOOR: -8.0,
}

SUPPLY_SHIFTS = {
    PolicyCategory.SUBSIDY_PRODUCER: 15.0,
    PolicyCategory.PRICE_CEILING: -10.0,
}

# Marker shown when the curves never cross on the grid
DEFAULT_EQUILIBRIUM = (50.0, 60.0)


@dataclass(frozen=True)
class DataPoint:
    """One (quantity, price) point on a curve."""
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Indicator levels in one period."""
    period: int
    gdp: float
    employment: float
    inflation: float
    revenue: float

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "gdp": self.gdp,
            "employment": self.employment,
            "inflation": self.inflation,
            "revenue": self.revenue,
        }


@dataclass(frozen=True)
class SynthesizedSeries:
    """Everything the charts need besides the scalar deltas."""
    time_series: tuple[TimeSeriesPoint, ...]
    price_level: tuple[float, ...]
    demand_curve: tuple[DataPoint, ...]
    supply_curve: tuple[DataPoint, ...]


def build_time_series(deltas: ProjectedDeltas, periods: int = PERIODS) -> tuple[TimeSeriesPoint, ...]:
    """
    Linear ramp from the fixed baselines to baseline + delta.

    Period ``i`` (1-based) sits at ``i / periods`` of the way, so the last
    period carries the full delta.
    """
    points = []
    for period in range(1, periods + 1):
        progress = period / periods
        points.append(TimeSeriesPoint(
            period=period,
            gdp=round_half_up(BASELINE_GDP + deltas.gdp * progress),
            employment=round_half_up(BASELINE_EMPLOYMENT + deltas.employment * progress),
            inflation=round_half_up(BASELINE_INFLATION + deltas.inflation * progress),
            revenue=round_half_up(BASELINE_REVENUE + deltas.revenue * progress),
        ))
    return tuple(points)


def build_price_level(inflation_change: float, periods: int = PERIODS) -> tuple[float, ...]:
    """Price index ramp driven by the inflation delta (left unrounded)."""
    return tuple(
        BASELINE_PRICE_LEVEL + inflation_change * (period / periods)
        for period in range(1, periods + 1)
    )


def curve_shifts(category) -> tuple[float, float]:
    """Return the (demand, supply) shift for a category; 0 for anything unlisted."""
    if not isinstance(category, PolicyCategory):
        try:
            category = PolicyCategory(category)
        except ValueError:
            return 0.0, 0.0
    return DEMAND_SHIFTS.get(category, 0.0), SUPPLY_SHIFTS.get(category, 0.0)


def build_curves(inputs: PolicyInput) -> tuple[tuple[DataPoint, ...], tuple[DataPoint, ...]]:
    """
    Linear demand and supply curves over quantities 10..100.

    Missing elasticities fall back to Ed = 0.5 and Es = 0.8.
    """
    ed = inputs.demand_elasticity if inputs.demand_elasticity is not None else DEFAULT_DEMAND_ELASTICITY
    es = inputs.supply_elasticity if inputs.supply_elasticity is not None else DEFAULT_SUPPLY_ELASTICITY
    demand_shift, supply_shift = curve_shifts(inputs.policy_category)

    demand = DEMAND_INTERCEPT - QUANTITIES * (1 + ed * 0.2) + demand_shift
    supply = SUPPLY_INTERCEPT + QUANTITIES * (0.5 + es * 0.3) + supply_shift

    demand_curve = tuple(DataPoint(float(q), float(p)) for q, p in zip(QUANTITIES, demand))
    supply_curve = tuple(DataPoint(float(q), float(p)) for q, p in zip(QUANTITIES, supply))
    return demand_curve, supply_curve


def find_equilibrium(demand_curve, supply_curve) -> tuple[float, float]:
    """
    Locate the grid cell where demand falls through supply.

    Returns the quantity at the start of the first crossing cell and the
    midpoint of demand and supply there. Falls back to (50, 60) when the
    curves do not cross on the grid.
    """
    demand = [round_half_up(point.y) for point in demand_curve]
    supply = [round_half_up(point.y) for point in supply_curve]

    for i in range(min(len(demand), len(supply)) - 1):
        if demand[i] >= supply[i] and demand[i + 1] <= supply[i + 1]:
            return demand_curve[i].x, (demand[i] + supply[i]) / 2

    return DEFAULT_EQUILIBRIUM


def synthesize(deltas: ProjectedDeltas, inputs: PolicyInput) -> SynthesizedSeries:
    """
    Build the time series, price level and curves for one run.

    Args:
        deltas: Projected scalar deltas
        inputs: The policy configuration (elasticities and category only)

    Returns:
        SynthesizedSeries with 12 periods and 10-point curves
    """
    demand_curve, supply_curve = build_curves(inputs)
    return SynthesizedSeries(
        time_series=build_time_series(deltas),
        price_level=build_price_level(deltas.inflation),
        demand_curve=demand_curve,
        supply_curve=supply_curve,
    )
