"""
EconSim: Economic Policy Impact Simulator

A rule-based engine that turns a policy configuration (tax, subsidy,
price control or trade measure) into a qualitative impact narrative,
numeric indicator deltas, synthetic time series and supply/demand curves.
"""

from .policies import (
    MarketType,
    PolicyType,
    PolicyCategory,
    PolicyInput,
)
from .impacts import ImpactLevel, ImpactItem, ImpactSection, PolicyImpactResult
from .classifier import classify
from .projection import ProjectedDeltas, project
from .series import DataPoint, TimeSeriesPoint, SynthesizedSeries, synthesize, find_equilibrium
from .simulation import (
    POLICY_CONFIGS,
    PolicyConfig,
    PolicyParameter,
    SimulationOutput,
    SimulationResult,
    default_parameters,
    map_to_policy_input,
    run,
    run_simulation,
)
from .reporting import SimulationReport

__version__ = "1.0.0"
__all__ = [
    "MarketType",
    "PolicyType",
    "PolicyCategory",
    "PolicyInput",
    "ImpactLevel",
    "ImpactItem",
    "ImpactSection",
    "PolicyImpactResult",
    "classify",
    "ProjectedDeltas",
    "project",
    "DataPoint",
    "TimeSeriesPoint",
    "SynthesizedSeries",
    "synthesize",
    "find_equilibrium",
    "POLICY_CONFIGS",
    "PolicyConfig",
    "PolicyParameter",
    "SimulationOutput",
    "SimulationResult",
    "default_parameters",
    "map_to_policy_input",
    "run",
    "run_simulation",
    "SimulationReport",
]
