"""
Numeric Projection

Converts the qualitative impact narrative into five scalar deltas by
scoring the impact levels of keyword-matched effects and scaling by the
policy rate.

The keyword match runs on effect text, so the classifier's wording and the
keyword lists below are coupled: an effect counts toward GDP only because
its sentence mentions "gdp".
"""

import math
from dataclasses import dataclass

from .impacts import PolicyImpactResult
from .policies import PolicyInput

GDP_KEYWORDS = ("gdp",)
EMPLOYMENT_KEYWORDS = ("employment", "hiring")
WORKER_EMPLOYMENT_KEYWORDS = ("employment", "hiring", "job")
INFLATION_KEYWORDS = ("inflation",)
REVENUE_KEYWORDS = ("revenue",)

CONSUMER_WELFARE_WEIGHT = 0.5

# Per-metric scale applied after the rate multiplier
GDP_SCALE = 1.5
EMPLOYMENT_SCALE = 0.8
INFLATION_SCALE = 0.5
REVENUE_SCALE = 3.0
WELFARE_SCALE = 2.0


@dataclass(frozen=True)
class SectionScores:
    """Raw accumulators before rate scaling."""
    gdp: float = 0.0
    employment: float = 0.0
    inflation: float = 0.0
    revenue: float = 0.0
    welfare: float = 0.0


@dataclass(frozen=True)
class ProjectedDeltas:
    """Final scalar deltas shown in the metric cards."""
    gdp: float
    employment: float
    inflation: float
    revenue: float
    welfare: float

    def to_dict(self) -> dict:
        return {
            "gdpChange": self.gdp,
            "employmentChange": self.employment,
            "inflationChange": self.inflation,
            "revenueChange": self.revenue,
            "welfareChange": self.welfare,
        }


def round_half_up(value: float, ndigits: int = 2) -> float:
    """
    Round like JavaScript's ``Math.round(value * 10**n) / 10**n``.

    Ties go toward positive infinity (-2.5 -> -2, 2.5 -> 3), unlike the
    built-in round which rounds ties to even.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def rate_multiplier(policy_rate: float) -> float:
    """Scale factor ``min(rate / 100, 1)``. Caps amplification, not direction."""
    return min(policy_rate / 100, 1)


def _mentions(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def score_sections(impacts: PolicyImpactResult) -> SectionScores:
    """
    Accumulate level scores from the macro, worker and consumer sections.

    Macro effects feed GDP, employment, inflation and revenue by keyword
    (an effect may feed several). Rising inflation is labeled negative, so
    the inflation accumulator subtracts the score. Worker effects about
    employment, hiring or jobs add to the same employment accumulator.
    Every consumer effect adds half its score to welfare.
    """
    gdp = employment = inflation = revenue = welfare = 0.0

    for item in impacts.macro.items:
        effect = item.effect.lower()
        score = item.level.score

        if _mentions(effect, GDP_KEYWORDS):
            gdp += score
        if _mentions(effect, EMPLOYMENT_KEYWORDS):
            employment += score
        if _mentions(effect, INFLATION_KEYWORDS):
            inflation -= score
        if _mentions(effect, REVENUE_KEYWORDS):
            revenue += score

    for item in impacts.consumer.items:
        welfare += item.level.score * CONSUMER_WELFARE_WEIGHT

    for item in impacts.worker.items:
        if _mentions(item.effect.lower(), WORKER_EMPLOYMENT_KEYWORDS):
            employment += item.level.score

    return SectionScores(
        gdp=gdp,
        employment=employment,
        inflation=inflation,
        revenue=revenue,
        welfare=welfare,
    )


def project(impacts: PolicyImpactResult, inputs: PolicyInput) -> ProjectedDeltas:
    """
    Project the impact narrative onto numeric deltas.

    Args:
        impacts: Classifier output for the policy
        inputs: The policy configuration (only the rate is read)

    Returns:
        GDP, employment, inflation, revenue and welfare deltas rounded to 2 decimals
    """
    scores = score_sections(impacts)
    multiplier = rate_multiplier(inputs.policy_rate)

    return ProjectedDeltas(
        gdp=round_half_up(scores.gdp * multiplier * GDP_SCALE),
        employment=round_half_up(scores.employment * multiplier * EMPLOYMENT_SCALE),
        inflation=round_half_up(scores.inflation * multiplier * INFLATION_SCALE),
        revenue=round_half_up(scores.revenue * multiplier * REVENUE_SCALE),
        welfare=round_half_up(scores.welfare * multiplier * WELFARE_SCALE),
    )
