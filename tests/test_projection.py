"""
Tests for the numeric projection of impact narratives.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from econsim.classifier import classify
from econsim.impacts import LEVEL_SCORES, ImpactLevel, ImpactSection, PolicyImpactResult, items
from econsim.policies import MarketType, PolicyCategory
from econsim.projection import project, rate_multiplier, round_half_up, score_sections


def _empty(title):
    return ImpactSection(title, (), "")


def _impacts(consumer=(), worker=(), macro=()):
    return PolicyImpactResult(
        policy_category=PolicyCategory.TAX_INDIRECT,
        policy_name="Test",
        consumer=ImpactSection("Consumer Impact", items(*consumer), ""),
        producer=_empty("Producer Impact"),
        worker=ImpactSection("Worker Impact", items(*worker), ""),
        macro=ImpactSection("Macro Indicators", items(*macro), ""),
    )


# =============================================================================
# HELPERS
# =============================================================================

class TestRounding:
    """Half-up rounding to two decimals."""

    def test_ties_round_toward_positive_infinity(self):
        assert round_half_up(0.125) == 0.13
        assert round_half_up(-0.125) == -0.12

    def test_plain_values(self):
        assert round_half_up(1.234) == 1.23
        assert round_half_up(-1.236) == -1.24
        assert round_half_up(2.0) == 2.0


class TestRateMultiplier:
    """min(rate / 100, 1)."""

    def test_caps_at_one(self):
        assert rate_multiplier(150) == 1
        assert rate_multiplier(100) == 1

    def test_scales_below_cap(self):
        assert rate_multiplier(20) == pytest.approx(0.2)

    def test_negative_rate_is_not_clamped(self):
        assert rate_multiplier(-10) == pytest.approx(-0.1)


# =============================================================================
# SCORING
# =============================================================================

class TestLevelScores:
    """Level-to-score mapping."""

    def test_mapping(self):
        assert LEVEL_SCORES == {
            ImpactLevel.STRONG_POSITIVE: 2,
            ImpactLevel.POSITIVE: 1,
            ImpactLevel.NEUTRAL: 0,
            ImpactLevel.NEGATIVE: -1,
            ImpactLevel.STRONG_NEGATIVE: -2,
        }

    def test_enum_property_matches_mapping(self):
        for level, score in LEVEL_SCORES.items():
            assert level.score == score


class TestScoreSections:
    """Keyword routing into the accumulators."""

    def test_macro_keywords_are_case_insensitive(self):
        scores = score_sections(_impacts(macro=[("GDP increases", ImpactLevel.POSITIVE)]))
        assert scores.gdp == 1

    def test_inflation_subtracts(self):
        scores = score_sections(_impacts(macro=[("Inflation increases", ImpactLevel.NEGATIVE)]))
        assert scores.inflation == 1

    def test_one_effect_can_feed_several_metrics(self):
        scores = score_sections(_impacts(macro=[("GDP and employment rise", ImpactLevel.POSITIVE)]))
        assert scores.gdp == 1
        assert scores.employment == 1

    def test_macro_job_keyword_is_ignored(self):
        scores = score_sections(_impacts(macro=[("Job creation", ImpactLevel.POSITIVE)]))
        assert scores.employment == 0

    def test_worker_job_keyword_counts(self):
        scores = score_sections(_impacts(worker=[
            ("Job creation in manufacturing", ImpactLevel.POSITIVE),
            ("Wage growth decelerates", ImpactLevel.NEGATIVE),
            ("Hiring slows", ImpactLevel.NEGATIVE),
        ]))
        assert scores.employment == 0

    def test_consumer_items_feed_welfare_at_half_weight(self):
        scores = score_sections(_impacts(consumer=[
            ("Prices increase", ImpactLevel.STRONG_NEGATIVE),
            ("Anything", ImpactLevel.POSITIVE),
        ]))
        assert scores.welfare == pytest.approx(-0.5)


# =============================================================================
# PROJECTION
# =============================================================================

class TestProject:
    """End-to-end projection of classifier output."""

    def test_indirect_tax_on_food(self, make_input):
        policy = make_input(PolicyCategory.TAX_INDIRECT, rate=20, market=MarketType.FOOD)
        deltas = project(classify(policy), policy)

        assert deltas.gdp == pytest.approx(-0.3)
        assert deltas.employment == pytest.approx(-0.64)
        assert deltas.inflation == pytest.approx(0.1)
        assert deltas.revenue == pytest.approx(0.6)
        assert deltas.welfare == pytest.approx(-1.0)

    def test_consumer_subsidy(self, make_input):
        policy = make_input(PolicyCategory.SUBSIDY_CONSUMER, rate=30, market=MarketType.FOOD)
        deltas = project(classify(policy), policy)

        assert deltas.gdp == pytest.approx(0.45)
        assert deltas.employment == pytest.approx(0.48)
        assert deltas.inflation == pytest.approx(0.15)
        assert deltas.revenue == 0
        assert deltas.welfare == pytest.approx(1.2)

    def test_zero_rate_gives_zero_deltas(self, make_input):
        policy = make_input(PolicyCategory.TAX_TARIFF, rate=0)
        deltas = project(classify(policy), policy)

        for value in deltas.to_dict().values():
            assert value == 0

    def test_rates_above_100_are_capped(self, make_input):
        at_cap = make_input(PolicyCategory.PRICE_CEILING, rate=100)
        above = make_input(PolicyCategory.PRICE_CEILING, rate=250)
        assert project(classify(at_cap), at_cap) == project(classify(above), above)

    @pytest.mark.parametrize("category", list(PolicyCategory))
    def test_rate_scaling_is_monotone(self, category, make_input):
        low = make_input(category, rate=10, market=MarketType.AGRICULTURE)
        high = make_input(category, rate=20, market=MarketType.AGRICULTURE)

        low_deltas = project(classify(low), low).to_dict()
        high_deltas = project(classify(high), high).to_dict()

        for key, value in low_deltas.items():
            assert abs(high_deltas[key]) >= abs(value)
            if value != 0 and high_deltas[key] != 0:
                assert (value > 0) == (high_deltas[key] > 0)

    def test_deltas_have_two_decimals(self, make_input):
        policy = make_input(PolicyCategory.TAX_INCOME, rate=37)
        for value in project(classify(policy), policy).to_dict().values():
            assert round(value, 2) == pytest.approx(value)
