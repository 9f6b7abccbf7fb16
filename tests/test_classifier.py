"""
Tests for the rule-based impact classifier.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from econsim.classifier import (
    RULES,
    classify,
    is_high_elasticity,
    is_low_elasticity,
)
from econsim.impacts import ImpactLevel, SECTION_ROLES
from econsim.policies import MarketType, PolicyCategory, PolicyInput


def _levels(section):
    return {item.effect: item.level for item in section.items}


# =============================================================================
# DISPATCH & COVERAGE
# =============================================================================

class TestCategoryCoverage:
    """Every category has a rule and yields four non-empty sections."""

    def test_rules_cover_every_category(self):
        assert set(RULES) == set(PolicyCategory)

    @pytest.mark.parametrize("category", list(PolicyCategory))
    def test_four_sections_in_fixed_order(self, category, make_input):
        result = classify(make_input(category))

        titles = [section.title for section in result.sections]
        assert titles == ["Consumer Impact", "Producer Impact", "Worker Impact", "Macro Indicators"]
        assert len(result.sections) == len(SECTION_ROLES)
        for section in result.sections:
            assert section.items
            assert section.recommendation

    @pytest.mark.parametrize("category", list(PolicyCategory))
    def test_result_carries_category(self, category, make_input):
        result = classify(make_input(category))
        assert result.policy_category == category

    def test_unknown_category_falls_back_to_indirect_tax(self, caplog):
        bogus = PolicyInput(market_type=MarketType.FUEL, policy_category="not_a_policy", policy_rate=20)
        reference = PolicyInput(market_type=MarketType.FUEL, policy_category=PolicyCategory.TAX_INDIRECT,
                                policy_rate=20)

        with caplog.at_level("WARNING"):
            result = classify(bogus)

        assert result == classify(reference)
        assert "falling back" in caplog.text

    def test_category_string_value_is_accepted(self):
        as_string = PolicyInput(market_type=MarketType.FOOD, policy_category="price_floor", policy_rate=20)
        assert classify(as_string).policy_category == PolicyCategory.PRICE_FLOOR


# =============================================================================
# ELASTICITY PREDICATES
# =============================================================================

class TestElasticityPredicates:
    """None is unknown, not zero."""

    def test_none_is_neither_low_nor_high(self):
        assert not is_low_elasticity(None)
        assert not is_high_elasticity(None)

    def test_zero_counts_as_low(self):
        assert is_low_elasticity(0.0)

    def test_boundary_at_one(self):
        assert is_low_elasticity(0.99)
        assert not is_low_elasticity(1.0)
        assert is_high_elasticity(1.0)


# =============================================================================
# TAX RULES
# =============================================================================

class TestIndirectTax:
    """Incidence branches of the indirect tax rule."""

    def test_essential_good_with_unknown_elasticity(self, food_indirect_tax):
        consumer = classify(food_indirect_tax).consumer

        assert [(item.effect, item.level) for item in consumer.items] == [
            ("Prices increase significantly", ImpactLevel.STRONG_NEGATIVE),
            ("Consumption decreases slightly", ImpactLevel.NEGATIVE),
            ("Welfare decreases significantly", ImpactLevel.STRONG_NEGATIVE),
        ]

    def test_elastic_market_gets_substitution_branch(self, make_input):
        result = classify(make_input(PolicyCategory.TAX_INDIRECT, market=MarketType.ELECTRONICS, rate=10))
        levels = _levels(result.consumer)

        assert levels["Consumption decreases significantly"] == ImpactLevel.STRONG_NEGATIVE
        assert levels["Substitution to alternatives increases"] == ImpactLevel.POSITIVE

    def test_low_supply_elasticity_compresses_margins(self, make_input):
        result = classify(make_input(PolicyCategory.TAX_INDIRECT, supply_elasticity=0.5))
        assert "Profit margins decrease slightly" in _levels(result.producer)

    def test_unknown_supply_elasticity_takes_elastic_branch(self, make_input):
        result = classify(make_input(PolicyCategory.TAX_INDIRECT))
        assert _levels(result.producer)["Output decreases more significantly"] == ImpactLevel.STRONG_NEGATIVE

    def test_rate_threshold_is_strict(self, make_input):
        at_threshold = classify(make_input(PolicyCategory.TAX_INDIRECT, rate=15, market=MarketType.FOOD))
        above = classify(make_input(PolicyCategory.TAX_INDIRECT, rate=16, market=MarketType.FOOD))

        assert "Moderate employment effects" in _levels(at_threshold.worker)
        assert _levels(above.worker)["Stronger job losses in affected sectors"] == ImpactLevel.STRONG_NEGATIVE


class TestRateThresholds:
    """Category-specific 'high rate' switches."""

    @pytest.mark.parametrize(
        "category, section, effect, threshold",
        [
            (PolicyCategory.TAX_INCOME, "consumer", "Disposable income decreases", 25),
            (PolicyCategory.TAX_CORPORATE, "producer", "Post-tax profits decrease", 20),
            (PolicyCategory.TAX_TARIFF, "consumer", "Imported goods prices increase", 20),
        ],
    )
    def test_tax_severity_switches_above_threshold(self, make_input, category, section, effect, threshold):
        at = _levels(getattr(classify(make_input(category, rate=threshold)), section))
        above = _levels(getattr(classify(make_input(category, rate=threshold + 1)), section))

        assert at[effect] == ImpactLevel.NEGATIVE
        assert above[effect] == ImpactLevel.STRONG_NEGATIVE

    @pytest.mark.parametrize(
        "category, section, effect, threshold",
        [
            (PolicyCategory.SUBSIDY_CONSUMER, "consumer", "Effective prices decrease", 20),
            (PolicyCategory.SUBSIDY_PRODUCER, "consumer", "Prices decrease", 20),
            (PolicyCategory.TRADE_EXPORT_SUBSIDY, "producer", "Export profits increase", 15),
        ],
    )
    def test_subsidy_strength_switches_above_threshold(self, make_input, category, section, effect, threshold):
        at = _levels(getattr(classify(make_input(category, rate=threshold)), section))
        above = _levels(getattr(classify(make_input(category, rate=threshold + 1)), section))

        assert at[effect] == ImpactLevel.POSITIVE
        assert above[effect] == ImpactLevel.STRONG_POSITIVE


# =============================================================================
# SUBSIDIES, PRICE CONTROLS, TRADE
# =============================================================================

class TestSupplyElasticityRules:
    """Rules keyed on supply elasticity."""

    def test_producer_subsidy_output(self, make_input):
        elastic = classify(make_input(PolicyCategory.SUBSIDY_PRODUCER, supply_elasticity=1.2))
        inelastic = classify(make_input(PolicyCategory.SUBSIDY_PRODUCER, supply_elasticity=0.6))

        assert _levels(elastic.producer)["Output increases"] == ImpactLevel.STRONG_POSITIVE
        assert _levels(inelastic.producer)["Output increases"] == ImpactLevel.POSITIVE

    def test_price_ceiling_output(self, make_input):
        elastic = classify(make_input(PolicyCategory.PRICE_CEILING, supply_elasticity=1.0))
        unknown = classify(make_input(PolicyCategory.PRICE_CEILING))

        assert _levels(elastic.producer)["Output decreases"] == ImpactLevel.STRONG_NEGATIVE
        assert _levels(unknown.producer)["Output decreases"] == ImpactLevel.NEGATIVE

    def test_price_floor_surplus(self, make_input):
        elastic = classify(make_input(PolicyCategory.PRICE_FLOOR, supply_elasticity=1.5))
        assert _levels(elastic.producer)["Surplus increases"] == ImpactLevel.STRONG_POSITIVE


class TestMinimumWage:
    """Labor demand elasticity and rate drive the minimum wage rule."""

    def test_elastic_labor_demand(self, make_input):
        result = classify(make_input(PolicyCategory.PRICE_MINIMUM_WAGE, labor_demand_elasticity=1.2))

        assert _levels(result.producer)["Hiring decreases"] == ImpactLevel.STRONG_NEGATIVE
        assert _levels(result.worker)["Unemployment may increase"] == ImpactLevel.STRONG_NEGATIVE
        assert "automation" in result.producer.recommendation

    def test_inelastic_labor_demand_below_threshold(self, make_input):
        result = classify(make_input(PolicyCategory.PRICE_MINIMUM_WAGE, rate=30, labor_demand_elasticity=0.7))

        assert _levels(result.producer)["Hiring decreases"] == ImpactLevel.NEGATIVE
        assert _levels(result.worker)["Unemployment may increase"] == ImpactLevel.NEGATIVE
        assert "moderate" in result.producer.recommendation

    def test_high_rate_raises_unemployment_risk(self, make_input):
        result = classify(make_input(PolicyCategory.PRICE_MINIMUM_WAGE, rate=31, labor_demand_elasticity=0.7))
        assert _levels(result.worker)["Unemployment may increase"] == ImpactLevel.STRONG_NEGATIVE


class TestExportRestriction:
    """The export restriction narrative is fixed."""

    def test_quota_and_rate_do_not_change_narrative(self, make_input):
        small = classify(make_input(PolicyCategory.TRADE_EXPORT_RESTRICTION, rate=5, quota_amount=10))
        large = classify(make_input(PolicyCategory.TRADE_EXPORT_RESTRICTION, rate=50, quota_amount=9000))
        assert small == large


class TestDeterminism:
    """Same input, same narrative."""

    @pytest.mark.parametrize("category", list(PolicyCategory))
    def test_repeated_classification_is_identical(self, category, make_input):
        policy = make_input(category, demand_elasticity=0.4, supply_elasticity=1.3)
        assert classify(policy) == classify(policy)
