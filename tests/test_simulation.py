"""
Tests for the simulation orchestrator and the policy form catalogue.
"""

import json
import sys
from datetime import timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from econsim.policies import MarketType, PolicyCategory, PolicyType
from econsim.simulation import (
    POLICY_CONFIGS,
    default_parameters,
    get_policy_config,
    map_to_policy_input,
    resolve_category,
    run,
    run_simulation,
)


# =============================================================================
# PARAMETER MAPPING
# =============================================================================

class TestCategoryResolution:
    """Family + subtype key -> category."""

    @pytest.mark.parametrize(
        "policy_type, params, expected",
        [
            ("tax", {"taxType": "income"}, PolicyCategory.TAX_INCOME),
            ("tax", {"taxType": "corporate"}, PolicyCategory.TAX_CORPORATE),
            ("tax", {"taxType": "tariff"}, PolicyCategory.TAX_TARIFF),
            ("tax", {"taxType": "indirect"}, PolicyCategory.TAX_INDIRECT),
            ("tax", {}, PolicyCategory.TAX_INDIRECT),
            ("subsidy", {"subsidyType": "producer"}, PolicyCategory.SUBSIDY_PRODUCER),
            ("subsidy", {"subsidyType": "???"}, PolicyCategory.SUBSIDY_CONSUMER),
            ("price_control", {"controlType": "floor"}, PolicyCategory.PRICE_FLOOR),
            ("price_control", {"controlType": "minimum_wage"}, PolicyCategory.PRICE_MINIMUM_WAGE),
            ("price_control", {}, PolicyCategory.PRICE_CEILING),
            ("trade", {"tradeType": "export_restriction"}, PolicyCategory.TRADE_EXPORT_RESTRICTION),
            ("trade", {}, PolicyCategory.TRADE_EXPORT_SUBSIDY),
            (PolicyType.TRADE, {"tradeType": "export_restriction"}, PolicyCategory.TRADE_EXPORT_RESTRICTION),
        ],
    )
    def test_resolution(self, policy_type, params, expected):
        assert resolve_category(policy_type, params) == expected

    def test_unknown_family_falls_back_to_indirect_tax(self, caplog):
        with caplog.at_level("WARNING"):
            assert resolve_category("fiscal_magic", {}) == PolicyCategory.TAX_INDIRECT
        assert "fiscal_magic" in caplog.text


class TestParameterCoercion:
    """Raw sidebar values -> PolicyInput."""

    def test_missing_market_and_rate_use_defaults(self):
        policy = map_to_policy_input("tax", {})
        assert policy.market_type == MarketType.FUEL
        assert policy.policy_rate == 15

    def test_blank_rate_uses_default(self):
        assert map_to_policy_input("tax", {"rate": "  "}).policy_rate == 15

    def test_zero_rate_is_kept(self):
        assert map_to_policy_input("tax", {"rate": 0}).policy_rate == 0

    def test_unknown_market_falls_back_to_fuel(self):
        assert map_to_policy_input("subsidy", {"market": "spices"}).market_type == MarketType.FUEL

    def test_numeric_strings_are_coerced(self):
        policy = map_to_policy_input("price_control", {
            "rate": "25",
            "Ed": "0.6",
            "Es": "1.0",
            "laborDemandElasticity": "0.7",
            "P0": "100",
            "Q0": 50,
        })
        assert policy.policy_rate == 25.0
        assert policy.demand_elasticity == pytest.approx(0.6)
        assert policy.supply_elasticity == pytest.approx(1.0)
        assert policy.labor_demand_elasticity == pytest.approx(0.7)
        assert policy.initial_price == 100.0
        assert policy.initial_quantity == 50.0

    def test_missing_elasticities_stay_none(self):
        policy = map_to_policy_input("tax", {"rate": 10})
        assert policy.demand_elasticity is None
        assert policy.supply_elasticity is None
        assert policy.labor_supply_elasticity is None

    def test_quota_is_carried(self):
        assert map_to_policy_input("trade", {"quota": 1000}).quota_amount == 1000.0


# =============================================================================
# FORM CATALOGUE
# =============================================================================

class TestPolicyConfigs:
    """The four sidebar forms."""

    def test_one_form_per_family(self):
        assert [config.type for config in POLICY_CONFIGS] == list(PolicyType)

    def test_tax_defaults(self):
        assert default_parameters(PolicyType.TAX) == {
            "taxType": "indirect",
            "rate": 15,
            "market": "fuel",
            "Ed": 0.5,
            "Es": 0.8,
        }

    def test_trade_defaults_include_quota(self):
        params = default_parameters("trade")
        assert params["quota"] == 1000
        assert params["market"] == "agriculture"

    def test_select_defaults_are_valid_options(self):
        for config in POLICY_CONFIGS:
            for parameter in config.parameters:
                if parameter.kind == "select":
                    assert parameter.value in [value for value, _ in parameter.options]
                else:
                    assert parameter.min <= parameter.value <= parameter.max

    def test_unknown_family_returns_tax_form(self):
        assert get_policy_config("nonsense").type == PolicyType.TAX

    @pytest.mark.parametrize("config", POLICY_CONFIGS, ids=lambda c: c.type.value)
    def test_defaults_run_in_their_own_family(self, config):
        result = run(config.type, default_parameters(config.type))
        assert result.policy_type == config.type


# =============================================================================
# RUN
# =============================================================================

class TestRun:
    """End-to-end simulation."""

    def test_result_shape(self, tax_result):
        assert tax_result.policy_type == PolicyType.TAX
        assert tax_result.policy_category == PolicyCategory.TAX_INDIRECT
        assert tax_result.timestamp.tzinfo == timezone.utc
        assert len(tax_result.id) == 32
        assert tax_result.short_id == tax_result.id[:8]
        assert len(tax_result.outputs.time_series) == 12
        assert len(tax_result.outputs.price_level) == 12

    def test_outputs_match_projection(self, tax_result):
        outputs = tax_result.outputs
        assert outputs.gdp_change == pytest.approx(-0.3)
        assert outputs.employment_change == pytest.approx(-0.64)
        assert outputs.inflation_change == pytest.approx(0.1)
        assert outputs.revenue_change == pytest.approx(0.6)
        assert outputs.welfare_change == pytest.approx(-1.0)
        assert outputs.time_series[-1].gdp == pytest.approx(99.7)

    def test_repeated_runs_differ_only_in_id_and_timestamp(self):
        params = {"controlType": "minimum_wage", "rate": 35, "laborDemandElasticity": 1.1}
        first = run("price_control", params)
        second = run_simulation("price_control", params)

        assert first.id != second.id
        assert first.inputs == second.inputs
        assert first.impacts == second.impacts
        assert first.outputs == second.outputs

    def test_logs_one_info_line(self, caplog):
        with caplog.at_level("INFO", logger="econsim.simulation"):
            result = run("subsidy", {"subsidyType": "producer", "rate": 10})
        records = [r for r in caplog.records if r.name == "econsim.simulation"]
        assert len(records) == 1
        assert result.short_id in records[0].getMessage()

    def test_to_json_round_trips_through_json(self, subsidy_result):
        payload = json.loads(subsidy_result.to_json())

        assert payload["policyType"] == "subsidy"
        assert payload["policyCategory"] == "subsidy_consumer"
        assert payload["inputs"]["marketType"] == "food"
        assert payload["inputs"]["Es"] == 1.2
        assert payload["inputs"]["Ed"] is None
        assert payload["impacts"]["consumer"]["title"] == "Consumer Impact"
        assert payload["outputs"]["welfareChange"] == pytest.approx(1.2)
        assert len(payload["outputs"]["timeSeriesData"]) == 12
        assert payload["outputs"]["demandCurve"][0] == {"x": 10.0, "y": pytest.approx(150 - 11 + 10)}
