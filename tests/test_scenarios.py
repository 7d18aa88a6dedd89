"""Tests for the scenario projector."""
from types import SimpleNamespace

import pytest

from backend.models import ScenarioInput
from backend.scenarios import project, project_one


def startup(**overrides):
    base = dict(revenue=2_100_000, valuation=4_500_000, burn_rate=200_000)
    base.update(overrides)
    return SimpleNamespace(**base)


def scenario(name="Base", **kwargs):
    return ScenarioInput(name=name, **kwargs)


class TestProjection:

    def test_literal_formulas(self):
        """Revenue, valuation and burn apply their deltas; runway is revenue/burn x 12."""
        result = project_one(startup(), scenario(
            probability=40, growth_rate=10, valuation_multiple=0.5, burn_rate_change=25,
        ))
        p = result.projections

        assert result.name == "Base"
        assert result.probability == 40
        assert p.revenue == pytest.approx(2_310_000)
        assert p.valuation == pytest.approx(6_750_000)
        assert p.burn_rate == pytest.approx(250_000)
        assert p.runway == pytest.approx(2_310_000 / 250_000 * 12)
        assert p.roi == pytest.approx(50.0)

    def test_results_keep_input_order(self):
        """One projection per input, same order."""
        inputs = [scenario("Bull", growth_rate=80), scenario("Base"), scenario("Bear", growth_rate=-30)]

        results = project(startup(), inputs)

        assert [r.name for r in results] == ["Bull", "Base", "Bear"]

    def test_empty_inputs(self):
        """No scenarios, no projections."""
        assert project(startup(), []) == []

    def test_revenue_is_linear_in_growth_delta(self):
        """(1 + delta) scales projected revenue proportionally."""
        ten = project_one(startup(), scenario(growth_rate=10)).projections.revenue
        twenty = project_one(startup(), scenario(growth_rate=20)).projections.revenue

        assert ten / 1.10 == pytest.approx(twenty / 1.20)
        assert twenty - ten == pytest.approx(2_100_000 * 0.10)

    @pytest.mark.parametrize("multiple", [-0.5, -0.1, 0.0, 0.3, 2.0])
    def test_roi_sign_matches_valuation_change(self, multiple):
        """ROI is positive exactly when projected valuation exceeds current."""
        p = project_one(startup(), scenario(valuation_multiple=multiple)).projections
        change = p.valuation - 4_500_000

        if change > 0:
            assert p.roi > 0
        elif change < 0:
            assert p.roi < 0
        else:
            assert p.roi == 0


class TestZeroDivisors:

    def test_zero_burn_gives_unbounded_runway(self):
        """No burn means runway has no bound and is reported as None."""
        p = project_one(startup(burn_rate=0), scenario(burn_rate_change=50)).projections

        assert p.burn_rate == 0
        assert p.runway is None

    def test_burn_cut_to_zero(self):
        """A -100% burn change also removes the bound."""
        p = project_one(startup(), scenario(burn_rate_change=-100)).projections

        assert p.runway is None

    def test_zero_valuation_gives_undefined_roi(self):
        """ROI relative to a zero valuation is None."""
        p = project_one(startup(valuation=0), scenario(valuation_multiple=1)).projections

        assert p.valuation == 0
        assert p.roi is None

    def test_serializes_none_as_null(self):
        """Unbounded values come out as JSON null."""
        body = project_one(startup(burn_rate=0, valuation=0), scenario()).to_json()

        assert body["projections"]["runway"] is None
        assert body["projections"]["roi"] is None
        assert set(body["projections"]) == {"revenue", "valuation", "burnRate", "runway", "roi"}
