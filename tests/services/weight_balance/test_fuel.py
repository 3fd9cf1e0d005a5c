"""Tests for the fuel pipeline and VFR reserve check."""

from __future__ import annotations

import itertools
import math

import pytest

from wnb.contracts.aircraft import FuelSpec
from wnb.contracts.loading import LoadInputs
from wnb.services.weight_balance.fuel import (
    build_fuel_state,
    check_fuel_reserve,
    estimated_burn_rate,
    fuel_density,
)
from wnb.services.weight_balance.numbers import fmt, round_half_up


def _inputs(start: float, taxi: float = 0.0, burn: float = 0.0) -> LoadInputs:
    return LoadInputs(start_fuel_gal=start, taxi_fuel_gal=taxi, planned_burn_gal=burn)


class TestFuelState:
    def test_typical(self):
        fuel = build_fuel_state(_inputs(30, 1, 10), FuelSpec(usable_gal=53))
        assert fuel.start == 30
        assert fuel.taxi == 1
        assert fuel.takeoff == 29
        assert fuel.burn == 10
        assert fuel.landing == 19

    def test_start_clamped_to_usable(self):
        fuel = build_fuel_state(_inputs(80, 1, 10), FuelSpec(usable_gal=53))
        assert fuel.start == 53
        assert fuel.takeoff == 52

    def test_unknown_capacity_not_clamped(self):
        fuel = build_fuel_state(_inputs(80), FuelSpec(usable_gal=0))
        assert fuel.start == 80

    def test_burn_larger_than_fuel(self):
        fuel = build_fuel_state(_inputs(5, 1, 20), FuelSpec())
        assert fuel.takeoff == 4
        assert fuel.landing == 0

    def test_negative_inputs_clamped(self):
        fuel = build_fuel_state(_inputs(-5, -1, -3), FuelSpec())
        assert (fuel.start, fuel.taxi, fuel.takeoff, fuel.burn, fuel.landing) == (0, 0, 0, 0, 0)

    def test_rounded_to_tenth(self):
        fuel = build_fuel_state(_inputs(30.04, 1.06, 10.25), FuelSpec())
        assert fuel.start == pytest.approx(30.0)
        assert fuel.taxi == pytest.approx(1.1)
        assert fuel.takeoff == pytest.approx(28.9)
        assert fuel.burn == pytest.approx(10.3)
        assert fuel.landing == pytest.approx(18.6)

    def test_non_increasing_for_any_non_negative_inputs(self):
        values = [0, 0.05, 0.1, 0.3, 1, 2.45, 9.99, 30, 53, 75.5]
        for start, taxi, burn in itertools.product(values, repeat=3):
            fuel = build_fuel_state(_inputs(start, taxi, burn), FuelSpec(usable_gal=53))
            assert 0 <= fuel.landing <= fuel.takeoff <= fuel.start <= 53

    def test_start_beyond_float_scale_is_clamped(self):
        fuel = build_fuel_state(_inputs(1e308, 1, 10), FuelSpec(usable_gal=53))
        assert fuel.start == 53
        assert fuel.takeoff == 52
        assert fuel.landing == 42

    def test_start_beyond_float_scale_without_capacity(self):
        fuel = build_fuel_state(_inputs(1e308), FuelSpec())
        assert fuel.start == 1e308
        assert fuel.landing <= fuel.takeoff <= fuel.start


class TestDensity:
    def test_profile_density(self):
        assert fuel_density(FuelSpec(density_lb_per_gal=6.7)) == 6.7

    def test_zero_density_falls_back(self):
        assert fuel_density(FuelSpec(density_lb_per_gal=0)) == 6.0


class TestReserve:
    def test_burn_rate_estimate(self):
        assert estimated_burn_rate(12) == pytest.approx(8.0)
        assert estimated_burn_rate(15) == pytest.approx(10.0)

    def test_zero_burn_uses_default_rate(self):
        assert estimated_burn_rate(0) == 8.0

    def test_day_ok(self):
        check = check_fuel_reserve(19, 10 / 1.5)
        assert check.ok
        assert check.message == ""
        assert check.reserve_minutes == 30

    def test_day_insufficient(self):
        check = check_fuel_reserve(3, 8.0)
        assert not check.ok
        assert check.required_gal == pytest.approx(4.0)
        assert check.message == (
            "Landing fuel (3 gal = 23 min) is below VFR day reserve requirement "
            "(30 min = 4 gal)."
        )

    def test_night_needs_more(self):
        assert check_fuel_reserve(5, 8.0, night=False).ok
        night = check_fuel_reserve(5, 8.0, night=True)
        assert not night.ok
        assert night.reserve_minutes == 45
        assert "night" in night.message

    def test_non_positive_rate_passes(self):
        check = check_fuel_reserve(0, 0)
        assert check.ok
        assert check.minutes_remaining is None


class TestNumbers:
    def test_round_half_up(self):
        assert round_half_up(2.25, 1) == pytest.approx(2.3)
        assert round_half_up(22.5, 0) == 23

    def test_fmt(self):
        assert fmt(170.0) == "170"
        assert fmt(37.25) == "37.3"
        assert fmt(22.5, 0) == "23"

    def test_round_half_up_leaves_unscalable_values(self):
        assert round_half_up(1e308, 1) == 1e308
        assert round_half_up(math.inf, 1) == math.inf
        assert math.isnan(round_half_up(math.nan, 1))
        assert fmt(math.inf) == "inf"
