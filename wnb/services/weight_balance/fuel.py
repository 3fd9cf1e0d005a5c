"""Fuel pipeline (start → taxi → takeoff → burn → landing) and VFR reserve check."""

from __future__ import annotations

from wnb.contracts.aircraft import FuelSpec
from wnb.contracts.loading import FuelReserveCheck, FuelState, LoadInputs
from wnb.services.weight_balance.numbers import clamp, fmt, round_half_up

DEFAULT_DENSITY_LB_PER_GAL = 6.0

# Reserve estimate: planned burn is assumed to cover a 1.5 h flight
_ASSUMED_FLIGHT_HOURS = 1.5
_DEFAULT_BURN_GPH = 8.0

# VFR fuel reserve (FAR 91.151), minutes
VFR_DAY_RESERVE_MIN = 30
VFR_NIGHT_RESERVE_MIN = 45


def _gallons(value: float) -> float:
    return round_half_up(max(0.0, value), 1)


def fuel_density(spec: FuelSpec) -> float:
    return spec.density_lb_per_gal or DEFAULT_DENSITY_LB_PER_GAL


def build_fuel_state(inputs: LoadInputs, spec: FuelSpec) -> FuelState:
    """Derive each fuel stage from the pilot's start, taxi and burn figures.

    All quantities are rounded to 0.1 gal and clamped at zero; start fuel is
    also capped at usable capacity when that is known.  Each stage is capped
    by the previous one so rounding can never make fuel appear.
    """
    start = _gallons(inputs.start_fuel_gal)
    if spec.usable_gal > 0:
        start = clamp(start, 0.0, spec.usable_gal)
    taxi = _gallons(inputs.taxi_fuel_gal)
    burn = _gallons(inputs.planned_burn_gal)

    takeoff = min(start, _gallons(start - taxi))
    landing = min(takeoff, _gallons(takeoff - burn))

    return FuelState(start=start, taxi=taxi, takeoff=takeoff, burn=burn, landing=landing)


def estimated_burn_rate(burn_gal: float) -> float:
    return burn_gal / _ASSUMED_FLIGHT_HOURS or _DEFAULT_BURN_GPH


def check_fuel_reserve(
    fuel_remaining_gal: float,
    burn_rate_gph: float,
    night: bool = False,
) -> FuelReserveCheck:
    """Compare landing fuel with the VFR day/night reserve at ``burn_rate_gph``."""
    reserve_min = VFR_NIGHT_RESERVE_MIN if night else VFR_DAY_RESERVE_MIN
    if burn_rate_gph <= 0:
        return FuelReserveCheck(ok=True, reserve_minutes=reserve_min, burn_rate_gph=burn_rate_gph)

    required_gal = reserve_min / 60 * burn_rate_gph
    minutes_remaining = fuel_remaining_gal / burn_rate_gph * 60

    ok = fuel_remaining_gal >= required_gal
    message = ""
    if not ok:
        message = (
            f"Landing fuel ({fmt(fuel_remaining_gal, 1)} gal = {fmt(minutes_remaining, 0)} min) "
            f"is below VFR {'night' if night else 'day'} reserve requirement "
            f"({reserve_min} min = {fmt(required_gal, 1)} gal)."
        )
    return FuelReserveCheck(
        ok=ok,
        message=message,
        reserve_minutes=reserve_min,
        burn_rate_gph=burn_rate_gph,
        required_gal=required_gal,
        minutes_remaining=minutes_remaining,
    )
