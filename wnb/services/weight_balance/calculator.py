"""Weight & balance for the Ramp, Takeoff and Landing phases of one flight.

The three phases share every load item except fuel:

- Ramp: start fuel
- Takeoff: start fuel minus taxi fuel
- Landing: takeoff fuel minus planned burn

Each phase point (CG, total weight) is then diagnosed against both envelope
categories.  Nothing here raises for a validated ``LoadInputs``; every
failure is a value in the report.
"""

from __future__ import annotations

import logging

from wnb.contracts.aircraft import AircraftProfile, Station
from wnb.contracts.enums import EnvelopeCategory, FlightPhase, WarningCode
from wnb.contracts.loading import (
    CategoryEnvelopeResult,
    FuelState,
    LoadInputs,
    LoadItem,
    LoadWarning,
    PhaseDiagnoses,
    PhaseReport,
    PhaseResult,
    WeightBalanceReport,
    WeightBalanceSummary,
)
from wnb.services.envelope.diagnoser import diagnose_envelope
from wnb.services.envelope.validator import assist_envelope
from wnb.services.weight_balance.fuel import (
    build_fuel_state,
    check_fuel_reserve,
    estimated_burn_rate,
    fuel_density,
)
from wnb.services.weight_balance.numbers import fmt

logger = logging.getLogger(__name__)


def compute(items: list[LoadItem]) -> PhaseResult:
    total_weight = sum(i.weight_lb for i in items)
    total_moment = sum(i.weight_lb * i.arm_in for i in items)
    cg_in = total_moment / total_weight if total_weight > 0 else 0.0
    return PhaseResult(total_weight=total_weight, total_moment=total_moment, cg_in=cg_in)


def _station_item(label: str, weight_lb: float, station: Station | None) -> LoadItem:
    return LoadItem(
        label=label,
        weight_lb=weight_lb,
        arm_in=station.arm_in if station else 0.0,
        station=station,
    )


def build_common_items(profile: AircraftProfile, inputs: LoadInputs) -> list[LoadItem]:
    """Load items identical in every phase: empty weight, seats and baggage."""
    items = [
        LoadItem(
            label="Empty weight",
            weight_lb=profile.empty_weight.weight_lb,
            arm_in=profile.empty_weight.arm_in,
        ),
        _station_item("Front seats", inputs.front_seats_lb, profile.find_station("front")),
        _station_item("Rear seats", inputs.rear_seats_lb, profile.find_station("rear")),
    ]
    for station in profile.stations_named("baggage"):
        items.append(
            _station_item(station.name, inputs.baggage_lb.get(station.id, 0.0), station)
        )
    return items


def fuel_item(stage: str, gallons: float, density: float, station: Station | None) -> LoadItem:
    return _station_item(f"Fuel ({stage}: {fmt(gallons, 1)} gal)", gallons * density, station)


def station_warnings(
    items: list[LoadItem],
    ramp_fuel_lb: float,
    fuel_station: Station | None,
) -> list[LoadWarning]:
    warnings: list[LoadWarning] = []
    for item in items:
        limit = item.station.max_weight_lb if item.station else None
        if limit is not None and item.weight_lb > limit:
            warnings.append(
                LoadWarning(
                    code=WarningCode.STATION_MAX_EXCEEDED,
                    message=(
                        f"{item.label} exceeds station max "
                        f"({fmt(item.weight_lb)} > {fmt(limit)} lb)."
                    ),
                    label=item.label,
                    weight_lb=item.weight_lb,
                    limit_lb=limit,
                )
            )

    fuel_limit = fuel_station.max_weight_lb if fuel_station else None
    if fuel_limit is not None and ramp_fuel_lb > fuel_limit:
        warnings.append(
            LoadWarning(
                code=WarningCode.FUEL_STATION_MAX_EXCEEDED,
                message=f"Fuel exceeds station max ({fmt(ramp_fuel_lb)} > {fmt(fuel_limit)} lb).",
                label=fuel_station.name,
                weight_lb=ramp_fuel_lb,
                limit_lb=fuel_limit,
            )
        )
    return warnings


def _phase_report(
    phase: FlightPhase, items: list[LoadItem], limit: float | None
) -> PhaseReport:
    result = compute(items)
    return PhaseReport(
        phase=phase,
        items=items,
        result=result,
        weight_limit_lb=limit,
        within_weight_limit=limit is None or result.total_weight <= limit,
    )


def diagnose_category(
    profile: AircraftProfile,
    category: EnvelopeCategory,
    phases: list[PhaseReport],
) -> CategoryEnvelopeResult:
    """Run the envelope pipeline for ``category`` and diagnose each phase point."""
    assist = assist_envelope(profile.envelope_points(category))
    valid = len(assist.sorted) >= 3 and assist.validation.ok

    diagnoses = PhaseDiagnoses()
    if valid:
        diagnoses = PhaseDiagnoses(
            **{
                report.phase: diagnose_envelope(
                    report.result.cg_in, report.result.total_weight, assist.sorted
                )
                for report in phases
            }
        )

    return CategoryEnvelopeResult(
        category=category,
        valid=valid,
        validation=assist.validation,
        points=assist.sorted,
        diagnoses=diagnoses,
    )


def compute_weight_balance(
    profile: AircraftProfile,
    inputs: LoadInputs,
    active_category: EnvelopeCategory | None = None,
) -> WeightBalanceReport:
    """Compute phase results, warnings, reserve check and envelope diagnoses.

    ``active_category`` selects which category's diagnoses become
    ``primary_diagnoses``; it defaults to ``inputs.active_category``.  A value
    that is not an ``EnvelopeCategory`` raises ``ValueError``.
    """
    active = EnvelopeCategory(active_category or inputs.active_category)
    density = fuel_density(profile.fuel)
    fuel: FuelState = build_fuel_state(inputs, profile.fuel)
    fuel_station = profile.find_station("fuel")

    common = build_common_items(profile, inputs)
    limits = profile.limits
    ramp = _phase_report(
        FlightPhase.RAMP,
        [*common, fuel_item("start", fuel.start, density, fuel_station)],
        limits.max_ramp_lb,
    )
    takeoff = _phase_report(
        FlightPhase.TAKEOFF,
        [*common, fuel_item("takeoff", fuel.takeoff, density, fuel_station)],
        limits.max_takeoff_lb,
    )
    landing = _phase_report(
        FlightPhase.LANDING,
        [*common, fuel_item("landing", fuel.landing, density, fuel_station)],
        limits.max_landing_lb,
    )
    phases = [ramp, takeoff, landing]

    envelopes = {
        category: diagnose_category(profile, category, phases) for category in EnvelopeCategory
    }

    warnings = station_warnings(common, fuel.start * density, fuel_station)
    reserve = check_fuel_reserve(
        fuel.landing, estimated_burn_rate(fuel.burn), night=inputs.night_flight
    )

    if warnings or not reserve.ok:
        logger.debug(
            "W&B for %s: %d station warning(s), reserve ok=%s",
            profile.tail_number or profile.id,
            len(warnings),
            reserve.ok,
        )

    return WeightBalanceReport(
        fuel=fuel,
        density_lb_per_gal=density,
        ramp=ramp,
        takeoff=takeoff,
        landing=landing,
        warnings=warnings,
        fuel_reserve=reserve,
        normal=envelopes[EnvelopeCategory.NORMAL],
        utility=envelopes[EnvelopeCategory.UTILITY],
        active_category=active,
        primary_diagnoses=envelopes[active].diagnoses,
        has_any_envelope=any(e.valid for e in envelopes.values()),
    )


def summarize_for_session(report: WeightBalanceReport) -> WeightBalanceSummary:
    """Numeric summary of a report for the flight session.

    ``is_within_envelope`` is false when the active category has no valid
    envelope: an undefined envelope is not a pass.
    """
    return WeightBalanceSummary(
        ramp_weight_lb=report.ramp.result.total_weight,
        ramp_cg_in=report.ramp.result.cg_in,
        takeoff_weight_lb=report.takeoff.result.total_weight,
        takeoff_cg_in=report.takeoff.result.cg_in,
        landing_weight_lb=report.landing.result.total_weight,
        landing_cg_in=report.landing.result.cg_in,
        fuel_onboard_gal=report.fuel.start,
        fuel_weight_lb=report.fuel.start * report.density_lb_per_gal,
        is_within_envelope=report.primary_diagnoses.all_inside(),
        is_within_limits=all(p.within_weight_limit for p in report.phases()) and not report.warnings,
    )