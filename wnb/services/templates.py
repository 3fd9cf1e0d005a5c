"""Starter aircraft profiles.

Templates only: arms, limits, empty weight/moment and envelope must be
verified against the POH/AFM and the W&B sheet of the specific tail number.
"""

from __future__ import annotations

import uuid

from wnb.contracts.aircraft import AircraftProfile, EmptyWeight, FuelSpec, Station, WeightLimits


def make_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def make_c172s_template() -> AircraftProfile:
    """Cessna 172S starter profile.

    Empty weight and weight limits are left blank so that nothing reads as
    an authoritative PASS until the pilot enters tail-specific values.
    """
    return AircraftProfile(
        id=make_id("ac"),
        make_model="Cessna 172S",
        notes=(
            "TEMPLATE: Verify all values against THIS aircraft's POH/AFM & W&B sheet "
            "(datum, arms, limits, empty weight/moment, and envelope)."
        ),
        empty_weight=EmptyWeight(weight_lb=0.0, moment_lb_in=0.0),
        limits=WeightLimits(),
        fuel=FuelSpec(usable_gal=53.0, density_lb_per_gal=6.0),
        stations=[
            Station(id=make_id("st"), name="Front seats", arm_in=37.0),
            Station(id=make_id("st"), name="Rear seats", arm_in=73.0),
            Station(id=make_id("st"), name="Baggage", arm_in=95.0),
            Station(id=make_id("st"), name="Fuel (usable)", arm_in=48.0),
        ],
    )
