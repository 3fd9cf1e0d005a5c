"""Weight & balance inputs and computed results.

Everything here except ``LoadInputs`` is **calculated** — recomputed on every
input change and never stored.  ``WeightBalanceSummary`` is the only part
handed back to the session store.
"""

from typing import Annotated

from pydantic import Field

from wnb.contracts.aircraft import EnvelopePoint, Station
from wnb.contracts.common import DocumentModel
from wnb.contracts.enums import EnvelopeCategory, EnvelopeDiagnosis, FlightPhase, WarningCode

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


class LoadInputs(DocumentModel):
    """Pilot-entered payload and fuel for one flight.

    Weights and quantities must be finite; NaN or infinity is rejected at
    the boundary rather than propagated into the phase totals.
    """

    front_seats_lb: FiniteFloat = 0.0
    rear_seats_lb: FiniteFloat = 0.0
    baggage_lb: dict[str, FiniteFloat] = Field(
        default_factory=dict, description="Weight per baggage station id"
    )
    start_fuel_gal: FiniteFloat = 0.0
    taxi_fuel_gal: FiniteFloat = 0.0
    planned_burn_gal: FiniteFloat = 0.0
    active_category: EnvelopeCategory = EnvelopeCategory.NORMAL
    night_flight: bool = False


class LoadItem(DocumentModel):
    """One contributor to a phase's weight and moment."""

    label: str
    weight_lb: float
    arm_in: float
    station: Station | None = None

    @property
    def moment_lb_in(self) -> float:
        return self.weight_lb * self.arm_in


class PhaseResult(DocumentModel):
    total_weight: float = 0.0
    total_moment: float = 0.0
    cg_in: float = 0.0


class FuelState(DocumentModel):
    """Fuel quantities (gal) through the flight; non-increasing by construction."""

    start: float = Field(default=0.0, ge=0)
    taxi: float = Field(default=0.0, ge=0)
    takeoff: float = Field(default=0.0, ge=0)
    burn: float = Field(default=0.0, ge=0)
    landing: float = Field(default=0.0, ge=0)


class EnvelopeValidation(DocumentModel):
    ok: bool
    messages: list[str] = Field(default_factory=list)
    points: list[EnvelopePoint] = Field(default_factory=list)


class EnvelopeAssist(DocumentModel):
    """Output of the normalize → sort → validate pipeline."""

    normalized: list[EnvelopePoint] = Field(default_factory=list)
    sorted: list[EnvelopePoint] = Field(default_factory=list)
    validation: EnvelopeValidation


class LoadWarning(DocumentModel):
    code: WarningCode
    message: str
    label: str
    weight_lb: float
    limit_lb: float


class FuelReserveCheck(DocumentModel):
    ok: bool
    message: str = ""
    reserve_minutes: int
    burn_rate_gph: float
    required_gal: float = 0.0
    minutes_remaining: float | None = None


class PhaseReport(DocumentModel):
    phase: FlightPhase
    items: list[LoadItem] = Field(default_factory=list)
    result: PhaseResult
    weight_limit_lb: float | None = None
    within_weight_limit: bool = True


class PhaseDiagnoses(DocumentModel):
    ramp: EnvelopeDiagnosis = EnvelopeDiagnosis.UNDEFINED
    takeoff: EnvelopeDiagnosis = EnvelopeDiagnosis.UNDEFINED
    landing: EnvelopeDiagnosis = EnvelopeDiagnosis.UNDEFINED

    def all_inside(self) -> bool:
        return all(
            d == EnvelopeDiagnosis.INSIDE for d in (self.ramp, self.takeoff, self.landing)
        )


class CategoryEnvelopeResult(DocumentModel):
    """Envelope pipeline output and per-phase diagnoses for one category.

    ``points`` is the sorted polygon even when ``valid`` is false, so the
    caller can still preview what the pilot entered.
    """

    category: EnvelopeCategory
    valid: bool
    validation: EnvelopeValidation
    points: list[EnvelopePoint] = Field(default_factory=list)
    diagnoses: PhaseDiagnoses = Field(default_factory=PhaseDiagnoses)


class WeightBalanceReport(DocumentModel):
    fuel: FuelState
    density_lb_per_gal: float
    ramp: PhaseReport
    takeoff: PhaseReport
    landing: PhaseReport
    warnings: list[LoadWarning] = Field(default_factory=list)
    fuel_reserve: FuelReserveCheck
    normal: CategoryEnvelopeResult
    utility: CategoryEnvelopeResult
    active_category: EnvelopeCategory
    primary_diagnoses: PhaseDiagnoses
    has_any_envelope: bool

    def phases(self) -> list[PhaseReport]:
        return [self.ramp, self.takeoff, self.landing]


class WeightBalanceSummary(DocumentModel):
    """Numeric summary handed back to the flight session."""

    ramp_weight_lb: float
    ramp_cg_in: float
    takeoff_weight_lb: float
    takeoff_cg_in: float
    landing_weight_lb: float
    landing_cg_in: float
    fuel_onboard_gal: float
    fuel_weight_lb: float
    is_within_envelope: bool
    is_within_limits: bool
