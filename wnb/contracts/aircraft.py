"""Aircraft profile with weight & balance data.

Includes the CG envelopes (one polygon per certification category) and the
loading stations.  Envelope points are kept **raw** at this boundary: the
profile store may hold partial or malformed points, and the envelope
normalizer is the component that decides which of them are usable.
"""

from typing import Any, Literal

from pydantic import ConfigDict, Field

from wnb.contracts.common import DocumentModel
from wnb.contracts.enums import EnvelopeCategory

PROFILE_SCHEMA_VERSION = 2


class EnvelopePoint(DocumentModel):
    """A vertex of a weight & balance envelope polygon.

    Plotted with ``cg_in`` on the x axis and ``weight_lb`` on the y axis.
    """

    model_config = ConfigDict(frozen=True)

    weight_lb: float = Field(..., allow_inf_nan=False, description="Weight in lb")
    cg_in: float = Field(..., allow_inf_nan=False, description="CG in inches aft of datum")


class EnvelopeDefinition(DocumentModel):
    """Pilot-entered envelope points for one category, as stored (untyped)."""

    points: list[Any] = Field(default_factory=list)


class CategoryEnvelopes(DocumentModel):
    normal: EnvelopeDefinition | None = None
    utility: EnvelopeDefinition | None = None


class Station(DocumentModel):
    """A named loading point with a fixed arm.

    ``max_weight_lb``, when set, is checked against the weight assigned to
    the station.
    """

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, description="e.g. 'Front seats', 'Baggage A'")
    arm_in: float = Field(..., description="Arm in inches aft of datum")
    max_weight_lb: float | None = Field(default=None, ge=0)


class EmptyWeight(DocumentModel):
    weight_lb: float = Field(default=0.0, ge=0)
    moment_lb_in: float = 0.0

    @property
    def arm_in(self) -> float:
        """Empty-weight arm; 0 when no empty weight has been entered."""
        if self.weight_lb > 0:
            return self.moment_lb_in / self.weight_lb
        return 0.0


class WeightLimits(DocumentModel):
    """Structural weight limits. Unset limits are not checked."""

    max_ramp_lb: float | None = Field(default=None, gt=0)
    max_takeoff_lb: float | None = Field(default=None, gt=0)
    max_landing_lb: float | None = Field(default=None, gt=0)


class FuelSpec(DocumentModel):
    usable_gal: float = Field(default=0.0, ge=0, description="Usable capacity; 0 when unknown")
    density_lb_per_gal: float = Field(default=6.0, ge=0)


class AircraftProfile(DocumentModel):
    """Aircraft W&B profile (schema version 2).

    Legacy documents carrying a single ``cgEnvelope`` must go through
    ``wnb.contracts.migration.migrate_profile_document`` before validation.
    """

    schema_version: Literal[2] = PROFILE_SCHEMA_VERSION
    id: str | None = None
    tail_number: str = ""
    make_model: str = ""
    notes: str | None = None

    empty_weight: EmptyWeight = Field(default_factory=EmptyWeight)
    limits: WeightLimits = Field(default_factory=WeightLimits)
    fuel: FuelSpec = Field(default_factory=FuelSpec)
    stations: list[Station] = Field(default_factory=list)

    cg_envelopes: CategoryEnvelopes = Field(default_factory=CategoryEnvelopes)

    def envelope_points(self, category: EnvelopeCategory | str) -> list[Any]:
        """Raw stored points for ``category`` (empty when not defined)."""
        definition = getattr(self.cg_envelopes, EnvelopeCategory(category).value, None)
        if definition is None:
            return []
        return definition.points

    def find_station(self, name_includes: str) -> Station | None:
        """First station whose name contains ``name_includes`` (case-insensitive)."""
        key = name_includes.lower()
        for station in self.stations:
            if key in station.name.lower():
                return station
        return None

    def stations_named(self, name_includes: str) -> list[Station]:
        key = name_includes.lower()
        return [s for s in self.stations if key in s.name.lower()]
