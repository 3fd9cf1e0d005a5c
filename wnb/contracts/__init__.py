"""WNB data contracts — Pydantic v2 models for weight & balance.

Data authority
--------------

**Profile store** (external; source of truth for user-owned data):
- ``AircraftProfile`` — one document per aircraft, schema-versioned
  (legacy v1 documents are migrated on load, see ``migration``)

**Session store** (external):
- ``WeightBalanceSummary`` — numeric summary of the current loading

Calculated (never persisted)
----------------------------
- ``EnvelopeAssist`` / ``EnvelopeValidation`` — envelope pipeline output
- ``WeightBalanceReport`` — phase results, warnings, reserve check, diagnoses
"""

from wnb.contracts.enums import (
    EnvelopeCategory,
    EnvelopeDiagnosis,
    FlightPhase,
    WarningCode,
)
from wnb.contracts.common import DocumentModel
from wnb.contracts.result import ServiceError, ServiceResult
from wnb.contracts.aircraft import (
    PROFILE_SCHEMA_VERSION,
    AircraftProfile,
    CategoryEnvelopes,
    EmptyWeight,
    EnvelopeDefinition,
    EnvelopePoint,
    FuelSpec,
    Station,
    WeightLimits,
)
from wnb.contracts.loading import (
    CategoryEnvelopeResult,
    EnvelopeAssist,
    EnvelopeValidation,
    FuelReserveCheck,
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
from wnb.contracts.migration import load_aircraft_profile, migrate_profile_document

__all__ = [
    # Enums
    "EnvelopeCategory",
    "EnvelopeDiagnosis",
    "FlightPhase",
    "WarningCode",
    # Common
    "DocumentModel",
    # Result
    "ServiceError",
    "ServiceResult",
    # Aircraft profile
    "PROFILE_SCHEMA_VERSION",
    "AircraftProfile",
    "CategoryEnvelopes",
    "EmptyWeight",
    "EnvelopeDefinition",
    "EnvelopePoint",
    "FuelSpec",
    "Station",
    "WeightLimits",
    # Loading
    "CategoryEnvelopeResult",
    "EnvelopeAssist",
    "EnvelopeValidation",
    "FuelReserveCheck",
    "FuelState",
    "LoadInputs",
    "LoadItem",
    "LoadWarning",
    "PhaseDiagnoses",
    "PhaseReport",
    "PhaseResult",
    "WeightBalanceReport",
    "WeightBalanceSummary",
    # Migration
    "load_aircraft_profile",
    "migrate_profile_document",
]
