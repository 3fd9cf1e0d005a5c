"""Enumerations shared across all WNB contracts."""

from enum import Enum


class EnvelopeCategory(str, Enum):
    """Certification category an envelope polygon applies to."""
    NORMAL = "normal"
    UTILITY = "utility"


class FlightPhase(str, Enum):
    """Loading snapshot of one flight; phases differ only in fuel on board."""
    RAMP = "ramp"
    TAKEOFF = "takeoff"
    LANDING = "landing"


class EnvelopeDiagnosis(str, Enum):
    """Classification of a (CG, weight) point against an envelope polygon.

    ``UNDEFINED`` means no valid polygon exists for the category; it is
    never used for a point that merely falls outside a valid polygon.
    """
    INSIDE = "inside"
    FORWARD = "forward"
    AFT = "aft"
    OVERWEIGHT = "overweight"
    OUTSIDE = "outside"
    UNDEFINED = "undefined"


class WarningCode(str, Enum):
    STATION_MAX_EXCEEDED = "station_max_exceeded"
    FUEL_STATION_MAX_EXCEEDED = "fuel_station_max_exceeded"
