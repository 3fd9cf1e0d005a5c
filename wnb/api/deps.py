"""FastAPI dependency injection wiring."""

from __future__ import annotations

from typing import Any

from fastapi import Body, HTTPException

from wnb.contracts.aircraft import AircraftProfile
from wnb.contracts.migration import load_aircraft_profile


def require_profile(document: dict[str, Any]) -> AircraftProfile:
    """Migrate and validate a raw profile document, or answer 422."""
    result = load_aircraft_profile(document)
    if not result.success:
        raise HTTPException(
            status_code=422,
            detail={"code": result.error.code, "message": result.error.message},
        )
    return result.data


def get_profile(profile: dict[str, Any] = Body(..., embed=True)) -> AircraftProfile:
    """Profile sent alongside other body fields, as stored (any schema version)."""
    return require_profile(profile)
