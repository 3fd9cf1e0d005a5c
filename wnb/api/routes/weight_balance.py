"""Weight & balance computation endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from wnb.api.deps import get_profile
from wnb.contracts.aircraft import AircraftProfile
from wnb.contracts.loading import LoadInputs
from wnb.services.weight_balance.calculator import compute_weight_balance, summarize_for_session

router = APIRouter(prefix="/weight-balance", tags=["weight-balance"])


@router.post("")
async def compute(
    inputs: LoadInputs = Body(..., embed=True),
    profile: AircraftProfile = Depends(get_profile),
) -> dict[str, Any]:
    """Ramp/Takeoff/Landing results, warnings, reserve check and envelope diagnoses.

    The profile is sent raw (as stored) and migrated before use.
    """
    report = compute_weight_balance(profile, inputs)
    return {
        "report": report.to_document(),
        "summary": summarize_for_session(report).to_document(),
    }
