"""Envelope editing endpoints — normalize, sort, validate and diagnose."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import Field

from wnb.contracts.common import DocumentModel
from wnb.contracts.enums import EnvelopeDiagnosis
from wnb.services.envelope.diagnoser import diagnose_envelope
from wnb.services.envelope.validator import assist_envelope

router = APIRouter(prefix="/envelope", tags=["envelope"])


class EnvelopeRequest(DocumentModel):
    """Raw points as entered by the pilot; malformed entries are dropped."""

    points: list[Any] = Field(default_factory=list)


class DiagnoseRequest(EnvelopeRequest):
    cg_in: float = Field(..., allow_inf_nan=False)
    weight_lb: float = Field(..., allow_inf_nan=False)


@router.post("/assist")
async def assist(request: EnvelopeRequest) -> dict[str, Any]:
    """Run normalize → sort → validate; the sorted polygon comes back even when invalid."""
    return assist_envelope(request.points).to_document()


@router.post("/diagnose")
async def diagnose(request: DiagnoseRequest) -> dict[str, Any]:
    assisted = assist_envelope(request.points)
    if assisted.validation.ok:
        diagnosis = diagnose_envelope(request.cg_in, request.weight_lb, assisted.sorted)
    else:
        diagnosis = EnvelopeDiagnosis.UNDEFINED
    return {
        "diagnosis": diagnosis,
        "validation": assisted.validation.to_document(),
    }
