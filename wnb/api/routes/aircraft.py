"""Aircraft profile endpoints — templates and legacy migration."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from wnb.api.deps import require_profile
from wnb.services.templates import make_c172s_template

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.get("/templates/c172s")
async def c172s_template() -> dict[str, Any]:
    return make_c172s_template().to_document()


@router.post("/migrate")
async def migrate_profile(document: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Bring a stored profile (any supported schema version) to the current schema."""
    return require_profile(document).to_document()
