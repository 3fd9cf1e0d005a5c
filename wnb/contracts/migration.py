"""Versioned aircraft profile documents and the one-time legacy migration.

Schema history
--------------

- **v1** (legacy, ``schemaVersion`` absent or ``1``): a single unlabeled
  ``cgEnvelope: {points: [...]}``.
- **v2** (current): ``cgEnvelopes: {normal: {points}, utility: {points}}``.

Migration runs once, when a document is loaded; the engine only ever sees
v2 ``AircraftProfile`` instances.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from pydantic import ValidationError

from wnb.contracts.aircraft import PROFILE_SCHEMA_VERSION, AircraftProfile
from wnb.contracts.result import ServiceResult

logger = logging.getLogger(__name__)

_LEGACY_ENVELOPE_KEYS = ("cgEnvelope", "cg_envelope")
_ENVELOPES_KEYS = ("cgEnvelopes", "cg_envelopes")
_VERSION_KEYS = ("schemaVersion", "schema_version")


def _pop_first(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    value = None
    for key in keys:
        if key in data:
            found = data.pop(key)
            if value is None:
                value = found
    return value


def _points_of(definition: Any) -> list[Any]:
    if isinstance(definition, dict):
        points = definition.get("points")
        if isinstance(points, list):
            return points
    return []


def document_version(data: dict[str, Any]) -> int | None:
    """Schema version of a raw profile document (``1`` when unlabeled)."""
    for key in _VERSION_KEYS:
        if key in data:
            version = data[key]
            return version if isinstance(version, int) and not isinstance(version, bool) else None
    return 1


def migrate_profile_document(data: dict[str, Any]) -> dict[str, Any]:
    """Return a v2 copy of a raw profile document.

    Legacy points move into ``cgEnvelopes.normal`` unless that category
    already has points; the legacy key is dropped either way.  The input
    dict is never modified.  Documents already at v2 are returned as a copy.
    """
    migrated = copy.deepcopy(data)
    if document_version(migrated) == PROFILE_SCHEMA_VERSION:
        return migrated

    legacy = _pop_first(migrated, _LEGACY_ENVELOPE_KEYS)
    envelopes = _pop_first(migrated, _ENVELOPES_KEYS)
    if not isinstance(envelopes, dict):
        envelopes = {}

    legacy_points = _points_of(legacy)
    if legacy_points and not _points_of(envelopes.get("normal")):
        envelopes["normal"] = {"points": legacy_points}
        logger.info(
            "Migrated legacy envelope (%d points) into normal category for profile %s",
            len(legacy_points),
            migrated.get("id"),
        )

    _pop_first(migrated, _VERSION_KEYS)
    migrated["cgEnvelopes"] = envelopes
    migrated["schemaVersion"] = PROFILE_SCHEMA_VERSION
    return migrated


def load_aircraft_profile(data: Any) -> ServiceResult[AircraftProfile]:
    """Migrate and validate a raw profile document.

    Never raises: failures come back as ``ServiceResult.fail``.
    """
    if not isinstance(data, dict):
        return ServiceResult[AircraftProfile].fail(
            "invalid_profile", "Profile document must be an object"
        )

    version = document_version(data)
    if version not in (1, PROFILE_SCHEMA_VERSION):
        return ServiceResult[AircraftProfile].fail(
            "unsupported_schema_version",
            f"Unsupported profile schema version: {version!r}",
            version=str(version),
        )

    try:
        profile = AircraftProfile.from_document(migrate_profile_document(data))
    except ValidationError as exc:
        logger.warning("Aircraft profile %s failed validation: %s", data.get("id"), exc)
        return ServiceResult[AircraftProfile].fail(
            "invalid_profile",
            f"Invalid aircraft profile: {exc.error_count()} error(s)",
            first_error=exc.errors()[0]["msg"],
        )
    return ServiceResult[AircraftProfile].ok(profile)
