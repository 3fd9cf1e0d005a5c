"""Envelope point normalization and perimeter ordering.

Points are treated in the (cg, weight) plane: x = CG in inches,
y = weight in lb.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from wnb.contracts.aircraft import EnvelopePoint

logger = logging.getLogger(__name__)

_WEIGHT_KEYS = ("weight_lb", "weightLb")
_CG_KEYS = ("cg_in", "cgIn")


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int outside float range
        return False


def _field(raw: Any, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if isinstance(raw, Mapping):
            if key in raw:
                return raw[key]
        elif hasattr(raw, key):
            return getattr(raw, key)
    return None


def normalize_envelope_points(raw: Any) -> list[EnvelopePoint]:
    """Keep only entries with a finite numeric weight and CG.

    Accepts mappings (snake_case or camelCase keys), ``EnvelopePoint``
    instances, or any object exposing the same attributes.  Anything else,
    including numeric strings, is dropped.  Never raises.
    """
    if not isinstance(raw, (list, tuple)):
        return []

    points: list[EnvelopePoint] = []
    for entry in raw:
        weight = _field(entry, _WEIGHT_KEYS)
        cg = _field(entry, _CG_KEYS)
        if _is_finite_number(weight) and _is_finite_number(cg):
            points.append(EnvelopePoint(weight_lb=float(weight), cg_in=float(cg)))

    dropped = len(raw) - len(points)
    if dropped:
        logger.debug("Dropped %d invalid envelope point(s) of %d", dropped, len(raw))
    return points


def centroid(points: list[EnvelopePoint]) -> tuple[float, float]:
    """Arithmetic mean of the vertices as ``(cg, weight)``."""
    n = len(points)
    cx = sum(p.cg_in for p in points) / n
    cy = sum(p.weight_lb for p in points) / n
    return cx, cy


def sort_envelope_points(points: list[EnvelopePoint]) -> list[EnvelopePoint]:
    """Order points counter-clockwise by angle around their centroid.

    Produces a simple polygon for star-shaped point sets only; the
    self-intersection check in the validator is what catches the rest.
    Always returns a new list.
    """
    if len(points) < 3:
        return list(points)

    cx, cy = centroid(points)
    return sorted(points, key=lambda p: math.atan2(p.weight_lb - cy, p.cg_in - cx))
