"""Envelope polygon validation: duplicate vertices and self-crossing edges."""

from __future__ import annotations

import logging
from typing import Any

from wnb.contracts.aircraft import EnvelopePoint
from wnb.contracts.loading import EnvelopeAssist, EnvelopeValidation
from wnb.services.envelope.geometry import normalize_envelope_points, sort_envelope_points

logger = logging.getLogger(__name__)

_EPS = 1e-9

Pt = tuple[float, float]


def _nearly_equal(a: float, b: float, eps: float = _EPS) -> bool:
    return abs(a - b) <= eps


def same_point(a: EnvelopePoint, b: EnvelopePoint) -> bool:
    return _nearly_equal(a.weight_lb, b.weight_lb) and _nearly_equal(a.cg_in, b.cg_in)


def orient(a: Pt, b: Pt, c: Pt) -> float:
    """Cross product of (b - a) and (c - a); sign gives the turn direction."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def on_segment(a: Pt, b: Pt, c: Pt) -> bool:
    """Whether ``c`` lies within the bounding box of segment ``ab``.

    Only meaningful when the three points are already known to be collinear.
    """
    return (
        min(a[0], b[0]) - _EPS <= c[0] <= max(a[0], b[0]) + _EPS
        and min(a[1], b[1]) - _EPS <= c[1] <= max(a[1], b[1]) + _EPS
    )


def segments_intersect(p1: Pt, p2: Pt, q1: Pt, q2: Pt) -> bool:
    o1 = orient(p1, p2, q1)
    o2 = orient(p1, p2, q2)
    o3 = orient(q1, q2, p1)
    o4 = orient(q1, q2, p2)

    # Proper crossing
    if (o1 > 0) != (o2 > 0) and (o3 > 0) != (o4 > 0):
        return True

    # Touching or overlapping (collinear)
    if _nearly_equal(o1, 0) and on_segment(p1, p2, q1):
        return True
    if _nearly_equal(o2, 0) and on_segment(p1, p2, q2):
        return True
    if _nearly_equal(o3, 0) and on_segment(q1, q2, p1):
        return True
    if _nearly_equal(o4, 0) and on_segment(q1, q2, p2):
        return True

    return False


def envelope_self_intersects(points: list[EnvelopePoint]) -> bool:
    """O(n²) crossing test over every pair of non-adjacent closed-polygon edges."""
    if len(points) < 4:
        return False

    poly: list[Pt] = [(p.cg_in, p.weight_lb) for p in points]
    n = len(poly)
    for i in range(n):
        a1, a2 = poly[i], poly[(i + 1) % n]
        for j in range(i + 1, n):
            # Adjacent edges share a vertex
            if j == (i + 1) % n or (j + 1) % n == i:
                continue
            b1, b2 = poly[j], poly[(j + 1) % n]
            if segments_intersect(a1, a2, b1, b2):
                return True
    return False


def find_duplicates(points: list[EnvelopePoint]) -> list[tuple[int, int]]:
    """Every pair of coincident vertices, as 0-based index pairs."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            if same_point(points[i], points[j]):
                pairs.append((i, j))
    return pairs


def validate_envelope(points: list[EnvelopePoint]) -> EnvelopeValidation:
    """Check a sorted point sequence for use as an envelope polygon.

    Reports every duplicate pair (1-based indices) and a single message when
    any two non-adjacent edges touch or cross.  Never raises.
    """
    messages: list[str] = []
    if len(points) < 3:
        messages.append("Need at least 3 points.")
        return EnvelopeValidation(ok=False, messages=messages, points=list(points))

    for i, j in find_duplicates(points):
        messages.append(f"Duplicate point detected at index {i + 1} and {j + 1}.")

    if envelope_self_intersects(points):
        messages.append(
            "Polygon edges intersect (self-crossing). Reorder points around the perimeter."
        )

    if messages:
        logger.debug("Envelope with %d points is invalid: %s", len(points), "; ".join(messages))
    return EnvelopeValidation(ok=not messages, messages=messages, points=list(points))


def assist_envelope(raw: Any) -> EnvelopeAssist:
    """Run normalize → sort → validate on raw stored points."""
    normalized = normalize_envelope_points(raw)
    ordered = sort_envelope_points(normalized)
    return EnvelopeAssist(
        normalized=normalized,
        sorted=ordered,
        validation=validate_envelope(ordered),
    )
