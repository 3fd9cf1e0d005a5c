"""Classify a loading point against a validated envelope polygon."""

from __future__ import annotations

from wnb.contracts.aircraft import EnvelopePoint
from wnb.contracts.enums import EnvelopeDiagnosis


def cg_crossings(weight_lb: float, polygon: list[EnvelopePoint]) -> list[float]:
    """CG values where the polygon boundary crosses ``weight_lb``.

    Edge weight ranges are inclusive at both ends, so a vertex exactly at
    ``weight_lb`` contributes once per incident edge.  Horizontal edges are
    skipped.
    """
    crossings: list[float] = []
    n = len(polygon)
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        low, high = sorted((a.weight_lb, b.weight_lb))
        if not low <= weight_lb <= high:
            continue
        if a.weight_lb == b.weight_lb:
            continue
        t = (weight_lb - a.weight_lb) / (b.weight_lb - a.weight_lb)
        crossings.append(a.cg_in + t * (b.cg_in - a.cg_in))
    return crossings


def diagnose_envelope(
    cg_in: float,
    weight_lb: float,
    polygon: list[EnvelopePoint],
) -> EnvelopeDiagnosis:
    """Locate (cg, weight) relative to a sorted, validated polygon.

    Weight is checked first: anything above the highest vertex is
    ``OVERWEIGHT`` whatever its CG.  Otherwise the CG is compared with the
    forward-most and aft-most boundary crossings at that weight.
    """
    if len(polygon) < 3:
        return EnvelopeDiagnosis.UNDEFINED

    max_weight = max(p.weight_lb for p in polygon)
    if weight_lb > max_weight:
        return EnvelopeDiagnosis.OVERWEIGHT

    crossings = cg_crossings(weight_lb, polygon)
    if len(crossings) < 2:
        return EnvelopeDiagnosis.OUTSIDE

    if cg_in < min(crossings):
        return EnvelopeDiagnosis.FORWARD
    if cg_in > max(crossings):
        return EnvelopeDiagnosis.AFT
    return EnvelopeDiagnosis.INSIDE
