"""Rounding and display helpers for W&B figures."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 1) -> float:
    """Round half up (``2.25 -> 2.3``), not to even like the builtin ``round``.

    Values too large to scale (or already non-finite) are returned unchanged.
    """
    scale = 10**digits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / scale


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def fmt(value: float, digits: int = 1) -> str:
    """Rounded figure without trailing zeros: ``170.0 -> '170'``, ``37.25 -> '37.3'``."""
    text = f"{round_half_up(value, digits):.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
