#!/usr/bin/env python3
#
# module: tidemath.py
# dependencies: none (stdlib only)

import math


def clamp(value, low, high):
    if low > high:
        raise ValueError(f"clamp bounds reversed: {low} > {high}")
    return max(low, min(value, high))


def round_half_away(value):
    """Round like the display firmware does: 2.5 -> 3, -2.5 -> -3."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def lerp(t, low, high):
    """Pixel position a fraction t of the way from low to high (t clamped to 0..1)."""
    t01 = clamp(t, 0.0, 1.0)
    return round_half_away(t01 * (high - low) + low)


def inverse_lerp(value, low, high):
    """Fraction of value between low and high, saturating at 0 and 1.

    A single distinct height (low == high) maps to 0.0.
    """
    clamped = clamp(value, low, high)
    if high == low:
        return 0.0
    return (clamped - low) / (high - low)


normalize = inverse_lerp
