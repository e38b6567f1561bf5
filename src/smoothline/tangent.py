"""Tangent calculation at data points, used to place Bezier control points."""

from __future__ import annotations

import math
from typing import Callable, Dict

from smoothline.consts import CurveMode
from smoothline.geom import Vec2

TangentCalculator = Callable[[Vec2, Vec2, float], Vec2]


def function_tangent(vector_from_previous: Vec2, vector_to_next: Vec2, smoothing_factor: float) -> Vec2:
    """
    Tangent at a point assuming the fitted curve is the graph of a function of x.

    The slope of the returned tangent is the average of the two secant slopes, its
    x-extent is one third of the smaller of the two x-extents times the smoothing factor.
    If a vector has no x-extent the tangent is the limit of the general case when that
    extent tends to zero.

    Args:
        vector_from_previous (Vec2): vector leading from the previous point to this one
        vector_to_next (Vec2): vector leading from this point to the next one
        smoothing_factor (float): 0 means straight lines, 1 means smooth

    Returns:
        Vec2: the tangent
    """
    if vector_from_previous.x == 0 or vector_to_next.x == 0:
        if vector_from_previous.x == 0 and vector_to_next.x == 0:
            return Vec2.zero()
        if vector_from_previous.x == 0:
            dy = vector_from_previous.y
        else:
            dy = vector_to_next.y
        return Vec2(0.0, dy * smoothing_factor / 6)

    dx = (smoothing_factor / 3) * min(abs(vector_from_previous.x), abs(vector_to_next.x))
    slope = (vector_from_previous.y / vector_from_previous.x + vector_to_next.y / vector_to_next.x) / 2
    # both vectors share the direction along x, either one tells it
    if vector_from_previous.x > 0:
        return Vec2(dx, dx * slope)
    return Vec2(-dx, -dx * slope)


def phase_tangent(vector_from_previous: Vec2, vector_to_next: Vec2, smoothing_factor: float) -> Vec2:
    """
    Tangent at a point assuming the fitted curve is a free trajectory (phase graph).

    The tangent lies on the bisector of the two vectors, its magnitude is the
    geometric mean of their magnitudes scaled by smoothing_factor / 3:

        sf/3 * sqrt(|v1|*|v2|) * (v1/|v1| + v2/|v2|) / 2
        = sf/6 * (v1 * sqrt(|v2|/|v1|) + v2 * sqrt(|v1|/|v2|))

    Args:
        vector_from_previous (Vec2): vector leading from the previous point to this one
        vector_to_next (Vec2): vector leading from this point to the next one
        smoothing_factor (float): 0 means straight lines, 1 means smooth

    Returns:
        Vec2: the tangent, the zero vector if one of the vectors has zero length
    """
    magnitude_from_previous = vector_from_previous.length()
    magnitude_to_next = vector_to_next.length()
    if magnitude_from_previous == 0 or magnitude_to_next == 0:
        return Vec2.zero()

    # separate roots, the ratio of the magnitudes may under- or overflow
    root_from_previous = math.sqrt(magnitude_from_previous)
    root_to_next = math.sqrt(magnitude_to_next)
    scale_previous = root_to_next / root_from_previous
    scale_next = root_from_previous / root_to_next
    vector_sum = vector_from_previous * scale_previous + vector_to_next * scale_next
    return vector_sum * (smoothing_factor / 6)


_TANGENT_CALCULATORS: Dict[CurveMode, TangentCalculator] = {
    CurveMode.FUNCTION: function_tangent,
    CurveMode.PHASE: phase_tangent,
}


def tangent_calculator(mode: CurveMode) -> TangentCalculator:
    """
    Select the tangent calculation for a curve mode.

    Args:
        mode (CurveMode): the curve mode

    Returns:
        TangentCalculator: function_tangent or phase_tangent

    Raises:
        ValueError: If _mode_ is not a CurveMode
    """
    try:
        return _TANGENT_CALCULATORS[mode]
    except (KeyError, TypeError) as err:
        raise ValueError(f"Invalid curve mode: {mode}") from err
