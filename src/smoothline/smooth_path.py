"""Assembling smooth paths from data points and their control points."""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from smoothline.bezier import BezierCurve
from smoothline.common import MaybeControlPair, MaybePoint
from smoothline.consts import DEFAULT_SAMPLES_PER_SEGMENT
from smoothline.geom import GeomMath, Vec2

logger = logging.getLogger(__name__)


###############################################################################
# SmoothPathBuilder
###############################################################################
class SmoothPathBuilder:
    """Turn points and control points (see ControlPointCalculator) into drawable paths.

    Two outputs are supported:
    - a polyline (sampled cubic segments) for backends drawing straight lines only
    - SVG path data with cubic commands for backends drawing Bezier curves natively

    No segment is ever drawn across a gap, even if the control points were
    calculated by interpolating over it.
    """

    @staticmethod
    def _check_lengths(points: Sequence[MaybePoint], control_points: Sequence[MaybeControlPair]) -> None:
        if len(points) != len(control_points):
            raise ValueError(
                f"Number of control point pairs ({len(control_points)}) "
                f"does not match number of points ({len(points)})"
            )

    @staticmethod
    def _has_controls(pair: MaybeControlPair) -> bool:
        return pair is not None and len(pair) >= 2

    @classmethod
    def build(
        cls,
        points: Sequence[MaybePoint],
        control_points: Sequence[MaybeControlPair],
        samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT,
    ) -> List[Vec2]:
        """
        Build a polyline following the smooth curve through _points_.

        Each pair of consecutive present points with control points on both ends is
        joined by its cubic segment sampled into _samples_per_segment_ points; the shared
        vertex between two segments appears only once. Consecutive present points
        lacking control points are joined by a straight line. Pairs including a gap
        are skipped.

        Args:
            points: The data series, None entries are gaps
            control_points: One (incoming, outgoing) pair or None per point
            samples_per_segment: Number of points per cubic segment. Defaults to 10.

        Returns:
            List[Vec2]: the path points, empty for empty input

        Raises:
            ValueError: If _points_ and _control_points_ differ in length
        """
        cls._check_lengths(points, control_points)

        path: List[Vec2] = []
        num_curves = 0
        num_lines = 0
        for i in range(len(points) - 1):
            current_point = points[i]
            next_point = points[i + 1]
            if current_point is None or next_point is None:
                continue

            current_controls = control_points[i]
            next_controls = control_points[i + 1]
            if cls._has_controls(current_controls) and cls._has_controls(next_controls):
                samples = BezierCurve.sample_cubic(
                    current_point,
                    current_controls[1],  # control point after current point
                    next_controls[0],  # control point before next point
                    next_point,
                    samples_per_segment,
                )
                # first sample equals the last one of the previous segment
                path.extend(samples if i == 0 else samples[1:])
                num_curves += 1
            else:
                if i == 0:
                    path.append(current_point)
                path.append(next_point)
                num_lines += 1

        logger.debug("Built path of %d points from %d curves and %d lines", len(path), num_curves, num_lines)
        return path

    @staticmethod
    def to_array(path: Sequence[Vec2]) -> NDArray[np.float64]:
        """
        Convert a path (see build()) into an array of shape (n, 2) for polyline backends.
        """
        return GeomMath.to_array(path)

    @classmethod
    def to_svg_path_data(
        cls,
        points: Sequence[MaybePoint],
        control_points: Sequence[MaybeControlPair],
        closed: bool = False,
        precision: int = 6,
    ) -> str:
        """
        Create the SVG path data (the "d" attribute) of the smooth curve through _points_.

        Every run of present points starts with a MoveTo (M). Consecutive present points
        are joined by a cubic Bezier (C) if both carry control points, otherwise by a
        LineTo (L). If _closed_ is True and the series has no gaps, the closing segment
        from the last to the first point is added, followed by ClosePath (Z).

        Args:
            points: The data series, None entries are gaps
            control_points: One (incoming, outgoing) pair or None per point
            closed: True to close the path. Defaults to False.
            precision: Significant digits of the coordinates. Defaults to 6.

        Returns:
            str: the path data, empty if there is no present point

        Raises:
            ValueError: If _points_ and _control_points_ differ in length
        """
        cls._check_lengths(points, control_points)

        def fmt(point: Vec2) -> str:
            return f"{point.x:.{precision}g} {point.y:.{precision}g}"

        def segment(start: int, end: int) -> str:
            start_controls = control_points[start]
            end_controls = control_points[end]
            if cls._has_controls(start_controls) and cls._has_controls(end_controls):
                return f"C {fmt(start_controls[1])} {fmt(end_controls[0])} {fmt(points[end])}"
            return f"L {fmt(points[end])}"

        commands: List[str] = []
        for i, point in enumerate(points):
            if point is None:
                continue
            if i > 0 and points[i - 1] is not None:
                commands.append(segment(i - 1, i))
            else:
                commands.append(f"M {fmt(point)}")

        if closed and len(points) > 1 and all(point is not None for point in points):
            commands.append(segment(len(points) - 1, 0))
            commands.append("Z")

        return " ".join(commands)
