"""Control point calculation for Bezier curves running through a data series."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from smoothline.common import ControlPairs, MaybePoint, SeriesHelper
from smoothline.consts import CurveMode
from smoothline.geom import Vec2
from smoothline.tangent import tangent_calculator

logger = logging.getLogger(__name__)


###############################################################################
# ControlPointCalculator
###############################################################################
class ControlPointCalculator:
    """Compute the Bezier control points of a smooth curve through a sequence of points.

    For every data point two control points are returned: the first one is used by the
    segment ending at the point, the second one by the segment starting at it. Both
    lie on the tangent at the point, mirrored around it, so the curve is smooth there.
    """

    @staticmethod
    def _neighbor_indices(
        points: Sequence[MaybePoint], index: int, is_closed: bool, interpolate_gaps: bool
    ) -> Tuple[Optional[int], Optional[int]]:
        """
        Indices of the previous and next neighbor of the point at _index_.

        Returns:
            Tuple[Optional[int], Optional[int]]: (previous, next); None where there is no neighbor
        """
        if interpolate_gaps:
            return (
                SeriesHelper.next_present_index(points, index, -1, is_closed),
                SeriesHelper.next_present_index(points, index, 1, is_closed),
            )

        size = len(points)
        if is_closed:
            return (size + index - 1) % size, (index + 1) % size
        previous_index = index - 1 if index > 0 else None
        next_index = index + 1 if index + 1 < size else None
        return previous_index, next_index

    @classmethod
    def calculate(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        points: Sequence[MaybePoint],
        smoothing_factor: float,
        mode: CurveMode,
        is_closed: bool,
        interpolate_gaps: bool,
    ) -> ControlPairs:
        """
        Compute for every point the pair of control points (incoming, outgoing).

        Args:
            points: The data series, None entries are gaps
            smoothing_factor: 0 means straight lines connecting the points, 1 means smooth.
                Values outside [0, 1] are used as they are.
            mode: CurveMode.FUNCTION if the series is a function of x (points sorted by x),
                CurveMode.PHASE for a free trajectory
            is_closed: True if the last point connects back to the first one
            interpolate_gaps: True to take the nearest present points as neighbors,
                skipping gaps, instead of the adjacent entries

        Returns:
            ControlPairs: one entry per point; None where the point is a gap,
                (point, point) where the point lacks a present neighbor on either side

        Raises:
            ValueError: If _mode_ is not a CurveMode
        """
        tangent = tangent_calculator(mode)

        result: ControlPairs = []
        for i, current_point in enumerate(points):
            if current_point is None:
                result.append(None)
                continue

            previous_index, next_index = cls._neighbor_indices(points, i, is_closed, interpolate_gaps)
            previous_point = points[previous_index] if previous_index is not None else None
            next_point = points[next_index] if next_index is not None else None

            if previous_point is None or next_point is None:
                # no tangent without both neighbors: zero length controls
                result.append((current_point, current_point))
                continue

            tangent_vector = tangent(current_point - previous_point, next_point - current_point, smoothing_factor)
            result.append((current_point - tangent_vector, current_point + tangent_vector))

        logger.debug(
            "Calculated control points for %d points (%d gaps), mode=%s, closed=%s, interpolate_gaps=%s",
            len(points),
            len(SeriesHelper.gap_indices(points)),
            mode.name,
            is_closed,
            interpolate_gaps,
        )
        return result

    @classmethod
    def calculate_from_xy(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        points: Union[Sequence[Optional[Sequence[float]]], NDArray[np.float64]],
        smoothing_factor: float,
        mode: CurveMode,
        is_closed: bool,
        interpolate_gaps: bool,
    ) -> ControlPairs:
        """
        Same as calculate(), but takes raw (x, y) entries (tuples, lists or numpy rows)
        with None for gaps.
        """
        return cls.calculate(
            cls.to_points(points),
            smoothing_factor,
            mode,
            is_closed,
            interpolate_gaps,
        )

    @staticmethod
    def to_points(points: Union[Sequence[Optional[Sequence[float]]], NDArray[np.float64]]) -> List[MaybePoint]:
        """Convert raw (x, y) entries into a list of Vec2, keeping None for gaps."""
        return [None if point is None else Vec2.from_xy(point) for point in points]
