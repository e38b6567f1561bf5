"""Bezier curve evaluation, sampling and measuring utilities."""

from __future__ import annotations

import logging
from typing import List

import numpy as np
from numpy.typing import NDArray

from smoothline.consts import (
    DEFAULT_LENGTH_AT_PARAMETER_SAMPLES,
    DEFAULT_LENGTH_SAMPLES,
    DEFAULT_PARAMETER_TOLERANCE,
    NUMPY_SAMPLING_THRESHOLD,
)
from smoothline.geom import GeomMath, Vec2

logger = logging.getLogger(__name__)


class BezierCurve:
    """Class to handle quadratic and cubic Bezier curve operations.

    Provides evaluation, derivative, sampling into point sequences and
    arc length measuring of single Bezier segments. Sampling is available as
    a pure Python and a NumPy-vectorized implementation.
    """

    ###########################################################################
    # Evaluation
    ###########################################################################

    @staticmethod
    def evaluate_cubic(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
        """
        Evaluate a cubic Bezier curve at parameter t.

        B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            t: Parameter, usually within [0, 1]; other values extrapolate the polynomial

        Returns:
            Vec2: the point on the curve
        """
        omt = 1.0 - t
        omt2 = omt * omt
        omt3 = omt2 * omt
        t2 = t * t
        t3 = t2 * t
        return Vec2(
            omt3 * p0.x + 3.0 * omt2 * t * p1.x + 3.0 * omt * t2 * p2.x + t3 * p3.x,
            omt3 * p0.y + 3.0 * omt2 * t * p1.y + 3.0 * omt * t2 * p2.y + t3 * p3.y,
        )

    @staticmethod
    def evaluate_quadratic(p0: Vec2, p1: Vec2, p2: Vec2, t: float) -> Vec2:
        """
        Evaluate a quadratic Bezier curve at parameter t.

        B(t) = (1-t)^2*P0 + 2*(1-t)*t*P1 + t^2*P2

        Args:
            p0: Start point
            p1: Control point
            p2: End point
            t: Parameter, usually within [0, 1]

        Returns:
            Vec2: the point on the curve
        """
        omt = 1.0 - t
        omt2 = omt * omt
        t2 = t * t
        return Vec2(
            omt2 * p0.x + 2.0 * omt * t * p1.x + t2 * p2.x,
            omt2 * p0.y + 2.0 * omt * t * p1.y + t2 * p2.y,
        )

    @staticmethod
    def derivative_cubic(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
        """
        First derivative (tangent vector) of a cubic Bezier curve at parameter t.

        B'(t) = 3*(1-t)^2*(P1-P0) + 6*(1-t)*t*(P2-P1) + 3*t^2*(P3-P2)

        The result is not normalized, use Vec2.normalized() for a unit tangent.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            t: Parameter, usually within [0, 1]

        Returns:
            Vec2: the derivative
        """
        omt = 1.0 - t
        omt2 = omt * omt
        t2 = t * t
        return Vec2(
            3.0 * omt2 * (p1.x - p0.x) + 6.0 * omt * t * (p2.x - p1.x) + 3.0 * t2 * (p3.x - p2.x),
            3.0 * omt2 * (p1.y - p0.y) + 6.0 * omt * t * (p2.y - p1.y) + 3.0 * t2 * (p3.y - p2.y),
        )

    @staticmethod
    def evaluate_cubic_numpy(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Evaluate a cubic Bezier curve at all parameters of _t_ using vectorized operations.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            t: Array of parameters

        Returns:
            NDArray[np.float64] of shape (len(t), 2) containing the points (x, y)
        """
        omt = 1.0 - t
        omt2 = omt**2
        omt3 = omt2 * omt
        t2 = t**2
        t3 = t2 * t

        result = np.empty((len(t), 2), dtype=np.float64)
        result[:, 0] = omt3 * p0.x + 3 * omt2 * t * p1.x + 3 * omt * t2 * p2.x + t3 * p3.x
        result[:, 1] = omt3 * p0.y + 3 * omt2 * t * p1.y + 3 * omt * t2 * p2.y + t3 * p3.y
        return result

    ###########################################################################
    # Sampling
    ###########################################################################

    @classmethod
    def sample_cubic_python(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: Vec2,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        num_samples: int,
    ) -> List[Vec2]:
        """
        Sample a cubic Bezier curve at _num_samples_ evenly spaced parameters using pure Python.
        """
        if num_samples <= 0:
            return []
        if num_samples == 1:
            return [p0]
        last = num_samples - 1
        return [cls.evaluate_cubic(p0, p1, p2, p3, i / last) for i in range(num_samples)]

    @classmethod
    def sample_cubic_array(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: Vec2,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        num_samples: int,
    ) -> NDArray[np.float64]:
        """
        Sample a cubic Bezier curve at _num_samples_ evenly spaced parameters using NumPy.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            num_samples: Number of points, parameters are i/(num_samples-1)

        Returns:
            NDArray[np.float64] of shape (num_samples, 2); (0, 2) if num_samples <= 0
            and just the start point if num_samples == 1
        """
        if num_samples <= 0:
            return np.empty((0, 2), dtype=np.float64)
        if num_samples == 1:
            return np.array([[p0.x, p0.y]], dtype=np.float64)
        t = np.linspace(0.0, 1.0, num_samples, dtype=np.float64)
        return cls.evaluate_cubic_numpy(p0, p1, p2, p3, t)

    @classmethod
    def sample_cubic(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: Vec2,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        num_samples: int,
    ) -> List[Vec2]:
        """
        Sample a cubic Bezier curve at _num_samples_ evenly spaced parameters.
        Uses pure Python for small sample counts, NumPy for larger ones.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            num_samples: Number of points, parameters are i/(num_samples-1)

        Returns:
            List[Vec2]: the points; first is p0 and last is p3 for num_samples >= 2,
                [p0] for num_samples == 1 and empty for num_samples <= 0
        """
        if num_samples < NUMPY_SAMPLING_THRESHOLD:
            return cls.sample_cubic_python(p0, p1, p2, p3, num_samples)
        return GeomMath.from_array(cls.sample_cubic_array(p0, p1, p2, p3, num_samples))

    ###########################################################################
    # Length
    ###########################################################################

    @staticmethod
    def _polyline_length(points: NDArray[np.float64]) -> float:
        """Sum of the distances between consecutive rows of _points_."""
        if len(points) < 2:
            return 0.0
        deltas = np.diff(points, axis=0)
        return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))

    @classmethod
    def cubic_length(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: Vec2,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        num_samples: int = DEFAULT_LENGTH_SAMPLES,
    ) -> float:
        """
        Approximate the arc length of a cubic Bezier curve.

        The curve is evaluated at t = i/num_samples for i in 0..num_samples and the
        length of the resulting polyline is returned. This underestimates the true
        arc length and converges to it for growing num_samples.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            num_samples: Number of polyline steps. Defaults to 100.

        Returns:
            float: the approximated length, 0.0 if num_samples <= 0
        """
        return cls.cubic_length_at_parameter(p0, p1, p2, p3, 1.0, num_samples)

    @classmethod
    def cubic_length_at_parameter(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: Vec2,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        parameter: float,
        num_samples: int = DEFAULT_LENGTH_AT_PARAMETER_SAMPLES,
    ) -> float:
        """
        Approximate the arc length of a cubic Bezier curve from t=0 to t=parameter.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            parameter: Upper parameter bound
            num_samples: Number of polyline steps. Defaults to 50.

        Returns:
            float: the approximated length, 0.0 if num_samples <= 0
        """
        if num_samples <= 0:
            return 0.0
        t = np.arange(num_samples + 1, dtype=np.float64) / num_samples * parameter
        return cls._polyline_length(cls.evaluate_cubic_numpy(p0, p1, p2, p3, t))

    @classmethod
    def cubic_parameter_at_length(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: Vec2,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        target_length: float,
        tolerance: float = DEFAULT_PARAMETER_TOLERANCE,
    ) -> float:
        """
        Find the parameter t at which the arc length from the start equals _target_length_.

        Bisection on t within [0, 1]; relies on the arc length being non-decreasing in t.
        The search stops as soon as the interval is not wider than _tolerance_ and returns
        the last midpoint. Targets beyond the curve length end up close to 1, targets
        of 0 or less close to 0.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            target_length: Arc length measured from p0
            tolerance: Width of the parameter interval at which the search stops. Defaults to 0.001.

        Returns:
            float: the parameter t

        Raises:
            ValueError: If tolerance is not positive
        """
        if tolerance <= 0:
            raise ValueError(f"Tolerance must be positive, got {tolerance}")

        low = 0.0
        high = 1.0
        mid = 0.5
        iterations = 0
        while high - low > tolerance:
            mid = (low + high) / 2
            current_length = cls.cubic_length_at_parameter(p0, p1, p2, p3, mid)
            if current_length < target_length:
                low = mid
            else:
                high = mid
            iterations += 1

        logger.debug("Parameter %g found for length %g after %d iterations", mid, target_length, iterations)
        return mid
