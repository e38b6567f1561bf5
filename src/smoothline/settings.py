"""Settings bundling the options of a smoothed chart series."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Union

from smoothline.common import ControlPairs, MaybePoint
from smoothline.consts import DEFAULT_SAMPLES_PER_SEGMENT, DEFAULT_SMOOTHING_FACTOR, CurveMode
from smoothline.control_points import ControlPointCalculator
from smoothline.geom import Vec2
from smoothline.smooth_path import SmoothPathBuilder

logger = logging.getLogger(__name__)


@dataclass
class CurveSettings:
    """
    Represents the options for fitting a smooth curve through a data series.

    The options are as follows:

    - `smoothing_factor`: 0 = straight lines, 1 = smooth. Values outside [0, 1] are
      used unclamped, a warning is logged for them.
    - `mode`: CurveMode.FUNCTION for series that are functions of x, CurveMode.PHASE
      for free trajectories.
    - `is_closed`: the last point connects back to the first one.
    - `interpolate_gaps`: tangents are calculated across gaps using the nearest
      present neighbors.
    - `samples_per_segment`: number of points each cubic segment is sampled into.
    """

    smoothing_factor: float = DEFAULT_SMOOTHING_FACTOR
    mode: CurveMode = CurveMode.FUNCTION
    is_closed: bool = False
    interpolate_gaps: bool = False
    samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT

    def __post_init__(self):
        self.mode = self.parse_mode(self.mode)
        if not 0.0 <= self.smoothing_factor <= 1.0:
            logger.warning("Smoothing factor %g is outside [0, 1]", self.smoothing_factor)
        if self.samples_per_segment < 0:
            raise ValueError(f"Samples per segment must not be negative, got {self.samples_per_segment}")

    @staticmethod
    def parse_mode(mode: Union[CurveMode, str]) -> CurveMode:
        """
        Convert a CurveMode or its case-insensitive name ("function", "phase") into a CurveMode.

        Raises:
            ValueError: If _mode_ names no CurveMode
        """
        if isinstance(mode, CurveMode):
            return mode
        try:
            return CurveMode(str(mode).lower())
        except ValueError as err:
            raise ValueError(f"Invalid curve mode: {mode}") from err

    @classmethod
    def from_dict(cls, data: dict) -> CurveSettings:
        """Create a CurveSettings instance from a dictionary, missing keys use the defaults."""
        return cls(
            smoothing_factor=data.get("smoothing_factor", DEFAULT_SMOOTHING_FACTOR),
            mode=data.get("mode", CurveMode.FUNCTION),
            is_closed=data.get("is_closed", False),
            interpolate_gaps=data.get("interpolate_gaps", False),
            samples_per_segment=data.get("samples_per_segment", DEFAULT_SAMPLES_PER_SEGMENT),
        )

    def to_dict(self) -> dict:
        """Convert the CurveSettings instance to a dictionary."""
        return {
            "smoothing_factor": self.smoothing_factor,
            "mode": self.mode.value,
            "is_closed": self.is_closed,
            "interpolate_gaps": self.interpolate_gaps,
            "samples_per_segment": self.samples_per_segment,
        }

    def control_points(self, points: Sequence[MaybePoint]) -> ControlPairs:
        """Calculate the control points of _points_ with these settings."""
        return ControlPointCalculator.calculate(
            points, self.smoothing_factor, self.mode, self.is_closed, self.interpolate_gaps
        )

    def fit(self, points: Sequence[MaybePoint]) -> List[Vec2]:
        """
        Fit a smooth curve through _points_ and return it sampled as a polyline.

        Args:
            points (Sequence[MaybePoint]): the data series, None entries are gaps

        Returns:
            List[Vec2]: the path points
        """
        return SmoothPathBuilder.build(points, self.control_points(points), self.samples_per_segment)
