"""Central module containing constants and definitions for curve fitting."""

from __future__ import annotations

from enum import Enum


###############################################################################
# Enums
###############################################################################


class CurveMode(Enum):
    """
    Enum to select how tangents are derived at each data point.

    - `FUNCTION`: the series is a single-valued function of x (e.g. value over time).
      Points should be sorted by x (ascending or descending).
    - `PHASE`: the series is a free trajectory without any ordering along an axis.
    """

    FUNCTION = "function"
    PHASE = "phase"


###############################################################################
# Defaults
###############################################################################

# Smoothing factor: 0 = straight segments, 1 = maximal smoothing
DEFAULT_SMOOTHING_FACTOR: float = 1.0

# Number of points each cubic segment is sampled into when building a polyline path
DEFAULT_SAMPLES_PER_SEGMENT: int = 10

# Number of polyline steps used to approximate the length of a whole segment
DEFAULT_LENGTH_SAMPLES: int = 100

# Number of polyline steps used to approximate the length of a partial segment
DEFAULT_LENGTH_AT_PARAMETER_SAMPLES: int = 50

# Width of the parameter interval at which the length search stops
DEFAULT_PARAMETER_TOLERANCE: float = 0.001

# Sample counts from this value on are evaluated with NumPy instead of pure Python
NUMPY_SAMPLING_THRESHOLD: int = 70
