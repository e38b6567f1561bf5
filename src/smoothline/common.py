"""Central module containing shared types and data-series helpers."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from smoothline.geom import Vec2

###############################################################################
# Types
###############################################################################

# One entry of a data series; None marks a gap (missing value)
MaybePoint = Optional[Vec2]

# Control points around one data point: (incoming, outgoing)
ControlPair = Tuple[Vec2, Vec2]

# One entry of a control point sequence; None exactly where the data point is a gap
MaybeControlPair = Optional[ControlPair]

ControlPairs = List[MaybeControlPair]


###############################################################################
# SeriesHelper
###############################################################################
class SeriesHelper:
    """Collection of static helpers working on data series which may contain gaps."""

    @staticmethod
    def next_present_index(sequence: Sequence[Any], index: int, direction: int, is_circular: bool) -> Optional[int]:
        """
        Find the nearest entry which is not None, walking from _index_ in _direction_.

        The entry at _index_ itself is never returned. On an open sequence the walk stops
        at the bounds, on a circular one it wraps around and stops when it gets back
        to _index_. The walk is iterative and visits every entry at most once.

        Args:
            sequence (Sequence[Any]): the series, None entries are gaps
            index (int): start index
            direction (int): +1 to search forward, -1 to search backward
            is_circular (bool): True if the last entry is adjacent to the first one

        Returns:
            Optional[int]: index of the nearest present entry, None if there is none

        Raises:
            ValueError: If direction is neither +1 nor -1
        """
        if direction not in (1, -1):
            raise ValueError(f"Direction must be +1 or -1, got {direction}")

        size = len(sequence)
        if size == 0:
            return None

        result = index + direction
        if is_circular:
            result = (result + size) % size
        while result != index and 0 <= result < size:
            if sequence[result] is not None:
                return result
            result += direction
            if is_circular:
                result = (result + size) % size
        return None

    @staticmethod
    def gap_indices(sequence: Sequence[Any]) -> List[int]:
        """List[int]: Indices of all None entries of _sequence_."""
        return [i for i, entry in enumerate(sequence) if entry is None]
