"""Test module for smoothline.geom

The tests are run using pytest.
These tests ensure that all functions and interfaces in src/smoothline/geom.py
remain working correctly after changes and refactoring.
"""

import dataclasses
import math

import numpy as np
import pytest

from smoothline.geom import GeomMath, Vec2

###############################################################################
# Vec2 Tests
###############################################################################


class TestVec2:
    """Test class for Vec2 functionality."""

    def test_arithmetic(self):
        """Test addition, subtraction, scaling and negation."""
        v1 = Vec2(1.0, 2.0)
        v2 = Vec2(3.0, -1.0)

        assert v1 + v2 == Vec2(4.0, 1.0)
        assert v1 - v2 == Vec2(-2.0, 3.0)
        assert v1 * 2.0 == Vec2(2.0, 4.0)
        assert 0.5 * v1 == Vec2(0.5, 1.0)
        assert -v1 == Vec2(-1.0, -2.0)

    def test_operations_return_new_values(self):
        """Test that operands stay unchanged."""
        v1 = Vec2(1.0, 2.0)
        _ = v1 + Vec2(1.0, 1.0)

        assert v1 == Vec2(1.0, 2.0)

    def test_immutable(self):
        """Test that coordinates cannot be reassigned."""
        v = Vec2(1.0, 2.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0  # type: ignore[misc]

    def test_length_and_distance(self):
        """Test length and distance with a 3-4-5 triangle."""
        assert Vec2(3.0, 4.0).length() == 5.0
        assert Vec2(1.0, 1.0).distance_to(Vec2(4.0, 5.0)) == 5.0
        assert Vec2.zero().length() == 0.0

    def test_normalized(self):
        """Test normalization, including the zero vector."""
        unit = Vec2(3.0, 4.0).normalized()

        assert math.isclose(unit.length(), 1.0)
        assert GeomMath.is_close(unit, Vec2(0.6, 0.8))
        assert Vec2.zero().normalized() == Vec2.zero()

    def test_from_xy(self):
        """Test creation from tuples, numpy rows and Vec2."""
        v = Vec2(1.5, 2.5)

        assert Vec2.from_xy((1.5, 2.5)) == v
        assert Vec2.from_xy(np.array([1.5, 2.5, 0.0])) == v
        assert Vec2.from_xy(v) is v
        assert isinstance(Vec2.from_xy(np.array([1, 2])).x, float)

    def test_as_tuple(self):
        """Test conversion into a tuple."""
        assert Vec2(1.0, -2.0).as_tuple() == (1.0, -2.0)

    def test_hashable(self):
        """Test that points can be used as dict keys / set members."""
        assert len({Vec2(1.0, 2.0), Vec2(1.0, 2.0), Vec2(2.0, 1.0)}) == 2


###############################################################################
# GeomMath Tests
###############################################################################


class TestGeomMath:
    """Test class for GeomMath functionality."""

    def test_is_close(self):
        """Test tolerance based comparison."""
        assert GeomMath.is_close(Vec2(1.0, 1.0), Vec2(1.0 + 1e-12, 1.0 - 1e-12))
        assert not GeomMath.is_close(Vec2(1.0, 1.0), Vec2(1.1, 1.0))
        assert GeomMath.is_close(Vec2(1.0, 1.0), Vec2(1.1, 1.0), abs_tol=0.2)

    def test_to_array(self):
        """Test conversion of points into an (n, 2) array."""
        array = GeomMath.to_array([Vec2(0.0, 1.0), Vec2(2.0, 3.0)])

        assert array.shape == (2, 2)
        assert array.dtype == np.float64
        np.testing.assert_array_equal(array, [[0.0, 1.0], [2.0, 3.0]])

    def test_to_array_empty(self):
        """Test that an empty sequence gives an array of shape (0, 2)."""
        assert GeomMath.to_array([]).shape == (0, 2)

    def test_from_array(self):
        """Test conversion of an array into points."""
        points = GeomMath.from_array(np.array([[0.0, 1.0, 9.0], [2.0, 3.0, 9.0]]))

        assert points == [Vec2(0.0, 1.0), Vec2(2.0, 3.0)]
