"""Test module for arc length and length inversion of BezierCurve in smoothline.bezier

The tests are run using pytest.
Reference lengths are taken from svgpathtools.
"""

import math

import pytest
import svgpathtools

from smoothline.bezier import BezierCurve
from smoothline.geom import Vec2

STRAIGHT = (Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(2.0, 0.0), Vec2(3.0, 0.0))
ARCH = (Vec2(0.0, 0.0), Vec2(1.0, 2.0), Vec2(3.0, 2.0), Vec2(4.0, 0.0))

# Cubic approximation of a quarter of the unit circle
KAPPA = 0.5522847498
QUARTER_CIRCLE = (Vec2(1.0, 0.0), Vec2(1.0, KAPPA), Vec2(KAPPA, 1.0), Vec2(0.0, 1.0))


def reference_length(controls) -> float:
    """Arc length computed by svgpathtools."""
    return svgpathtools.CubicBezier(*(complex(p.x, p.y) for p in controls)).length()


###############################################################################
# Length Tests
###############################################################################


class TestCubicLength:
    """Test the polyline approximation of the arc length."""

    def test_straight_line(self):
        """Test a degenerate straight curve with evenly spaced control points."""
        assert BezierCurve.cubic_length(*STRAIGHT) == pytest.approx(3.0)

    def test_coincident_points(self):
        """Test that a curve collapsed into a point has zero length."""
        p = Vec2(1.0, 1.0)

        assert BezierCurve.cubic_length(p, p, p, p) == 0.0

    def test_positive_length(self):
        """Test that a proper curve is longer than its chord."""
        length = BezierCurve.cubic_length(*ARCH)

        assert length > ARCH[0].distance_to(ARCH[3])

    @pytest.mark.parametrize("controls", [ARCH, QUARTER_CIRCLE])
    def test_matches_reference(self, controls):
        """Test against the arc length computed by svgpathtools."""
        assert BezierCurve.cubic_length(*controls) == pytest.approx(reference_length(controls), rel=1e-3)

    def test_quarter_circle(self):
        """Test that the quarter circle approximation is about pi/2 long."""
        assert BezierCurve.cubic_length(*QUARTER_CIRCLE) == pytest.approx(math.pi / 2, rel=1e-3)

    def test_underestimates_and_converges(self):
        """Test that more samples give a longer, more accurate polyline."""
        coarse = BezierCurve.cubic_length(*ARCH, num_samples=5)
        fine = BezierCurve.cubic_length(*ARCH, num_samples=500)
        reference = reference_length(ARCH)

        assert coarse < fine <= reference + 1e-9
        assert abs(fine - reference) < abs(coarse - reference)

    @pytest.mark.parametrize("num_samples", [0, -3])
    def test_no_samples(self, num_samples):
        """Test that non-positive sample counts give zero."""
        assert BezierCurve.cubic_length(*ARCH, num_samples=num_samples) == 0.0

    def test_length_at_parameter(self):
        """Test partial lengths."""
        assert BezierCurve.cubic_length_at_parameter(*STRAIGHT, 0.5) == pytest.approx(1.5)
        assert BezierCurve.cubic_length_at_parameter(*ARCH, 0.0) == 0.0
        assert BezierCurve.cubic_length_at_parameter(*ARCH, 1.0) == pytest.approx(
            BezierCurve.cubic_length(*ARCH, num_samples=50)
        )

    def test_length_at_parameter_monotonic(self):
        """Test that the partial length grows with the parameter."""
        lengths = [BezierCurve.cubic_length_at_parameter(*ARCH, t / 10) for t in range(11)]

        assert lengths == sorted(lengths)


###############################################################################
# Parameter at Length Tests
###############################################################################


class TestCubicParameterAtLength:
    """Test the bisection search of the parameter for a given arc length."""

    def test_zero_length(self):
        """Test that length 0 is found at the start."""
        assert BezierCurve.cubic_parameter_at_length(*ARCH, 0.0) == pytest.approx(0.0, abs=2e-3)

    def test_full_length(self):
        """Test that the full length is found at the end."""
        length = BezierCurve.cubic_length(*ARCH)

        assert BezierCurve.cubic_parameter_at_length(*ARCH, length) == pytest.approx(1.0, abs=2e-3)

    def test_straight_line_half(self):
        """Test a curve with constant speed where length is proportional to t."""
        assert BezierCurve.cubic_parameter_at_length(*STRAIGHT, 1.5) == pytest.approx(0.5, abs=2e-3)
        assert BezierCurve.cubic_parameter_at_length(*STRAIGHT, 0.75) == pytest.approx(0.25, abs=2e-3)

    def test_roundtrip(self):
        """Test that the length at the found parameter is the target length."""
        target = 2.0
        t = BezierCurve.cubic_parameter_at_length(*ARCH, target, tolerance=1e-6)

        assert BezierCurve.cubic_length_at_parameter(*ARCH, t) == pytest.approx(target, abs=1e-4)

    def test_monotonic(self):
        """Test that longer targets give larger parameters."""
        t1 = BezierCurve.cubic_parameter_at_length(*ARCH, 1.0)
        t2 = BezierCurve.cubic_parameter_at_length(*ARCH, 2.0)
        t3 = BezierCurve.cubic_parameter_at_length(*ARCH, 3.0)

        assert 0.0 < t1 < t2 < t3 < 1.0

    def test_beyond_length(self):
        """Test that targets beyond the curve end up at the end."""
        assert BezierCurve.cubic_parameter_at_length(*ARCH, 100.0) == pytest.approx(1.0, abs=2e-3)

    def test_degenerate_curve(self):
        """Test that a curve collapsed into a point does not fail."""
        p = Vec2(2.0, 2.0)

        assert BezierCurve.cubic_parameter_at_length(p, p, p, p, 0.0) == pytest.approx(0.0, abs=2e-3)

    def test_coarse_tolerance(self):
        """Test that a tolerance of at least 1 returns the initial midpoint."""
        assert BezierCurve.cubic_parameter_at_length(*ARCH, 1.0, tolerance=1.0) == 0.5

    @pytest.mark.parametrize("tolerance", [0.0, -0.1])
    def test_invalid_tolerance(self, tolerance):
        """Test that a non-positive tolerance is rejected."""
        with pytest.raises(ValueError, match="Tolerance"):
            BezierCurve.cubic_parameter_at_length(*ARCH, 1.0, tolerance=tolerance)
