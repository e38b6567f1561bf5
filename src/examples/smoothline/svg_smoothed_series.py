"""Creates a SVG file showing a smoothed data series with a gap
and a closed smoothed trajectory.

The data series is fitted in function mode and drawn as a sampled polyline,
the trajectory is fitted in phase mode and drawn with native cubic Bezier commands.
The original data points are marked by small circles.
"""

from pathlib import Path

import svgwrite

from smoothline.consts import CurveMode
from smoothline.control_points import ControlPointCalculator
from smoothline.geom import Vec2
from smoothline.settings import CurveSettings
from smoothline.smooth_path import SmoothPathBuilder

OUTPUT_FILE = "data/output/example/smoothline/smoothed_series.svg"

CANVAS_WIDTH = 200  # width in user units
CANVAS_HEIGHT = 100  # height in user units

SERIES = [
    Vec2(10, 80),
    Vec2(30, 40),
    Vec2(50, 55),
    None,  # missing value
    Vec2(90, 20),
    Vec2(110, 60),
    Vec2(130, 50),
]

TRAJECTORY = [
    Vec2(150, 30),
    Vec2(180, 40),
    Vec2(170, 80),
    Vec2(140, 60),
]


def main(output_file: str = OUTPUT_FILE) -> str:
    """Fits both curves, adds them and the data points to a drawing
    and saves the drawing to a SVG file.

    Returns the name of the written file.
    """
    Path(output_file).parent.mkdir(parents=True, exist_ok=True)

    dwg = svgwrite.Drawing(output_file, size=(CANVAS_WIDTH, CANVAS_HEIGHT))

    # Data series: polyline through the sampled curve
    settings = CurveSettings(smoothing_factor=1.0, mode=CurveMode.FUNCTION, samples_per_segment=12)
    path = settings.fit(SERIES)
    dwg.add(
        dwg.polyline(
            points=[point.as_tuple() for point in path],
            stroke="steelblue",
            stroke_width=1,
            fill="none",
        )
    )

    # Trajectory: closed Bezier path
    control_points = ControlPointCalculator.calculate(
        TRAJECTORY, smoothing_factor=1.0, mode=CurveMode.PHASE, is_closed=True, interpolate_gaps=False
    )
    dwg.add(
        dwg.path(
            d=SmoothPathBuilder.to_svg_path_data(TRAJECTORY, control_points, closed=True),
            stroke="darkred",
            stroke_width=1,
            fill="none",
        )
    )

    for point in SERIES + TRAJECTORY:
        if point is not None:
            dwg.add(dwg.circle(center=point.as_tuple(), r=1.5, fill="black"))

    dwg.saveas(output_file, pretty=True, indent=2)
    return output_file


if __name__ == "__main__":
    main()
