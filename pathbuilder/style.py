"""
Drawing style for path rendering.

Styles are plain values handed to the render and export calls; there is no
module-level mutable default.
"""

from dataclasses import dataclass, field, replace
from typing import Tuple

Color = Tuple[int, int, int, int]  # RGBA, 0-255


def rgba(red: int, green: int, blue: int, alpha: int = 255) -> Color:
    return (red, green, blue, alpha)


TRANSPARENT: Color = rgba(0, 0, 0, 0)


@dataclass(frozen=True)
class Pen:
    """Stroke colour and width for lines."""

    color: Color = rgba(0, 0, 0)
    width: float = 1.0

    def mpl_color(self) -> Tuple[float, float, float, float]:
        return to_mpl_color(self.color)


def to_mpl_color(color: Color) -> Tuple[float, float, float, float]:
    """Convert a 0-255 RGBA tuple to matplotlib's 0-1 floats."""
    return tuple(channel / 255.0 for channel in color)


@dataclass(frozen=True)
class PathStyle:
    """Pens, colours and sizes used to draw a path and its entry/exit arrows."""

    path_pen: Pen = field(default_factory=lambda: Pen(rgba(132, 164, 217), 2.0))
    point_color: Color = rgba(67, 114, 196)
    point_radius: float = 2.5  # no point markers at or below EPS
    start_vector_pen: Pen = field(default_factory=lambda: Pen(rgba(198, 17, 198), 3.0))
    end_vector_pen: Pen = field(default_factory=lambda: Pen(rgba(208, 109, 42), 3.0))
    vector_length: float = 35.0
    bounding_box_pen: Pen = field(default_factory=lambda: Pen(rgba(196, 196, 196), 1.0))
    fill_color: Color = TRANSPARENT  # raster background

    def with_changes(self, **changes) -> "PathStyle":
        return replace(self, **changes)


class Styles:
    """Pre-defined path styles"""

    DEFAULT = PathStyle()

    # Polyline only, no markers, no bounding box
    MINIMAL = PathStyle(
        point_radius=0.0,
        bounding_box_pen=Pen(TRANSPARENT, 0.0),
    )

    # Dark strokes on a white background, for printing
    PRINT = PathStyle(
        path_pen=Pen(rgba(0, 0, 0), 2.0),
        point_color=rgba(0, 0, 0),
        start_vector_pen=Pen(rgba(90, 90, 90), 2.0),
        end_vector_pen=Pen(rgba(90, 90, 90), 2.0),
        bounding_box_pen=Pen(rgba(160, 160, 160), 1.0),
        fill_color=rgba(255, 255, 255),
    )
