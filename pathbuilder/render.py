"""
Render module - Draws a finished path onto a drawing surface or into a raster.

The path engine does not own a canvas: callers hand in a DrawingSurface, or
ask for a Pillow image sized from the path's bounding box. Nothing here keeps
a reference to the surface or the image once the call returns.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Tuple

from .constants import DEFAULT_PIXMAP_MARGIN, EPS
from .geometry import arrow_lines, point_from_vector
from .path import Path
from .path_types import BoundingBox, PointLike
from .style import Color, Pen, PathStyle, to_mpl_color

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from PIL.Image import Image

logger = logging.getLogger(__name__)


class DrawingSurface(ABC):
    """
    Minimal drawing backend the path renderer talks to.

    Coordinates are in the path's local frame; a surface maps them to its own
    device space.
    """

    @abstractmethod
    def draw_line(self, start: PointLike, end: PointLike, pen: Pen) -> None: ...

    @abstractmethod
    def draw_circle(self, center: PointLike, radius: float, color: Color) -> None:
        """Draw a filled disc without outline."""
        ...

    @abstractmethod
    def draw_rect(self, box: BoundingBox, pen: Pen) -> None:
        """Draw the outline of an axis-aligned rectangle."""
        ...


def _is_visible(pen: Pen) -> bool:
    return pen.width > 0.0 and pen.color[3] > 0


class MatplotlibSurface(DrawingSurface):
    """Draws on a matplotlib Axes. Invert the y axis to view the path in screen orientation."""

    def __init__(self, ax: "Axes"):
        self.ax = ax

    def draw_line(self, start: PointLike, end: PointLike, pen: Pen) -> None:
        if not _is_visible(pen):
            return
        self.ax.plot(
            [float(start[0]), float(end[0])],
            [float(start[1]), float(end[1])],
            color=pen.mpl_color(),
            linewidth=pen.width,
            solid_capstyle="round",
        )

    def draw_circle(self, center: PointLike, radius: float, color: Color) -> None:
        from matplotlib.patches import Circle as MplCircle

        self.ax.add_patch(
            MplCircle(
                (float(center[0]), float(center[1])),
                radius,
                facecolor=to_mpl_color(color),
                edgecolor="none",
            )
        )

    def draw_rect(self, box: BoundingBox, pen: Pen) -> None:
        if not _is_visible(pen):
            return
        from matplotlib.patches import Rectangle

        self.ax.add_patch(
            Rectangle(
                (box.left, box.top),
                box.width,
                box.height,
                fill=False,
                edgecolor=pen.mpl_color(),
                linewidth=pen.width,
            )
        )


class PillowSurface(DrawingSurface):
    """Draws into a Pillow image, translating path coordinates by offset."""

    def __init__(self, image: "Image", offset: Tuple[float, float] = (0.0, 0.0)):
        from PIL import ImageDraw

        self._draw = ImageDraw.Draw(image, "RGBA")
        self.offset = (float(offset[0]), float(offset[1]))

    def _map(self, point: PointLike) -> Tuple[float, float]:
        return (float(point[0]) + self.offset[0], float(point[1]) + self.offset[1])

    @staticmethod
    def _line_width(pen: Pen) -> int:
        return max(1, int(round(pen.width)))

    def draw_line(self, start: PointLike, end: PointLike, pen: Pen) -> None:
        if not _is_visible(pen):
            return
        self._draw.line(
            [self._map(start), self._map(end)], fill=pen.color, width=self._line_width(pen)
        )

    def draw_circle(self, center: PointLike, radius: float, color: Color) -> None:
        x, y = self._map(center)
        self._draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=color)

    def draw_rect(self, box: BoundingBox, pen: Pen) -> None:
        if not _is_visible(pen):
            return
        left, top = self._map(box.top_left)
        right, bottom = self._map(box.bottom_right)
        self._draw.rectangle(
            [left, top, right, bottom], outline=pen.color, width=self._line_width(pen)
        )


def draw_arrow(
    surface: DrawingSurface, pen: Pen, length: float, origin: PointLike, angle: float
) -> None:
    for start, end in arrow_lines(origin, length, angle):
        surface.draw_line(start, end, pen)


def draw_path(path: Path, surface: DrawingSurface, style: Optional[PathStyle] = None) -> None:
    """
    Draw the bounding box, the polyline, the point markers and the entry/exit arrows.

    Does nothing when the path has fewer than two points.
    """
    if not path.is_valid:
        return
    style = style or PathStyle()

    surface.draw_rect(path.bounding_box, style.bounding_box_pen)

    points = path.points
    for start, end in zip(points[:-1], points[1:]):
        surface.draw_line(start, end, style.path_pen)

    if style.point_radius > EPS:
        for point in points:
            surface.draw_circle(point, style.point_radius, style.point_color)

    draw_arrow(
        surface, style.start_vector_pen, style.vector_length, points[0], path.entry_orientation
    )
    draw_arrow(
        surface, style.end_vector_pen, style.vector_length, points[-1], path.exit_orientation
    )


def draw_path_from_vectors(
    path: Path, surface: DrawingSurface, style: Optional[PathStyle] = None
) -> None:
    """
    Same picture as draw_path, rebuilt by walking the segment vectors from the entry point.

    Useful to check that the vectors alone reproduce the stored points.
    """
    if not path.is_valid:
        return
    style = style or PathStyle()

    surface.draw_rect(path.bounding_box, style.bounding_box_pen)

    current = path.points[0]
    walked = [current]
    for vector in path.vectors:
        following = point_from_vector(current, vector.length, vector.heading)
        surface.draw_line(current, following, style.path_pen)
        walked.append(following)
        current = following

    if style.point_radius > EPS:
        for point in walked:
            surface.draw_circle(point, style.point_radius, style.point_color)

    draw_arrow(
        surface, style.start_vector_pen, style.vector_length, walked[0], path.entry_orientation
    )
    draw_arrow(
        surface, style.end_vector_pen, style.vector_length, walked[-1], path.exit_orientation
    )


def to_pixmap(
    path: Path, margin: int = DEFAULT_PIXMAP_MARGIN, style: Optional[PathStyle] = None
) -> Optional["Image"]:
    """
    Render the path into a new RGBA Pillow image.

    The image is the bounding box grown by margin pixels on every side and
    filled with style.fill_color.

    Returns:
        The image, or None when the path has fewer than two points
    """
    if not path.is_valid:
        return None
    from PIL import Image

    style = style or PathStyle()
    box = path.bounding_box
    size = (int(round(box.width)) + 2 * margin, int(round(box.height)) + 2 * margin)

    image = Image.new("RGBA", size, style.fill_color)
    surface = PillowSurface(image, offset=(margin - box.left, margin - box.top))
    draw_path(path, surface, style)

    logger.debug("rendered path of %d points to %dx%d pixmap", path.count, *size)
    return image


def to_png(
    path: Path,
    file_name: Optional[str] = None,
    style: Optional[PathStyle] = None,
    width: int = 800,
    height: int = 600,
    margin: float = 0.1,
) -> None:
    """
    Plot the path with matplotlib, y axis pointing down.

    Args:
        path: Path to plot; nothing happens when it has fewer than two points
        file_name: Path to save the PNG file. If None, displays in a UI window instead.
        style: Drawing style (default: PathStyle())
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 600)
        margin: Margin around the path as a fraction of its size (default: 0.1)

    Raises:
        ImportError: If matplotlib is not installed
    """
    if not path.is_valid:
        return
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for path plotting. Install with: pip install matplotlib"
        )

    style = style or PathStyle()
    fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
    ax.set_aspect("equal")

    draw_path(path, MatplotlibSurface(ax), style)

    # Leave room for the entry/exit arrows around the bounding box
    box = path.bounding_box
    reach = style.vector_length
    margin_x = max(box.width, 1) * margin + reach
    margin_y = max(box.height, 1) * margin + reach
    ax.set_xlim(box.left - margin_x, box.right + margin_x)
    ax.set_ylim(box.bottom + margin_y, box.top - margin_y)

    ax.grid(True, alpha=0.3)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Path ({path.count} points, length {path.length:.2f})")

    plt.tight_layout()
    if file_name:
        plt.savefig(file_name, dpi=100, bbox_inches="tight", facecolor="white")
        plt.close(fig)
        logger.info("saved path plot to %s", file_name)
    else:
        plt.show()
