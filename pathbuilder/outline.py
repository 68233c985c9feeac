"""
Constant-width stroke outline of a path.

Every path point is offset to both sides. Endpoints are offset perpendicular
to their own segment; interior points are offset along the bisector of the
outgoing and incoming headings and stretched by 1 / cos(disparity) into a
miter join.

Where two segments fold back on each other the cosine approaches zero and the
miter would grow without bound. In that case the bisector is turned by 90
degrees and the plain half width is used instead. This keeps the outline
finite but is only an approximation at sharp reversals, including very short
chords on tightly tessellated arcs.
"""

import math
from typing import List, Tuple

import numpy as np

from .constants import EPS, HALF_PI
from .geometry import lateral_points, mid_angle
from .path import Path
from .path_types import Point


def lateral_offsets(path: Path, width: float) -> List[Tuple[Point, Point]]:
    """Left and right offset point for every point of a valid path."""
    half_width = width / 2.0
    points, vectors = path.points, path.vectors
    last = len(points) - 1

    offsets = [lateral_points(points[0], half_width, vectors[0].heading)]
    for i in range(1, last):
        disparity, bisector = mid_angle(vectors[i].heading, vectors[i - 1].heading)
        cos_disparity = math.cos(disparity)
        if cos_disparity > EPS:
            offset = half_width / cos_disparity
        else:
            bisector += HALF_PI
            offset = half_width
        offsets.append(lateral_points(points[i], offset, bisector))
    offsets.append(lateral_points(points[last], half_width, vectors[last - 1].heading))
    return offsets


def stroke_outline(path: Path, width: float) -> np.ndarray:
    """
    Closed polygon approximating the path drawn with the given width.

    Args:
        path: The path to outline
        width: Full stroke width

    Returns:
        (2N, 2) array of polygon vertices: the left offsets in travel order
        followed by the right offsets in reverse order. Empty (0, 2) array
        when the path has fewer than two points.
    """
    if not path.is_valid:
        return np.empty((0, 2))

    offsets = lateral_offsets(path, width)
    forward = [left for left, _ in offsets]
    backward = [right for _, right in reversed(offsets)]
    return np.array(forward + backward, dtype=float)
