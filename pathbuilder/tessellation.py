"""
Circular arc tessellation.

There is one arc primitive, driven by an explicit chord count; the
minimum-arc-length policy only derives that count.
"""

import math
from typing import List, Tuple

from .constants import HALF_PI
from .errors import PathContractError
from .geometry import chord_length, heading, point_from_vector, sign
from .path_types import PathVector, Point, PointLike


def segment_count(radius: float, angle: float, min_arc_length: float) -> int:
    """Number of equal chords so that none spans more than min_arc_length of arc."""
    return int(math.ceil(abs(angle) * radius / min_arc_length))


def arc_center(start: PointLike, orientation: float, radius: float, angle: float) -> Point:
    """Centre of an arc leaving start along orientation, on the side of the turn."""
    return point_from_vector(start, radius, orientation + sign(angle) * HALF_PI)


def tessellate_arc(
    start: PointLike, orientation: float, radius: float, angle: float, segments: int
) -> List[Tuple[Point, PathVector]]:
    """
    Split an arc into equal-angle chords.

    Every chord has the same length; its heading is taken from the two arc
    points it joins rather than accumulated turn by turn, so rounding does not
    compound along long arcs.

    Args:
        start: Point where the arc begins
        orientation: Heading at start, in radians
        radius: Arc radius
        angle: Signed sweep, positive turns clockwise
        segments: Number of chords, at least 2

    Returns:
        One (end point, vector) pair per chord, in travel order
    """
    if segments < 2:
        raise PathContractError(f"arc tessellation needs at least 2 chords, got {segments}")

    center = arc_center(start, orientation, radius, angle)
    step = angle / segments
    chord = chord_length(radius, step)

    chords = []
    previous = Point.from_xy(start)
    current_angle = heading(center, previous)
    for _ in range(segments):
        current_angle += step
        point = point_from_vector(center, radius, current_angle)
        chords.append((point, PathVector(chord, heading(previous, point))))
        previous = point
    return chords
