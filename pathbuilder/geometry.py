"""
Plane geometry helpers shared by the builder, the outline and the renderers.

Angles are radians, measured clockwise from +x in a frame whose y axis grows
downward (screen convention).
"""

import math
from typing import List, Tuple

from .constants import ARROW_HEAD_BACK, ARROW_HEAD_SPREAD, HALF_PI
from .path_types import Point, PointLike


def sign(value: float) -> float:
    if value < 0.0:
        return -1.0
    if value > 0.0:
        return 1.0
    return 0.0


def point_from_vector(start: PointLike, length: float, angle: float) -> Point:
    """Point reached from start after travelling length along angle."""
    return Point(
        float(start[0]) + length * math.cos(angle),
        float(start[1]) + length * math.sin(angle),
    )


def distance(p1: PointLike, p2: PointLike) -> float:
    return math.hypot(float(p2[0]) - float(p1[0]), float(p2[1]) - float(p1[1]))


def heading(p1: PointLike, p2: PointLike) -> float:
    """Absolute angle of the direction p1 -> p2."""
    return math.atan2(float(p2[1]) - float(p1[1]), float(p2[0]) - float(p1[0]))


def chord_length(radius: float, angle: float) -> float:
    """Length of the chord subtending angle on a circle of the given radius."""
    return 2.0 * radius * math.sin(abs(angle) / 2.0)


def lateral_points(center: PointLike, length: float, angle: float) -> Tuple[Point, Point]:
    """The two points at distance length on either side of a heading."""
    return (
        point_from_vector(center, length, angle - HALF_PI),
        point_from_vector(center, length, angle + HALF_PI),
    )


def _dot_terms(angle1: float, angle2: float) -> Tuple[float, float]:
    cos1, sin1 = math.cos(angle1), math.sin(angle1)
    cos2, sin2 = math.cos(angle2), math.sin(angle2)

    dot = cos1 * cos2 + sin1 * sin2  # negative when v2 points backward to v1
    dot_prime = -sin1 * cos2 + cos1 * sin2  # v1 rotated 90 clockwise, dotted with v2
    return dot, dot_prime


def mid_angle(angle1: float, angle2: float) -> Tuple[float, float]:
    """
    Bisector of two headings.

    Returns:
        (disparity, bisector): half the angle between the headings, and the
        heading obtained by turning angle1 toward angle2 by that half angle.
    """
    dot, dot_prime = _dot_terms(angle1, angle2)
    disparity = math.acos(max(-1.0, min(dot, 1.0))) / 2.0
    return disparity, angle1 + sign(dot_prime) * disparity


def arrow_lines(origin: PointLike, length: float, angle: float) -> List[Tuple[Point, Point]]:
    """Line segments of a simple arrow glyph: a shaft and a two-stroke head."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    ox, oy = float(origin[0]), float(origin[1])

    def local(u: float, v: float) -> Point:
        return Point(ox + u * cos_a - v * sin_a, oy + u * sin_a + v * cos_a)

    tip = local(length, 0.0)
    return [
        (local(0.0, 0.0), tip),
        (tip, local(length * ARROW_HEAD_BACK, length * ARROW_HEAD_SPREAD)),
        (tip, local(length * ARROW_HEAD_BACK, -length * ARROW_HEAD_SPREAD)),
    ]
