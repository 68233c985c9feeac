from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union

import numpy as np


class Point(np.ndarray):
    """A read-only 2D point in the path's local frame (y grows downward)."""

    def __new__(cls, x: float, y: float) -> "Point":
        obj = np.asarray([float(x), float(y)]).view(cls)
        obj.flags.writeable = False
        return obj

    def __eq__(self, other: object) -> bool:
        # Plain arrays, so numpy never calls back into this method
        try:
            return bool(np.allclose(self.view(np.ndarray), np.asarray(other, dtype=float)))
        except (TypeError, ValueError):
            return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_json(self):
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_xy(xy: "PointLike") -> "Point":
        if isinstance(xy, Point):
            return xy
        return Point(xy[0], xy[1])


PointLike = Union[Tuple[float, float], Point]


class PathVector(NamedTuple):
    """One segment of a path: its length and absolute heading in radians."""

    length: float
    heading: float

    def to_json(self):
        return {"length": float(self.length), "heading": float(self.heading)}


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle covering every point of a path.

    The box starts as the degenerate rectangle at the origin and only grows,
    one point at a time, through expanded().
    """

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def contains(self, point: PointLike, tolerance: float = 0.0) -> bool:
        x, y = float(point[0]), float(point[1])
        return (
            self.left - tolerance <= x <= self.right + tolerance
            and self.top - tolerance <= y <= self.bottom + tolerance
        )

    def expanded(self, point: PointLike) -> "BoundingBox":
        """Return the smallest box covering this one and the given point."""
        x, y = float(point[0]), float(point[1])
        return BoundingBox(
            left=min(x, self.left),
            top=min(y, self.top),
            right=max(x, self.right),
            bottom=max(y, self.bottom),
        )

    def to_json(self):
        return {
            "left": float(self.left),
            "top": float(self.top),
            "right": float(self.right),
            "bottom": float(self.bottom),
        }
